"""gradlejava - Java runtime constraint resolver for Gradle wrapper projects.

Inspects a locally checked-out Gradle wrapper project and prints the Java
version constraint its build tooling needs.

    Returns:
        int: Exit code
"""
import asyncio
import json
import logging
import sys

from constants import ExitCodes, Constants, OutputFormats
from common.local_fs import set_local_dir
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import ConfigError, apply_config, load_config
from gradle_wrapper.project import inspect_project

logger = logging.getLogger(__name__)


def _setup_logging(args) -> None:
    """Configure console logging and the optional log file."""
    configure_logging(getattr(args, "LOG_LEVEL", None))

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def render(report, output_format: str) -> str:
    """Render a ProjectJavaReport for stdout."""
    if output_format == OutputFormats.JSON.value:
        return json.dumps(report.to_dict(), indent=2)
    lines = [report.java_constraint]
    if report.selected_java_version:
        lines.append(report.selected_java_version)
    return "\n".join(lines)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    try:
        config = load_config(getattr(args, "CONFIG", None))
    except ConfigError as e:
        configure_logging(getattr(args, "LOG_LEVEL", None))
        logger.error("%s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    apply_config(args, config)
    try:
        _setup_logging(args)
    except OSError as e:
        logger.error("Failed to open log file: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    if args.LOCAL_DIR:
        set_local_dir(args.LOCAL_DIR)

    try:
        report = asyncio.run(
            inspect_project(
                args.WRAPPER,
                gradle_version=args.GRADLE_VERSION,
                available_java=args.AVAILABLE_JAVA,
            )
        )
    except (OSError, ValueError) as e:
        logger.error("Failed to inspect Gradle project: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    logger.info(
        "Java constraint %s (from %s)",
        report.java_constraint,
        report.constraint_source.value,
    )
    print(render(report, args.OUTPUT_FORMAT))

    if report.available_java and report.selected_java_version is None:
        sys.exit(ExitCodes.NO_MATCH.value)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
