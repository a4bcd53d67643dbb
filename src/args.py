"""Argument parsing functionality for gradlejava."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="gradlejava",
        description=(
            "gradlejava - Java runtime constraint resolver for Gradle wrapper projects"
        ),
        add_help=True,
    )

    parser.add_argument("-d", "--directory",
                        dest="LOCAL_DIR",
                        help="Project directory that wrapper paths are relative to (default: current directory)",
                        action="store",
                        type=str)
    parser.add_argument("-w", "--wrapper",
                        dest="WRAPPER",
                        help="Path of the Gradle wrapper script (default: gradlew, or gradlew.bat on Windows)",
                        action="store",
                        type=str)
    parser.add_argument("-g", "--gradle-version",
                        dest="GRADLE_VERSION",
                        help="Gradle version to use instead of reading gradle-wrapper.properties",
                        action="store",
                        type=str)
    parser.add_argument("-a", "--available",
                        dest="AVAILABLE_JAVA",
                        help="Available Java version to choose from (can be used multiple times)",
                        action="append",
                        type=str,
                        default=[])
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (text or json, default: text)",
                        action="store",
                        type=str.lower,
                        default="text",
                        choices=Constants.SUPPORTED_OUTPUT_FORMATS)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to YAML configuration file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
