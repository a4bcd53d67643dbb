"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    NO_MATCH = 3


class OutputFormats(Enum):
    """Output formats supported by the CLI.

    Args:
        Enum (string): Output formats supported by the CLI.
    """

    TEXT = "text"
    JSON = "json"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    GRADLE_WRAPPER_UNIX = "./gradlew"
    GRADLE_WRAPPER_WINDOWS = "gradlew.bat"
    WRAPPER_PROPERTIES_FILE = "gradle/wrapper/gradle-wrapper.properties"
    DAEMON_JVM_PROPERTIES_DIR = "gradle"
    DAEMON_JVM_PROPERTIES_FILE = "gradle-daemon-jvm.properties"
    BUILD_GRADLE_FILE = "build.gradle"
    BUILD_GRADLE_KTS_FILE = "build.gradle.kts"
    DEFAULT_JAVA_MAJOR = 11
    FILE_ENCODING = "utf8"
    SUPPORTED_OUTPUT_FORMATS = [
        OutputFormats.TEXT.value,
        OutputFormats.JSON.value,
    ]
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

    # Environment overrides
    ENV_LOCAL_DIR = "GRADLEJAVA_LOCAL_DIR"
    ENV_LOG_LEVEL = "GRADLEJAVA_LOG_LEVEL"
