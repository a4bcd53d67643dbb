"""Java runtime constraint resolution for Gradle wrapper projects."""

from .command import default_gradlew_file, gradle_wrapper_file_name, prepare_gradle_command
from .compat import java_major_for_gradle
from .extract import extract_gradle_version
from .models import ConstraintSource, GradleDistribution, ProjectJavaReport
from .utils import get_java_constraint, get_java_language_version, get_jvm_configuration

__all__ = [
    "ConstraintSource",
    "default_gradlew_file",
    "GradleDistribution",
    "ProjectJavaReport",
    "extract_gradle_version",
    "get_java_constraint",
    "get_java_language_version",
    "get_jvm_configuration",
    "gradle_wrapper_file_name",
    "java_major_for_gradle",
    "prepare_gradle_command",
]
