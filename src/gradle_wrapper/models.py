"""Data models for Gradle wrapper inspection and Java constraint resolution."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ConstraintSource(Enum):
    """Which signal produced a Java constraint."""
    DAEMON_JVM = "daemon-jvm"
    TOOLCHAIN = "toolchain"
    COMPATIBILITY_TABLE = "compatibility-table"


@dataclass(frozen=True)
class GradleDistribution:
    """Distribution configured in gradle-wrapper.properties."""
    url: str
    version: str


@dataclass
class ProjectJavaReport:
    """Inspection outcome for a single Gradle wrapper project."""
    gradlew_file: str
    gradle_version: Optional[str]
    distribution_url: Optional[str]
    java_constraint: str
    constraint_source: ConstraintSource
    gradle_command: Optional[str]
    selected_java_version: Optional[str] = None
    available_java: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serializable view used by the JSON output."""
        return {
            "gradlewFile": self.gradlew_file,
            "gradleVersion": self.gradle_version,
            "distributionUrl": self.distribution_url,
            "javaConstraint": self.java_constraint,
            "constraintSource": self.constraint_source.value,
            "gradleCommand": self.gradle_command,
            "selectedJavaVersion": self.selected_java_version,
        }
