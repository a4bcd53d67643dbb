"""Tests for whole-project inspection."""

import asyncio
from unittest.mock import patch

from gradle_wrapper import command
from gradle_wrapper.models import ConstraintSource
from gradle_wrapper.project import inspect_project

WRAPPER_PROPERTIES = """\
    distributionBase=GRADLE_USER_HOME
    distributionPath=wrapper/dists
    distributionUrl=https\\://services.gradle.org/distributions/gradle-8.5-bin.zip
    zipStoreBase=GRADLE_USER_HOME
    zipStorePath=wrapper/dists
"""


class TestInspectProject:
    """inspect_project() against real project layouts."""

    def test_reads_gradle_version_from_wrapper_properties(self, gradle_project):
        gradle_project({
            "gradlew": "#!/bin/sh\n",
            "gradle/wrapper/gradle-wrapper.properties": WRAPPER_PROPERTIES,
        })
        report = asyncio.run(inspect_project("gradlew"))
        assert report.gradle_version == "8.5"
        assert report.distribution_url == (
            "https\\://services.gradle.org/distributions/gradle-8.5-bin.zip"
        )
        assert report.java_constraint == "^21.0.0"
        assert report.constraint_source is ConstraintSource.COMPATIBILITY_TABLE
        assert report.gradle_command == "gradlew"
        assert report.selected_java_version is None

    def test_explicit_gradle_version_skips_properties(self, gradle_project):
        gradle_project({"gradlew": "#!/bin/sh\n"})
        report = asyncio.run(inspect_project("gradlew", gradle_version="6.9"))
        assert report.gradle_version == "6.9"
        assert report.distribution_url is None
        assert report.java_constraint == "^11.0.0"

    def test_missing_properties_uses_default(self, gradle_project):
        gradle_project({"gradlew": "#!/bin/sh\n"}, executable=False)
        report = asyncio.run(inspect_project("gradlew"))
        assert report.gradle_version is None
        assert report.java_constraint == "^11.0.0"
        assert report.gradle_command is None

    def test_toolchain_and_selection(self, gradle_project):
        gradle_project({
            "app/gradlew": "#!/bin/sh\n",
            "app/gradle/wrapper/gradle-wrapper.properties": WRAPPER_PROPERTIES,
            "app/build.gradle": "java { toolchain { languageVersion = JavaLanguageVersion.of(17) } }\n",
        })
        report = asyncio.run(
            inspect_project("app/gradlew", available_java=["11.0.21", "17.0.9", "21.0.1"])
        )
        assert report.constraint_source is ConstraintSource.TOOLCHAIN
        assert report.java_constraint == "^17.0.0"
        assert report.selected_java_version == "17.0.9"
        assert report.to_dict()["constraintSource"] == "toolchain"

    def test_default_wrapper_follows_host_os(self, gradle_project):
        root = gradle_project({"gradle/wrapper/gradle-wrapper.properties": WRAPPER_PROPERTIES})
        (root / "gradlew.bat").write_text("@echo off\n", encoding="utf-8")
        (root / "gradlew.bat").chmod(0o755)
        with patch.object(command, "_host_platform", return_value="win32"):
            report = asyncio.run(inspect_project())
        assert report.gradlew_file == "gradlew.bat"
        assert report.gradle_command == "gradlew.bat"
        assert report.java_constraint == "^21.0.0"
