"""Tests for the local filesystem helpers."""

import asyncio
import os

import pytest

from common.local_fs import (
    LocalPathError,
    ensure_local_path,
    get_local_dir,
    local_path_exists,
    read_local_file,
    set_local_dir,
    stat_local_file,
)
from constants import Constants


class TestLocalDir:
    """Local directory selection."""

    def test_defaults_to_cwd(self):
        assert get_local_dir() == os.getcwd()

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv(Constants.ENV_LOCAL_DIR, str(tmp_path))
        assert get_local_dir() == str(tmp_path)

    def test_explicit_dir_wins_over_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv(Constants.ENV_LOCAL_DIR, "/somewhere/else")
        set_local_dir(str(tmp_path))
        assert get_local_dir() == str(tmp_path)

    def test_rejects_escaping_paths(self, tmp_path):
        set_local_dir(str(tmp_path))
        with pytest.raises(LocalPathError):
            ensure_local_path("../outside.txt")

    def test_accepts_nested_paths(self, tmp_path):
        set_local_dir(str(tmp_path))
        assert ensure_local_path("a/../b/c") == os.path.join(str(tmp_path), "b", "c")


class TestReadLocalFile:
    """read_local_file()."""

    def test_reads_text(self, tmp_path):
        (tmp_path / "build.gradle").write_text("plugins {}\n", encoding="utf-8")
        set_local_dir(str(tmp_path))
        assert asyncio.run(read_local_file("build.gradle")) == "plugins {}\n"

    def test_missing_file_is_none(self, tmp_path):
        set_local_dir(str(tmp_path))
        assert asyncio.run(read_local_file("missing.properties")) is None

    def test_invalid_utf8_is_decoded_with_replacement(self, tmp_path):
        (tmp_path / "build.gradle").write_bytes(b"// Autor: M\xfcller\nplugins {}\n")
        set_local_dir(str(tmp_path))
        content = asyncio.run(read_local_file("build.gradle"))
        assert content == "// Autor: M\ufffdller\nplugins {}\n"

    def test_directory_is_none(self, tmp_path):
        (tmp_path / "gradle").mkdir()
        set_local_dir(str(tmp_path))
        assert asyncio.run(read_local_file("gradle")) is None


class TestExistsAndStat:
    """local_path_exists() and stat_local_file()."""

    def test_exists(self, tmp_path):
        (tmp_path / "build.gradle").write_text("", encoding="utf-8")
        set_local_dir(str(tmp_path))
        assert asyncio.run(local_path_exists("build.gradle")) is True
        assert asyncio.run(local_path_exists("build.gradle.kts")) is False

    def test_stat(self, tmp_path):
        (tmp_path / "gradlew").write_text("#!/bin/sh\n", encoding="utf-8")
        set_local_dir(str(tmp_path))
        result = asyncio.run(stat_local_file("gradlew"))
        assert result is not None
        assert result.st_size == len("#!/bin/sh\n")
        assert asyncio.run(stat_local_file("nope")) is None
