"""Tests for settings: file lookup, malformed files, environment overrides."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from deskstash import config
from deskstash.errors import InvalidConfigKeyError


class TestSettingsFile(unittest.TestCase):
    def setUp(self) -> None:
        d = tempfile.mkdtemp(prefix="deskstash_config_")
        self.path = Path(d) / "config"

    def test_missing_file_reads_empty(self) -> None:
        self.assertIsNone(config.get_value("git.executable", self.path))

    def test_get_value(self) -> None:
        self.path.write_text("[git]\nexecutable = /usr/bin/git\n\n[log]\nlevel = info\n")
        self.assertEqual(config.get_value("git.executable", self.path), "/usr/bin/git")
        self.assertEqual(config.get_value("log.level", self.path), "info")
        self.assertIsNone(config.get_value("log.file", self.path))

    def test_invalid_key(self) -> None:
        for key in ("nodot", "a.b.c", ".x", "x."):
            with self.assertRaises(InvalidConfigKeyError):
                config.get_value(key, self.path)

    def test_malformed_file_reads_empty(self) -> None:
        self.path.write_text("not = an ini [file\n")
        self.assertIsNone(config.get_value("git.executable", self.path))


class TestSettingsEnvironment(unittest.TestCase):
    def setUp(self) -> None:
        d = tempfile.mkdtemp(prefix="deskstash_config_env_")
        self.path = Path(d) / "config"
        self.path.write_text("[git]\nexecutable = /opt/git\n")
        patcher = mock.patch.dict(os.environ, {config.CONFIG_ENV: str(self.path)})
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(config.GIT_ENV, None)
        os.environ.pop(config.LOG_LEVEL_ENV, None)

    def test_config_path_from_env(self) -> None:
        self.assertEqual(config.config_path(), self.path)

    def test_git_executable_from_file(self) -> None:
        self.assertEqual(config.git_executable(), "/opt/git")

    def test_git_executable_env_wins(self) -> None:
        os.environ[config.GIT_ENV] = "/custom/git"
        self.assertEqual(config.git_executable(), "/custom/git")

    def test_log_level_default_and_env(self) -> None:
        self.assertEqual(config.log_level(), "WARNING")
        os.environ[config.LOG_LEVEL_ENV] = "debug"
        self.assertEqual(config.log_level(), "DEBUG")
