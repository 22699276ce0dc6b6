"""Environment lookups and the data folder."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import paths
from env_config import get_env, get_env_bool


class EnvConfigTests(unittest.TestCase):
    def test_blank_values_fall_back(self) -> None:
        with mock.patch.dict(os.environ, {"HANDOVER_TEST_KEY": "   "}):
            self.assertEqual(get_env("HANDOVER_TEST_KEY", "fallback"), "fallback")

    def test_values_are_stripped(self) -> None:
        with mock.patch.dict(os.environ, {"HANDOVER_TEST_KEY": " Ward 7 \n"}):
            self.assertEqual(get_env("HANDOVER_TEST_KEY"), "Ward 7")

    def test_bool_words(self) -> None:
        for raw, expected in (("1", True), ("Yes", True), ("on", True), ("0", False), ("nope", False)):
            with mock.patch.dict(os.environ, {"HANDOVER_TEST_FLAG": raw}):
                self.assertIs(get_env_bool("HANDOVER_TEST_FLAG"), expected, raw)

    def test_bool_default_when_unset(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("HANDOVER_TEST_FLAG", None)
            self.assertTrue(get_env_bool("HANDOVER_TEST_FLAG", True))


class DataDirTests(unittest.TestCase):
    def test_env_override_creates_subfolders(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.dict(os.environ, {"HANDOVER_DATA_DIR": tmp}):
                base = paths.get_data_dir()
                self.assertEqual(base, Path(tmp))
                self.assertTrue(paths.logs_dir().is_dir())
                self.assertTrue(paths.print_dir().is_dir())

    def test_malformed_settings_file_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = Path(tmp) / "settings_local.json"
            settings.write_text("{not json", encoding="utf-8")
            with self.assertLogs("paths", level="WARNING"):
                self.assertIsNone(paths._settings_data_dir(settings))

    def test_settings_file_names_folder(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = Path(tmp) / "settings_local.json"
            settings.write_text('{"DATA_DIR": "/srv/handover"}', encoding="utf-8")
            self.assertEqual(paths._settings_data_dir(settings), "/srv/handover")


if __name__ == "__main__":
    unittest.main()
