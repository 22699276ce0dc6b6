"""Desktop shell pieces that run without a display."""

from __future__ import annotations

import importlib
import unittest
from unittest import mock

try:
    importlib.import_module("tkinter")
    HAS_TK = True
except ImportError:  # python built without _tkinter
    HAS_TK = False


@unittest.skipUnless(HAS_TK, "tkinter not available")
class WheelStepTests(unittest.TestCase):
    def setUp(self) -> None:
        from scrollframe import wheel_steps

        self.wheel_steps = wheel_steps

    def test_linux_buttons(self) -> None:
        self.assertEqual(self.wheel_steps(4, 0, "Linux"), -1)
        self.assertEqual(self.wheel_steps(5, 0, "Linux"), 1)

    def test_windows_notches(self) -> None:
        self.assertEqual(self.wheel_steps(None, 120, "Windows"), -1)
        self.assertEqual(self.wheel_steps(None, -240, "Windows"), 2)

    def test_macos_small_deltas(self) -> None:
        self.assertEqual(self.wheel_steps(None, 3, "Darwin"), -1)
        self.assertEqual(self.wheel_steps(None, -1, "Darwin"), 1)

    def test_no_movement(self) -> None:
        self.assertEqual(self.wheel_steps(None, 0, "Windows"), 0)


@unittest.skipUnless(HAS_TK, "tkinter not available")
class MainStartupTests(unittest.TestCase):
    def test_locale_is_applied_before_the_window_exists(self) -> None:
        import handover_app

        calls = []
        with mock.patch.object(handover_app, "get_logger"), mock.patch.object(
            handover_app, "log_path", return_value="handover.log"
        ), mock.patch.object(
            handover_app, "use_system_locale", side_effect=lambda: calls.append("locale")
        ), mock.patch.object(
            handover_app, "App", side_effect=lambda: calls.append("app") or mock.MagicMock()
        ):
            handover_app.main()

        self.assertEqual(calls, ["locale", "app"])


if __name__ == "__main__":
    unittest.main()
