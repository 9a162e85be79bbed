import termios
import unittest
from unittest.mock import patch

from terminal import RawMode, TerminalIOError


def _attrs(lflag: int) -> list[object]:
    return [0, 0, 0, lflag, 0, 0, [0] * 32]


class RawModeTests(unittest.TestCase):
    def test_enable_is_skipped_when_input_is_not_a_tty(self) -> None:
        mode = RawMode(fd=99)
        with patch("terminal.raw_mode.os.isatty", return_value=False), patch(
            "terminal.raw_mode.termios.tcgetattr"
        ) as tcgetattr:
            mode.enable()
            mode.disable()

        self.assertFalse(mode.enabled)
        tcgetattr.assert_not_called()

    def test_enable_disables_echo_canonical_and_signals_then_disable_restores(self) -> None:
        saved = _attrs(0xFFFF)
        cbreak = _attrs(0xFFFF)
        mode = RawMode(fd=7)

        with patch("terminal.raw_mode.os.isatty", return_value=True), patch(
            "terminal.raw_mode.termios.tcgetattr", side_effect=[saved, cbreak]
        ), patch("terminal.raw_mode.tty.setcbreak") as setcbreak, patch(
            "terminal.raw_mode.termios.tcsetattr"
        ) as tcsetattr:
            mode.enable()
            self.assertTrue(mode.enabled)
            mode.disable()

        setcbreak.assert_called_once_with(7, termios.TCSANOW)
        applied = tcsetattr.call_args_list[0].args[2]
        for flag in (termios.ISIG, termios.ECHO, termios.ICANON):
            self.assertEqual(0, applied[3] & flag)
        self.assertEqual((7, termios.TCSADRAIN, saved), tcsetattr.call_args_list[1].args)
        self.assertFalse(mode.enabled)

    def test_enable_twice_saves_original_attributes_once(self) -> None:
        mode = RawMode(fd=7)
        with patch("terminal.raw_mode.os.isatty", return_value=True), patch(
            "terminal.raw_mode.termios.tcgetattr",
            side_effect=[_attrs(0xFF), _attrs(0xFF)],
        ) as tcgetattr, patch("terminal.raw_mode.tty.setcbreak"), patch(
            "terminal.raw_mode.termios.tcsetattr"
        ):
            mode.enable()
            mode.enable()

        self.assertEqual(2, tcgetattr.call_count)

    def test_enable_failure_raises_terminal_io_error(self) -> None:
        mode = RawMode(fd=7)
        with patch("terminal.raw_mode.os.isatty", return_value=True), patch(
            "terminal.raw_mode.termios.tcgetattr",
            side_effect=termios.error(25, "Inappropriate ioctl for device"),
        ):
            with self.assertRaises(TerminalIOError):
                mode.enable()

        self.assertFalse(mode.enabled)

    def test_disable_failure_raises_terminal_io_error(self) -> None:
        mode = RawMode(fd=7)
        with patch("terminal.raw_mode.os.isatty", return_value=True), patch(
            "terminal.raw_mode.termios.tcgetattr",
            side_effect=[_attrs(0xFF), _attrs(0xFF)],
        ), patch("terminal.raw_mode.tty.setcbreak"), patch(
            "terminal.raw_mode.termios.tcsetattr",
            side_effect=[None, OSError("device gone")],
        ):
            mode.enable()
            with self.assertRaises(TerminalIOError):
                mode.disable()


if __name__ == "__main__":
    unittest.main()
