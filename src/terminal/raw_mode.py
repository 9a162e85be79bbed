"""Switch the controlling terminal into unbuffered, no-echo key input."""

from __future__ import annotations

import logging
import os
import sys
import termios
import tty
from typing import Any, Optional

from .errors import TerminalIOError

# termios attribute list index for local modes
_LFLAG = 3


class RawMode:
    """Deliver keystrokes immediately, unprocessed and without echo.

    Output post-processing stays on so rendered lines still start at column
    zero. Signal generation is switched off, so ``Ctrl+C`` is read as a key
    instead of raising ``KeyboardInterrupt``.
    """

    def __init__(
        self,
        fd: Optional[int] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._logger = logger or logging.getLogger("terminal")
        self._saved: Optional[list[Any]] = None

    @property
    def enabled(self) -> bool:
        return self._saved is not None

    def enable(self) -> None:
        if self._saved is not None:
            return
        if not os.isatty(self._fd):
            self._logger.debug("Input is not a TTY; raw mode skipped")
            return

        try:
            saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd, termios.TCSANOW)
            attrs = termios.tcgetattr(self._fd)
            attrs[_LFLAG] &= ~(termios.ISIG | termios.ECHO | termios.ICANON)
            termios.tcsetattr(self._fd, termios.TCSADRAIN, attrs)
        except (termios.error, OSError) as error:
            raise TerminalIOError(f"Could not enable raw mode: {error}") from error

        self._saved = saved
        self._logger.debug("Raw mode enabled on fd %s", self._fd)

    def disable(self) -> None:
        saved = self._saved
        if saved is None:
            return

        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, saved)
        except (termios.error, OSError) as error:
            raise TerminalIOError(f"Could not disable raw mode: {error}") from error

        self._saved = None
        self._logger.debug("Raw mode disabled on fd %s", self._fd)
