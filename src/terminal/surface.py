"""Render surface contract and its rich console implementation."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from rich.console import Console, RenderableType
from rich.control import Control
from rich.screen import Screen

from .errors import TerminalIOError


class RenderSurface(Protocol):
    def size(self) -> tuple[int, int]:
        ...

    def draw(self, renderable: RenderableType) -> None:
        ...

    def clear(self) -> None:
        ...

    def show_cursor(self, visible: bool) -> None:
        ...


class ConsoleSurface:
    """Draws full-viewport frames on a rich console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._console = console or Console()
        self._logger = logger or logging.getLogger("terminal")

    @property
    def console(self) -> Console:
        return self._console

    def size(self) -> tuple[int, int]:
        width, height = self._console.size
        return width, height

    def draw(self, renderable: RenderableType) -> None:
        try:
            self._console.control(Control.home())
            self._console.print(Screen(renderable), end="")
        except OSError as error:
            raise TerminalIOError(f"Could not draw frame: {error}") from error

    def clear(self) -> None:
        try:
            self._console.clear()
        except OSError as error:
            raise TerminalIOError(f"Could not clear terminal: {error}") from error

    def show_cursor(self, visible: bool) -> None:
        try:
            self._console.show_cursor(visible)
        except OSError as error:
            raise TerminalIOError(f"Could not toggle cursor: {error}") from error
