"""Compose the ASCII-art clock and lay it out inside the terminal viewport."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from rich.align import Align
from rich.console import RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from glyphs import GlyphAtlas
from terminal import RenderSurface

FALLBACK_MESSAGE = "What is this, a terminal for ants?"
HEADER_ROWS = 3
BORDER_ROWS = 1
DEFAULT_FRAME_PAUSE_SECONDS = 0.01


@dataclass(frozen=True)
class DisplayStyle:
    """Title and colors of the bordered frame."""
    title: str = "Flying Tomato"
    title_color: str = "white"
    border_color: str = "red"
    header_color: str = "yellow"


def format_clock(seconds_remaining: int) -> str:
    minutes, seconds = divmod(seconds_remaining, 60)
    return f"{minutes:02d}:{seconds:02d}"


def content_height(atlas: GlyphAtlas, header: Optional[str] = None) -> int:
    height = atlas.scan_count()
    if header is not None:
        height += HEADER_ROWS
    return height


def vertical_padding(surface_height: int, required_height: int) -> int:
    # Both padding regions get the floor value; the bottom takes any leftover row.
    return (surface_height - required_height) // 2


def compose_clock(
    seconds_remaining: int,
    atlas: GlyphAtlas,
    header: Optional[str] = None,
    style: DisplayStyle = DisplayStyle(),
) -> Text:
    """Build the clock rows, followed by the padded header when one is given."""
    clock = format_clock(seconds_remaining)
    rows = [atlas.scan_string(clock, line) for line in range(atlas.scan_count())]

    # Left-justified so glyph rows keep their trailing spaces and stay aligned.
    text = Text("\n".join(rows), justify="left", no_wrap=True, overflow="crop")
    if header is not None:
        clock_width = max((len(row) for row in rows), default=0)
        text.append("\n\n")
        text.append(
            header.center(clock_width),
            style=Style(bold=True, color=style.header_color),
        )
        text.append("\n")
    return text


def build_frame(
    width: int,
    height: int,
    seconds_remaining: int,
    atlas: GlyphAtlas,
    header: Optional[str] = None,
    style: DisplayStyle = DisplayStyle(),
) -> RenderableType:
    """Return the renderable for one frame of a ``width`` x ``height`` viewport."""
    required = content_height(atlas, header)
    if height < required:
        return Text(FALLBACK_MESSAGE, overflow="fold")

    space = vertical_padding(height, required)
    inner_height = height - 2 * BORDER_ROWS
    # The top border row already counts towards the top padding.
    top = max(0, space - BORDER_ROWS)
    # At an exact fit the border rows leave no room for the last content
    # rows, so the header is cropped off rather than switching to the fallback.
    content_rows = min(required, inner_height - top)
    bottom = inner_height - top - content_rows

    clock = compose_clock(seconds_remaining, atlas, header, style)
    regions = [
        Layout(Text(" "), name="top", size=top),
        Layout(Align.center(clock), name="content", size=content_rows),
        Layout(Text(" "), name="bottom", size=bottom),
    ]
    layout = Layout(name="root")
    layout.split_column(*(region for region in regions if region.size))

    return Panel(
        layout,
        title=Text(style.title, style=Style(color=style.title_color)),
        title_align="left",
        border_style=Style(color=style.border_color),
        width=width,
        height=height,
    )


def render_frame(
    surface: RenderSurface,
    seconds_remaining: int,
    atlas: GlyphAtlas,
    header: Optional[str] = None,
    style: DisplayStyle = DisplayStyle(),
    *,
    pause_seconds: float = DEFAULT_FRAME_PAUSE_SECONDS,
) -> None:
    """Draw one frame and pause briefly to bound the redraw rate.

    Drawing failures propagate as ``TerminalIOError``; nothing is retried.
    """
    width, height = surface.size()
    surface.draw(build_frame(width, height, seconds_remaining, atlas, header, style))
    if pause_seconds > 0:
        time.sleep(pause_seconds)
