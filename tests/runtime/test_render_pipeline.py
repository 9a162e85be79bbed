import io
import re
import unittest
from unittest.mock import patch

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from glyphs import GlyphAtlas
from runtime import DisplayStyle, build_frame, compose_clock, render_frame
from runtime.render import FALLBACK_MESSAGE, content_height, format_clock, vertical_padding
from terminal import ConsoleSurface, TerminalIOError


class _FakeSurface:
    def __init__(self, width: int, height: int, *, fail: bool = False) -> None:
        self._size = (width, height)
        self._fail = fail
        self.drawn: list[object] = []

    def size(self) -> tuple[int, int]:
        return self._size

    def draw(self, renderable) -> None:
        if self._fail:
            raise TerminalIOError("Could not draw frame: broken pipe")
        self.drawn.append(renderable)

    def clear(self) -> None:
        pass

    def show_cursor(self, visible: bool) -> None:
        pass


def _render_lines(width: int, height: int, seconds: int, header=None) -> list[str]:
    output = io.StringIO()
    console = Console(
        file=output,
        width=width,
        height=height,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
    )
    render_frame(ConsoleSurface(console), seconds, GlyphAtlas(), header, pause_seconds=0)
    return output.getvalue().split("\n")


class FormatClockTests(unittest.TestCase):
    def test_formats_minutes_and_seconds_zero_padded(self) -> None:
        pattern = re.compile(r"^(\d{2,}):(\d{2})$")
        for seconds in range(0, 3600):
            formatted = format_clock(seconds)
            match = pattern.match(formatted)
            self.assertIsNotNone(match, formatted)
            self.assertEqual(seconds // 60, int(match.group(1)))
            self.assertEqual(seconds % 60, int(match.group(2)))

    def test_known_values(self) -> None:
        self.assertEqual("25:00", format_clock(1500))
        self.assertEqual("00:00", format_clock(0))
        self.assertEqual("04:59", format_clock(299))

    def test_hundred_minutes_widens_the_format(self) -> None:
        self.assertEqual("100:00", format_clock(6000))


class ComposeClockTests(unittest.TestCase):
    def setUp(self) -> None:
        self.atlas = GlyphAtlas()

    def test_without_header_yields_scan_count_rows(self) -> None:
        text = compose_clock(1500, self.atlas)

        rows = text.plain.split("\n")
        self.assertEqual(self.atlas.scan_count(), len(rows))
        for line, row in enumerate(rows):
            self.assertEqual(self.atlas.scan_string("25:00", line), row)

    def test_header_adds_three_rows_with_blank_padding(self) -> None:
        text = compose_clock(61, self.atlas, "Break Interval")

        rows = text.plain.split("\n")
        height = self.atlas.scan_count()
        self.assertEqual(height + 3, len(rows))
        self.assertEqual("", rows[height])
        self.assertEqual("Break Interval", rows[height + 1].strip())
        self.assertEqual("", rows[height + 2])
        self.assertEqual(self.atlas.scan_string("01:01", 0), rows[0])

    def test_header_is_bold_and_colored(self) -> None:
        style = DisplayStyle(header_color="magenta")
        text = compose_clock(0, self.atlas, "Work Interval", style)

        header_spans = [span for span in text.spans if "Work" in text.plain[span.start:span.end]]
        self.assertEqual(1, len(header_spans))
        span_style = header_spans[0].style
        self.assertTrue(span_style.bold)
        self.assertEqual("magenta", span_style.color.name)

    def test_content_height(self) -> None:
        self.assertEqual(6, content_height(self.atlas))
        self.assertEqual(9, content_height(self.atlas, "Work Interval"))
        self.assertEqual(9, content_height(self.atlas, ""))


class FrameLayoutTests(unittest.TestCase):
    def setUp(self) -> None:
        self.atlas = GlyphAtlas()

    def test_vertical_padding_uses_floor_division(self) -> None:
        self.assertEqual(5, vertical_padding(20, 9))
        self.assertEqual(6, vertical_padding(21, 9))
        self.assertEqual(0, vertical_padding(9, 9))

    def test_too_small_surface_renders_fallback_without_layout(self) -> None:
        surface = _FakeSurface(80, 8)
        with patch("runtime.render.vertical_padding") as padding, patch(
            "runtime.render.time.sleep"
        ):
            render_frame(surface, 1500, self.atlas, "Work Interval")

        padding.assert_not_called()
        self.assertEqual(1, len(surface.drawn))
        fallback = surface.drawn[0]
        self.assertIsInstance(fallback, Text)
        self.assertEqual(FALLBACK_MESSAGE, fallback.plain)

    def test_surface_fitting_clock_without_header_is_laid_out(self) -> None:
        frame = build_frame(80, 8, 1500, self.atlas)
        self.assertIsInstance(frame, Panel)

    def test_fallback_message_is_drawn_on_a_real_console(self) -> None:
        lines = _render_lines(60, 4, 1500, "Work Interval")
        self.assertEqual(4, len(lines))
        self.assertIn(FALLBACK_MESSAGE, lines[0])

    def test_frame_centers_clock_inside_titled_border(self) -> None:
        lines = _render_lines(60, 20, 1500, "Work Interval")

        self.assertEqual(20, len(lines))
        self.assertIn("Flying Tomato", lines[0])
        # floor((20 - 9) / 2) rows above the clock, border row included
        for line in range(self.atlas.scan_count()):
            self.assertIn(self.atlas.scan_string("25:00", line), lines[5 + line])
        self.assertIn("Work Interval", lines[12])
        for row in lines[1:5]:
            self.assertEqual("", row.strip(" │"))

    def test_clock_is_horizontally_centered(self) -> None:
        lines = _render_lines(60, 20, 1500)
        # floor((20 - 6) / 2) = 7 rows above the clock
        row = self.atlas.scan_string("25:00", 1)
        start = lines[8].index(row)
        end = len(lines[8]) - start - len(row)
        self.assertLessEqual(abs(start - end), 1)

    def test_odd_leftover_row_goes_to_the_bottom(self) -> None:
        lines = _render_lines(60, 20, 1500, "Work Interval")
        above = lines[:5]
        below = lines[5 + content_height(self.atlas, "Work Interval"):]

        self.assertEqual(5, len(above))
        self.assertEqual(6, len(below))
        self.assertIn(self.atlas.scan_string("25:00", 0), lines[5])
        for row in below[:-1]:
            self.assertEqual("", row.strip(" │"))

    def test_surface_exactly_content_height_does_not_crash(self) -> None:
        lines = _render_lines(60, 9, 0, "Work Interval")
        self.assertEqual(9, len(lines))
        self.assertIn(self.atlas.scan_string("00:00", 0), lines[1])
        self.assertNotIn("Work Interval", "\n".join(lines))

    def test_custom_style_title(self) -> None:
        output = io.StringIO()
        console = Console(file=output, width=50, height=12, color_system=None)
        render_frame(
            ConsoleSurface(console),
            59,
            self.atlas,
            style=DisplayStyle(title="Tomato Timer"),
            pause_seconds=0,
        )
        self.assertIn("Tomato Timer", output.getvalue().split("\n")[0])

    def test_render_frame_pauses_after_drawing(self) -> None:
        surface = _FakeSurface(80, 24)
        with patch("runtime.render.time.sleep") as sleep:
            render_frame(surface, 10, self.atlas, "Work Interval")

        sleep.assert_called_once_with(0.01)
        self.assertEqual(1, len(surface.drawn))

    def test_draw_failure_propagates(self) -> None:
        surface = _FakeSurface(80, 24, fail=True)
        with patch("runtime.render.time.sleep") as sleep:
            with self.assertRaises(TerminalIOError):
                render_frame(surface, 10, self.atlas)
        sleep.assert_not_called()


if __name__ == "__main__":
    unittest.main()
