"""Fixed-height ASCII-art glyphs used to draw the countdown clock."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

SCAN_COUNT = 6

DEFAULT_GLYPHS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "0": (
            " _____ ",
            "|  _  |",
            "| |/' |",
            "|  /| |",
            "\\ |_/ /",
            " \\___/ ",
        ),
        "1": (
            " __  ",
            "/  | ",
            "`| | ",
            " | | ",
            "_| |_",
            "\\___/",
        ),
        "2": (
            " _____ ",
            "/ __  \\",
            "`' / /'",
            "  / /  ",
            "./ /___",
            "\\_____/",
        ),
        "3": (
            " _____ ",
            "|____ |",
            "    / /",
            "    \\ \\",
            ".___/ /",
            "\\____/ ",
        ),
        "4": (
            "   ___ ",
            "  /   |",
            " / /| |",
            "/ /_| |",
            "\\___  |",
            "    |_/",
        ),
        "5": (
            " _____ ",
            "|  ___|",
            "|___ \\ ",
            "    \\ \\",
            "/\\__/ /",
            "\\____/ ",
        ),
        "6": (
            "  ____ ",
            " / ___|",
            "/ /___ ",
            "| ___ \\",
            "| \\_/ |",
            "\\_____/",
        ),
        "7": (
            " ______",
            "|___  /",
            "   / / ",
            "  / /  ",
            "./ /   ",
            "\\_/    ",
        ),
        "8": (
            " _____ ",
            "|  _  |",
            " \\ V / ",
            " / _ \\ ",
            "| |_| |",
            "\\_____/",
        ),
        "9": (
            " _____ ",
            "|  _  |",
            "| |_| |",
            "\\____ |",
            ".___/ /",
            "\\____/ ",
        ),
        ":": (
            "   ",
            "(_)",
            "   ",
            " _ ",
            "(_)",
            "   ",
        ),
        " ": (" ", " ", " ", " ", " ", " "),
    }
)


class GlyphAtlas:
    """Read-only lookup from a character to its block of ASCII-art lines.

    Every block has exactly ``scan_count()`` lines. Blocks are not required to
    share a width, so callers must not assume the font is monospaced.
    """

    def __init__(
        self,
        glyphs: Optional[Mapping[str, tuple[str, ...]]] = None,
        *,
        scan_count: int = SCAN_COUNT,
    ):
        if scan_count <= 0:
            raise ValueError("scan_count must be greater than zero")

        source = DEFAULT_GLYPHS if glyphs is None else glyphs
        validated: dict[str, tuple[str, ...]] = {}
        for char, block in source.items():
            lines = tuple(block)
            if len(lines) != scan_count:
                raise ValueError(
                    f"Glyph {char!r} has {len(lines)} lines, expected {scan_count}"
                )
            widths = {len(line) for line in lines}
            if len(widths) != 1:
                raise ValueError(f"Glyph {char!r} has inconsistent line widths")
            validated[char] = lines

        self._glyphs: Mapping[str, tuple[str, ...]] = MappingProxyType(validated)
        self._scan_count = scan_count

    def scan(self, char: str, line_index: int) -> str:
        """Return one line of ``char``'s block, or ``""`` if it is unsupported."""
        self._check_line_index(line_index)
        block = self._glyphs.get(char)
        if block is None:
            return ""
        return block[line_index]

    def scan_string(self, text: str, line_index: int) -> str:
        """Return one horizontal line of ``text`` rendered glyph by glyph."""
        self._check_line_index(line_index)
        return "".join(self.scan(char, line_index) for char in text)

    def scan_count(self) -> int:
        return self._scan_count

    def width(self, char: str) -> int:
        block = self._glyphs.get(char)
        if block is None:
            return 0
        return len(block[0])

    def supports(self, char: str) -> bool:
        return char in self._glyphs

    def _check_line_index(self, line_index: int) -> None:
        if not 0 <= line_index < self._scan_count:
            raise IndexError(
                f"line_index must be in [0, {self._scan_count}), got: {line_index}"
            )
