from .atlas import DEFAULT_GLYPHS, SCAN_COUNT, GlyphAtlas

__all__ = [
    "DEFAULT_GLYPHS",
    "SCAN_COUNT",
    "GlyphAtlas",
]
