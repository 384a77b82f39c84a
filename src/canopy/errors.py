"""Error classes for tree operations and rendering."""


class CanopyError(Exception):
    """Base class for canopy errors."""

    pass


class InvalidTreeError(CanopyError, TypeError):
    """Raised when a value that is neither a Leaf nor a Node is used as a tree."""

    pass


class InvalidGlyphsError(CanopyError, ValueError):
    """Raised when a glyph set cannot produce an aligned, gap-free rendering."""

    pass
