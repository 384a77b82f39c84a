"""Text visualization of canopy trees.

Renders a tree one line per node with box-drawing connectors, keeping
vertical bars continuous and never emitting blank lines.

Example usage:

    >>> from canopy import node
    >>> from canopy import vis
    >>>
    >>> tree = node("root", [node("a"), node("b", [node("c")])])
    >>> print(vis.render(tree))
    └── root
        ├── a
        └── b
            └── c
    >>>
    >>> # ASCII connectors and a custom label
    >>> lines = vis.render_lines(tree, glyphs="ascii", value_formatter=str.upper)
"""

from canopy.vis.glyphs import (
    ASCII_GLYPHS,
    UNICODE_GLYPHS,
    TreeGlyphs,
    get_glyphs,
    list_glyph_names,
    register_glyphs,
    resolve_glyphs,
)
from canopy.vis.render import render, render_lines

__all__ = [
    # Rendering
    "render",
    "render_lines",
    # Glyph sets
    "TreeGlyphs",
    "UNICODE_GLYPHS",
    "ASCII_GLYPHS",
    "get_glyphs",
    "list_glyph_names",
    "register_glyphs",
    "resolve_glyphs",
]
