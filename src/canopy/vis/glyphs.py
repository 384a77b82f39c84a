"""Connector glyph sets for the text visualizer."""

import dataclasses
import warnings
from typing import Dict, List, Optional, Union

from canopy.errors import InvalidGlyphsError


@dataclasses.dataclass(frozen=True)
class TreeGlyphs:
    """Strings used to draw one rendered line.

    Attributes:
        branch: Connector for a node that has a later sibling
        terminal: Connector for the last node among its siblings
        vertical: Column filler for an ancestor with siblings still to come
        blank: Column filler for an ancestor whose siblings are exhausted
        leaf_label: Text drawn in place of a value for the Leaf variant
    """

    branch: str = "├── "
    terminal: str = "└── "
    vertical: str = "│   "
    blank: str = "    "
    leaf_label: str = "(Leaf)"

    def __post_init__(self):
        if len(self.branch) != len(self.terminal):
            raise InvalidGlyphsError(
                f"branch ({self.branch!r}) and terminal ({self.terminal!r}) "
                "must have the same width"
            )
        if len(self.vertical) != len(self.blank):
            raise InvalidGlyphsError(
                f"vertical ({self.vertical!r}) and blank ({self.blank!r}) "
                "must have the same width"
            )
        if len(self.branch) != len(self.vertical):
            raise InvalidGlyphsError(
                "connector width must match column width so children line up "
                f"under their parent, got {len(self.branch)} and {len(self.vertical)}"
            )
        if not self.branch.strip() or not self.terminal.strip():
            raise InvalidGlyphsError("branch and terminal must not be whitespace-only")
        if self.blank.strip(" "):
            raise InvalidGlyphsError(f"blank must contain only spaces, got {self.blank!r}")
        if any(glyph.splitlines() != [glyph] for glyph in self._all_glyphs() if glyph):
            raise InvalidGlyphsError("glyphs must not contain line breaks")

    def _all_glyphs(self) -> List[str]:
        return [self.branch, self.terminal, self.vertical, self.blank, self.leaf_label]

    def connector(self, is_last: bool) -> str:
        """Return the connector for a node, given whether it is the last sibling."""
        return self.terminal if is_last else self.branch

    def column(self, is_last: bool) -> str:
        """Return the filler a node contributes to its descendants' prefix."""
        return self.blank if is_last else self.vertical


UNICODE_GLYPHS = TreeGlyphs()
ASCII_GLYPHS = TreeGlyphs(branch="|-- ", terminal="`-- ", vertical="|   ")

DEFAULT_GLYPHS = "unicode"

_GLYPH_REGISTRY: Dict[str, TreeGlyphs] = {
    "unicode": UNICODE_GLYPHS,
    "ascii": ASCII_GLYPHS,
}


def list_glyph_names() -> List[str]:
    """List all registered glyph set names.

    Returns:
        Sorted names that can be used with get_glyphs()
    """
    return sorted(_GLYPH_REGISTRY.keys())


def get_glyphs(name: str) -> TreeGlyphs:
    """Look up a glyph set by name.

    Raises:
        ValueError: If no glyph set is registered under ``name``
    """
    if name not in _GLYPH_REGISTRY:
        raise ValueError(
            f"Glyph set '{name}' not found. "
            f"Available glyph sets: {', '.join(list_glyph_names())}"
        )
    return _GLYPH_REGISTRY[name]


def register_glyphs(name: str, glyphs: TreeGlyphs) -> None:
    """
    Register a glyph set under a name.

    Args:
        name: Name used with get_glyphs() and resolve_glyphs()
        glyphs: Glyph set instance
    """
    if not isinstance(glyphs, TreeGlyphs):
        raise TypeError(f"glyphs must be a TreeGlyphs, got {type(glyphs).__name__}")
    if name in _GLYPH_REGISTRY:
        warnings.warn(f"Glyph set '{name}' is already registered. Overwriting.")
    _GLYPH_REGISTRY[name] = glyphs


def resolve_glyphs(glyphs_input: Optional[Union[str, TreeGlyphs]] = None) -> TreeGlyphs:
    """Resolve a glyphs argument to a TreeGlyphs instance.

    Args:
        glyphs_input: Can be:
            - None: Use the default glyph set
            - str: Registered glyph set name (e.g., 'unicode', 'ascii')
            - TreeGlyphs instance: Used directly

    Raises:
        ValueError: If the glyph set name is unknown
        TypeError: If the input is not a valid type
    """
    if glyphs_input is None:
        glyphs_input = DEFAULT_GLYPHS

    if isinstance(glyphs_input, str):
        return get_glyphs(glyphs_input)
    elif isinstance(glyphs_input, TreeGlyphs):
        return glyphs_input
    raise TypeError(
        f"glyphs must be None, str, or TreeGlyphs, got {type(glyphs_input).__name__}"
    )
