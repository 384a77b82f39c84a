"""Text rendering of trees with box-drawing connectors.

Every node instance, Leaf or Node, produces exactly one line::

    └── 1
        ├── 2
        └── 3
            └── 4

A line is the accumulated ancestor columns, a connector for the node's
position among its siblings, and the node's label. Since each line ends in a
label and children follow their parent immediately, vertical bars are never
interrupted and no blank line is ever emitted.
"""

from typing import Any, List, Optional, Tuple, Union

from canopy.tree import Leaf, Tree, check_tree
from canopy.types import T, ValueFormatterType
from canopy.vis.glyphs import TreeGlyphs, resolve_glyphs

# Every character str.splitlines() breaks on, mapped to its escape sequence.
_LINE_BREAK_ESCAPES = {
    ord(char): char.encode("unicode_escape").decode("ascii")
    for char in "\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"
}


def _default_value_formatter(value: Any) -> str:
    """Default formatter for node values: str(), then repr()."""
    try:
        return str(value)
    except Exception:
        try:
            return repr(value)
        except Exception:
            return "<unrepresentable value>"


def _format_label(value: Any, value_formatter: Optional[ValueFormatterType]) -> str:
    label: Any = None
    if value_formatter is not None:
        try:
            label = value_formatter(value)
        except Exception:
            label = None
    if not isinstance(label, str):
        label = _default_value_formatter(value)
    # One node, one line.
    return label.translate(_LINE_BREAK_ESCAPES)


def render_lines(
    tree: Tree[T],
    *,
    glyphs: Optional[Union[str, TreeGlyphs]] = None,
    value_formatter: Optional[ValueFormatterType] = None,
) -> List[str]:
    """
    Render a tree as a list of lines, one per node instance.

    Args:
        tree: Tree to render
        glyphs: Glyph set name (e.g., 'unicode', 'ascii') or a TreeGlyphs
                instance. Defaults to the unicode box-drawing set.
        value_formatter: Optional function turning a node value into its
                         label. Defaults to str(). If it raises or returns a
                         non-string, the default is used for that node.

    Returns:
        Lines in pre-order, the root first

    Raises:
        InvalidTreeError: If ``tree`` is not a Leaf or Node
    """
    check_tree(tree)
    style = resolve_glyphs(glyphs)

    lines: List[str] = []
    # (subtree, prefix, is_last); children are pushed in reverse so they pop
    # in order, right after their parent's line.
    stack: List[Tuple[Tree[T], str, bool]] = [(tree, "", True)]
    while stack:
        current, prefix, is_last = stack.pop()
        head = prefix + style.connector(is_last)

        if isinstance(current, Leaf):
            lines.append(head + style.leaf_label)
            continue

        lines.append(head + _format_label(current.value, value_formatter))
        child_prefix = prefix + style.column(is_last)
        last_index = len(current.children) - 1
        for index in range(last_index, -1, -1):
            stack.append((current.children[index], child_prefix, index == last_index))

    return lines


def render(
    tree: Tree[T],
    *,
    glyphs: Optional[Union[str, TreeGlyphs]] = None,
    value_formatter: Optional[ValueFormatterType] = None,
) -> str:
    """
    Render a tree as a single string.

    Takes the same arguments as :func:`render_lines` and joins its lines
    with a newline, without a trailing newline.

    Examples:
        >>> from canopy import node
        >>> print(render(node(1, [node(2), node(3, [node(4)])])))
        └── 1
            ├── 2
            └── 3
                └── 4
    """
    return "\n".join(
        render_lines(tree, glyphs=glyphs, value_formatter=value_formatter)
    )
