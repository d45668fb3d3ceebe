"""Position and comment resolution for emitted records.

Nodes carry 0-based parser marks; records carry 1-based lines and columns.
"""

from .nodes import AliasNode, ScalarNode


class Span:
    """Start and end position of a record (1-based)."""

    __slots__ = ('start_line', 'start_column', 'end_line', 'end_column')

    def __init__(self, start_line=0, start_column=0, end_line=None, end_column=None):
        self.start_line = start_line
        self.start_column = start_column
        self.end_line = start_line if end_line is None else end_line
        self.end_column = start_column if end_column is None else end_column

    @property
    def is_point(self):
        return (self.start_line, self.start_column) == (self.end_line, self.end_column)

    def __eq__(self, other):
        if not isinstance(other, Span):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def as_tuple(self):
        return (self.start_line, self.start_column, self.end_line, self.end_column)

    def __repr__(self):
        return 'Span(%d, %d, %d, %d)' % self.as_tuple()


def start_position(node):
    """Return the node's (line, column), 1-based; (0, 0) when unknown."""
    mark = node.start_mark
    if mark is None:
        return 0, 0
    return mark.line + 1, mark.column + 1


def end_position(node):
    """Return the (line, column) where a node's record ends.

    Single-line scalars end len(value) columns after their start. A value
    with a line break cannot be measured that way: the parser's own end
    mark is used when the node has one, otherwise the start is returned.
    Containers and documents always end where they start.
    """
    line, column = start_position(node)
    if isinstance(node, AliasNode):
        return line, column + len(alias_text(node))
    if not isinstance(node, ScalarNode) or not node.value:
        return line, column
    if '\n' not in node.value:
        return line, column + len(node.value)
    if node.end_mark is not None:
        return node.end_mark.line + 1, node.end_mark.column + 1
    return line, column


def resolve_span(node):
    """Return the Span of the record emitted for node."""
    start_line, start_column = start_position(node)
    end_line, end_column = end_position(node)
    return Span(start_line, start_column, end_line, end_column)


def point_span(node):
    """Span collapsed to the node's start (end markers, pseudo-tokens)."""
    line, column = start_position(node)
    return Span(line, column)


def resolve_comments(node):
    """Return the (head, line, foot) comments attached to node, verbatim."""
    return node.head_comment, node.line_comment, node.foot_comment


def alias_text(node):
    return '*' + node.value
