"""Node classes for the parsed document tree.

Each document is a DocumentNode holding a single root. The concrete class
selects the variant; only the fields that make sense for it are set.
"""


class Node:
    """Base class for document nodes."""
    id = None

    def __init__(self, tag=None, value=None, start_mark=None, end_mark=None,
                 anchor=None):
        self.tag = tag
        self.value = value
        self.start_mark = start_mark
        self.end_mark = end_mark
        self.anchor = anchor
        self.head_comment = ''
        self.line_comment = ''
        self.foot_comment = ''

    def __repr__(self):
        return '%s(tag=%r, value=%r)' % (type(self).__name__, self.tag, self.value)


class DocumentNode(Node):
    """Document root wrapper; value is a one-element list."""
    id = 'document'

    def __init__(self, root, start_mark=None, end_mark=None,
                 explicit_start=False, explicit_end=False):
        super().__init__(None, [root], start_mark, end_mark)
        self.explicit_start = explicit_start
        self.explicit_end = explicit_end

    @property
    def root(self):
        return self.value[0]


class ScalarNode(Node):
    """Scalar node (strings, numbers, etc.).

    style is the parser's indicator: None (unset), '' (plain), "'", '"',
    '|' or '>'.
    """
    id = 'scalar'

    def __init__(self, tag, value, start_mark=None, end_mark=None,
                 style=None, anchor=None, implicit=True):
        super().__init__(tag, value, start_mark, end_mark, anchor)
        self.style = style
        self.implicit = implicit


class CollectionNode(Node):
    """Base class for collection nodes."""

    def __init__(self, tag, value, start_mark=None, end_mark=None,
                 flow_style=None, anchor=None, implicit=True):
        super().__init__(tag, value, start_mark, end_mark, anchor)
        self.flow_style = flow_style
        self.implicit = implicit


class SequenceNode(CollectionNode):
    """Sequence node (lists/arrays)."""
    id = 'sequence'


class MappingNode(CollectionNode):
    """Mapping node (dicts/objects); value is a list of (key, value) pairs."""
    id = 'mapping'

    @property
    def children(self):
        """Flat alternating key/value view, in document order."""
        flat = []
        for key_node, value_node in self.value:
            flat.append(key_node)
            flat.append(value_node)
        return flat


class AliasNode(Node):
    """Reference to an anchor defined earlier in the same document.

    value is the anchor name; target is the node that defined it.
    """
    id = 'alias'

    def __init__(self, anchor_name, target=None, start_mark=None, end_mark=None):
        super().__init__(None, anchor_name, start_mark, end_mark)
        self.target = target


def is_leaf(node):
    """Scalars, aliases and flow collections are single syntactic units."""
    if isinstance(node, (ScalarNode, AliasNode)):
        return True
    return isinstance(node, CollectionNode) and bool(node.flow_style)


def iter_nodes(node):
    """Yield node and all its descendants in document (pre-)order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, MappingNode):
            stack.extend(reversed(current.children))
        elif isinstance(current, (SequenceNode, DocumentNode)):
            stack.extend(reversed(current.value))
