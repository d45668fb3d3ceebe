"""Depth-first traversal shared by the event and token linearizers.

walk() visits a node tree in document order and yields whatever records
the visitor's callbacks return. Aliases are reported, never followed, so
the walk terminates on any tree the composer can build.
"""

from .nodes import AliasNode, DocumentNode, MappingNode, ScalarNode, SequenceNode


class NodeVisitor:
    """Callbacks for walk(); each returns a record, or None to emit nothing."""

    def visit_scalar(self, node):
        return None

    def visit_alias(self, node):
        return None

    def start_sequence(self, node):
        return None

    def sequence_entry(self, item):
        return None

    def end_sequence(self, node):
        return None

    def start_mapping(self, node):
        return None

    def mapping_key(self, key):
        return None

    def mapping_value(self, value):
        return None

    def end_mapping(self, node):
        return None


def walk(node, visitor):
    """Yield the visitor's records for node and its descendants."""
    if isinstance(node, DocumentNode):
        for child in node.value:
            yield from walk(child, visitor)
    elif isinstance(node, ScalarNode):
        yield from _emit(visitor.visit_scalar(node))
    elif isinstance(node, AliasNode):
        yield from _emit(visitor.visit_alias(node))
    elif isinstance(node, SequenceNode):
        yield from _emit(visitor.start_sequence(node))
        for item in node.value:
            yield from _emit(visitor.sequence_entry(item))
            yield from walk(item, visitor)
        yield from _emit(visitor.end_sequence(node))
    elif isinstance(node, MappingNode):
        yield from _emit(visitor.start_mapping(node))
        for key_node, value_node in node.value:
            yield from _emit(visitor.mapping_key(key_node))
            yield from walk(key_node, visitor)
            yield from _emit(visitor.mapping_value(value_node))
            yield from walk(value_node, visitor)
        yield from _emit(visitor.end_mapping(node))
    else:
        raise TypeError("cannot walk %s" % type(node).__name__)


def _emit(record):
    if record is not None:
        yield record
