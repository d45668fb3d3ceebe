"""Tests for the node walker."""
import pytest

import yamlpeek
from yamlpeek.nodes import Node
from yamlpeek.walker import NodeVisitor, walk


class RecordingVisitor(NodeVisitor):
    """Records callback names and scalar values."""

    def visit_scalar(self, node):
        return 'scalar:%s' % node.value

    def visit_alias(self, node):
        return 'alias:%s' % node.value

    def start_sequence(self, node):
        return 'seq['

    def sequence_entry(self, item):
        return 'entry'

    def end_sequence(self, node):
        return ']seq'

    def start_mapping(self, node):
        return 'map{'

    def mapping_key(self, key):
        return 'key'

    def mapping_value(self, value):
        return 'value'

    def end_mapping(self, node):
        return '}map'


def walk_text(text, visitor=None):
    document = next(iter(yamlpeek.load_documents(text)))
    return list(walk(document, visitor or RecordingVisitor()))


class TestWalk:
    """Test walk() ordering and termination."""

    def test_document_order(self):
        assert walk_text('a: [1, 2]') == [
            'map{', 'key', 'scalar:a', 'value',
            'seq[', 'entry', 'scalar:1', 'entry', 'scalar:2', ']seq',
            '}map',
        ]

    def test_none_emits_nothing(self):
        """Callbacks returning None produce no records."""
        assert walk_text('a: [1, 2]', NodeVisitor()) == []

    def test_alias_not_followed(self):
        """Recursive structures terminate."""
        assert walk_text('a: &x\n  b: *x') == [
            'map{', 'key', 'scalar:a', 'value',
            'map{', 'key', 'scalar:b', 'value', 'alias:x', '}map',
            '}map',
        ]

    def test_unknown_node(self):
        with pytest.raises(TypeError):
            list(walk(Node(), NodeVisitor()))
