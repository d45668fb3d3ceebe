"""Tests for position spans."""
import yamlpeek
from yamlpeek.error import Mark
from yamlpeek.nodes import AliasNode, ScalarNode
from yamlpeek.positions import Span, point_span, resolve_span, start_position


def first_pair(text):
    document = next(iter(yamlpeek.load_documents(text)))
    return document.root.value[0]


class TestSpan:
    """Test the Span value type."""

    def test_point(self):
        """A span without an end is a point."""
        span = Span(3, 5)
        assert span.is_point
        assert span.as_tuple() == (3, 5, 3, 5)

    def test_range(self):
        span = Span(1, 6, 1, 11)
        assert not span.is_point
        assert span == Span(1, 6, 1, 11)
        assert span != Span(1, 6)


class TestResolveSpan:
    """Test span computation for nodes."""

    def test_single_line_scalars(self):
        """Single-line scalars end len(value) columns after their start."""
        key, value = first_pair('key: value')
        assert resolve_span(key) == Span(1, 1, 1, 4)
        assert resolve_span(value) == Span(1, 6, 1, 11)

    def test_nested_positions_are_one_based(self):
        _, inner = first_pair('a:\n  b: c')
        key, value = inner.value[0]
        assert resolve_span(key) == Span(2, 3, 2, 4)
        assert resolve_span(value) == Span(2, 6, 2, 7)

    def test_multi_line_value_uses_end_mark(self):
        """A value containing a line break ends at the parser's end mark."""
        _, value = first_pair('key: "a\\nb"')
        assert value.value == 'a\nb'
        assert resolve_span(value) == Span(1, 6, 1, 12)

    def test_multi_line_value_without_end_mark(self):
        """Without an end mark the span collapses to the start."""
        node = ScalarNode('tag:yaml.org,2002:str', 'a\nb',
                          start_mark=Mark('<test>', 0, 2, 4))
        assert resolve_span(node) == Span(3, 5, 3, 5)

    def test_literal_block_ends_after_start(self):
        _, value = first_pair('text: |\n  line one\n  line two\n')
        span = resolve_span(value)
        assert (span.start_line, span.start_column) == (1, 7)
        assert span.end_line > span.start_line

    def test_empty_scalar_is_point(self):
        _, value = first_pair('key:\n')
        assert resolve_span(value).is_point

    def test_alias_span_covers_name(self):
        """Alias spans cover '*' and the anchor name."""
        document = next(iter(yamlpeek.load_documents('a: &x 1\nb: *x')))
        _, alias = document.root.value[1]
        assert isinstance(alias, AliasNode)
        assert resolve_span(alias) == Span(2, 4, 2, 6)

    def test_containers_are_points(self):
        """Collections are reported at their start."""
        _, seq = first_pair('list: [1, 2, 3]')
        assert resolve_span(seq) == Span(1, 7)
        assert point_span(seq) == Span(1, 7)

    def test_unknown_position(self):
        """A node without marks has position (0, 0)."""
        assert start_position(ScalarNode(None, 'x')) == (0, 0)


class TestMark:
    """Test Mark value semantics."""

    def test_hashable(self):
        marks = {Mark('<a>', 4, 1, 2), Mark('<b>', 4, 1, 2), Mark('<a>', 9, 2, 0)}
        assert len(marks) == 2
        assert Mark('<a>', 4, 1, 2) in marks
