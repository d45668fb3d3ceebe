"""Tests for the block and compact renderers."""
import io

import pytest

import yamlpeek
from yamlpeek.events import Event
from yamlpeek.positions import Span
from yamlpeek.render import (
    BlockRenderer, CompactRenderer, format_position, make_renderer, quote,
)
from yamlpeek.tokens import Token


def render(records, compact=False, profuse=False):
    out = io.StringIO()
    renderer = make_renderer(out, profuse=profuse, compact=compact)
    renderer.render(records)
    renderer.close()
    return out.getvalue()


class TestQuote:
    """Test double-quoted value formatting."""

    @pytest.mark.parametrize('text,expected', [
        ('key', '"key"'),
        ('say "hi"', '"say \\"hi\\""'),
        ('a\nb', '"a\\nb"'),
        ('back\\slash', '"back\\\\slash"'),
        ('tab\there', '"tab\\there"'),
        ('café', '"café"'),
    ])
    def test_quote(self, text, expected):
        assert quote(text) == expected


class TestFormatPosition:
    """Test Pos field formatting."""

    def test_point(self):
        assert format_position(Span(3, 5)) == '{3: 5}'

    def test_range(self):
        assert format_position(Span(1, 6, 1, 11)) == '{1: 6, 1: 11}'


class TestBlockRenderer:
    """Test block output."""

    def test_key_value(self):
        assert render(yamlpeek.load_events('key: value')) == (
            '- Event: DOCUMENT-START\n'
            '\n'
            '- Event: MAPPING-START\n'
            '  Tag: !!map\n'
            '\n'
            '- Event: SCALAR\n'
            '  Value: "key"\n'
            '  Tag: !!str\n'
            '\n'
            '- Event: SCALAR\n'
            '  Value: "value"\n'
            '  Tag: !!str\n'
            '\n'
            '- Event: MAPPING-END\n'
            '\n'
            '- Event: DOCUMENT-END\n'
            '\n'
        )

    def test_profuse(self):
        output = render(yamlpeek.load_events('key: value'), profuse=True)
        assert '- Event: SCALAR\n  Value: "value"\n  Tag: !!str\n  Pos: {1: 6, 1: 11}\n' in output
        assert '- Event: DOCUMENT-START\n  Pos: {1: 1}\n' in output

    def test_tokens(self):
        output = render(yamlpeek.load_tokens('a: 1'))
        assert output.startswith('- Token: STREAM-START\n\n')
        assert '- Token: KEY\n\n' in output

    def test_field_order(self):
        event = Event('SCALAR', value='v', anchor='a', tag='!!str', style='DoubleQuoted',
                      head_comment='# h', line_comment='# l', foot_comment='# f',
                      span=Span(1, 2, 1, 3))
        out = io.StringIO()
        BlockRenderer(out, profuse=True).render_record(event)
        assert out.getvalue() == (
            '- Event: SCALAR\n'
            '  Value: "v"\n'
            '  Style: DoubleQuoted\n'
            '  Tag: !!str\n'
            '  Anchor: a\n'
            '  Head: "# h"\n'
            '  Line: "# l"\n'
            '  Foot: "# f"\n'
            '  Pos: {1: 2, 1: 3}\n'
            '\n'
        )

    def test_empty(self):
        assert render([]) == ''

    def test_record_count(self, complex_yaml):
        events = yamlpeek.load_events(complex_yaml)
        output = render(events)
        assert sum(line.startswith('- ') for line in output.splitlines()) == len(events)


class TestCompactRenderer:
    """Test compact output."""

    def test_key_value(self):
        assert render(yamlpeek.load_events('key: value'), compact=True) == (
            '- {Event: DOCUMENT-START}\n'
            '- {Event: MAPPING-START, Tag: !!map}\n'
            '- {Event: SCALAR, Value: "key", Tag: !!str}\n'
            '- {Event: SCALAR, Value: "value", Tag: !!str}\n'
            '- {Event: MAPPING-END}\n'
            '- {Event: DOCUMENT-END}\n'
        )

    def test_profuse(self):
        output = render(yamlpeek.load_events('key: value'), compact=True, profuse=True)
        lines = output.splitlines()
        assert lines[0] == '- {Event: DOCUMENT-START, Pos: {1: 1}}'
        assert lines[2] == '- {Event: SCALAR, Value: "key", Tag: !!str, Pos: {1: 1, 1: 4}}'

    def test_tokens_use_type_label(self):
        output = render(yamlpeek.load_tokens('a: 1'), compact=True)
        assert output.splitlines()[0] == '- {Type: STREAM-START}'
        assert '- {Type: SCALAR, Value: "a"}' in output

    def test_empty(self):
        """No records, no output."""
        assert render([], compact=True) == ''

    def test_one_line_per_record(self, complex_yaml):
        events = yamlpeek.load_events(complex_yaml)
        output = render(events, compact=True)
        assert output.endswith('}\n')
        lines = output.split('\n')
        assert lines[-1] == ''
        assert len(lines) - 1 == len(events)
        assert all(line.startswith('- {') for line in lines[:-1])

    def test_spans_render_calls(self):
        """Several render() calls still give one newline per record."""
        out = io.StringIO()
        renderer = CompactRenderer(out)
        renderer.render([Token('STREAM-START')])
        renderer.render([Token('STREAM-END')])
        renderer.close()
        assert out.getvalue() == '- {Type: STREAM-START}\n- {Type: STREAM-END}\n'
