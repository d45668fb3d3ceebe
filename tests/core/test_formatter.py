"""Tests for style and tag display names."""
import pytest

from yamlpeek.formatter import format_style, format_tag, node_style
from yamlpeek.nodes import AliasNode, MappingNode, ScalarNode, SequenceNode


class TestFormatStyle:
    """Test format_style()."""

    @pytest.mark.parametrize('style,expected', [
        ('', 'Plain'),
        ("'", 'SingleQuoted'),
        ('"', 'DoubleQuoted'),
        ('|', 'Literal'),
        ('>', 'Folded'),
        (True, 'Flow'),
        (None, ''),
        (False, ''),
    ])
    def test_styles(self, style, expected):
        assert format_style(style) == expected

    def test_unknown_style(self):
        """Unknown indicators are rejected."""
        with pytest.raises(ValueError):
            format_style('?')

    def test_node_style(self):
        """Collections are Flow or unstyled; aliases have no style."""
        assert node_style(ScalarNode('tag', 'x', style='"')) == 'DoubleQuoted'
        assert node_style(SequenceNode('tag', [], flow_style=True)) == 'Flow'
        assert node_style(MappingNode('tag', [], flow_style=False)) == ''
        assert node_style(AliasNode('x')) == ''


class TestFormatTag:
    """Test format_tag()."""

    @pytest.mark.parametrize('tag,expected', [
        ('tag:yaml.org,2002:str', '!!str'),
        ('tag:yaml.org,2002:int', '!!int'),
        ('tag:yaml.org,2002:bool', '!!bool'),
        ('tag:yaml.org,2002:null', '!!null'),
        ('tag:yaml.org,2002:float', '!!float'),
        ('tag:yaml.org,2002:timestamp', '!!timestamp'),
        ('tag:yaml.org,2002:map', '!!map'),
        ('tag:yaml.org,2002:seq', '!!seq'),
        ('tag:yaml.org,2002:binary', '!!binary'),
    ])
    def test_builtin_tags(self, tag, expected):
        assert format_tag(tag) == expected

    def test_custom_tags_unchanged(self):
        assert format_tag('!custom') == '!custom'
        assert format_tag('tag:example.com,2000:app/foo') == 'tag:example.com,2000:app/foo'

    def test_no_tag(self):
        assert format_tag(None) == ''
        assert format_tag('') == ''
