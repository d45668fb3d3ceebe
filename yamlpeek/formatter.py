"""Display names for node styles and tags."""

from .nodes import CollectionNode, ScalarNode

YAML_TAG_PREFIX = 'tag:yaml.org,2002:'

PLAIN = 'Plain'
SINGLE_QUOTED = 'SingleQuoted'
DOUBLE_QUOTED = 'DoubleQuoted'
LITERAL = 'Literal'
FOLDED = 'Folded'
FLOW = 'Flow'

_SCALAR_STYLES = {
    '': PLAIN,
    "'": SINGLE_QUOTED,
    '"': DOUBLE_QUOTED,
    '|': LITERAL,
    '>': FOLDED,
}


def format_style(style):
    """Map a parser style indicator to its display name.

    Scalar indicators ('', "'", '"', '|', '>') map to Plain, SingleQuoted,
    DoubleQuoted, Literal and Folded; True (a flow collection) maps to Flow.
    An unset style (None or False) formats to ''.
    """
    if style is True:
        return FLOW
    if style is None or style is False:
        return ''
    try:
        return _SCALAR_STYLES[style]
    except KeyError:
        raise ValueError("unknown style %r" % (style,))


def node_style(node):
    """Formatted style of a scalar or collection node, '' otherwise."""
    if isinstance(node, ScalarNode):
        return format_style(node.style)
    if isinstance(node, CollectionNode):
        return format_style(True if node.flow_style else None)
    return ''


def format_tag(tag):
    """Shorten built-in tags: 'tag:yaml.org,2002:str' -> '!!str'.

    Local and custom tags are returned unchanged; no tag formats to ''.
    """
    if not tag:
        return ''
    if tag.startswith(YAML_TAG_PREFIX):
        return '!!' + tag[len(YAML_TAG_PREFIX):]
    return tag
