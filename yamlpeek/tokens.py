"""Token records and the token linearizer.

Tokens follow the same walk as events but use block token names, add
KEY/VALUE/BLOCK-ENTRY markers before each child, and bracket every
document with STREAM-START/STREAM-END.
"""

from .formatter import node_style
from .positions import Span, alias_text, point_span, resolve_comments, resolve_span
from .walker import NodeVisitor, walk

STREAM_START = 'STREAM-START'
STREAM_END = 'STREAM-END'
DOCUMENT_START = 'DOCUMENT-START'
DOCUMENT_END = 'DOCUMENT-END'
BLOCK_MAPPING_START = 'BLOCK-MAPPING-START'
BLOCK_SEQUENCE_START = 'BLOCK-SEQUENCE-START'
BLOCK_ENTRY = 'BLOCK-ENTRY'
KEY = 'KEY'
VALUE = 'VALUE'
BLOCK_END = 'BLOCK-END'
SCALAR = 'SCALAR'


class Token:
    """One lexical token.

    Attributes:
        type: One of the module-level token type names
        value: Scalar text ('*name' for aliases)
        style: Style display name or ''
        span: Span of the token
        head_comment, line_comment, foot_comment: Attached comments
    """
    block_label = 'Token'
    compact_label = 'Type'

    def __init__(self, type, value='', style='', span=None,
                 head_comment='', line_comment='', foot_comment=''):
        self.type = type
        self.value = value
        self.style = style
        self.span = span if span is not None else Span()
        self.head_comment = head_comment
        self.line_comment = line_comment
        self.foot_comment = foot_comment

    def fields(self):
        """Populated fields in display order as (name, value, quoted)."""
        result = []
        if self.value:
            result.append(('Value', self.value, True))
        if self.style:
            result.append(('Style', self.style, False))
        for name, text in (('Head', self.head_comment),
                           ('Line', self.line_comment),
                           ('Foot', self.foot_comment)):
            if text:
                result.append((name, text, True))
        return result

    def __repr__(self):
        if self.value:
            return 'Token(%s, %r)' % (self.type, self.value)
        return 'Token(%s)' % self.type


def _commented(type, node, **kwargs):
    head, line, foot = resolve_comments(node)
    return Token(type, head_comment=head, line_comment=line, foot_comment=foot,
                 **kwargs)


class TokenVisitor(NodeVisitor):
    """Produces tokens for walk()."""

    def visit_scalar(self, node):
        return _commented(SCALAR, node, value=node.value, style=node_style(node),
                          span=resolve_span(node))

    def visit_alias(self, node):
        return Token(SCALAR, value=alias_text(node), span=resolve_span(node))

    def start_sequence(self, node):
        return _commented(BLOCK_SEQUENCE_START, node, span=point_span(node))

    def sequence_entry(self, item):
        return Token(BLOCK_ENTRY, span=point_span(item))

    def end_sequence(self, node):
        return Token(BLOCK_END, span=point_span(node))

    def start_mapping(self, node):
        return _commented(BLOCK_MAPPING_START, node, span=point_span(node))

    def mapping_key(self, key):
        return Token(KEY, span=point_span(key))

    def mapping_value(self, value):
        return Token(VALUE, span=point_span(value))

    def end_mapping(self, node):
        return Token(BLOCK_END, span=point_span(node))


def linearize_tokens(document):
    """Return the ordered list of Tokens for one DocumentNode."""
    span = point_span(document)
    tokens = [
        Token(STREAM_START, span=span),
        Token(DOCUMENT_START, span=span, head_comment=document.head_comment,
              line_comment=document.line_comment),
    ]
    tokens.extend(walk(document, TokenVisitor()))
    tokens.append(Token(DOCUMENT_END, span=span, foot_comment=document.foot_comment))
    tokens.append(Token(STREAM_END, span=span))
    return tokens
