"""Event records and the event linearizer.

An event stream describes document shape: one SCALAR per scalar or alias,
a START/END pair per collection, bracketed by DOCUMENT-START/DOCUMENT-END.
"""

from .formatter import format_tag, node_style
from .positions import Span, alias_text, point_span, resolve_comments, resolve_span
from .walker import NodeVisitor, walk

DOCUMENT_START = 'DOCUMENT-START'
DOCUMENT_END = 'DOCUMENT-END'
SCALAR = 'SCALAR'
SEQUENCE_START = 'SEQUENCE-START'
SEQUENCE_END = 'SEQUENCE-END'
MAPPING_START = 'MAPPING-START'
MAPPING_END = 'MAPPING-END'


class Event:
    """One structural event.

    Attributes:
        type: One of the module-level event type names
        value: Scalar text ('*name' for aliases)
        anchor: Anchor defined by the node, or referenced by an alias
        tag: Short tag name ('!!str', '!custom') or ''
        style: Style display name or ''
        implicit: True unless the node (or document marker) was explicit
        span: Span of the event
        head_comment, line_comment, foot_comment: Attached comments
    """
    block_label = 'Event'
    compact_label = 'Event'

    def __init__(self, type, value='', anchor='', tag='', style='', implicit=False,
                 span=None, head_comment='', line_comment='', foot_comment=''):
        self.type = type
        self.value = value
        self.anchor = anchor
        self.tag = tag
        self.style = style
        self.implicit = implicit
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
        if self.tag:
            result.append(('Tag', self.tag, False))
        if self.anchor:
            result.append(('Anchor', self.anchor, False))
        if self.head_comment:
            result.append(('Head', self.head_comment, True))
        if self.line_comment:
            result.append(('Line', self.line_comment, True))
        if self.foot_comment:
            result.append(('Foot', self.foot_comment, True))
        return result

    def __repr__(self):
        if self.value:
            return 'Event(%s, %r)' % (self.type, self.value)
        return 'Event(%s)' % self.type


def _node_event(type, node):
    head, line, foot = resolve_comments(node)
    return Event(type, anchor=node.anchor or '', tag=format_tag(node.tag),
                 style=node_style(node), implicit=node.implicit,
                 span=resolve_span(node),
                 head_comment=head, line_comment=line, foot_comment=foot)


class EventVisitor(NodeVisitor):
    """Produces events for walk()."""

    def visit_scalar(self, node):
        event = _node_event(SCALAR, node)
        event.value = node.value
        return event

    def visit_alias(self, node):
        return Event(SCALAR, value=alias_text(node), anchor=node.value,
                     implicit=True, span=resolve_span(node))

    def start_sequence(self, node):
        return _node_event(SEQUENCE_START, node)

    def end_sequence(self, node):
        return Event(SEQUENCE_END, span=point_span(node))

    def start_mapping(self, node):
        return _node_event(MAPPING_START, node)

    def end_mapping(self, node):
        return Event(MAPPING_END, span=point_span(node))


def linearize_events(document):
    """Return the ordered list of Events for one DocumentNode.

    For S scalars/aliases, Q sequences and M mappings the list holds
    2 + S + 2Q + 2M events.
    """
    events = [Event(DOCUMENT_START, implicit=not document.explicit_start,
                    span=point_span(document),
                    head_comment=document.head_comment,
                    line_comment=document.line_comment)]
    events.extend(walk(document, EventVisitor()))
    events.append(Event(DOCUMENT_END, implicit=not document.explicit_end,
                        span=point_span(document),
                        foot_comment=document.foot_comment))
    return events
