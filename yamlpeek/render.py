"""Block and compact renderers for event and token records.

Renderers write to an explicit sink (any object with a ``write`` method),
never to process stdout directly.
"""

import json


def quote(text):
    """Double-quote text, escaping quotes, backslashes and control characters."""
    return json.dumps(text, ensure_ascii=False)


def format_position(span):
    """'{L: C}' for a point, '{L: C, L: C}' for a range."""
    if span.is_point:
        return '{%d: %d}' % (span.start_line, span.start_column)
    return '{%d: %d, %d: %d}' % (span.start_line, span.start_column,
                                 span.end_line, span.end_column)


def _field_pairs(record, profuse):
    pairs = []
    for name, value, quoted in record.fields():
        pairs.append((name, quote(value) if quoted else value))
    if profuse:
        pairs.append(('Pos', format_position(record.span)))
    return pairs


class BlockRenderer:
    """One multi-line block per record, each followed by a blank line.

    Example:
        - Event: SCALAR
          Value: "key"
          Tag: !!str

    """

    def __init__(self, sink, profuse=False):
        self.sink = sink
        self.profuse = profuse

    def render(self, records):
        for record in records:
            self.render_record(record)

    def render_record(self, record):
        lines = ['- %s: %s' % (record.block_label, record.type)]
        for name, value in _field_pairs(record, self.profuse):
            lines.append('  %s: %s' % (name, value))
        self.sink.write('\n'.join(lines) + '\n\n')

    def close(self):
        pass


class CompactRenderer:
    """One flow-style line per record: ``- {Event: SCALAR, Value: "key"}``.

    The renderer keeps whether anything was written, across every render()
    call, so that close() ends the output with exactly one newline and
    writes nothing at all for an empty stream.
    """

    def __init__(self, sink, profuse=False):
        self.sink = sink
        self.profuse = profuse
        self.first = True

    def render(self, records):
        for record in records:
            self.render_record(record)

    def render_record(self, record):
        if not self.first:
            self.sink.write('\n')
        self.first = False
        parts = ['%s: %s' % (record.compact_label, record.type)]
        for name, value in _field_pairs(record, self.profuse):
            parts.append('%s: %s' % (name, value))
        self.sink.write('- {' + ', '.join(parts) + '}')

    def close(self):
        if not self.first:
            self.sink.write('\n')


def make_renderer(sink, profuse=False, compact=False):
    """Return a CompactRenderer or BlockRenderer writing to sink."""
    if compact:
        return CompactRenderer(sink, profuse=profuse)
    return BlockRenderer(sink, profuse=profuse)
