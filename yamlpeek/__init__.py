"""
yamlpeek - see how a YAML stream looks to a parser

Renders each document of a YAML stream through one of several views: the
structural event stream, the finer-grained token stream, the node tree,
normalized or comment-preserving YAML, and JSON.

Key features:
- Events and tokens keep exact document order, nesting and document
  boundaries, with anchors, aliases, tags, styles and comments
- Optional position spans ("profuse" mode)
- Block (one record per group of lines) or compact (one line per record)
  rendering into any writable sink
- Documents are processed one at a time; a bad document stops the run but
  keeps the output of the documents before it

Example:
    >>> import io, yamlpeek
    >>> [e.type for e in yamlpeek.load_events("key: value")]
    ['DOCUMENT-START', 'MAPPING-START', 'SCALAR', 'SCALAR', 'MAPPING-END', 'DOCUMENT-END']
    >>> out = io.StringIO()
    >>> yamlpeek.process_events("a: 1", out, compact=True)
    >>> out.getvalue().splitlines()[0]
    '- {Event: DOCUMENT-START}'
"""

__version__ = "0.3.0"

from yamlpeek.error import (
    Mark,
    YAMLError,
    MarkedYAMLError,
    ComposerError,
    StageError,
    DecodeError,
    EncodeError,
)
from yamlpeek.nodes import (
    Node,
    DocumentNode,
    ScalarNode,
    CollectionNode,
    SequenceNode,
    MappingNode,
    AliasNode,
)
from yamlpeek.events import Event, linearize_events
from yamlpeek.tokens import Token, linearize_tokens
from yamlpeek.formatter import format_style, format_tag
from yamlpeek.positions import Span, resolve_span, resolve_comments
from yamlpeek.walker import NodeVisitor, walk
from yamlpeek.render import BlockRenderer, CompactRenderer
from yamlpeek.stream import (
    load_documents,
    load_data,
    load_events,
    load_tokens,
    process_events,
    process_tokens,
    process_yaml,
    process_json,
    process_nodes,
)

__all__ = [
    "Mark",
    "YAMLError",
    "MarkedYAMLError",
    "ComposerError",
    "StageError",
    "DecodeError",
    "EncodeError",
    "Node",
    "DocumentNode",
    "ScalarNode",
    "CollectionNode",
    "SequenceNode",
    "MappingNode",
    "AliasNode",
    "Event",
    "Token",
    "Span",
    "NodeVisitor",
    "walk",
    "linearize_events",
    "linearize_tokens",
    "format_style",
    "format_tag",
    "resolve_span",
    "resolve_comments",
    "BlockRenderer",
    "CompactRenderer",
    "load_documents",
    "load_data",
    "load_events",
    "load_tokens",
    "process_events",
    "process_tokens",
    "process_yaml",
    "process_json",
    "process_nodes",
]
