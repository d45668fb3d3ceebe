"""Document stream driver.

Reads the input once, then decodes, converts and writes one document at a
time. A failure in any document stops the run; whatever was already
written for earlier documents stays in the sink.
"""

import codecs
import logging

import yaml
from ruamel.yaml.error import YAMLError as RoundTripError

from .comments import CommentLoader
from .composer import Composer
from .encode import dump_json, dump_nodes, dump_preserved, dump_yaml, round_trip_yaml
from .error import DecodeError, StageError, YAMLError
from .events import linearize_events
from .render import make_renderer
from .tokens import linearize_tokens

logger = logging.getLogger(__name__)

DOCUMENT_SEPARATOR = '---\n'

_DECODE_ERRORS = (yaml.YAMLError, RoundTripError, YAMLError)


def read_text(stream):
    """Return the whole input as str.

    Accepts str, bytes, or a file-like object. Bytes are decoded as UTF-8
    unless a UTF-16 byte order mark says otherwise.
    """
    if hasattr(stream, 'read'):
        stream = stream.read()
    if isinstance(stream, bytes):
        try:
            if stream.startswith(codecs.BOM_UTF16_LE) or stream.startswith(codecs.BOM_UTF16_BE):
                stream = stream.decode('utf-16')
            else:
                stream = stream.decode('utf-8-sig')
        except UnicodeDecodeError as exc:
            raise DecodeError("failed to decode YAML: %s" % exc) from exc
    return stream


def _decode(documents):
    """Iterate documents, turning parser failures into DecodeError."""
    index = 0
    iterator = iter(documents)
    while True:
        try:
            document = next(iterator)
        except StopIteration:
            return
        except _DECODE_ERRORS as exc:
            if isinstance(exc, StageError):
                raise
            raise DecodeError("failed to decode YAML: %s" % exc, document=index) from exc
        yield document
        index += 1


def _compose(text, name):
    loader = CommentLoader(text, name)
    try:
        yield from Composer(loader, text).compose_documents()
    finally:
        loader.dispose()


def load_documents(stream, name='<stdin>'):
    """Yield a DocumentNode for each document in stream."""
    return _decode(_compose(read_text(stream), name))


def load_data(stream):
    """Yield the generic data (dicts, lists, scalars) of each document."""
    return _decode(yaml.safe_load_all(read_text(stream)))


def load_events(stream):
    """Return the Events of every document in stream, in order."""
    result = []
    for document in load_documents(stream):
        result.extend(linearize_events(document))
    return result


def load_tokens(stream):
    """Return the Tokens of every document in stream, in order."""
    result = []
    for document in load_documents(stream):
        result.extend(linearize_tokens(document))
    return result


def _process_records(stream, out, linearize, profuse, compact):
    renderer = make_renderer(out, profuse=profuse, compact=compact)
    for index, document in enumerate(load_documents(stream)):
        if index and not compact:
            out.write(DOCUMENT_SEPARATOR)
        records = linearize(document)
        logger.debug("document %d: %d records", index, len(records))
        renderer.render(records)
    renderer.close()


def process_events(stream, out, profuse=False, compact=False):
    """Render the event stream of every document to out.

    Args:
        stream: Input text, bytes or file-like object
        out: Sink with a write() method
        profuse: Include position spans
        compact: One flow-style line per event instead of blocks
    """
    _process_records(stream, out, linearize_events, profuse, compact)


def process_tokens(stream, out, profuse=False, compact=False):
    """Render the token stream of every document to out."""
    _process_records(stream, out, linearize_tokens, profuse, compact)


def process_yaml(stream, out, preserve=False):
    """Re-serialize every document, separated by '---' lines.

    Normalized output drops comments and styles and sorts keys; preserved
    output keeps them.
    """
    if preserve:
        # separate instances: the loader is still mid-stream while dumping
        documents = _decode(round_trip_yaml().load_all(read_text(stream)))
        rt = round_trip_yaml()
    else:
        rt = None
        documents = load_data(stream)
    for index, data in enumerate(documents):
        if index:
            out.write(DOCUMENT_SEPARATOR)
        if preserve:
            dump_preserved(data, out, rt)
        else:
            dump_yaml(data, out)


def process_json(stream, out, pretty=False):
    """Write each document as one JSON value per line (or indented block)."""
    for index, data in enumerate(load_data(stream)):
        try:
            dump_json(data, out, pretty=pretty)
        except StageError as exc:
            exc.document = index
            raise


def process_nodes(stream, out):
    """Write the node view of every document, separated by '---' lines."""
    for index, document in enumerate(load_documents(stream)):
        if index:
            out.write(DOCUMENT_SEPARATOR)
        dump_nodes(document, out)
