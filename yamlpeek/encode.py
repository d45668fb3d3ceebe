"""Output encoders for the non-event modes.

- dump_yaml: normalized YAML from generic data (PyYAML)
- dump_preserved: style and comment preserving YAML (ruamel.yaml round trip)
- dump_json: JSON from generic data
- node_info / dump_nodes: the node view of a DocumentNode tree
"""

import base64
import datetime
import json

import yaml
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError as RoundTripError

from .error import EncodeError
from .formatter import format_tag, node_style
from .nodes import AliasNode, DocumentNode, MappingNode, ScalarNode, SequenceNode
from .positions import alias_text

_KIND_NAMES = {
    'document': 'Document',
    'scalar': 'Scalar',
    'sequence': 'Sequence',
    'mapping': 'Mapping',
    'alias': 'Alias',
}


class IndentedDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their parent key."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def dump_yaml(data, out, sort_keys=True):
    """Write data as normalized block YAML with 2-space indentation."""
    try:
        yaml.dump(data, out, Dumper=IndentedDumper, indent=2,
                  default_flow_style=False, allow_unicode=True,
                  sort_keys=sort_keys)
    except yaml.YAMLError as exc:
        raise EncodeError("failed to encode YAML: %s" % exc) from exc


def round_trip_yaml():
    """Return a ruamel.yaml round-trip instance matching dump_yaml's layout."""
    rt = YAML(typ='rt')
    rt.indent(mapping=2, sequence=4, offset=2)
    rt.preserve_quotes = True
    return rt


def dump_preserved(data, out, rt=None):
    """Write round-trip loaded data, keeping comments, styles and order."""
    rt = rt or round_trip_yaml()
    try:
        rt.dump(data, out)
    except RoundTripError as exc:
        raise EncodeError("failed to encode YAML: %s" % exc) from exc


def _json_default(obj):
    if isinstance(obj, (datetime.date, datetime.datetime)):
        return obj.isoformat()
    if isinstance(obj, bytes):
        return base64.b64encode(obj).decode('ascii')
    raise TypeError("unsupported type: %s" % type(obj).__name__)


def check_json_keys(data, _seen=None):
    """Raise EncodeError if any mapping in data has a non-string key."""
    if _seen is None:
        _seen = set()
    if isinstance(data, (dict, list)):
        if id(data) in _seen:
            raise EncodeError("failed to encode JSON: recursive structure")
        _seen.add(id(data))
    if isinstance(data, dict):
        for key, value in data.items():
            if not isinstance(key, str):
                raise EncodeError(
                    "failed to encode JSON: unsupported mapping key %r (%s)"
                    % (key, type(key).__name__))
            check_json_keys(value, _seen)
    elif isinstance(data, list):
        for item in data:
            check_json_keys(item, _seen)
    if isinstance(data, (dict, list)):
        _seen.discard(id(data))


def dump_json(data, out, pretty=False):
    """Write data as one JSON value followed by a newline.

    Compact separators by default, 2-space indentation when pretty.
    """
    check_json_keys(data)
    try:
        if pretty:
            text = json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True,
                              allow_nan=False, default=_json_default)
        else:
            text = json.dumps(data, separators=(',', ':'), ensure_ascii=False,
                              sort_keys=True, allow_nan=False, default=_json_default)
    except (TypeError, ValueError) as exc:
        raise EncodeError("failed to encode JSON: %s" % exc) from exc
    out.write(text + '\n')


def node_info(node):
    """Describe a node tree as nested dicts for the node view."""
    info = {'kind': _KIND_NAMES[node.id]}
    style = node_style(node)
    if style:
        info['style'] = style
    tag = format_tag(node.tag)
    if tag:
        info['tag'] = tag
    if isinstance(node, AliasNode):
        info['anchor'] = node.value
        info['text'] = alias_text(node)
    else:
        if node.anchor:
            info['anchor'] = node.anchor
        if isinstance(node, ScalarNode):
            info['text'] = node.value
    if node.head_comment:
        info['head'] = node.head_comment
    if node.line_comment:
        info['line'] = node.line_comment
    if node.foot_comment:
        info['foot'] = node.foot_comment
    if isinstance(node, MappingNode):
        info['content'] = [node_info(child) for child in node.children]
    elif isinstance(node, (SequenceNode, DocumentNode)):
        info['content'] = [node_info(child) for child in node.value]
    return info


def dump_nodes(document, out):
    """Write the node view of a DocumentNode as YAML."""
    dump_yaml(node_info(document), out, sort_keys=False)
