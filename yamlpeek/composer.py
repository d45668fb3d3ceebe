"""Composer - converts the parser's event stream into Node trees.

Pulls PyYAML events from a CommentLoader one document at a time, so a
malformed later document does not prevent earlier ones from being
processed. Aliases are kept as AliasNode references, never expanded.
"""

import logging

import yaml

from .comments import attach_comments
from .error import ComposerError, Mark
from .nodes import AliasNode, DocumentNode, MappingNode, ScalarNode, SequenceNode

logger = logging.getLogger(__name__)


class Composer:
    """Build DocumentNode trees from a CommentLoader.

    Args:
        loader: A CommentLoader (or any PyYAML loader with a
            ``comments`` list and ``take_comments()``)
        text: The source text, used to locate blank lines when
            attaching comments
    """

    def __init__(self, loader, text=''):
        self.loader = loader
        self.lines = text.split('\n')
        self.anchors = {}

    def compose_documents(self):
        """Yield one DocumentNode per document in the stream."""
        loader = self.loader
        # Drop StreamStartEvent
        loader.get_event()
        index = 0
        while not loader.check_event(yaml.StreamEndEvent):
            document = self.compose_document()
            logger.debug("composed document %d", index)
            index += 1
            yield document
        # Drop StreamEndEvent
        loader.get_event()

    def compose_document(self):
        start_event = self.loader.get_event()
        root = self.compose_node()
        end_event = self.loader.get_event()
        document = DocumentNode(root,
                                start_mark=Mark.from_yaml(start_event.start_mark),
                                end_mark=Mark.from_yaml(end_event.end_mark),
                                explicit_start=bool(start_event.explicit),
                                explicit_end=bool(end_event.explicit))
        comments = self.loader.take_comments(end_event.start_mark)
        attach_comments(document, comments, self.lines)
        self.anchors = {}
        return document

    def compose_node(self):
        if self.loader.check_event(yaml.AliasEvent):
            event = self.loader.get_event()
            anchor = event.anchor
            if anchor not in self.anchors:
                raise ComposerError(None, None,
                                    "found undefined alias %r" % anchor,
                                    Mark.from_yaml(event.start_mark))
            return AliasNode(anchor, self.anchors[anchor],
                             start_mark=Mark.from_yaml(event.start_mark),
                             end_mark=Mark.from_yaml(event.end_mark))
        if self.loader.check_event(yaml.ScalarEvent):
            return self.compose_scalar_node()
        if self.loader.check_event(yaml.SequenceStartEvent):
            return self.compose_sequence_node()
        return self.compose_mapping_node()

    def _register(self, anchor, node):
        if anchor is not None:
            if anchor in self.anchors:
                logger.debug("anchor %r redefined", anchor)
            self.anchors[anchor] = node

    def compose_scalar_node(self):
        event = self.loader.get_event()
        tag = event.tag
        implicit = tag is None
        if tag is None or tag == '!':
            tag = self.loader.resolve(yaml.ScalarNode, event.value, event.implicit)
        node = ScalarNode(tag, event.value,
                          start_mark=Mark.from_yaml(event.start_mark),
                          end_mark=Mark.from_yaml(event.end_mark),
                          style=event.style, anchor=event.anchor,
                          implicit=implicit)
        self._register(event.anchor, node)
        return node

    def compose_sequence_node(self):
        start_event = self.loader.get_event()
        tag = start_event.tag
        implicit = tag is None
        if tag is None or tag == '!':
            tag = self.loader.resolve(yaml.SequenceNode, None, start_event.implicit)
        node = SequenceNode(tag, [],
                            start_mark=Mark.from_yaml(start_event.start_mark),
                            end_mark=None,
                            flow_style=start_event.flow_style,
                            anchor=start_event.anchor, implicit=implicit)
        self._register(start_event.anchor, node)
        while not self.loader.check_event(yaml.SequenceEndEvent):
            node.value.append(self.compose_node())
        end_event = self.loader.get_event()
        node.end_mark = Mark.from_yaml(end_event.end_mark)
        return node

    def compose_mapping_node(self):
        start_event = self.loader.get_event()
        tag = start_event.tag
        implicit = tag is None
        if tag is None or tag == '!':
            tag = self.loader.resolve(yaml.MappingNode, None, start_event.implicit)
        node = MappingNode(tag, [],
                           start_mark=Mark.from_yaml(start_event.start_mark),
                           end_mark=None,
                           flow_style=start_event.flow_style,
                           anchor=start_event.anchor, implicit=implicit)
        self._register(start_event.anchor, node)
        while not self.loader.check_event(yaml.MappingEndEvent):
            key_node = self.compose_node()
            value_node = self.compose_node()
            node.value.append((key_node, value_node))
        end_event = self.loader.get_event()
        node.end_mark = Mark.from_yaml(end_event.end_mark)
        return node
