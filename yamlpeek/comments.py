"""Comment capture and attachment.

PyYAML's scanner skips comments. CommentLoader records them (text from
'#' to end of line, with its Mark) while the parser runs, and
attach_comments() hands each one to a node of the finished document as a
head, line or foot comment.
"""

from bisect import bisect_left

import yaml
from yaml.scanner import ScannerError

from .error import Mark
from .nodes import AliasNode, CollectionNode, MappingNode, SequenceNode, is_leaf

_BREAKS = '\0\r\n\x85\u2028\u2029'


class Comment:
    """A single source comment.

    Attributes:
        text: Comment text starting at '#', trailing whitespace removed
        mark: Position of the '#'
        inline: True when other content precedes it on the same line
    """

    def __init__(self, text, mark, inline=False):
        self.text = text
        self.mark = mark
        self.inline = inline

    @property
    def line(self):
        return self.mark.line

    def __repr__(self):
        return 'Comment(%r, line=%d, inline=%r)' % (self.text, self.mark.line, self.inline)


class CommentLoader(yaml.SafeLoader):
    """SafeLoader that keeps the comments the scanner would discard.

    Only string input is supported; the whole buffer is needed to tell
    inline comments from whole-line ones.
    """

    def __init__(self, stream, name=None):
        self.comments = []
        super().__init__(stream)
        if name is not None:
            self.name = name

    def take_comments(self, end_mark):
        """Remove and return the comments recorded before end_mark."""
        taken = []
        kept = []
        for comment in self.comments:
            if (comment.mark.line, comment.mark.column) < (end_mark.line, end_mark.column):
                taken.append(comment)
            else:
                kept.append(comment)
        self.comments = kept
        return taken

    def _record_comment(self):
        mark = self.get_mark()
        length = 0
        while self.peek(length) not in _BREAKS:
            length += 1
        text = self.prefix(length).rstrip()
        inline = False
        pointer = self.pointer - 1
        while pointer >= 0:
            ch = self.buffer[pointer]
            if ch in _BREAKS:
                break
            if ch not in ' \t':
                inline = True
                break
            pointer -= 1
        self.forward(length)
        self.comments.append(Comment(text, Mark(self.name, mark.index, mark.line, mark.column),
                                     inline))

    def scan_to_next_token(self):
        if self.index == 0 and self.peek() == '\uFEFF':
            self.forward()
        found = False
        while not found:
            while self.peek() == ' ':
                self.forward()
            if self.peek() == '#':
                self._record_comment()
            if self.scan_line_break():
                if not self.flow_level:
                    self.allow_simple_key = True
            else:
                found = True

    def scan_block_scalar_ignored_line(self, start_mark):
        while self.peek() == ' ':
            self.forward()
        if self.peek() == '#':
            self._record_comment()
        ch = self.peek()
        if ch not in _BREAKS:
            raise ScannerError("while scanning a block scalar", start_mark,
                               "expected a comment or a line break, but found %r" % ch,
                               self.get_mark())
        self.scan_line_break()


def _append(node, attr, text):
    current = getattr(node, attr)
    setattr(node, attr, current + '\n' + text if current else text)


def _pos(node):
    return (node.start_mark.line, node.start_mark.column)


def _collect(node, nodes, leaves):
    """Pre-order walk; flow collections are leaves and are not entered."""
    if isinstance(node, AliasNode):
        return
    nodes.append(node)
    if is_leaf(node):
        leaves.append(node)
        return
    if isinstance(node, MappingNode):
        for child in node.children:
            _collect(child, nodes, leaves)
    elif isinstance(node, SequenceNode):
        for child in node.value:
            _collect(child, nodes, leaves)


def _blocks(comments):
    """Group consecutive whole-line comments into blocks."""
    blocks = []
    for comment in comments:
        if blocks and blocks[-1][-1].line + 1 == comment.line:
            blocks[-1].append(comment)
        else:
            blocks.append([comment])
    return blocks


class _Index:
    """Position lookups over one document's nodes.

    Leaves are kept in (line, column) order for bisection; nodes and
    leaves are also grouped by start line.
    """

    def __init__(self, nodes, leaves):
        self.leaves = sorted(leaves, key=_pos)
        self.positions = [_pos(leaf) for leaf in self.leaves]
        self.flow = [leaf for leaf in self.leaves if isinstance(leaf, CollectionNode)]
        self.flow_positions = [_pos(leaf) for leaf in self.flow]
        self.nodes_by_line = {}
        for node in nodes:
            self.nodes_by_line.setdefault(node.start_mark.line, []).append(node)
        self.leaves_by_line = {}
        for leaf in self.leaves:
            self.leaves_by_line.setdefault(leaf.start_mark.line, []).append(leaf)
        self.last_line = max(self.nodes_by_line) if self.nodes_by_line else -1

    def leaf_before(self, position):
        """Last leaf starting before position, or None."""
        index = bisect_left(self.positions, position)
        return self.leaves[index - 1] if index else None

    def flow_before(self, position):
        index = bisect_left(self.flow_positions, position)
        return self.flow[index - 1] if index else None


def _line_target(comment, index):
    position = (comment.mark.line, comment.mark.column)
    before = index.leaf_before(position)
    if before is not None and before.start_mark.line == comment.line:
        return before
    # flow leaves never overlap, so only the last one can span this line
    flow = index.flow_before(position)
    if flow is not None and flow.end_mark is not None \
            and flow.end_mark.line >= comment.line:
        return flow
    starting = [node for node in index.nodes_by_line.get(comment.line, ())
                if _pos(node) < position]
    if starting:
        return starting[-1]
    return before


def attach_comments(document, comments, lines):
    """Attach comments to the nodes of document.

    Args:
        document: The DocumentNode being built
        comments: Comment objects that belong to this document, in order
        lines: Source text split into lines, used to find blank lines
    """
    if not comments:
        return
    nodes = []
    leaves = []
    _collect(document.root, nodes, leaves)
    index = _Index(nodes, leaves)

    whole_line = []
    for comment in comments:
        if not comment.inline:
            whole_line.append(comment)
            continue
        target = _line_target(comment, index)
        if target is None:
            _append(document, 'head_comment', comment.text)
        else:
            _append(target, 'line_comment', comment.text)

    for block in _blocks(whole_line):
        text = '\n'.join(comment.text for comment in block)
        first = block[0].line
        last = block[-1].line
        next_line = last + 1
        followed_by_blank = next_line < len(lines) and not lines[next_line].strip()

        head = None
        if not followed_by_blank:
            on_next = index.leaves_by_line.get(next_line) or \
                index.nodes_by_line.get(next_line)
            if on_next:
                head = on_next[0]
        if head is not None:
            _append(head, 'head_comment', text)
            continue

        previous = index.leaf_before((first, 0))
        if index.last_line <= last:
            _append(document, 'foot_comment', text)
        elif previous is None:
            _append(document, 'head_comment', text)
        else:
            _append(previous, 'foot_comment', text)
