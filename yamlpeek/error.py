"""Marks and the error hierarchy.

Provides Mark, YAMLError and MarkedYAMLError with PyYAML's shape, plus the
two fatal stages of a run: decoding the input and encoding the output.
"""


class Mark:
    """Represents a position in a YAML stream.

    Attributes:
        name: The name of the stream (e.g., filename or '<stdin>')
        index: Character index in the stream
        line: Line number (0-indexed)
        column: Column number (0-indexed)
    """

    def __init__(self, name, index, line, column):
        self.name = name
        self.index = index
        self.line = line
        self.column = column

    @classmethod
    def from_yaml(cls, mark):
        """Copy a PyYAML/ruamel mark, dropping its buffer reference."""
        if mark is None:
            return None
        return cls(mark.name, mark.index, mark.line, mark.column)

    def __eq__(self, other):
        if not isinstance(other, Mark):
            return NotImplemented
        return (self.line, self.column, self.index) == \
            (other.line, other.column, other.index)

    def __hash__(self):
        return hash((self.line, self.column, self.index))

    def __repr__(self):
        return 'Mark(%r, line=%d, column=%d)' % (self.name, self.line, self.column)

    def __str__(self):
        return "  in \"%s\", line %d, column %d" % (self.name, self.line + 1, self.column + 1)


class YAMLError(Exception):
    """Base exception for yamlpeek errors."""
    pass


class MarkedYAMLError(YAMLError):
    """YAML error with position marks.

    Attributes:
        context: Description of the parsing context
        context_mark: Mark pointing to the context
        problem: Description of the problem
        problem_mark: Mark pointing to the problem
        note: Additional note about the error
    """

    def __init__(self, context=None, context_mark=None,
                 problem=None, problem_mark=None, note=None):
        self.context = context
        self.context_mark = context_mark
        self.problem = problem
        self.problem_mark = problem_mark
        self.note = note

    def __str__(self):
        lines = []
        if self.context is not None:
            lines.append(self.context)
        if self.context_mark is not None \
                and (self.problem is None or self.problem_mark is None
                     or self.context_mark.name != self.problem_mark.name
                     or self.context_mark.line != self.problem_mark.line
                     or self.context_mark.column != self.problem_mark.column):
            lines.append(str(self.context_mark))
        if self.problem is not None:
            lines.append(self.problem)
        if self.problem_mark is not None:
            lines.append(str(self.problem_mark))
        if self.note is not None:
            lines.append(self.note)
        return '\n'.join(lines)


class ComposerError(MarkedYAMLError):
    """Node tree could not be built (e.g., undefined alias)."""
    pass


class StageError(YAMLError):
    """A fatal failure tied to one stage of the run.

    Attributes:
        stage: 'decode' for input problems, 'encode' for output problems
        document: 0-based index of the document being processed, if known
    """
    stage = None

    def __init__(self, message, document=None):
        super().__init__(message)
        self.document = document


class DecodeError(StageError):
    """Malformed input document."""
    stage = 'decode'


class EncodeError(StageError):
    """Document structure the output encoder cannot represent."""
    stage = 'encode'
