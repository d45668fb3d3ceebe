"""Run options resolved from command-line flags and the environment."""

import logging
import os

MODE_NODE = 'node'
MODE_EVENT = 'event'
MODE_TOKEN = 'token'
MODE_JSON = 'json'
MODE_YAML = 'yaml'

LOG_LEVEL_ENV = 'YAMLPEEK_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'


class Options:
    """What to run and how to render it.

    Attributes:
        mode: One of the MODE_* names
        profuse: Show position spans (event/token)
        compact: Flow-style one-line records (event/token)
        pretty: Indented JSON (json)
        preserve: Keep comments and styles (yaml)
    """

    def __init__(self, mode=MODE_NODE, profuse=False, compact=False,
                 pretty=False, preserve=False):
        self.mode = mode
        self.profuse = profuse
        self.compact = compact
        self.pretty = pretty
        self.preserve = preserve

    def __eq__(self, other):
        if not isinstance(other, Options):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return 'Options(%s)' % ', '.join('%s=%r' % item for item in sorted(vars(self).items()))

    @classmethod
    def from_args(cls, args):
        """Build Options from parsed CLI flags.

        Capital flags (-E, -T, -J, -Y) imply -p. The shared -p switch means
        profuse for events and tokens, pretty for JSON and preserve for
        YAML; on its own it selects preserved YAML. The first matching
        mode wins in the order event, token, json, yaml, node.
        """
        shared = bool(args.preserve)
        if args.event or args.EVENT:
            return cls(MODE_EVENT, profuse=shared or args.EVENT, compact=args.compact)
        if args.token or args.TOKEN:
            return cls(MODE_TOKEN, profuse=shared or args.TOKEN, compact=args.compact)
        if args.json or args.JSON:
            return cls(MODE_JSON, pretty=shared or args.JSON)
        if args.yaml or args.YAML or shared:
            return cls(MODE_YAML, preserve=shared or args.YAML)
        return cls(MODE_NODE)


def has_mode_flag(args):
    """True if any flag that selects an output mode was given."""
    return any((args.node, args.event, args.EVENT, args.token, args.TOKEN,
                args.json, args.JSON, args.yaml, args.YAML, args.preserve,
                args.compact))


def log_level(environ=None):
    """Log level from YAMLPEEK_LOG_LEVEL (a name like 'DEBUG' or a number)."""
    environ = os.environ if environ is None else environ
    value = environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING
