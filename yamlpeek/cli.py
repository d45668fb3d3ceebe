"""Command-line interface: ``yamlpeek [options] < input.yaml``."""

import argparse
import logging
import sys

from . import __version__
from . import config
from .error import YAMLError
from .stream import process_events, process_json, process_nodes, process_tokens, \
    process_yaml

logger = logging.getLogger('yamlpeek')

LOG_FORMAT = 'yamlpeek: %(levelname)s: %(message)s'

DESCRIPTION = """\
yamlpeek version %s

Show how a YAML stream is seen by a parser: as a node tree, an event or
token stream, normalized or preserved YAML, or JSON.
""" % __version__

MODE_LABELS = {
    config.MODE_NODE: 'nodes',
    config.MODE_EVENT: 'events',
    config.MODE_TOKEN: 'tokens',
    config.MODE_JSON: 'JSON',
    config.MODE_YAML: 'YAML',
}

NO_MODE_MESSAGE = (
    "stdin has data but no mode specified. Use -n/--node, -e/--event, "
    "-E/--EVENT, -t/--token, -T/--TOKEN, -j/--json, -J/--JSON, -y/--yaml, "
    "-Y/--YAML, or --preserve flag.")


def build_parser():
    parser = argparse.ArgumentParser(
        prog='yamlpeek', description=DESCRIPTION, allow_abbrev=False,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    add = parser.add_argument
    add('-y', '--yaml', action='store_true', help='YAML formatting mode')
    add('-Y', '--YAML', action='store_true', help='YAML Preserve; short for -y -p')
    add('-j', '--json', action='store_true', help='JSON formatting mode (compact)')
    add('-J', '--JSON', action='store_true', help='JSON Pretty; short for -j -p')
    add('-t', '--token', action='store_true', help='Token formatting mode')
    add('-T', '--TOKEN', action='store_true', help='Token Profuse; short for -t -p')
    add('-e', '--event', action='store_true', help='Event formatting mode')
    add('-E', '--EVENT', action='store_true', help='Event Profuse; short for -e -p')
    add('-n', '--node', action='store_true', help='Node formatting mode')
    add('-p', '--preserve', '--pretty', '--profuse', dest='preserve', action='store_true',
        help='Preserve comments and styles (with -y), pretty JSON (with -j), '
             'show line info (with -t and -e)')
    add('-c', '--compact', action='store_true',
        help='Compact output (flow style, no blank lines)')
    add('--version', action='version', version='yamlpeek version %s' % __version__)
    return parser


def run(options, stdin, stdout):
    """Process stdin to stdout according to options."""
    if options.mode == config.MODE_EVENT:
        process_events(stdin, stdout, profuse=options.profuse, compact=options.compact)
    elif options.mode == config.MODE_TOKEN:
        process_tokens(stdin, stdout, profuse=options.profuse, compact=options.compact)
    elif options.mode == config.MODE_JSON:
        process_json(stdin, stdout, pretty=options.pretty)
    elif options.mode == config.MODE_YAML:
        process_yaml(stdin, stdout, preserve=options.preserve)
    else:
        process_nodes(stdin, stdout)


def _is_terminal(stream):
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def main(argv=None, stdin=None, stdout=None, stderr=None):
    """Entry point; returns the process exit status."""
    stdin = sys.stdin.buffer if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    parser = build_parser()
    args = parser.parse_args(argv)

    handler = logging.StreamHandler(stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(config.log_level())
    try:
        if not config.has_mode_flag(args):
            if _is_terminal(stdin):
                parser.print_help(stdout)
                return 0
            logger.error(NO_MODE_MESSAGE)
            return 1

        options = config.Options.from_args(args)
        logger.debug("running with %r", options)
        try:
            run(options, stdin, stdout)
        except YAMLError as exc:
            logger.error("Failed to process %s: %s", MODE_LABELS[options.mode], exc)
            return 1
        finally:
            stdout.flush()
        return 0
    finally:
        logger.removeHandler(handler)


if __name__ == '__main__':
    sys.exit(main())
