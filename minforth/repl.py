import argparse
import logging
import os
import readline  # line editing for input()
import sys

from minforth.errors import MalformedDefinition
from minforth.machine import Machine, DEFAULT_MAX_DEPTH
from minforth.parser import is_definition, parse_definition

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

PROMPT = ''
ERROR_FORMAT = ' ? %s'


def format_stack(stack):
    """ Renders a stack the way .S does in most Forths: <depth> bottom ... top """
    return ' '.join(['<%d>' % len(stack)] + [str(value) for value in stack])


class Session(object):
    """
    One REPL session: a :class:`Machine`, plus the diagnostics it reported
    while handling the most recent line.
    """
    def __init__(self, max_depth=DEFAULT_MAX_DEPTH, show_stack=False):
        self.errors = []
        self.show_stack = show_stack
        self.machine = Machine(max_depth=max_depth, report=self.errors.append)

    def feed(self, line):
        """
        Hands a line to the machine, splitting off a leading definition if
        there is one. Raises :exc:`MalformedDefinition` (before touching the
        machine) if the definition doesn't parse.
        """
        if is_definition(line):
            name, tokens, line = parse_definition(line)
            self.machine.define(name, tokens)
        self.machine.evaluate(line)

    def respond(self, line):
        del self.errors[:]
        try:
            self.feed(line)
        except MalformedDefinition as e:
            self.errors.append(e)

        ret = ''
        if self.show_stack:
            ret = format_stack(self.machine.data_stack)
        if self.errors:
            return ret + ''.join(ERROR_FORMAT % e for e in self.errors)
        return ret + ' ok'


def run_file(session, path):
    """ Feeds a source file to the session line by line, printing only problems. """
    log.info('loading %s', path)
    failures = 0
    with open(path) as source:
        for lineno, line in enumerate(source, 1):
            ret = session.respond(line)
            if session.errors:
                failures += 1
                print('%s:%d: %s' % (path, lineno, ret.strip()))
    return failures


def forth_repl(session=None):
    print('Type "bye" or input an end of file (Ctrl+D) to quit.')

    if session is None:
        session = Session()

    try:
        cmd = input(PROMPT)
        while cmd.strip().lower() != 'bye':
            print(session.respond(cmd))
            cmd = input(PROMPT)
    except EOFError:
        pass  # perfectly acceptable


def cli_main(argv=None):
    parser = argparse.ArgumentParser(
        description='Minimal interactive Forth interpreter',
        prog='minforth',
    )
    parser.add_argument('files', nargs='*', help='source files to evaluate before the session starts')
    parser.add_argument('-d', '--max-depth', type=int, default=DEFAULT_MAX_DEPTH,
        help='deepest nesting of user-defined words (default {})'.format(DEFAULT_MAX_DEPTH))
    parser.add_argument('-s', '--show-stack', action='store_true', help='print the stack after every line')
    parser.add_argument('--no-repl', action='store_true', help='exit once the files are evaluated')
    parser.add_argument('-v', '--verbose', action='store_true', help='verbose interpreter output')
    parser.add_argument('--version', action='store_true', help='print version and exit')
    args = parser.parse_args(argv)

    if args.version:
        from minforth import __version__
        version = 'minforth {}'.format(__version__)
        raise SystemExit(version)

    if args.max_depth < 0:
        parser.error('--max-depth must not be negative')

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(format='%(message)s', level=log_level, stream=sys.stderr)

    for path in args.files:
        if not os.path.exists(path):
            raise SystemExit('missing input file: {}'.format(path))

    session = Session(max_depth=args.max_depth, show_stack=args.show_stack)
    failures = 0
    for path in args.files:
        failures += run_file(session, path)

    if args.no_repl:
        if failures:
            raise SystemExit(1)
        return

    forth_repl(session)


if __name__ == '__main__':
    cli_main()
