# coding= utf-8
"""
The outside of the interpreter: an interactive prompt, running source files,
and a debug view of a machine's state.
"""
import argparse
import logging
import readline
import sys

from vorth.errors import ForthError
from vorth.machine import PROMPT, Machine

logger = logging.getLogger(__name__)


def format_state(machine):
    """ The stack and the user dictionary, as shown after each line by --debug. """
    return '%s %s' % (machine.data_stack, machine.words)


def read_eval_print_loop(machine, lines, write, prompt=PROMPT, debug=False):
    """
    Feed each of lines to the machine as its own eval call, writing the
    output and the prompt (or the error) after each. Stops early once the
    machine has seen BYE.
    """
    for line in lines:
        write(machine.eval(line, prompt) + '\n')

        if debug:
            write(format_state(machine) + '\n')
        if machine.exit:
            break


def run_file(machine, path):
    """ Run a whole source file as a single parse call, returning its output. """
    with open(path) as source:
        text = source.read()
    logger.debug('running %s', path)
    return machine.parse(text)


def _console_lines():
    while True:
        try:
            yield input()
        except EOFError:
            return


def _argument_parser():
    parser = argparse.ArgumentParser(
        prog='vorth',
        description='A small stack-based Forth dialect. Runs the given files, '
                    'or starts a prompt when there are none.')
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help='source file to run (each as one unit)')
    parser.add_argument('--debug', action='store_true',
                        help='show stack and words after each line, log at DEBUG')
    parser.add_argument('--prompt', default=PROMPT,
                        help='marker printed after each successful line (default: %(default)r)')
    return parser


def main(argv=None):
    parser = _argument_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    machine = Machine()
    if args.files:
        for path in args.files:
            try:
                sys.stdout.write(run_file(machine, path))
            except OSError as e:
                parser.error("can't read %s: %s" % (path, e.strerror))
            except ForthError as e:
                sys.stdout.write(e.output)
                sys.stderr.write('%s: %s\n' % (path, e.message))
                return 1
            if args.debug:
                sys.stdout.write('\n' + format_state(machine) + '\n')
            if machine.exit:
                break
        return 0

    print('Type "bye" or input an end of file (Ctrl+D) to quit.')
    read_eval_print_loop(machine, _console_lines(), sys.stdout.write,
                         prompt=args.prompt, debug=args.debug)
    return 0
