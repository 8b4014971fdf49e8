#!/usr/bin/env python3
import argparse
import sys

from errors import ExhaustedError
from interpreter import Interpreter
from tape import INITIAL_TAPE_SIZE


def non_negative_int(value):
    size = int(value)
    if size < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return size


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='bfi', description='Brainfuck interpreter')
    parser.add_argument('file', metavar='FILE', help='program to run')
    parser.add_argument('--tape-size', type=non_negative_int, default=INITIAL_TAPE_SIZE,
                        help=f'initially allocated cells (default: {INITIAL_TAPE_SIZE})')
    parser.add_argument('--trace', action='store_true',
                        help='print interpreter state to stderr before every instruction')
    return parser.parse_args(argv)


def run_bf(program, output, input, tape_size=INITIAL_TAPE_SIZE, trace=False):
    """Run to the end and return the exit status."""
    itp = Interpreter(program, output, input, tape_size=tape_size, trace=trace)
    err = itp.run()
    if isinstance(err, ExhaustedError):
        return 0
    print(f"bfi: {err}", file=sys.stderr)
    return 1


def main(argv=None):
    args = parse_args(argv)

    try:
        f = open(args.file, 'rb')
    except OSError as e:
        print(f"could not open file '{args.file}': {e.strerror or e}", file=sys.stderr)
        return 1

    with f:
        try:
            return run_bf(f, sys.stdout.buffer, sys.stdin.buffer,
                          tape_size=args.tape_size, trace=args.trace)
        except KeyboardInterrupt:
            return 130


if __name__ == "__main__":
    sys.exit(main())
