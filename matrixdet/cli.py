#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Command line interface: matrixdet <input file> <output file>"""

from argparse import ArgumentParser
from argparse import RawDescriptionHelpFormatter
from contextlib import ExitStack
import logging
import sys

from . import DisableLogger
from .driver import compute_determinants
from .names import *
from .stream import StreamIOError

USAGE = 'usage: matrixdet [input file pathname] [output file pathname]'


class _ArgumentParser(ArgumentParser):
    """ArgumentParser that exits with status 1 on bad arguments"""

    def error(self, message):
        print(USAGE, file=sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = _ArgumentParser(prog='matrixdet',
                             description='Read square integer matrices, each preceded by its order, and write\n'
                             'the input to the output file together with the determinant of\n'
                             'every matrix or the error that made it unreadable.',
                             epilog=USAGE,
                             formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument('input', help="path to the input text file")
    parser.add_argument('output', help="path to the output text file")
    parser.add_argument('--encoding', default=DEFAULT_ENCODING, help="encoding of input and output (default: utf-8)")
    parser.add_argument('--chunk-size', type=int, default=DEFAULT_CHUNK_SIZE,
                        help="characters read from the input at once (default: 4096)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help="also log debug messages")
    verbosity.add_argument('-q', '--quiet', action='store_true', help="do not log anything")
    return parser


def main(argv=None) -> int:
    """Parse the command line, process the input and return the exit status"""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.chunk_size < 1:
        parser.error("--chunk-size must be positive")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s',
                        stream=sys.stderr)
    with ExitStack() as stack:
        try:
            source = stack.enter_context(open(args.input, 'r', encoding=args.encoding, newline=''))
            sink = stack.enter_context(open(args.output, 'w', encoding=args.encoding, newline=''))
        except OSError as e:
            print(e, file=sys.stderr)
            print("Make sure the input/output path is correct.", file=sys.stderr)
            return 1
        if args.quiet:
            stack.enter_context(DisableLogger())
        try:
            compute_determinants(source, sink, **{CHUNK_SIZE: args.chunk_size})
        except StreamIOError as e:
            print(e, file=sys.stderr)
            return 1
    return 0


def start_from_command_line():
    """Entry point of the matrixdet console script"""
    sys.exit(main())


if __name__ == "__main__":
    start_from_command_line()
