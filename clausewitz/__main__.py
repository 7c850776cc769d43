"""Clausewitz dump tool - CLI entry point.

Reads a Clausewitz file and prints either its tokens or the parsed tree.

Usage:
    python -m clausewitz <input_file> [--tokens] [--encoding ENC] [-v]

Examples:
    python -m clausewitz examples/game_samples/history_sample.txt
    python -m clausewitz autosave.eu4 --tokens
    python -m clausewitz common/defines.txt --encoding utf-8-sig -v
"""

import argparse
import logging
import os
import sys
from pprint import pprint

from .constants import DEFAULT_ENCODING
from .errors import ClausewitzError
from .loader import read_buffer, strip_magic
from .parser import Parser
from .tokenizer import Tokenizer


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='clausewitz',
        description='Print the tokens or the parsed values of a Clausewitz file.',
    )
    parser.add_argument(
        'input_file',
        help='Path to a save game or script file.',
    )
    parser.add_argument(
        '-t', '--tokens',
        action='store_true',
        help='Print the raw token list instead of the parsed values.',
    )
    parser.add_argument(
        '-e', '--encoding',
        default=DEFAULT_ENCODING,
        help=f'Encoding of the input file (default: {DEFAULT_ENCODING}).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    input_path = os.path.abspath(args.input_file)
    if not os.path.isfile(input_path):
        print(f"Error: Input file not found: {input_path}")
        return 1

    print(f"open: {input_path}")

    if args.tokens:
        # Tokens are shown for the raw bytes, without decoding
        with open(input_path, 'rb') as f:
            buffer = strip_magic(f.read())
        tokens = Tokenizer(buffer).tokenize()
        print("Tokens:")
        pprint(tokens)
        return 0

    try:
        buffer = read_buffer(input_path, args.encoding)
        values = Parser(Tokenizer(buffer).tokenize()).parse()
    except (ClausewitzError, UnicodeDecodeError) as e:
        print(f"Error: Failed to parse {input_path}: {e}")
        return 2

    print("Values:")
    pprint(values.to_python())
    return 0


if __name__ == '__main__':
    sys.exit(main())
