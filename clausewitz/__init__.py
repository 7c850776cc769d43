"""
Clausewitz script parser - Package.

Parses the brace-delimited key/value format of Paradox save games and
definition files into typed values.

Modules:
    constants   - Punctuation, magic headers, numeric bounds
    errors      - Exception types
    values      - Date, Key and Value types
    tokenizer   - Byte buffer to tokens
    parser      - Tokens to a Value tree
    loader      - File reading, magic header stripping, decoding

Example:
    from clausewitz import parse
    values = parse(b"foo=bar")
"""

from .errors import (
    ClausewitzError,
    InvalidTokenError,
    InvalidValueError,
    NoTokenError,
    NotADateError,
    UnexpectedEndError,
)
from .values import Date, Key, KeyKind, Value, ValueKind
from .tokenizer import Token, TokenKind, Tokenizer, tokenize
from .parser import Parser, parse_tokens
from .loader import decode_buffer, parse_file, read_buffer, strip_magic


def parse(buffer) -> Value:
    """Parse a byte buffer into a Value

    The returned Value is always a dict.
    """
    return Parser(Tokenizer(buffer).tokenize()).parse()


__all__ = [
    'ClausewitzError', 'InvalidTokenError', 'InvalidValueError',
    'NoTokenError', 'NotADateError', 'UnexpectedEndError',
    'Date', 'Key', 'KeyKind', 'Value', 'ValueKind',
    'Token', 'TokenKind', 'Tokenizer', 'tokenize',
    'Parser', 'parse_tokens',
    'decode_buffer', 'parse_file', 'read_buffer', 'strip_magic',
    'parse',
]
