"""
Clausewitz Tokenizer

Single left-to-right scan of a byte buffer into a flat token list.
Punctuation loses its meaning inside quotes, comments run to the end of the
line, and whitespace only separates untyped runs.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .constants import (
    COMMA,
    COMMENT,
    EQUALS,
    LEFT_CURLY,
    LEFT_PAREN,
    NEWLINE,
    QUOTE,
    RIGHT_CURLY,
    RIGHT_PAREN,
    WHITESPACE,
)
from .errors import InvalidTokenError, NoTokenError

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview]


class TokenKind(Enum):
    """Lexical token kinds"""
    EQUALS = '='
    QUOTE = '"'
    LEFT_CURLY = '{'
    RIGHT_CURLY = '}'
    LEFT_PAREN = '('
    RIGHT_PAREN = ')'
    COMMENT = '#'
    COMMA = ','
    UNTYPED = 'untyped'

    @classmethod
    def from_byte(cls, byte: int) -> 'TokenKind':
        """Punctuation kind of a single byte

        Raises:
            NoTokenError: the byte is not punctuation
        """
        kind = _PUNCTUATION.get(byte)
        if kind is None:
            raise NoTokenError(byte)
        return kind


_PUNCTUATION = {
    EQUALS: TokenKind.EQUALS,
    QUOTE: TokenKind.QUOTE,
    LEFT_CURLY: TokenKind.LEFT_CURLY,
    RIGHT_CURLY: TokenKind.RIGHT_CURLY,
    LEFT_PAREN: TokenKind.LEFT_PAREN,
    RIGHT_PAREN: TokenKind.RIGHT_PAREN,
    COMMENT: TokenKind.COMMENT,
    COMMA: TokenKind.COMMA,
}


@dataclass(frozen=True, repr=False)
class Token:
    """A punctuation marker, or an untyped run viewing the source buffer

    ``view`` is a zero-copy slice of the tokenized buffer for UNTYPED tokens
    and None for punctuation. It must not outlive the buffer.
    """
    kind: TokenKind
    view: Optional[memoryview] = None

    @classmethod
    def untyped(cls, data: Buffer) -> 'Token':
        """Build an untyped token from bytes outside of a tokenizer run"""
        return cls(TokenKind.UNTYPED, memoryview(data))

    @property
    def data(self) -> bytes:
        """Copy of the untyped bytes (empty for punctuation)"""
        if self.view is None:
            return b''
        return self.view.tobytes()

    def as_untyped(self, position: int = -1) -> bytes:
        if self.kind is not TokenKind.UNTYPED:
            raise InvalidTokenError(position, self)
        return self.data

    def is_equals(self) -> bool:
        return self.kind is TokenKind.EQUALS

    def is_left_curly(self) -> bool:
        return self.kind is TokenKind.LEFT_CURLY

    def is_right_curly(self) -> bool:
        return self.kind is TokenKind.RIGHT_CURLY

    def __repr__(self) -> str:
        if self.kind is TokenKind.UNTYPED:
            return f"Untyped({self.data!r})"
        return self.kind.name.title().replace('_', '')


class Tokenizer:
    """Turns a byte buffer into tokens

    The buffer is expected to be ASCII compatible (UTF-8 or a legacy
    single-byte code page) with any magic header already removed.
    """

    def __init__(self, buffer: Buffer):
        if isinstance(buffer, str):
            raise TypeError("Tokenizer expects bytes, not str")
        self.buffer = memoryview(buffer)

    def tokenize(self) -> List[Token]:
        """Tokenize the whole buffer. Never fails."""
        buf = self.buffer
        tokens = []
        untyped_start = None
        in_quote = False
        in_comment = False

        for pos, byte in enumerate(buf):
            if in_comment:
                if byte == NEWLINE:
                    in_comment = False
                continue

            kind = _PUNCTUATION.get(byte)
            if kind is not None:
                if in_quote and kind is not TokenKind.QUOTE:
                    # Punctuation is content inside quotes
                    if untyped_start is None:
                        untyped_start = pos
                    continue

                if untyped_start is not None:
                    tokens.append(Token(TokenKind.UNTYPED, buf[untyped_start:pos]))
                    untyped_start = None
                elif in_quote:
                    # Closing quote right after the opening one
                    tokens.append(Token(TokenKind.UNTYPED, buf[pos:pos]))

                if kind is TokenKind.QUOTE:
                    in_quote = not in_quote
                elif kind is TokenKind.COMMENT:
                    in_comment = True
                tokens.append(Token(kind))
            elif in_quote:
                if untyped_start is None:
                    untyped_start = pos
            elif byte in WHITESPACE:
                if untyped_start is not None:
                    tokens.append(Token(TokenKind.UNTYPED, buf[untyped_start:pos]))
                    untyped_start = None
            elif untyped_start is None:
                untyped_start = pos

        if untyped_start is not None:
            tokens.append(Token(TokenKind.UNTYPED, buf[untyped_start:]))

        logger.debug("Tokenized %d bytes into %d tokens", len(buf), len(tokens))
        return tokens


def tokenize(buffer: Buffer) -> List[Token]:
    """Tokenize a byte buffer"""
    return Tokenizer(buffer).tokenize()
