"""
Clausewitz Parser

Recursive descent over the token list produced by the tokenizer.

Untyped runs are classified by a fixed cascade (first success wins):
    keys:   integer -> date -> identifier
    values: integer -> float -> bool -> date -> identifier
Quoted text is always a string.

A ``{`` opens either a list or a dict; the two only differ after the first
element. The parser reads that element as a value and looks at the next
token: ``=`` means it was really a key, so the cursor is rewound and the
block is read as a dict. Anything else makes it a list seeded with the value
already read.
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from .constants import (
    FALSE_LITERAL,
    FLOAT_PATTERN,
    INT32_MAX,
    INT32_MIN,
    INTEGER_PATTERN,
    TRUE_LITERAL,
)
from .errors import InvalidTokenError, NotADateError, UnexpectedEndError
from .tokenizer import Token, TokenKind
from .values import Date, Key, Value

logger = logging.getLogger(__name__)


# ======================================================================
# Classification
# ======================================================================

def _to_text(buf: bytes) -> str:
    return buf.decode('utf-8', errors='replace')


def classify_integer(buf: bytes) -> Optional[int]:
    """Whole buffer as a base-10 32-bit signed integer, or None"""
    if INTEGER_PATTERN.fullmatch(buf) is None:
        return None
    value = int(buf)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def classify_float(buf: bytes) -> Optional[float]:
    """``[sign]digits.digits`` as a single precision float, or None

    The integer part may be empty (``.5``); the fraction may not.
    """
    match = FLOAT_PATTERN.fullmatch(buf)
    if match is None:
        return None
    sign = '-' if match.group(1) == b'-' else ''
    text = f"{sign}{_to_text(match.group(2))}.{_to_text(match.group(3))}"
    return float(np.float32(text))


def classify_bool(buf: bytes) -> Optional[bool]:
    if buf == TRUE_LITERAL:
        return True
    if buf == FALSE_LITERAL:
        return False
    return None


def classify_date(buf: bytes) -> Optional[Date]:
    try:
        return Date.parse(buf)
    except NotADateError:
        return None


def classify_key(buf: bytes) -> Key:
    """Run the key cascade over an unquoted run"""
    integer = classify_integer(buf)
    if integer is not None:
        return Key.from_integer(integer)

    date = classify_date(buf)
    if date is not None:
        return Key.from_date(date)

    return Key.from_identifier(_to_text(buf))


def classify_value(buf: bytes) -> Value:
    """Run the value cascade over an unquoted run"""
    integer = classify_integer(buf)
    if integer is not None:
        return Value.from_integer(integer)

    number = classify_float(buf)
    if number is not None:
        return Value.from_float(number)

    flag = classify_bool(buf)
    if flag is not None:
        return Value.from_bool(flag)

    date = classify_date(buf)
    if date is not None:
        return Value.from_date(date)

    return Value.from_identifier(_to_text(buf))


# ======================================================================
# Parser
# ======================================================================

class Parser:
    """Builds a Value tree from tokens

    Example:
        tokens = Tokenizer(b"foo=bar").tokenize()
        values = Parser(tokens).parse()
    """

    def __init__(self, tokens: Sequence[Token]):
        # Comments carry no content
        self.tokens: List[Token] = [t for t in tokens if t.kind is not TokenKind.COMMENT]
        self.position = 0
        self.depth = 0

    # ========================================
    # Cursor helpers
    # ========================================

    def _at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        if self._at_end():
            return None
        return self.tokens[self.position]

    def _next(self) -> Token:
        if self._at_end():
            raise UnexpectedEndError(self.position)
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _skip_equals(self, where: str):
        """Consume an optional ``=``; a missing one is tolerated"""
        token = self._peek()
        if token is None:
            raise UnexpectedEndError(self.position)
        if token.is_equals():
            self.position += 1
        else:
            logger.info("[%s] expected equals, but found: %r", where, token)

    def _read_quoted(self) -> str:
        """Content of a quoted string; the opening quote is already consumed

        Consumes the content and the closing quote.
        """
        start = self.position
        content = self._next().as_untyped(start)
        self.position += 1
        return _to_text(content)

    # ========================================
    # Grammar
    # ========================================

    def parse(self) -> Value:
        """Parse every token into a dict

        Errors are fatal at this level.
        """
        entries: Dict[Key, Value] = {}
        logger.debug("got %d tokens to parse", len(self.tokens))

        while not self._at_end():
            key = self.parse_key()
            logger.debug("[parse] got key: %r", key)
            self._skip_equals('parse')
            value = self.parse_value()
            logger.debug("[parse] got value: %r", value)
            entries[key] = value

        return Value.from_dict(entries)

    def parse_key(self) -> Key:
        position = self.position
        token = self._next()

        if token.kind is TokenKind.QUOTE:
            return Key.from_string(self._read_quoted())
        if token.kind is TokenKind.UNTYPED:
            return classify_key(token.data)
        raise InvalidTokenError(position, token)

    def parse_value(self) -> Value:
        position = self.position
        token = self._next()

        if token.kind is TokenKind.QUOTE:
            return Value.from_string(self._read_quoted())
        if token.kind is TokenKind.UNTYPED:
            return classify_value(token.data)
        if token.kind is TokenKind.LEFT_CURLY:
            self.depth += 1
            logger.debug("[value] collection, depth now %d", self.depth)
            return self.parse_collection()
        raise InvalidTokenError(position, token)

    def parse_collection(self) -> Value:
        """Body of a ``{ ... }`` block; the opening brace is already consumed"""
        token = self._peek()
        if token is not None and token.is_right_curly():
            self.position += 1
            self.depth -= 1
            return Value.from_list()

        start = self.position
        first = self.parse_value()
        logger.debug("[collection] first entry: %r", first)

        token = self._peek()
        if token is not None and token.is_equals():
            # The first entry was a key read as a value
            self.position = start
            logger.debug("[collection] dict")
            return self.parse_dict()

        logger.debug("[collection] list")
        return self.parse_list(first)

    def _close_collection(self, where: str) -> bool:
        """Consume a ``}`` if it is next; True when the block is closed"""
        token = self._peek()
        if token is not None and token.is_right_curly():
            self.position += 1
            self.depth -= 1
            logger.debug("[%s] got right curly, depth now %d", where, self.depth)
            return True
        return False

    def _skip_comma(self):
        token = self._peek()
        if token is not None and token.kind is TokenKind.COMMA:
            self.position += 1

    def parse_dict(self) -> Value:
        entries: Dict[Key, Value] = {}

        while not self._at_end():
            if self._close_collection('parse_dict'):
                break
            try:
                key = self.parse_key()
            except InvalidTokenError as e:
                logger.info("[parse_dict] got an invalid token for key: %r", e.token)
                continue
            logger.debug("[parse_dict] got key: %r", key)

            self._skip_equals('parse_dict')
            try:
                value = self.parse_value()
            except InvalidTokenError as e:
                logger.info("[parse_dict] got an invalid token for value: %r", e.token)
                continue
            logger.debug("[parse_dict] got value: %r", value)

            entries[key] = value
            self._skip_comma()
        else:
            logger.debug("[parse_dict] reached EOF")

        return Value.from_dict(entries)

    def parse_list(self, first: Optional[Value] = None) -> Value:
        items: List[Value] = []
        if first is not None:
            items.append(first)
            self._skip_comma()

        while not self._at_end():
            if self._close_collection('parse_list'):
                break
            try:
                value = self.parse_value()
            except InvalidTokenError as e:
                logger.info("[parse_list] got an invalid token: %r", e.token)
                continue
            logger.debug("[parse_list] got value: %r", value)

            items.append(value)
            self._skip_comma()
        else:
            logger.debug("[parse_list] reached EOF")

        return Value.from_list(items)


def parse_tokens(tokens: Sequence[Token]) -> Value:
    """Parse a token list into a dict Value"""
    return Parser(tokens).parse()
