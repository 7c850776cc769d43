"""
Clausewitz Value Model

Typed results of a parse. A document is a tree of ``Value`` nodes rooted at a
dict; dict entries are keyed by ``Key``, a restricted subset of the value
kinds. Both are tagged unions: a ``kind`` plus the ``payload`` for that kind.

    key            = string / integer / date / identifier
    value          = string / integer / float / date / identifier / boolean
    key-value-pair = key equals (value / group)
    group          = open-group *((key-value-pair / value / group) [comma]) close-group
    document       = [magic-number] *(key-value-pair [comma])
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, List, Union

import numpy as np

from .constants import DATE_PATTERN, INT32_MAX, INT32_MIN
from .errors import InvalidValueError, NotADateError


@dataclass(frozen=True, order=True)
class Date:
    """In-game date, ``year.month.day``

    Only the shape is checked; ``2018.0.45`` is a valid Date.
    """
    year: int
    month: int
    day: int

    @classmethod
    def parse(cls, text: Union[str, bytes]) -> 'Date':
        """Parse ``2018.5.16`` or ``2018.05.16``

        Raises:
            NotADateError: text does not match the date shape, or the year
                does not fit a 32-bit signed integer
        """
        raw = text
        if isinstance(raw, str):
            try:
                raw = raw.encode('ascii')
            except UnicodeEncodeError:
                raise NotADateError(text) from None

        match = DATE_PATTERN.fullmatch(bytes(raw))
        if match is None:
            raise NotADateError(text)

        year = int(match.group(1))
        if year > INT32_MAX:
            raise NotADateError(text)
        return cls(year, int(match.group(2)), int(match.group(3)))

    def __str__(self) -> str:
        return f"{self.year}.{self.month}.{self.day}"


def _check_int32(value: int) -> int:
    value = int(value)
    if not INT32_MIN <= value <= INT32_MAX:
        raise OverflowError(f"{value} does not fit a 32-bit signed integer")
    return value


class KeyKind(IntEnum):
    """Key variants, in their sort order"""
    INTEGER = 0
    STRING = 1
    DATE = 2
    IDENTIFIER = 3


@dataclass(frozen=True, order=True, repr=False)
class Key:
    """Left-hand side of a dict entry

    Hashable and totally ordered: keys sort by kind first, then by payload.
    """
    kind: KeyKind
    payload: Union[int, str, Date]

    @classmethod
    def from_integer(cls, value: int) -> 'Key':
        return cls(KeyKind.INTEGER, _check_int32(value))

    @classmethod
    def from_string(cls, value: str) -> 'Key':
        return cls(KeyKind.STRING, value)

    @classmethod
    def from_date(cls, value: Date) -> 'Key':
        return cls(KeyKind.DATE, value)

    @classmethod
    def from_identifier(cls, value: str) -> 'Key':
        return cls(KeyKind.IDENTIFIER, value)

    def _expect(self, kind: KeyKind):
        if self.kind is not kind:
            raise InvalidValueError(kind.name.lower())
        return self.payload

    def as_integer(self) -> int:
        return self._expect(KeyKind.INTEGER)

    def as_string(self) -> str:
        return self._expect(KeyKind.STRING)

    def as_date(self) -> Date:
        return self._expect(KeyKind.DATE)

    def as_identifier(self) -> str:
        return self._expect(KeyKind.IDENTIFIER)

    def to_value(self) -> 'Value':
        """Reinterpret this key as the value of the matching kind"""
        return Value(_KEY_TO_VALUE_KIND[self.kind], self.payload)

    def __repr__(self) -> str:
        return f"Key.{self.kind.name.title()}({self.payload!r})"


class ValueKind(Enum):
    """Value variants"""
    INTEGER = 'integer'
    FLOAT = 'float'
    STRING = 'string'
    DATE = 'date'
    BOOL = 'bool'
    IDENTIFIER = 'identifier'
    LIST = 'list'
    DICT = 'dict'


_KEY_TO_VALUE_KIND = {
    KeyKind.INTEGER: ValueKind.INTEGER,
    KeyKind.STRING: ValueKind.STRING,
    KeyKind.DATE: ValueKind.DATE,
    KeyKind.IDENTIFIER: ValueKind.IDENTIFIER,
}


@dataclass(frozen=True, repr=False)
class Value:
    """Any node of a parsed document: a scalar or a nested collection

    Payload types per kind:
        INTEGER     int within the 32-bit signed range
        FLOAT       float rounded to single precision
        STRING      str (was quoted in the source)
        DATE        Date
        BOOL        bool
        IDENTIFIER  str (was bare in the source)
        LIST        list of Value, in source order
        DICT        dict of Key -> Value, duplicate keys keep the last value
    """
    kind: ValueKind
    payload: Any

    # Collections are mutable payloads
    __hash__ = None

    @classmethod
    def from_integer(cls, value: int) -> 'Value':
        return cls(ValueKind.INTEGER, _check_int32(value))

    @classmethod
    def from_float(cls, value) -> 'Value':
        return cls(ValueKind.FLOAT, float(np.float32(value)))

    @classmethod
    def from_string(cls, value: str) -> 'Value':
        return cls(ValueKind.STRING, value)

    @classmethod
    def from_date(cls, value: Date) -> 'Value':
        return cls(ValueKind.DATE, value)

    @classmethod
    def from_bool(cls, value: bool) -> 'Value':
        return cls(ValueKind.BOOL, bool(value))

    @classmethod
    def from_identifier(cls, value: str) -> 'Value':
        return cls(ValueKind.IDENTIFIER, value)

    @classmethod
    def from_list(cls, values: List['Value'] = None) -> 'Value':
        return cls(ValueKind.LIST, list(values) if values is not None else [])

    @classmethod
    def from_dict(cls, entries: Dict[Key, 'Value'] = None) -> 'Value':
        return cls(ValueKind.DICT, dict(entries) if entries is not None else {})

    # ========================================
    # Typed accessors
    # ========================================

    def _expect(self, kind: ValueKind):
        if self.kind is not kind:
            raise InvalidValueError(kind.value)
        return self.payload

    def as_integer(self) -> int:
        return self._expect(ValueKind.INTEGER)

    def as_float(self) -> float:
        return self._expect(ValueKind.FLOAT)

    def as_string(self) -> str:
        return self._expect(ValueKind.STRING)

    def as_bool(self) -> bool:
        return self._expect(ValueKind.BOOL)

    def as_list(self) -> List['Value']:
        return self._expect(ValueKind.LIST)

    def as_dict(self) -> Dict[Key, 'Value']:
        return self._expect(ValueKind.DICT)

    def as_identifier(self) -> str:
        return self._expect(ValueKind.IDENTIFIER)

    def as_date(self) -> Date:
        return self._expect(ValueKind.DATE)

    # ========================================
    # Convenience
    # ========================================

    def get(self, name, default=None):
        """Look up a dict entry by a plain Python key

        A ``str`` matches an identifier key first, then a quoted string key.
        An ``int`` matches an integer key and a ``Date`` a date key. A ``Key``
        is used as is.

        Raises:
            InvalidValueError: this value is not a dict
        """
        entries = self.as_dict()

        if isinstance(name, Key):
            candidates = (name,)
        elif isinstance(name, Date):
            candidates = (Key.from_date(name),)
        elif isinstance(name, int) and not isinstance(name, bool):
            candidates = (Key(KeyKind.INTEGER, name),)
        elif isinstance(name, str):
            candidates = (Key.from_identifier(name), Key.from_string(name))
        else:
            candidates = ()

        for key in candidates:
            if key in entries:
                return entries[key]
        return default

    def to_python(self):
        """Convert to plain Python containers

        Dict keys become their payloads (``int``, ``str`` or ``Date``). A
        quoted and a bare key with the same text collapse into one entry, the
        later one winning.
        """
        if self.kind is ValueKind.LIST:
            return [item.to_python() for item in self.payload]
        if self.kind is ValueKind.DICT:
            return {key.payload: item.to_python() for key, item in self.payload.items()}
        return self.payload

    def __repr__(self) -> str:
        return f"Value.{self.kind.name.title()}({self.payload!r})"
