"""Exception types raised by the tokenizer, parser and value accessors"""


class ClausewitzError(Exception):
    """Base class for every error raised by this package"""


class NoTokenError(ClausewitzError):
    """A byte is not one of the punctuation characters"""

    def __init__(self, byte: int = None):
        self.byte = byte
        super().__init__("not a token")


class InvalidTokenError(ClausewitzError):
    """A token appeared where the grammar requires a different shape"""

    def __init__(self, position: int, token=None):
        self.position = position
        self.token = token
        super().__init__(f"invalid token at position {position}: {token!r}")


class UnexpectedEndError(ClausewitzError):
    """The token list ended where the grammar requires another token"""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"unexpected end of input at position {position}")


class InvalidValueError(ClausewitzError, TypeError):
    """An accessor was called on a key or value of a different kind

    ``expected`` names the kind that was requested, never the actual one.
    """

    def __init__(self, expected: str):
        self.expected = expected
        super().__init__(f"invalid value type: {expected}")


class NotADateError(ClausewitzError, ValueError):
    """Text does not have the ``year.month.day`` shape"""

    def __init__(self, text=None):
        self.text = text
        super().__init__("not a date")
