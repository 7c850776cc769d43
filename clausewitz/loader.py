"""
Loading Clausewitz files from disk.

Plain-text save games start with a magic header (``EU4txt``) and game files
are written in Windows-1252. The tokenizer wants an ASCII compatible buffer
with the header removed, so files are read, stripped and re-encoded as UTF-8
here before parsing.
"""

import logging
from pathlib import Path
from typing import Union

from .constants import DEFAULT_ENCODING, MAGIC_HEADERS
from .parser import Parser
from .tokenizer import Tokenizer
from .values import Value

logger = logging.getLogger(__name__)


def strip_magic(buffer: bytes) -> bytes:
    """Remove a leading magic header, if any"""
    for magic in MAGIC_HEADERS:
        if buffer.startswith(magic):
            logger.debug("Stripped magic header %r", magic)
            return buffer[len(magic):]
    return buffer


def decode_buffer(buffer: bytes, encoding: str = DEFAULT_ENCODING, errors: str = 'strict') -> bytes:
    """Re-encode a buffer from ``encoding`` to UTF-8

    Raises:
        UnicodeDecodeError: the buffer is not valid in ``encoding`` and
            ``errors`` is 'strict'
    """
    return bytes(buffer).decode(encoding, errors=errors).encode('utf-8')


def read_buffer(file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> bytes:
    """Read a file into a buffer ready for the tokenizer"""
    with open(file_path, 'rb') as f:
        raw = f.read()
    logger.debug("Read %d bytes from %s", len(raw), file_path)
    return decode_buffer(strip_magic(raw), encoding)


def parse_file(file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> Value:
    """Parse a Clausewitz file into a dict Value"""
    buffer = read_buffer(file_path, encoding)
    return Parser(Tokenizer(buffer).tokenize()).parse()
