"""
Clausewitz Parser - Constants and Configuration

This module contains the constant values used throughout the parser:
- Punctuation bytes recognized by the tokenizer
- Whitespace separators
- Magic headers written in front of plain-text save games
- Numeric bounds for integer and float classification
"""

import re

import numpy as np

# ======================================================================
# TOKENIZER
# ======================================================================

EQUALS = ord('=')
QUOTE = ord('"')
LEFT_CURLY = ord('{')
RIGHT_CURLY = ord('}')
LEFT_PAREN = ord('(')
RIGHT_PAREN = ord(')')
COMMENT = ord('#')
COMMA = ord(',')

NEWLINE = ord('\n')

# Separators outside of quoted strings
WHITESPACE = frozenset(b' \t\r\n')

# ======================================================================
# LOADER
# ======================================================================

# Plain-text saves start with a 6 byte marker naming the game
MAGIC_HEADERS = (b'EU4txt', b'CK2txt')

# Game files are written in Windows-1252
DEFAULT_ENCODING = 'cp1252'

# ======================================================================
# CLASSIFICATION
# ======================================================================

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

# Byte patterns: \d only matches ASCII digits
INTEGER_PATTERN = re.compile(rb'^[+-]?\d+$')
FLOAT_PATTERN = re.compile(rb'^([+-]?)(\d*)\.(\d+)$')
DATE_PATTERN = re.compile(rb'^(\d+)\.(\d{1,2})\.(\d{1,2})$')

TRUE_LITERAL = b'yes'
FALSE_LITERAL = b'no'
