# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:14:07

from enum import Enum

# the name RootSection answers with. no user section may take it,
# whatever the letter case is.
ROOT_NAME = '~root'

# one nesting level. exact, tabs are not accepted.
INDENT = '  '

QUOTES = ("'", '"')


class LiteralTag(str, Enum):
    """Type suffixes following a numeric (or char) literal."""
    LONG = 'L'
    DOUBLE = 'D'
    CHAR = 'C'
    SHORT = 'S'
    BYTE = 'B'


# signed, inclusive.
INT8_RANGE = (-(1 << 7), (1 << 7) - 1)
INT16_RANGE = (-(1 << 15), (1 << 15) - 1)
INT32_RANGE = (-(1 << 31), (1 << 31) - 1)
INT64_RANGE = (-(1 << 63), (1 << 63) - 1)
