# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2024/11/03 14:27:52

"""Literal <-> typed value.

    | literal              | value   |
    |----------------------|---------|
    | `true`, `FALSE`      | Bool    |
    | `uuid('...')`        | Uuid    |
    | `'abc'`, `"abc"`     | Str     |
    | `42`                 | Int32   |
    | `42L`                | Int64   |
    | `4.2D`               | Float64 |
    | `'c'C`               | Char    |
    | `42S`                | Int16   |
    | `42B`                | Int8    |
    | `[1, 'a', 2L]`       | ListOf  |
    | anything else        | Str (kept verbatim) |

The first matching row wins, so `'true'` is a string and `true` is not.
"""

from re import compile as regex

from .consts import INDENT, QUOTES, LiteralTag
from .errors import LiteralError
from .values import (
    Bool, Char, Float64, Int8, Int16, Int32, Int64, ListOf, Str, Uuid,
    ScalarValue, TypedValue
)

__all__ = ['classify', 'render', 'render_scalar', 'split_elements']

_UUID = regex(r"uuid\('(.*)'\)")
_INT = regex(r'-?[0-9]+')
_LONG = regex(r'(-?[0-9]+)L')
_DOUBLE = regex(r'(-?[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?)D')
_CHAR = regex(r"'(.)'C")
_SHORT = regex(r'(-?[0-9]+)S')
_BYTE = regex(r'(-?[0-9]+)B')


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text[0] in QUOTES and text[-1] == text[0]


def _classify(text: str, in_list: bool = False) -> TypedValue:
    if text.lower() in ('true', 'false'):
        return Bool(text.lower() == 'true')
    if m := _UUID.fullmatch(text):
        return Uuid(m[1])
    if _is_quoted(text):
        return Str(text[1:-1])
    if _INT.fullmatch(text):
        return Int32(int(text))
    if m := _LONG.fullmatch(text):
        return Int64(int(m[1]))
    if m := _DOUBLE.fullmatch(text):
        return Float64(float(m[1]))
    if m := _CHAR.fullmatch(text):
        return Char(m[1])
    if m := _SHORT.fullmatch(text):
        return Int16(int(m[1]))
    if m := _BYTE.fullmatch(text):
        return Int8(int(m[1]))
    # lists don't nest; a bracketed element is just text.
    if not in_list and text.startswith('[') and text.endswith(']'):
        return _parse_list(text)
    return Str(text)


def split_elements(body: str) -> list[str]:
    """Split a list body on commas that are not inside a quoted literal."""
    parts: list[str] = []
    start, i, n = 0, 0, len(body)
    while i < n:
        c = body[i]
        if _CHAR.match(body, i):  # `','C` and `'''C` alike
            i += 4
            continue
        if c in QUOTES:
            end = body.find(c, i + 1)
            i = n if end < 0 else end + 1
            continue
        if c == ',':
            parts.append(body[start:i].strip())
            start = i + 1
        i += 1
    parts.append(body[start:].strip())
    return parts


def _parse_list(text: str) -> ListOf:
    body = text[1:-1].strip()
    # empty pieces only come from stray commas, `[1, 2,]`.
    return ListOf(tuple(
        _classify(i, in_list=True) for i in split_elements(body) if i
    ))


def classify(text: str) -> TypedValue:
    """Parse one (already joined) literal.

    Raises:
        LiteralError: numbers out of their type's range, bad uuids,
        strings the format cannot hold. An unclosed `[...` is plain text.
    """
    return _classify(text.strip())


def _render_double(val: float) -> str:
    # repr() round-trips; only `1e+16`-like forms lack the dot we need.
    mantissa, e, exp = repr(val).partition('e')
    if '.' not in mantissa:
        mantissa += '.0'
    return f'{mantissa}{e}{exp}{LiteralTag.DOUBLE.value}'


def render_scalar(value: ScalarValue) -> str:
    match value:
        case Bool(v):
            return 'true' if v else 'false'
        case Int32(v):
            return str(v)
        case Int64(v):
            return f'{v}{LiteralTag.LONG.value}'
        case Float64(v):
            return _render_double(v)
        case Int16(v):
            return f'{v}{LiteralTag.SHORT.value}'
        case Int8(v):
            return f'{v}{LiteralTag.BYTE.value}'
        case Char(v):
            return f"'{v}'{LiteralTag.CHAR.value}"
        case Uuid(v):
            return f"uuid('{v}')"
        case Str(v):
            quote = '"' if "'" in v else "'"
            return f'{quote}{v}{quote}'
        case _:
            raise LiteralError(f'no literal form for {value!r}')


def render(value: TypedValue, indent: str = '') -> str:
    """Literal text of `value`.

    Lists take one element per line, one level deeper than `indent`,
    with the closing bracket back at `indent`.
    """
    if not isinstance(value, ListOf):
        return render_scalar(value)
    if not value.items:
        return '[]'
    inner = indent + INDENT
    body = ',\n'.join(inner + render_scalar(i) for i in value.items)
    return f'[\n{body}\n{indent}]'
