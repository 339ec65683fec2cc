# -*- encoding: utf-8 -*-
# @File   : values.py
# @Time   : 2024/11/02 22:03:31

"""Typed scalar values.

Each literal class of the text format has its own (frozen) dataclass,
so `Int32(1) != Int64(1)`, which is exactly what the `L` suffix says.
"""

from dataclasses import dataclass
from math import isfinite
from typing import Any, ClassVar, Union
from uuid import UUID

from .consts import (
    INT8_RANGE, INT16_RANGE, INT32_RANGE, INT64_RANGE, QUOTES
)
from .errors import LiteralError

__all__ = [
    'Bool', 'Int32', 'Int64', 'Float64', 'Int16', 'Int8',
    'Char', 'Uuid', 'Str', 'ListOf',
    'ScalarValue', 'TypedValue', 'SCALAR_TYPES',
    'coerce', 'unwrap'
]


@dataclass(frozen=True)
class Bool:
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise LiteralError(f'Bool expects a bool, got {self.value!r}')


@dataclass(frozen=True)
class _Integer:
    value: int
    _bounds: ClassVar[tuple[int, int]] = INT32_RANGE

    def __post_init__(self) -> None:
        kind = type(self).__name__
        # bool is an int subclass, but True is not 1L.
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise LiteralError(f'{kind} expects an int, got {self.value!r}')
        lo, hi = self._bounds
        if not lo <= self.value <= hi:
            raise LiteralError(
                f'{self.value} is out of {kind} range [{lo}, {hi}]')


@dataclass(frozen=True)
class Int32(_Integer):
    _bounds: ClassVar[tuple[int, int]] = INT32_RANGE


@dataclass(frozen=True)
class Int64(_Integer):
    _bounds: ClassVar[tuple[int, int]] = INT64_RANGE


@dataclass(frozen=True)
class Int16(_Integer):
    _bounds: ClassVar[tuple[int, int]] = INT16_RANGE


@dataclass(frozen=True)
class Int8(_Integer):
    _bounds: ClassVar[tuple[int, int]] = INT8_RANGE


@dataclass(frozen=True)
class Float64:
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) \
                or not isinstance(self.value, (int, float)):
            raise LiteralError(f'Float64 expects a float, got {self.value!r}')
        # no literal spells nan or inf.
        if not isfinite(self.value):
            raise LiteralError(f'Float64 must be finite, got {self.value!r}')
        object.__setattr__(self, 'value', float(self.value))


@dataclass(frozen=True)
class Char:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise LiteralError(
                f'Char expects exactly one character, got {self.value!r}')
        if self.value in '\r\n':
            raise LiteralError('Char cannot hold a line break')


@dataclass(frozen=True)
class Uuid:
    value: UUID

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            try:
                object.__setattr__(self, 'value', UUID(self.value))
            except ValueError as e:
                raise LiteralError(f'bad uuid {self.value!r}') from e
        elif not isinstance(self.value, UUID):
            raise LiteralError(f'Uuid expects a UUID, got {self.value!r}')


@dataclass(frozen=True)
class Str:
    """A string literal.

    There is no escaping in the format, thus a body holding *both* quote
    characters (or any line break) has no literal form and is refused here.
    """
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise LiteralError(f'Str expects a str, got {self.value!r}')
        if '\n' in self.value or '\r' in self.value:
            raise LiteralError(f'Str cannot span lines: {self.value!r}')
        if all(q in self.value for q in QUOTES):
            raise LiteralError(
                f'Str cannot mix both quote characters: {self.value!r}')


SCALAR_TYPES = (Bool, Int32, Int64, Float64, Int16, Int8, Char, Uuid, Str)

ScalarValue = Union[Bool, Int32, Int64, Float64, Int16, Int8, Char, Uuid, Str]


@dataclass(frozen=True)
class ListOf:
    """Elements may differ in type; each keeps its own tag. No nesting."""
    items: tuple[ScalarValue, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for i in items:
            if not isinstance(i, SCALAR_TYPES):
                raise LiteralError(
                    f'list element must be a scalar value, got {i!r}')
        object.__setattr__(self, 'items', items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


TypedValue = Union[ScalarValue, ListOf]


def coerce(obj: Any) -> TypedValue:
    """Pick the typed value a plain Python object would be written as.

    Ints go to `Int32` while they fit, `Int64` otherwise.
    One-character strings stay `Str`, ask for `Char` explicitly.
    """
    if isinstance(obj, (ListOf, *SCALAR_TYPES)):
        return obj
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        lo, hi = INT32_RANGE
        return Int32(obj) if lo <= obj <= hi else Int64(obj)
    if isinstance(obj, float):
        return Float64(obj)
    if isinstance(obj, str):
        return Str(obj)
    if isinstance(obj, UUID):
        return Uuid(obj)
    if isinstance(obj, (list, tuple)):
        items = [coerce(i) for i in obj]
        return ListOf(tuple(items))
    raise TypeError(f'cannot store {type(obj).__name__} value {obj!r}')


def unwrap(value: TypedValue) -> Any:
    """Plain Python payload; lists come back as `list`."""
    if isinstance(value, ListOf):
        return [i.value for i in value.items]
    return value.value
