"""Tests for datascript.values."""

from uuid import UUID

import pytest

from datascript.errors import LiteralError
from datascript.values import (
    Bool,
    Char,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    ListOf,
    Str,
    Uuid,
    coerce,
    unwrap,
)

SOME_UUID = '3fae1c2a-9b7d-4e1f-8c6a-2d5e7f9a0b1c'


# ---------------------------------------------------------------------------
# construction
# ---------------------------------------------------------------------------

def test_tags_make_values_distinct():
    assert Int32(1) != Int64(1)
    assert Int16(1) != Int8(1)
    assert Str('x') != Char('x')

@pytest.mark.parametrize('cls, bad', [
    (Int8, 128),
    (Int8, -129),
    (Int16, 1 << 15),
    (Int32, 1 << 31),
    (Int64, 1 << 63),
])
def test_integer_ranges(cls, bad):
    with pytest.raises(LiteralError):
        cls(bad)

def test_integer_bounds_accepted():
    assert Int8(-128).value == -128
    assert Int64((1 << 63) - 1).value == (1 << 63) - 1

def test_integer_rejects_bool():
    with pytest.raises(LiteralError):
        Int32(True)

def test_float_normalizes_int():
    assert Float64(2).value == 2.0
    assert isinstance(Float64(2).value, float)

@pytest.mark.parametrize('bad', [float('nan'), float('inf'), -float('inf')])
def test_float_must_be_finite(bad):
    with pytest.raises(LiteralError):
        Float64(bad)

def test_char_is_one_character():
    with pytest.raises(LiteralError):
        Char('ab')
    with pytest.raises(LiteralError):
        Char('\n')

def test_uuid_from_text():
    assert Uuid(SOME_UUID).value == UUID(SOME_UUID)

def test_uuid_bad_text():
    with pytest.raises(LiteralError):
        Uuid('3fae-not-a-uuid')

def test_str_with_one_kind_of_quote():
    assert Str("it's").value == "it's"
    assert Str('say "hi"').value == 'say "hi"'

def test_str_with_both_quotes_rejected():
    with pytest.raises(LiteralError):
        Str('it\'s "odd"')

def test_str_single_line():
    with pytest.raises(LiteralError):
        Str('a\nb')

def test_list_keeps_element_tags():
    lst = ListOf([Int32(1), Int64(1), Str('1')])
    assert lst.items == (Int32(1), Int64(1), Str('1'))
    assert len(lst) == 3

def test_list_does_not_nest():
    with pytest.raises(LiteralError):
        ListOf((ListOf(()),))


# ---------------------------------------------------------------------------
# coerce / unwrap
# ---------------------------------------------------------------------------

def test_coerce_plain_values():
    assert coerce(True) == Bool(True)
    assert coerce(30) == Int32(30)
    assert coerce(1 << 40) == Int64(1 << 40)
    assert coerce(3.5) == Float64(3.5)
    assert coerce('x') == Str('x')
    assert coerce(UUID(SOME_UUID)) == Uuid(SOME_UUID)
    assert coerce([1, 'a']) == ListOf((Int32(1), Str('a')))

def test_coerce_passes_typed_values():
    assert coerce(Int8(3)) == Int8(3)

def test_coerce_too_big():
    with pytest.raises(LiteralError):
        coerce(1 << 64)

def test_coerce_unsupported():
    with pytest.raises(TypeError):
        coerce(object())

def test_unwrap():
    assert unwrap(Int64(5)) == 5
    assert unwrap(ListOf((Char('a'), Bool(False)))) == ['a', False]
