"""Tests for field enumeration and name normalization."""

from dataclasses import dataclass
from typing import NamedTuple

import pytest

from datascript.reflect import (
    ignore_field,
    is_structured,
    iter_fields,
    normalize_naming,
)


@pytest.mark.parametrize('name, expected', [
    ('maxPlayers', 'max players'),
    ('max_players', 'max players'),
    ('spawn_point.X', 'spawn point x'),
    ('HTTPServer', 'httpserver'),
    ('  weird--Name!! ', 'weird name'),
    ('level2Boss', 'level2boss'),
    ('maxÉquipes', 'max équipes'),
    ('größeWert', 'größe wert'),
    ('', ''),
    ('   ', '   '),
])
def test_normalize_naming(name, expected):
    assert normalize_naming(name) == expected


@dataclass
class Point:
    x: int = 0
    y: int = 0
    label: str = ignore_field(default='', metadata={'doc': 'not stored'})


class Pair(NamedTuple):
    left: int
    right: int


def test_dataclass_fields():
    assert list(iter_fields(Point(1, 2))) == [('x', 1), ('y', 2)]


def test_ignore_field_keeps_metadata():
    from dataclasses import fields
    label = [i for i in fields(Point) if i.name == 'label'][0]
    assert label.metadata['doc'] == 'not stored'


def test_namedtuple_fields():
    assert list(iter_fields(Pair(1, 2))) == [('left', 1), ('right', 2)]


def test_mapping_fields():
    assert list(iter_fields({'a': 1})) == [('a', 1)]


def test_unsupported():
    with pytest.raises(TypeError):
        list(iter_fields(42))


def test_is_structured():
    assert is_structured(Point())
    assert is_structured(Pair(1, 2))
    assert not is_structured(Point)
    assert not is_structured(3)
    assert not is_structured('text')
    assert not is_structured([1, 2])
    assert not is_structured((1, 2))
