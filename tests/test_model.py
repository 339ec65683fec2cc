"""Tests for datascript.model."""

import pytest

from datascript.errors import InvalidKey
from datascript.model import (
    ConfigNode, RootSection, ScalarNode, SectionNode, check_key
)
from datascript.values import Int32, Int64, Str


class TestCheckKey:
    def test_plain_names(self):
        assert check_key('max players') == 'max players'
        assert check_key('~root') == '~root'

    @pytest.mark.parametrize('bad', ['', ' a', 'a ', 'a=b', 'a{', 'b}', 'a\nb'])
    def test_rejected(self, bad):
        with pytest.raises(InvalidKey):
            check_key(bad)


class TestScalarNode:
    def test_value_is_coerced(self):
        node = ScalarNode('age', 30)
        assert node.value == Int32(30)

    def test_none_is_not_a_value(self):
        with pytest.raises(ValueError):
            ScalarNode('age', None)

    def test_renamed_keeps_value(self):
        node = ScalarNode('age', Int64(30)).renamed('years')
        assert node.name == 'years'
        assert node.value == Int64(30)

    def test_equality(self):
        assert ScalarNode('a', 1) == ScalarNode('a', Int32(1))
        assert ScalarNode('a', 1) != ScalarNode('a', Int64(1))
        assert ScalarNode('a', 1) != ScalarNode('b', 1)


class TestSectionNode:
    def test_root_name_reserved(self):
        with pytest.raises(InvalidKey):
            SectionNode('~root')
        with pytest.raises(InvalidKey):
            SectionNode('~Root')

    def test_add_replaces_same_name_in_place(self):
        sect = SectionNode('s', [ScalarNode('a', 1), ScalarNode('b', 2)])
        sect.add(ScalarNode('a', 3))
        assert len(sect) == 2
        assert [i.name for i in sect] == ['a', 'b']
        assert sect.get('a').value == Int32(3)

    def test_remove_missing(self):
        assert SectionNode('s').remove('nope') is None

    def test_clear_is_recursive(self):
        inner = SectionNode('inner', [ScalarNode('x', 1)])
        outer = SectionNode('outer', [inner])
        outer.clear()
        assert len(outer) == 0
        assert len(inner) == 0

    def test_renamed_shares_children(self):
        child = ScalarNode('x', 1)
        sect = SectionNode('old', [child]).renamed('new')
        assert sect.name == 'new'
        assert sect.get('x') is child

    def test_equality_ignores_order(self):
        a = SectionNode('s', [ScalarNode('x', 1), ScalarNode('y', 'z')])
        b = SectionNode('s', [ScalarNode('y', Str('z')), ScalarNode('x', 1)])
        assert a == b

    def test_scalar_is_not_section(self):
        assert ScalarNode('s', 1) != SectionNode('s')


class TestRootSection:
    def test_name(self):
        assert RootSection().name == '~root'

    def test_cannot_rename(self):
        with pytest.raises(InvalidKey):
            RootSection().renamed('other')

    def test_equal_roots(self):
        assert RootSection([ScalarNode('a', 1)]) == RootSection([ScalarNode('a', 1)])


def test_config_node_is_abstract():
    with pytest.raises(TypeError):
        ConfigNode('x')
