# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 22:41:10

"""
The node tree: scalars hanging off sections, all under one root.

A section owns its children exclusively, keyed by name, so there is
never a second node answering to the same key. Children are kept in
insertion order, which is the order they get written back.
"""

from abc import ABCMeta, abstractmethod
from typing import Iterable, Iterator

from .consts import ROOT_NAME
from .errors import InvalidKey
from .values import TypedValue, coerce

__all__ = [
    'ConfigNode', 'ScalarNode', 'SectionNode', 'RootSection', 'check_key'
]

# any of these would break the `name = value` / `name {` line shapes.
_FORBIDDEN = ('=', '{', '}', '\n', '\r')


def check_key(name: str) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidKey(f'node name must be a non-empty str, got {name!r}')
    if name != name.strip():
        raise InvalidKey(f'node name has surrounding whitespace: {name!r}')
    for i in _FORBIDDEN:
        if i in name:
            raise InvalidKey(f'node name cannot contain {i!r}: {name!r}')
    return name


class ConfigNode(metaclass=ABCMeta):
    """One entry of the tree, either a scalar or a section."""

    def __init__(self, name: str) -> None:
        self._name = check_key(name)

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def renamed(self, name: str) -> 'ConfigNode':
        raise NotImplementedError


class ScalarNode(ConfigNode):
    def __init__(self, name: str, value: TypedValue) -> None:
        super().__init__(name)
        self.value = value

    @property
    def value(self) -> TypedValue:
        return self._value

    @value.setter
    def value(self, val: TypedValue) -> None:
        # "no value" is spelled by removing the node.
        if val is None:
            raise ValueError(f'scalar "{self._name}" cannot hold None')
        self._value = coerce(val)

    def renamed(self, name: str) -> 'ScalarNode':
        return ScalarNode(name, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarNode):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f'{self._name} = {self._value!r}'


class SectionNode(ConfigNode):
    def __init__(self, name: str, nodes: Iterable[ConfigNode] = ()) -> None:
        super().__init__(name)
        self._check_reserved(name)
        self._nodes: dict[str, ConfigNode] = {}
        for i in nodes:
            self.add(i)

    @staticmethod
    def _check_reserved(name: str) -> None:
        if name.lower() == ROOT_NAME:
            raise InvalidKey(f'"{name}" is reserved for the root section')

    @property
    def nodes(self) -> dict[str, ConfigNode]:
        return self._nodes

    def add(self, node: ConfigNode) -> None:
        """Insert `node`, replacing (in place) any child of the same name."""
        if not isinstance(node, ConfigNode):
            raise TypeError(f'expect a ConfigNode, got {node!r}')
        self._nodes[node.name] = node

    def remove(self, name: str) -> ConfigNode | None:
        return self._nodes.pop(name, None)

    def get(self, name: str) -> ConfigNode | None:
        return self._nodes.get(name)

    def clear(self) -> None:
        """Drop every descendant, depth first."""
        for i in list(self._nodes.values()):
            if isinstance(i, SectionNode):
                i.clear()
        self._nodes.clear()

    def renamed(self, name: str) -> 'SectionNode':
        # a fresh node, the children themselves are shared.
        return SectionNode(name, self._nodes.values())

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self) -> Iterator[ConfigNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SectionNode):
            return NotImplemented
        # dict equality ignores order, which is what "same children" means.
        return self._name == other._name and self._nodes == other._nodes

    __hash__ = None

    def __repr__(self) -> str:
        return '%s { .cnt = %d }' % (self._name, len(self._nodes))


class RootSection(SectionNode):
    """The top of a tree. Its name is always `~root`."""

    def __init__(self, nodes: Iterable[ConfigNode] = ()) -> None:
        super().__init__(ROOT_NAME, nodes)

    @staticmethod
    def _check_reserved(name: str) -> None:
        return

    def renamed(self, name: str) -> SectionNode:
        raise InvalidKey('the root section cannot be renamed')
