# -*- encoding: utf-8 -*-
# @File   : section.py
# @Time   : 2024/11/05 19:12:40

"""
Keyed access to a section of the tree.

`ConfigSection` is only a view; the nodes stay in the `SectionNode` it wraps,
so two views over one node always agree.
"""

import warnings
from collections.abc import Mapping, MutableMapping
from copy import deepcopy
from typing import Any, Iterator, Union

from .consts import ROOT_NAME
from .errors import InvalidKey
from .model import ConfigNode, RootSection, ScalarNode, SectionNode
from .reflect import is_structured, iter_fields, normalize_naming
from .values import SCALAR_TYPES, ListOf, TypedValue, coerce, unwrap

__all__ = ['ConfigSection']

_TYPED = (ListOf, *SCALAR_TYPES)


def _matches(val: TypedValue, kind: type) -> bool:
    if isinstance(kind, type) and issubclass(kind, _TYPED):
        return isinstance(val, kind)
    data = unwrap(val)
    # True is an int to Python, not to us.
    if isinstance(data, bool) and kind is not bool:
        return False
    return isinstance(data, kind)


class ConfigSection(MutableMapping[str, Union[TypedValue, 'ConfigSection']]):
    """Scalars read back as typed values, subsections as `ConfigSection`.

    Setting plain Python values converts them (see `values.coerce`),
    setting `None` removes the key.
    """
    def __init__(self, section: SectionNode) -> None:
        self._section = section

    @property
    def node(self) -> SectionNode:
        return self._section

    @property
    def name(self) -> str:
        return self._section.name

    @property
    def is_root(self) -> bool:
        return isinstance(self._section, RootSection)

    normalize_naming = staticmethod(normalize_naming)

    # ---- mapping protocol ----

    def __getitem__(self, key: str) -> Union[TypedValue, 'ConfigSection']:
        node = self._section.get(key)
        if node is None:
            raise KeyError(key)
        if isinstance(node, ScalarNode):
            return node.value
        return ConfigSection(node)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if self._section.remove(key) is None:
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return key in self._section

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._section.nodes))

    def __len__(self) -> int:
        return len(self._section)

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self))

    # ---- queries ----

    def nodes(self) -> tuple[ConfigNode, ...]:
        return tuple(self._section)

    def value(self, key: str) -> TypedValue | None:
        """The typed value under `key`; `None` if absent or a section."""
        node = self._section.get(key)
        return node.value if isinstance(node, ScalarNode) else None

    def get(self, key: str, default: Any = None, kind: type | None = None):
        """Plain payload under `key`.

        `kind` may be a Python type (`int`, `str`, ...) or a value class
        (`Int64`, `Char`, ...). On a mismatch, like on a missing key,
        `default` comes back instead of an error.
        """
        val = self.value(key)
        if val is None:
            return default
        if kind is not None and not _matches(val, kind):
            return default
        return unwrap(val)

    def getlist(self, key: str, default: Any = None) -> list | Any:
        val = self.value(key)
        return unwrap(val) if isinstance(val, ListOf) else default

    def getbool(self, key: str, default: bool | None = None):
        return self.get(key, default, bool)

    def getint(self, key: str, default: int | None = None):
        return self.get(key, default, int)

    def getfloat(self, key: str, default: float | None = None):
        return self.get(key, default, float)

    def getstr(self, key: str, default: str | None = None):
        return self.get(key, default, str)

    def section(self, key: str) -> 'ConfigSection | None':
        node = self._section.get(key)
        return ConfigSection(node) if isinstance(node, SectionNode) else None

    # ---- mutations ----

    def set(self, key: str, value: Any) -> None:
        """Create or overwrite `key`.

        A scalar already there is updated in place; a section there is
        replaced by the new scalar. Mappings and sections become (copied)
        subsections.
        """
        if value is None:
            self.unset(key)
            return
        if isinstance(value, ConfigSection):
            value = value.node
        if isinstance(value, SectionNode):
            self._section.add(SectionNode(key, deepcopy(list(value))))
            return
        if isinstance(value, Mapping):
            sub = ConfigSection(SectionNode(key))
            for k, v in value.items():
                sub.set(k, v)
            self._section.add(sub.node)
            return

        typed = coerce(value)
        node = self._section.get(key)
        if isinstance(node, ScalarNode):
            node.value = typed
        else:
            self._section.add(ScalarNode(key, typed))

    def unset(self, key: str) -> None:
        self._section.remove(key)

    def rename(self, key: str, new_key: str) -> None:
        """Replace the node under `key` with an equal one named `new_key`.

        The renamed node goes to the end of the section. A node already
        named `new_key` is overwritten (with a warning).
        """
        node = self._section.get(key)
        if node is None or key == new_key:
            return
        renamed = node.renamed(new_key)  # may raise InvalidKey
        if new_key in self._section:
            warnings.warn(
                f'"{new_key}" already exists in [{self.name}], '
                'it is overwritten by the rename.')
            self._section.remove(new_key)
        self._section.remove(key)
        self._section.add(renamed)

    def create_section(self, key: str) -> 'ConfigSection':
        """Get the subsection `key`, creating it if needed.

        Raises:
            InvalidKey: `key` is the root's name, in any letter case.
        """
        if key.lower() == ROOT_NAME:
            raise InvalidKey(f'"{key}" is reserved for the root section')
        if (found := self.section(key)) is not None:
            return found
        node = SectionNode(key)
        self._section.add(node)
        return ConfigSection(node)

    section_or_new = create_section

    def store(self, key: str, obj: Any) -> 'ConfigSection':
        """Write every (non-ignored) field of `obj` into subsection `key`.

        Field names go through `normalize_naming()` first. Fields that are
        structured objects themselves are stored as nested sections.
        """
        target = self.section_or_new(key)
        for name, val in iter_fields(obj):
            name = normalize_naming(name)
            if not isinstance(val, _TYPED) and is_structured(val):
                target.store(name, val)
            else:
                target.set(name, val)
        return target
