# -*- encoding: utf-8 -*-
# @File   : interchange.py
# @Time   : 2024/11/09 15:36:44

"""Dump a tree as JSON / YAML, or build one from such a file.

Both are *lossy*: a mapping has no room for `L`/`S`/`B`/`C` tags,
so reading back re-guesses every type (ints become `Int32`, or `Int64`
when too large, UUIDs come back as strings). Use them to hand
configuration over to other tools, not for storage.
"""

import json
import logging
from abc import abstractmethod
from collections.abc import Mapping
from typing import Any
from uuid import UUID

import yaml

from .abstract import FileHandler
from .errors import DataScriptError, IOFailure, MalformedInput
from .model import RootSection, ScalarNode, SectionNode
from .section import ConfigSection
from .values import unwrap

__all__ = [
    'to_plain', 'from_plain', 'DataScriptJsonParser', 'DataScriptYamlParser'
]


def _plain_scalar(val: Any) -> Any:
    return str(val) if isinstance(val, UUID) else val


def to_plain(section: SectionNode) -> dict[str, Any]:
    """Sections to dicts, scalars to their payloads."""
    ret: dict[str, Any] = {}
    for i in section:
        if isinstance(i, ScalarNode):
            val = unwrap(i.value)
            ret[i.name] = (
                [_plain_scalar(j) for j in val] if isinstance(val, list)
                else _plain_scalar(val)
            )
        else:
            ret[i.name] = to_plain(i)
    return ret


def _storable(obj: Any) -> Any:
    if obj is None or isinstance(obj, (bool, int, float, str, UUID)):
        return obj
    if isinstance(obj, Mapping):
        return {k: _storable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        # lists don't nest, anything fancy inside becomes text.
        return [
            i if isinstance(i, (bool, int, float, str)) else str(i)
            for i in obj if i is not None
        ]
    # e.g. dates from YAML.
    logging.debug(f'{obj!r} is stored as text.')
    return str(obj)


def _fill(src: Mapping[str, Any], ins: SectionNode, path: str) -> None:
    view = ConfigSection(ins)
    for k, v in src.items():
        key = str(k)
        if v is None:
            continue
        try:
            if isinstance(v, Mapping):
                sub = SectionNode(key)
                _fill(v, sub, f'{path}{key}.')
                ins.add(sub)
            else:
                view.set(key, _storable(v))
        except DataScriptError as e:
            logging.warning(f'entry {path}{key} skipped, {e}')


def from_plain(
    src: Mapping[str, Any] | None, ins: SectionNode | None = None
) -> SectionNode:
    """Fill `ins` (a new `RootSection` by default) from nested mappings.

    `None` values are skipped, the same as `set(key, None)`. Entries the
    format cannot hold (multi-line strings, keys with `=`, NaN, ...) are
    logged and skipped, like bad lines in a text file.
    """
    if ins is None:
        ins = RootSection()
    if src is None:
        return ins
    if not isinstance(src, Mapping):
        raise DataScriptError(
            f'expect a mapping at the top level, got {type(src).__name__}')
    # `ins` is only touched once the whole mapping has been converted.
    loaded = RootSection()
    _fill(src, loaded, '')
    for i in loaded:
        ins.add(i)
    return ins


# should keep this base class for better type hinting.
class PlainTreeParser(FileHandler[RootSection]):
    @abstractmethod
    def _load(self, fp) -> Any:
        raise NotImplementedError

    @abstractmethod
    def _dump(self, data: dict[str, Any], fp) -> None:
        raise NotImplementedError

    def read(self) -> RootSection:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                data = self._load(fp)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise MalformedInput(f'cannot read {self._fn}: {e}') from e
        return from_plain(data)

    def write(self, instance: SectionNode) -> None:
        data = to_plain(instance)
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                self._dump(data, fp)
        except OSError as e:
            raise IOFailure(f'cannot write {self._fn}: {e}') from e


class DataScriptJsonParser(PlainTreeParser):
    def __init__(self, filename: str, encoding: str = 'utf-8',
                 indent: int = 2) -> None:
        super().__init__(filename, encoding)
        self._indent = indent

    def _load(self, fp) -> Any:
        return json.load(fp)

    def _dump(self, data: dict[str, Any], fp) -> None:
        json.dump(data, fp, ensure_ascii=False, indent=self._indent)


class DataScriptYamlParser(PlainTreeParser):
    def _load(self, fp) -> Any:
        return yaml.load(fp, yaml.SafeLoader)

    def _dump(self, data: dict[str, Any], fp) -> None:
        yaml.safe_dump(data, fp, allow_unicode=True, sort_keys=False)
