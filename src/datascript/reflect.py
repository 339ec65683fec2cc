# -*- encoding: utf-8 -*-
# @File   : reflect.py
# @Time   : 2024/11/05 20:48:36

"""Field enumeration for `ConfigSection.store()`.

Dataclass fields are skipped when declared with `ignore_field()`:

    ```python
    @dataclass
    class Lobby:
        maxPlayers: int = 8
        password: str = ignore_field(default='')
    ```

Plain objects list the attribute names to skip in `__datascript_ignore__`.
"""

import dataclasses
from collections.abc import Mapping
from re import compile as regex
from typing import Any, Iterator

__all__ = ['IGNORE', 'ignore_field', 'iter_fields', 'normalize_naming']

IGNORE = 'datascript.ignore'

# any letter, not only ASCII; case is checked in _split_camel.
_CAMEL = regex(r'([^\W\d_])(?=[^\W\d_])')
_NON_ALNUM = regex(r'[^\w ]|_')
_SPACES = regex(r'\s+')


def ignore_field(**kwargs: Any) -> Any:
    """`dataclasses.field()` that `store()` will leave out."""
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[IGNORE] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def _split_camel(m) -> str:
    nxt = m.string[m.end()]
    return m[1] + ' ' if m[1].islower() and nxt.isupper() else m[1]


def normalize_naming(name: str) -> str:
    """`maxPlayers` -> `max players`, `spawn_point.X` -> `spawn point x`."""
    if not name.strip():
        return name
    name = _CAMEL.sub(_split_camel, name).lower()
    name = _NON_ALNUM.sub(' ', name)
    return _SPACES.sub(' ', name).strip()


def is_structured(obj: Any) -> bool:
    """Whether `iter_fields()` knows how to take `obj` apart."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return True
    if isinstance(obj, tuple) and hasattr(obj, '_fields'):
        return True
    if isinstance(obj, Mapping):
        return True
    return hasattr(obj, '__dict__') and not isinstance(obj, type)


def iter_fields(obj: Any) -> Iterator[tuple[str, Any]]:
    """Yield `(field name, current value)`, ignored fields excluded."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        for i in dataclasses.fields(obj):
            if i.metadata.get(IGNORE):
                continue
            yield i.name, getattr(obj, i.name)
    elif isinstance(obj, tuple) and hasattr(obj, '_fields'):  # namedtuple
        yield from zip(obj._fields, obj)
    elif isinstance(obj, Mapping):
        yield from obj.items()
    elif hasattr(obj, '__dict__') and not isinstance(obj, type):
        ignored = getattr(type(obj), '__datascript_ignore__', ())
        for k, v in vars(obj).items():
            if k.startswith('_') or k in ignored:
                continue
            yield k, v
    else:
        raise TypeError(
            f'cannot enumerate fields of {type(obj).__name__} {obj!r}')
