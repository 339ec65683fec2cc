# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/11/06 23:10:27

"""A node tree bound to a file: load it whole, mutate it, save it whole."""

import logging
from multiprocessing.pool import AsyncResult, ThreadPool
from os import PathLike
from os.path import exists
from threading import Lock

from .errors import IOFailure
from .model import RootSection
from .parser import DataScriptParser
from .section import ConfigSection

__all__ = ['Configuration']

# one shared worker pool for load_async() / save_async().
_pool: ThreadPool | None = None
_pool_lock = Lock()


def _get_pool() -> ThreadPool:
    global _pool
    with _pool_lock:
        if _pool is None:
            _pool = ThreadPool(1)
        return _pool


class Configuration:
    """
        ```python
        cfg = Configuration('server.ds')
        cfg.load()
        cfg.root().section_or_new('lobby').set('max players', 16)
        cfg.save()
        ```

    Without a file, only `load_from_string()` / `save_to_string()` work.
    """
    def __init__(
        self, file: str | PathLike[str] | None = None,
        encoding: str = 'utf-8', *,
        strict: bool = False
    ) -> None:
        self.__root = RootSection()
        self.__strict = strict
        self.__handler = (
            None if file is None
            else DataScriptParser(file, encoding, strict=strict)
        )

    def root(self) -> ConfigSection:
        return ConfigSection(self.__root)

    @property
    def file(self) -> str | None:
        return None if self.__handler is None else self.__handler.filename

    def __require_handler(self) -> DataScriptParser:
        if self.__handler is None:
            raise IOFailure('this configuration is not bound to a file')
        return self.__handler

    def __adopt(self, loaded: RootSection) -> None:
        # keep the same root object, views handed out earlier stay valid.
        self.clear()
        for i in loaded:
            self.__root.add(i)

    def clear(self) -> None:
        """Remove every node, recursively."""
        self.__root.clear()

    def load(self) -> None:
        """Replace the tree with the file's content.

        A missing file leaves the tree alone. If reading fails halfway,
        nothing is replaced either.

        Raises:
            MalformedInput: the file could not be read.
        """
        handler = self.__require_handler()
        if not exists(handler.filename):
            logging.debug(f'{handler.filename} does not exist, nothing loaded.')
            return
        self.__adopt(handler.read())

    def save(self) -> None:
        """Raises:
            IOFailure: the file could not be written.
        """
        self.__require_handler().write(self.__root)

    def load_from_string(self, text: str) -> None:
        self.__adopt(DataScriptParser.loads(text, strict=self.__strict))

    def save_to_string(self) -> str:
        return DataScriptParser.dumps(self.__root)

    def __load_returning_self(self) -> 'Configuration':
        self.load()
        return self

    def __save_returning_self(self) -> 'Configuration':
        self.save()
        return self

    def load_async(self) -> AsyncResult:
        """`load()` on a worker thread.

        `.get()` on the result gives this configuration back, or re-raises
        whatever `load()` raised. Don't touch the tree before it is done.
        """
        return _get_pool().apply_async(self.__load_returning_self)

    def save_async(self) -> AsyncResult:
        """`save()` on a worker thread; see `load_async()`."""
        return _get_pool().apply_async(self.__save_returning_self)

    def __str__(self) -> str:
        return 'DataScript configuration: ' + (
            '<string>' if self.__handler is None else str(self.__handler))
