# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 16:30:02

"""Reading and writing the text form of a node tree.

```
name = 'value'
section {
  child = 42L
  nested {}
}
list = [
  1,
  'two',
  3L
]
```

Each nesting level is indented by exactly two spaces. The reader is lenient:
a line that cannot become a node is logged and skipped, the rest of the
file still loads. Pass `strict=True` to have such lines raise instead.
"""

import logging
from collections.abc import Iterable
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from .abstract import FileHandler
from .codec import classify, render
from .consts import INDENT
from .errors import (
    DataScriptError, IOFailure, MalformedInput, MalformedLine
)
from .model import ConfigNode, RootSection, ScalarNode, SectionNode

__all__ = ['DataScriptParser']


class _Lines:
    """A cursor over the line source.

    Sections and multi-line lists pull further lines from the same cursor,
    so the whole parse is one pass.
    """
    def __init__(self, source: Iterable[str]) -> None:
        self._it = iter(source)
        self.lineno = 0

    def next(self) -> str | None:
        try:
            line = next(self._it)
        except StopIteration:
            return None
        except OSError as e:
            raise MalformedInput(
                f'line source failed after line {self.lineno}: {e}') from e
        self.lineno += 1
        return line.rstrip('\r\n')


class DataScriptParser(FileHandler[RootSection]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8', *,
        strict: bool = False
    ) -> None:
        super().__init__(filename, encoding)
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    # ---- reading ----

    @staticmethod
    def __skip(lineno: int, line: str, reason: str, strict: bool) -> None:
        if strict:
            raise MalformedLine(lineno, line, reason)
        logging.warning(f'line {lineno} skipped, {reason}: {line.strip()!r}')

    @staticmethod
    def __read_list(src: _Lines, head: str) -> str | None:
        # `name = [` ... `]`, glued back into a one-line literal.
        pieces = [head]
        while not pieces[-1].endswith(']'):
            if (i := src.next()) is None:
                return None
            pieces.append(i.strip())
        return ''.join(pieces)

    @staticmethod
    def __read_children(
        src: _Lines, head: str, lineno: int, depth: int, strict: bool
    ) -> list[ConfigNode]:
        ret: list[ConfigNode] = []
        while (i := src.next()) is not None:
            if i.strip() == '}':
                return ret
            if not i.strip():
                continue
            node = DataScriptParser.__read_node(src, i.rstrip(), depth, strict)
            if node is not None:
                ret.append(node)
        # closing at EOF keeps what we got.
        if strict:
            raise MalformedLine(lineno, head, 'section is never closed')
        logging.warning(f'section opened at line {lineno} is never closed')
        return ret

    @staticmethod
    def __read_node(
        src: _Lines, line: str, depth: int, strict: bool
    ) -> ConfigNode | None:
        lineno = src.lineno
        indent = INDENT * depth
        if not line.startswith(indent):
            DataScriptParser.__skip(
                lineno, line, f'not indented for depth {depth}', strict)
            return None
        body = line[len(indent):]
        name, eq, value = body.partition('=')
        key = name.replace('{', '').replace('}', '').strip()

        if not eq:
            if body.endswith('{'):
                # read the body even if the header is bad,
                # or the children would leak into the parent.
                children = DataScriptParser.__read_children(
                    src, line, lineno, depth + 1, strict)
            elif body.endswith('{}'):
                children = []
            else:
                DataScriptParser.__skip(
                    lineno, line, 'neither a value nor a section', strict)
                return None
            try:
                return SectionNode(key, children)
            except DataScriptError as e:
                DataScriptParser.__skip(lineno, line, str(e), strict)
                return None

        value = value.strip()
        if value.startswith('[') and not value.endswith(']'):
            value = DataScriptParser.__read_list(src, value)
            if value is None:
                DataScriptParser.__skip(
                    lineno, line, 'list is never closed', strict)
                return None
        try:
            return ScalarNode(key, classify(value))
        except DataScriptError as e:
            DataScriptParser.__skip(lineno, line, str(e), strict)
            return None

    @staticmethod
    def readstream(
        buf: TextIOBase | Iterable[str],
        ins: SectionNode | None = None, *,
        strict: bool = False
    ) -> SectionNode:
        """Parse lines into `ins` (a new `RootSection` by default).

        Raises:
            MalformedInput: `buf` itself failed with an `OSError`.
            MalformedLine: only when `strict`.
        """
        if ins is None:
            ins = RootSection()
        src = _Lines(buf)
        while (i := src.next()) is not None:
            if not (i := i.strip()):
                continue
            node = DataScriptParser.__read_node(src, i, 0, strict)
            if node is not None:
                ins.add(node)
        return ins

    @staticmethod
    def loads(
        text: str, ins: SectionNode | None = None, *, strict: bool = False
    ) -> SectionNode:
        return DataScriptParser.readstream(StringIO(text), ins, strict=strict)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            logging.warning(
                f'{filename} is not valid {codec["encoding"]}, '
                'undecodable bytes are replaced.')
            buf = raw.decode('utf-8', errors='replace')
        return StringIO(buf)

    def read(self) -> RootSection:
        """Parse the whole file into a new `RootSection`.

        The configured encoding is tried first; if the file does not decode
        with it, `chardet` gets to guess.
        """
        try:
            try:
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    return self.readstream(fp, strict=self._strict)
            except UnicodeDecodeError:
                logging.info(
                    f'{self._fn} is not {self._codec}, guessing encoding.')
                return self.readstream(
                    self._decode_file(self._fn), strict=self._strict)
        except MalformedInput:
            raise
        except OSError as e:
            raise MalformedInput(f'cannot read {self._fn}: {e}') from e

    # ---- writing ----

    @staticmethod
    def __write_node(fp: TextIOBase, node: ConfigNode, depth: int) -> None:
        indent = INDENT * depth
        if isinstance(node, ScalarNode):
            fp.write(f'{indent}{node.name} = {render(node.value, indent)}\n')
        elif not isinstance(node, SectionNode):
            raise TypeError(f'cannot write {type(node).__name__} "{node.name}"')
        elif not len(node):
            fp.write(f'{indent}{node.name} {{}}\n')
        else:
            fp.write(f'{indent}{node.name} {{\n')
            DataScriptParser.writestream(node, fp, depth + 1)
            fp.write(f'{indent}}}\n')

    @staticmethod
    def writestream(
        section: SectionNode, fp: TextIOBase, depth: int = 0
    ) -> None:
        """Write the children of `section`, `depth` levels indented."""
        for i in section:
            DataScriptParser.__write_node(fp, i, depth)

    @staticmethod
    def dumps(section: SectionNode) -> str:
        buf = StringIO()
        DataScriptParser.writestream(section, buf)
        return buf.getvalue()

    def write(self, instance: SectionNode) -> None:
        # render first, so a failure never leaves half a file behind.
        text = self.dumps(instance)
        try:
            with open(self._fn, 'w', encoding=self._codec, newline='\n') as fp:
                fp.write(text)
        except OSError as e:
            raise IOFailure(f'cannot write {self._fn}: {e}') from e

    def __str__(self) -> str:
        return f'DataScript file: {super().__str__()} ({self._codec})'
