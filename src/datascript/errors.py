# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 21:20:45


class DataScriptError(Exception):
    """Base of everything this package raises on purpose."""
    pass


class IOFailure(DataScriptError, OSError):
    """Reading or writing the underlying file (or stream) failed."""
    pass


class MalformedInput(IOFailure):
    """The line source broke down in the middle of parsing."""
    pass


class MalformedLine(DataScriptError, ValueError):
    """A line that cannot become a node.

    Only raised by a strict parser; the lenient one logs and skips it.
    """
    def __init__(self, lineno: int, line: str, reason: str) -> None:
        super().__init__(f'line {lineno}: {reason}: {line!r}')
        self.lineno = lineno
        self.line = line
        self.reason = reason


class InvalidKey(DataScriptError, ValueError):
    pass


class LiteralError(DataScriptError, ValueError):
    """A literal (or a payload) with no valid typed form."""
    pass
