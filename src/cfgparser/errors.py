# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 21:40:07
# @Author : Kariko Lin

from enum import Enum


class ErrorKind(str, Enum):
    # token level, raised by atoms.
    ALPHA = 'alpha'
    ALPHANUMERIC = 'alphanumeric'
    TAG = 'tag'
    # grammar level, raised by the assemblers.
    MALFORMED_HEADER = 'malformed header'
    EMPTY_SECTION = 'empty section'
    MALFORMED_LINE = 'malformed line'
    TRAILING_CONTENT = 'trailing content'
    EMPTY_INPUT = 'empty input'


class CfgError(Exception):
    """Umbrella for everything raised by this package."""
    pass


class CfgParseError(CfgError, ValueError):
    """The grammar did not match.

    Besides the rendered message, the failure position is kept both as
    an offset (`pos`) and as 1-based `lineno`/`colno`,
    and `fragment` holds a short excerpt of the unparsed input.
    """

    FRAGMENT_LENGTH = 24

    def __init__(self, kind: ErrorKind, doc: str, pos: int, msg: str) -> None:
        # located lazily, atoms raise these on every backtrack.
        self.kind = kind
        self.doc = doc
        self.pos = pos
        self.msg = msg
        super().__init__(msg)

    @property
    def lineno(self) -> int:
        return self.doc.count('\n', 0, self.pos) + 1

    @property
    def colno(self) -> int:
        return self.pos - self.doc.rfind('\n', 0, self.pos)

    @property
    def fragment(self) -> str:
        return self.doc[self.pos:self.pos + self.FRAGMENT_LENGTH]

    def __str__(self) -> str:
        return f'{self.msg} (line {self.lineno}, column {self.colno})'

    def __reduce__(self):
        return self.__class__, (self.kind, self.doc, self.pos, self.msg)


class CfgLoadError(CfgError):
    """I/O or foreign format failure in one of the file handlers."""
    pass
