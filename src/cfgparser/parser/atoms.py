# -*- encoding: utf-8 -*-
# @File   : atoms.py
# @Time   : 2026/10/12 22:03:51
# @Author : Kariko Lin

"""Lowest level matchers of the cfg grammar.

Every matcher takes the whole source string plus a cursor, and either
returns the advanced cursor (with the recognized text, if any),
or raises `CfgParseError` *without* having consumed anything.
Only ASCII letters and digits count as word characters:

    word := LETTER (LETTER|DIGIT)* ( "_" (LETTER|DIGIT)+ )*
"""

from string import ascii_letters, digits

from ..errors import CfgParseError, ErrorKind

type Pos = int

LETTERS = frozenset(ascii_letters)
ALPHANUMERICS = frozenset(ascii_letters + digits)
SPACES = frozenset(' \t')
MULTISPACES = frozenset(' \t\r\n')
# anything here terminates a value, `#` opens an inline comment.
ILLEGAL_VALUE_CHARS = frozenset('# []!*\t\n\r"\'')


def skip_chars(src: str, pos: Pos, chars: frozenset[str]) -> Pos:
    try:
        while src[pos] in chars:
            pos += 1
    except IndexError:
        pass
    return pos


def skip_until(src: str, pos: Pos, chars: frozenset[str]) -> Pos:
    try:
        while src[pos] not in chars:
            pos += 1
    except IndexError:
        pass
    return pos


def tag(src: str, pos: Pos, literal: str) -> Pos:
    if not src.startswith(literal, pos):
        raise CfgParseError(
            ErrorKind.TAG, src, pos, f'expected {literal!r}')
    return pos + len(literal)


def space0(src: str, pos: Pos) -> Pos:
    return skip_chars(src, pos, SPACES)


def newline0(src: str, pos: Pos) -> Pos:
    """Eat one `\\n` if there is one."""
    return pos + 1 if src.startswith('\n', pos) else pos


def identifier(src: str, pos: Pos) -> tuple[Pos, str]:
    """A letter, then any letters or digits: `a13b`, but not `1abc`."""
    if pos >= len(src) or src[pos] not in LETTERS:
        raise CfgParseError(
            ErrorKind.ALPHA, src, pos, 'expected a letter')
    end = skip_chars(src, pos + 1, ALPHANUMERICS)
    return end, src[pos:end]


def underscore_segment(src: str, pos: Pos) -> tuple[Pos, str]:
    """A single `_` followed by at least one letter or digit: `_1foo1`."""
    start = tag(src, pos, '_')
    end = skip_chars(src, start, ALPHANUMERICS)
    if end == start:
        raise CfgParseError(
            ErrorKind.ALPHANUMERIC, src, start,
            "expected a letter or digit after '_'")
    return end, src[pos:end]


def word(src: str, pos: Pos) -> tuple[Pos, str]:
    """Section names and keys, e.g. `fred1_1bla_foobar`.

    A dangling underscore is not part of the word,
    so `foo_` yields `foo` and leaves `_` to the caller.
    """
    end, _ = identifier(src, pos)
    while True:
        try:
            end, _ = underscore_segment(src, end)
        except CfgParseError:
            break
    return end, src[pos:end]


def until_illegal_char(src: str, pos: Pos) -> tuple[Pos, str]:
    """Value run. Never fails, the run may be empty."""
    end = skip_until(src, pos, ILLEGAL_VALUE_CHARS)
    return end, src[pos:end]


def skip_fillers(src: str, pos: Pos) -> Pos:
    """Skip blank runs and full-line comments, as many as there are.

    Tried in order at each step:
    `#` through the next `\\n` (inclusive), `#` through the end of input,
    and zero or more whitespace characters (newlines included).
    """
    while True:
        if src.startswith('#', pos):
            eol = src.find('\n', pos)
            nxt = len(src) if eol == -1 else eol + 1
        else:
            nxt = skip_chars(src, pos, MULTISPACES)
        if nxt == pos:
            return pos
        pos = nxt


def is_word(text: str) -> bool:
    try:
        end, _ = word(text, 0)
    except CfgParseError:
        return False
    return end == len(text)


def is_value(text: str) -> bool:
    return not ILLEGAL_VALUE_CHARS.intersection(text)
