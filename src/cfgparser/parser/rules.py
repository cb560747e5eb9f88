# -*- encoding: utf-8 -*-
# @File   : rules.py
# @Time   : 2026/10/12 22:41:18
# @Author : Kariko Lin

"""Headers, key-value lines, sections and the whole document.

    document := filler section+ EOF
    section  := filler header line+ filler
    header   := SP* "[" SP* word SP* "]" SP* NEWLINE?
    line     := SP* word SP* "=" SP* value SP* NEWLINE?

Note that a line needs no terminator at all: whatever follows the value
(an inline `#comment`, a second pair, garbage) is simply left over,
for the next line or the trailing filler to deal with.
Anything nobody deals with fails the document as trailing content.
"""

import logging

from ..errors import CfgParseError, ErrorKind
from ..model import Config, Section
from .atoms import (
    Pos,
    newline0,
    skip_fillers,
    space0,
    tag,
    until_illegal_char,
    word
)


def header(src: str, pos: Pos) -> tuple[Pos, str]:
    """`[key]`, `[name_with_under]` or `   [ spaced_1  ]  `."""
    pos = space0(src, pos)
    pos = tag(src, pos, '[')
    pos = space0(src, pos)
    pos, name = word(src, pos)
    pos = space0(src, pos)
    pos = tag(src, pos, ']')
    return space0(src, pos), name


def header_line(src: str, pos: Pos) -> tuple[Pos, str]:
    pos, name = header(src, pos)
    return newline0(src, pos), name


def key_value_pair(src: str, pos: Pos) -> tuple[Pos, tuple[str, str]]:
    pos = space0(src, pos)
    pos, key = word(src, pos)
    pos = space0(src, pos)
    pos = tag(src, pos, '=')
    pos = space0(src, pos)
    pos, value = until_illegal_char(src, pos)
    return space0(src, pos), (key, value)


def key_value_line(src: str, pos: Pos) -> tuple[Pos, tuple[str, str]]:
    pos, pair = key_value_pair(src, pos)
    return newline0(src, pos), pair


def parse_section(src: str, pos: Pos) -> tuple[Pos, Section]:
    pos = skip_fillers(src, pos)
    try:
        pos, name = header_line(src, pos)
    except CfgParseError as e:
        raise CfgParseError(
            ErrorKind.MALFORMED_HEADER, src, e.pos,
            f'malformed section header: {e.msg}') from e

    try:
        pos, (key, value) = key_value_line(src, pos)
    except CfgParseError as e:
        # no key at all, rather than a broken one.
        if e.kind is ErrorKind.ALPHA:
            raise CfgParseError(
                ErrorKind.EMPTY_SECTION, src, pos,
                f'section [{name}] has no key-value pair') from e
        raise CfgParseError(
            ErrorKind.MALFORMED_LINE, src, e.pos,
            f'malformed line in section [{name}]: {e.msg}') from e

    ret = Section(name)
    ret.insert(key, value)
    while True:
        try:
            pos, (key, value) = key_value_line(src, pos)
        except CfgParseError:
            break
        # later duplicates win, silently.
        ret.insert(key, value)
    return skip_fillers(src, pos), ret


def parse_sections(src: str, pos: Pos = 0) -> tuple[Pos, list[Section]]:
    """One or more sections, stopping before the first one that fails."""
    pos, section = parse_section(src, pos)
    ret = [section]
    while pos < len(src):
        try:
            pos, section = parse_section(src, pos)
        except CfgParseError:
            break
        ret.append(section)
    return pos, ret


def parse_cfg_from_str(src: str) -> list[Section]:
    """Parse *all* of `src` into sections, in order of appearance."""
    if skip_fillers(src, 0) == len(src):
        raise CfgParseError(
            ErrorKind.EMPTY_INPUT, src, len(src), 'no section found')

    pos, ret = parse_sections(src)
    if pos < len(src):
        # parse_sections only stops on a failure. replay it for the cause.
        try:
            parse_section(src, pos)
        except CfgParseError as e:
            raise CfgParseError(
                ErrorKind.TRAILING_CONTENT, src, pos,
                f'unexpected content after the last section ({e.msg})'
            ) from e
    return ret


def parse_cfg(text: str) -> Config:
    """Parse cfg text into a `Config`.

    Either the whole text is understood, or `CfgParseError` is raised,
    there is no partial result. A section declared twice keeps only
    the pairs of its last declaration.
    """
    if not isinstance(text, str):
        raise TypeError(
            f'expected str, not {type(text).__name__}')

    ret = Config()
    for section in parse_cfg_from_str(text):
        if not ret.insert(section.name, section):
            logging.warning(
                f'{section} declared more than once, '
                'earlier declaration dropped.')
    logging.debug(f'parsed {len(ret)} section(s) from {len(text)} chars.')
    return ret
