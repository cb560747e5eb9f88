# -*- encoding: utf-8 -*-
# @File   : formats.py
# @Time   : 2026/10/13 00:12:40
# @Author : Kariko Lin

"""File collaborators around the parser.

The parser itself never touches files, these classes do:

- `CfgFileParser`: plain cfg text, with `chardet` guessing the codec
  when the one given (or the system default) cannot decode the file.
- `CfgJsonParser` and `CfgYamlParser`: `{section: {key: value}}` dumps,
  handy for feeding cfg contents to other tools.
"""

import json
import logging
import warnings
from collections.abc import Mapping
from os import PathLike
from os.path import splitext

import chardet
import yaml

from .abstract import FileHandler
from .errors import CfgLoadError
from .model import Config
from .parser import is_value, is_word, parse_cfg


# should keep this base class for better type hinting.
class CfgParser(FileHandler[Config]):
    ...


def _check_writable(instance: Config) -> None:
    """Warn about anything the cfg grammar would not read back."""
    if not instance:
        warnings.warn('config is empty, the file written cannot be parsed.')
    for name, section in instance.items():
        if not is_word(name):
            warnings.warn(f'section name "{name}" is not a valid word.')
        if not section:
            warnings.warn(f'{section} has no pair and will not read back.')
        for k, v in section.items():
            if not is_word(k):
                warnings.warn(f'key "{k}" in {section} is not a valid word.')
            elif not is_value(v):
                warnings.warn(
                    f'value of "{k}" in {section} has illegal characters '
                    f'and will be cut short when read back: {v!r}')


def _from_mapping(src: object, origin: str) -> Config:
    if not isinstance(src, Mapping):
        raise CfgLoadError(
            f'{origin}: top level should be a mapping of sections.')
    ret = Config()
    for name, pairs in src.items():
        if not isinstance(pairs, Mapping):
            raise CfgLoadError(
                f'{origin}: section "{name}" should be a mapping.')
        section: dict[str, str] = {}
        for k, v in pairs.items():
            if isinstance(v, (Mapping, list)):
                raise CfgLoadError(
                    f'{origin}: [{name}] {k} is nested, '
                    'cfg values are plain strings.')
            # empty value, or pure digits loaded as int.
            section[str(k)] = '' if v is None else str(v)
        ret[str(name)] = section
    return ret


class CfgFileParser(CfgParser):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None
    ) -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def _decode_file(filename: str) -> str:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8', 'confidence': 0.0}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            logging.warning(
                f'"{filename}" is not {codec["encoding"]}, '
                'decoding it as latin-1.')
            buf = raw.decode('latin-1')
        # same as text mode `open()` does.
        return buf.replace('\r\n', '\n').replace('\r', '\n')

    def read(self) -> Config:
        """Parse the file this handler points at.

        May raise `OSError`, `CfgLoadError` or `CfgParseError`.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return parse_cfg(fp.read())
        except LookupError as e:
            raise CfgLoadError(
                f'unknown encoding "{self._codec}" for {self._fn}.') from e
        except UnicodeDecodeError:
            logging.warning(
                f'unable to decode "{self._fn}" as {self._codec}, '
                'guessing the codec instead.')
            return parse_cfg(self._decode_file(self._fn))

    @staticmethod
    def dumps(
        instance: Config, *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> str:
        """Render `instance` in the canonical text form:

            [name]
            key = value

        with `blank_lines` empty lines between sections.
        """
        if delimiter.strip(' \t') != '=':
            raise ValueError(
                f'delimiter should be "=" padded with spaces, not {delimiter!r}')
        buffers = []
        for section in instance.sections():
            lines = [str(section)]
            lines.extend(f'{k}{delimiter}{v}' for k, v in section.items())
            buffers.append('\n'.join(lines) + '\n')
        return ('\n' * blank_lines).join(buffers)

    def write(
        self, instance: Config, *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> None:
        """Save as *one* cfg file.

        Names, keys or values the grammar could not read back
        are still written, but warned about.
        """
        _check_writable(instance)
        text = self.dumps(
            instance, delimiter=delimiter, blank_lines=blank_lines)
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(text)

    def __str__(self) -> str:
        return "cfg file: " + super().__str__() + f"({self._codec})"


class CfgJsonParser(CfgParser):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    def read(self) -> Config:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                src = json.load(fp)
        except json.JSONDecodeError as e:
            raise CfgLoadError(f'{self._fn}: {e}') from e
        except UnicodeDecodeError as e:
            raise CfgLoadError(
                f'unable to decode "{self._fn}" as {self._codec}.') from e
        except LookupError as e:
            raise CfgLoadError(
                f'unknown encoding "{self._codec}" for {self._fn}.') from e
        return _from_mapping(src, self._fn)

    def write(self, instance: Config, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(
                instance.to_dict(), fp, ensure_ascii=False, indent=indent)


class CfgYamlParser(CfgParser):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    def read(self) -> Config:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                src = yaml.safe_load(fp)
        except yaml.YAMLError as e:
            raise CfgLoadError(f'{self._fn}: {e}') from e
        except UnicodeDecodeError as e:
            raise CfgLoadError(
                f'unable to decode "{self._fn}" as {self._codec}.') from e
        except LookupError as e:
            raise CfgLoadError(
                f'unknown encoding "{self._codec}" for {self._fn}.') from e
        return _from_mapping(src, self._fn)

    def write(self, instance: Config, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                instance.to_dict(), fp,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False,
                indent=indent)


HANDLERS: dict[str, type[CfgParser]] = {
    'cfg': CfgFileParser,
    'ini': CfgFileParser,
    'json': CfgJsonParser,
    'yaml': CfgYamlParser,
    'yml': CfgYamlParser,
}


def get_handler(
    filename: str | PathLike[str],
    fmt: str | None = None,
    encoding: str | None = None
) -> CfgParser:
    """Pick a handler by `fmt`, or else by the file extension."""
    if fmt is None:
        fmt = splitext(filename)[1].lstrip('.')
    handler = HANDLERS.get(fmt.lower())
    if handler is None:
        raise CfgLoadError(
            f'unknown format "{fmt}" for {filename}, '
            f'expected one of {", ".join(HANDLERS)}.')
    if encoding is None:
        return handler(filename)
    return handler(filename, encoding)


def from_path(
    filename: str | PathLike[str],
    encoding: str | None = None
) -> Config:
    """Read and parse a cfg file in one go.

    Every failure, I/O or grammar, comes out as a `CfgError`.
    """
    try:
        return CfgFileParser(filename, encoding).read().to_owned()
    except OSError as e:
        raise CfgLoadError(f'unable to read "{filename}": {e}') from e
