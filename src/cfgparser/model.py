# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 21:52:33
# @Author : Kariko Lin

"""
Cfg structure: a document of named sections, each a dict of string pairs.

No nesting, no typed values. Both levels keep insertion order
(plain `dict` underneath), and the parser only ever *adds* to them.
"""

from collections.abc import Iterator, Mapping, MutableMapping, ValuesView


class Section(MutableMapping[str, str]):
    """Named group of `key = value` pairs.

    All pairs *should* be `str: str`, though at runtime
    nothing stops you from storing something else.
    """

    def __init__(
        self, name: str, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def insert(self, key: str, value: str) -> str | None:
        """Store a pair and hand back whatever it replaced."""
        prev = self._data.get(key)
        self._data[key] = value
        return prev

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Section):
            return self._name == other._name and self._data == other._data
        return super().__eq__(other)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()

    def to_owned(self) -> 'Section':
        """Detached copy, sharing nothing mutable with `self`."""
        return Section(self._name, self._data)


class Config(MutableMapping[str, Section]):
    """A whole cfg document.

    Usually made by `Config.parse_cfg()`, which never yields an empty one.
    Sections stored by hand may be given as plain dicts, and will be
    wrapped (copied) into a `Section` named after the key.
    """

    def __init__(self) -> None:
        self.__sections: dict[str, Section] = {}

    @classmethod
    def parse_cfg(cls, text: str) -> 'Config':
        """Parse cfg text, see `cfgparser.parser.parse_cfg()`."""
        from .parser import parse_cfg
        return parse_cfg(text)

    def insert(self, name: str, section: Section) -> bool:
        """Store `section`, returns `False` if it replaced another one."""
        fresh = name not in self.__sections
        self[name] = section
        return fresh

    def sections(self) -> ValuesView[Section]:
        return self.values()

    def __getitem__(self, key: str) -> Section:
        return self.__sections[key]

    def __setitem__(
        self, key: str,
        value: Section | Mapping[str, str]
    ) -> None:
        if not isinstance(value, Section):
            value = Section(key, value)
        elif value.name != key:
            raise ValueError(
                f'section {value} cannot be stored as "{key}".')
        self.__sections[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return 'Config { %s }' % ', '.join(
            repr(i) for i in self.__sections.values())

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__sections.items()}

    def to_owned(self) -> 'Config':
        """Detached deep copy, safe to mutate on either side."""
        ret = Config()
        for name, section in self.__sections.items():
            ret.insert(name, section.to_owned())
        return ret
