# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:28:14
# @Author : Kariko Lin

"""Parser for cfg files, INI-like text with implicitly string values:

    [header]
    key = value
    key2 = value2

    [headerN]
    ...

Unlike TOML there is no typing and no nesting, a parsed `Config` is
just a map of `Section`s, each a map of strings.
"""

from .errors import CfgError, CfgLoadError, CfgParseError, ErrorKind
from .formats import (
    CfgFileParser,
    CfgJsonParser,
    CfgYamlParser,
    from_path
)
from .model import Config, Section
from .parser import parse_cfg

__all__ = [
    'Config', 'Section', 'parse_cfg', 'from_path',
    'CfgFileParser', 'CfgJsonParser', 'CfgYamlParser',
    'CfgError', 'CfgParseError', 'CfgLoadError', 'ErrorKind'
]
