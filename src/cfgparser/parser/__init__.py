# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 22:40:02
# @Author : Kariko Lin

from .atoms import is_value, is_word
from .rules import parse_cfg, parse_cfg_from_str

__all__ = ['parse_cfg', 'parse_cfg_from_str', 'is_word', 'is_value']
