# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/13 01:02:55
# @Author : Kariko Lin

from cfgparser.cli import main


if __name__ == "__main__":
    main()
