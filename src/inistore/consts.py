# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/13 00:12:51
# @Author : Kariko Lin

# may be overridden per store, see `IniStore(default_section=...)`.
DEFAULT_SECTION = 'DEFAULT'

COMMENT_CHARS = ';#'
DELIMITER_CHARS = '=:'
QUOTE_CHAR = '"'
