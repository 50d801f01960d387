# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 02:31:40
# @Author : Kariko Lin

import logging

from .abstract import CharStream, IniError, StreamMode, StreamModeError
from .api import (
    create_empty,
    destroy,
    parse_from_text,
    parse_from_stream,
    parse_from_path,
    get_value,
    set_value,
    remove_value,
    store_to_stream,
    store_to_path
)
from .consts import DEFAULT_SECTION
from .hashmap import IniMap
from .model import IniSection, IniStore
from .parser import IniParser
from .stream import CallbackStream, FileStream, StringStream

__all__ = [
    'IniStore', 'IniSection', 'IniMap', 'IniParser', 'DEFAULT_SECTION',
    'CharStream', 'StringStream', 'FileStream', 'CallbackStream',
    'StreamMode', 'IniError', 'StreamModeError',
    'create_empty', 'destroy',
    'parse_from_text', 'parse_from_stream', 'parse_from_path',
    'get_value', 'set_value', 'remove_value',
    'store_to_stream', 'store_to_path'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
