# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:08:19

import logging

from .config import Configuration
from .errors import (
    DataScriptError, IOFailure, MalformedInput, MalformedLine,
    InvalidKey, LiteralError
)
from .model import ConfigNode, ScalarNode, SectionNode, RootSection
from .parser import DataScriptParser
from .reflect import ignore_field, normalize_naming
from .section import ConfigSection
from .values import (
    Bool, Int32, Int64, Float64, Int16, Int8, Char, Uuid, Str, ListOf
)

__all__ = [
    'Configuration', 'ConfigSection', 'DataScriptParser',
    'ConfigNode', 'ScalarNode', 'SectionNode', 'RootSection',
    'Bool', 'Int32', 'Int64', 'Float64', 'Int16', 'Int8',
    'Char', 'Uuid', 'Str', 'ListOf',
    'ignore_field', 'normalize_naming',
    'DataScriptError', 'IOFailure', 'MalformedInput', 'MalformedLine',
    'InvalidKey', 'LiteralError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
