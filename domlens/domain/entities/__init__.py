# Domain Entities

"""
领域实体 - 核心数据对象

不依赖任何浏览器实现。
"""

from .element_record import ElementRecord, FIELD_DELIMITER, decode_lines
from .page_state import PageState
from .probe_report import ProbeReport
from .script_result import (
    ScriptOk, ScriptUnexpectedShape, ScriptError, ScriptResult, classify
)

__all__ = [
    'ElementRecord',
    'FIELD_DELIMITER',
    'decode_lines',
    'PageState',
    'ProbeReport',
    'ScriptOk',
    'ScriptUnexpectedShape',
    'ScriptError',
    'ScriptResult',
    'classify',
]
