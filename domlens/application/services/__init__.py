# Application Services

"""
应用服务 - 流水线各阶段
"""

from .load_waiter import LoadWaiter
from .script_injector import ScriptInjector
from .dom_extractor import DomExtractor

__all__ = [
    'LoadWaiter',
    'ScriptInjector',
    'DomExtractor',
]
