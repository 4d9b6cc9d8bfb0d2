"""
Utils 模块初始化文件
"""

from .logger import DomLensLogger, get_logger, setup_logging
from .port_check import PortChecker

__all__ = [
    'DomLensLogger',
    'get_logger',
    'setup_logging',
    'PortChecker',
]
