# Domain Interfaces

"""
领域接口 - 抽象契约定义

使用 Python Protocol (Structural Subtyping) 定义接口，
实现依赖反转原则 (DIP)。
"""

from .browser import IPageHandle, ISupportsLoadEvent

__all__ = [
    'IPageHandle',
    'ISupportsLoadEvent',
]
