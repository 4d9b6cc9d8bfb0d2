"""
页面状态

NOT_LOADED -> LOADING -> IDLE。再次导航时回到 LOADING。
状态只是提示性的：注入器和提取器本身不做检查，
由调用方保证先等待页面空闲。
"""

from enum import Enum


class PageState(str, Enum):
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    IDLE = "idle"
