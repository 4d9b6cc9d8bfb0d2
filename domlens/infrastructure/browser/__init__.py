# Browser Infrastructure

"""
浏览器基础设施 - DrissionPage 适配
"""

from .browser_manager import BrowserManager
from .page_handle import DrissionPageHandle

__all__ = ['BrowserManager', 'DrissionPageHandle']
