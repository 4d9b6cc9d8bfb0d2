"""
DomLens - 页面加载等待、脚本注入与 DOM 元素清单导出
"""

__version__ = "1.0.0"
