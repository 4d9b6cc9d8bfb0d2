"""
DomLens - 页面 DOM 元素清单工具

程序入口。
"""

import sys
import os

# 确保程序根目录在 Python 路径中
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from domlens.launcher import main


if __name__ == "__main__":
    sys.exit(main())
