# JavaScript Infrastructure

"""
JavaScript 脚本库 - 集中管理所有页面脚本
"""

from .script_store import ScriptStore

__all__ = ['ScriptStore']
