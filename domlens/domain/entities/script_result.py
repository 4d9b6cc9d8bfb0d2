"""
页面脚本执行结果

把"字符串数组 / 其他形状 / 执行异常"三种结局显式化，
调用方按类型分派，而不是在运行时到处做 isinstance 判断。
"""

from dataclasses import dataclass, field
from typing import Any, List, Union


@dataclass(frozen=True)
class ScriptOk:
    """脚本返回了字符串序列"""
    lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScriptUnexpectedShape:
    """脚本正常返回，但不是字符串序列"""
    value: Any = None


@dataclass(frozen=True)
class ScriptError:
    """脚本执行失败（脚本异常、页面跳走、引擎错误等，不区分暂时性与永久性）"""
    operation: str
    reason: str


ScriptResult = Union[ScriptOk, ScriptUnexpectedShape, ScriptError]


def classify(value: Any) -> ScriptResult:
    """
    按返回值形状分类

    list / tuple 且所有元素都是 str 时视为 ScriptOk（空数组也算），
    其余一律为 ScriptUnexpectedShape。
    """
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return ScriptOk(list(value))
    return ScriptUnexpectedShape(value)
