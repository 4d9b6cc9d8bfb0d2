"""
探测结果数据模型
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .element_record import ElementRecord
from .page_state import PageState
from .script_result import ScriptResult


@dataclass
class ProbeReport:
    """一次 load -> wait -> inject -> extract 的结果"""
    url: str = ""
    state: PageState = PageState.NOT_LOADED
    injected: bool = False
    records: List[ElementRecord] = field(default_factory=list)
    result: Optional[ScriptResult] = None   # 枚举脚本的分类结果；未执行时为 None
    error: str = ""                          # 加载失败 / 中止原因
    elapsed_wait: float = 0.0                # 等待加载耗时(秒)

    @property
    def element_count(self) -> int:
        return len(self.records)

    @property
    def ok(self) -> bool:
        return not self.error
