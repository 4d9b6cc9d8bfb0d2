"""
DOM 提取服务

执行枚举脚本 -> 按结果类型分派 -> 解码 -> 输出到 sink。

输出格式固定（每个字符串对应一次 print 调用）:

    \\n================ DOM ELEMENTS ================
    Total elements: <N>
    \\n[<i>] <TAG>
       id: <id>
       class: <class>
       text: "<text>"
    \\n============== END DOM ELEMENTS ==============\\n

id / class 仅在非空时输出，text 仅在去除首尾空白后非空时输出。
"""

from collections import Counter
from typing import Callable, List, Optional

from domlens.domain.entities import (
    ElementRecord, ScriptOk, ScriptUnexpectedShape, ScriptError, ScriptResult,
    classify, decode_lines
)
from domlens.domain.interfaces import IPageHandle
from domlens.infrastructure.js import ScriptStore
from domlens.utils.logger import DomLensLogger, get_logger

DUMP_HEADER = "\n================ DOM ELEMENTS ================"
DUMP_FOOTER = "\n============== END DOM ELEMENTS ==============\n"
SUMMARY_RULE = "-" * 40


def render_record(index: int, record: ElementRecord) -> List[str]:
    """渲染单个元素块，返回逐行输出"""
    lines = [f"\n[{index}] <{record.tag}>"]
    if record.element_id:
        lines.append(f"   id: {record.element_id}")
    if record.class_name:
        lines.append(f"   class: {record.class_name}")
    if record.has_text:
        lines.append(f"   text: \"{record.text}\"")
    return lines


def format_record(index: int, record: ElementRecord) -> str:
    return "\n".join(render_record(index, record))


def render_dump(records: List[ElementRecord]) -> List[str]:
    """渲染完整的元素清单（含头尾）"""
    lines = [DUMP_HEADER, f"Total elements: {len(records)}"]
    for index, record in enumerate(records):
        lines.extend(render_record(index, record))
    lines.append(DUMP_FOOTER)
    return lines


def render_tag_summary(records: List[ElementRecord], top: int = 20) -> List[str]:
    """
    标签统计

    按数量降序（数量相同保持首次出现顺序），只列出前 top 种。
    """
    counts = Counter(record.tag for record in records)
    ranked = counts.most_common()

    lines = ["\n📈 TAG SUMMARY:", SUMMARY_RULE]
    for tag, count in ranked[:top]:
        lines.append(f"   {tag}: {count} elements")
    if len(ranked) > top:
        lines.append(f"   ... and {len(ranked) - top} more tag types")
    lines.append(SUMMARY_RULE + "\n")
    return lines


class DomExtractor:
    """
    DOM 提取器

    职责:
    - 在空闲页面执行枚举脚本（调用方负责先等待）
    - 把脚本结果归类为 ScriptOk / ScriptUnexpectedShape / ScriptError
    - 解码并输出元素清单

    脚本失败与形状异常都只记录日志并返回空列表，不向上抛出。
    """

    OPERATION = "DOM extraction"

    def __init__(
        self,
        text_limit: int = 80,
        sink: Callable[[str], None] = print,
        tag_summary: bool = True,
        tag_summary_top: int = 20,
        logger: Optional[DomLensLogger] = None
    ):
        self.script = ScriptStore.dom_enumerator_js(text_limit)
        self.sink = sink
        self.tag_summary = tag_summary
        self.tag_summary_top = tag_summary_top
        self._log = logger or get_logger(__name__)
        self.last_result: Optional[ScriptResult] = None

    def fetch(self, page: IPageHandle) -> ScriptResult:
        """执行枚举脚本并归类结果（不会抛出异常）"""
        try:
            value = page.execute_script(self.script)
        except Exception as e:
            return ScriptError(self.OPERATION, str(e) or e.__class__.__name__)
        return classify(value)

    def extract(self, page: IPageHandle) -> List[ElementRecord]:
        """
        提取并输出元素清单

        Returns:
            解码后的元素记录；脚本失败或返回形状异常时为空列表
        """
        result = self.fetch(page)
        self.last_result = result

        if isinstance(result, ScriptOk):
            records = decode_lines(result.lines)
            self.write(records)
            return records

        if isinstance(result, ScriptUnexpectedShape):
            self._log.warning(f"DOM script returned unexpected result: {result.value!r}")
            return []

        self._log.error(f"JavaScript error ({result.operation}): {result.reason}")
        return []

    def write(self, records: List[ElementRecord]):
        """把元素清单（以及可选的标签统计）写到 sink"""
        for line in render_dump(records):
            self.sink(line)
        if self.tag_summary and records:
            for line in render_tag_summary(records, self.tag_summary_top):
                self.sink(line)
