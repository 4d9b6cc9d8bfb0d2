"""
DOM 元素记录

页面脚本把每个元素编码为 `tag|id|class|text` 一行字符串，
这里负责把一行解码成 ElementRecord。

注意: 分隔符 `|` 不做转义。若 id / class / 文本中本身含有 `|`，
字段会错位，第四个 `|` 之后的内容会被丢弃。
"""

from dataclasses import dataclass
from typing import List, Tuple

FIELD_DELIMITER = "|"
FIELD_COUNT = 4


@dataclass(frozen=True)
class ElementRecord:
    """单个 DOM 元素的摘要（只在输出期间存在，不做持久化）"""
    tag: str = ""
    element_id: str = ""
    class_name: str = ""
    text: str = ""

    @classmethod
    def decode(cls, line: str) -> 'ElementRecord':
        """
        解码一行编码记录

        按分隔符切分后取前四段，缺失的尾部字段补空字符串。
        """
        parts = line.split(FIELD_DELIMITER)
        parts += [""] * (FIELD_COUNT - len(parts))
        return cls(*parts[:FIELD_COUNT])

    def encode(self) -> str:
        return FIELD_DELIMITER.join(self.as_tuple())

    def as_tuple(self) -> Tuple[str, str, str, str]:
        return (self.tag, self.element_id, self.class_name, self.text)

    @property
    def has_text(self) -> bool:
        return bool(self.text.strip())


def decode_lines(lines: List[str]) -> List[ElementRecord]:
    """批量解码，保持原有顺序"""
    return [ElementRecord.decode(line) for line in lines]
