"""
脚本注入服务

向空闲页面提交一段不关心返回值的脚本（默认为纵向布局样式）。
失败只记录日志并丢弃，不向上抛出，也不重试：这是尽力而为的展示调整。
"""

from typing import Optional

from domlens.domain.entities import ScriptError
from domlens.domain.interfaces import IPageHandle
from domlens.infrastructure.js import ScriptStore
from domlens.utils.logger import DomLensLogger, get_logger


class ScriptInjector:
    """样式注入器（调用方负责先等待页面空闲）"""

    OPERATION = "vertical-only CSS injection"

    def __init__(
        self,
        script: str = ScriptStore.VERTICAL_ONLY_CSS,
        logger: Optional[DomLensLogger] = None
    ):
        self.script = script
        self._log = logger or get_logger(__name__)
        self.last_error: Optional[ScriptError] = None

    def inject(self, page: IPageHandle) -> bool:
        """
        执行注入脚本

        Returns:
            是否执行成功
        """
        self.last_error = None
        try:
            page.execute_script(self.script)
        except Exception as e:
            self.last_error = ScriptError(self.OPERATION, str(e) or e.__class__.__name__)
            self._log.error(f"Failed to inject vertical-only CSS: {self.last_error.reason}")
            return False

        self._log.debug("vertical-only CSS injected")
        return True
