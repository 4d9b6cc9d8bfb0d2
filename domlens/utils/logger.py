"""
DomLens 日志系统

诊断信息（加载进度、脚本失败）统一走这里；DOM 元素列表本身
写到 sink（默认 print），保持固定的输出格式。

用法:
    from domlens.utils.logger import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)
    logger.info("开始加载")
    logger.error("JavaScript error: ...")

    # 带回调的日志（例如宿主程序的状态栏）
    session_logger = get_logger(__name__, callback=on_log)
    session_logger.success("页面加载完成")
"""

import logging
import sys
from typing import Optional, Callable
from pathlib import Path


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TIME_FORMAT = "%H:%M:%S"

# 自定义 success 级别（介于 INFO=20 和 WARNING=30 之间）
SUCCESS_LEVEL = 25


class DomLensLogger:
    """
    DomLens 日志封装

    在标准 logging 基础上增加 success 级别与回调转发。
    回调签名: (message, level_name) -> None
    """

    def __init__(self, name: str, callback: Optional[Callable[[str, str], None]] = None):
        self.logger = logging.getLogger(name)
        self.callback = callback

        if logging.getLevelName(SUCCESS_LEVEL) != 'SUCCESS':
            logging.addLevelName(SUCCESS_LEVEL, 'SUCCESS')

    def _emit(self, level: int, message: str, level_name: str):
        self.logger.log(level, message)
        if self.callback:
            try:
                self.callback(message, level_name)
            except Exception:
                # 回调失败不影响日志记录
                self.logger.debug("log callback failed", exc_info=True)

    def debug(self, message: str):
        self._emit(logging.DEBUG, message, "debug")

    def info(self, message: str):
        self._emit(logging.INFO, message, "info")

    def success(self, message: str):
        """成功级别日志（带 ✅ 前缀）"""
        self._emit(SUCCESS_LEVEL, f"✅ {message}", "success")

    def warning(self, message: str):
        self._emit(logging.WARNING, message, "warning")

    def error(self, message: str):
        self._emit(logging.ERROR, message, "error")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT
):
    """
    初始化日志系统

    Args:
        level: 日志级别
        log_file: 日志文件路径（可选）
        format_string: 日志格式
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt=TIME_FORMAT,
        handlers=handlers,
        force=True
    )

    # 降低第三方库日志级别
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('websocket').setLevel(logging.WARNING)
    logging.getLogger('DrissionPage').setLevel(logging.WARNING)


def get_logger(
    name: str,
    callback: Optional[Callable[[str, str], None]] = None
) -> DomLensLogger:
    """获取 DomLens 日志器（name 通常为 __name__）"""
    return DomLensLogger(name, callback)
