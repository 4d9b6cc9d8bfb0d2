"""
启动器

打开浏览器 -> 加载目标页 -> 等待空闲 -> 注入纵向布局样式 -> 输出 DOM 元素清单。
所有参数来自环境变量（见 domlens/config.py）。
"""

import sys

from domlens import config
from domlens.application.orchestrator import ProbeSession
from domlens.domain.errors import BrowserConnectionError
from domlens.infrastructure.browser import BrowserManager
from domlens.utils.logger import get_logger, setup_logging

logger = get_logger("domlens.launcher")


def main() -> int:
    """程序入口，返回进程退出码"""
    setup_logging()

    manager = BrowserManager(config.browser_config)
    try:
        page = manager.open()
    except BrowserConnectionError as e:
        logger.error(f"❌ {e}")
        return 1

    session = None
    try:
        session = ProbeSession(
            page,
            config=config.probe_config,
            wait_config=config.wait_config,
        )
        report = session.run()
    except KeyboardInterrupt:
        if session is not None:
            session.abort()
        logger.warning("已中断")
        return 130
    finally:
        manager.quit()

    if not report.ok:
        return 1
    logger.info(f"[Launcher] {report.element_count} elements from {report.url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
