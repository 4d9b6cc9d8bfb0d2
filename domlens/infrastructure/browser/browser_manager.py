"""
浏览器管理器 - 基础设施层实现

封装 DrissionPage 的浏览器连接与启动。
"""

import os
from typing import Optional

from DrissionPage import ChromiumPage, ChromiumOptions

from domlens.config import BrowserConfig
from domlens.domain.errors import BrowserConnectionError
from domlens.infrastructure.browser.page_handle import DrissionPageHandle
from domlens.utils.logger import get_logger
from domlens.utils.port_check import PortChecker

logger = get_logger(__name__)


class BrowserManager:
    """
    浏览器管理器

    职责:
    - 连接已开启调试端口的浏览器，或启动独立的自动化浏览器
    - 提供当前标签页的页面句柄
    - 退出时关闭自己启动的浏览器
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig()
        self.page: Optional[ChromiumPage] = None
        self._launched = False

    def connect(self) -> ChromiumPage:
        """
        连接浏览器

        Raises:
            BrowserConnectionError: 调试端口未开启或连接失败
        """
        host, port = PortChecker.split_addr(self.config.addr)
        if not PortChecker.is_port_open(port, host):
            raise BrowserConnectionError(
                f"无法连接到 {self.config.addr}。请确保浏览器已启用调试模式。")

        try:
            self.page = ChromiumPage(addr_or_opts=self.config.addr)
        except Exception as e:
            raise BrowserConnectionError(f"连接浏览器失败: {e}") from e
        logger.info(f"[BrowserManager] Connected to {self.config.addr}")
        return self.page

    def launch(self) -> ChromiumPage:
        """
        启动一个带调试端口的自动化浏览器

        使用独立的用户数据目录，与日常浏览器隔离，不冲突。
        """
        _, port = PortChecker.split_addr(self.config.addr)

        co = ChromiumOptions()
        co.set_local_port(port)
        if self.config.user_data_dir:
            co.set_user_data_path(os.path.abspath(self.config.user_data_dir))
        if self.config.headless:
            co.headless(True)

        logger.info("🚀 [BrowserManager] Launching automated browser...")
        try:
            self.page = ChromiumPage(addr_or_opts=co)
        except Exception as e:
            raise BrowserConnectionError(f"启动浏览器失败: {e}") from e
        self._launched = True
        return self.page

    def open(self) -> DrissionPageHandle:
        """按配置启动或连接，返回当前标签页的页面句柄"""
        if self.page is None:
            if self.config.launch:
                self.launch()
            else:
                self.connect()
        return DrissionPageHandle(self.page)

    def quit(self):
        """只关闭由本管理器启动的浏览器；连接的外部浏览器保持打开"""
        if self.page is None:
            return
        if self._launched:
            logger.info("🛑 [BrowserManager] Quitting browser...")
            try:
                self.page.quit()
            except Exception as e:
                logger.warning(f"[BrowserManager] Error during quit: {e}")
        self.page = None
        self._launched = False
