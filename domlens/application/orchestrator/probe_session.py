"""
探测会话控制器

负责协调 加载 -> 等待空闲 -> 注入样式 -> 提取 DOM 的完整流程。

原则:
- 不包含任何 UI 代码，会话对象显式传入页面句柄与配置
- 通过回调与宿主通信（日志回调、输出 sink）
- 可在后台线程运行，不阻塞宿主

错误处理:
- 加载超时 / 中止: 由 LoadWaiter 抛出类型化异常，会话捕获后写入 report.error，
  跳过注入与提取
- 注入失败: 记录日志，继续提取
- 提取失败: 记录日志，report.records 为空
- page.load 自身抛出的异常（浏览器断开等）向调用方传播
"""

import threading
from typing import Callable, Optional

from domlens.config import ProbeConfig, WaitConfig
from domlens.domain.entities import PageState, ProbeReport
from domlens.domain.errors import LoadAbortedError, LoadTimeoutError
from domlens.domain.interfaces import IPageHandle
from domlens.application.services import DomExtractor, LoadWaiter, ScriptInjector
from domlens.utils.logger import get_logger


class ProbeSession:
    """
    探测会话

    一个会话绑定一个页面句柄，由会话自己独占写入。
    """

    def __init__(
        self,
        page: IPageHandle,
        config: Optional[ProbeConfig] = None,
        wait_config: Optional[WaitConfig] = None,
        sink: Callable[[str], None] = print,
        log_callback: Optional[Callable[[str, str], None]] = None
    ):
        """
        Args:
            page: 页面句柄
            config: 探测配置（目标 URL、文本截断、标签统计）
            wait_config: 加载等待配置
            sink: DOM 清单输出目标，默认 print
            log_callback: 日志回调 (message, level)
        """
        self.page = page
        self.config = config or ProbeConfig()
        self.wait_config = wait_config or WaitConfig()
        self._log = get_logger(__name__, callback=log_callback)

        self.state = PageState.NOT_LOADED
        self.abort_event = threading.Event()
        self.last_report: Optional[ProbeReport] = None
        self._thread: Optional[threading.Thread] = None

        self.waiter = LoadWaiter(
            poll_interval=self.wait_config.poll_interval,
            timeout=self.wait_config.load_timeout,
            abort_event=self.abort_event,
            logger=self._log,
        )
        self.injector = ScriptInjector(logger=self._log)
        self.extractor = DomExtractor(
            text_limit=self.config.text_limit,
            sink=sink,
            tag_summary=self.config.tag_summary,
            tag_summary_top=self.config.tag_summary_top,
            logger=self._log,
        )

    # ==================== 单步操作 ====================

    def load(self, url: str):
        """发起导航（不等待）"""
        self._log.info(f"🌐 Loading {url}")
        self.page.load(url)
        self.state = PageState.LOADING

    def wait_until_idle(self) -> float:
        """等待页面空闲，返回等待秒数"""
        elapsed = self.waiter.wait(self.page)
        self.state = PageState.IDLE
        return elapsed

    # ==================== 完整流程 ====================

    def run(self, url: Optional[str] = None) -> ProbeReport:
        """
        在当前线程执行完整流程

        进入与退出时都会清除中止信号：空闲时的 abort() 不影响下一次 run()。

        Args:
            url: 目标地址，默认使用配置中的 target_url

        Returns:
            ProbeReport
        """
        self.abort_event.clear()
        return self._run(url)

    def _run(self, url: Optional[str]) -> ProbeReport:
        target = url or self.config.target_url
        report = ProbeReport(url=target)
        self.last_report = report

        try:
            self.load(target)
            try:
                report.elapsed_wait = self.wait_until_idle()
            except (LoadTimeoutError, LoadAbortedError) as e:
                self._log.error(f"Page load did not settle: {e}")
                report.error = str(e)
                report.state = self.state
                return report

            report.state = self.state
            report.url = self.page.url or target
            self._log.success(f"Page finished loading: {report.url}")

            report.injected = self.injector.inject(self.page)
            report.records = self.extractor.extract(self.page)
            report.result = self.extractor.last_result
            return report
        finally:
            self.abort_event.clear()

    def start(self, url: Optional[str] = None) -> threading.Thread:
        """
        在后台线程执行完整流程

        信号在启动前清除，start() 之后立即 abort() 也能生效。

        Returns:
            线程对象；结束后结果在 last_report 上
        """
        self.abort_event.clear()
        self._thread = threading.Thread(target=self._run_in_thread, args=(url,), daemon=True)
        self._thread.start()
        return self._thread

    def _run_in_thread(self, url: Optional[str]):
        try:
            self._run(url)
        except Exception as e:
            self._log.error(f"Probe session failed: {e}")
            if self.last_report is not None:
                self.last_report.error = str(e) or e.__class__.__name__
                self.last_report.state = self.state

    def abort(self):
        """中止正在进行的加载等待"""
        self.abort_event.set()
