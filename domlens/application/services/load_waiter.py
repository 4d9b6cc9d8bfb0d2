"""
加载等待服务

阻塞调用方所在的线程，直到页面的加载标志变为 False。
等待通过 threading.Event.wait 让出，不会空转，也不影响宿主的其他线程。
"""

import threading
import time
from typing import Optional

from domlens.domain.errors import LoadAbortedError, LoadTimeoutError
from domlens.domain.interfaces import IPageHandle, ISupportsLoadEvent
from domlens.utils.logger import DomLensLogger, get_logger


class LoadWaiter:
    """
    加载等待器

    策略:
    1. 句柄支持加载事件时先分片按事件等待（更及时，片间可响应中止）
    2. 再以固定间隔轮询 is_loading() 做最终确认

    不做防抖：页面之后再次导航时，由调用方重新调用 wait()。
    """

    def __init__(
        self,
        poll_interval: float = 0.1,
        timeout: float = 30.0,
        abort_event: Optional[threading.Event] = None,
        logger: Optional[DomLensLogger] = None
    ):
        """
        Args:
            poll_interval: 轮询间隔(秒)
            timeout: 超时(秒)，<= 0 表示无限等待
            abort_event: 中止信号，置位后等待立即结束
            logger: 日志器
        """
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {poll_interval}")
        self.poll_interval = poll_interval
        self.timeout = timeout
        self.abort_event = abort_event or threading.Event()
        self._log = logger or get_logger(__name__)

    def wait(self, page: IPageHandle) -> float:
        """
        等待页面空闲

        Returns:
            实际等待的秒数

        Raises:
            LoadTimeoutError: 超时仍在加载
            LoadAbortedError: 等待期间收到中止信号
        """
        start = time.monotonic()
        deadline = start + self.timeout if self.timeout > 0 else None

        if isinstance(page, ISupportsLoadEvent):
            self._wait_for_load_event(page, deadline)
        if self.abort_event.is_set():
            raise LoadAbortedError("load wait aborted")

        polls = 0
        while page.is_loading():
            if self.abort_event.is_set():
                raise LoadAbortedError("load wait aborted")
            if deadline is not None and time.monotonic() >= deadline:
                raise LoadTimeoutError(page.url, self.timeout)
            if polls == 0:
                self._log.info(f"⏳ Waiting for page to finish loading: {page.url}")
            polls += 1
            if self.abort_event.wait(self.poll_interval):
                raise LoadAbortedError("load wait aborted")

        elapsed = time.monotonic() - start
        self._log.debug(f"page idle after {elapsed:.2f}s ({polls} polls)")
        return elapsed

    def _wait_for_load_event(self, page: ISupportsLoadEvent, deadline: Optional[float]):
        """
        分片等待加载事件，每片之间检查中止信号

        每片最长 poll_interval * 10 秒；事件等待出错时直接返回，交给轮询确认。
        """
        slice_len = self.poll_interval * 10
        while True:
            if self.abort_event.is_set():
                raise LoadAbortedError("load wait aborted")
            if deadline is None:
                step = slice_len
            else:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return
                step = min(slice_len, remaining)
            try:
                if page.wait_loaded(step):
                    return
            except Exception as e:
                self._log.debug(f"load event wait failed, falling back to polling: {e}")
                return
            if not page.is_loading():
                return
