"""
DomLens 异常定义
"""


class DomLensError(Exception):
    """所有 DomLens 异常的基类"""


class BrowserConnectionError(DomLensError):
    """无法连接或启动浏览器"""


class LoadTimeoutError(DomLensError):
    """页面在超时时间内没有进入空闲状态"""

    def __init__(self, url: str, timeout: float):
        self.url = url
        self.timeout = timeout
        super().__init__(f"Page did not finish loading within {timeout:.1f}s: {url}")


class LoadAbortedError(DomLensError):
    """等待加载期间收到中止信号"""
