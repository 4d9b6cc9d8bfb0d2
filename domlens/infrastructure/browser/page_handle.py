"""
DrissionPage 页面句柄适配器

把 DrissionPage 的 tab / ChromiumPage 适配为 IPageHandle。
"""

from typing import Any


class DrissionPageHandle:
    """
    DrissionPage 页面句柄

    load 使用 none 加载模式，只发起导航不等待完成；
    完成与否交给 LoadWaiter 通过 is_loading / wait_loaded 判断。
    """

    def __init__(self, tab: Any):
        self.tab = tab

    @property
    def url(self) -> str:
        return self.tab.url or ""

    def load(self, url: str) -> None:
        self.tab.set.load_mode.none()
        self.tab.get(url)

    def is_loading(self) -> bool:
        return bool(self.tab.states.is_loading)

    def execute_script(self, source: str) -> Any:
        return self.tab.run_js(source)

    def wait_loaded(self, timeout: float) -> bool:
        """基于浏览器加载事件等待文档完成（timeout 为 None 时用 DrissionPage 默认超时）"""
        return bool(self.tab.wait.doc_loaded(timeout=timeout, raise_err=False))
