"""
页面句柄接口

定义流水线对浏览器的全部依赖：加载、加载状态、执行脚本。
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class IPageHandle(Protocol):
    """
    页面句柄接口

    职责:
    - 提供嵌入式浏览器的最小操作集合
    - 隔离具体浏览器实现（DrissionPage、测试替身等）
    """

    @property
    def url(self) -> str:
        """当前 URL"""
        ...

    def load(self, url: str) -> None:
        """开始导航，不等待加载完成"""
        ...

    def is_loading(self) -> bool:
        """导航进行中返回 True"""
        ...

    def execute_script(self, source: str) -> Any:
        """在页面全局上下文中以函数体形式执行脚本并返回结果，失败时抛出异常"""
        ...


@runtime_checkable
class ISupportsLoadEvent(Protocol):
    """可选能力：基于浏览器事件的加载完成等待"""

    def wait_loaded(self, timeout: float) -> bool:
        """等待文档加载完成，超时返回 False"""
        ...
