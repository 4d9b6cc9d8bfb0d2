"""
Pytest 配置文件

提供测试所需的 fixtures 和共享配置。
"""

import sys
from pathlib import Path

import pytest

# 确保项目根目录在 Python 路径中
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from domlens.infrastructure.js import ScriptStore


DOM_SCRIPT = ScriptStore.dom_enumerator_js(80)
CSS_SCRIPT = ScriptStore.VERTICAL_ONLY_CSS


# ============================================================
# Fake Page Handle
# ============================================================

class FakePageHandle:
    """
    模拟页面句柄，用于测试

    loading_sequence: 每次 is_loading() 依次弹出的值，耗尽后返回 always_loading
    script_results: {脚本源码: 返回值或异常实例}
    """

    def __init__(self, loading_sequence=None, script_results=None,
                 always_loading=False, url=""):
        self._url = url
        self.loading_sequence = list(loading_sequence or [])
        self.always_loading = always_loading
        self.script_results = dict(script_results or {})
        self.loaded = []
        self.executed = []
        self.loading_checks = 0

    @property
    def url(self):
        return self._url

    def load(self, url):
        self.loaded.append(url)
        self._url = url

    def is_loading(self):
        self.loading_checks += 1
        if self.loading_sequence:
            return self.loading_sequence.pop(0)
        return self.always_loading

    def execute_script(self, source):
        self.executed.append(source)
        result = self.script_results.get(source)
        if isinstance(result, Exception):
            raise result
        return result


class FakeEventPageHandle(FakePageHandle):
    """
    支持加载事件的页面句柄

    event_results: 每次 wait_loaded() 依次弹出的返回值，耗尽后返回 True
    on_wait: 每次 wait_loaded() 时调用（例如模拟等待期间收到中止）
    """

    def __init__(self, *args, event_error=None, event_results=None, on_wait=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.event_error = event_error
        self.event_results = list(event_results or [])
        self.on_wait = on_wait
        self.wait_calls = []

    def wait_loaded(self, timeout):
        self.wait_calls.append(timeout)
        if self.on_wait:
            self.on_wait()
        if self.event_error:
            raise self.event_error
        if self.event_results:
            return self.event_results.pop(0)
        return True


# ============================================================
# Mock DrissionPage Tab
# ============================================================

class _Recorder:
    def __init__(self):
        self.calls = []


class MockLoadMode(_Recorder):
    def none(self):
        self.calls.append('none')


class MockSetter:
    def __init__(self):
        self.load_mode = MockLoadMode()


class MockStates:
    def __init__(self):
        self.is_loading = False


class MockWaiter(_Recorder):
    def __init__(self):
        super().__init__()
        self.result = True

    def doc_loaded(self, timeout=None, raise_err=None):
        self.calls.append((timeout, raise_err))
        return self.result


class MockBrowserTab:
    """模拟 DrissionPage 标签页"""

    def __init__(self):
        self.url = ""
        self.set = MockSetter()
        self.states = MockStates()
        self.wait = MockWaiter()
        self.js_results = {}
        self.visited = []
        self.quit_called = False

    def get(self, url):
        self.visited.append(url)
        self.url = url
        return True

    def run_js(self, script):
        """执行 JS 脚本（返回预设结果）"""
        return self.js_results.get(script, None)

    def quit(self):
        self.quit_called = True


# ============================================================
# Fixtures
# ============================================================

@pytest.fixture
def idle_page():
    """已空闲、脚本全部正常的页面"""
    return FakePageHandle(script_results={CSS_SCRIPT: None, DOM_SCRIPT: []})


@pytest.fixture
def single_div_page():
    """只有一个 <div id="x" class="y">hello</div> 的页面"""
    lines = [
        "HTML|||hello",
        "HEAD|||",
        "BODY|||hello",
        "DIV|x|y|hello",
    ]
    return FakePageHandle(
        loading_sequence=[True, True, False],
        script_results={CSS_SCRIPT: None, DOM_SCRIPT: lines},
        url="https://example.test/",
    )


@pytest.fixture
def mock_tab():
    """模拟浏览器标签页"""
    return MockBrowserTab()


@pytest.fixture
def sink():
    """收集输出行（传 sink.append 给被测对象）"""
    lines = []
    return lines
