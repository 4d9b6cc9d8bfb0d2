"""
ScriptInjector 单元测试
"""

import logging

from conftest import FakePageHandle, CSS_SCRIPT
from domlens.application.services import ScriptInjector


class TestInject:
    """注入测试"""

    def test_executes_css_script(self, idle_page):
        """执行纵向布局样式脚本"""
        injector = ScriptInjector()

        assert injector.inject(idle_page) is True
        assert idle_page.executed == [CSS_SCRIPT]
        assert injector.last_error is None

    def test_script_sets_overflow_and_width_rules(self):
        assert "overflow-x: hidden !important" in CSS_SCRIPT
        assert "max-width: 100vw !important" in CSS_SCRIPT
        assert "document.head.appendChild(style)" in CSS_SCRIPT

    def test_failure_is_logged_and_swallowed(self, caplog):
        """脚本失败不抛出，记录日志"""
        page = FakePageHandle(script_results={CSS_SCRIPT: RuntimeError("page navigated away")})
        injector = ScriptInjector()

        with caplog.at_level(logging.ERROR):
            result = injector.inject(page)

        assert result is False
        assert injector.last_error.reason == "page navigated away"
        assert "Failed to inject vertical-only CSS: page navigated away" in caplog.text

    def test_no_retry_on_failure(self):
        """失败不重试"""
        page = FakePageHandle(script_results={CSS_SCRIPT: RuntimeError("boom")})

        ScriptInjector().inject(page)

        assert page.executed.count(CSS_SCRIPT) == 1

    def test_custom_script(self, idle_page):
        ScriptInjector(script="document.title = 'x';").inject(idle_page)

        assert idle_page.executed == ["document.title = 'x';"]
