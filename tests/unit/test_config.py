"""
配置模块单元测试
"""

from conftest import FakePageHandle
from domlens.application.orchestrator import ProbeSession
from domlens.config import (
    ProbeConfig, WaitConfig, BrowserConfig,
    probe_config, wait_config, browser_config,
    _get_env_float, _get_env_int, _get_env_bool, _get_env_str,
    _get_env_positive_float, _get_env_non_negative_int, reload_config
)


class TestConfigDataclasses:
    """配置数据类测试"""

    def test_probe_config_defaults(self):
        config = ProbeConfig()

        assert config.target_url == "https://chatgpt.com"
        assert config.text_limit == 80
        assert config.tag_summary is True
        assert config.tag_summary_top == 20

    def test_wait_config_defaults(self):
        """100ms 轮询，30 秒超时"""
        config = WaitConfig()

        assert config.poll_interval == 0.1
        assert config.load_timeout == 30.0

    def test_browser_config_defaults(self):
        config = BrowserConfig()

        assert config.addr == "127.0.0.1:9222"
        assert config.launch is True
        assert config.headless is False

    def test_configs_are_mutable(self):
        config = WaitConfig()
        config.load_timeout = 0

        assert config.load_timeout == 0


class TestEnvironmentVariables:
    """环境变量测试"""

    def test_get_env_float_with_valid_value(self, monkeypatch):
        monkeypatch.setenv('TEST_FLOAT', '0.25')

        assert _get_env_float('TEST_FLOAT', 10.0) == 0.25

    def test_get_env_float_with_invalid_value(self, monkeypatch):
        """无效值返回默认值"""
        monkeypatch.setenv('TEST_FLOAT', 'not_a_number')

        assert _get_env_float('TEST_FLOAT', 10.0) == 10.0

    def test_get_env_int_with_invalid_value(self, monkeypatch):
        monkeypatch.setenv('TEST_INT', 'abc')

        assert _get_env_int('TEST_INT', 50) == 50

    def test_get_env_bool(self, monkeypatch):
        monkeypatch.setenv('TEST_BOOL', 'off')
        assert _get_env_bool('TEST_BOOL', True) is False

        monkeypatch.setenv('TEST_BOOL', 'YES')
        assert _get_env_bool('TEST_BOOL', False) is True

        monkeypatch.setenv('TEST_BOOL', 'maybe')
        assert _get_env_bool('TEST_BOOL', True) is True

    def test_get_env_str_ignores_blank(self, monkeypatch):
        monkeypatch.setenv('TEST_STR', '   ')

        assert _get_env_str('TEST_STR', 'fallback') == 'fallback'

    def test_missing_key_returns_default(self):
        assert _get_env_float('NONEXISTENT_KEY_12345', 42.0) == 42.0


class TestGlobalConfigs:
    """全局配置实例测试"""

    def test_instances_are_accessible(self):
        assert hasattr(probe_config, 'target_url')
        assert hasattr(wait_config, 'poll_interval')
        assert hasattr(browser_config, 'addr')


class TestReloadConfig:
    """配置重载测试"""

    def test_reload_reads_environment(self, monkeypatch):
        monkeypatch.setenv('DOMLENS_URL', 'https://example.test/')
        monkeypatch.setenv('DOMLENS_LOAD_TIMEOUT', '5')
        monkeypatch.setenv('DOMLENS_HEADLESS', '1')

        reload_config()

        from domlens import config
        assert config.probe_config.target_url == 'https://example.test/'
        assert config.wait_config.load_timeout == 5.0
        assert config.browser_config.headless is True

        monkeypatch.undo()
        reload_config()


class TestRangeFallback:
    """超出范围的值回退为默认值"""

    def test_non_positive_poll_interval(self, monkeypatch):
        monkeypatch.setenv('TEST_POLL', '0')
        assert _get_env_positive_float('TEST_POLL', 0.1) == 0.1

        monkeypatch.setenv('TEST_POLL', '-1')
        assert _get_env_positive_float('TEST_POLL', 0.1) == 0.1

        monkeypatch.setenv('TEST_POLL', 'inf')
        assert _get_env_positive_float('TEST_POLL', 0.1) == 0.1

        monkeypatch.setenv('TEST_POLL', '0.5')
        assert _get_env_positive_float('TEST_POLL', 0.1) == 0.5

    def test_negative_int(self, monkeypatch):
        monkeypatch.setenv('TEST_LIMIT', '-5')
        assert _get_env_non_negative_int('TEST_LIMIT', 80) == 80

        monkeypatch.setenv('TEST_LIMIT', '0')
        assert _get_env_non_negative_int('TEST_LIMIT', 80) == 0

    def test_reload_with_invalid_values_builds_session(self, monkeypatch):
        """非法环境变量不会让会话构造失败"""
        monkeypatch.setenv('DOMLENS_POLL_INTERVAL', '0')
        monkeypatch.setenv('DOMLENS_TEXT_LIMIT', '-5')
        monkeypatch.setenv('DOMLENS_LOAD_TIMEOUT', '-1')

        reload_config()

        from domlens import config
        assert config.wait_config.poll_interval == 0.1
        assert config.probe_config.text_limit == 80
        assert config.wait_config.load_timeout == -1.0

        session = ProbeSession(
            FakePageHandle(),
            config=config.probe_config,
            wait_config=config.wait_config,
        )
        assert session.waiter.poll_interval == 0.1

        monkeypatch.undo()
        reload_config()
