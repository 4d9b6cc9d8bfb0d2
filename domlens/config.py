"""
DomLens 配置中心

集中管理所有可配置参数，避免硬编码散落在各模块中。
支持从环境变量读取配置。

用法:
    from domlens.config import probe_config, wait_config, browser_config

    # 访问配置
    url = probe_config.target_url
    timeout = wait_config.load_timeout
"""

import math
import os
from dataclasses import dataclass


DEFAULT_TARGET_URL = "https://chatgpt.com"


@dataclass
class ProbeConfig:
    """
    探测配置

    控制目标页面与 DOM 输出的行为参数。
    """
    target_url: str = DEFAULT_TARGET_URL
    text_limit: int = 80            # 文本预览截断长度
    tag_summary: bool = True        # 是否在元素列表后输出标签统计
    tag_summary_top: int = 20       # 标签统计显示前 N 种


@dataclass
class WaitConfig:
    """
    加载等待配置

    load_timeout <= 0 表示无限等待。
    """
    poll_interval: float = 0.1      # 轮询间隔(秒)
    load_timeout: float = 30.0      # 加载等待超时(秒)


@dataclass
class BrowserConfig:
    """
    浏览器配置

    launch=True 时启动独立的自动化浏览器，否则连接 addr 上已开启调试端口的浏览器。
    """
    addr: str = "127.0.0.1:9222"
    launch: bool = True
    headless: bool = False
    user_data_dir: str = "browser_profile"


def _get_env_str(key: str, default: str) -> str:
    """从环境变量获取字符串配置"""
    value = os.environ.get(key)
    if value and value.strip():
        return value.strip()
    return default


def _get_env_float(key: str, default: float) -> float:
    """从环境变量获取浮点数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置（1/true/yes/on 与 0/false/no/off）"""
    value = os.environ.get(key)
    if value:
        lowered = value.strip().lower()
        if lowered in ('1', 'true', 'yes', 'on'):
            return True
        if lowered in ('0', 'false', 'no', 'off'):
            return False
    return default


def _get_env_positive_float(key: str, default: float) -> float:
    """从环境变量获取有限正浮点数配置，否则返回默认值"""
    value = _get_env_float(key, default)
    return value if math.isfinite(value) and value > 0 else default


def _get_env_non_negative_int(key: str, default: int) -> int:
    """从环境变量获取非负整数配置，< 0 时返回默认值"""
    value = _get_env_int(key, default)
    return value if value >= 0 else default


def _build_probe_config() -> ProbeConfig:
    return ProbeConfig(
        target_url=_get_env_str('DOMLENS_URL', DEFAULT_TARGET_URL),
        text_limit=_get_env_non_negative_int('DOMLENS_TEXT_LIMIT', 80),
        tag_summary=_get_env_bool('DOMLENS_TAG_SUMMARY', True),
    )


def _build_wait_config() -> WaitConfig:
    # load_timeout <= 0 合法（无限等待），不做范围检查
    return WaitConfig(
        poll_interval=_get_env_positive_float('DOMLENS_POLL_INTERVAL', 0.1),
        load_timeout=_get_env_float('DOMLENS_LOAD_TIMEOUT', 30.0),
    )


def _build_browser_config() -> BrowserConfig:
    return BrowserConfig(
        addr=_get_env_str('DOMLENS_BROWSER_ADDR', "127.0.0.1:9222"),
        launch=_get_env_bool('DOMLENS_LAUNCH', True),
        headless=_get_env_bool('DOMLENS_HEADLESS', False),
    )


# ============================================================
# 全局配置实例
# ============================================================

probe_config = _build_probe_config()
wait_config = _build_wait_config()
browser_config = _build_browser_config()


def reload_config():
    """
    重新加载配置

    从环境变量重新读取配置。
    """
    global probe_config, wait_config, browser_config

    probe_config = _build_probe_config()
    wait_config = _build_wait_config()
    browser_config = _build_browser_config()
