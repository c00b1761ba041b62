"""
Unit tests for runtime configuration utilities.
"""
# 说明：RuntimeConfig 及全局配置访问辅助函数的单元测试。
# 覆盖：
# - configure(...)：通过关键字参数更新全局配置实例字段
# - RuntimeConfig.load_from_env(...)：从环境变量加载并覆写配置选项
# - get_config()：返回全局 RuntimeConfig 单例

import pytest

from paramassert import RuntimeConfig, configure, get_config


def test_configure_updates_values() -> None:
    cfg = configure(log_failures=False, mask_values=False)
    assert cfg.log_failures is False
    assert cfg.mask_values is False
    assert get_config() is cfg


def test_configure_rejects_unknown_option() -> None:
    with pytest.raises(AttributeError):
        configure(strictness="high")


def test_runtime_config_env_override(monkeypatch) -> None:
    cfg = RuntimeConfig()
    monkeypatch.setenv("PARAMASSERT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PARAMASSERT_MASK_VALUES", "false")
    monkeypatch.setenv("PARAMASSERT_LOG_FAILURES", "YES")
    cfg.load_from_env()
    assert cfg.log_level == "DEBUG"
    assert cfg.mask_values is False
    assert cfg.log_failures is True


def test_get_config_returns_singleton() -> None:
    cfg = get_config()
    cfg.log_failures = False
    assert get_config().log_failures is False
