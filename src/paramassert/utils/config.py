"""
Runtime configuration utilities.

Holds the library's tunable options and exposes helpers to read them
from environment variables or update them at runtime.
"""
# 说明：运行时配置管理工具，集中管理断言库的可调选项，并支持环境变量覆写与运行期更新。
# 职责：
# - RuntimeConfig：封装日志等级、失败日志开关、被检查值的掩码开关等配置项
# - load_from_env(...)：按统一前缀（PARAMASSERT_）从环境变量加载并解析配置值
# - get_config()：获取全局 RuntimeConfig 单例
# - configure(...)：通过关键字参数更新全局配置并返回更新后的实例
# 约定：
# - 布尔类环境变量使用 {"1", "true", "yes"}（大小写不敏感）视为 True
# - 未知配置键在 update(...) 中会触发 AttributeError

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict

_BOOL_KEYS = ("LOG_FAILURES", "MASK_VALUES")


@dataclass
class RuntimeConfig:
    log_level: str = field(default_factory=lambda: os.environ.get("PARAMASSERT_LOG_LEVEL", "WARNING"))
    log_failures: bool = True
    mask_values: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)

    def update(self, **kwargs: Any) -> None:
        # 按关键字参数更新当前配置实例，未知字段名将显式报错
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "PARAMASSERT_") -> None:
        # 从带有指定前缀的环境变量中加载配置，并进行类型转换后写回实例字段
        for key in ("LOG_LEVEL",) + _BOOL_KEYS:
            env_key = f"{prefix}{key}"
            if env_key not in os.environ:
                continue  # 未设置对应环境变量时保持当前配置值不变
            value: Any = os.environ[env_key]
            if key in _BOOL_KEYS:
                value = value.lower() in {"1", "true", "yes"}
            setattr(self, key.lower(), value)


# 全局配置单例
_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    # 以关键字参数更新全局配置，并返回更新后的实例
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
