"""
Lightweight logging helpers with value-masking defaults.
"""
# 说明：轻量级日志工具，提供统一的 logger 获取入口，并默认对被检查的参数值进行掩码。
# 职责：
# - ValueMaskFilter：根据运行时配置对日志记录中的 value 字段进行脱敏处理
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载掩码过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 是否掩码由 RuntimeConfig.mask_values 控制
# - 日志级别优先级：显式参数 level > 环境变量 PARAMASSERT_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config


class ValueMaskFilter(logging.Filter):
    """Filter that hides checked parameter values in log records if configured."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not get_config().mask_values:
            return True
        # 保留字段结构但隐藏具体内容
        if hasattr(record, "value"):
            record.value = "***"
        return True


def configure_logging(level: Optional[str] = None) -> None:
    log_level = level or os.environ.get("PARAMASSERT_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(f, ValueMaskFilter) for f in root.filters):
        root.addFilter(ValueMaskFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    # 过滤器同时挂在具名 logger 上，保证 caplog 等直接挂载的 handler 也能看到掩码后的记录
    if not any(isinstance(f, ValueMaskFilter) for f in logger.filters):
        logger.addFilter(ValueMaskFilter())
    return logger
