"""
Decorator applying parameter type checks to function arguments.
"""
# 说明：根据 schema 在函数调用前对指定参数执行 parameter_type 检查的装饰器。
# 约定：
# - schema：以参数名为键、类型集合（"a|b" 字符串、列表或类）为值的映射
# - 未显式传入的参数（使用默认值）与 schema 中不存在于形参列表的条目均跳过

from __future__ import annotations

import functools
from typing import Any, Callable, Mapping

from .assertions import parameter_type
from .types import TypeSpec


def parameter_types(schema: Mapping[str, TypeSpec]) -> Callable:
    """
    Decorator checking argument types according to ``schema``.

    Each named argument that is actually passed is checked with
    :func:`parameter_type`, using the argument name in the error.
    """

    def decorator(func: Callable) -> Callable:
        arg_names = func.__code__.co_varnames[: func.__code__.co_argcount]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for name, types in schema.items():
                # 以关键字形式传入时直接检查
                if name in kwargs:
                    parameter_type(types, kwargs[name], name)
                    continue
                if name not in arg_names:
                    continue
                index = arg_names.index(name)
                # 未提供对应位置参数（使用默认值），跳过
                if index >= len(args):
                    continue
                parameter_type(types, args[index], name)
            return func(*args, **kwargs)

        return wrapper

    return decorator
