"""
Runtime type inspection for the parameter checks.

Maps Python values onto the primitive type tokens used in a type spec
(``integer``, ``string``, ``array`` ...) and resolves class or interface
names to classes through a small process-wide registry.
"""
# 说明：类型检查所依赖的运行时反射工具。
# 职责：
# - type_name(...)：返回值的小写原始类型名（null/boolean/integer/double/string/array/object）
# - normalize_types(...) / format_types(...)：将 "a|b" 字符串、列表或类统一为有序 token 列表，并还原为 "a|b"
# - register_type(...) / unregister_type(...) / resolve_type(...)：名称到类的注册表，供多态检查使用
# 约定：
# - bool 判定必须先于 int（bool 是 int 的子类）
# - numpy 标量与 ndarray 按对应的原始类型名处理

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Mapping, Sized
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

TypeToken = Union[str, type]
TypeSpec = Union[str, type, Sequence[TypeToken]]

# 类型 token 的别名：float 视同 double
_ALIASES: Dict[str, str] = {"float": "double"}

# 内置类型 token，不参与类名匹配
PRIMITIVE_TOKENS = frozenset(
    {"null", "boolean", "integer", "double", "float", "string", "array", "object", "callable", "true", "false", "Traversable"}
)

_DEFAULT_REGISTRY: Dict[str, type] = {
    "Traversable": Iterable,
    "Iterator": Iterator,
    "Countable": Sized,
    "ArrayAccess": Mapping,
}

_registry: Dict[str, type] = dict(_DEFAULT_REGISTRY)
_registry_lock = threading.Lock()


def type_name(value: Any) -> str:
    """Return the primitive type token describing ``value``."""
    if value is None:
        return "null"
    if isinstance(value, (bool, np.bool_)):
        return "boolean"
    if isinstance(value, (int, np.integer)):
        return "integer"
    if isinstance(value, (float, np.floating)):
        return "double"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple, Mapping)):
        return "array"
    # 0 维 ndarray 不可迭代，按普通对象处理
    if isinstance(value, np.ndarray) and value.ndim > 0:
        return "array"
    return "object"


def canonical_token(token: TypeToken) -> TypeToken:
    if isinstance(token, str):
        return _ALIASES.get(token, token)
    return token


def normalize_types(types: TypeSpec) -> List[TypeToken]:
    """
    Normalize a type spec into an ordered list of tokens.

    - Args:
        - types: ``"integer|string"``, a list/tuple of tokens, or a single class.
    - Returns:
        - A new list of tokens in the given order.
    """
    if isinstance(types, str):
        return types.split("|")
    if isinstance(types, type):
        return [types]
    return list(types)


def format_types(types: Sequence[TypeToken]) -> str:
    # 将 token 列表还原为 "a|b" 形式，类对象使用其 __name__
    return "|".join(t if isinstance(t, str) else t.__name__ for t in types)


def register_type(name: str, cls: type) -> None:
    """Make ``name`` usable as a type token resolving to ``cls``."""
    if not isinstance(cls, type):
        raise TypeError("cls must be a class")
    with _registry_lock:
        _registry[name] = cls


def unregister_type(name: str) -> None:
    with _registry_lock:
        _registry.pop(name, None)


def reset_registry() -> None:
    # 恢复默认注册表（主要供测试使用）
    with _registry_lock:
        _registry.clear()
        _registry.update(_DEFAULT_REGISTRY)


def resolve_type(token: TypeToken, *, registry: bool = True) -> Optional[type]:
    """Return the class a token stands for, or None if it names no registered class."""
    if isinstance(token, type):
        return token
    if not registry:
        return None
    return _registry.get(token)


def class_names(cls: type) -> List[str]:
    # 一个类可被引用的全部名称：简单名、限定名、模块全路径
    names = [cls.__name__, cls.__qualname__, f"{cls.__module__}.{cls.__qualname__}"]
    return names
