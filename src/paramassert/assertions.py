"""
Parameter checks for constructors and setters.

Every check is a plain function that returns ``None`` when the check holds
and raises a subclass of ``ParameterAssertionException`` otherwise. The
same functions are exposed as static methods of :class:`Assert`.

Note: these checks are meant for constructor and setter arguments. Running
them on every call of a hot function has a measurable cost.
"""
# 说明：参数断言的核心实现。
# 职责：
# - parameter：布尔前置条件检查
# - parameter_type：单个值的类型检查，支持 "a|b" 字符串或列表形式的类型集合
# - parameter_key_type：映射所有键的类型检查（仅支持 integer / string）
# - parameter_element_type：序列所有元素的类型检查，遇到首个不匹配元素立即失败
# - _has_type / _is_instance_of：共享的类型匹配谓词与多态（类名）检查
# 约定：
# - 所有失败立即抛出，不做任何本地恢复
# - 失败时按配置以 DEBUG 级别记录日志，被检查的值默认被掩码

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from .exceptions import (
    ParameterAssertionException,
    ParameterElementTypeException,
    ParameterKeyTypeException,
    ParameterTypeException,
)
from .types import (
    PRIMITIVE_TOKENS,
    TypeSpec,
    TypeToken,
    canonical_token,
    class_names,
    format_types,
    normalize_types,
    resolve_type,
    type_name,
)
from .utils.config import get_config
from .utils.logging import get_logger

_KEY_TYPES = ("integer", "string")


def _report(
    exc: ParameterAssertionException,
    value: Any = None,
    *,
    with_value: bool = True,
) -> ParameterAssertionException:
    # 记录失败信息后返回异常本身，由调用处 raise
    if get_config().log_failures:
        extra = {"parameter": exc.parameter_name}
        if with_value:
            extra["value"] = repr(value)
        get_logger(__name__).debug("%s check failed: %s", exc.kind, exc, extra=extra)
    return exc


def parameter(condition: Any, name: str, description: str) -> None:
    """
    Check a parameter precondition.

    - Args:
        - condition: Result of the check; only its truth is tested.
        - name: Name of the checked parameter.
        - description: Message to include if the condition fails.
    - Raises:
        - ParameterAssertionException: If ``condition`` is false.
    """
    if not condition:
        raise _report(ParameterAssertionException(name, description), with_value=False)


def parameter_type(types: TypeSpec, value: Any, name: str) -> None:
    """
    Check a parameter's type.

    Prefer annotations where a static checker covers the case; this is meant
    for union types and values whose type is only known at runtime.

    - Args:
        - types: Allowed types. A native type token (``"integer"``,
          ``"string"``, ``"null"`` ...), a class or interface name, a class,
          or a list of those. Several tokens may also be joined with ``"|"``.
        - value: The parameter's actual value.
        - name: Name of the checked parameter.
    - Raises:
        - ParameterTypeException: If ``value`` is of none of the types (or,
          for objects, is an instance of none of the classes).
    """
    allowed = normalize_types(types)
    if not _has_type(value, allowed):
        raise _report(ParameterTypeException(name, format_types(allowed)), value)


def parameter_key_type(type: str, value: Any, name: str) -> None:
    """
    Check the type of every key of an array-like parameter.

    ``type`` must be exactly ``"integer"`` or ``"string"``. Keys of a list,
    tuple or ndarray are its integer indices. Keys are not coerced: ``True``
    is a ``boolean`` key and ``"1"`` a ``string`` key.

    - Raises:
        - ParameterTypeException: If ``value`` is not array-like.
        - ParameterAssertionException: If ``type`` is not a supported key type.
        - ParameterKeyTypeException: On the first key not of type ``type``.
    """
    parameter_type("array", value, name)

    if type not in _KEY_TYPES:
        raise _report(ParameterAssertionException("type", 'must be "integer" or "string"'), type)

    for key in _iter_keys(value):
        if type_name(key) != type:
            raise _report(ParameterKeyTypeException(name, type), key)


def parameter_element_type(types: TypeSpec, value: Any, name: str) -> None:
    """
    Check the type of every element of an array-like parameter.

    Elements are checked in order and the first mismatch raises; the
    remaining elements are not consumed. For a mapping the values are
    checked.

    - Raises:
        - ParameterTypeException: If ``value`` is not array-like.
        - ParameterElementTypeException: If an element is of none of ``types``.
    """
    parameter_type("array", value, name)
    allowed = normalize_types(types)

    for element in _iter_elements(value):
        if not _has_type(element, allowed):
            raise _report(ParameterElementTypeException(name, format_types(allowed)), element)


def _iter_keys(value: Any) -> Iterable[Any]:
    if isinstance(value, Mapping):
        return iter(value)
    return range(len(value))


def _iter_elements(value: Any) -> Iterable[Any]:
    if isinstance(value, Mapping):
        return iter(value.values())
    return iter(value)


def _has_type(value: Any, allowed_types: List[TypeToken]) -> bool:
    # 按优先级依次尝试 6 个析取条件，任一成立即返回 True
    allowed = [canonical_token(t) for t in allowed_types]
    kind = type_name(value)

    if kind in allowed:
        return True

    if "callable" in allowed and callable(value):
        return True

    if kind == "object":
        if _is_instance_of(value, allowed):
            return True
    else:
        # 原始类型与数组（含其子类）只按类对象或类名匹配，不经过注册表中的接口名
        named = [t for t in allowed if t not in PRIMITIVE_TOKENS]
        if named and _is_instance_of(value, named, registry=False):
            return True

    if kind == "array" and "Traversable" in allowed:
        return True

    if _is_bool(value, False) and "false" in allowed:
        return True
    if _is_bool(value, True) and "true" in allowed:
        return True

    return False


def _is_bool(value: Any, expected: bool) -> bool:
    return type_name(value) == "boolean" and bool(value) is expected


def _is_instance_of(value: Any, allowed_types: List[TypeToken], *, registry: bool = True) -> bool:
    # 逐个 token 检查：先查注册表/类对象，再按名称匹配值所属类的 MRO
    mro_names: Optional[set] = None
    for token in allowed_types:
        cls = resolve_type(token, registry=registry)
        if cls is not None and isinstance(value, cls):
            return True
        if not isinstance(token, str):
            continue
        if mro_names is None:
            mro_names = {n for c in type(value).__mro__ for n in class_names(c)}
        if token in mro_names:
            return True
    return False


class Assert:
    """Namespace exposing the checks as static methods, e.g. ``Assert.parameter(...)``."""

    parameter = staticmethod(parameter)
    parameter_type = staticmethod(parameter_type)
    parameter_key_type = staticmethod(parameter_key_type)
    parameter_element_type = staticmethod(parameter_element_type)
