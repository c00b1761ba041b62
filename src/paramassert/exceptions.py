"""
Exception hierarchy raised by the parameter checks.

Responsibilities
  - Define one exception type per kind of failed check.
  - Keep the checked parameter's name and the expectation on the exception.
  - Format uniform, human-readable messages.

Usage Context
  - Raised by ``paramassert.assertions``; callers either let them propagate or
    translate them into their own error types.

Limitations
  - Exceptions carry the parameter name and expectation, never the offending value.
"""
# 说明：参数断言失败时抛出的异常体系。
# 职责：
# - AssertionFailure：所有断言异常的公共基类
# - ParameterAssertionException：布尔前置条件不成立
# - ParameterTypeException：值的类型不在允许的类型列表中
# - ParameterKeyTypeException：映射的某个键类型不符合要求
# - ParameterElementTypeException：序列的某个元素类型不符合要求
# 约定：
# - kind 标签用于在统一捕获时区分失败类型

from __future__ import annotations

from typing import Optional


class AssertionFailure(Exception):
    """Base class for every failed check raised by this library."""

    kind = "failure"


class ParameterAssertionException(AssertionFailure, ValueError):
    """
    Raised when a named precondition on a parameter does not hold.

    - Configuration
      - parameter_name: Name of the checked parameter.
      - description: Free-text description of the violated expectation.
    """

    kind = "assertion"

    def __init__(self, parameter_name: str, description: str, *, message: Optional[str] = None) -> None:
        super().__init__(message or f"Bad value for parameter {parameter_name}: {description}")
        self.parameter_name = parameter_name
        self.description = description


class ParameterTypeException(ParameterAssertionException):
    """Raised when a parameter's value matches none of the allowed types."""

    kind = "type"

    def __init__(self, parameter_name: str, parameter_type: str) -> None:
        super().__init__(parameter_name, f"must be a {parameter_type}")
        self.parameter_type = parameter_type


class ParameterKeyTypeException(ParameterAssertionException):
    """Raised when a key of a mapping parameter is not of the required type."""

    kind = "key_type"

    def __init__(self, parameter_name: str, parameter_type: str) -> None:
        super().__init__(
            parameter_name,
            f"all keys must be {parameter_type}",
            message=f"All keys of parameter {parameter_name} must be {parameter_type}",
        )
        self.parameter_type = parameter_type


class ParameterElementTypeException(ParameterAssertionException):
    """Raised when an element of a sequence parameter matches none of the allowed types."""

    kind = "element_type"

    def __init__(self, parameter_name: str, parameter_type: str) -> None:
        super().__init__(
            parameter_name,
            f"all elements must be {parameter_type}",
            message=f"All elements of parameter {parameter_name} must be {parameter_type}",
        )
        self.parameter_type = parameter_type
