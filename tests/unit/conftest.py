"""Fixtures shared by the unit tests."""

import pytest

from paramassert import types as type_registry
from paramassert.utils import config


@pytest.fixture(autouse=True)
def _isolated_state():
    # 每个测试后恢复全局配置与类型注册表，避免测试间相互影响
    yield
    config._GLOBAL_CONFIG = config.RuntimeConfig()
    type_registry.reset_registry()


class Shape:
    """Base class used by the polymorphic checks."""


class Circle(Shape):
    pass


class Multiplier:
    def __init__(self, factor: int) -> None:
        self.factor = factor

    def __call__(self, value: int) -> int:
        return value * self.factor


@pytest.fixture
def circle() -> Circle:
    return Circle()


@pytest.fixture
def multiplier() -> Multiplier:
    return Multiplier(2)
