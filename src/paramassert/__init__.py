"""Parameter assertions for library constructors and setters."""

from .assertions import (
    Assert,
    parameter,
    parameter_type,
    parameter_key_type,
    parameter_element_type,
)
from .decorators import parameter_types
from .exceptions import (
    AssertionFailure,
    ParameterAssertionException,
    ParameterTypeException,
    ParameterKeyTypeException,
    ParameterElementTypeException,
)
from .types import (
    type_name,
    register_type,
    unregister_type,
)
from .utils import (
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
    configure_logging,
)

__version__ = "0.1.0"

__all__ = [
    "Assert",
    "parameter",
    "parameter_type",
    "parameter_key_type",
    "parameter_element_type",
    "parameter_types",
    "AssertionFailure",
    "ParameterAssertionException",
    "ParameterTypeException",
    "ParameterKeyTypeException",
    "ParameterElementTypeException",
    "type_name",
    "register_type",
    "unregister_type",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
    "configure_logging",
]
