"""
fluentstr Utilities Package.

Common utilities for error handling.
"""

from fluentstr.utils.errors import (
    FluentStrError,
    FormatArgumentsError,
    InvalidArgumentError,
    UnknownOperationError,
    UnwrapError,
)

__all__ = [
    "FluentStrError",
    "InvalidArgumentError",
    "FormatArgumentsError",
    "UnwrapError",
    "UnknownOperationError",
]
