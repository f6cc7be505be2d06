"""
Error types for fluentstr.
"""

from typing import Optional


class FluentStrError(Exception):
    """Base exception for all fluentstr errors."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        self.message = message
        self.operation = operation
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.operation:
            parts.append(f"[{self.operation}]")

        parts.append(self.message)

        return " ".join(parts)


class InvalidArgumentError(FluentStrError, ValueError):
    """Raised when an argument lies outside the operation's domain."""

    pass


class FormatArgumentsError(FluentStrError, TypeError):
    """Raised when positional and keyword format arguments are mixed."""

    pass


class UnwrapError(FluentStrError):
    """Raised when unwrapping an empty Option."""

    pass


class UnknownOperationError(FluentStrError):
    """
    Raised when an operation name cannot be resolved.

    The CLI resolves operation names given on the command line against
    the set of zero-argument wrapper methods; anything else ends up here.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        available: Optional[list[str]] = None,
    ) -> None:
        """
        Initialize the error.

        Args:
            message: Error message
            operation: The operation name that failed to resolve
            available: Names that would have been accepted
        """
        self.available = available or []
        super().__init__(message, operation)

    def _format_message(self) -> str:
        message = super()._format_message()

        if self.available:
            message += "\n  Available: " + ", ".join(self.available)

        return message
