from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel


class ErrorDetails(BaseModel):
    """Structured payload carried by every `AppError`."""

    data_path: Optional[str] = None
    expected: Optional[str] = None
    actual: Optional[str] = None
    message: str = ""


class AppError(Exception):
    """Base class for errors raised (or returned) by this package."""

    def __init__(self, details: ErrorDetails):
        super().__init__(details.message)
        self.details = details


class UnsupportedTypeError(AppError, TypeError):
    """A value is not an instance of the type we were asked to check for."""

    def __init__(self, *, data_path: str, expected: str, actual: str):
        super().__init__(
            ErrorDetails(
                data_path=data_path,
                expected=expected,
                actual=actual,
                message=f"{data_path}: expected {expected}, got {actual}",
            )
        )


class EmptyTopicListError(AppError, ValueError):
    """`add()` / `for_each()` need at least one topic name."""

    def __init__(self, operation: str):
        super().__init__(
            ErrorDetails(message=f"{operation}() requires at least one topic name")
        )


OnError = Callable[[AppError], Any]


def THROW_THE_ERROR(err: AppError) -> Any:  # noqa: N802
    """Default `OnError` handler: fail fast."""
    raise err
