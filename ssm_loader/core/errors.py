"""
Loader Errors

Failures raised while populating a record from the parameter store.
"""

from __future__ import annotations

from typing import Optional


class PopulateError(Exception):
    """Base class for record population failures."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class FetchError(PopulateError):
    """Raised when the parameter store lookup for a field fails."""

    def __init__(self, field: str, path: str, cause: BaseException) -> None:
        super().__init__(field, f"Failed to fetch parameter {path} for field {field}: {cause}")
        self.path = path
        self.cause = cause


class ParseError(PopulateError):
    """Raised when a fetched value cannot be converted to the field's kind."""

    def __init__(
        self,
        field: str,
        raw: str,
        kind: str,
        reason: str = "invalid syntax",
        path: Optional[str] = None,
    ) -> None:
        location = f" (parameter {path})" if path else ""
        super().__init__(field, f"Cannot parse {raw!r} as {kind} for field {field}{location}: {reason}")
        self.raw = raw
        self.kind = kind
        self.reason = reason
        self.path = path


class UnsupportedKindError(PopulateError):
    """Raised when a field's declared type has no defined coercion."""

    def __init__(self, field: str, kind: str) -> None:
        super().__init__(field, f"Field {field} is of a type that cannot be set: {kind}")
        self.kind = kind
