"""Field decoding error taxonomy."""

from __future__ import annotations


class FieldDataError(Exception):
    """Base for recoverable input errors raised by validate and get_ok_err."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class SchemaError(FieldDataError):
    """Raised when a field name has no schema entry."""


class UnknownTypeError(FieldDataError):
    """Raised when a schema entry declares a kind outside the recognized set."""

    def __init__(self, message: str, *, field: str, declared_type: object) -> None:
        super().__init__(message, field=field)
        self.declared_type = declared_type


class CoercionError(FieldDataError):
    """Raised when a raw value cannot be converted to its declared kind."""


class FieldDataDefect(RuntimeError):
    """Raised when the accessor contract is broken by the caller.

    Not a FieldDataError: reading a field outside the schema, or reading
    input that was never validated, is a programming error.
    """
