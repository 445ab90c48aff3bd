"""Custom exceptions for dtokit."""


class DtoError(Exception):
    """Base exception for DTO errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DtoDefinitionError(DtoError):
    """Raised when a DTO class declares override setters inconsistently."""

    pass
