"""Custom exceptions for the customization context."""

from typing import Any, Iterable, Optional


class CustomizationError(Exception):
    """Base class for customization errors."""

    pass


class UnknownConfigFieldError(CustomizationError, ValueError):
    """
    Exception raised when a configuration key is not a known template option.

    Attributes:
        key: The offending key
        known_fields: Valid field names (wire keys)
    """

    def __init__(self, key: str, known_fields: Optional[Iterable[str]] = None):
        self.key = key
        self.known_fields = sorted(known_fields) if known_fields else []

        message = f"Invalid configuration key: {key}"
        if self.known_fields:
            message += f"\nKnown keys: {', '.join(self.known_fields)}"

        super().__init__(message)


class InvalidConfigValueError(CustomizationError, ValueError):
    """
    Exception raised when a configuration value has the wrong type or is out of range.

    Attributes:
        key: Field that failed validation
        value: The rejected value
        expected: Human-readable description of the accepted values
    """

    def __init__(self, key: str, value: Any, expected: str):
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid value for {key}. Expected {expected}, got {type(value).__name__} ({value!r})"
        )


class InvalidPresetTableError(CustomizationError, ValueError):
    """
    Exception raised when the spacing preset table is incomplete.

    Every preset must define every derived spacing field; a partial entry would
    leave stale values behind when the preset is applied.
    """

    pass


class EmptyHistoryError(CustomizationError, LookupError):
    """Exception raised when the current snapshot is requested before the first reset."""

    pass


class PersistenceFailure(CustomizationError):
    """
    Exception raised when the persistence layer cannot read or write a config.

    Attributes:
        resume_id: Resume the operation targeted
        operation: "fetch" or "store"
        original_error: The underlying storage/network error
    """

    def __init__(
        self,
        message: str,
        resume_id: Any = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.resume_id = resume_id
        self.operation = operation
        self.original_error = original_error

        parts = [message]
        if operation:
            parts.append(f"Operation: {operation} (resume {resume_id})")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class ResumeNotFoundError(CustomizationError, LookupError):
    """Exception raised when a resume record does not exist."""

    def __init__(self, resume_id: Any):
        self.resume_id = resume_id
        super().__init__(f"Resume not found: {resume_id}")
