"""Form exception hierarchy.

Field validation problems are never raised; they are stored as messages
on the session. These exceptions signal programming errors.
"""


class FormError(Exception):
    """Base exception for form definition and submission errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownFieldError(FormError, KeyError):
    """Raised when a field name is not registered in the schema."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Unknown form field: {field_name!r}")
        self.field_name = field_name

    def __str__(self) -> str:
        return self.message


class SchemaDefinitionError(FormError):
    """Raised when steps do not partition the registered fields."""


class SubmissionBlockedError(FormError):
    """Raised when a payload is requested while fields are invalid."""

    def __init__(self, field_errors: dict[str, str]) -> None:
        names = ", ".join(sorted(field_errors))
        super().__init__(f"Cannot submit while fields are invalid: {names}")
        self.field_errors = field_errors
