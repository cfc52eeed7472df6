"""Form definition models: field rules, steps and validation outcomes."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FieldKind(str, Enum):
    """Value kind of a form field; selects the validator."""

    TEXT = "text"
    ENUM = "enum"
    NUMBER = "number"
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    POSTAL_CODE = "postal_code"


class SessionMode(str, Enum):
    """Origin of a form session's values."""

    CREATE = "create"  # Blank placeholders
    EDIT = "edit"  # Seeded from an existing record


class FieldSpec(BaseModel):
    """Validation rule bound to one named form field.

    `min` and `max` bound the string length for text-like kinds and the
    value itself for NUMBER fields.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique field key")
    label: str = Field(..., description="Human-readable name used in messages")
    kind: FieldKind = Field(..., description="Value kind")
    required: bool = Field(default=False, description="Reject blank values")
    min: float | None = Field(default=None, description="Lower length or value bound")
    max: float | None = Field(default=None, description="Upper length or value bound")
    pattern: str | None = Field(default=None, description="Format regex for non-blank values")
    choices: tuple[str, ...] = Field(default=(), description="Allowed tags for ENUM fields")
    messages: dict[str, str] = Field(
        default_factory=dict,
        description="Overrides for generated messages, keyed by rule name",
    )


class StepDefinition(BaseModel):
    """One page of the form."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=1, description="1-based position")
    title: str = Field(default="", description="Heading shown for the step")
    fields: tuple[str, ...] = Field(..., description="Field names in display order")


class ValidationResult(BaseModel):
    """Outcome of validating one value: ok, or invalid with a message."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    message: str | None = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def invalid(cls, message: str) -> "ValidationResult":
        return cls(ok=False, message=message)
