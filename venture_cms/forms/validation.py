"""Per-kind validation of form values against their FieldSpec.

Blank values (None, or strings that are empty after stripping) fail only
required fields; format rules apply to non-blank values.
"""

import math
import re
from enum import Enum
from typing import Any

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from venture_cms.forms.models import FieldKind, FieldSpec, ValidationResult
from venture_cms.observability.logging import get_logger

logger = get_logger(__name__)

# Basic email regex (RFC 5322 simplified)
EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_blank(value: Any) -> bool:
    """True for None and whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def _fmt(bound: float) -> str:
    return str(int(bound)) if float(bound).is_integer() else str(bound)


class FieldValidator:
    """Applies a FieldSpec to a single value.

    Validators are looked up by field kind and return the first failing
    rule, so every invalid value carries exactly one message.
    """

    KIND_VALIDATORS = {
        FieldKind.TEXT: "_validate_text",
        FieldKind.ENUM: "_validate_enum",
        FieldKind.NUMBER: "_validate_number",
        FieldKind.EMAIL: "_validate_email",
        FieldKind.URL: "_validate_url",
        FieldKind.PHONE: "_validate_text",
        FieldKind.POSTAL_CODE: "_validate_text",
    }

    def validate(self, spec: FieldSpec, value: Any) -> ValidationResult:
        """Validate a value against its spec."""
        if is_blank(value):
            if spec.required:
                return self._fail(spec, "required", f"{spec.label} is required")
            return ValidationResult.valid()

        validator = getattr(self, self.KIND_VALIDATORS[spec.kind])
        result: ValidationResult = validator(spec, value)
        if not result.ok:
            return result

        if spec.pattern and isinstance(value, str) and spec.kind != FieldKind.EMAIL:
            if not re.fullmatch(spec.pattern, value):
                return self._fail(spec, "pattern", f"{spec.label} has an invalid format")

        return result

    def _fail(self, spec: FieldSpec, rule: str, default_message: str) -> ValidationResult:
        logger.debug(
            "field_validation_failed",
            field_name=spec.name,
            kind=spec.kind.value,
            rule=rule,
        )
        return ValidationResult.invalid(spec.messages.get(rule, default_message))

    def _check_length(self, spec: FieldSpec, value: str) -> ValidationResult:
        if spec.min is not None and len(value) < spec.min:
            return self._fail(
                spec, "min", f"{spec.label} must be at least {_fmt(spec.min)} characters"
            )
        if spec.max is not None and len(value) > spec.max:
            return self._fail(
                spec, "max", f"{spec.label} must be at most {_fmt(spec.max)} characters"
            )
        return ValidationResult.valid()

    def _validate_text(self, spec: FieldSpec, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return self._fail(spec, "type", f"{spec.label} must be text")
        return self._check_length(spec, value)

    def _validate_enum(self, spec: FieldSpec, value: Any) -> ValidationResult:
        tag = value.value if isinstance(value, Enum) else value
        if tag not in spec.choices:
            return self._fail(
                spec, "choice", f"{spec.label} must be one of: {', '.join(spec.choices)}"
            )
        return ValidationResult.valid()

    def _validate_number(self, spec: FieldSpec, value: Any) -> ValidationResult:
        if isinstance(value, bool):
            # bool is subclass of int, but we don't want it
            return self._fail(spec, "type", f"{spec.label} must be a number")

        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return self._fail(spec, "type", f"{spec.label} must be a number")

        if not isinstance(value, (int, float)) or math.isnan(value):
            return self._fail(spec, "type", f"{spec.label} must be a number")

        low = spec.min if spec.min is not None else -math.inf
        high = spec.max if spec.max is not None else math.inf
        if not low <= value <= high:
            if spec.min is not None and spec.max is not None:
                message = f"{spec.label} must be between {_fmt(spec.min)} and {_fmt(spec.max)}"
            elif spec.min is not None:
                message = f"{spec.label} must be at least {_fmt(spec.min)}"
            else:
                message = f"{spec.label} must be at most {_fmt(spec.max)}"  # type: ignore[arg-type]
            return self._fail(spec, "range", message)

        return ValidationResult.valid()

    def _validate_email(self, spec: FieldSpec, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return self._fail(spec, "type", f"{spec.label} must be text")

        if not re.fullmatch(spec.pattern or EMAIL_PATTERN, value):
            return self._fail(spec, "pattern", "Please enter a valid email address")

        return self._check_length(spec, value)

    def _validate_url(self, spec: FieldSpec, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return self._fail(spec, "type", f"{spec.label} must be text")

        # AnyUrl strips surrounding whitespace, but the raw string is what gets stored
        if value != value.strip():
            return self._fail(spec, "url", "Please enter a valid URL")

        try:
            _URL_ADAPTER.validate_python(value)
        except PydanticValidationError:
            return self._fail(spec, "url", "Please enter a valid URL")

        return self._check_length(spec, value)
