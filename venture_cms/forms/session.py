"""Form session: the values and field errors of one in-progress form.

A session is seeded either with placeholders (create mode) or from an
existing listing (edit mode) and turns its values into a
`BusinessPayload` on submit. Setting a field re-validates the step that
owns it; fields of other steps keep their last computed errors.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from venture_cms.business.geography import decode_point_or_default, encode_point
from venture_cms.business.models import BusinessPayload
from venture_cms.config.models.forms import FormDefaults
from venture_cms.forms.business_form import (
    LATITUDE_FIELD,
    LONGITUDE_FIELD,
    business_form_registry,
)
from venture_cms.forms.exceptions import SubmissionBlockedError
from venture_cms.forms.models import FieldKind, SessionMode
from venture_cms.forms.schema import FieldSchemaRegistry
from venture_cms.forms.validation import is_blank
from venture_cms.observability.logging import get_logger

logger = get_logger(__name__)

GEOGRAPHY_FIELD = "location"


def default_values(
    registry: FieldSchemaRegistry,
    defaults: FormDefaults,
) -> dict[str, Any]:
    """Placeholder values for a new listing, one entry per field."""
    values: dict[str, Any] = {}
    for name in registry.field_names:
        spec = registry.spec_for(name)
        if name == LATITUDE_FIELD:
            values[name] = defaults.default_latitude
        elif name == LONGITUDE_FIELD:
            values[name] = defaults.default_longitude
        elif spec.kind == FieldKind.ENUM:
            values[name] = defaults.default_business_type.value
        else:
            values[name] = ""
    return values


def values_from_record(
    record: Mapping[str, Any] | BaseModel,
    registry: FieldSchemaRegistry,
    defaults: FormDefaults,
) -> dict[str, Any]:
    """Map an existing listing onto form values.

    Missing or null columns fall back to the create-mode placeholders.
    The combined geography column is split into latitude and longitude;
    text that is not a point yields the default center point.
    """
    data = record.model_dump() if isinstance(record, BaseModel) else dict(record)
    values = default_values(registry, defaults)

    for name in registry.field_names:
        if name in (LATITUDE_FIELD, LONGITUDE_FIELD):
            continue
        raw = data.get(name)
        if raw is None or raw == "":
            continue
        values[name] = raw.value if isinstance(raw, Enum) else raw

    latitude, longitude = decode_point_or_default(
        data.get(GEOGRAPHY_FIELD),
        (defaults.default_latitude, defaults.default_longitude),
    )
    values[LATITUDE_FIELD] = latitude
    values[LONGITUDE_FIELD] = longitude
    return values


def _record_id(record: Mapping[str, Any] | BaseModel) -> UUID | None:
    raw = getattr(record, "id", None) if isinstance(record, BaseModel) else record.get("id")
    if raw is None or isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        return None


class FormSession:
    """Mutable field values and per-field errors for one form instance.

    Use `create` for a new listing and `from_record` to edit one. The
    session never raises for invalid input: problems are stored as
    messages and read back with `errors_for_step`.
    """

    def __init__(
        self,
        values: dict[str, Any],
        mode: SessionMode,
        registry: FieldSchemaRegistry | None = None,
        record_id: UUID | None = None,
    ) -> None:
        self._registry = registry or business_form_registry()
        missing = set(self._registry.field_names) - set(values)
        if missing:
            raise ValueError(f"Form values missing fields: {sorted(missing)}")

        self._values = dict(values)
        self._errors: dict[str, str] = {}
        self.mode = mode
        self.record_id = record_id

    @classmethod
    def create(
        cls,
        defaults: FormDefaults | None = None,
        registry: FieldSchemaRegistry | None = None,
    ) -> "FormSession":
        """Start a session for a new listing."""
        registry = registry or business_form_registry()
        values = default_values(registry, defaults or FormDefaults())
        logger.debug("form_session_created", mode=SessionMode.CREATE.value)
        return cls(values, SessionMode.CREATE, registry)

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any] | BaseModel,
        defaults: FormDefaults | None = None,
        registry: FieldSchemaRegistry | None = None,
    ) -> "FormSession":
        """Start a session that edits an existing listing."""
        registry = registry or business_form_registry()
        values = values_from_record(record, registry, defaults or FormDefaults())
        record_id = _record_id(record)
        logger.debug(
            "form_session_created",
            mode=SessionMode.EDIT.value,
            record_id=str(record_id) if record_id else None,
        )
        return cls(values, SessionMode.EDIT, registry, record_id=record_id)

    @property
    def registry(self) -> FieldSchemaRegistry:
        return self._registry

    @property
    def values(self) -> dict[str, Any]:
        """Copy of the current values."""
        return dict(self._values)

    @property
    def errors(self) -> dict[str, str]:
        """Copy of the stored errors, keyed by field name."""
        return dict(self._errors)

    def get(self, name: str) -> Any:
        self._registry.spec_for(name)
        return self._values[name]

    def set_field(self, name: str, raw_value: Any) -> None:
        """Update a value and re-validate the step that owns it.

        Raises:
            UnknownFieldError: If the name is not registered
        """
        spec = self._registry.spec_for(name)
        self._values[name] = self._coerce(spec.kind, raw_value)
        self.validate_step(self._registry.step_index_of(name))

    def validate_step(self, step_index: int) -> bool:
        """Re-validate every field of a step and store the results.

        Returns:
            True if the step has no errors
        """
        step_errors = self.check_step(step_index)
        for name in self._registry.step(step_index).fields:
            if name in step_errors:
                self._errors[name] = step_errors[name]
            else:
                self._errors.pop(name, None)
        return not step_errors

    def check_step(self, step_index: int) -> dict[str, str]:
        """Compute a step's errors without storing them."""
        errors: dict[str, str] = {}
        for name in self._registry.step(step_index).fields:
            result = self._registry.validate(name, self._values[name])
            if not result.ok:
                errors[name] = result.message or "Invalid value"
        return errors

    def is_step_valid(self, step_index: int) -> bool:
        return not self.check_step(step_index)

    def errors_for_step(self, step_index: int) -> dict[str, str]:
        """Stored errors of one step's fields."""
        fields = self._registry.step(step_index).fields
        return {name: self._errors[name] for name in fields if name in self._errors}

    def to_payload(self) -> BusinessPayload:
        """Build the persistence-ready record.

        Latitude and longitude are re-encoded as point text and blank
        optional values become None.

        Raises:
            SubmissionBlockedError: If any field holds or would produce an error
        """
        blocking = dict(self._errors)
        for step in self._registry.steps_of():
            blocking.update(self.check_step(step.index))
        if blocking:
            logger.warning(
                "form_submission_blocked",
                fields=sorted(blocking),
                mode=self.mode.value,
            )
            raise SubmissionBlockedError(blocking)

        data: dict[str, Any] = {}
        for name in self._registry.field_names:
            if name in (LATITUDE_FIELD, LONGITUDE_FIELD):
                continue
            value = self._values[name]
            if not self._registry.spec_for(name).required and is_blank(value):
                value = None
            data[name] = value

        data[GEOGRAPHY_FIELD] = encode_point(
            float(self._values[LATITUDE_FIELD]),
            float(self._values[LONGITUDE_FIELD]),
        )
        return BusinessPayload(**data)

    @staticmethod
    def _coerce(kind: FieldKind, raw_value: Any) -> Any:
        if isinstance(raw_value, Enum):
            return raw_value.value
        if kind == FieldKind.NUMBER and isinstance(raw_value, str) and raw_value.strip():
            try:
                return float(raw_value)
            except ValueError:
                # Kept as typed; validation reports it
                return raw_value
        return raw_value
