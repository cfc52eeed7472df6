"""Field schema registry.

Declares the validation rule for every form field and groups the fields
into ordered steps. A registry is immutable configuration: build it once
and share it between sessions.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from venture_cms.forms.exceptions import SchemaDefinitionError, UnknownFieldError
from venture_cms.forms.models import FieldSpec, StepDefinition, ValidationResult
from venture_cms.forms.validation import FieldValidator


class FieldSchemaRegistry:
    """Lookup table from field name to FieldSpec, plus the step layout.

    Construction enforces that every field belongs to exactly one step.
    """

    def __init__(
        self,
        fields: Iterable[FieldSpec],
        steps: Sequence[tuple[str, Sequence[str]]],
        validator: FieldValidator | None = None,
    ) -> None:
        """Build the registry.

        Args:
            fields: One spec per form field
            steps: Ordered (title, field names) pairs
            validator: Validator to apply specs with

        Raises:
            SchemaDefinitionError: If names repeat, a step names an unknown
                field, or a field is left out of every step
        """
        self._validator = validator or FieldValidator()

        self._specs: dict[str, FieldSpec] = {}
        for spec in fields:
            if spec.name in self._specs:
                raise SchemaDefinitionError(f"Duplicate field spec: {spec.name!r}")
            self._specs[spec.name] = spec

        if not steps:
            raise SchemaDefinitionError("A form needs at least one step")

        self._steps: tuple[StepDefinition, ...] = tuple(
            StepDefinition(index=i, title=title, fields=tuple(names))
            for i, (title, names) in enumerate(steps, start=1)
        )

        self._step_of_field: dict[str, int] = {}
        for step in self._steps:
            for name in step.fields:
                if name not in self._specs:
                    raise SchemaDefinitionError(
                        f"Step {step.index} references unknown field {name!r}"
                    )
                if name in self._step_of_field:
                    raise SchemaDefinitionError(
                        f"Field {name!r} appears in steps "
                        f"{self._step_of_field[name]} and {step.index}"
                    )
                self._step_of_field[name] = step.index

        orphans = [name for name in self._specs if name not in self._step_of_field]
        if orphans:
            raise SchemaDefinitionError(f"Fields not assigned to any step: {orphans}")

    @property
    def field_names(self) -> tuple[str, ...]:
        """All registered field names, in step order."""
        return tuple(name for step in self._steps for name in step.fields)

    @property
    def step_count(self) -> int:
        return len(self._steps)

    def spec_for(self, field_name: str) -> FieldSpec:
        """Get the spec for a field.

        Raises:
            UnknownFieldError: If the name is not registered
        """
        try:
            return self._specs[field_name]
        except KeyError:
            raise UnknownFieldError(field_name) from None

    def steps_of(self) -> tuple[StepDefinition, ...]:
        return self._steps

    def step(self, step_index: int) -> StepDefinition:
        """Get a step by its 1-based index."""
        if not 1 <= step_index <= len(self._steps):
            raise IndexError(f"Step {step_index} out of range 1..{len(self._steps)}")
        return self._steps[step_index - 1]

    def step_index_of(self, field_name: str) -> int:
        """Get the index of the step that owns a field."""
        self.spec_for(field_name)
        return self._step_of_field[field_name]

    def validate(self, field_name: str, value: Any) -> ValidationResult:
        """Validate one value against its field's rule. Pure and deterministic."""
        return self._validator.validate(self.spec_for(field_name), value)
