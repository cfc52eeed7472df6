"""Multi-step business form: field rules, session state and navigation.

Typical flow:

    session = FormSession.create()
    controller = StepController(session, store, on_cancel=go_back)
    session.set_field("business_name", "Sample Cafe")
    await controller.next()
"""

from venture_cms.forms.business_form import business_form_registry
from venture_cms.forms.controller import StepController
from venture_cms.forms.exceptions import (
    FormError,
    SchemaDefinitionError,
    SubmissionBlockedError,
    UnknownFieldError,
)
from venture_cms.forms.models import (
    FieldKind,
    FieldSpec,
    SessionMode,
    StepDefinition,
    ValidationResult,
)
from venture_cms.forms.schema import FieldSchemaRegistry
from venture_cms.forms.session import FormSession, default_values, values_from_record
from venture_cms.forms.validation import FieldValidator

__all__ = [
    # Registry
    "FieldSchemaRegistry",
    "FieldValidator",
    "business_form_registry",
    # Models
    "FieldKind",
    "FieldSpec",
    "SessionMode",
    "StepDefinition",
    "ValidationResult",
    # Session and navigation
    "FormSession",
    "StepController",
    "default_values",
    "values_from_record",
    # Exceptions
    "FormError",
    "SchemaDefinitionError",
    "SubmissionBlockedError",
    "UnknownFieldError",
]
