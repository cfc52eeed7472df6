"""Field rules and step layout of the business listing form.

Step 1 collects basic information, step 2 the location and step 3 the
optional contact details.
"""

from functools import lru_cache

from venture_cms.business.enums import BusinessType
from venture_cms.forms.models import FieldKind, FieldSpec
from venture_cms.forms.schema import FieldSchemaRegistry
from venture_cms.forms.validation import EMAIL_PATTERN

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
ADDRESS_MIN_LENGTH = 10
ADDRESS_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 20
POSTAL_CODE_MAX_LENGTH = 20

LATITUDE_FIELD = "latitude"
LONGITUDE_FIELD = "longitude"

BUSINESS_FIELDS: tuple[FieldSpec, ...] = (
    # Step 1: basic information
    FieldSpec(
        name="business_name",
        label="Business name",
        kind=FieldKind.TEXT,
        required=True,
        min=NAME_MIN_LENGTH,
        max=NAME_MAX_LENGTH,
    ),
    FieldSpec(
        name="business_type",
        label="Business type",
        kind=FieldKind.ENUM,
        required=True,
        choices=tuple(t.value for t in BusinessType),
        messages={
            "required": "Please select a valid business type",
            "choice": "Please select a valid business type",
        },
    ),
    FieldSpec(
        name="description",
        label="Description",
        kind=FieldKind.TEXT,
        required=True,
        min=DESCRIPTION_MIN_LENGTH,
        max=DESCRIPTION_MAX_LENGTH,
    ),
    # Step 2: location
    FieldSpec(
        name="address",
        label="Address",
        kind=FieldKind.TEXT,
        required=True,
        min=ADDRESS_MIN_LENGTH,
        max=ADDRESS_MAX_LENGTH,
        messages={"min": "Please enter a complete address"},
    ),
    FieldSpec(name="city", label="City", kind=FieldKind.TEXT, required=True, min=2, max=100),
    FieldSpec(
        name="province", label="Province", kind=FieldKind.TEXT, required=True, min=2, max=100
    ),
    FieldSpec(
        name="postal_code",
        label="Postal code",
        kind=FieldKind.POSTAL_CODE,
        max=POSTAL_CODE_MAX_LENGTH,
    ),
    FieldSpec(
        name=LATITUDE_FIELD, label="Latitude", kind=FieldKind.NUMBER, required=True, min=-90, max=90
    ),
    FieldSpec(
        name=LONGITUDE_FIELD,
        label="Longitude",
        kind=FieldKind.NUMBER,
        required=True,
        min=-180,
        max=180,
    ),
    # Step 3: contact details
    FieldSpec(name="phone", label="Phone number", kind=FieldKind.PHONE, max=PHONE_MAX_LENGTH),
    FieldSpec(
        name="email",
        label="Email",
        kind=FieldKind.EMAIL,
        max=EMAIL_MAX_LENGTH,
        pattern=EMAIL_PATTERN,
    ),
    FieldSpec(name="website", label="Website", kind=FieldKind.URL),
    FieldSpec(name="facebook_url", label="Facebook URL", kind=FieldKind.URL),
    FieldSpec(name="instagram_url", label="Instagram URL", kind=FieldKind.URL),
    FieldSpec(name="twitter_url", label="Twitter URL", kind=FieldKind.URL),
)

BUSINESS_STEPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Basic Information", ("business_name", "business_type", "description")),
    (
        "Location",
        ("address", "city", "province", "postal_code", LATITUDE_FIELD, LONGITUDE_FIELD),
    ),
    (
        "Contact Information",
        ("phone", "email", "website", "facebook_url", "instagram_url", "twitter_url"),
    ),
)


@lru_cache(maxsize=1)
def business_form_registry() -> FieldSchemaRegistry:
    """Get the shared registry for the business listing form."""
    return FieldSchemaRegistry(BUSINESS_FIELDS, BUSINESS_STEPS)
