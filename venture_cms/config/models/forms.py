"""Business form configuration models."""

from pydantic import BaseModel, Field

from venture_cms.business.enums import BusinessType


class FormDefaults(BaseModel):
    """Placeholder values used when seeding a business form.

    The coordinates double as the fallback when an existing record's
    geography cannot be decoded.
    """

    default_latitude: float = Field(
        default=13.6218,
        ge=-90.0,
        le=90.0,
        description="Latitude of the center-point default",
    )
    default_longitude: float = Field(
        default=123.1948,
        ge=-180.0,
        le=180.0,
        description="Longitude of the center-point default",
    )
    default_business_type: BusinessType = Field(
        default=BusinessType.SHOP,
        description="Business type preselected for new listings",
    )
