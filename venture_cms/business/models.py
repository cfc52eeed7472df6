"""Business domain models.

Contains the Pydantic models for stored listings, the payload produced by
the business form, and listing queries.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from venture_cms.business.enums import BusinessStatus, BusinessType


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class BusinessPayload(BaseModel):
    """Persistence-ready listing data produced by a submitted form.

    Optional contact and postal fields are None rather than empty strings.
    """

    model_config = ConfigDict(frozen=True)

    # Basic information
    business_name: str
    business_type: BusinessType
    description: str

    # Location
    address: str
    city: str
    province: str
    postal_code: str | None = None
    location: str = Field(..., description="WKT point text, longitude first")

    # Contact
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    twitter_url: str | None = None


class BusinessRecord(BaseModel):
    """A stored business listing."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    owner_id: UUID | None = Field(default=None, description="Owning business owner")
    business_name: str = Field(default="", description="Display name")
    business_type: BusinessType | None = Field(default=None, description="Listing kind")
    description: str | None = Field(default=None, description="Long-form description")
    address: str | None = None
    city: str | None = None
    province: str | None = None
    postal_code: str | None = None
    location: str | None = Field(default=None, description="WKT point text")
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    twitter_url: str | None = None
    google_maps_place_id: str | None = None
    status: BusinessStatus = Field(default=BusinessStatus.PENDING)
    is_claimed: bool = False
    is_featured: bool = False
    average_rating: float | None = Field(default=None, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now, description="Creation time")
    updated_at: datetime = Field(default_factory=utc_now, description="Last update")
    approved_at: datetime | None = None
    approved_by: UUID | None = None
    rejection_reason: str | None = None


class BusinessFilters(BaseModel):
    """Listing query used by the management screens."""

    status: BusinessStatus | None = None
    business_type: BusinessType | None = None
    search: str | None = Field(
        default=None, description="Case-insensitive match on name or description"
    )
    page: int = Field(default=1, ge=1, description="1-based page number")
    limit: int = Field(default=20, ge=1, le=100, description="Page size")


class BusinessPage(BaseModel):
    """One page of listings."""

    data: list[BusinessRecord] = Field(default_factory=list)
    count: int = Field(default=0, ge=0, description="Total matches across all pages")
    has_more: bool = False
