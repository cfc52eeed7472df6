"""Business listings: domain models, geography codec and persistence.

The business form produces a `BusinessPayload`; a `BusinessStore` turns it
into a stored `BusinessRecord`.
"""

from venture_cms.business.enums import BusinessStatus, BusinessType
from venture_cms.business.exceptions import BusinessNotFoundError, BusinessStoreError
from venture_cms.business.geography import (
    decode_point,
    decode_point_or_default,
    encode_point,
)
from venture_cms.business.models import (
    BusinessFilters,
    BusinessPage,
    BusinessPayload,
    BusinessRecord,
)

__all__ = [
    # Enums
    "BusinessStatus",
    "BusinessType",
    # Exceptions
    "BusinessNotFoundError",
    "BusinessStoreError",
    # Geography
    "decode_point",
    "decode_point_or_default",
    "encode_point",
    # Models
    "BusinessFilters",
    "BusinessPage",
    "BusinessPayload",
    "BusinessRecord",
]
