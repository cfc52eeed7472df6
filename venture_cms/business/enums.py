"""Enums for the business domain."""

from enum import Enum


class BusinessType(str, Enum):
    """Kind of listing, mirrors the `business_type` database enum."""

    ACCOMMODATION = "accommodation"
    SHOP = "shop"
    SERVICE = "service"


class BusinessStatus(str, Enum):
    """Moderation lifecycle of a listing."""

    PENDING = "pending"  # Awaiting staff review
    APPROVED = "approved"
    REJECTED = "rejected"
    INACTIVE = "inactive"  # Hidden from tourists
