"""BusinessStore abstract interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from venture_cms.business.models import (
    BusinessFilters,
    BusinessPage,
    BusinessPayload,
    BusinessRecord,
)


class BusinessStore(ABC):
    """Abstract interface for business listing persistence.

    The business form hands its payload to exactly one of `create` or
    `update`; listing screens use `list` and `get`.
    """

    @abstractmethod
    async def create(self, payload: BusinessPayload) -> BusinessRecord:
        """Persist a new listing and return the stored record."""
        pass

    @abstractmethod
    async def update(self, business_id: UUID, payload: BusinessPayload) -> BusinessRecord:
        """Replace the editable columns of a listing.

        Raises:
            BusinessNotFoundError: If no listing has this id
        """
        pass

    @abstractmethod
    async def get(self, business_id: UUID) -> BusinessRecord | None:
        """Get a listing by id."""
        pass

    @abstractmethod
    async def list(self, filters: BusinessFilters | None = None) -> BusinessPage:
        """List listings matching filters, newest first."""
        pass

    @abstractmethod
    async def delete(self, business_id: UUID) -> None:
        """Delete a listing.

        Raises:
            BusinessNotFoundError: If no listing has this id
        """
        pass
