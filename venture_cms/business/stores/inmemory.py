"""In-memory implementation of BusinessStore."""

from uuid import UUID

from venture_cms.business.exceptions import BusinessNotFoundError
from venture_cms.business.models import (
    BusinessFilters,
    BusinessPage,
    BusinessPayload,
    BusinessRecord,
    utc_now,
)
from venture_cms.business.store import BusinessStore
from venture_cms.observability.logging import get_logger

logger = get_logger(__name__)


class InMemoryBusinessStore(BusinessStore):
    """In-memory implementation of BusinessStore for testing and development."""

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._businesses: dict[UUID, BusinessRecord] = {}

    async def create(self, payload: BusinessPayload) -> BusinessRecord:
        record = BusinessRecord(**payload.model_dump())
        self._businesses[record.id] = record
        logger.info(
            "business_created",
            business_id=str(record.id),
            business_type=record.business_type.value if record.business_type else None,
        )
        return record.model_copy()

    async def update(self, business_id: UUID, payload: BusinessPayload) -> BusinessRecord:
        existing = self._businesses.get(business_id)
        if existing is None:
            raise BusinessNotFoundError(business_id)

        record = existing.model_copy(
            update={**payload.model_dump(), "updated_at": utc_now()}
        )
        self._businesses[business_id] = record
        logger.info("business_updated", business_id=str(business_id))
        return record.model_copy()

    async def get(self, business_id: UUID) -> BusinessRecord | None:
        record = self._businesses.get(business_id)
        return record.model_copy() if record else None

    async def list(self, filters: BusinessFilters | None = None) -> BusinessPage:
        filters = filters or BusinessFilters()

        matches = [b for b in self._businesses.values() if self._matches(b, filters)]
        matches.sort(key=lambda b: b.created_at, reverse=True)

        start = (filters.page - 1) * filters.limit
        page = matches[start : start + filters.limit]
        return BusinessPage(
            data=[b.model_copy() for b in page],
            count=len(matches),
            has_more=start + filters.limit < len(matches),
        )

    async def delete(self, business_id: UUID) -> None:
        if self._businesses.pop(business_id, None) is None:
            raise BusinessNotFoundError(business_id)
        logger.info("business_deleted", business_id=str(business_id))

    async def add(self, record: BusinessRecord) -> None:
        """Seed a fully-formed record, bypassing payload conversion."""
        self._businesses[record.id] = record

    def _matches(self, business: BusinessRecord, filters: BusinessFilters) -> bool:
        if filters.status and business.status != filters.status:
            return False
        if filters.business_type and business.business_type != filters.business_type:
            return False
        if filters.search and filters.search.strip():
            needle = filters.search.strip().lower()
            haystack = f"{business.business_name} {business.description or ''}".lower()
            if needle not in haystack:
                return False
        return True
