"""Business store exception hierarchy."""

from uuid import UUID


class BusinessStoreError(Exception):
    """Base exception for persistence failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BusinessNotFoundError(BusinessStoreError):
    """Raised when a business id doesn't exist in the store."""

    def __init__(self, business_id: UUID) -> None:
        super().__init__(f"Business not found: {business_id}")
        self.business_id = business_id
