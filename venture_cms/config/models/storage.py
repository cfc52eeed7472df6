"""Storage backend configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

BackendType = Literal["inmemory"]


class StorageConfig(BaseModel):
    """Configuration for the business store backend."""

    backend: BackendType = Field(
        default="inmemory",
        description="Backend type",
    )
