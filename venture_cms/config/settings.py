"""Root settings model for venture_cms configuration."""

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from venture_cms.config.models.forms import FormDefaults
from venture_cms.config.models.observability import ObservabilityConfig
from venture_cms.config.models.storage import StorageConfig


class Settings(BaseSettings):
    """Root configuration object.

    Values are resolved in this order, later entries winning:
    1. Model defaults (in code)
    2. Constructor arguments, normally the merged config/*.toml layers
    3. VENTURE_* environment variables, with ``__`` reaching nested
       sections (VENTURE_FORMS__DEFAULT_LATITUDE)
    """

    model_config = SettingsConfigDict(
        env_prefix="VENTURE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="venture-cms", description="Application name for logging")

    forms: FormDefaults = Field(
        default_factory=FormDefaults,
        description="Business form defaults",
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig,
        description="Storage backend configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],  # noqa: ARG003
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Let runtime environment variables override the TOML layers."""
        return (env_settings, init_settings)
