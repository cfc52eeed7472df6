"""Configuration model exports.

    from venture_cms.config.models import FormDefaults, StorageConfig
"""

from venture_cms.config.models.forms import FormDefaults
from venture_cms.config.models.observability import LoggingConfig, ObservabilityConfig
from venture_cms.config.models.storage import StorageConfig

__all__ = [
    "FormDefaults",
    "LoggingConfig",
    "ObservabilityConfig",
    "StorageConfig",
]
