"""Bootstrap helpers for wiring the business form from configuration.

Primarily for scripts, notebooks and integration tests:

    from venture_cms.bootstrap import bootstrap

    ctx = bootstrap()
    controller = ctx.create_controller(on_cancel=lambda: None)
"""

from collections.abc import Callable
from dataclasses import dataclass

from venture_cms.business.models import BusinessRecord
from venture_cms.business.store import BusinessStore
from venture_cms.business.stores.inmemory import InMemoryBusinessStore
from venture_cms.config import get_settings
from venture_cms.config.settings import Settings
from venture_cms.forms.controller import StepController
from venture_cms.forms.session import FormSession
from venture_cms.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class BootstrapContext:
    """Settings and collaborators returned from bootstrap."""

    settings: Settings
    store: BusinessStore

    def create_controller(
        self,
        on_cancel: Callable[[], None],
        record: BusinessRecord | None = None,
    ) -> StepController:
        """Mount a business form, editing `record` when given."""
        defaults = self.settings.forms
        if record is None:
            session = FormSession.create(defaults)
        else:
            session = FormSession.from_record(record, defaults)
        return StepController(session, self.store, on_cancel, defaults=defaults)


def create_store(settings: Settings) -> BusinessStore:
    """Create the business store selected by `storage.backend`."""
    backend = settings.storage.backend
    if backend == "inmemory":
        return InMemoryBusinessStore()
    raise ValueError(f"Unsupported storage backend: {backend}")


def bootstrap(settings: Settings | None = None, configure_logging: bool = True) -> BootstrapContext:
    """Load settings, configure logging and create the store.

    Args:
        settings: Use these instead of loading config/*.toml
        configure_logging: Apply `observability.logging` settings
    """
    settings = settings or get_settings()

    if configure_logging:
        log_config = settings.observability.logging
        setup_logging(
            level=log_config.level,
            format=log_config.format,
            redact_pii=log_config.redact_pii,
        )

    store = create_store(settings)
    logger.info(
        "venture_cms_bootstrapped",
        app_name=settings.app_name,
        storage_backend=settings.storage.backend,
    )
    return BootstrapContext(settings=settings, store=store)
