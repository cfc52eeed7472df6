"""Observability: structured logging for venture_cms."""

from venture_cms.observability.logging import PIIRedactor, get_logger, setup_logging

__all__ = ["PIIRedactor", "get_logger", "setup_logging"]
