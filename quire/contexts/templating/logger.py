"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules log through this module; sinks are configured by the caller
(see quire.utils.logger.setup_logger).
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_validation_failure(errors: list) -> None:
    """Log every problem found while validating resume input."""
    _log_error(f"Resume input rejected: {len(errors)} problem(s)")
    for i, err in enumerate(errors, 1):
        _log_error(f"  Problem {i}: {err}")
