"""
State context logger.

Provides logging interface for state context with automatic [state] prefix.
All state modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[state]"


def _log_info(message: str) -> None:
    """Log info message with [state] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [state] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [state] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [state] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
