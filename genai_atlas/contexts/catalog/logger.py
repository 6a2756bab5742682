"""
Catalog context logger.

Provides logging interface for catalog context with automatic [catalog] prefix.
All catalog modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from genai_atlas.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[catalog]"


def setup_catalog_logger(
    log_dir: Path, data_path: Path = None, console_level: str = "INFO"
) -> Path:
    """
    Setup logger for catalog context.

    Args:
        log_dir: Directory for this session's logs
        data_path: Dataset file being loaded (recorded in the provenance header)
        console_level: Minimum level shown on stdout

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="catalog",
        log_dir=log_dir,
        extra_provenance={"Dataset": data_path},
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [catalog] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [catalog] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [catalog] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_catalog_loaded(data_path: Path, catalog) -> None:
    """Log a summary of a freshly loaded catalog."""
    _log_info(
        f"Loaded {len(catalog.use_cases)} use cases and "
        f"{len(catalog.frameworks)} frameworks from {data_path}"
    )
    _log_debug(
        f"Implementation guide entries: {len(catalog.implementation_guide)}, "
        f"taxonomy entries: {len(catalog.intervention_taxonomy)}"
    )
