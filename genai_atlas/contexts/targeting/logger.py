"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from genai_atlas.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(
    log_dir: Path, view: str = "explore", console_level: str = "INFO"
) -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this session's logs
        view: View being served ("explore", "assess", "advanced", "case")
        console_level: Minimum level shown on stdout

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"View": view},
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
