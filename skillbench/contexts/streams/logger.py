"""
Streams context logger.

Provides logging interface for the streams context with automatic [streams] prefix.
"""

from pathlib import Path

from loguru import logger

from skillbench.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[streams]"


def setup_streams_logger(log_dir: Path = None, source: str = None) -> Path:
    """
    Setup logger for streams context.

    Args:
        log_dir: Directory for this session (defaults to logging.log_dir)
        source: Text source being read, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="streams",
        log_dir=log_dir,
        extra_provenance={"Source": source} if source else None,
    )


def _log_error(message: str) -> None:
    """Log error message with [streams] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [streams] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
