"""
Text context logger.

Provides logging interface for the text context with automatic [text] prefix.
All text modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from skillbench.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[text]"


def setup_text_logger(log_dir: Path = None, phase: str = "parse") -> Path:
    """
    Setup logger for text context.

    Args:
        log_dir: Directory for this session (defaults to logging.log_dir)
        phase: Phase name for provenance (e.g., "parse", "count")

    Returns:
        Path to log file

    Example:
        from skillbench.contexts.text.logger import setup_text_logger, _log_info

        log_file = setup_text_logger(log_dir, phase="count")
        _log_info("Counting words...")
    """
    return _setup_logger(
        context_name="text",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


# Wrapper functions with automatic [text] prefix


def _log_info(message: str) -> None:
    """Log info message with [text] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [text] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [text] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [text] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [text] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level text-specific logging helpers


def log_parse_result(kind: str, fields: dict) -> None:
    """Log the fields extracted by a parser at debug level."""
    summary = ", ".join(f"{name}={value!r}" for name, value in fields.items())
    _log_debug(f"Parsed {kind}: {summary}")


def log_text_edit(operation: str, before: str, after: str) -> None:
    """Log a literal substitution applied to a stored text."""
    _log_debug(f"{operation}: {before!r} -> {after!r}")
