"""
Markup context logger.

Provides logging interface for the markup context with automatic [markup] prefix.
All markup modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger
from lxml import etree

from skillbench.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[markup]"


def setup_markup_logger(log_dir: Path = None) -> Path:
    """
    Setup logger for markup context.

    Records the libxml2 version in the provenance header.

    Args:
        log_dir: Directory for this session (defaults to logging.log_dir)

    Returns:
        Path to log file
    """
    libxml_version = ".".join(str(part) for part in etree.LIBXML_VERSION)
    return _setup_logger(
        context_name="markup",
        log_dir=log_dir,
        extra_provenance={"lxml": etree.__version__, "libxml2": libxml_version},
    )


def _log_debug(message: str) -> None:
    """Log debug message with [markup] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_query(name: str, expression: str, variables: dict, hits: int) -> None:
    """Log an evaluated XPath query and its hit count."""
    _log_debug(f"{name}: {expression} {variables} -> {hits} node(s)")
