"""
Shared utilities for SkillBench.

Common functionality used across contexts:
- Text processing
- Settings management
- Logging setup
"""

from skillbench.utils.settings import get_settings, load_settings
from skillbench.utils.text_processing import extract_digits, format_phone

__all__ = ["extract_digits", "format_phone", "get_settings", "load_settings"]
