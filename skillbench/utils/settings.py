"""
Settings loading for SkillBench components.

Packaged defaults live in skillbench/resources/settings.yaml. A user file
referenced by the SKILLBENCH_SETTINGS environment variable (or a .env entry)
is merged on top, so it only needs the keys it changes.

Examples:
    >>> settings = get_settings()
    >>> settings.text.hide_placeholder
    'X'

    >>> custom = load_settings(Path("my_settings.yaml"))
"""

import os
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()

DEFAULT_SETTINGS_RESOURCE = "resources/settings.yaml"


def load_default_settings() -> DictConfig:
    """Load the settings shipped with the package."""
    text = files("skillbench").joinpath(DEFAULT_SETTINGS_RESOURCE).read_text(encoding="utf-8")
    return OmegaConf.create(text)


def load_settings(override_path: Optional[Path] = None) -> DictConfig:
    """
    Load packaged defaults and merge an optional override file.

    Args:
        override_path: YAML file whose keys override the defaults

    Returns:
        Merged, read-only settings

    Raises:
        FileNotFoundError: If override_path does not exist
    """
    settings = load_default_settings()

    if override_path is not None:
        override_path = Path(override_path)
        if not override_path.exists():
            raise FileNotFoundError(f"Settings file not found: {override_path}")
        settings = OmegaConf.merge(settings, OmegaConf.load(override_path))

    OmegaConf.set_readonly(settings, True)
    return settings


@lru_cache(maxsize=1)
def get_settings() -> DictConfig:
    """
    Settings for this process, honouring SKILLBENCH_SETTINGS.

    Cached after the first call; use get_settings.cache_clear() after
    changing the environment.
    """
    override = os.getenv("SKILLBENCH_SETTINGS")
    return load_settings(Path(override) if override else None)
