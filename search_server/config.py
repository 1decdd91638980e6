"""
Hydra configuration loading.
"""

import os
from pathlib import Path
from typing import List, Optional

import hydra
from omegaconf import DictConfig, OmegaConf

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "conf"


def register_resolvers():
    """Register the ${env:VAR,default} resolver once per process."""
    if not OmegaConf.has_resolver("env"):
        OmegaConf.register_new_resolver("env", os.getenv)


def load_config(overrides: Optional[List[str]] = None,
                config_dir: Optional[str] = None,
                config_name: str = "config") -> DictConfig:
    """
    Compose configuration with Hydra.

    Args:
        overrides: Hydra overrides (e.g. ["search.max_results=3"])
        config_dir: Config directory (default: conf/ at repository root)
        config_name: Name of main config file

    Returns:
        Composed configuration
    """
    register_resolvers()
    config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR

    with hydra.initialize_config_dir(version_base=None, config_dir=str(config_dir.resolve())):
        return hydra.compose(config_name=config_name, overrides=overrides or [])
