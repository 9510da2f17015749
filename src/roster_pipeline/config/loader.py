"""
Configuration Loader - YAML Loading with Validation.

Loads demonstration settings from YAML and validates them with Pydantic.
The package ships ``default.yaml`` next to this module; that file is what
the program runs with unless another path is given. Profiles are looked up
in a ``profiles/`` directory beside the config file being loaded and are
merged over it key by key.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from roster_pipeline.config.models import RosterPipelineConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yaml")


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> RosterPipelineConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name, read from ``profiles/<name>.yaml``
                beside the config file

        Returns:
            Validated RosterPipelineConfig

        Raises:
            FileNotFoundError: If the file or profile doesn't exist
            ValidationError: If a value is out of range
        """
        path = self._resolve(config_path)
        raw = self._read_yaml(path)

        if profile:
            profile_path = path.parent / "profiles" / f"{profile}.yaml"
            if not profile_path.exists():
                raise FileNotFoundError(f"Profile not found: {profile}")
            raw = merge_configs(raw, self._read_yaml(profile_path))

        logger.debug(f"Loaded config from {path} (profile={profile})")
        return RosterPipelineConfig.model_validate(raw)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> RosterPipelineConfig:
        """Validate an already-parsed configuration mapping."""
        return RosterPipelineConfig.model_validate(config_dict)

    def _resolve(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge ``overlay`` into a copy of ``base``."""
    result = dict(base)
    for key, value in overlay.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> RosterPipelineConfig:
    """Convenience wrapper around ConfigLoader.load."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)


def load_default_config(profile: Optional[str] = None) -> RosterPipelineConfig:
    """Load the config shipped with the package."""
    return ConfigLoader().load(DEFAULT_CONFIG_PATH, profile)
