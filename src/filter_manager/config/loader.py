"""
Configuration Loader - YAML Loading with Validation.

Loads one or more configuration documents from YAML files, merges them in
order and validates the result using Pydantic models.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from filter_manager.config.models import FilterManagerConfig
from filter_manager.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(self, *config_paths: Union[str, Path]) -> FilterManagerConfig:
        """
        Load configuration from one or more YAML files.

        Later files are deep merged over earlier ones.

        Args:
            config_paths: Paths to YAML config files

        Returns:
            Validated FilterManagerConfig object

        Raises:
            FileNotFoundError: If a config file doesn't exist
            ConfigurationError: If a document is not a mapping
            ValidationError: If the merged config is invalid
        """
        config_dict: Dict[str, Any] = {}
        for config_path in config_paths:
            path = self._resolve_path(config_path)
            config_dict = self._merge_configs(config_dict, self._load_yaml(path))
            logger.debug(f"Loaded configuration document: {path}")

        return FilterManagerConfig.model_validate(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> FilterManagerConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated FilterManagerConfig object
        """
        return FilterManagerConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file; the top level must be a mapping."""
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ConfigurationError(
                f"Configuration document {path} must be a mapping, "
                f"got {type(document).__name__}"
            )
        return document

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    *config_paths: Union[str, Path],
    base_path: Optional[Path] = None,
) -> FilterManagerConfig:
    """
    Convenience function to load configuration.

    Args:
        config_paths: Paths to YAML config files, merged in order
        base_path: Base path for resolving relative paths

    Returns:
        Validated FilterManagerConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(*config_paths)
