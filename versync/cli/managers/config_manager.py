from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional

import yaml

from versync.core.exceptions import ConfigurationError
from versync.core.formats import format_registry
from versync.core.synchronizer import (DEFAULT_FIELD, DEFAULT_TARGETS,
                                       SyncConfig, VersionTarget)
from versync.utils.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = "versync.yaml"

class ConfigurationManager:
    """Loads and validates the versync target configuration for a project root"""

    def __init__(self, root, config_file: Optional[str] = None):
        self.root = Path(root)
        self.config_path = self._find_config(config_file)

        if self.config_path is None:
            logger.debug(f"No {CONFIG_FILENAME} under {self.root}, using default targets")
            self.config = None
            self.targets = list(DEFAULT_TARGETS)
            return

        # errors propagate unlogged; the cli reports them once
        self.config = self._load_config(self.config_path)
        self.targets = self._parse_targets(self.config)

        logger.debug(f"Loaded {len(self.targets)} targets from {self.config_path}")

    def _find_config(self, config_file: Optional[str]) -> Optional[Path]:
        """An explicit config file must exist; the default one is optional"""
        if config_file is not None:
            path = Path(config_file)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")
            return path

        default_path = self.root / CONFIG_FILENAME
        return default_path if default_path.exists() else None

    def _load_config(self, config_filepath: Path) -> Dict[str, Any]:
        """Load and validate basic structure of config file"""
        with open(config_filepath, 'r', encoding='utf-8') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML: {e}") from e

        if not config:
            raise ConfigurationError("Configuration file is empty or invalid")
        if not isinstance(config, dict):
            raise ConfigurationError("Configuration file must contain a mapping at the top level")

        return config

    def _parse_targets(self, config: Dict[str, Any]) -> List[VersionTarget]:
        entries = config.get('targets')
        if not isinstance(entries, list) or not entries:
            raise ConfigurationError("'targets' must be a non-empty list")

        return [self._parse_target(i, entry) for i, entry in enumerate(entries)]

    def _parse_target(self, index: int, entry: Any) -> VersionTarget:
        where = f"targets[{index}]"
        if not isinstance(entry, dict):
            raise ConfigurationError(f"{where} must be a mapping with 'path' and 'format'")

        path = entry.get('path')
        if not isinstance(path, str) or not path.strip():
            raise ConfigurationError(f"{where}.path is required")
        if Path(path).is_absolute() or PurePosixPath(path).is_absolute():
            raise ConfigurationError(f"{where}.path must be relative to the project root, got {path}")

        fmt = entry.get('format')
        if fmt not in format_registry.names():
            raise ConfigurationError(
                f"{where}.format must be one of {', '.join(format_registry.names())}, got {fmt!r}"
            )

        field = entry.get('field', DEFAULT_FIELD)
        if not isinstance(field, str) or not field:
            raise ConfigurationError(f"{where}.field must be a non-empty string")

        unknown = set(entry.keys()) - {'path', 'format', 'field'}
        if unknown:
            logger.warning(f"Ignoring unknown keys in {where}: {', '.join(sorted(unknown))}")

        return VersionTarget(path=path, format=fmt, field=field)

    def get_sync_config(self) -> SyncConfig:
        return SyncConfig(root=self.root, targets=list(self.targets))
