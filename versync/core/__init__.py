from versync.core.exceptions import (ConfigurationError, InvalidVersionError,
                                     ManifestFormatError, VersionFieldNotFoundError,
                                     VersyncError)
from versync.core.formats import FormatDefinition, format_registry
from versync.core.synchronizer import (DEFAULT_TARGETS, SyncConfig, TargetResult,
                                       TargetVersion, VersionTarget, read_versions,
                                       synchronize, versions_agree)
from versync.core.version import is_valid_version, validate_version

__all__ = [
    "ConfigurationError",
    "DEFAULT_TARGETS",
    "FormatDefinition",
    "InvalidVersionError",
    "ManifestFormatError",
    "SyncConfig",
    "TargetResult",
    "TargetVersion",
    "VersionFieldNotFoundError",
    "VersionTarget",
    "VersyncError",
    "format_registry",
    "is_valid_version",
    "read_versions",
    "synchronize",
    "validate_version",
    "versions_agree",
]
