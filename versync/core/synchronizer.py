from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from versync.core.formats import format_registry
from versync.core.version import validate_version
from versync.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FIELD = "version"


@dataclass(frozen=True)
class VersionTarget:
    """One file that carries the project version."""
    path: str
    format: str
    field: str = DEFAULT_FIELD


DEFAULT_TARGETS = (
    VersionTarget("package.json", "json"),
    VersionTarget("src-tauri/tauri.conf.json", "json"),
    VersionTarget("src-tauri/Cargo.toml", "toml"),
)


@dataclass
class SyncConfig:
    """Project root plus the ordered targets to keep in sync."""
    root: Path
    targets: List[VersionTarget] = field(default_factory=lambda: list(DEFAULT_TARGETS))

    def resolve(self, target: VersionTarget) -> Path:
        return self.root / target.path


@dataclass
class TargetResult:
    target: VersionTarget
    path: Path
    previous_version: Optional[str]
    new_version: str
    changed: bool


def _read_text(path: Path) -> str:
    # newline="" keeps the manifest's own line endings on read and write
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _apply(config: SyncConfig, target: VersionTarget, version: str, write: bool) -> TargetResult:
    fmt = format_registry.get(target.format)
    path = config.resolve(target)

    text = _read_text(path)
    previous = fmt.read(text, target.field, str(path))
    new_text = fmt.update(text, target.field, version, str(path))
    changed = new_text != text

    if write:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(new_text)
        logger.info(f"Updated {target.path}: {previous} -> {version}")
    else:
        logger.info(f"Would update {target.path}: {previous} -> {version}")

    return TargetResult(
        target=target,
        path=path,
        previous_version=previous,
        new_version=version,
        changed=changed,
    )


def synchronize(version: str, config: SyncConfig, dry_run: bool = False) -> List[TargetResult]:
    """
    Write `version` into every configured target, in order.

    The version is validated before any file is opened. Targets are processed
    one after another with no rollback: if a later target fails (missing file,
    invalid JSON, no version line) the exception propagates and the targets
    already written stay modified. With `dry_run` the new contents are computed
    and validated but nothing is written.
    """
    validate_version(version)
    logger.debug(f"Synchronizing {len(config.targets)} targets under {config.root} to {version}")

    results = []
    for target in config.targets:
        results.append(_apply(config, target, version, write=not dry_run))
    return results


@dataclass
class TargetVersion:
    target: VersionTarget
    path: Path
    version: Optional[str]


def read_versions(config: SyncConfig) -> List[TargetVersion]:
    """Read the version currently recorded in each target."""
    found = []
    for target in config.targets:
        fmt = format_registry.get(target.format)
        path = config.resolve(target)
        version = fmt.read(_read_text(path), target.field, str(path))
        logger.debug(f"{target.path} reports {version}")
        found.append(TargetVersion(target=target, path=path, version=version))
    return found


def versions_agree(found: List[TargetVersion], expected: Optional[str] = None) -> bool:
    versions = {item.version for item in found}
    if None in versions or len(versions) != 1:
        return False
    return expected is None or versions == {expected}
