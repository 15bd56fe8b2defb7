from typing import List, Optional

import click

from versync.core.synchronizer import TargetResult, TargetVersion
from versync.core.version import is_valid_version
from versync.utils.logging import get_logger

logger = get_logger(__name__)

MISSING = "<missing>"

def parse_expected_version_option(ctx, param, value):
    """Validate the optional --expect version"""
    if value is None:
        return None
    if not is_valid_version(value):
        raise click.BadParameter('--expect must be of the form MAJOR.MINOR.PATCH, e.g. 0.2.0')
    return value

def print_sync_summary(results: List[TargetResult], version: str, dry: bool) -> None:
    """Print the outcome of a bump-version run"""
    unchanged = [r.target.path for r in results if not r.changed]
    if unchanged:
        logger.info(f"Already at {version}: {', '.join(unchanged)}")

    if dry:
        click.echo(f"Dry run: would bump version to {version} in {len(results)} files")
        for result in results:
            click.echo(f"  {result.target.path}: {result.previous_version or MISSING} -> {version}")
    else:
        click.echo(f"Bumped version to {version}")

def print_version_report(found: List[TargetVersion]) -> None:
    width = max(len(item.target.path) for item in found)
    for item in found:
        click.echo(f"{item.target.path.ljust(width)}  {item.version or MISSING}")

def describe_mismatch(found: List[TargetVersion], expected: Optional[str] = None) -> str:
    versions = sorted({item.version or MISSING for item in found})
    if len(versions) == 1 and expected is not None:
        return f"All files report {versions[0]}, expected {expected}"
    return f"Versions are out of sync: {', '.join(versions)}"
