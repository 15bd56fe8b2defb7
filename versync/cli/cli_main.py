import sys
from pathlib import Path

import click
from jinja2 import (ChainableUndefined, Environment, PackageLoader,
                    select_autoescape)

from versync.cli.managers.config_manager import ConfigurationManager
from versync.cli.managers.templates_manager import TemplateManager
from versync.cli.utils.helpers import (describe_mismatch,
                                       parse_expected_version_option,
                                       print_sync_summary,
                                       print_version_report)
from versync.core.synchronizer import (DEFAULT_TARGETS, read_versions,
                                       synchronize, versions_agree)
from versync.core.version import is_valid_version
from versync.utils.logging import get_logger, setup_cli_logging

# DEFINITIONS
env = Environment(
    loader=PackageLoader("versync.cli"),
    autoescape=select_autoescape(),
    undefined=ChainableUndefined,
)
USAGE = "Usage: versync bump-version 0.2.0"

root_option = click.option('--root', '-r', type=click.Path(file_okay=False, path_type=Path), default=".",
                           show_default=True, help="Project root the target paths are relative to")
config_option = click.option('--config', '-c', 'config_file', type=str,
                             help="Path to a versync .yaml configuration (default: <root>/versync.yaml if present)")
verbosity_option = click.option('--verbosity', '-v', type=int, default=3, help="Logging verbosity level (0-4)")


@click.group()
def cli():
    pass

@click.command(name="bump-version")
@click.argument('version', required=False)
@root_option
@config_option
@click.option('--dry', '--dry-run', is_flag=True, help="Show what would change without writing any file")
@verbosity_option
def bump_version(version: str, root: Path, config_file: str, dry: bool, verbosity: int):
    """
    Set VERSION (MAJOR.MINOR.PATCH) in every target file of the project.

    Files are rewritten one after another. A failure part-way leaves the
    files already written at the new version.

    Examples:

    # Default targets: package.json, src-tauri/tauri.conf.json, src-tauri/Cargo.toml
    versync bump-version 0.2.0

    # Preview only
    versync bump-version 0.2.0 --dry-run
    """

    setup_cli_logging(verbosity=verbosity)
    logger = get_logger(__name__)

    if not is_valid_version(version):
        click.echo(USAGE, err=True)
        sys.exit(1)

    try:
        config_manager = ConfigurationManager(root, config_file)
        results = synchronize(version, config_manager.get_sync_config(), dry_run=dry)
    except Exception as e:
        if verbosity >= 4:
            raise
        raise click.ClickException(str(e))

    logger.debug(f"{sum(r.changed for r in results)} of {len(results)} files changed")
    print_sync_summary(results, version, dry)


@click.command()
@root_option
@config_option
@click.option('--expect', '-e', callback=parse_expected_version_option,
              help="Also require every file to report this version")
@verbosity_option
def check(root: Path, config_file: str, expect: str, verbosity: int):
    """Report the version recorded in each target and fail if they disagree."""

    setup_cli_logging(verbosity=verbosity)

    try:
        config_manager = ConfigurationManager(root, config_file)
        found = read_versions(config_manager.get_sync_config())
    except Exception as e:
        if verbosity >= 4:
            raise
        raise click.ClickException(str(e))

    print_version_report(found)
    if not versions_agree(found, expect):
        raise click.ClickException(describe_mismatch(found, expect))


@click.command()
@root_option
@click.option('--force', '-f', is_flag=True, help="Overwrite an existing versync.yaml")
@verbosity_option
def init(root: Path, force: bool, verbosity: int):
    """Write a versync.yaml listing the default targets into the project root."""

    setup_cli_logging(verbosity=verbosity)

    try:
        config_path = TemplateManager(env).write_config(root, list(DEFAULT_TARGETS), force=force)
    except Exception as e:
        if verbosity >= 4:
            raise
        raise click.ClickException(str(e))

    click.echo(f"Created {config_path}")

def main():
    """
    Entrypoint for versync cli tool implemented using Click.
    """
    cli.add_command(bump_version)
    cli.add_command(check)
    cli.add_command(init)
    cli()
