"""Command-line interface for versions-check."""

from pathlib import Path

import click
from rich.table import Table

from versions_check.config import (
    ALL_CHECKS,
    CHECK_NO_BOM_CONFLICT,
    CHECK_NO_UNUSED_PIN,
    __version__,
    load_settings,
)
from versions_check.console import console, error, success, warning
from versions_check.errors import VersionsCheckError
from versions_check.logging import get_logger, setup_logging
from versions_check.models.check import BootstrapStatus
from versions_check.runner import VersionsCheckRunner, ensure_versions_props

logger = get_logger(__name__)


def _runner(ctx: click.Context, resolver: str | None = None) -> VersionsCheckRunner:
    settings = ctx.obj["settings"]
    if resolver:
        settings.resolver = resolver
    return VersionsCheckRunner(settings)


def _run_checks(ctx: click.Context, names: list[str], resolver: str | None) -> None:
    try:
        exit_code = _runner(ctx, resolver).run(names)
    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        exit_code = 1
    except Exception as e:
        logger.error(f"Error: {e}")
        logger.debug("Traceback:", exc_info=True)
        exit_code = 1

    raise SystemExit(exit_code)


resolver_option = click.option(
    "-r",
    "--resolver",
    default=None,
    help="Artifact resolver plugin (overrides versions-check.toml)",
)


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output (DEBUG level)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Show only warnings and errors",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Explicit log level (overrides -v/-q)",
)
@click.option(
    "--root",
    "root_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),  # type: ignore[type-var]
    default=Path("."),
    show_default=True,
    help="Root directory of the build",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),  # type: ignore[type-var]
    default=None,
    help="Settings file (default: <root>/versions-check.toml)",
)
@click.version_option(version=__version__, prog_name="versions-check")
@click.pass_context
def cli(ctx, verbose, quiet, log_level, root_dir, config_path):
    """Validate versions.props dependency pins against the resolved build."""
    if sum([verbose, quiet, log_level is not None]) > 1:
        raise click.UsageError("--verbose, --quiet, and --log-level are mutually exclusive")

    setup_logging(verbose=verbose, quiet=quiet, log_level=log_level)

    try:
        settings = load_settings(root_dir.resolve(), config_path)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command(name="check")
@click.option(
    "--only",
    type=click.Choice(ALL_CHECKS),
    multiple=True,
    help="Run only the given check (repeatable)",
)
@resolver_option
@click.pass_context
def check(ctx, only, resolver):
    """Run every versions.props check and report all failures together."""
    _run_checks(ctx, list(only) or list(ALL_CHECKS), resolver)


@cli.command(name="check-unused-pins")
@resolver_option
@click.pass_context
def check_unused_pins(ctx, resolver):
    """Fail if a pin matches no artifact resolved in the build."""
    _run_checks(ctx, [CHECK_NO_UNUSED_PIN], resolver)


@cli.command(name="check-bom-conflicts")
@click.pass_context
def check_bom_conflicts(ctx):
    """Fail if a pin disagrees with a version recommended by a BOM."""
    _run_checks(ctx, [CHECK_NO_BOM_CONFLICT], None)


@cli.command(name="list-pins")
@click.pass_context
def list_pins(ctx):
    """Show the pins that take part in validation."""
    runner = _runner(ctx)
    try:
        pins = runner.load_pins(bootstrap=False)
    except VersionsCheckError as e:
        raise click.ClickException(str(e)) from e

    if not pins:
        click.echo(f"No pins in {runner.settings.versions_props}")
        return

    table = Table(title=str(runner.settings.versions_props))
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Pattern", style="bold", no_wrap=True)
    table.add_column("Version", style="cyan")
    for pin in pins:
        table.add_row(str(pin.line), pin.pattern, pin.version)
    console.print(table)


@cli.command(name="list-resolvers")
def list_resolvers():
    """List artifact resolvers provided by plugins."""
    from versions_check.resolvers import get_registered_resolvers

    resolvers = get_registered_resolvers()
    if not resolvers:
        error("No artifact resolvers registered.")
        raise SystemExit(1)

    table = Table(title="Artifact resolvers")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Description")
    table.add_column("Build files", style="cyan")
    table.add_column("Available")
    for name, info in sorted(resolvers.items()):
        table.add_row(
            name,
            info.description,
            ", ".join(info.build_files),
            "[green]yes[/green]" if info.available else "[red]no[/red]",
        )
    console.print(table)


@cli.command(name="init")
@click.pass_context
def init(ctx):
    """Create an empty versions.props at the root if none exists."""
    path = ctx.obj["settings"].versions_props
    result = ensure_versions_props(path)
    if result.status == BootstrapStatus.EXISTING:
        warning(f"{path} already exists")
    elif result.status == BootstrapStatus.CREATED:
        success(f"Created {path}")
    else:
        raise click.ClickException(f"Could not create {path}: {result.error_message}")


def main():
    """Entry point for versions-check command."""
    cli()


if __name__ == "__main__":
    main()
