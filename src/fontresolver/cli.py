"""
Command-line interface for the font resolver
============================================

Inspect discovered fonts, resolve font requests and dump font files.
"""

import logging
import sys
from pathlib import Path

import click

from .core.config import ResolverConfig
from .core.exceptions import FontResolverError
from .fonts import FontCatalog, FontResolver, FontStyle

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to resolver configuration YAML file",
)
@click.option(
    "--font-dir",
    "-d",
    multiple=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Additional font directory (repeatable)",
)
@click.option("--no-system-fonts", is_flag=True, help="Only scan --font-dir directories")
@click.pass_context
def cli(ctx, verbose, config, font_dir, no_system_fonts):
    """Font discovery and resolution CLI."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        resolver_config = ResolverConfig.from_env_and_yaml(yaml_path=config)
    except FontResolverError as e:
        logger.error(f"Failed to load configuration: {e}")
        sys.exit(1)

    updates = {}
    if font_dir:
        updates["extra_font_dirs"] = [*resolver_config.extra_font_dirs, *font_dir]
    if no_system_fonts:
        updates["include_system_fonts"] = False

    ctx.obj = {"config": resolver_config.model_copy(update=updates)}


def _load_resolver(ctx: click.Context) -> FontResolver:
    """Scan fonts for this invocation and wrap the catalog in a resolver."""
    config = ctx.obj["config"]
    return FontResolver(FontCatalog.from_system(config), config)


@cli.command()
@click.pass_context
def families(ctx):
    """List discovered font families and their styles."""
    try:
        resolver = _load_resolver(ctx)
        registry = resolver.catalog.registry
        for name in resolver.catalog.list_families():
            family = registry.get_family(name)
            styles = ", ".join(style.value for style in FontStyle if style in family.variants)
            click.echo(f"{family.name}: {styles}")
    except FontResolverError as e:
        logger.error(f"Font discovery failed: {e}")
        sys.exit(1)


@cli.command()
@click.argument("family_name")
@click.option("--bold", "-b", is_flag=True, help="Request a bold face")
@click.option("--italic", "-i", is_flag=True, help="Request an italic face")
@click.option("--null-if-missing", is_flag=True, help="Fail instead of using a fallback font")
@click.option("--full-path", is_flag=True, help="Print the full path instead of the handle")
@click.pass_context
def resolve(ctx, family_name, bold, italic, null_if_missing, full_path):
    """Resolve FAMILY_NAME to a font handle."""
    try:
        resolver = _load_resolver(ctx)
        if null_if_missing:
            resolver.return_null_if_missing = True

        if full_path:
            result = resolver.resolve_path(family_name, bold, italic)
        else:
            result = resolver.resolve(family_name, bold, italic)
    except FontResolverError as e:
        logger.error(f"Font resolution failed: {e}")
        sys.exit(1)

    if result is None:
        click.echo(f"Font family not found: {family_name}", err=True)
        sys.exit(1)
    click.echo(result)


@cli.command()
@click.argument("handle")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="File to write the font bytes to",
)
@click.pass_context
def dump(ctx, handle, output):
    """Write the font file behind HANDLE to OUTPUT."""
    try:
        resolver = _load_resolver(ctx)
        data = resolver.get_font(handle)
        output.write_bytes(data)
    except (FontResolverError, OSError) as e:
        logger.error(f"Font dump failed: {e}")
        sys.exit(1)

    click.echo(f"Wrote {len(data)} bytes to {output}")


@cli.command()
@click.option("--show-skipped", is_flag=True, help="List files and families that were skipped")
@click.pass_context
def stats(ctx, show_skipped):
    """Show font registry statistics."""
    try:
        resolver = _load_resolver(ctx)
    except FontResolverError as e:
        logger.error(f"Font discovery failed: {e}")
        sys.exit(1)

    catalog = resolver.catalog
    click.echo("Font Registry Statistics")
    click.echo("=" * 40)
    for key, value in catalog.get_statistics().items():
        click.echo(f"{key}: {value}")

    if show_skipped:
        for diagnostic in catalog.diagnostics:
            click.echo(str(diagnostic))


if __name__ == "__main__":
    cli()
