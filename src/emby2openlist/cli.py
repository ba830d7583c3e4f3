"""Command-line interface for emby2openlist."""

import sys
from pathlib import Path

import click

from emby2openlist import __version__
from emby2openlist.config import load_config
from emby2openlist.exceptions import Emby2OpenlistError
from emby2openlist.openlist.client import OpenlistClient
from emby2openlist.path.translator import PathTranslator
from emby2openlist.utils.logger import get_logger, setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (defaults to built-in defaults)",
)
@click.pass_context
def cli(ctx, config):
    """emby2openlist - Translate Emby media paths to Openlist paths."""
    try:
        cfg = load_config(config)
        ctx.ensure_object(dict)
        ctx.obj["config"] = cfg

        setup_logging(cfg.logging)

    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("emby_path")
@click.option(
    "--range",
    "with_range",
    is_flag=True,
    default=False,
    help="Also list candidate paths under every Openlist root",
)
@click.pass_context
def translate(ctx, emby_path, with_range):
    """Translate a single Emby path.

    Args:
        emby_path: Path as reported by Emby
    """
    config = ctx.obj["config"]
    logger = get_logger(__name__)

    with OpenlistClient(config.openlist) as client:
        result = PathTranslator(config, client).translate(emby_path)
        click.echo(result.path)

        if not with_range:
            return

        try:
            candidates = result.range.evaluate()
        except Emby2OpenlistError as e:
            logger.error("Range enumeration failed", path=result.path, error=str(e))
            click.secho(f"✗ {e}", fg="red", err=True)
            sys.exit(1)

    if not candidates:
        click.secho("⊘ No Openlist root directories found", fg="yellow")
        return

    for candidate in candidates:
        click.echo(f"  {candidate}")


@cli.command()
@click.pass_context
def version(ctx):
    """Show version information."""
    click.echo(f"emby2openlist v{__version__}")


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
