"""Fantasy Basketball Analysis command line entry point."""

import logging
import sys

import click

from .core.config import get_settings
from .core.http import ExternalAPIError
from .models import DocumentShapeError
from .providers import NBADataClient
from .stats import PlayerStats, SchemaMismatchError, get_registry

logger = logging.getLogger(__name__)


def welcome_banner() -> str:
    return f"Welcome to the {get_settings().app_name}"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.group(invoke_without_command=True)
@click.option("--log-level", default=None, help="Logging level (default: settings.log_level)")
def cli(log_level: str | None):
    """Fantasy Basketball Analysis Tool."""
    configure_logging(log_level or get_settings().log_level)
    click.echo(welcome_banner())


@cli.command()
@click.argument("person_id", type=click.IntRange(min=0))
@click.option("--stat", "stats", multiple=True, help="Only print these stats (repeatable)")
def player(person_id: int, stats: tuple[str, ...]):
    """Print the latest season stats of a player (e.g. 203500 - Steven Adams)."""
    try:
        with NBADataClient() as client:
            registry = get_registry(client)
            record = PlayerStats.fetch(person_id, client=client, registry=registry)
    except ExternalAPIError as e:
        click.echo(f"ERROR: {e.message}", err=True)
        sys.exit(1)
    except (DocumentShapeError, SchemaMismatchError) as e:
        click.echo(f"ERROR: unexpected profile data for player {person_id}: {e}", err=True)
        sys.exit(1)

    if not stats:
        click.echo(str(record))
        return

    for name in stats:
        if not registry.is_valid(name):
            logger.warning(f"Unknown stat '{name}', reporting 0.0")
        click.echo(f"{name}: {record.get_stat(name)}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
