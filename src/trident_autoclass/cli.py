"""CLI entry point for trident-autoclass."""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import click
from pydantic import TypeAdapter, ValidationError

from .config import get_settings
from .core import StorageClassResolver, prepare_volume
from .errors import AutoClassError
from .models import Backend
from .options import parse_option_pairs
from .registry import InMemoryOrchestrator

_BACKENDS = TypeAdapter(list[Backend])


def setup_logging(level: str) -> None:
    """Send log records to stderr in the service log format."""
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [AUTOCLASS] %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _load_orchestrator(backends_path: Optional[str]) -> InMemoryOrchestrator:
    if backends_path is None:
        return InMemoryOrchestrator()
    with open(backends_path, encoding="utf-8") as fh:
        backends = _BACKENDS.validate_json(fh.read())
    return InMemoryOrchestrator(backends)


opt_option = click.option(
    "--opt",
    "-o",
    "opts",
    multiple=True,
    metavar="KEY=VALUE",
    help="Volume creation option; may be repeated.",
)
backends_option = click.option(
    "--backends",
    "backends_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file listing backends and their pools.",
)


@click.group()
@click.version_option()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (defaults to TRIDENT_AUTOCLASS_LOG_LEVEL or INFO).",
)
def main(log_level: Optional[str]) -> None:
    """Trident AutoClass — storage classes from Docker volume options."""
    setup_logging((log_level or get_settings().log_level).upper())


@main.command("storage-class")
@opt_option
@backends_option
def storage_class_command(opts: tuple[str, ...], backends_path: Optional[str]) -> None:
    """Resolve the storage class for a set of options."""
    try:
        options = parse_option_pairs(opts)
        orchestrator = _load_orchestrator(backends_path)
        config = StorageClassResolver(orchestrator).resolve(options)
    except (AutoClassError, ValidationError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(config.model_dump_json(indent=2))


@main.command("volume")
@click.argument("name")
@opt_option
@backends_option
def volume_command(
    name: str, opts: tuple[str, ...], backends_path: Optional[str]
) -> None:
    """Build the storage class and volume config for volume NAME."""
    try:
        options = parse_option_pairs(opts)
        orchestrator = _load_orchestrator(backends_path)
        storage_class, volume = prepare_volume(name, options, orchestrator)
    except (AutoClassError, ValidationError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    result = {
        "storage_class": storage_class.model_dump(mode="json"),
        "volume": volume.model_dump(mode="json"),
    }
    click.echo(json.dumps(result, indent=2))


@main.command("hash")
@opt_option
@backends_option
def hash_command(opts: tuple[str, ...], backends_path: Optional[str]) -> None:
    """Print the storage class name derived from a set of options."""
    try:
        options = parse_option_pairs(opts)
        orchestrator = _load_orchestrator(backends_path)
        config = StorageClassResolver(orchestrator).build(options)
    except (AutoClassError, ValidationError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(config.name)


if __name__ == "__main__":
    main()
