"""Command-line interface for marcrank.

Provides CLI commands for ranking record pairs and checking configurations.
"""

import importlib.metadata
import json
import sys
from pathlib import Path

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("marcrank")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

_CONFIG_OPTION = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Ranking configuration JSON (default: bundled configuration)",
)


@click.group()
@click.version_option(version=__version__, prog_name="marcrank")
def cli() -> None:
    """Choose the preferred record among duplicate MARC records.

    Use 'marcrank COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("record1", type=click.Path(exists=True, dir_okay=False))
@click.argument("record2", type=click.Path(exists=True, dir_okay=False))
@_CONFIG_OPTION
@click.option(
    "--explain",
    "-x",
    is_flag=True,
    help="Print the per-feature breakdown as JSON",
)
@click.option(
    "--events",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append audit events to this JSONL file",
)
def rank(
    record1: str,
    record2: str,
    config_path: str | None,
    explain: bool,
    events: str | None,
) -> None:
    """Rank RECORD1 against RECORD2.

    Each file holds one record as JSON. The printed score is positive if
    RECORD1 is preferred, negative if RECORD2 is preferred, zero on a tie.

    Examples
    --------
        marcrank rank a.json b.json
        marcrank rank a.json b.json -c config.json --explain
    """
    from marcrank import rank_pair
    from marcrank.audit import AuditLogger, generate_run_id

    audit_logger = AuditLogger(generate_run_id(), Path(events)) if events else None
    try:
        result = rank_pair(record1, record2, config_path, audit_logger=audit_logger)
    except Exception as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        sys.exit(1)
    finally:
        if audit_logger is not None:
            audit_logger.close()

    if explain:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo(str(result.score))


@cli.command()
@click.argument("records", type=click.Path(exists=True, dir_okay=False))
@_CONFIG_OPTION
def sort(records: str, config_path: str | None) -> None:
    """Order the records in RECORDS from most to least preferred.

    RECORDS is a JSON array of records. Prints one 0-based index per line;
    the first line is the preferred record.
    """
    from marcrank import create_ranker, load_records

    try:
        ranker = create_ranker(config_path)
        order = ranker.sort(load_records(records))
    except Exception as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        sys.exit(1)

    for index in order:
        click.echo(str(index))


@cli.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
def validate(config_path: str) -> None:
    """Validate and resolve the configuration in CONFIG_PATH."""
    from marcrank import create_ranker

    try:
        ranker = create_ranker(config_path)
    except Exception as e:
        click.secho(f"✗ Invalid configuration: {e}", fg="red", err=True)
        sys.exit(1)

    click.secho(f"✓ Configuration OK ({len(ranker)} features)", fg="green")
    for label in ranker.features.labels:
        click.echo(f"  {label}")


@cli.command()
def features() -> None:
    """List available extractors and normalizers."""
    from marcrank.extract import build_extractor_registry
    from marcrank.normalize import build_normalizer_registry

    click.echo("Extractors:")
    for name, spec in build_extractor_registry().items():
        suffix = " (parameters)" if spec.parameterized else ""
        click.echo(f"  {name}: {spec.kind.value}{suffix}")

    click.echo("Normalizers:")
    for name, normalizer in build_normalizer_registry().items():
        kinds = ", ".join(sorted(kind.value for kind in normalizer.accepts))
        click.echo(f"  {name}: {kinds}")


if __name__ == "__main__":
    cli()
