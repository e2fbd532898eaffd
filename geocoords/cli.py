"""Command-line interface for geocoords."""

import json
import logging
import sys
from pathlib import Path

import click
import structlog

from geocoords.config import reload_config
from geocoords.coordinate import Coordinate, CoordinateFormat
from geocoords.errors import CoordinateError

# Configure structlog for CLI output
logging.basicConfig(format="%(message)s", level=logging.INFO)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(colors=True),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger()

FORMAT_CHOICE = click.Choice(CoordinateFormat.values(), case_sensitive=False)


@click.group()
@click.option("--config-dir", type=click.Path(exists=True, path_type=Path), help="Configuration directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, config_dir: Path | None, verbose: bool) -> None:
    """Convert coordinates between LatLng, DMS, DDM, UTM and geohash."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if config_dir:
        reload_config(config_dir)

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@click.option("--from", "-f", "source", type=FORMAT_CHOICE, required=True, help="Input format")
@click.option("--to", "-t", "target", type=FORMAT_CHOICE, required=True, help="Output format")
@click.option("--precision", "-p", type=int, default=-1, help="Decimal places (geohash: characters); -1 for default")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.argument("value", nargs=-1, required=True)
def convert(source: str, target: str, precision: int, as_json: bool, value: tuple[str, ...]) -> None:
    """Convert VALUE from one coordinate format to another.

    \b
    Examples:
      geocoords convert -f LatLng -t UTM -- 52.516253 13.377625
      geocoords convert -f UTM -t DMS "33U 389912.653 5819696.850"
      geocoords convert -f GeoHash -t LatLng u33db2m3370m
    """
    text = " ".join(value)
    source_format = CoordinateFormat(source)
    target_format = CoordinateFormat(target)

    try:
        coordinate = Coordinate.parse(text, source_format)
        result = coordinate.format(target_format, precision)
    except CoordinateError as e:
        if as_json:
            click.echo(json.dumps({"input": text, "error": str(e)}))
        else:
            click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.info("Converted coordinate", source=source_format.value, target=target_format.value)

    if as_json:
        click.echo(json.dumps({
            "from": source_format.value,
            "to": target_format.value,
            "input": text,
            "output": result,
            "precision": precision,
        }, ensure_ascii=False))
    else:
        click.echo(result)


@cli.command()
def formats() -> None:
    """List the supported coordinate formats."""
    for fmt in CoordinateFormat:
        click.echo(f"{fmt.value:<8} {fmt.label}")


if __name__ == "__main__":
    cli()
