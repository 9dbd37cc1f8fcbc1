"""Command-line interface for rinex-epoch.

Provides CLI commands to parse, format and convert RINEX epoch fields.
"""

import importlib.metadata
import json
import sys
from pathlib import Path

import click

from rinex_epoch.models import RecordKind, TimeScale

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("rinex-epoch")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


def _to_record_kind(ctx: click.Context, param: click.Parameter, value: str) -> RecordKind:
    try:
        return RecordKind.from_str(value)
    except ValueError:
        raise click.BadParameter(f"unknown record kind: {value}") from None


def _to_time_scale(ctx: click.Context, param: click.Parameter, value: str) -> TimeScale:
    try:
        return TimeScale.from_str(value)
    except ValueError:
        raise click.BadParameter(f"unknown time scale: {value}") from None


kind_option = click.option(
    "--kind",
    "-k",
    default="obs",
    callback=_to_record_kind,
    help="Record kind: obs, nav, ionex, meteo, clock, antex, other (default: obs)",
)

time_scale_option = click.option(
    "--time-scale",
    "-t",
    default="UTC",
    callback=_to_time_scale,
    help="Time scale of the written dates: UTC, TAI, GPST, GST, BDT (default: UTC)",
)


@click.group()
@click.version_option(version=__version__, prog_name="rinex-epoch")
def cli() -> None:
    """Parse and format the epoch field of RINEX GNSS files.

    Use 'rinex-epoch COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("text")
@time_scale_option
def parse(text: str, time_scale: TimeScale) -> None:
    """Parse an epoch field and print it as JSON.

    Examples
    --------
        rinex-epoch parse " 21 12 21  0  0 30.0000000  1"
        rinex-epoch parse "2021 01 01 00 00 00" -t GPST
    """
    from rinex_epoch import EpochParsingError, parse_epoch

    try:
        epoch, flag = parse_epoch(text, time_scale)
    except EpochParsingError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    y, m, d, hh, mm, ss, ns = epoch.to_gregorian()
    payload = {
        "epoch": epoch.to_iso_string(),
        "time_scale": str(epoch.time_scale),
        "gregorian": {
            "year": y,
            "month": m,
            "day": d,
            "hour": hh,
            "minute": mm,
            "second": ss,
            "nanosecond": ns,
        },
        "flag": int(flag),
        "flag_name": flag.name,
    }
    click.echo(json.dumps(payload, indent=2))


@cli.command(name="format")
@click.argument("calendar")
@kind_option
@click.option(
    "--revision",
    "-r",
    type=click.IntRange(1, 4),
    default=3,
    help="RINEX major revision (default: 3)",
)
@click.option(
    "--flag",
    "-f",
    type=click.IntRange(0, 6),
    default=None,
    help="Epoch flag code 0-6 (default: 0)",
)
def format_(calendar: str, kind: RecordKind, revision: int, flag: int | None) -> None:
    """Format CALENDAR as a RINEX epoch field.

    CALENDAR is a date such as "2021-12-21T00:00:30.0000000 UTC"; the
    trailing identifier names its time scale.

    Examples
    --------
        rinex-epoch format "2020-12-31T23:45:00 UTC" -k nav -r 2
        rinex-epoch format "2022-01-09T00:00:00.1 GPST" -k obs -f 1
    """
    from rinex_epoch import Epoch, EpochFlag, format_epoch

    try:
        epoch = Epoch.from_gregorian_str(calendar)
    except ValueError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    epoch_flag = EpochFlag(flag) if flag is not None else None
    click.echo(format_epoch(epoch, epoch_flag, kind, revision))


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    required=True,
    help="Output file path",
)
@kind_option
@click.option(
    "--revision",
    "-r",
    type=click.IntRange(1, 4),
    default=3,
    help="RINEX major revision of the input (default: 3)",
)
@click.option(
    "--to-revision",
    type=click.IntRange(1, 4),
    default=None,
    help="RINEX major revision to write (default: same as input)",
)
@time_scale_option
@click.option(
    "--log",
    "log_path",
    type=click.Path(),
    default=None,
    help="Append JSONL audit events to this file",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Abort on the first line that fails to parse",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def convert(
    input_path: str,
    output: str,
    kind: RecordKind,
    revision: int,
    to_revision: int | None,
    time_scale: TimeScale,
    log_path: str | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Rewrite a file of epoch fields (one per line) for another revision.

    Lines that fail to parse are reported and left out of the output,
    unless --strict is given.

    Examples
    --------
        rinex-epoch convert epochs_v2.txt -o epochs_v3.txt -r 2 --to-revision 3
        rinex-epoch convert nav.txt -o out.txt -k nav -r 3 --log events.jsonl
    """
    from rinex_epoch.engine import ConversionConfig, run_conversion

    if verbose:
        click.echo(f"Converting: {input_path}", err=True)
        click.echo(f"  Kind: {kind}", err=True)
        click.echo(f"  Revision: {revision} -> {to_revision or revision}", err=True)
        click.echo(f"  Time scale: {time_scale}", err=True)

    try:
        config = ConversionConfig(
            record_kind=kind,
            revision=revision,
            target_revision=to_revision,
            time_scale=time_scale,
            strict=strict,
        )

        result = run_conversion(
            Path(input_path),
            Path(output),
            config=config,
            log_path=Path(log_path) if log_path else None,
        )

        if not result.success:
            click.secho(f"✗ Conversion failed: {result.error_message}", fg="red", err=True)
            sys.exit(1)

        for message in result.errors:
            click.secho(f"  {message}", fg="yellow", err=True)

        click.secho(
            f"✓ Converted {result.lines_converted} epochs to {output} "
            f"({result.lines_rejected} rejected)",
            fg="green",
        )

    except Exception as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        if verbose:
            import traceback

            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
