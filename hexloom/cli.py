import logging

import click

from .bbp import InvalidArgumentError, get_digits
from .formats import BINARY_MODES, FORMATS, display_value, render_hex, serialize_payload
from .streaming import iter_hex_chunks
from .verify import read_hex_digits_from_text, verify_hex_digits


logger = logging.getLogger(__name__)


def _final_filename(stem: str, fmt: str) -> str:
    if stem.lower().endswith("." + fmt):
        return stem
    return f"{stem}.{fmt}"


def _check_range(start: int, count: int):
    try:
        if start < 0:
            raise InvalidArgumentError("start", start)
        if count < 0:
            raise InvalidArgumentError("count", count)
    except InvalidArgumentError as exc:
        raise click.BadParameter(str(exc), param_hint=f"--{exc.param}") from exc


@click.group(context_settings={"help_option_names": ["-h", "--help"], "auto_envvar_prefix": "HEXLOOM"})
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def main(log_level: str):
    logging.basicConfig(level=log_level.upper(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


@main.command()
@click.option("--start", default=0, show_default=True, type=int)
@click.option("--count", default=64, show_default=True, type=int)
@click.option("--upper/--lower", default=False, show_default=True)
@click.option("--format", "fmt", type=click.Choice(FORMATS, case_sensitive=False), default="txt", show_default=True)
@click.option("--binary-mode", type=click.Choice(BINARY_MODES, case_sensitive=False), default="ascii", show_default=True)
@click.option("--label/--no-label", default=False, show_default=True)
@click.option("--stream/--no-stream", default=False, show_default=True)
@click.option("--chunk-size", default=4096, show_default=True, type=int)
@click.option("--verify/--no-verify", default=False, show_default=True)
@click.option("--verify-samples", default=256, show_default=True, type=int)
@click.option("--out", "out_path", default="", show_default=True)
def digits(
    start: int,
    count: int,
    upper: bool,
    fmt: str,
    binary_mode: str,
    label: bool,
    stream: bool,
    chunk_size: int,
    verify: bool,
    verify_samples: int,
    out_path: str,
):
    """Print or write hex digits of pi starting at fractional position START."""
    _check_range(start, count)
    fmt = fmt.lower().strip()
    binary_mode = binary_mode.lower().strip()
    if chunk_size < 1:
        raise click.BadParameter("must be >= 1", param_hint="--chunk-size")
    if stream:
        if fmt != "txt":
            raise click.ClickException("stream mode supports only the txt format")
        if not out_path:
            raise click.ClickException("stream mode requires --out")
        filename = _final_filename(out_path, fmt)
        logger.info("streaming %d digits from position %d to %s", count, start, filename)
        with open(filename, "w", encoding="utf-8") as f:
            f.write(display_value("", start, label=label))
            for chunk in iter_hex_chunks(start, count, chunk_size, upper=upper):
                f.write(chunk)
        if verify:
            found = read_hex_digits_from_text(filename, verify_samples)
            ok, kind = verify_hex_digits(start, [int(ch, 16) for ch in found])
            if not ok:
                raise click.ClickException(f"verification failed ({kind})")
        click.echo(filename)
        return
    values = get_digits(start, count)
    if verify:
        ok, kind = verify_hex_digits(start, values, samples=verify_samples)
        if not ok:
            raise click.ClickException(f"verification failed ({kind})")
    hex_digits = render_hex(values, upper=upper)
    value = display_value(hex_digits, start, label=label) if fmt == "txt" else hex_digits
    meta = {"start": start, "count": count}
    payload, _ = serialize_payload(value, fmt, meta, binary_mode=binary_mode)
    if not out_path:
        if fmt == "bin":
            click.echo(payload, nl=False)
        else:
            click.echo(payload.decode("utf-8").rstrip("\n"))
        return
    filename = _final_filename(out_path, fmt)
    with open(filename, "wb") as f:
        f.write(payload)
    logger.info("wrote %d digits from position %d to %s", count, start, filename)
    click.echo(filename)


@main.command()
@click.argument("position", type=int)
def digit(position: int):
    """Print the single hex digit at POSITION."""
    if position < 0:
        raise click.BadParameter("position must be >= 0", param_hint="POSITION")
    click.echo(render_hex(get_digits(position, 1)))


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--start", default=0, show_default=True, type=int)
@click.option("--samples", default=256, show_default=True, type=int)
def check(path: str, start: int, samples: int):
    """Verify a txt output file against the mpmath expansion of pi."""
    _check_range(start, 0)
    found = read_hex_digits_from_text(path, samples)
    if not found:
        raise click.ClickException("no hex digits found after the point")
    ok, kind = verify_hex_digits(start, [int(ch, 16) for ch in found])
    if not ok:
        raise click.ClickException(f"verification failed ({kind})")
    click.echo(f"ok: {len(found)} digits ({kind})")
