# b64codec/cli/main.py
"""
CLI for encoding, decoding and checking strict base64 data.
"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from b64codec.core.encoding import encode, decode
from b64codec.core.errors import Base64Error
from b64codec.verify.checker import check

DEFAULT_MAX_INPUT_SIZE = 64 * 1024 * 1024
MAX_SIZE_ENV = "B64CODEC_MAX_INPUT_SIZE"

app = typer.Typer(
    name="b64codec",
    help="Encode, decode and check strict RFC 4648 base64",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
state = {"max_size": DEFAULT_MAX_INPUT_SIZE}
logger = structlog.get_logger()


def _configure_logger(verbose: bool):
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_max_size(flag: Optional[int] = None) -> int:
    """Resolve the input size limit in this order:
    1. --max-size flag
    2. B64CODEC_MAX_INPUT_SIZE environment variable
    3. Default: 64 MiB
    """
    if flag is not None:
        size = flag
    else:
        env_value = os.environ.get(MAX_SIZE_ENV)
        if env_value is None:
            return DEFAULT_MAX_INPUT_SIZE
        try:
            size = int(env_value)
        except ValueError:
            raise ValueError(f"{MAX_SIZE_ENV} must be an integer, got {env_value!r}")

    if size <= 0:
        raise ValueError(f"max size must be positive, got {size}")
    return size


def _enforce_limit(size: int):
    limit = state["max_size"]
    if size > limit:
        logger.warning("input_too_large", limit=limit)
        console.print(f"[red]Input exceeds the {limit} byte limit[/]")
        console.print(f"  Raise it with --max-size or {MAX_SIZE_ENV}.")
        raise typer.Exit(1)


def _read_input(path: Optional[Path]) -> bytes:
    limit = state["max_size"]

    if path is None:
        data = sys.stdin.buffer.read(limit + 1)
    else:
        if not path.exists():
            console.print(f"[red]Input file not found: {path}[/]")
            raise typer.Exit(1)
        try:
            with open(path, "rb") as f:
                data = f.read(limit + 1)
        except OSError as e:
            console.print(f"[red]Failed to read input: {escape(str(e))}[/]")
            raise typer.Exit(1)

    _enforce_limit(len(data))
    return data


def _write_output(data: bytes, output: Optional[Path]):
    if output is None:
        typer.echo(data, nl=False)
        return
    with open(output, "wb") as f:
        f.write(data)


@app.callback()
def main(
    max_size: Optional[int] = typer.Option(
        None,
        "--max-size",
        help=f"Maximum input size in bytes (overrides {MAX_SIZE_ENV} env var)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log diagnostics to stderr"),
):
    """Strict base64 codec."""
    _configure_logger(verbose)
    try:
        state["max_size"] = get_max_size(max_size)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/]")
        raise typer.Exit(2)


@app.command("encode")
def encode_cmd(
    file: Optional[Path] = typer.Argument(None, help="File to encode (default: stdin)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
):
    """Encode raw bytes to base64 text."""
    data = _read_input(file)
    text = encode(data)
    logger.debug("encoded", bytes_in=len(data), chars_out=len(text))
    _write_output((text + "\n").encode("ascii"), output)


@app.command("decode")
def decode_cmd(
    file: Optional[Path] = typer.Argument(None, help="File holding base64 text (default: stdin)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
):
    """Decode base64 text back to raw bytes."""
    raw = _read_input(file)
    # surrounding whitespace only; the text itself is decoded strictly
    text = raw.strip()

    try:
        data = decode(text)
    except Base64Error as e:
        logger.warning("decode_failed", category=e.category, position=e.position)
        console.print(f"[red]Decode failed ({type(e).__name__}): {e}[/]")
        raise typer.Exit(1)

    logger.debug("decoded", chars_in=len(text), bytes_out=len(data))
    _write_output(data, output)


@app.command("check")
def check_cmd(
    text: Optional[str] = typer.Argument(None, help="Base64 text to check"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the text from a file instead"),
):
    """Check whether text is valid strict base64, without decoding it to output."""
    if text is not None and file is not None:
        console.print("[red]Pass either TEXT or --file, not both[/]")
        raise typer.Exit(2)

    if text is None:
        text = _read_input(file).strip()
    else:
        _enforce_limit(len(text))

    result = check(text)

    if result.is_valid:
        table = Table(title="Base64 Check")
        table.add_column("Length")
        table.add_column("Padding")
        table.add_column("Decoded Bytes")
        table.add_row(str(len(text)), str(result.padding), str(result.decoded_length))
        console.print(table)
        console.print("[green]✓ Valid base64[/]")
        return

    console.print("[red]✗ Invalid base64[/]")
    for failure in result.failures:
        where = "-" if failure.index is None else failure.index
        console.print(f"  • [{where}] {failure.category}: {failure.message}")
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
