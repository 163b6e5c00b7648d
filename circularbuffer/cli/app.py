"""Typer CLI for exploring circular buffers."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from circularbuffer import __version__
from circularbuffer.cli.display import print_slot_table
from circularbuffer.config import BufferConfig, load_buffer_config
from circularbuffer.const import LOG_FORMAT
from circularbuffer.exceptions import CircularBufferError
from circularbuffer.ring_buffer import CircularBuffer

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Circular buffer command line interface.")
console = Console()


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging with a concise, consistent format."""
    if logging.getLogger().handlers:
        logging.getLogger().setLevel(level)
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler])


def parse_item(raw: str) -> int | float | str:
    """Interpret a command line item as an int, a float, or a plain string."""
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def _version_callback(value: bool) -> bool:
    if value:
        typer.echo(__version__)
        raise typer.Exit()
    return value


@app.callback()
def callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the circularbuffer version and exit.",
        callback=_version_callback,
        is_eager=True,
        is_flag=True,
    ),
) -> None:
    """Handle global CLI option for --version."""
    return None


@app.command("demo")
def demo(
    capacity: int = typer.Option(5, "--capacity", "-n", help="Initial capacity."),
) -> None:
    """Walk through every buffer operation, printing the slots as it goes."""
    configure_logging(logging.INFO)
    try:
        buffer: CircularBuffer[int] = CircularBuffer(capacity)
    except CircularBufferError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc

    buffer.extend([10, 20, 30])
    buffer.display()

    buffer.extend([40, 50])
    buffer.display()

    # Overwrites the oldest element once full
    buffer.push(60)
    buffer.display()

    typer.echo(f"Popped: {buffer.pop()!r}")
    buffer.display()

    buffer.push(70)
    buffer.display()

    typer.echo(f"Peeked: {buffer.peek()!r}")
    typer.echo(f"Contains 30: {30 in buffer}")
    typer.echo(f"Contains 100: {100 in buffer}")
    typer.echo(f"Length: {len(buffer)}")
    typer.echo(f"Capacity: {buffer.capacity}")

    buffer.clear()
    buffer.display()

    new_capacity = capacity + 2
    buffer.resize(new_capacity)
    typer.echo(f"Resized to {new_capacity}")
    buffer.extend([80, 90])
    buffer.display()

    for value in buffer:
        typer.echo(f"Iterated: {value!r}")

    buffer.shrink_to_fit()
    typer.echo(f"Capacity after shrink_to_fit: {buffer.capacity}")


@app.command("fill")
def fill(
    items: list[str] = typer.Argument(..., help="Items to push, oldest first."),
    capacity: int | None = typer.Option(
        None, "--capacity", "-n", help="Buffer capacity (overrides the config)."
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        help="Path to a YAML buffer configuration file.",
    ),
    pop_count: int = typer.Option(
        0, "--pop", min=0, help="Number of elements to pop after pushing."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Push items into a buffer and show the resulting slots."""
    configure_logging(logging.DEBUG if verbose else logging.INFO)
    try:
        config = load_buffer_config(config_path) if config_path else BufferConfig()
        if capacity is not None:
            config = config.model_copy(update={"capacity": capacity})
        # model_copy skips validation, so the capacity is checked by the buffer
        buffer: CircularBuffer = CircularBuffer.from_config(config)
    except CircularBufferError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc

    buffer.extend(parse_item(item) for item in items)
    for _ in range(pop_count):
        if buffer.is_empty():
            break
        typer.echo(f"Popped: {buffer.pop()!r}")

    buffer.display()
    print_slot_table(console, "Slots", buffer)


def main() -> None:
    """CLI entrypoint for the circular buffer tools."""
    app()


if __name__ == "__main__":
    main()
