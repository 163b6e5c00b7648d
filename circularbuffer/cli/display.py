"""Shared display helpers for the circular buffer CLI."""

from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from circularbuffer.ring_buffer import CircularBuffer


@dataclass
class SlotDisplayRow:
    """Display-ready representation of one storage slot."""

    index: int
    marker: str
    occupied: bool
    value: str


def build_slot_rows(buffer: CircularBuffer) -> list[SlotDisplayRow]:
    """Describe every raw slot of ``buffer`` in storage order."""
    rows: list[SlotDisplayRow] = []
    for index in range(buffer.capacity):
        occupied, value = buffer.slot(index)
        markers = []
        if index == buffer.head:
            markers.append("head")
        if index == buffer.tail and not buffer.is_empty():
            markers.append("tail")
        rows.append(
            SlotDisplayRow(
                index=index,
                marker=",".join(markers),
                occupied=occupied,
                value=repr(value) if occupied else "",
            )
        )
    return rows


def style_state(occupied: bool) -> Text:
    """Colorize slot occupancy."""
    if occupied:
        return Text("occupied", style="green bold")
    return Text("empty", style="dim")


def print_slot_table(console: Console, title: str, buffer: CircularBuffer) -> None:
    """Render the slots of ``buffer`` as a table."""
    table = Table(
        title=title,
        box=box.MINIMAL,
        show_header=True,
        header_style="bold",
        expand=False,
    )

    table.add_column("Slot", justify="right", no_wrap=True)
    table.add_column("Cursor", min_width=6, no_wrap=True)
    table.add_column("State", min_width=8, no_wrap=True)
    table.add_column("Value", min_width=8, max_width=40, overflow="fold")

    for row in build_slot_rows(buffer):
        table.add_row(str(row.index), row.marker, style_state(row.occupied), row.value)

    console.print(table)
    console.print(
        f"len={len(buffer)} capacity={buffer.capacity} "
        f"full={buffer.is_full()} empty={buffer.is_empty()}",
        highlight=False,
    )
