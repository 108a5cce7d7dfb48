"""Board rendering for terminal output as plain text or Rich tables."""

from __future__ import annotations

import rich.box
from rich.table import Table

from gridsearch.backend.models.board import Board

RULE = "#################"


def _token_width(board: Board) -> int:
    widths = [len(str(ident)) for row in board.identities() for ident in row if ident is not None]
    return max(widths, default=1)


# -- plain text ---------------------------------------------------------------


def render_text(board: Board) -> str:
    """Return rows of fixed-width tokens framed by ``#`` rules.

    Empty squares are drawn as underscores padded to the token width.
    """
    width = _token_width(board)
    blank = "_" * width

    lines: list[str] = [RULE]
    for row in board.identities():
        cells = [blank if ident is None else f"{ident!s:<{width}}" for ident in row]
        lines.append(" ".join(cells))
    lines.append(RULE)
    return "\n".join(lines)


# -- rich ---------------------------------------------------------------------


def render_table(board: Board) -> Table:
    """Return a Rich Table representing the board grid."""
    width = _token_width(board)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for row in board.rows:
        cells: list[str] = []
        for cell in row:
            if cell.is_empty:
                cells.append("[dim]_[/dim]")
            elif cell.is_mobile:
                cells.append(f"[bold green]{cell.identity!s:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{cell.identity!s:>{width}}[/bold white]")
        table.add_row(*cells)

    return table
