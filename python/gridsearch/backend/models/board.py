"""Board model for grid state-space search."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field

from gridsearch.backend.models.cell import EMPTY, BoardConfigurationError, Cell

Position = tuple[int, int]


@dataclass(frozen=True, eq=False)
class Board:
    """An immutable ``size × size`` grid of cells.

    Two boards are equal when every square holds the same identity, no
    matter which move templates the pieces carry.  Mutating helpers
    (:meth:`swap`, :meth:`move`) return a new board and share the rows
    they do not touch with the parent.
    """

    cells: tuple[tuple[Cell, ...], ...]
    _key: tuple[Hashable | None, ...] = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        cells = tuple(tuple(row) for row in self.cells)
        if not cells or not cells[0]:
            raise BoardConfigurationError("Board must have at least one square.")
        size = len(cells)
        for r, row in enumerate(cells):
            if len(row) != size:
                raise BoardConfigurationError(
                    f"Expected a square {size}×{size} board, "
                    f"row {r} has {len(row)} squares."
                )
        key = tuple(cell.identity for row in cells for cell in row)
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "_key", key)
        object.__setattr__(self, "_hash", hash(key))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_cells(cls, rows: Sequence[Sequence[Cell]]) -> Board:
        return cls(cells=tuple(tuple(row) for row in rows))

    @classmethod
    def from_tokens(
        cls,
        grid: Sequence[Sequence[Hashable | None]],
        templates: Mapping[Hashable | None, Sequence[Sequence[str | None]]] | None = None,
    ) -> Board:
        """Create a board from a grid of identity tokens.

        *templates* maps an identity to the move template its piece
        carries; the key ``None`` gives the template of empty squares.

        Example::

            Board.from_tokens([["1", "2"], ["3", None]], {None: BLANK_TEMPLATE})
        """
        templates = templates or {}
        # One Cell per distinct token so every piece shares its template.
        pieces: dict[Hashable | None, Cell] = {}
        rows: list[list[Cell]] = []
        for row in grid:
            out: list[Cell] = []
            for token in row:
                if token not in pieces:
                    pieces[token] = Cell(token, templates.get(token))
                out.append(pieces[token])
            rows.append(out)
        return cls.from_cells(rows)

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        return self.cells

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def identity(self, row: int, col: int) -> Hashable | None:
        return self.cells[row][col].identity

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col].identity is None

    def identities(self) -> list[list[Hashable | None]]:
        """Return the grid of identity tokens (``None`` for empty squares)."""
        return [[cell.identity for cell in row] for row in self.cells]

    def positions(self) -> Iterator[tuple[Position, Cell]]:
        """Yield ``((row, col), cell)`` in row-major order."""
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                yield (r, c), cell

    def find(self, identity: Hashable | None) -> Position | None:
        """Return the first square holding *identity*, or ``None``."""
        for pos, cell in self.positions():
            if cell.identity == identity:
                return pos
        return None

    # -- copy-on-write mutations ----------------------------------------------

    def _replace_cells(self, changes: dict[Position, Cell]) -> Board:
        rows = list(self.cells)
        touched: dict[int, list[Cell]] = {}
        for (r, c), cell in changes.items():
            if r not in touched:
                touched[r] = list(rows[r])
            touched[r][c] = cell
        for r, row in touched.items():
            rows[r] = tuple(row)
        return Board(cells=tuple(rows))

    def swap(self, a: Position, b: Position) -> Board:
        """Return a new board with the contents of *a* and *b* exchanged."""
        return self._replace_cells(
            {a: self.cell(*b), b: self.cell(*a)}
        )

    def move(self, src: Position, dst: Position) -> Board:
        """Return a new board with the piece at *src* placed on *dst*.

        Whatever occupied *dst* is discarded and *src* becomes empty.
        """
        return self._replace_cells({src: EMPTY, dst: self.cell(*src)})

    # -- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._hash == other._hash and self._key == other._key

    def __hash__(self) -> int:
        return self._hash
