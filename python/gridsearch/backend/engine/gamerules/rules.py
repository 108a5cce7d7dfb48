"""Goal tests and heuristics for the supported puzzles."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable

from gridsearch.backend.models.board import Board


@runtime_checkable
class GameRules(Protocol):
    """Pluggable rule provider: a pure goal test and heuristic distance."""

    def goal(self, board: Board) -> bool: ...

    def distance(self, board: Board) -> int: ...


class Heuristic(StrEnum):
    mismatch = "mismatch"
    manhattan = "manhattan"


# -- n-puzzle -----------------------------------------------------------------


def _tile_value(identity: object) -> int | None:
    try:
        return int(identity)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


class NPuzzleRules:
    """Sliding-tile puzzle: tiles ``1..n²-1`` in row-major order, blank last.

    Tile identities are numbers or numeric strings; ``None`` is the blank.
    """

    def __init__(self, heuristic: Heuristic | str = Heuristic.mismatch) -> None:
        try:
            self.heuristic = Heuristic(heuristic)
        except ValueError:
            choices = ", ".join(h.value for h in Heuristic)
            raise ValueError(
                f"Unknown heuristic: {heuristic}. Available: {choices}"
            ) from None

    def goal(self, board: Board) -> bool:
        last = board.size * board.size
        expected = 1
        for _, cell in board.positions():
            if expected == last:
                return cell.identity is None
            if _tile_value(cell.identity) != expected:
                return False
            expected += 1
        return True

    def distance(self, board: Board) -> int:
        if self.heuristic is Heuristic.manhattan:
            return self.manhattan(board)
        return self.mismatch(board)

    @staticmethod
    def mismatch(board: Board) -> int:
        """Count squares whose content differs from the solved layout."""
        last = board.size * board.size
        count = 0
        for expected, (_, cell) in enumerate(board.positions(), start=1):
            if cell.identity is None:
                if expected != last:
                    count += 1
            elif _tile_value(cell.identity) != expected:
                count += 1
        return count

    @staticmethod
    def manhattan(board: Board) -> int:
        """Sum of row + column distances of each tile from its goal square."""
        n = board.size
        dist = 0
        for (r, c), cell in board.positions():
            value = _tile_value(cell.identity)
            if value is None:
                continue
            gr, gc = divmod(value - 1, n)
            dist += abs(r - gr) + abs(c - gc)
        return dist

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the solved layout.

        - n odd: the inversion count must be even.
        - n even: inversions + blank row counted from the bottom (0-based)
          must be even.
        """
        n = board.size
        flat: list[int] = []
        for (r, c), cell in board.positions():
            if cell.identity is None:
                continue
            value = _tile_value(cell.identity)
            if value is None:
                raise ValueError(
                    f"Tile at ({r}, {c}) is not numbered: {cell.identity!r}."
                )
            flat.append(value)
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        if n % 2 == 1:
            return inversions % 2 == 0
        blank = board.find(None)
        blank_row_from_bottom = n - 1 - (blank[0] if blank else n - 1)
        return (inversions + blank_row_from_bottom) % 2 == 0


# -- n-queens -----------------------------------------------------------------


class NQueensRules:
    """No two pieces may share a row, column or diagonal."""

    def goal(self, board: Board) -> bool:
        rows: set[int] = set()
        cols: set[int] = set()
        diagonals: set[int] = set()
        anti_diagonals: set[int] = set()
        for (r, c), cell in board.positions():
            if cell.identity is None:
                continue
            if r in rows or c in cols or r - c in diagonals or r + c in anti_diagonals:
                return False
            rows.add(r)
            cols.add(c)
            diagonals.add(r - c)
            anti_diagonals.add(r + c)
        return True

    def distance(self, board: Board) -> int:
        return 0
