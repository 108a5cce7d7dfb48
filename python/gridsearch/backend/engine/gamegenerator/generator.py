"""Builds starting (and goal) boards for the supported puzzles."""

from __future__ import annotations

import random
from enum import StrEnum

from gridsearch.backend.engine.gamerules import GameRules, Heuristic, NPuzzleRules, NQueensRules
from gridsearch.backend.models.board import Board, Position
from gridsearch.backend.models.node import SearchNode

# The blank slides by swapping with an orthogonal neighbour.
BLANK_TEMPLATE = (
    (None, "s", None),
    ("s", None, "s"),
    (None, "s", None),
)

# Queens shuffle up and down their column.
QUEEN_TEMPLATE = (
    (None, "s", None),
    (None, "s", None),
    (None, "s", None),
)


class Problem(StrEnum):
    npuzzle = "npuzzle"
    nqueens = "nqueens"


class GameGenerator:
    """Creates puzzle boards; all methods are static."""

    # -- n-puzzle -------------------------------------------------------------

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state n-puzzle board (tiles in order, blank bottom-right)."""
        if size < 2:
            raise ValueError(f"An n-puzzle needs a side of at least 2, got {size}.")
        grid: list[list[str | None]] = []
        num = 1
        for r in range(size):
            row: list[str | None] = []
            for c in range(size):
                if r == size - 1 and c == size - 1:
                    row.append(None)
                else:
                    row.append(str(num))
                    num += 1
            grid.append(row)
        return Board.from_tokens(grid, {None: BLANK_TEMPLATE})

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random) -> Board:
        """Return *board* after *moves* random legal blank slides.

        Never undoes the previous slide when another one is available, so
        the result is always solvable.
        """
        blank = board.find(None)
        if blank is None:
            raise ValueError("Cannot scramble a board without a blank square.")
        prev: Position | None = None

        for _ in range(moves):
            neighbors = GameGenerator._get_neighbors(board.size, blank)
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            target = rng.choice(neighbors)
            board = board.swap(blank, target)
            prev, blank = blank, target
        return board

    @staticmethod
    def generate(size: int, moves: int | None = None, seed: int | None = None) -> Board:
        """Return a solvable n-puzzle board scrambled by legal slides."""
        rng = random.Random(seed)
        if moves is None:
            moves = size * size * 2
        return GameGenerator.scramble(GameGenerator.solved(size), moves, rng)

    @staticmethod
    def random_swaps(size: int, seed: int | None = None) -> Board:
        """Shuffle by swapping arbitrary squares ``2·n²`` times.

        Unlike :meth:`generate` the result may be unsolvable.
        """
        rng = random.Random(seed)
        board = GameGenerator.solved(size)
        for _ in range(size * size * 2):
            a = (rng.randrange(size), rng.randrange(size))
            b = (rng.randrange(size), rng.randrange(size))
            board = board.swap(a, b)
        return board

    # -- n-queens -------------------------------------------------------------

    @staticmethod
    def queens(size: int) -> Board:
        """Return an n-queens board with every queen in the top row."""
        if size < 1:
            raise ValueError(f"An n-queens board needs a side of at least 1, got {size}.")
        grid: list[list[str | None]] = [["Q"] * size]
        grid.extend([None] * size for _ in range(size - 1))
        return Board.from_tokens(grid, {"Q": QUEEN_TEMPLATE})

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(size: int, pos: Position) -> list[Position]:
        r, c = pos
        neighbors: list[Position] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < size and 0 <= nc < size:
                neighbors.append((nr, nc))
        return neighbors


# -- problem factory ----------------------------------------------------------


def make_problem(
    problem: Problem | str,
    size: int,
    *,
    scramble: int | None = None,
    seed: int | None = None,
    heuristic: Heuristic | str = Heuristic.mismatch,
    random_swaps: bool = False,
) -> tuple[SearchNode, SearchNode | None]:
    """Return ``(initial_node, goal_node)`` for *problem*.

    ``goal_node`` is ``None`` when the puzzle has no single goal board
    (n-queens), which rules out bidirectional search.  *scramble* and
    *random_swaps* pick different shuffles and cannot be combined.
    """
    problem = Problem(problem)
    rules: GameRules
    if problem is Problem.npuzzle:
        rules = NPuzzleRules(heuristic)
        if random_swaps:
            if scramble is not None:
                raise ValueError("scramble and random_swaps are mutually exclusive.")
            initial = GameGenerator.random_swaps(size, seed=seed)
        else:
            initial = GameGenerator.generate(size, moves=scramble, seed=seed)
        goal = GameGenerator.solved(size)
        return SearchNode(initial, rules), SearchNode(goal, rules)

    rules = NQueensRules()
    return SearchNode(GameGenerator.queens(size), rules), None
