"""Rule providers and puzzle generators."""

from __future__ import annotations

from collections.abc import Hashable

import pytest

from gridsearch.backend.engine.gamegenerator import GameGenerator, Problem, make_problem
from gridsearch.backend.engine.gamerules import GameRules, Heuristic, NPuzzleRules, NQueensRules
from gridsearch.backend.models import Board


def _queens_at(size: int, *squares: tuple[int, int]) -> Board:
    grid: list[list[Hashable | None]] = [[None] * size for _ in range(size)]
    for r, c in squares:
        grid[r][c] = "Q"
    return Board.from_tokens(grid)


# -- n-puzzle -----------------------------------------------------------------


@pytest.mark.parametrize("heuristic", list(Heuristic), ids=lambda h: h.value)
def test_solved_npuzzle_is_goal_at_distance_zero(heuristic: Heuristic) -> None:
    rules = NPuzzleRules(heuristic)
    board = GameGenerator.solved(3)
    assert rules.goal(board)
    assert rules.distance(board) == 0


def test_one_slide_distances() -> None:
    board = GameGenerator.solved(3).swap((2, 2), (2, 1))
    assert not NPuzzleRules().goal(board)
    assert NPuzzleRules.mismatch(board) == 2
    assert NPuzzleRules.manhattan(board) == 1


def test_manhattan_sums_tile_offsets() -> None:
    board = Board.from_tokens([["3", "2", "1"], ["4", "5", "6"], ["7", "8", None]])
    assert NPuzzleRules.manhattan(board) == 4
    assert NPuzzleRules.mismatch(board) == 2


def test_unknown_heuristic_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown heuristic"):
        NPuzzleRules("euclid")


def test_solvability() -> None:
    assert NPuzzleRules.is_solvable(GameGenerator.solved(4))
    assert not NPuzzleRules.is_solvable(Board.from_tokens([["2", "1"], ["3", None]]))


@pytest.mark.parametrize("size", [2, 3, 4])
@pytest.mark.parametrize("seed", range(3))
def test_scrambled_boards_stay_solvable(size: int, seed: int) -> None:
    board = GameGenerator.generate(size, seed=seed)
    assert NPuzzleRules.is_solvable(board)


def test_generation_is_seeded() -> None:
    assert GameGenerator.generate(4, seed=11) == GameGenerator.generate(4, seed=11)


def test_random_swaps_keep_every_tile() -> None:
    board = GameGenerator.random_swaps(3, seed=5)
    tokens = sorted(str(t) for row in board.identities() for t in row)
    assert tokens == sorted(["1", "2", "3", "4", "5", "6", "7", "8", "None"])


def test_solvability_needs_numbered_tiles() -> None:
    board = Board.from_tokens([["1", "Q"], ["3", None]])
    with pytest.raises(ValueError, match=r"Tile at \(0, 1\) is not numbered"):
        NPuzzleRules.is_solvable(board)


def test_npuzzle_needs_side_of_two() -> None:
    with pytest.raises(ValueError):
        GameGenerator.solved(1)


# -- n-queens -----------------------------------------------------------------


def test_single_queen_is_goal() -> None:
    assert NQueensRules().goal(_queens_at(4, (2, 1)))


@pytest.mark.parametrize(
    "other",
    [(0, 3), (3, 0), (2, 2), (1, 1)],
    ids=["row", "column", "diagonal", "anti-diagonal"],
)
def test_attacking_queens_are_not_goal(other: tuple[int, int]) -> None:
    # (1, 1) shares the anti-diagonal with (0, 2); (2, 2) the diagonal with (0, 0).
    first = (0, 2) if other == (1, 1) else (0, 0)
    assert not NQueensRules().goal(_queens_at(4, first, other))


def test_four_queens_solution_is_goal() -> None:
    board = _queens_at(4, (0, 1), (1, 3), (2, 0), (3, 2))
    assert NQueensRules().goal(board)
    assert NQueensRules().distance(board) == 0


def test_initial_queens_share_top_row() -> None:
    board = GameGenerator.queens(5)
    assert board.identities()[0] == ["Q"] * 5
    assert not NQueensRules().goal(board)


# -- contract and factory -----------------------------------------------------


def test_rule_providers_satisfy_protocol() -> None:
    assert isinstance(NPuzzleRules(), GameRules)
    assert isinstance(NQueensRules(), GameRules)


def test_make_problem_npuzzle_has_goal_node() -> None:
    initial, goal = make_problem(Problem.npuzzle, 3, scramble=0)
    assert goal is not None
    assert initial.board == goal.board
    assert goal.distance == 0


def test_make_problem_random_swaps_excludes_scramble() -> None:
    with pytest.raises(ValueError, match="mutually exclusive"):
        make_problem(Problem.npuzzle, 3, scramble=4, random_swaps=True)


def test_make_problem_random_swaps_is_seeded() -> None:
    initial, goal = make_problem(Problem.npuzzle, 3, seed=5, random_swaps=True)
    assert goal is not None
    assert initial.board == GameGenerator.random_swaps(3, seed=5)


def test_make_problem_nqueens_has_no_goal_node() -> None:
    initial, goal = make_problem("nqueens", 4)
    assert goal is None
    assert initial.board == GameGenerator.queens(4)
