"""Command-line interface and benchmark CSV output."""

from __future__ import annotations

import csv
from pathlib import Path

from typer.testing import CliRunner

from gridsearch.backend.engine.benchmark import CSV_HEADER, BenchmarkRow, append_rows, run_benchmark
from gridsearch.backend.engine.gamegenerator import Problem
from gridsearch.backend.engine.gamesolver import SearchType
from gridsearch.main import app

runner = CliRunner()


def _read(path: Path) -> list[list[str]]:
    with path.open(newline="") as f:
        return list(csv.reader(f))


# -- search -------------------------------------------------------------------


def test_search_solved_npuzzle() -> None:
    result = runner.invoke(
        app, ["search", "-p", "npuzzle", "-s", "3", "--scramble", "0", "-t", "bfs", "--plain"]
    )
    assert result.exit_code == 0, result.output
    assert "Found solution, cost 0" in result.output
    assert "7 8 _" in result.output


def test_search_four_queens() -> None:
    result = runner.invoke(app, ["search", "-p", "nqueens", "-s", "4", "-t", "ids"])
    assert result.exit_code == 0, result.output
    assert "Found solution, cost 6" in result.output


def test_search_bidirectional_reports_meeting_depths() -> None:
    result = runner.invoke(
        app, ["search", "-s", "3", "--scramble", "6", "--seed", "3", "-t", "bds", "--plain"]
    )
    assert result.exit_code == 0, result.output
    assert "cost of first intersecting node" in result.output
    assert "Meeting depths" in result.output


def test_search_bidirectional_needs_goal_board() -> None:
    result = runner.invoke(app, ["search", "-p", "nqueens", "-s", "4", "-t", "bds"])
    assert result.exit_code == 2


def test_search_rejects_scramble_with_random_swaps() -> None:
    result = runner.invoke(app, ["search", "--scramble", "4", "--random-swaps"])
    assert result.exit_code == 2


def test_search_rejects_tiny_npuzzle() -> None:
    result = runner.invoke(app, ["search", "-p", "npuzzle", "-s", "1"])
    assert result.exit_code == 2


# -- bench --------------------------------------------------------------------


def test_bench_writes_csv(tmp_path: Path) -> None:
    out = tmp_path / "results" / "bench.csv"
    result = runner.invoke(
        app,
        [
            "bench", "-p", "npuzzle", "-t", "bfs", "-t", "ids",
            "--min-size", "2", "--max-size", "3", "-r", "2",
            "--scramble", "4", "--seed", "7", "-o", str(out),
        ],
    )
    assert result.exit_code == 0, result.output

    rows = _read(out)
    assert rows[0] == CSV_HEADER
    assert len(rows) == 1 + 2 * 2 * 2
    assert {r[0] for r in rows[1:]} == {"npuzzle"}
    assert {r[2] for r in rows[1:]} == {"bfs", "ids"}
    assert all(r[4] == "1" for r in rows[1:])


def test_bench_rejects_inverted_range() -> None:
    result = runner.invoke(app, ["bench", "--min-size", "4", "--max-size", "3"])
    assert result.exit_code == 2


def test_append_rows_writes_header_once(tmp_path: Path) -> None:
    out = tmp_path / "bench.csv"
    row = BenchmarkRow(Problem.nqueens, 4, SearchType.depth_first, 0.5, True, 6)
    append_rows(out, [row])
    append_rows(out, [row])
    assert _read(out) == [
        CSV_HEADER,
        ["nqueens", "4", "dfs", "0.500000", "1", "6"],
        ["nqueens", "4", "dfs", "0.500000", "1", "6"],
    ]


def test_benchmark_skips_bidirectional_without_goal() -> None:
    rows = run_benchmark(Problem.nqueens, [4], [SearchType.bidirectional, SearchType.breadth_first], repeats=1)
    assert [row.search_type for row in rows] == [SearchType.breadth_first]
    assert rows[0].cost == 6
