"""Times search strategies across problem sizes and appends rows to a CSV."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter

from gridsearch.backend.engine.gamegenerator import Problem, make_problem
from gridsearch.backend.engine.gamerules import Heuristic
from gridsearch.backend.engine.gamesolver import SearchType, graph_search

logger = logging.getLogger(__name__)

CSV_HEADER = ["problem", "n", "searchType", "timeTaken", "found", "cost"]


@dataclass
class BenchmarkRow:
    problem: Problem
    n: int
    search_type: SearchType
    time_taken: float
    found: bool
    cost: int | None

    def as_csv(self) -> list[str]:
        return [
            self.problem.value,
            str(self.n),
            self.search_type.value,
            f"{self.time_taken:.6f}",
            str(int(self.found)),
            "" if self.cost is None else str(self.cost),
        ]


def append_rows(path: Path, rows: Iterable[BenchmarkRow]) -> None:
    """Append *rows* to *path*, writing the header if the file is new."""
    path.parent.mkdir(parents=True, exist_ok=True)
    new_file = not path.exists() or path.stat().st_size == 0
    with path.open("a", newline="") as f:
        w = csv.writer(f)
        if new_file:
            w.writerow(CSV_HEADER)
        for row in rows:
            w.writerow(row.as_csv())


def run_benchmark(
    problem: Problem | str,
    sizes: Iterable[int],
    search_types: Iterable[SearchType | str],
    repeats: int = 3,
    *,
    scramble: int | None = None,
    seed: int | None = None,
    heuristic: Heuristic | str = Heuristic.mismatch,
    out: Path | None = None,
) -> list[BenchmarkRow]:
    """Run every (strategy, size, repeat) combination and time it.

    Each repeat builds a fresh instance; with a *seed* the instance of
    repeat ``i`` uses ``seed + i``.  Rows are appended to *out* as soon as
    each run finishes.
    """
    problem = Problem(problem)
    sizes = list(sizes)
    rows: list[BenchmarkRow] = []

    for search_type in map(SearchType, search_types):
        for n in sizes:
            for i in range(repeats):
                initial, goal = make_problem(
                    problem,
                    n,
                    scramble=scramble,
                    seed=None if seed is None else seed + i,
                    heuristic=heuristic,
                )
                if search_type is SearchType.bidirectional and goal is None:
                    logger.warning("Skipping %s for %s: no goal board", search_type.name, problem.value)
                    break

                t0 = perf_counter()
                result = graph_search(initial, search_type, goal=goal)
                elapsed = perf_counter() - t0

                row = BenchmarkRow(problem, n, search_type, elapsed, result.found, result.cost)
                logger.info(
                    "%s n=%d %s run %d: %.6fs (found=%s)",
                    problem.value, n, search_type.value, i + 1, elapsed, result.found,
                )
                rows.append(row)
                if out is not None:
                    append_rows(out, [row])

    return rows
