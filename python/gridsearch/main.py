#!/usr/bin/env python3
"""Grid state-space search.

Usage::

    gridsearch search                          # 3×3 n-puzzle, breadth-first
    gridsearch search -p nqueens -s 5 -t dfs   # 5-queens, depth-first
    gridsearch search -t bds --scramble 12     # bidirectional
    gridsearch bench -p npuzzle -t dfs -t bfs --min-size 2 --max-size 3
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from gridsearch.backend.engine.benchmark import run_benchmark
from gridsearch.backend.engine.gamegenerator import Problem, make_problem
from gridsearch.backend.engine.gamerules import Heuristic, NPuzzleRules
from gridsearch.backend.engine.gamesolver import SearchType, graph_search
from gridsearch.backend.models.board import Board
from gridsearch.frontend.cli.render import render_table, render_text

console = Console()

app = typer.Typer(add_completion=False, help="Grid state-space search.")


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )


def _show_board(board: Board, title: str, plain: bool) -> None:
    if plain:
        console.print(title, markup=False, highlight=False)
        console.print(render_text(board), markup=False, highlight=False)
        return
    panel = Panel(
        Align.center(render_table(board)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)


# -- commands -----------------------------------------------------------------


@app.command()
def search(
    problem: Problem = typer.Option(
        Problem.npuzzle, "-p", "--problem",
        help="Puzzle to search.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=1, max=8,
        help="Board side length.",
    ),
    strategy: SearchType = typer.Option(
        SearchType.breadth_first, "-t", "--strategy",
        help="Traversal strategy.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Random blank slides for the n-puzzle (default 2·n²).",
    ),
    random_swaps: bool = typer.Option(
        False, "--random-swaps",
        help="Shuffle the n-puzzle with arbitrary swaps (may be unsolvable; excludes --scramble).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    heuristic: Heuristic = typer.Option(
        Heuristic.mismatch, "--heuristic",
        help="n-puzzle distance heuristic.",
    ),
    plain: bool = typer.Option(False, "--plain", help="Plain-text board output."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Search one puzzle instance and print the outcome."""
    _configure_logging(verbose)

    try:
        initial, goal = make_problem(
            problem, size,
            scramble=scramble, seed=seed, heuristic=heuristic,
            random_swaps=random_swaps,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    _show_board(initial.board, f"Starting search of type {strategy.name}", plain)
    if problem is Problem.npuzzle and not NPuzzleRules.is_solvable(initial.board):
        console.print("Warning: this board is unsolvable; the search will exhaust the reachable states.")

    try:
        result = graph_search(initial, strategy, goal=goal)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="'--strategy'") from e

    if not result.found or result.node is None:
        console.print("No solution found")
        raise typer.Exit(code=1)

    if strategy is SearchType.bidirectional:
        console.print(f"Found solution, cost of first intersecting node {result.cost}")
        console.print(
            f"Meeting depths: forward {result.forward_depth}, backward {result.backward_depth}"
        )
    else:
        console.print(f"Found solution, cost {result.cost}")
    console.print(f"Expanded {result.expanded} nodes, generated {result.generated}")
    _show_board(result.node.board, "Solution", plain)


@app.command()
def bench(
    problem: Problem = typer.Option(
        Problem.npuzzle, "-p", "--problem",
        help="Puzzle to benchmark.",
    ),
    strategy: list[SearchType] = typer.Option(
        [SearchType.depth_first], "-t", "--strategy",
        help="Strategy to time (repeatable).",
    ),
    min_size: int = typer.Option(3, "--min-size", min=1, help="Smallest board side."),
    max_size: int = typer.Option(4, "--max-size", min=1, help="Largest board side."),
    repeats: int = typer.Option(3, "-r", "--repeats", min=1, help="Runs per size."),
    scramble: Optional[int] = typer.Option(
        8, "--scramble",
        min=0,
        help="Random blank slides for each n-puzzle instance.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Base random seed."),
    heuristic: Heuristic = typer.Option(
        Heuristic.mismatch, "--heuristic",
        help="n-puzzle distance heuristic.",
    ),
    out: Path = typer.Option(
        Path("graphSearchResults.csv"), "-o", "--out",
        help="CSV file to append results to.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Time strategies across board sizes and append the results to a CSV."""
    _configure_logging(verbose)
    if min_size > max_size:
        raise typer.BadParameter(
            f"--min-size ({min_size}) must not exceed --max-size ({max_size})."
        )

    try:
        rows = run_benchmark(
            problem,
            range(min_size, max_size + 1),
            strategy,
            repeats,
            scramble=scramble,
            seed=seed,
            heuristic=heuristic,
            out=out,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    table = Table(title=f"{problem.value} benchmark", title_style="bold cyan")
    table.add_column("n", justify="right")
    table.add_column("Strategy")
    table.add_column("Time", justify="right", style="yellow")
    table.add_column("Cost", justify="right")
    for row in rows:
        table.add_row(
            str(row.n),
            row.search_type.value,
            f"{row.time_taken:.4f}s",
            "-" if row.cost is None else str(row.cost),
        )
    console.print(table)
    console.print(f"Wrote {len(rows)} rows to {out}")


if __name__ == "__main__":
    app()
