from gridsearch.backend.engine.gamesolver.solver import (
    GoalTest,
    SearchResult,
    SearchType,
    bds,
    bfs,
    dfs,
    graph_search,
    ids,
)

__all__ = [
    "GoalTest",
    "SearchResult",
    "SearchType",
    "bds",
    "bfs",
    "dfs",
    "graph_search",
    "ids",
]
