"""Uninformed graph search over boards produced by the successor generator."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from gridsearch.backend.engine.gameplay import expand
from gridsearch.backend.models.board import Board
from gridsearch.backend.models.node import SearchNode

logger = logging.getLogger(__name__)

GoalTest = Callable[[Board], bool]


class SearchType(StrEnum):
    breadth_first = "bfs"
    depth_first = "dfs"
    iterative_deepening = "ids"
    bidirectional = "bds"


@dataclass
class SearchResult:
    """Outcome of one search run.

    ``cost`` is the path cost of the node that ended the search.  For
    bidirectional search that is the cost of the popped node found in the
    other side's visited set, and ``forward_depth`` / ``backward_depth``
    record the meeting board's depth on each side.
    """

    search_type: SearchType
    found: bool
    node: SearchNode | None = None
    expanded: int = 0
    generated: int = 0
    depth_limit: int | None = None
    forward_depth: int | None = None
    backward_depth: int | None = None

    @property
    def cost(self) -> int | None:
        return self.node.cost if self.node is not None else None


def _goal_test(initial: SearchNode, goal_test: GoalTest | None) -> GoalTest:
    return goal_test if goal_test is not None else initial.rules.goal


# -- breadth-first ------------------------------------------------------------


def bfs(initial: SearchNode, goal_test: GoalTest | None = None) -> SearchResult:
    """FIFO search; boards are marked visited when enqueued."""
    is_goal = _goal_test(initial, goal_test)
    result = SearchResult(SearchType.breadth_first, found=False)
    visited: set[Board] = {initial.board}
    queue: deque[SearchNode] = deque([initial])

    while queue:
        node = queue.popleft()
        if is_goal(node.board):
            result.found, result.node = True, node
            logger.info("Found solution, cost %d", node.cost)
            return result

        children = expand(node)
        result.expanded += 1
        result.generated += len(children)
        for child in children:
            if child.board not in visited:
                visited.add(child.board)
                queue.append(child)

    return result


# -- depth-first --------------------------------------------------------------


def dfs(initial: SearchNode, goal_test: GoalTest | None = None) -> SearchResult:
    """LIFO search; a board is marked visited only once it has been popped.

    The same board may therefore sit on the stack more than once.
    """
    is_goal = _goal_test(initial, goal_test)
    result = SearchResult(SearchType.depth_first, found=False)
    visited: set[Board] = set()
    stack: list[SearchNode] = [initial]

    while stack:
        node = stack.pop()
        if is_goal(node.board):
            result.found, result.node = True, node
            logger.info("Found solution, cost %d", node.cost)
            return result
        visited.add(node.board)

        children = expand(node)
        result.expanded += 1
        result.generated += len(children)
        for child in children:
            if child.board not in visited:
                stack.append(child)

    return result


# -- iterative deepening ------------------------------------------------------


def ids(
    initial: SearchNode,
    goal_test: GoalTest | None = None,
    max_depth: int | None = None,
) -> SearchResult:
    """Depth-limited DFS repeated with a growing depth bound.

    Each iteration starts from a fresh stack and visited map.  Nodes at the
    bound are goal-tested but not expanded.  A board is pushed again only
    when reached more cheaply than before in the same iteration, so a goal
    is found at its shallowest depth.  The search gives up when an
    iteration pushes nothing at the bound: every reachable board has then
    been expanded.
    """
    is_goal = _goal_test(initial, goal_test)
    result = SearchResult(SearchType.iterative_deepening, found=False)

    if is_goal(initial.board):
        result.found, result.node, result.depth_limit = True, initial, initial.cost
        logger.info("Found solution, cost %d", initial.cost)
        return result

    target_depth = initial.cost + 1
    while max_depth is None or target_depth <= max_depth:
        logger.debug("Iterative deepening: depth bound %d", target_depth)
        result.depth_limit = target_depth
        visited_all_available_nodes = True
        visited: dict[Board, int] = {initial.board: initial.cost}
        stack: list[SearchNode] = [initial]

        while stack:
            node = stack.pop()
            if node.cost == target_depth:
                if is_goal(node.board):
                    result.found, result.node = True, node
                    logger.info("Found solution, cost %d", node.cost)
                    return result
                continue

            children = expand(node)
            result.expanded += 1
            result.generated += len(children)
            for child in children:
                best = visited.get(child.board)
                if best is not None and best <= child.cost:
                    continue
                visited[child.board] = child.cost
                stack.append(child)
                if child.cost == target_depth:
                    visited_all_available_nodes = False

        if visited_all_available_nodes:
            logger.debug("Iterative deepening: state space exhausted at bound %d", target_depth)
            break
        target_depth += 1

    return result


# -- bidirectional ------------------------------------------------------------


def _grow(
    node: SearchNode,
    frontier: deque[SearchNode],
    seen: dict[Board, int],
    result: SearchResult,
) -> None:
    children = expand(node)
    result.expanded += 1
    result.generated += len(children)
    for child in children:
        if child.board not in seen:
            seen[child.board] = child.cost
            frontier.append(child)


def bds(initial: SearchNode, goal: SearchNode) -> SearchResult:
    """Two breadth-first waves, from *initial* and from *goal*, in lockstep.

    Stops when a popped board is already known to the other wave.  The
    reported cost is that popped node's own cost, a lower bound on the
    meeting point rather than a certified shortest path.
    """
    result = SearchResult(SearchType.bidirectional, found=False)
    forward_seen: dict[Board, int] = {initial.board: initial.cost}
    backward_seen: dict[Board, int] = {goal.board: goal.cost}
    forward: deque[SearchNode] = deque([initial])
    backward: deque[SearchNode] = deque([goal])

    while forward and backward:
        node = forward.popleft()
        if node.board in backward_seen:
            result.found, result.node = True, node
            result.forward_depth = node.cost
            result.backward_depth = backward_seen[node.board]
            logger.info("Found solution, cost of first intersecting node %d", node.cost)
            return result
        _grow(node, forward, forward_seen, result)

        node = backward.popleft()
        if node.board in forward_seen:
            result.found, result.node = True, node
            result.forward_depth = forward_seen[node.board]
            result.backward_depth = node.cost
            logger.info("Found solution, cost of first intersecting node %d", node.cost)
            return result
        _grow(node, backward, backward_seen, result)

    return result


# -- dispatch -----------------------------------------------------------------


_SEARCHES: dict[SearchType, Callable[[SearchNode, GoalTest | None], SearchResult]] = {
    SearchType.breadth_first: bfs,
    SearchType.depth_first: dfs,
    SearchType.iterative_deepening: ids,
}


def graph_search(
    initial: SearchNode,
    search_type: SearchType | str,
    goal: SearchNode | None = None,
    goal_test: GoalTest | None = None,
) -> SearchResult:
    """Run the strategy selected by *search_type*.

    Bidirectional search needs a *goal* node; the others use *goal_test*
    (default: the initial node's rule provider).
    """
    search_type = SearchType(search_type)
    logger.info("Starting search of type %s", search_type.name)

    if search_type is SearchType.bidirectional:
        if goal is None:
            raise ValueError("Goal node is required for bidirectional search")
        result = bds(initial, goal)
    else:
        result = _SEARCHES[search_type](initial, goal_test)

    if not result.found:
        logger.info("No solution found")
    return result
