"""Search node: a board snapshot with path cost and cached heuristic."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gridsearch.backend.models.board import Board

if TYPE_CHECKING:
    from gridsearch.backend.engine.gamerules import GameRules


@dataclass(frozen=True, eq=False)
class SearchNode:
    """Immutable pairing of a board with its path cost and distance.

    ``distance`` is computed once from the rule provider when the node is
    built.  Nodes compare and hash by board, so nodes reached along
    different paths are interchangeable in a visited set.
    """

    board: Board
    rules: GameRules
    cost: int = 0
    distance: int = field(init=False)

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"Path cost must be non-negative, got {self.cost}.")
        object.__setattr__(self, "distance", self.rules.distance(self.board))

    def child(self, board: Board) -> SearchNode:
        """Wrap a successor *board* one step further from the start."""
        return SearchNode(board=board, rules=self.rules, cost=self.cost + 1)

    @property
    def is_goal(self) -> bool:
        return self.rules.goal(self.board)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.board == other.board

    def __hash__(self) -> int:
        return hash(self.board)
