from gridsearch.backend.models.board import Board, Position
from gridsearch.backend.models.cell import (
    EMPTY,
    BoardConfigurationError,
    Cell,
    MoveCode,
    Template,
)
from gridsearch.backend.models.node import SearchNode

__all__ = [
    "Board",
    "BoardConfigurationError",
    "Cell",
    "EMPTY",
    "MoveCode",
    "Position",
    "SearchNode",
    "Template",
]
