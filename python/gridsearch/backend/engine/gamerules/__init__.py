from gridsearch.backend.engine.gamerules.rules import (
    GameRules,
    Heuristic,
    NPuzzleRules,
    NQueensRules,
)

__all__ = ["GameRules", "Heuristic", "NPuzzleRules", "NQueensRules"]
