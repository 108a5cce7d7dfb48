from gridsearch.backend.engine.gamegenerator.generator import (
    BLANK_TEMPLATE,
    QUEEN_TEMPLATE,
    GameGenerator,
    Problem,
    make_problem,
)

__all__ = ["BLANK_TEMPLATE", "QUEEN_TEMPLATE", "GameGenerator", "Problem", "make_problem"]
