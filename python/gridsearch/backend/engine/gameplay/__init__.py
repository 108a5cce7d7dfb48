from gridsearch.backend.engine.gameplay.moves import (
    expand,
    is_clear,
    overlay_template,
    successor_boards,
)

__all__ = ["expand", "is_clear", "overlay_template", "successor_boards"]
