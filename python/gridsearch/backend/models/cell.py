"""Cell model: a piece identity plus an optional move template."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from enum import StrEnum

Template = tuple[tuple[str | None, ...], ...]


class BoardConfigurationError(ValueError):
    """Raised when a board or move template is malformed."""


class MoveCode(StrEnum):
    """Move codes that may appear in a move template.

    Any other template value (including ``None``) means "no move".
    """

    SWAP = "s"
    SWAP_CLEAR = "sc"
    REPLACE = "r"
    REPLACE_CLEAR = "rc"
    MOVE_CLEAR = "c"
    MOVE_FREE = "f"


def normalize_template(
    template: Sequence[Sequence[str | None]] | None,
) -> Template | None:
    """Return *template* as a tuple of tuples, validating its shape.

    Templates must be square with an odd side so that the centre cell
    lines up with the piece's own square.
    """
    if template is None:
        return None

    rows = tuple(tuple(row) for row in template)
    if not rows or not rows[0]:
        raise BoardConfigurationError("Move template must not be empty.")

    side = len(rows)
    for row in rows:
        if len(row) != side:
            raise BoardConfigurationError(
                f"Move template must be square, got a {side}-row template "
                f"with a row of length {len(row)}."
            )
    if side % 2 == 0:
        raise BoardConfigurationError(
            f"Move template side must be odd, got {side}×{side}."
        )
    return rows


@dataclass(frozen=True, eq=False)
class Cell:
    """One square of the board.

    ``identity`` is ``None`` for an empty square.  ``template`` is ``None``
    for an immobile piece.  Cells compare by identity only: the template is
    a property of the piece, not of the board state.
    """

    identity: Hashable | None = None
    template: Template | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "template", normalize_template(self.template))

    @property
    def is_empty(self) -> bool:
        return self.identity is None

    @property
    def is_mobile(self) -> bool:
        return self.template is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)


EMPTY = Cell()
