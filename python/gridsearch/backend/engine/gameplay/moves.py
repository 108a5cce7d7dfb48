"""Successor generation: overlays move templates and applies move codes."""

from __future__ import annotations

from collections.abc import Sequence

from gridsearch.backend.models.board import Board, Position
from gridsearch.backend.models.cell import MoveCode
from gridsearch.backend.models.node import SearchNode


# -- template overlay ---------------------------------------------------------


def overlay_template(
    template: Sequence[Sequence[str | None]],
    row: int,
    col: int,
    rows: int,
    cols: int,
) -> list[list[str | None]]:
    """Project a piece's move template onto a ``rows × cols`` board.

    The template's centre lands on ``(row, col)``.  Template squares that
    fall outside the board are dropped.
    """
    overlay: list[list[str | None]] = [[None] * cols for _ in range(rows)]
    half_r = len(template) // 2
    half_c = len(template[0]) // 2

    for ti, template_row in enumerate(template):
        br = row - half_r + ti
        if not 0 <= br < rows:
            continue
        for tj, code in enumerate(template_row):
            bc = col - half_c + tj
            if 0 <= bc < cols:
                overlay[br][bc] = code
    return overlay


# -- path clearance -----------------------------------------------------------


def _step(delta: int) -> int:
    return (delta > 0) - (delta < 0)


def is_clear(board: Board, current: Position, target: Position) -> bool:
    """Return True if every square strictly between the two positions is empty.

    Positions that do not share a row, column or diagonal are never clear.
    The origin and target squares themselves are not inspected.
    """
    cr, cc = current
    tr, tc = target
    if cr != tr and cc != tc and abs(tr - cr) != abs(tc - cc):
        return False

    dr, dc = _step(tr - cr), _step(tc - cc)
    r, c = cr + dr, cc + dc
    while (r, c) != (tr, tc):
        if not board.is_empty(r, c):
            return False
        r, c = r + dr, c + dc
    return True


# -- successor generation -----------------------------------------------------


def _apply(board: Board, code: str | None, src: Position, dst: Position) -> Board | None:
    """Apply one move code, returning the new board or ``None`` for no move."""
    if code == MoveCode.SWAP:
        return board.swap(src, dst)
    if code == MoveCode.SWAP_CLEAR:
        return board.swap(src, dst) if is_clear(board, src, dst) else None
    if code == MoveCode.REPLACE:
        return board.move(src, dst)
    if code == MoveCode.REPLACE_CLEAR:
        return board.move(src, dst) if is_clear(board, src, dst) else None
    if code == MoveCode.MOVE_CLEAR:
        if board.is_empty(*dst) and is_clear(board, src, dst):
            return board.move(src, dst)
        return None
    if code == MoveCode.MOVE_FREE:
        return board.move(src, dst) if board.is_empty(*dst) else None
    # Unknown codes are treated as "no move".
    return None


def successor_boards(board: Board) -> list[Board]:
    """Return every board reachable from *board* in one move.

    Pieces are visited in row-major order, and each piece's targets in
    row-major order of its overlaid template.  A piece never targets its
    own square.
    """
    size = board.size
    out: list[Board] = []
    for src, cell in board.positions():
        if cell.template is None:
            continue
        overlay = overlay_template(cell.template, src[0], src[1], size, size)
        for r, codes in enumerate(overlay):
            for c, code in enumerate(codes):
                if code is None or (r, c) == src:
                    continue
                nxt = _apply(board, code, src, (r, c))
                if nxt is not None:
                    out.append(nxt)
    return out


def expand(node: SearchNode) -> list[SearchNode]:
    """Return the successor nodes of *node*, each one step costlier."""
    return [node.child(board) for board in successor_boards(node.board)]
