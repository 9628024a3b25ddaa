"""
走法生成

按棋子类型生成伪合法走法：只考虑棋子自身的行棋规则与棋盘占用情况，
不考虑走子后己方帅/将是否被将军。
"""

from typing import Callable, Dict, List, Sequence, Union

from .board import Board, Position, check_position, has_crossed_river, in_bounds, in_palace
from .pieces import PieceType, Side

# 帅/将、车、炮：上下左右
ORTHOGONAL_DIRECTIONS = [(0, 1), (0, -1), (1, 0), (-1, 0)]
# 仕/士：斜向
DIAGONAL_DIRECTIONS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
# 相/象：(目标偏移, 象眼偏移)
ELEPHANT_MOVES = [
    ((2, 2), (1, 1)), ((2, -2), (1, -1)),
    ((-2, 2), (-1, 1)), ((-2, -2), (-1, -1)),
]
# 马：(目标偏移, 马腿偏移)
HORSE_MOVES = [
    ((2, 1), (1, 0)), ((2, -1), (1, 0)),
    ((-2, 1), (-1, 0)), ((-2, -1), (-1, 0)),
    ((1, 2), (0, 1)), ((1, -2), (0, -1)),
    ((-1, 2), (0, 1)), ((-1, -2), (0, -1)),
]


def pseudo_moves(board: Board, pos: Sequence[int], side: Union[Side, str]) -> List[Position]:
    """
    生成指定位置棋子的伪合法走法

    Args:
        board: 棋盘
        pos: 棋子位置
        side: 走子方

    Returns:
        List[Position]: 目标位置列表；该位置为空或不是走子方的棋子时返回空列表

    Raises:
        InvalidPositionError: 坐标超出棋盘
    """
    side = Side.coerce(side)
    row, col = check_position(pos)
    piece = board.piece_at((row, col))
    if piece is None or piece.side is not side:
        return []

    candidates = _GENERATORS[piece.kind](board, row, col, side)

    # 不能吃己方棋子
    result = []
    for target in candidates:
        occupant = board.piece_at(target)
        if occupant is None or occupant.side is not side:
            result.append(target)
    return result


def _general_moves(board: Board, row: int, col: int, side: Side) -> List[Position]:
    """帅/将：九宫内上下左右一步，另含对脸将（飞将）"""
    moves = []
    for dr, dc in ORTHOGONAL_DIRECTIONS:
        new_row, new_col = row + dr, col + dc
        if in_bounds(new_row, new_col) and in_palace(new_row, new_col, side):
            moves.append((new_row, new_col))

    # 沿本列向对方九宫扫描，遇到的第一个棋子若是对方帅/将则可直接吃掉
    step = -1 if side is Side.RED else 1
    scan_row = row + step
    while in_bounds(scan_row, col):
        target = board.piece_at((scan_row, col))
        if target is not None:
            if (target.kind is PieceType.GENERAL and target.side is not side
                    and (scan_row, col) not in moves):
                moves.append((scan_row, col))
            break
        scan_row += step

    return moves


def _advisor_moves(board: Board, row: int, col: int, side: Side) -> List[Position]:
    """仕/士：九宫内斜走一步"""
    moves = []
    for dr, dc in DIAGONAL_DIRECTIONS:
        new_row, new_col = row + dr, col + dc
        if in_bounds(new_row, new_col) and in_palace(new_row, new_col, side):
            moves.append((new_row, new_col))
    return moves


def _elephant_moves(board: Board, row: int, col: int, side: Side) -> List[Position]:
    """相/象：走田字，塞象眼则不能走，不能过河"""
    moves = []
    for (dr, dc), (br, bc) in ELEPHANT_MOVES:
        new_row, new_col = row + dr, col + dc
        if not in_bounds(new_row, new_col) or has_crossed_river(new_row, side):
            continue
        if not board.is_empty((row + br, col + bc)):
            continue
        moves.append((new_row, new_col))
    return moves


def _horse_moves(board: Board, row: int, col: int, side: Side) -> List[Position]:
    """马：走日字，蹩马腿则对应方向不能走"""
    moves = []
    for (dr, dc), (br, bc) in HORSE_MOVES:
        new_row, new_col = row + dr, col + dc
        if not in_bounds(new_row, new_col):
            continue
        if not board.is_empty((row + br, col + bc)):
            continue
        moves.append((new_row, new_col))
    return moves


def _chariot_moves(board: Board, row: int, col: int, side: Side) -> List[Position]:
    """车：直线任意距离，遇子即停（该子可被吃）"""
    moves = []
    for dr, dc in ORTHOGONAL_DIRECTIONS:
        new_row, new_col = row + dr, col + dc
        while in_bounds(new_row, new_col):
            moves.append((new_row, new_col))
            if not board.is_empty((new_row, new_col)):
                break
            new_row += dr
            new_col += dc
    return moves


def _cannon_moves(board: Board, row: int, col: int, side: Side) -> List[Position]:
    """炮：不吃子时同车，吃子须隔一个炮架"""
    moves = []
    for dr, dc in ORTHOGONAL_DIRECTIONS:
        new_row, new_col = row + dr, col + dc
        found_platform = False
        while in_bounds(new_row, new_col):
            if board.is_empty((new_row, new_col)):
                if not found_platform:
                    moves.append((new_row, new_col))
            elif not found_platform:
                found_platform = True
            else:
                moves.append((new_row, new_col))
                break
            new_row += dr
            new_col += dc
    return moves


def _soldier_moves(board: Board, row: int, col: int, side: Side) -> List[Position]:
    """兵/卒：只能向前一步，过河后可左右平移一步"""
    moves = []
    forward = -1 if side is Side.RED else 1
    if in_bounds(row + forward, col):
        moves.append((row + forward, col))

    if has_crossed_river(row, side):
        for dc in (-1, 1):
            if in_bounds(row, col + dc):
                moves.append((row, col + dc))
    return moves


_GENERATORS: Dict[PieceType, Callable[[Board, int, int, Side], List[Position]]] = {
    PieceType.GENERAL: _general_moves,
    PieceType.ADVISOR: _advisor_moves,
    PieceType.ELEPHANT: _elephant_moves,
    PieceType.HORSE: _horse_moves,
    PieceType.CHARIOT: _chariot_moves,
    PieceType.CANNON: _cannon_moves,
    PieceType.SOLDIER: _soldier_moves,
}
