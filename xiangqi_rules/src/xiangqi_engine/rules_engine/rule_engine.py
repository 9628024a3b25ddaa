"""
象棋规则引擎

在走法生成之上实现将军检测、自将过滤（安全走法）与将死判定。
所有函数都是棋盘的纯函数，不缓存任何状态。
"""

from typing import Any, Dict, List, Sequence, Union

from .board import Board, Position, apply_move, check_position
from .move_generator import pseudo_moves
from .pieces import Side
from ..utils.logger import get_logger

logger = get_logger('xiangqi.rule_engine')


def is_in_check(board: Board, side: Union[Side, str]) -> bool:
    """
    检查指定方是否被将军

    找不到该方的帅/将时视为被将军（帅/将已被吃）。

    Args:
        board: 棋盘
        side: 被检查的一方

    Returns:
        bool: 是否被将军
    """
    side = Side.coerce(side)
    general_pos = board.find_general(side)
    if general_pos is None:
        return True

    enemy = side.opponent
    for pos, _ in board.pieces(enemy):
        if general_pos in pseudo_moves(board, pos, enemy):
            return True
    return False


def is_move_safe(board: Board, from_pos: Sequence[int], to_pos: Sequence[int],
                 side: Union[Side, str]) -> bool:
    """走子后己方帅/将是否不被将军"""
    return not is_in_check(apply_move(board, from_pos, to_pos), side)


def safe_moves(board: Board, pos: Sequence[int], side: Union[Side, str]) -> List[Position]:
    """
    生成指定棋子的合法（安全）走法

    在伪合法走法中过滤掉会使己方帅/将被将军的走法。

    Returns:
        List[Position]: 目标位置列表
    """
    side = Side.coerce(side)
    pos = check_position(pos)
    return [target for target in pseudo_moves(board, pos, side)
            if is_move_safe(board, pos, target, side)]


def is_checkmate(board: Board, side: Union[Side, str]) -> bool:
    """
    检查指定方是否被将死

    未被将军时直接返回False（不判困毙）；否则穷举该方所有棋子的安全走法，
    只要存在一步即可解将。
    """
    side = Side.coerce(side)
    if not is_in_check(board, side):
        return False

    for pos, _ in board.pieces(side):
        if safe_moves(board, pos, side):
            logger.debug("%s被将军, %s处的棋子可以解将", side.label, pos)
            return False

    logger.debug("%s被将死", side.label)
    return True


def all_safe_moves(board: Board, side: Union[Side, str]) -> Dict[Position, List[Position]]:
    """
    生成指定方所有棋子的安全走法

    Returns:
        Dict[Position, List[Position]]: {起点: [终点, ...]}，只包含至少有一步走法的棋子
    """
    side = Side.coerce(side)
    moves = {}
    for pos, _ in board.pieces(side):
        targets = safe_moves(board, pos, side)
        if targets:
            moves[pos] = targets
    return moves


def get_game_status(board: Board, side_to_move: Union[Side, str]) -> Dict[str, Any]:
    """
    获取走子方的局面状态

    Returns:
        Dict: side_to_move / in_check / checkmate / legal_moves_count
    """
    side = Side.coerce(side_to_move)
    legal_moves = all_safe_moves(board, side)
    in_check = is_in_check(board, side)
    return {
        'side_to_move': side,
        'in_check': in_check,
        'checkmate': in_check and not legal_moves,
        'legal_moves_count': sum(len(targets) for targets in legal_moves.values()),
    }
