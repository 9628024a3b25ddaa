"""
象棋规则引擎模块

包含棋盘表示、走法生成、将军检测、将死判定和对局会话。
"""

from .pieces import Side, PieceType, Piece
from .board import (
    Board, Position, BOARD_ROWS, BOARD_COLS, INITIAL_LAYOUT,
    in_bounds, in_palace, has_crossed_river, initial_board, apply_move
)
from .move_generator import pseudo_moves
from .rule_engine import (
    is_in_check, is_move_safe, safe_moves, is_checkmate,
    all_safe_moves, get_game_status
)
from .game_session import GameSession, GameStatus, MoveRecord

__all__ = [
    'Side', 'PieceType', 'Piece',
    'Board', 'Position', 'BOARD_ROWS', 'BOARD_COLS', 'INITIAL_LAYOUT',
    'in_bounds', 'in_palace', 'has_crossed_river', 'initial_board', 'apply_move',
    'pseudo_moves',
    'is_in_check', 'is_move_safe', 'safe_moves', 'is_checkmate',
    'all_safe_moves', 'get_game_status',
    'GameSession', 'GameStatus', 'MoveRecord',
]
