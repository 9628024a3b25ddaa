"""
中国象棋规则引擎

根据任意局面计算棋子的合法走法、判断是否被将军以及是否被将死。
引擎本身是棋盘的纯函数，不渲染、不持久化，也不保存走法历史。
"""

__version__ = "0.1.0"

from .rules_engine import (
    Side, PieceType, Piece, Board, Position,
    pseudo_moves, safe_moves, is_in_check, is_move_safe, is_checkmate,
    apply_move, initial_board, GameSession, GameStatus
)
from .config import ConfigManager, EngineConfig
from .utils import setup_logger, get_logger, XiangqiError

__all__ = [
    "__version__",
    "Side", "PieceType", "Piece", "Board", "Position",
    "pseudo_moves", "safe_moves", "is_in_check", "is_move_safe", "is_checkmate",
    "apply_move", "initial_board", "GameSession", "GameStatus",
    "ConfigManager", "EngineConfig",
    "setup_logger", "get_logger", "XiangqiError",
]
