"""
对局会话

规则引擎的调用方：维护当前棋盘、走子方、对局状态和走法记录，
每步走子后对对方做将死判定，并支持悔棋。
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .board import Board, Position, check_position, initial_board
from .pieces import Piece, Side
from .rule_engine import is_checkmate, is_in_check, safe_moves
from ..utils.exceptions import GameStateError, IllegalMoveError
from ..utils.logger import LoggerMixin


class GameStatus(Enum):
    """对局状态"""
    PLAYING = 'playing'
    RED_WINS = 'red_win'
    BLACK_WINS = 'black_win'


@dataclass(frozen=True)
class MoveRecord:
    """一步走法的记录，用于悔棋"""
    from_pos: Position
    to_pos: Position
    piece: Piece
    captured: Optional[Piece] = None


class GameSession(LoggerMixin):
    """
    对局会话

    状态转换: PLAYING -> {PLAYING, RED_WINS, BLACK_WINS}，
    由每步走子后对对方的将死判定触发。
    """

    def __init__(self, board: Optional[Board] = None,
                 side_to_move: Union[Side, str] = Side.RED):
        """
        Args:
            board: 起始棋盘，None表示标准初始局面
            side_to_move: 先走方
        """
        self._start_board = board if board is not None else initial_board()
        self._start_side = Side.coerce(side_to_move)
        self.reset()

    def reset(self) -> None:
        """恢复到创建会话时的起始棋盘和先走方，清空历史"""
        self.board = self._start_board
        self.side_to_move = self._start_side
        self.status = GameStatus.PLAYING
        self._history: List[MoveRecord] = []

    @property
    def history(self) -> Tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self._history[-1] if self._history else None

    @property
    def move_count(self) -> int:
        return len(self._history)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    def is_in_check(self, side: Optional[Union[Side, str]] = None) -> bool:
        """指定方（默认走子方）是否被将军"""
        return is_in_check(self.board, self.side_to_move if side is None else side)

    def legal_moves_from(self, pos: Sequence[int]) -> List[Position]:
        """走子方在指定位置棋子的合法走法，对局结束后为空"""
        if self.is_over:
            return []
        return safe_moves(self.board, pos, self.side_to_move)

    def make_move(self, from_pos: Sequence[int], to_pos: Sequence[int]) -> MoveRecord:
        """
        执行走法

        Returns:
            MoveRecord: 本步走法记录

        Raises:
            GameStateError: 对局已结束
            IllegalMoveError: 走法不在安全走法之列
        """
        if self.is_over:
            raise GameStateError(self.status.value, "对局已结束")

        from_pos = check_position(from_pos)
        to_pos = check_position(to_pos)
        if to_pos not in self.legal_moves_from(from_pos):
            self.log_warning("拒绝非法走法: %s -> %s", from_pos, to_pos)
            raise IllegalMoveError(from_pos, to_pos, f"不是{self.side_to_move.label}方的合法走法")

        record = MoveRecord(
            from_pos=from_pos,
            to_pos=to_pos,
            piece=self.board.piece_at(from_pos),
            captured=self.board.piece_at(to_pos),
        )
        self.board = self.board.with_move(from_pos, to_pos)
        self._history.append(record)
        self.log_info("第%d步: %s %s -> %s", len(self._history), record.piece.symbol, from_pos, to_pos)

        mover = self.side_to_move
        if is_checkmate(self.board, mover.opponent):
            self.status = GameStatus.RED_WINS if mover is Side.RED else GameStatus.BLACK_WINS
            self.log_info("%s方将死对手, 对局结束", mover.label)
        else:
            self.side_to_move = mover.opponent

        return record

    def undo(self) -> MoveRecord:
        """
        悔棋：撤销上一步，恢复被吃的棋子，走子权交还给走棋方

        Raises:
            GameStateError: 没有可撤销的走法
        """
        if not self._history:
            raise GameStateError("无走法记录", "无法悔棋")

        record = self._history.pop()
        cells = self.board.to_matrix()
        cells[record.from_pos] = record.piece.code
        cells[record.to_pos] = record.captured.code if record.captured else 0
        self.board = Board(cells)

        # 终局时走子权未交出，撤销后仍是该方走
        if self.status is GameStatus.PLAYING:
            self.side_to_move = self.side_to_move.opponent
        self.status = GameStatus.PLAYING
        self.log_debug("悔棋: %s -> %s", record.from_pos, record.to_pos)
        return record
