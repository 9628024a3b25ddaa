"""
象棋棋盘数据结构

定义10x9棋盘的不可变表示、区域判断（九宫、河界）以及符号网格/JSON格式转换。
棋盘一经创建不可修改，所有变换（如走子）都返回新的棋盘对象。
"""

import json
import operator
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .pieces import Piece, PieceType, Side
from ..utils.exceptions import BoardFormatError, InvalidPositionError

Position = Tuple[int, int]

BOARD_ROWS = 10
BOARD_COLS = 9

# 初始局面: 第0行为黑方底线, 第9行为红方底线
INITIAL_LAYOUT: Tuple[Tuple[Optional[str], ...], ...] = (
    ('r', 'h', 'e', 'a', 'k', 'a', 'e', 'h', 'r'),
    (None, None, None, None, None, None, None, None, None),
    (None, 'c', None, None, None, None, None, 'c', None),
    ('p', None, 'p', None, 'p', None, 'p', None, 'p'),
    (None, None, None, None, None, None, None, None, None),
    (None, None, None, None, None, None, None, None, None),
    ('P', None, 'P', None, 'P', None, 'P', None, 'P'),
    (None, 'C', None, None, None, None, None, 'C', None),
    (None, None, None, None, None, None, None, None, None),
    ('R', 'H', 'E', 'A', 'K', 'A', 'E', 'H', 'R'),
)


# ==================== 区域判断 ====================

def in_bounds(row: int, col: int) -> bool:
    """坐标是否在棋盘内"""
    return 0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS


def in_palace(row: int, col: int, side: Union[Side, str]) -> bool:
    """坐标是否在指定方的九宫内 (红方7-9行, 黑方0-2行, 列3-5)"""
    if not 3 <= col <= 5:
        return False
    if Side.coerce(side) is Side.RED:
        return 7 <= row <= 9
    return 0 <= row <= 2


def has_crossed_river(row: int, side: Union[Side, str]) -> bool:
    """该行对指定方而言是否已过河 (红方行<=4, 黑方行>=5)"""
    if Side.coerce(side) is Side.RED:
        return row <= 4
    return row >= 5


def check_position(pos: Sequence[int]) -> Position:
    """
    规范化并校验坐标

    Raises:
        InvalidPositionError: 坐标格式错误或超出棋盘
    """
    try:
        row, col = pos
        row, col = operator.index(row), operator.index(col)
    except (TypeError, ValueError):
        raise InvalidPositionError(pos) from None
    if not in_bounds(row, col):
        raise InvalidPositionError((row, col))
    return row, col


class Board:
    """
    象棋棋盘类

    以只读的10x9整数矩阵保存棋子编码（红正黑负, 0为空），
    按值比较与哈希，可安全地在多处共享。
    """

    __slots__ = ('_cells',)

    def __init__(self, matrix: Any = None):
        """
        初始化棋盘

        Args:
            matrix: 10x9的整数矩阵，为None时创建空棋盘

        Raises:
            BoardFormatError: 矩阵尺寸或编码无效
        """
        if matrix is None:
            cells = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)
        else:
            array = np.asarray(matrix)
            if array.shape != (BOARD_ROWS, BOARD_COLS):
                raise BoardFormatError(f"棋盘尺寸错误: {array.shape}, 应为({BOARD_ROWS}, {BOARD_COLS})")
            if not np.issubdtype(array.dtype, np.integer):
                raise BoardFormatError(f"棋盘数据类型错误: {array.dtype}, 应为整数")
            if np.any((array < -len(PieceType)) | (array > len(PieceType))):
                raise BoardFormatError("棋盘包含无效的棋子编码")
            cells = array.astype(np.int8, copy=True)
        cells.flags.writeable = False
        self._cells = cells

    @classmethod
    def _wrap(cls, cells: np.ndarray) -> 'Board':
        board = cls.__new__(cls)
        cells.flags.writeable = False
        board._cells = cells
        return board

    @classmethod
    def from_pieces(cls, pieces: Mapping[Position, Piece]) -> 'Board':
        """
        从 {位置: 棋子} 映射创建棋盘，未列出的格子为空

        Returns:
            Board: 棋盘对象
        """
        cells = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)
        for pos, piece in pieces.items():
            row, col = check_position(pos)
            cells[row, col] = piece.code
        return cls._wrap(cells)

    # ==================== 查询 ====================

    def piece_at(self, pos: Sequence[int]) -> Optional[Piece]:
        """获取指定位置的棋子，空格返回None"""
        row, col = check_position(pos)
        code = int(self._cells[row, col])
        return Piece.from_code(code) if code else None

    def is_empty(self, pos: Sequence[int]) -> bool:
        row, col = check_position(pos)
        return bool(self._cells[row, col] == 0)

    def find_general(self, side: Union[Side, str]) -> Optional[Position]:
        """
        找到指定方帅/将的位置

        Returns:
            Optional[Position]: 帅/将的位置，找不到时返回None
        """
        code = Piece(PieceType.GENERAL, Side.coerce(side)).code
        found = np.argwhere(self._cells == code)
        if len(found) == 0:
            return None
        row, col = found[0]
        return int(row), int(col)

    def pieces(self, side: Optional[Union[Side, str]] = None) -> List[Tuple[Position, Piece]]:
        """
        按行优先顺序获取所有棋子的位置

        Args:
            side: 指定执棋方，None表示双方

        Returns:
            List[Tuple[Position, Piece]]: [(位置, 棋子), ...]
        """
        wanted = Side.coerce(side) if side is not None else None
        result = []
        for row in range(BOARD_ROWS):
            for col in range(BOARD_COLS):
                code = int(self._cells[row, col])
                if code == 0:
                    continue
                piece = Piece.from_code(code)
                if wanted is None or piece.side is wanted:
                    result.append(((row, col), piece))
        return result

    # ==================== 变换 ====================

    def with_move(self, from_pos: Sequence[int], to_pos: Sequence[int]) -> 'Board':
        """
        返回走子后的新棋盘，不做合法性检查

        起点的棋子移动到终点并覆盖原有棋子，起点清空。
        """
        from_row, from_col = check_position(from_pos)
        to_row, to_col = check_position(to_pos)
        cells = self._cells.copy()
        cells[to_row, to_col] = cells[from_row, from_col]
        cells[from_row, from_col] = 0
        return Board._wrap(cells)

    def to_matrix(self) -> np.ndarray:
        """返回可写的矩阵副本"""
        return self._cells.astype(int)

    # ==================== 格式转换 ====================

    def to_symbol_grid(self) -> List[List[Optional[str]]]:
        """转换为10x9的符号网格，空格为None"""
        return [
            [Piece.from_code(code).symbol if code else None for code in row.tolist()]
            for row in self._cells
        ]

    @classmethod
    def from_symbol_grid(cls, grid: Iterable[Iterable[Optional[str]]]) -> 'Board':
        """
        从符号网格创建棋盘

        Raises:
            BoardFormatError: 网格尺寸错误或包含无法识别的符号
        """
        rows = []
        try:
            for row in grid:
                # 整行字符串不是合法的行
                if isinstance(row, str):
                    raise TypeError
                rows.append(list(row))
        except TypeError:
            raise BoardFormatError("符号网格应为二维序列，每行由符号或None组成") from None
        if len(rows) != BOARD_ROWS or any(len(row) != BOARD_COLS for row in rows):
            raise BoardFormatError(f"符号网格应为{BOARD_ROWS}行{BOARD_COLS}列")

        cells = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)
        for row, values in enumerate(rows):
            for col, symbol in enumerate(values):
                if symbol is None:
                    continue
                try:
                    cells[row, col] = Piece.from_symbol(symbol).code
                except ValueError:
                    raise BoardFormatError(f"第{row}行第{col}列符号无效: {symbol!r}") from None
        return cls._wrap(cells)

    def to_json(self) -> str:
        data: Dict[str, Any] = {'board': self.to_symbol_grid()}
        return json.dumps(data, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> 'Board':
        """
        从JSON创建棋盘，接受 {"board": 网格} 或直接的网格数组

        Raises:
            BoardFormatError: JSON无法解析或内容无效
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise BoardFormatError(f"JSON解析失败: {e}") from e
        if isinstance(data, dict):
            if 'board' not in data:
                raise BoardFormatError("JSON缺少board字段")
            data = data['board']
        return cls.from_symbol_grid(data)

    def to_visual_string(self) -> str:
        """转换为可视化字符串"""
        lines = ["   " + " ".join(f"{col} " for col in range(BOARD_COLS)),
                 "  +" + "--+" * BOARD_COLS]
        for row in range(BOARD_ROWS):
            line = f"{row} |"
            for code in self._cells[row].tolist():
                line += (Piece.from_code(code).display_name if code else "  ") + "|"
            lines.append(line)
            lines.append("  +" + "--+" * BOARD_COLS)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_visual_string()

    def __repr__(self) -> str:
        return f"Board({len(self.pieces())} pieces)"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())


def initial_board() -> Board:
    """创建标准初始局面"""
    return Board.from_symbol_grid(INITIAL_LAYOUT)


def apply_move(board: Board, from_pos: Sequence[int], to_pos: Sequence[int]) -> Board:
    """
    走子变换，返回新棋盘，原棋盘保持不变

    不检查合法性，调用方应先通过 safe_moves 校验。
    """
    return board.with_move(from_pos, to_pos)
