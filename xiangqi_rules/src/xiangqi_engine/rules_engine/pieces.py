"""
棋子数据结构

定义执棋方、棋子类型以及棋子与矩阵编码/符号之间的转换。
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union


class Side(Enum):
    """执棋方 (红方为正, 黑方为负)"""
    RED = 1
    BLACK = -1

    @property
    def opponent(self) -> 'Side':
        return Side.BLACK if self is Side.RED else Side.RED

    @property
    def label(self) -> str:
        return 'red' if self is Side.RED else 'black'

    @classmethod
    def coerce(cls, value: Union['Side', str]) -> 'Side':
        """
        将字符串 ('red'/'black') 或Side转换为Side

        Raises:
            ValueError: 无法识别的执棋方
        """
        if isinstance(value, Side):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == 'red':
                return cls.RED
            if lowered == 'black':
                return cls.BLACK
        raise ValueError(f"无效的执棋方: {value!r}")


class PieceType(IntEnum):
    """棋子类型，数值即矩阵编码的绝对值"""
    GENERAL = 1    # 帅/将
    ADVISOR = 2    # 仕/士
    ELEPHANT = 3   # 相/象
    HORSE = 4      # 马
    CHARIOT = 5    # 车
    CANNON = 6     # 炮
    SOLDIER = 7    # 兵/卒


# 符号记法: 大写为红方, 小写为黑方
PIECE_SYMBOLS = {
    PieceType.GENERAL: 'K',
    PieceType.ADVISOR: 'A',
    PieceType.ELEPHANT: 'E',
    PieceType.HORSE: 'H',
    PieceType.CHARIOT: 'R',
    PieceType.CANNON: 'C',
    PieceType.SOLDIER: 'P',
}

SYMBOL_TO_TYPE = {symbol: kind for kind, symbol in PIECE_SYMBOLS.items()}

# 棋子中文名称
PIECE_NAMES = {
    (PieceType.GENERAL, Side.RED): '帥', (PieceType.GENERAL, Side.BLACK): '將',
    (PieceType.ADVISOR, Side.RED): '仕', (PieceType.ADVISOR, Side.BLACK): '士',
    (PieceType.ELEPHANT, Side.RED): '相', (PieceType.ELEPHANT, Side.BLACK): '象',
    (PieceType.HORSE, Side.RED): '馬', (PieceType.HORSE, Side.BLACK): '馬',
    (PieceType.CHARIOT, Side.RED): '車', (PieceType.CHARIOT, Side.BLACK): '車',
    (PieceType.CANNON, Side.RED): '炮', (PieceType.CANNON, Side.BLACK): '砲',
    (PieceType.SOLDIER, Side.RED): '兵', (PieceType.SOLDIER, Side.BLACK): '卒',
}


@dataclass(frozen=True)
class Piece:
    """
    棋子

    由棋子类型和执棋方组成的不可变值。
    """
    kind: PieceType
    side: Side

    @property
    def code(self) -> int:
        """矩阵编码: 红方为正, 黑方为负"""
        return int(self.kind) * self.side.value

    @classmethod
    def from_code(cls, code: int) -> 'Piece':
        """
        从矩阵编码创建棋子

        Raises:
            ValueError: 编码为0或超出范围
        """
        code = int(code)
        if code == 0 or abs(code) > len(PieceType):
            raise ValueError(f"无效的棋子编码: {code}")
        return cls(PieceType(abs(code)), Side.RED if code > 0 else Side.BLACK)

    @property
    def symbol(self) -> str:
        letter = PIECE_SYMBOLS[self.kind]
        return letter if self.side is Side.RED else letter.lower()

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Piece':
        """
        从符号创建棋子

        Raises:
            ValueError: 无法识别的符号
        """
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"无效的棋子符号: {symbol!r}")
        kind = SYMBOL_TO_TYPE.get(symbol.upper())
        if kind is None:
            raise ValueError(f"无效的棋子符号: {symbol!r}")
        return cls(kind, Side.RED if symbol.isupper() else Side.BLACK)

    @property
    def display_name(self) -> str:
        return PIECE_NAMES[(self.kind, self.side)]

    def __str__(self) -> str:
        return self.symbol
