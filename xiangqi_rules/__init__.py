"""
中国象棋规则引擎 (Xiangqi Rules)

为界面、联网对局或机器人提供走法生成、将军检测和将死判定。
"""

__version__ = "0.1.0"
__author__ = "Xiangqi Rules Team"
__description__ = "中国象棋规则引擎 - 走法生成、将军检测与将死判定"

from xiangqi_rules.src import xiangqi_engine

__all__ = [
    "xiangqi_engine",
    "__version__",
    "__author__",
    "__description__",
]
