"""
异常定义

定义象棋规则引擎及其外围组件的异常类型。
"""

from typing import Tuple


class XiangqiError(Exception):
    """
    象棋规则引擎基础异常

    所有规则引擎相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class InvalidPositionError(XiangqiError, ValueError):
    """
    非法坐标异常

    坐标超出10x9棋盘范围时抛出，属于调用方的编程错误。
    """

    def __init__(self, position: Tuple[int, int]):
        super().__init__(f"无效的位置坐标: {position}", "INVALID_POSITION")
        self.position = position


class BoardFormatError(XiangqiError, ValueError):
    """
    棋盘格式异常

    当矩阵、符号网格或JSON数据无法构成合法的10x9棋盘时抛出。
    """

    def __init__(self, reason: str):
        super().__init__(f"棋盘格式错误: {reason}", "BOARD_FORMAT_ERROR")
        self.reason = reason


class IllegalMoveError(XiangqiError):
    """
    非法走法异常

    当对局会话收到不在安全走法之列的走法时抛出。
    """

    def __init__(self, from_pos: Tuple[int, int], to_pos: Tuple[int, int], reason: str = ""):
        message = f"非法走法: {from_pos} -> {to_pos}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "ILLEGAL_MOVE")
        self.from_pos = from_pos
        self.to_pos = to_pos
        self.reason = reason


class GameStateError(XiangqiError):
    """
    游戏状态异常

    当操作在当前对局状态下无效时抛出（如终局后继续走子）。
    """

    def __init__(self, state_description: str, reason: str = ""):
        message = f"游戏状态错误: {state_description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "GAME_STATE_ERROR")
        self.state_description = state_description
        self.reason = reason


class ConfigurationError(XiangqiError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: str = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason
