"""
引擎配置数据结构

定义日志、显示等配置类和默认参数。
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LoggingConfig:
    """日志配置"""
    level: str = 'INFO'                      # 日志级别
    log_file: Optional[str] = None           # 日志文件名，None表示不写文件
    log_dir: str = 'logs/xiangqi_engine'     # 日志目录
    max_size: int = 10                       # 单个日志文件最大大小(MB)
    backup_count: int = 5                    # 备份文件数量
    console_output: bool = True              # 是否输出到控制台


@dataclass
class DisplayConfig:
    """棋盘显示配置"""
    piece_style: str = 'chinese'             # 'chinese' 中文棋子 / 'symbol' 字母符号
    show_coordinates: bool = True            # 是否显示行列坐标


@dataclass
class EngineConfig:
    """引擎总配置"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
VALID_PIECE_STYLES = ('chinese', 'symbol')

DEFAULT_ENGINE_CONFIG = EngineConfig()
