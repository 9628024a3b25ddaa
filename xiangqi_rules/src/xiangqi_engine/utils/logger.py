"""
日志系统

按 LoggingConfig 配置 ``xiangqi`` 日志层级，规则引擎和对局会话都挂在其下。
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..config.engine_config import LoggingConfig

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


def setup_logger(config: Optional['LoggingConfig'] = None, name: str = 'xiangqi',
                 level: Optional[str] = None) -> logging.Logger:
    """
    根据日志配置初始化日志记录器

    Args:
        config: 日志配置，None时使用默认配置
        name: 日志记录器名称
        level: 覆盖配置中的日志级别，命令行 --debug 使用

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    if config is None:
        from ..config.engine_config import LoggingConfig
        config = LoggingConfig()

    logger = logging.getLogger(name)

    # 已经配置过则直接返回
    if logger.handlers:
        return logger

    log_level = getattr(logging, (level or config.level).upper(), logging.INFO)
    logger.setLevel(log_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    handlers = []
    if config.console_output:
        handlers.append(logging.StreamHandler(sys.stdout))
    if config.log_file:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            filename=log_dir / config.log_file,
            maxBytes=config.max_size * 1024 * 1024,
            backupCount=config.backup_count,
            encoding='utf-8'
        ))

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_logger(name: str = 'xiangqi') -> logging.Logger:
    """获取日志记录器"""
    return logging.getLogger(name)


class LoggerMixin:
    """
    日志记录器混入类

    为类提供以 ``xiangqi.<类名>`` 命名的日志记录器。
    """

    @property
    def logger(self) -> logging.Logger:
        return get_logger(f'xiangqi.{self.__class__.__name__}')

    def log_info(self, message: str, *args, **kwargs):
        self.logger.info(message, *args, **kwargs)

    def log_warning(self, message: str, *args, **kwargs):
        self.logger.warning(message, *args, **kwargs)

    def log_debug(self, message: str, *args, **kwargs):
        self.logger.debug(message, *args, **kwargs)
