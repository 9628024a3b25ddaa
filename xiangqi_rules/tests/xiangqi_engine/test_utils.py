"""
测试日志与异常工具
"""

import logging

from xiangqi_rules.src.xiangqi_engine.config import LoggingConfig
from xiangqi_rules.src.xiangqi_engine.utils import (
    XiangqiError, InvalidPositionError, IllegalMoveError, setup_logger, get_logger
)


class TestExceptions:
    """异常类的测试"""

    def test_error_code_in_message(self):
        error = InvalidPositionError((10, 0))
        assert error.error_code == 'INVALID_POSITION'
        assert str(error).startswith('[INVALID_POSITION]')
        assert isinstance(error, ValueError)
        assert isinstance(error, XiangqiError)

    def test_illegal_move_error(self):
        error = IllegalMoveError((6, 4), (4, 4), "兵不能走两步")
        assert error.from_pos == (6, 4)
        assert "兵不能走两步" in str(error)

    def test_default_error_code(self):
        assert XiangqiError("x").error_code == 'XiangqiError'


class TestLogger:
    """日志系统的测试"""

    def test_file_logging(self, tmp_path):
        log_config = LoggingConfig(level='DEBUG', log_file='engine.log',
                                   log_dir=str(tmp_path / 'logs'), console_output=False)
        logger = setup_logger(log_config, name='xiangqi.test_file_logger')
        try:
            assert logger.level == logging.DEBUG
            file_handler = logger.handlers[0]
            assert file_handler.maxBytes == log_config.max_size * 1024 * 1024
            assert file_handler.backupCount == log_config.backup_count
            logger.debug("将死检测")
            file_handler.flush()
            content = (tmp_path / 'logs' / 'engine.log').read_text(encoding='utf-8')
            assert "将死检测" in content

            # 重复调用不会重复添加处理器
            assert setup_logger(name='xiangqi.test_file_logger') is logger
            assert len(logger.handlers) == 1
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_level_override(self):
        logger = setup_logger(LoggingConfig(level='WARNING'), name='xiangqi.test_level_override',
                              level='debug')
        try:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)

    def test_get_logger(self):
        assert get_logger('xiangqi.rule_engine').name == 'xiangqi.rule_engine'
