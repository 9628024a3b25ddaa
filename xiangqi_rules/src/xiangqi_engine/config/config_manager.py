"""
配置管理器

负责从YAML文件加载、保存和校验引擎配置。
"""

import copy
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import yaml

from .engine_config import (
    DEFAULT_ENGINE_CONFIG, VALID_LOG_LEVELS, VALID_PIECE_STYLES,
    DisplayConfig, EngineConfig, LoggingConfig
)
from ..utils.exceptions import ConfigurationError
from ..utils.logger import get_logger

T = TypeVar('T')

logger = get_logger('xiangqi.config')

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / 'configs' / 'default.yaml'


class ConfigManager:
    """
    配置管理器

    配置文件为YAML格式，包含 logging 和 display 两个部分；
    文件中未知的配置项会被忽略，缺失的配置项取默认值。
    """

    SECTIONS = {
        'logging': LoggingConfig,
        'display': DisplayConfig,
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Args:
            config_path: 配置文件路径，None表示使用包内默认配置
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Optional[EngineConfig] = None

    @property
    def config(self) -> EngineConfig:
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> EngineConfig:
        """
        加载配置

        Returns:
            EngineConfig: 配置对象，文件不存在时返回默认配置

        Raises:
            ConfigurationError: 文件内容无法解析或配置值无效
        """
        if not self.config_path.exists():
            logger.warning(f"配置文件不存在: {self.config_path}，使用默认配置")
            self._config = copy.deepcopy(DEFAULT_ENGINE_CONFIG)
            return self._config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(str(self.config_path), f"YAML解析失败: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(str(self.config_path), "顶层应为映射")

        sections = {}
        for name, section_class in self.SECTIONS.items():
            section_data = data.get(name) or {}
            if not isinstance(section_data, dict):
                raise ConfigurationError(name, "配置段应为映射")
            sections[name] = self._dict_to_dataclass(section_data, section_class)

        config = EngineConfig(**sections)
        self.validate(config)
        self._config = config
        logger.info(f"成功加载配置: {self.config_path}")
        return config

    def save(self, config: Optional[EngineConfig] = None) -> None:
        """保存配置到YAML文件"""
        config = config or self.config
        self.validate(config)
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(asdict(config), f, default_flow_style=False,
                      allow_unicode=True, indent=2)
        self._config = config
        logger.info(f"成功保存配置: {self.config_path}")

    def update(self, section: str, **kwargs: Any) -> EngineConfig:
        """
        更新某个配置段

        Args:
            section: 配置段名称 ('logging' / 'display')
            **kwargs: 要更新的配置项

        Raises:
            ConfigurationError: 配置段或配置项不存在，或更新后的值无效
        """
        if section not in self.SECTIONS:
            raise ConfigurationError(section, "未知的配置段")

        config = copy.deepcopy(self.config)
        section_obj = getattr(config, section)
        for key, value in kwargs.items():
            if not hasattr(section_obj, key):
                raise ConfigurationError(f"{section}.{key}", "配置项不存在")
            setattr(section_obj, key, value)

        self.validate(config)
        self._config = config
        return config

    @staticmethod
    def validate(config: EngineConfig) -> None:
        """
        校验配置

        Raises:
            ConfigurationError: 配置值无效
        """
        if str(config.logging.level).upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError('logging.level', f"无效的日志级别: {config.logging.level}")
        if config.logging.max_size <= 0:
            raise ConfigurationError('logging.max_size', "必须大于0")
        if config.logging.backup_count < 0:
            raise ConfigurationError('logging.backup_count', "不能为负数")
        if config.display.piece_style not in VALID_PIECE_STYLES:
            raise ConfigurationError('display.piece_style',
                                     f"应为{'/'.join(VALID_PIECE_STYLES)}之一")

    @staticmethod
    def _dict_to_dataclass(data: Dict[str, Any], dataclass_type: Type[T]) -> T:
        """将字典转换为数据类对象，忽略未知字段"""
        field_names = {f.name for f in fields(dataclass_type)}
        filtered_data = {k: v for k, v in data.items() if k in field_names}
        return dataclass_type(**filtered_data)
