"""
配置管理模块

包含日志配置、显示配置及其YAML加载。
"""

from .config_manager import ConfigManager
from .engine_config import EngineConfig, LoggingConfig, DisplayConfig, DEFAULT_ENGINE_CONFIG

__all__ = ['ConfigManager', 'EngineConfig', 'LoggingConfig', 'DisplayConfig', 'DEFAULT_ENGINE_CONFIG']
