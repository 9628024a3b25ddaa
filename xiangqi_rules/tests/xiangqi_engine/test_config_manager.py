"""
测试配置管理器
"""

import pytest
import yaml

from xiangqi_rules.src.xiangqi_engine.config import ConfigManager, EngineConfig, DEFAULT_ENGINE_CONFIG
from xiangqi_rules.src.xiangqi_engine.utils import ConfigurationError


class TestConfigManager:
    """ConfigManager类的测试"""

    def test_default_config_file(self):
        """包内默认配置可以加载"""
        config = ConfigManager().load()
        assert isinstance(config, EngineConfig)
        assert config.display.piece_style == 'chinese'
        assert config.logging.level == 'INFO'

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(tmp_path / 'missing.yaml').load()
        assert config == DEFAULT_ENGINE_CONFIG
        assert config is not DEFAULT_ENGINE_CONFIG

    def test_partial_file_and_unknown_keys(self, tmp_path):
        path = tmp_path / 'engine.yaml'
        path.write_text(yaml.dump({
            'display': {'piece_style': 'symbol', 'unknown': 1},
            'extra_section': {'x': 1},
        }), encoding='utf-8')

        config = ConfigManager(path).load()
        assert config.display.piece_style == 'symbol'
        assert config.display.show_coordinates is True
        assert config.logging.level == 'INFO'

    def test_invalid_values(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text(yaml.dump({'logging': {'level': 'LOUD'}}), encoding='utf-8')
        with pytest.raises(ConfigurationError):
            ConfigManager(path).load()

        path.write_text("logging: [1, 2", encoding='utf-8')
        with pytest.raises(ConfigurationError):
            ConfigManager(path).load()

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / 'configs' / 'engine.yaml'
        manager = ConfigManager(path)
        manager.update('display', piece_style='symbol', show_coordinates=False)
        manager.update('logging', level='DEBUG')
        manager.save()

        config = ConfigManager(path).load()
        assert config.display.piece_style == 'symbol'
        assert config.display.show_coordinates is False
        assert config.logging.level == 'DEBUG'

    def test_update_rejects_bad_input(self, tmp_path):
        manager = ConfigManager(tmp_path / 'engine.yaml')
        with pytest.raises(ConfigurationError):
            manager.update('search', depth=3)
        with pytest.raises(ConfigurationError):
            manager.update('display', colour='red')
        with pytest.raises(ConfigurationError):
            manager.update('display', piece_style='emoji')
        assert manager.config.display.piece_style == 'chinese'
