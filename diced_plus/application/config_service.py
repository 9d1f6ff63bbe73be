#!/usr/bin/env python3
"""
ConfigService - 配置管理服务

负责集中化管理所有配置，包括：
- 抽牌默认参数
- 骰子记法限制
- 命令行错误提示和退出码
- 日志配置

所有配置都是代码内的具名配置档，为应用层和UI层提供统一的配置接口。
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from ..core.dice.parser import MAX_MODIFIER, MAX_QUANTITY, MAX_SIZE, MIN_MODIFIER
from .types import QueryResult


class ConfigType(Enum):
    """配置类型枚举"""
    DRAW = "draw"
    DICE = "dice"
    CLI = "cli"
    LOGGING = "logging"


@dataclass
class DrawConfig:
    """抽牌配置"""
    default_amount: int = 1
    default_destructive: bool = True

    def __post_init__(self):
        if self.default_amount < 0:
            raise ValueError(f"默认抽牌数量不能为负数: {self.default_amount}")


@dataclass
class DiceConfig:
    """骰子配置"""
    max_quantity: int = MAX_QUANTITY
    max_size: int = MAX_SIZE
    min_modifier: int = MIN_MODIFIER
    max_modifier: int = MAX_MODIFIER


@dataclass
class CliConfig:
    """命令行配置"""
    card_error_prefix: str = "[ERR] ->"
    dice_error_prefix: str = "[ERR] ~>"
    insufficient_cards_exit_code: int = 0
    dice_error_exit_code: int = 1


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


_DEFAULT_PROFILE = "default"

_CONFIG_CLASSES = {
    ConfigType.DRAW: DrawConfig,
    ConfigType.DICE: DiceConfig,
    ConfigType.CLI: CliConfig,
    ConfigType.LOGGING: LoggingConfig,
}


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DRAW] = {
            'default': DrawConfig(),
            'nondestructive': DrawConfig(default_destructive=False),
        }

        self._configs[ConfigType.DICE] = {
            'default': DiceConfig(),
        }

        self._configs[ConfigType.CLI] = {
            'default': CliConfig(),
            # 牌数不足也按失败退出
            'strict': CliConfig(insufficient_cards_exit_code=1),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='ERROR'),
        }

        self.logger.debug("默认配置加载完成")

    def _get(self, config_type: ConfigType, profile: str) -> QueryResult[Any]:
        config_profiles = self._configs.get(config_type, {})
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = _DEFAULT_PROFILE

        config = config_profiles.get(profile, _CONFIG_CLASSES[config_type]())
        return QueryResult.success_result(config)

    def get_draw_config(self, profile: str = "default") -> QueryResult[DrawConfig]:
        """
        获取抽牌配置

        Args:
            profile: 配置档名 (default, nondestructive)

        Returns:
            查询结果，包含抽牌配置
        """
        return self._get(ConfigType.DRAW, profile)

    def get_dice_config(self, profile: str = "default") -> QueryResult[DiceConfig]:
        """获取骰子配置"""
        return self._get(ConfigType.DICE, profile)

    def get_cli_config(self, profile: str = "default") -> QueryResult[CliConfig]:
        """
        获取命令行配置

        Args:
            profile: 配置档名 (default, strict)
        """
        return self._get(ConfigType.CLI, profile)

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置档名 (default, debug, quiet)
        """
        return self._get(ConfigType.LOGGING, profile)

    def list_profiles(self, config_type: ConfigType) -> QueryResult[List[str]]:
        """列出某类配置的全部配置档名"""
        return QueryResult.success_result(sorted(self._configs.get(config_type, {})))

    def set_config(self, config_type: ConfigType, profile: str, config: Any) -> QueryResult[Any]:
        """
        注册或覆盖一个配置档

        Args:
            config_type: 配置类型
            profile: 配置档名
            config: 配置对象，类型必须与配置类型匹配

        Returns:
            查询结果，包含写入的配置
        """
        expected = _CONFIG_CLASSES[config_type]
        if not isinstance(config, expected):
            return QueryResult.validation_error(
                f"配置类型不匹配: 需要{expected.__name__}，实际{type(config).__name__}",
                error_code="CONFIG_TYPE_MISMATCH"
            )
        self._configs.setdefault(config_type, {})[profile] = config
        self.logger.debug(f"已设置{config_type.value}配置 '{profile}'")
        return QueryResult.success_result(config)
