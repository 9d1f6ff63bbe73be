"""
Application Layer - 应用服务层

应用层可以访问核心层，但不能被核心层访问。
服务把核心异常转换为QueryResult，由UI层决定如何呈现。

Services:
    DrawService: 抽牌服务
    RollService: 掷骰服务
    ConfigService: 配置管理服务
"""

from .config_service import (
    CliConfig,
    ConfigService,
    ConfigType,
    DiceConfig,
    DrawConfig,
    LoggingConfig,
)
from .draw_service import DrawService
from .roll_service import RollService
from .types import DeckKind, DeckShape, DrawRequest, QueryResult, ResultStatus, RollOptions

__all__ = [
    # 类型
    "DeckKind",
    "DeckShape",
    "DrawRequest",
    "QueryResult",
    "ResultStatus",
    "RollOptions",

    # 配置
    "CliConfig",
    "ConfigService",
    "ConfigType",
    "DiceConfig",
    "DrawConfig",
    "LoggingConfig",

    # 服务
    "DrawService",
    "RollService",
]
