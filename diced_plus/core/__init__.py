"""
Core Module - 纯领域逻辑层

该模块包含抽牌和掷骰的核心逻辑，不做任何输入输出.
核心模块只能依赖其他核心模块，不能依赖应用层或UI层.

Modules:
    deck: 扑克牌、通用牌堆和抽牌算法
    tarot: 塔罗牌和塔罗牌组
    dice: 骰子记法解析和掷骰
    exceptions: 核心异常
"""

from .exceptions import DiceNotationError, DicedError, InsufficientCardsError, InvalidDieError

__all__ = [
    'DiceNotationError',
    'DicedError',
    'InsufficientCardsError',
    'InvalidDieError',
]
