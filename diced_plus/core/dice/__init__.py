"""
骰子模块.

提供骰子记法解析和掷骰逻辑，与牌组模块互不依赖.
"""

from .die import Die
from .parser import DICE_PATTERN, parse_dice, parse_die
from .roller import RollResult, is_crit_failure, is_crit_success, roll_die

__all__ = [
    'DICE_PATTERN',
    'Die',
    'RollResult',
    'is_crit_failure',
    'is_crit_success',
    'parse_dice',
    'parse_die',
    'roll_die',
]
