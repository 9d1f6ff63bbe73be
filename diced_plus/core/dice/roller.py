"""
掷骰逻辑.

掷骰结果同时记录原始点数和加上修正值后的显示值. 大成功和大失败按原始点数统计，
总和为原始点数之和.
"""

import random
from dataclasses import dataclass
from typing import Tuple

from .die import Die


@dataclass(frozen=True)
class RollResult:
    """
    一次掷骰的结果.

    Attributes:
        die: 掷的骰子
        rolls: 每个骰子的原始点数
        values: 原始点数加修正值后的显示值
        total: 原始点数之和
        successes: 掷出最大点数的次数
        failures: 掷出1点的次数
    """

    die: Die
    rolls: Tuple[int, ...]

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(roll + self.die.modifier for roll in self.rolls)

    @property
    def total(self) -> int:
        return sum(self.rolls)

    @property
    def successes(self) -> int:
        return sum(1 for roll in self.rolls if roll >= self.die.size)

    @property
    def failures(self) -> int:
        return sum(1 for roll in self.rolls if roll == 1)


def roll_die(die: Die, rng: random.Random) -> RollResult:
    """
    掷一组骰子.

    Args:
        die: 要掷的骰子
        rng: 随机数生成器

    Returns:
        RollResult: 掷骰结果
    """
    rolls = tuple(rng.randint(1, die.size) for _ in range(die.quantity))
    return RollResult(die, rolls)


def is_crit_failure(value: int) -> bool:
    return value <= 1


def is_crit_success(value: int, size: int) -> bool:
    return value >= size
