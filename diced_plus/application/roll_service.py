#!/usr/bin/env python3
"""
RollService - 掷骰服务

解析骰子记法并掷骰，记法错误转换为验证失败的QueryResult。
"""

import logging
import random
from typing import Iterable, List, Optional

from ..core.dice import RollResult, parse_dice, roll_die
from ..core.exceptions import DiceNotationError, InvalidDieError
from .config_service import DiceConfig
from .types import QueryResult


class RollService:
    """掷骰服务"""

    def __init__(self, rng: Optional[random.Random] = None,
                 config: Optional[DiceConfig] = None):
        self.logger = logging.getLogger(__name__)
        self._rng = rng or random.Random()
        self._config = config or DiceConfig()

    def roll(self, notations: Iterable[str]) -> QueryResult[List[RollResult]]:
        """
        解析并掷出所有骰子

        Args:
            notations: 骰子记法列表，如 ["2d6", "1d20+3"]

        Returns:
            查询结果，成功时按输入顺序包含每组骰子的掷骰结果
        """
        try:
            dice = parse_dice(
                notations,
                max_quantity=self._config.max_quantity,
                max_size=self._config.max_size,
                min_modifier=self._config.min_modifier,
                max_modifier=self._config.max_modifier,
            )
        except (DiceNotationError, InvalidDieError) as e:
            self.logger.info(f"骰子记法无效: {e}")
            return QueryResult.validation_error(str(e), error_code="INVALID_DICE")

        results = [roll_die(die, self._rng) for die in dice]
        self.logger.debug(f"掷骰完成: {[result.die.notation for result in results]}")
        return QueryResult.success_result(results)
