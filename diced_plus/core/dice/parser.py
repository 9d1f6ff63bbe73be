"""
骰子记法解析.

支持 "2d6"、"1/20"、"3d8+2"、"4d4-1" 等写法，数量和面数分隔符可以是 d、/ 或 \\.
"""

import re
from typing import Iterable, List

from ..exceptions import DiceNotationError
from .die import Die

DICE_PATTERN = re.compile(r"(?P<quantity>\d+)[d\\/](?P<size>\d+)(?P<modifier>[+-]\d+)?")

MAX_QUANTITY = 65535
MAX_SIZE = 65535
MIN_MODIFIER = -32768
MAX_MODIFIER = 32767


def parse_die(text: str, max_quantity: int = MAX_QUANTITY, max_size: int = MAX_SIZE,
              min_modifier: int = MIN_MODIFIER, max_modifier: int = MAX_MODIFIER) -> Die:
    """
    解析单个骰子记法.

    Args:
        text: 骰子记法文本
        max_quantity: 允许的最大掷骰个数
        max_size: 允许的最大骰子面数
        min_modifier: 允许的最小修正值
        max_modifier: 允许的最大修正值

    Returns:
        Die: 解析得到的骰子

    Raises:
        DiceNotationError: 记法格式错误或数值超出范围时
        InvalidDieError: 骰子面数为0时
    """
    match = DICE_PATTERN.search(text)
    if match is None:
        raise DiceNotationError(f"Die entered improperly: {text}", text)

    size = int(match.group("size"))
    if size > max_size:
        raise DiceNotationError(f"Die size too large: {text} [Limit is {max_size}]", text)
    quantity = int(match.group("quantity"))
    if quantity > max_quantity:
        raise DiceNotationError(
            f"Die quantity too large: {text} [Limit is {max_quantity}]", text
        )

    modifier = 0
    if match.group("modifier"):
        modifier = int(match.group("modifier"))
        if not min_modifier <= modifier <= max_modifier:
            raise DiceNotationError(
                f"Die modifier out of range: {text} [{min_modifier}..{max_modifier}]", text
            )

    return Die(quantity, size, modifier)


def parse_dice(texts: Iterable[str], **limits: int) -> List[Die]:
    """
    解析多个骰子记法.

    Args:
        texts: 骰子记法文本
        **limits: 传给parse_die的数值限制

    Raises:
        DiceNotationError: 任一记法错误或没有传入骰子时
    """
    dice = [parse_die(text, **limits) for text in texts]
    if not dice:
        raise DiceNotationError("No die passed in.")
    return dice
