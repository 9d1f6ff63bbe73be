"""
骰子数据结构.
"""

from dataclasses import dataclass

from ..exceptions import InvalidDieError


@dataclass(frozen=True)
class Die:
    """
    一组同类骰子.

    Attributes:
        quantity: 掷骰个数
        size: 骰子面数
        modifier: 每次掷骰结果的加减值
    """

    quantity: int
    size: int
    modifier: int = 0

    def __post_init__(self) -> None:
        """
        Raises:
            InvalidDieError: 当骰子面数小于1时
        """
        if self.size < 1:
            raise InvalidDieError(self.size)

    @property
    def notation(self) -> str:
        """骰子记法，如 "2d6"、"2d6 +3"、"1d20 -1"."""
        base = f"{self.quantity}d{self.size}"
        if self.modifier == 0:
            return base
        sign = "-" if self.modifier < 0 else "+"
        return f"{base} {sign}{abs(self.modifier)}"

    def __str__(self) -> str:
        return f"d{self.size}"
