"""
塔罗牌数据结构.

塔罗牌分为大阿卡纳（GreaterSecret）和小阿卡纳（LesserSecret）两类，
均为不可变数据类.
"""

from dataclasses import dataclass
from typing import Union

from .types import MajorArcana, MinorArcanaRank, MinorArcanaSuit, to_roman


@dataclass(frozen=True)
class GreaterSecret:
    """
    大阿卡纳牌.

    Examples:
        >>> str(GreaterSecret(MajorArcana.THE_MAGICIAN))
        'The Magician [I]'
    """

    arcana: MajorArcana

    def __post_init__(self) -> None:
        if not isinstance(self.arcana, MajorArcana):
            raise TypeError(f"大阿卡纳必须是MajorArcana类型，实际: {type(self.arcana)}")

    @property
    def number(self) -> int:
        return self.arcana.number

    @property
    def numeral(self) -> str:
        """编号的罗马数字，愚者（0号）显示为 "0"."""
        if self.number == 0:
            return "0"
        return to_roman(self.number)

    def display(self) -> str:
        return f"{self.arcana.readable_name} [{self.numeral}]"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True)
class LesserSecret:
    """
    小阿卡纳牌.

    Examples:
        >>> str(LesserSecret(MinorArcanaSuit.CUPS, MinorArcanaRank.KNIGHT))
        'Knight of Cups'
    """

    suit: MinorArcanaSuit
    rank: MinorArcanaRank

    def __post_init__(self) -> None:
        if not isinstance(self.suit, MinorArcanaSuit):
            raise TypeError(f"花色必须是MinorArcanaSuit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, MinorArcanaRank):
            raise TypeError(f"等级必须是MinorArcanaRank类型，实际: {type(self.rank)}")

    def display(self) -> str:
        return f"{self.rank.label} of {self.suit.value}"

    def __str__(self) -> str:
        return self.display()


TarotCard = Union[GreaterSecret, LesserSecret]
