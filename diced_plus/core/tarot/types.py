"""
塔罗牌相关类型定义.

定义大阿卡纳、小阿卡纳花色与等级枚举，以及大阿卡纳的编号表.
大阿卡纳的编号由显式的编号表给出，不依赖枚举的声明顺序.
"""

from enum import Enum
from typing import Dict, Tuple


class MajorArcana(Enum):
    """大阿卡纳枚举，值为牌名的驼峰标识符."""

    THE_FOOL = "TheFool"
    THE_MAGICIAN = "TheMagician"
    THE_HIGH_PRIESTESS = "TheHighPriestess"
    THE_EMPRESS = "TheEmpress"
    THE_EMPEROR = "TheEmperor"
    THE_HIEROPHANT = "TheHierophant"
    THE_LOVERS = "TheLovers"
    THE_CHARIOT = "TheChariot"
    STRENGTH = "Strength"
    THE_HERMIT = "TheHermit"
    WHEEL_OF_FORTUNE = "WheelOfFortune"
    JUSTICE = "Justice"
    THE_HANGED_MAN = "TheHangedMan"
    DEATH = "Death"
    TEMPERANCE = "Temperance"
    THE_DEVIL = "TheDevil"
    THE_TOWER = "TheTower"
    THE_STAR = "TheStar"
    THE_MOON = "TheMoon"
    THE_SUN = "TheSun"
    JUDGEMENT = "Judgement"
    THE_WORLD = "TheWorld"

    @property
    def number(self) -> int:
        return MAJOR_ARCANA_NUMBERS[self]

    @property
    def readable_name(self) -> str:
        return camel_case_split(self.value)


MAJOR_ARCANA_NUMBERS: Dict[MajorArcana, int] = {
    MajorArcana.THE_FOOL: 0,
    MajorArcana.THE_MAGICIAN: 1,
    MajorArcana.THE_HIGH_PRIESTESS: 2,
    MajorArcana.THE_EMPRESS: 3,
    MajorArcana.THE_EMPEROR: 4,
    MajorArcana.THE_HIEROPHANT: 5,
    MajorArcana.THE_LOVERS: 6,
    MajorArcana.THE_CHARIOT: 7,
    MajorArcana.STRENGTH: 8,
    MajorArcana.THE_HERMIT: 9,
    MajorArcana.WHEEL_OF_FORTUNE: 10,
    MajorArcana.JUSTICE: 11,
    MajorArcana.THE_HANGED_MAN: 12,
    MajorArcana.DEATH: 13,
    MajorArcana.TEMPERANCE: 14,
    MajorArcana.THE_DEVIL: 15,
    MajorArcana.THE_TOWER: 16,
    MajorArcana.THE_STAR: 17,
    MajorArcana.THE_MOON: 18,
    MajorArcana.THE_SUN: 19,
    MajorArcana.JUDGEMENT: 20,
    MajorArcana.THE_WORLD: 21,
}


class MinorArcanaSuit(Enum):
    """小阿卡纳花色枚举."""

    SWORDS = "Swords"
    WANDS = "Wands"
    COINS = "Coins"
    CUPS = "Cups"


class MinorArcanaRank(Enum):
    """小阿卡纳等级枚举，1-10为数字牌."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    PAGE = "Page"
    KNIGHT = "Knight"
    QUEEN = "Queen"
    KING = "King"

    @property
    def is_number(self) -> bool:
        return isinstance(self.value, int)

    @property
    def label(self) -> str:
        return str(self.value)


# 完整塔罗牌组中每个花色的构建顺序：先1-10，再国王、王后、骑士、侍从
MINOR_SUITS: Tuple[MinorArcanaSuit, ...] = tuple(MinorArcanaSuit)
MINOR_NUMBER_RANKS: Tuple[MinorArcanaRank, ...] = tuple(
    rank for rank in MinorArcanaRank if rank.is_number
)
MINOR_COURT_RANKS: Tuple[MinorArcanaRank, ...] = (
    MinorArcanaRank.KING,
    MinorArcanaRank.QUEEN,
    MinorArcanaRank.KNIGHT,
    MinorArcanaRank.PAGE,
)

_ROMAN_NUMERALS: Tuple[Tuple[int, str], ...] = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def to_roman(number: int) -> str:
    """
    把正整数转换为罗马数字.

    Args:
        number: 1到3999之间的整数

    Returns:
        str: 罗马数字

    Raises:
        ValueError: 当数字超出范围时
    """
    if not 0 < number < 4000:
        raise ValueError(f"无法转换为罗马数字: {number}")
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(numeral * count)
    return "".join(parts)


def camel_case_split(identifier: str) -> str:
    """在每个大写字母前插入空格并去掉首尾空白，如 "TheHangedMan" -> "The Hanged Man"."""
    return "".join(f" {ch}" if ch.isupper() else ch for ch in identifier).strip()
