"""
塔罗牌组.

完整牌组为22张大阿卡纳加56张小阿卡纳共78张，也可以只使用22张大阿卡纳.
抽牌、筛选和消耗式迭代都继承自CardPile.
"""

import random
from typing import Optional

from ..deck.pile import CardPile
from .card import GreaterSecret, LesserSecret, TarotCard
from .types import (
    MAJOR_ARCANA_NUMBERS,
    MINOR_COURT_RANKS,
    MINOR_NUMBER_RANKS,
    MINOR_SUITS,
)


class TarotDeck(CardPile[TarotCard]):
    """
    表示一副塔罗牌.

    大阿卡纳按编号顺序排列，小阿卡纳按花色（宝剑、权杖、钱币、圣杯）分组.
    """

    @classmethod
    def major_only(cls, rng: Optional[random.Random] = None) -> 'TarotDeck':
        """构建只含22张大阿卡纳的牌组."""
        deck = cls(rng=rng)
        for arcana in sorted(MAJOR_ARCANA_NUMBERS, key=MAJOR_ARCANA_NUMBERS.__getitem__):
            deck.add(GreaterSecret(arcana))
        return deck

    @classmethod
    def full(cls, rng: Optional[random.Random] = None) -> 'TarotDeck':
        """构建78张完整塔罗牌组."""
        deck = cls.major_only(rng)
        for suit in MINOR_SUITS:
            for rank in MINOR_NUMBER_RANKS + MINOR_COURT_RANKS:
                deck.add(LesserSecret(suit, rank))
        return deck


def tarot_full_deck(rng: Optional[random.Random] = None) -> TarotDeck:
    return TarotDeck.full(rng)


def tarot_major_only_deck(rng: Optional[random.Random] = None) -> TarotDeck:
    return TarotDeck.major_only(rng)
