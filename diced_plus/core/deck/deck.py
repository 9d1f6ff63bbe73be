"""
扑克牌组.

定义Deck类，提供54张（含大小王）或52张标准扑克牌组的构建.
抽牌操作继承自CardPile.
"""

import random
from typing import Optional

from .card import Card
from .pile import CardPile
from .types import COURT_FACES, JOKER_FACES, NUMBER_FACES, STANDARD_SUITS, Suit


class Deck(CardPile[Card]):
    """
    表示一副扑克牌.

    标准牌组按花色分组（红桃、方块、黑桃、梅花），每组先2-10再K、Q、J、A，
    含大小王的牌组在最后追加大王和小王.

    Examples:
        >>> deck = Deck.with_jokers()
        >>> len(deck)
        54
        >>> hand = deck.draw_destructive(5)
        >>> len(deck)
        49
    """

    @classmethod
    def without_jokers(cls, rng: Optional[random.Random] = None) -> 'Deck':
        """构建不含大小王的52张牌组."""
        deck = cls(rng=rng)
        for suit in STANDARD_SUITS:
            for face in NUMBER_FACES + COURT_FACES:
                deck.add(Card(face, suit))
        return deck

    @classmethod
    def with_jokers(cls, rng: Optional[random.Random] = None) -> 'Deck':
        """构建含大小王的54张牌组."""
        deck = cls.without_jokers(rng)
        for face in JOKER_FACES:
            deck.add(Card(face, Suit.NONE))
        return deck


def canonical_deck_with_jokers(rng: Optional[random.Random] = None) -> Deck:
    return Deck.with_jokers(rng)


def canonical_deck_without_jokers(rng: Optional[random.Random] = None) -> Deck:
    return Deck.without_jokers(rng)
