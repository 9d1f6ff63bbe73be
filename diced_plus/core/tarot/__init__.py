"""
塔罗牌组管理模块.

提供塔罗牌数据结构和TarotDeck，抽牌逻辑与扑克牌组共用CardPile.
"""

from .card import GreaterSecret, LesserSecret, TarotCard
from .deck import TarotDeck, tarot_full_deck, tarot_major_only_deck
from .types import (
    MAJOR_ARCANA_NUMBERS,
    MajorArcana,
    MinorArcanaRank,
    MinorArcanaSuit,
    camel_case_split,
    to_roman,
)

__all__ = [
    'GreaterSecret',
    'LesserSecret',
    'MAJOR_ARCANA_NUMBERS',
    'MajorArcana',
    'MinorArcanaRank',
    'MinorArcanaSuit',
    'TarotCard',
    'TarotDeck',
    'camel_case_split',
    'tarot_full_deck',
    'tarot_major_only_deck',
    'to_roman',
]
