"""
扑克牌组管理模块.

提供Card、CardPile和Deck类，实现扑克牌的基本操作和随机抽牌.
"""

from .card import Card, derive_color
from .deck import Deck, canonical_deck_with_jokers, canonical_deck_without_jokers
from .pile import CardPile
from .types import CardFace, Color, Suit

__all__ = [
    'Card',
    'CardFace',
    'CardPile',
    'Color',
    'Deck',
    'Suit',
    'canonical_deck_with_jokers',
    'canonical_deck_without_jokers',
    'derive_color',
]
