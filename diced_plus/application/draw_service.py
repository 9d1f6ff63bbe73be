#!/usr/bin/env python3
"""
DrawService - 抽牌服务

根据牌组形状构建新的牌组，执行一次抽牌并返回渲染好的牌名列表。
牌组只在一次调用内存在，调用结束即丢弃。
核心层抛出的InsufficientCardsError在这里转换为失败的QueryResult，
提示文案和退出码由最外层调用者决定。
"""

import logging
import random
from typing import List, Optional, Union

from ..core.deck import Deck
from ..core.exceptions import InsufficientCardsError
from ..core.tarot import TarotDeck
from .types import DeckKind, DeckShape, DrawRequest, QueryResult

AnyDeck = Union[Deck, TarotDeck]


class DrawService:
    """抽牌服务"""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        初始化抽牌服务

        Args:
            rng: 随机数生成器，传给每次构建的牌组。如果为None，使用新的未设种子的生成器
        """
        self.logger = logging.getLogger(__name__)
        self._rng = rng or random.Random()

    def build_deck(self, shape: DeckShape) -> AnyDeck:
        """
        按形状构建牌组

        Args:
            shape: 牌组形状

        Returns:
            新构建的牌组
        """
        if shape.kind == DeckKind.TRADITIONAL:
            if shape.with_jokers:
                return Deck.with_jokers(self._rng)
            return Deck.without_jokers(self._rng)
        if shape.include_minor:
            return TarotDeck.full(self._rng)
        return TarotDeck.major_only(self._rng)

    def draw(self, shape: DeckShape, request: DrawRequest) -> QueryResult[List[str]]:
        """
        从新牌组中抽牌

        Args:
            shape: 牌组形状
            request: 抽牌请求

        Returns:
            查询结果，成功时包含按抽出顺序排列的牌名
        """
        deck = self.build_deck(shape)
        self.logger.debug(
            f"抽牌: 牌组={shape.kind.value} 剩余={deck.size()} "
            f"数量={request.amount} 破坏性={request.destructive}"
        )

        try:
            if request.destructive:
                hand = deck.draw_destructive(request.amount)
            else:
                hand = deck.draw(request.amount)
        except InsufficientCardsError as e:
            self.logger.info(f"抽牌失败: {e}")
            return QueryResult.business_rule_violation(str(e), error_code="INSUFFICIENT_CARDS")

        drawn = [card.display() for card in hand]
        self.logger.debug(f"抽牌完成: 抽出{len(drawn)}张, 牌组剩余{deck.size()}张")
        return QueryResult.success_result(drawn)
