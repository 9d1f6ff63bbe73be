"""
通用牌堆及随机抽牌算法.

CardPile是扑克牌组和塔罗牌组共用的容器，提供唯一一份抽牌实现：
- draw: 非破坏性抽牌，原牌堆保持不变
- draw_destructive: 破坏性抽牌，从原牌堆中移除抽出的牌

两种抽牌共用同一个前置检查，检查失败时不会修改任何状态.
"""

import random
from collections import deque
from typing import Callable, Deque, Generic, Iterable, Iterator, List, Optional, TypeVar

from ..exceptions import InsufficientCardsError

T = TypeVar('T')
P = TypeVar('P', bound='CardPile')


class CardPile(Generic[T]):
    """
    有序牌堆.

    使用可选的随机数生成器以支持确定性测试. 牌堆同时也是一次性的
    消耗型迭代器：迭代时按原有顺序从顶部依次取出每张牌，迭代结束后牌堆为空.

    Attributes:
        _cards: 当前牌堆中的牌
        _rng: 随机数生成器

    Examples:
        >>> pile = CardPile([1, 2, 3], rng=random.Random(7))
        >>> hand = pile.draw_destructive(2)
        >>> len(hand), len(pile)
        (2, 1)
    """

    def __init__(self, cards: Optional[Iterable[T]] = None,
                 rng: Optional[random.Random] = None) -> None:
        """
        初始化牌堆.

        Args:
            cards: 初始的牌，按顺序放入牌堆
            rng: 随机数生成器。如果为None，使用新的未设种子的生成器
        """
        self._rng = rng or random.Random()
        self._cards: Deque[T] = deque(cards or ())

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def cards(self) -> List[T]:
        """按顺序返回剩余牌的副本."""
        return list(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def add(self, card: T) -> None:
        """把一张牌放到牌堆底部."""
        self._cards.append(card)

    def size(self) -> int:
        """剩余牌数."""
        return len(self._cards)

    def check_draw(self, amount: int) -> None:
        """
        抽牌前置检查，draw和draw_destructive共用.

        Args:
            amount: 要抽的牌数

        Raises:
            ValueError: 当amount不是整数（包括bool）或为负数时
            InsufficientCardsError: 当剩余牌数不足时
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValueError(f"Amount must be an integer, got {type(amount).__name__}")
        if amount < 0:
            raise ValueError("Amount must be non-negative")
        if amount > len(self._cards):
            raise InsufficientCardsError(amount, len(self._cards))

    def draw(self: P, amount: int) -> P:
        """
        非破坏性抽牌.

        在牌堆副本上执行与破坏性抽牌相同的抽取过程，原牌堆不变.

        Args:
            amount: 要抽的牌数

        Returns:
            同类型的新牌堆，包含随机抽出的牌

        Raises:
            InsufficientCardsError: 当剩余牌数不足时
        """
        self.check_draw(amount)
        population = list(self._cards)
        return self._spawn(self._extract(population, amount))

    def draw_destructive(self: P, amount: int) -> P:
        """
        破坏性抽牌.

        每次从剩余牌中等概率选出一张移出，重复amount次（部分Fisher-Yates抽取），
        原牌堆保留未被抽中的牌，相对顺序不变.

        Args:
            amount: 要抽的牌数

        Returns:
            同类型的新牌堆，按抽出顺序包含被抽中的牌

        Raises:
            InsufficientCardsError: 当剩余牌数不足时，此时原牌堆不会被修改
        """
        self.check_draw(amount)
        population = list(self._cards)
        drawn = self._extract(population, amount)
        self._cards = deque(population)
        return self._spawn(drawn)

    def _extract(self, population: List[T], amount: int) -> List[T]:
        drawn: List[T] = []
        for _ in range(amount):
            index = self._rng.randrange(len(population))
            drawn.append(population.pop(index))
        return drawn

    def filter_cards(self: P, predicate: Callable[[T], bool]) -> P:
        """
        按条件筛选牌.

        Args:
            predicate: 筛选条件

        Returns:
            同类型的新牌堆，按原顺序包含满足条件的牌
        """
        return self._spawn(card for card in self._cards if predicate(card))

    def _spawn(self: P, cards: Iterable[T]) -> P:
        return type(self)(cards, rng=self._rng)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._cards:
            raise StopIteration
        return self._cards.popleft()

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"{type(self).__name__}({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cards_remaining={len(self._cards)})"
