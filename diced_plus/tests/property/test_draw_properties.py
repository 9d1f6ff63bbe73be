"""
Property-based Tests for Card Draws - 抽牌属性测试

该模块使用hypothesis进行基于属性的测试，确保在任何情况下：
- 抽出的牌数恰好等于请求数量
- 抽出的牌加上剩余的牌等于原牌组（不多不少、不重复）
- 请求超过剩余牌数时两种抽牌都失败，并且原牌组不变
"""

import random
from collections import Counter
from typing import List

import pytest
from hypothesis import given, strategies as st

from diced_plus.core.deck import CardPile, Deck
from diced_plus.core.exceptions import InsufficientCardsError
from diced_plus.core.tarot import TarotDeck

# Hypothesis策略定义
population_strategy = st.lists(st.integers(min_value=0, max_value=20), max_size=60)
seed_strategy = st.integers(min_value=0, max_value=2 ** 32 - 1)
deck_builder_strategy = st.sampled_from([
    Deck.with_jokers, Deck.without_jokers, TarotDeck.full, TarotDeck.major_only
])


@pytest.mark.property_test
@given(population_strategy, seed_strategy, st.data())
def test_destructive_draw_conserves_population(population: List[int], seed: int, data):
    """Property test: 破坏性抽牌后，抽出的牌与剩余的牌合起来等于原牌堆"""
    pile = CardPile(population, rng=random.Random(seed))
    amount = data.draw(st.integers(min_value=0, max_value=len(population)))

    hand = pile.draw_destructive(amount)

    assert len(hand) == amount
    assert pile.size() == len(population) - amount
    assert Counter(hand.cards) + Counter(pile.cards) == Counter(population)


@pytest.mark.property_test
@given(population_strategy, seed_strategy, st.data())
def test_nondestructive_draw_leaves_source(population: List[int], seed: int, data):
    """Property test: 非破坏性抽牌不改变原牌堆，抽出的牌是原牌堆的子多重集"""
    pile = CardPile(population, rng=random.Random(seed))
    amount = data.draw(st.integers(min_value=0, max_value=len(population)))

    hand = pile.draw(amount)

    assert len(hand) == amount
    assert pile.cards == population
    assert not Counter(hand.cards) - Counter(population)


@pytest.mark.property_test
@given(population_strategy, st.integers(min_value=1, max_value=20))
def test_over_request_fails_identically(population: List[int], excess: int):
    """Property test: 超量请求时两种抽牌给出相同的错误，并且不修改原牌堆"""
    amount = len(population) + excess

    for method in ("draw", "draw_destructive"):
        pile = CardPile(population)
        with pytest.raises(InsufficientCardsError) as exc_info:
            getattr(pile, method)(amount)

        assert exc_info.value.requested == amount
        assert exc_info.value.available == len(population)
        assert pile.cards == population


@pytest.mark.property_test
@given(deck_builder_strategy, seed_strategy, st.data())
def test_standard_decks_never_duplicate(builder, seed: int, data):
    """Property test: 标准牌组抽出的牌不重复，且与剩余牌不相交"""
    deck = builder(random.Random(seed))
    original = deck.cards
    amount = data.draw(st.integers(min_value=0, max_value=len(original)))

    hand = deck.draw_destructive(amount)

    assert len(set(hand.cards)) == amount
    assert not set(hand.cards) & set(deck.cards)
    assert set(hand.cards) | set(deck.cards) == set(original)
    assert isinstance(hand, type(deck))


@pytest.mark.property_test
@given(population_strategy, seed_strategy)
def test_draw_zero_is_noop(population: List[int], seed: int):
    """Property test: 抽0张总是成功，结果为空，原牌堆不变"""
    pile = CardPile(population, rng=random.Random(seed))

    assert pile.draw(0).is_empty
    assert pile.draw_destructive(0).is_empty
    assert pile.cards == population
