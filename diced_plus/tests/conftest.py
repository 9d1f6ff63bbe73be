"""
Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 固定种子的随机数生成器
- 常用牌组fixture
- 测试标记定义
"""

import random

import pytest

from diced_plus.core.deck import Deck
from diced_plus.core.tarot import TarotDeck


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(42)


@pytest.fixture
def joker_deck(seeded_rng):
    """54张含大小王的扑克牌组"""
    return Deck.with_jokers(seeded_rng)


@pytest.fixture
def plain_deck(seeded_rng):
    """52张不含大小王的扑克牌组"""
    return Deck.without_jokers(seeded_rng)


@pytest.fixture
def tarot_deck(seeded_rng):
    """78张完整塔罗牌组"""
    return TarotDeck.full(seeded_rng)


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
    config.addinivalue_line(
        "markers", "statistical: 标记统计检验测试"
    )
