"""
塔罗牌和塔罗牌组的单元测试.
"""

import pytest

from diced_plus.core.exceptions import InsufficientCardsError
from diced_plus.core.tarot import (
    MAJOR_ARCANA_NUMBERS,
    GreaterSecret,
    LesserSecret,
    MajorArcana,
    MinorArcanaRank,
    MinorArcanaSuit,
    TarotDeck,
    camel_case_split,
    tarot_full_deck,
    tarot_major_only_deck,
    to_roman,
)


@pytest.mark.unit
class TestTarotCard:
    """塔罗牌的显示文本."""

    @pytest.mark.parametrize("arcana,expected", [
        (MajorArcana.THE_FOOL, "The Fool [0]"),
        (MajorArcana.THE_MAGICIAN, "The Magician [I]"),
        (MajorArcana.THE_HIGH_PRIESTESS, "The High Priestess [II]"),
        (MajorArcana.STRENGTH, "Strength [VIII]"),
        (MajorArcana.THE_HERMIT, "The Hermit [IX]"),
        (MajorArcana.WHEEL_OF_FORTUNE, "Wheel Of Fortune [X]"),
        (MajorArcana.THE_HANGED_MAN, "The Hanged Man [XII]"),
        (MajorArcana.THE_MOON, "The Moon [XVIII]"),
        (MajorArcana.THE_WORLD, "The World [XXI]"),
    ])
    def test_greater_secret_display(self, arcana, expected):
        card = GreaterSecret(arcana)
        assert card.display() == expected
        assert str(card) == expected

    @pytest.mark.parametrize("suit,rank,expected", [
        (MinorArcanaSuit.SWORDS, MinorArcanaRank.ONE, "1 of Swords"),
        (MinorArcanaSuit.WANDS, MinorArcanaRank.TEN, "10 of Wands"),
        (MinorArcanaSuit.CUPS, MinorArcanaRank.KNIGHT, "Knight of Cups"),
        (MinorArcanaSuit.COINS, MinorArcanaRank.PAGE, "Page of Coins"),
    ])
    def test_lesser_secret_display(self, suit, rank, expected):
        assert LesserSecret(suit, rank).display() == expected

    def test_card_validation(self):
        with pytest.raises(TypeError):
            GreaterSecret("TheFool")
        with pytest.raises(TypeError):
            LesserSecret(MinorArcanaSuit.CUPS, 3)


@pytest.mark.unit
class TestMajorArcanaTable:
    """大阿卡纳编号表."""

    def test_every_arcana_numbered(self):
        assert set(MAJOR_ARCANA_NUMBERS) == set(MajorArcana)
        assert sorted(MAJOR_ARCANA_NUMBERS.values()) == list(range(22))

    def test_numbers_from_table(self):
        assert MajorArcana.THE_FOOL.number == 0
        assert MajorArcana.JUSTICE.number == 11
        assert MajorArcana.THE_WORLD.number == 21

    def test_to_roman(self):
        assert to_roman(1) == "I"
        assert to_roman(4) == "IV"
        assert to_roman(14) == "XIV"
        assert to_roman(19) == "XIX"
        assert to_roman(1994) == "MCMXCIV"

    def test_to_roman_out_of_range(self):
        with pytest.raises(ValueError):
            to_roman(0)
        with pytest.raises(ValueError):
            to_roman(4000)

    def test_camel_case_split(self):
        assert camel_case_split("TheHangedMan") == "The Hanged Man"
        assert camel_case_split("Death") == "Death"


@pytest.mark.unit
class TestTarotDeck:
    """塔罗牌组."""

    def test_full_deck(self, tarot_deck):
        cards = tarot_deck.cards

        assert len(cards) == 78
        assert len(set(cards)) == 78
        assert sum(1 for card in cards if isinstance(card, GreaterSecret)) == 22
        assert sum(1 for card in cards if isinstance(card, LesserSecret)) == 56

    def test_major_only_deck(self):
        deck = TarotDeck.major_only()

        assert len(deck) == 22
        assert all(isinstance(card, GreaterSecret) for card in deck.cards)

    def test_module_helpers(self):
        assert len(tarot_full_deck()) == 78
        assert len(tarot_major_only_deck()) == 22

    def test_major_arcana_in_number_order(self):
        numbers = [card.number for card in TarotDeck.major_only().cards]
        assert numbers == list(range(22))

    def test_minor_arcana_order(self, tarot_deck):
        minor = tarot_deck.cards[22:]

        assert [str(card) for card in minor[:14]] == [
            "1 of Swords", "2 of Swords", "3 of Swords", "4 of Swords",
            "5 of Swords", "6 of Swords", "7 of Swords", "8 of Swords",
            "9 of Swords", "10 of Swords",
            "King of Swords", "Queen of Swords", "Knight of Swords", "Page of Swords",
        ]
        assert [card.suit for card in minor[::14]] == [
            MinorArcanaSuit.SWORDS, MinorArcanaSuit.WANDS,
            MinorArcanaSuit.COINS, MinorArcanaSuit.CUPS,
        ]

    def test_draw_destructive(self, tarot_deck):
        hand = tarot_deck.draw_destructive(3)

        assert isinstance(hand, TarotDeck)
        assert len(hand) == 3
        assert len(tarot_deck) == 75
        assert not set(hand.cards) & set(tarot_deck.cards)

    def test_draw_nondestructive(self, tarot_deck):
        hand = tarot_deck.draw(10)

        assert len(hand) == 10
        assert len(tarot_deck) == 78

    def test_insufficient_cards_major_only(self):
        deck = TarotDeck.major_only()

        for method in (deck.draw, deck.draw_destructive):
            with pytest.raises(InsufficientCardsError) as exc_info:
                method(23)
            assert exc_info.value.requested == 23
            assert exc_info.value.available == 22
        assert len(deck) == 22

    def test_filter_cards(self, tarot_deck):
        cups = tarot_deck.filter_cards(
            lambda card: isinstance(card, LesserSecret) and card.suit == MinorArcanaSuit.CUPS
        )

        assert isinstance(cups, TarotDeck)
        assert len(cups) == 14

    def test_draining_iteration(self):
        deck = TarotDeck.major_only()
        first = next(deck)

        assert str(first) == "The Fool [0]"
        assert len(deck) == 21
