"""
扑克牌相关类型定义.

定义扑克牌的牌面、花色、颜色等基础枚举类型，以及标准牌组的构建顺序.
"""

from enum import Enum, IntEnum
from typing import Tuple


class Suit(Enum):
    """
    扑克牌花色枚举.

    NONE 只用于大小王.
    """

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    SPADES = "Spades"
    CLUBS = "Clubs"
    NONE = "None"

    @property
    def label(self) -> str:
        return self.value


class Color(Enum):
    """扑克牌颜色枚举."""

    RED = "Red"
    BLACK = "Black"


class CardFace(IntEnum):
    """
    扑克牌牌面枚举.

    2-10 为数字牌，数值即点数；其余为人头牌、A和大小王.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14
    BIG_JOKER = 15
    LITTLE_JOKER = 16

    @property
    def is_number(self) -> bool:
        return self.value <= 10

    @property
    def is_joker(self) -> bool:
        return self in (CardFace.BIG_JOKER, CardFace.LITTLE_JOKER)

    @property
    def label(self) -> str:
        """
        牌面的显示文本.

        Returns:
            str: 数字牌为数字，人头牌为 "Jack" 等名称，大小王为 "Big Joker"/"Little Joker"
        """
        if self.is_number:
            return str(self.value)
        return _FACE_LABELS[self]


_FACE_LABELS = {
    CardFace.JACK: "Jack",
    CardFace.QUEEN: "Queen",
    CardFace.KING: "King",
    CardFace.ACE: "Ace",
    CardFace.BIG_JOKER: "Big Joker",
    CardFace.LITTLE_JOKER: "Little Joker",
}

# 标准牌组的构建顺序：按花色分组，每组先数字牌后人头牌，大小王放在最后
STANDARD_SUITS: Tuple[Suit, ...] = (Suit.HEARTS, Suit.DIAMONDS, Suit.SPADES, Suit.CLUBS)
NUMBER_FACES: Tuple[CardFace, ...] = tuple(face for face in CardFace if face.is_number)
COURT_FACES: Tuple[CardFace, ...] = (CardFace.KING, CardFace.QUEEN, CardFace.JACK, CardFace.ACE)
JOKER_FACES: Tuple[CardFace, ...] = (CardFace.BIG_JOKER, CardFace.LITTLE_JOKER)
