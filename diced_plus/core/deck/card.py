"""
扑克牌数据结构.

定义不可变的Card类，颜色在构造时由花色和牌面推导，之后不可修改.
"""

from dataclasses import dataclass, field
from typing import Optional

from .types import CardFace, Color, Suit


def derive_color(face: CardFace, suit: Suit) -> Color:
    """
    根据花色和牌面推导扑克牌颜色.

    大小王没有花色，大王为黑色，小王为红色.

    Args:
        face: 牌面
        suit: 花色

    Returns:
        Color: 扑克牌颜色
    """
    if suit in (Suit.HEARTS, Suit.DIAMONDS):
        return Color.RED
    if suit in (Suit.SPADES, Suit.CLUBS):
        return Color.BLACK
    if face == CardFace.BIG_JOKER:
        return Color.BLACK
    return Color.RED


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含牌面和花色，颜色是两者的纯函数.

    Attributes:
        face: 牌面
        suit: 花色
        color: 颜色（构造时推导，不能单独设置）

    Examples:
        >>> card = Card(CardFace.SEVEN, Suit.HEARTS)
        >>> str(card)
        '7 of Hearts'
        >>> card.color
        <Color.RED: 'Red'>
    """

    face: CardFace
    suit: Suit
    color: Color = field(init=False)

    def __post_init__(self) -> None:
        """
        验证扑克牌数据并推导颜色.

        Raises:
            TypeError: 当牌面或花色类型无效时
        """
        if not isinstance(self.face, CardFace):
            raise TypeError(f"牌面必须是CardFace类型，实际: {type(self.face)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        object.__setattr__(self, "color", derive_color(self.face, self.suit))

    @property
    def number_value(self) -> Optional[int]:
        """数字牌的点数，非数字牌返回None."""
        if self.face.is_number:
            return self.face.value
        return None

    def display(self) -> str:
        """
        返回扑克牌的显示文本.

        Returns:
            str: 有花色的牌为 "<牌面> of <花色>"，大小王只显示牌面
        """
        if self.suit == Suit.NONE:
            return self.face.label
        return f"{self.face.label} of {self.suit.label}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Card({self.face.name}, {self.suit.name})"
