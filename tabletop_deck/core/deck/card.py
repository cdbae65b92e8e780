"""
扑克牌数据结构.

定义不可变的Card类及其固定宽度的文本渲染.
"""

from dataclasses import dataclass

from .types import Rank, Suit


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含点数和花色，相等性按结构比较.

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADES)
        >>> card.rank.glyph
        'A'
        >>> print(card.render(), end="")
        +-----+
        |A    |
        |♠    |
        |    ♠|
        |    A|
        +-----+
    """

    rank: Rank
    suit: Suit

    def render(self) -> str:
        """
        渲染为6行、7列的ASCII牌面.

        左上角为点数和花色，右下角镜像显示，每行以换行符结尾.

        Returns:
            str: 固定48个字符的牌面文本
        """
        value = self.rank.glyph
        symbol = self.suit.glyph
        return (
            "+-----+\n"
            f"|{value}    |\n"
            f"|{symbol}    |\n"
            f"|    {symbol}|\n"
            f"|    {value}|\n"
            "+-----+\n"
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: 'Card') -> bool:
        """
        按点数权重比较两张牌(A最大).

        Args:
            other: 另一张牌

        Returns:
            bool: 如果当前牌点数小于另一张牌则返回True
        """
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank.weight < other.rank.weight
