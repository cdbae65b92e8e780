"""
扑克牌相关类型定义.

定义扑克牌的花色、点数等基础枚举类型.
"""

from enum import Enum, IntEnum
from typing import Dict, List


class Suit(Enum):
    """
    扑克牌花色枚举.

    成员按标准顺序声明：黑桃、方块、梅花、红桃.
    值即为显示用的Unicode符号.
    """

    SPADES = "♠"      # 黑桃
    DIAMONDS = "♦"    # 方块
    CLUBS = "♣"       # 梅花
    HEARTS = "♥"      # 红桃

    @property
    def glyph(self) -> str:
        """返回花色符号."""
        return self.value


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    值为比较用的权重，A最大(13)，2最小(1).
    成员按牌面数组顺序声明(A, 2, ..., K)，迭代顺序即新牌组的填充顺序，
    与权重顺序不同.
    """

    ACE = 13
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    @property
    def glyph(self) -> str:
        """
        返回点数的单字符显示.

        Returns:
            str: 单个字符，10显示为"X"以保证每张牌宽度一致
        """
        return _RANK_GLYPHS[self]

    @property
    def weight(self) -> int:
        """返回点数权重(2=1 ... A=13)."""
        return self.value


_RANK_GLYPHS: Dict[Rank, str] = {
    Rank.ACE: "A", Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "X", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K",
}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按标准顺序排列的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 按牌面数组顺序(A在前)排列的13种点数
    """
    return list(Rank)
