"""
牌组领域异常定义
所有误用都以单一的DeckError向调用方抛出，由kind区分具体情况
"""

from enum import Enum


class DeckErrorKind(Enum):
    """牌组错误类型"""
    EMPTY_REMOVAL = "empty_removal"
    UNEVEN_SPLIT = "uneven_split"


class DeckError(Exception):
    """
    牌组操作异常

    Attributes:
        kind: 错误类型
        message: 可读的错误信息
    """

    def __init__(self, kind: DeckErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def empty_removal(cls) -> 'DeckError':
        """从空牌组取牌"""
        return cls(DeckErrorKind.EMPTY_REMOVAL,
                   "Attempted to remove card from an empty deck.")

    @classmethod
    def uneven_split(cls, portions: int) -> 'DeckError':
        """牌组无法均分为指定份数"""
        return cls(DeckErrorKind.UNEVEN_SPLIT,
                   f"Deck could not be divided into {portions} portions evenly.")
