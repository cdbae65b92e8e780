"""
Tabletop Deck - 桌游扑克牌组库

提供标准52张扑克牌的建模：点数、花色、卡牌及牌组操作
（洗牌、分牌、两端存取以及ASCII文本渲染）.

Modules:
    core: 纯领域逻辑（牌、牌组、异常）
    application: 配置管理与牌组服务
"""

from .core.deck import Card, Deck, Rank, Suit
from .core.exceptions import DeckError, DeckErrorKind

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "DeckError",
    "DeckErrorKind",
]
