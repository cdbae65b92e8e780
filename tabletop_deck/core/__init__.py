"""
Core Module - 纯领域逻辑层

核心模块只包含牌组相关的领域对象，不依赖应用层.

Modules:
    deck: 点数、花色、卡牌与牌组
    exceptions: 领域异常
"""

__all__ = [
    "deck",
    "exceptions",
]
