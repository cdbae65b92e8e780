"""
测试配置 - pytest配置文件

提供牌组测试的通用fixture.
"""

import pytest

from tabletop_deck.core.deck import Card, Deck, Rank, Suit


@pytest.fixture
def fresh_deck() -> Deck:
    """新牌顺序的52张牌组"""
    return Deck()


@pytest.fixture
def ace_of_spades() -> Card:
    return Card(Rank.ACE, Suit.SPADES)
