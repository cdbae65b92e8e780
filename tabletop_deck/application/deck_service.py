"""
DeckService - 牌组服务

按配置创建牌组，并把牌从牌组发到调用方持有的牌堆中.
"""

import logging
import random
from typing import List, Optional

from ..core.deck import Deck
from ..core.exceptions import DeckError
from .config_service import ConfigService
from .types import CommandResult, QueryResult


class DeckService:
    """牌组服务"""

    def __init__(self, config_service: Optional[ConfigService] = None):
        self.logger = logging.getLogger(__name__)
        self.config_service = config_service or ConfigService()

    def new_deck(self, profile: str = "default") -> QueryResult[Deck]:
        """
        按配置创建新牌组

        Args:
            profile: 牌组配置文件名

        Returns:
            查询结果，包含新牌组
        """
        config = self.config_service.get_deck_config(profile).data
        deck = Deck(rng=random.Random(config.seed))
        if config.shuffle_on_create:
            deck.shuffle()
        self.logger.debug(f"[牌组] 按配置 '{profile}' 创建牌组，种子: {config.seed}")
        return QueryResult.success_result(deck)

    def deal(self, deck: Deck, piles: List[Deck], count: int) -> CommandResult:
        """
        轮流发牌

        每一轮从牌组顶端依次给每个牌堆发一张，共发count轮.
        牌不够时停止，已发出的牌保留在各牌堆中.

        Args:
            deck: 发牌的牌组
            piles: 接收牌的牌堆
            count: 每个牌堆要发的张数

        Returns:
            命令结果，data中的dealt为实际发出的张数
        """
        if count < 0:
            return CommandResult.validation_error(
                f"发牌张数不能为负数: {count}",
                error_code="INVALID_DEAL_COUNT"
            )

        dealt = 0
        try:
            for _ in range(count):
                for pile in piles:
                    pile.add(deck.remove_top())
                    dealt += 1
        except DeckError as e:
            self.logger.warning(f"[发牌] 牌组已空，共发出 {dealt} 张")
            return CommandResult.from_deck_error(e, data={'dealt': dealt})

        return CommandResult.success_result(f"已发出 {dealt} 张牌", data={'dealt': dealt})
