"""
扑克牌组管理.

定义Deck类，提供标准52张牌的管理功能，包括洗牌、分牌、两端存取等操作.
"""

import logging
import random
from collections import deque
from typing import Deque, Iterable, Iterator, List, Optional, Union

from .card import Card
from .types import get_all_ranks, get_all_suits
from ..exceptions import DeckError

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副扑克牌.

    牌按加入顺序排列：最先加入的一端为"底"，最后加入的一端为"顶".
    两端的存取均为O(1)，使用可选的随机数生成器以支持确定性测试.

    Attributes:
        _cards: 当前牌组中的牌，左端为底，右端为顶
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck()
        >>> deck.size
        52
        >>> deck.remove_top()
        Card(ACE, HEARTS)
        >>> deck.remove_bottom()
        Card(ACE, SPADES)
        >>> len(deck)
        50
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None,
                 rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            cards: 外部提供的牌序列(从底到顶)，原样采用，不做校验.
                为None时按新牌顺序填充52张牌
            rng: 随机数生成器，用于洗牌操作。如果为None，使用默认随机数生成器
        """
        self._rng = rng or random.Random()
        self._cards: Deque[Card] = deque()
        if cards is None:
            self._reset_deck()
        else:
            self._cards.extend(cards)

    def _reset_deck(self) -> None:
        """
        重置牌组为新牌顺序.

        前两种花色(黑桃、方块)按A..K加入，后两种花色(梅花、红桃)按K..A加入，
        形成新拆封牌组的镜像排列.
        """
        suits = get_all_suits()
        ranks = get_all_ranks()
        half = len(suits) // 2
        self._cards.clear()
        for suit in suits[:half]:
            for rank in ranks:
                self._cards.append(Card(rank, suit))
        for suit in suits[half:]:
            for rank in reversed(ranks):
                self._cards.append(Card(rank, suit))

    def reset(self) -> None:
        """重置牌组为完整的52张新牌."""
        self._reset_deck()
        logger.debug("[牌组] 已重置为新牌顺序")

    def shuffle(self) -> None:
        """
        洗牌.

        使用Fisher-Yates洗牌算法将当前所有牌打乱为均匀随机的排列.
        """
        cards = list(self._cards)
        self._rng.shuffle(cards)
        self._cards = deque(cards)
        logger.debug(f"[洗牌] 已打乱 {len(cards)} 张牌")

    def split(self, portions: int = 2) -> List['Deck']:
        """
        将牌组均分为若干份.

        从底端依次取出portions段等长的牌，每段保持原有顺序组成一个新牌组.
        注意：每份张数为奇数时同样拒绝分牌，例如52张可以分13份(每份4张)，
        但不能分4份(每份13张).

        Args:
            portions: 份数，默认为2

        Returns:
            List[Deck]: portions个新牌组，第0个包含最先取出的一段

        Raises:
            DeckError: 当牌组无法均分为portions份时，牌组保持不变
        """
        if portions < 1:
            raise DeckError.uneven_split(portions)
        per_portion, remainder = divmod(len(self._cards), portions)
        if remainder != 0 or per_portion == 0 or per_portion % 2 != 0:
            raise DeckError.uneven_split(portions)

        result = []
        for _ in range(portions):
            run = [self._cards.popleft() for _ in range(per_portion)]
            result.append(Deck(run, rng=self._rng))
        logger.debug(f"[分牌] 分为 {portions} 份，每份 {per_portion} 张")
        return result

    def add(self, item: Union[Card, 'Deck']) -> None:
        """
        向牌组加入一张牌或另一副牌的全部牌.

        加入的牌放在顶端，随后remove_top将首先取回最后加入的牌.
        加入另一副牌时按其当前顺序复制，来源牌组保持不变.

        Args:
            item: 一张牌或一个牌组
        """
        if isinstance(item, Deck):
            self._cards.extend(list(item._cards))
        else:
            self._cards.append(item)

    def remove_top(self) -> Card:
        """
        从顶端取出一张牌.

        Returns:
            Card: 最后加入的那张牌

        Raises:
            DeckError: 当牌组为空时
        """
        if not self._cards:
            raise DeckError.empty_removal()
        return self._cards.pop()

    def remove_bottom(self) -> Card:
        """
        从底端取出一张牌.

        Returns:
            Card: 最先加入的那张牌

        Raises:
            DeckError: 当牌组为空时
        """
        if not self._cards:
            raise DeckError.empty_removal()
        return self._cards.popleft()

    def peek_top(self) -> Optional[Card]:
        """
        查看顶部的牌但不取出.

        Returns:
            Optional[Card]: 顶部的牌，如果牌组为空则返回None
        """
        if not self._cards:
            return None
        return self._cards[-1]

    def peek_bottom(self) -> Optional[Card]:
        """查看底部的牌但不取出，空牌组返回None."""
        if not self._cards:
            return None
        return self._cards[0]

    @property
    def size(self) -> int:
        """
        获取当前牌数.

        Returns:
            int: 牌组中的牌数
        """
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """
        检查牌组是否为空.

        Returns:
            bool: 如果牌组为空则返回True
        """
        return len(self._cards) == 0

    def render(self) -> str:
        """
        渲染整副牌.

        Returns:
            str: "Deck:\\n"开头，随后按从底到顶的顺序拼接每张牌的渲染
        """
        return "Deck:\n" + "".join(card.render() for card in self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """按从底到顶(加入顺序)遍历."""
        return iter(list(self._cards))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Deck(size={len(self._cards)})"
