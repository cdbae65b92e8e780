"""
Deck类的单元测试.

覆盖新牌顺序、两端存取、分牌、合并、洗牌和渲染.
"""

import random
from collections import Counter

import pytest

from tabletop_deck.core.deck import Card, Deck, Rank, Suit
from tabletop_deck.core.exceptions import DeckError, DeckErrorKind


def _canonical_cards():
    """按新牌顺序(从底到顶)生成52张牌."""
    ranks = list(Rank)
    cards = [Card(rank, suit) for suit in (Suit.SPADES, Suit.DIAMONDS) for rank in ranks]
    cards += [Card(rank, suit) for suit in (Suit.CLUBS, Suit.HEARTS) for rank in reversed(ranks)]
    return cards


@pytest.mark.unit
class TestDeckConstruction:
    """牌组构造测试."""

    def test_fresh_deck_size(self, fresh_deck):
        """新牌组有52张且非空."""
        assert fresh_deck.size == 52
        assert len(fresh_deck) == 52
        assert not fresh_deck.is_empty

    def test_fresh_deck_order(self, fresh_deck):
        """新牌组按镜像顺序排列."""
        assert list(fresh_deck) == _canonical_cards()

    def test_fresh_deck_unique(self, fresh_deck):
        """新牌组52张互不相同."""
        assert len(set(fresh_deck)) == 52

    def test_adopts_external_cards_verbatim(self, ace_of_spades):
        """外部序列原样采用，不校验重复或数量."""
        cards = [ace_of_spades, ace_of_spades, Card(Rank.TWO, Suit.CLUBS)]
        deck = Deck(cards)
        assert list(deck) == cards
        assert deck.size == 3

    def test_empty_deck(self):
        deck = Deck([])
        assert deck.is_empty
        assert deck.size == 0
        assert deck.peek_top() is None
        assert deck.peek_bottom() is None

    def test_reset(self, fresh_deck):
        """重置后恢复新牌顺序."""
        fresh_deck.shuffle()
        fresh_deck.remove_top()
        fresh_deck.reset()
        assert list(fresh_deck) == _canonical_cards()


@pytest.mark.unit
class TestDeckRemoval:
    """两端取牌测试."""

    def test_first_four_from_bottom(self, fresh_deck):
        """底端前四张为黑桃A、2、3、4."""
        drawn = [fresh_deck.remove_bottom() for _ in range(4)]
        assert drawn == [Card(rank, Suit.SPADES)
                         for rank in (Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR)]

    def test_first_four_from_top(self, fresh_deck):
        """顶端前四张为红桃A、2、3、4."""
        drawn = [fresh_deck.remove_top() for _ in range(4)]
        assert drawn == [Card(rank, Suit.HEARTS)
                         for rank in (Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR)]

    def test_drain_from_top(self, fresh_deck):
        """从顶端取完52张，第一张红桃A，最后一张黑桃A，之后再取报错."""
        drawn = [fresh_deck.remove_top() for _ in range(52)]
        assert drawn[0] == Card(Rank.ACE, Suit.HEARTS)
        assert drawn[-1] == Card(Rank.ACE, Suit.SPADES)
        assert fresh_deck.is_empty
        with pytest.raises(DeckError) as exc_info:
            fresh_deck.remove_top()
        assert exc_info.value.kind is DeckErrorKind.EMPTY_REMOVAL

    def test_remove_bottom_from_empty(self):
        with pytest.raises(DeckError, match="Attempted to remove card from an empty deck."):
            Deck([]).remove_bottom()

    def test_peek_does_not_remove(self, fresh_deck):
        assert fresh_deck.peek_top() == Card(Rank.ACE, Suit.HEARTS)
        assert fresh_deck.peek_bottom() == Card(Rank.ACE, Suit.SPADES)
        assert fresh_deck.size == 52


@pytest.mark.unit
class TestDeckAdd:
    """加入牌测试."""

    def test_add_then_remove_top(self, fresh_deck, ace_of_spades):
        """加入后从顶端取回同一张牌，牌数不变."""
        fresh_deck.add(ace_of_spades)
        assert fresh_deck.size == 53
        assert fresh_deck.remove_top() == ace_of_spades
        assert fresh_deck.size == 52

    def test_add_to_empty(self, ace_of_spades):
        deck = Deck([])
        deck.add(ace_of_spades)
        assert deck.peek_top() == deck.peek_bottom() == ace_of_spades

    def test_add_deck_keeps_source(self):
        """加入另一副牌按其当前顺序追加，来源牌组不变."""
        first = [Card(Rank.TWO, Suit.CLUBS), Card(Rank.THREE, Suit.CLUBS)]
        second = [Card(Rank.KING, Suit.HEARTS), Card(Rank.QUEEN, Suit.HEARTS)]
        target = Deck(first)
        source = Deck(second)
        target.add(source)
        assert list(target) == first + second
        assert list(source) == second

    def test_add_deck_to_itself(self):
        cards = [Card(Rank.TWO, Suit.CLUBS), Card(Rank.THREE, Suit.CLUBS)]
        deck = Deck(cards)
        deck.add(deck)
        assert list(deck) == cards + cards


@pytest.mark.unit
class TestDeckSplit:
    """分牌测试."""

    def test_split_in_half(self, fresh_deck):
        """默认分为两份，各26张，按底端顺序取出."""
        original = list(fresh_deck)
        halves = fresh_deck.split()
        assert len(halves) == 2
        assert [half.size for half in halves] == [26, 26]
        assert list(halves[0]) == original[:26]
        assert list(halves[1]) == original[26:]
        assert fresh_deck.is_empty

    def test_split_and_reassemble(self, fresh_deck):
        """分牌后合并得到与新牌组相同的多重集合."""
        left, right = fresh_deck.split(2)
        left.add(right)
        assert left.size == 52
        assert Counter(left) == Counter(Deck())

    def test_split_into_three_fails(self, fresh_deck):
        """52张无法均分为3份."""
        with pytest.raises(DeckError) as exc_info:
            fresh_deck.split(3)
        assert "3" in str(exc_info.value)
        assert exc_info.value.kind is DeckErrorKind.UNEVEN_SPLIT
        assert list(fresh_deck) == _canonical_cards()

    def test_split_rejects_odd_portion(self, fresh_deck):
        """每份张数为奇数时拒绝(52分4份，每份13张)."""
        with pytest.raises(DeckError, match="4 portions"):
            fresh_deck.split(4)
        assert fresh_deck.size == 52

    def test_split_even_portion(self, fresh_deck):
        """每份张数为偶数时允许(52分13份，每份4张)."""
        original = list(fresh_deck)
        parts = fresh_deck.split(13)
        assert len(parts) == 13
        assert all(part.size == 4 for part in parts)
        assert [card for part in parts for card in part] == original

    @pytest.mark.parametrize("portions", [0, -1])
    def test_split_non_positive(self, fresh_deck, portions):
        with pytest.raises(DeckError):
            fresh_deck.split(portions)
        assert fresh_deck.size == 52

    def test_split_empty_deck(self):
        with pytest.raises(DeckError):
            Deck([]).split()

    def test_split_parts_shuffle_reproducibly(self):
        """相同种子的父牌组分出的子牌组洗牌结果一致."""
        first_parts = Deck(rng=random.Random(2024)).split()
        second_parts = Deck(rng=random.Random(2024)).split()
        for first, second in zip(first_parts, second_parts):
            first.shuffle()
            second.shuffle()
        assert [list(part) for part in first_parts] == [list(part) for part in second_parts]
        assert Counter(first_parts[0]) == Counter(list(Deck())[:26])


@pytest.mark.unit
class TestDeckShuffle:
    """洗牌测试."""

    def test_shuffle_preserves_cards(self, fresh_deck):
        before = Counter(fresh_deck)
        fresh_deck.shuffle()
        assert Counter(fresh_deck) == before
        assert fresh_deck.size == 52

    def test_seeded_shuffle_reproducible(self):
        """相同种子得到相同排列."""
        first = Deck(rng=random.Random(99))
        second = Deck(rng=random.Random(99))
        first.shuffle()
        second.shuffle()
        assert list(first) == list(second)

    def test_shuffle_changes_order(self):
        deck = Deck(rng=random.Random(7))
        deck.shuffle()
        assert list(deck) != _canonical_cards()

    def test_shuffle_empty(self):
        deck = Deck([])
        deck.shuffle()
        assert deck.is_empty

    def test_ends_still_work_after_shuffle(self, fresh_deck, ace_of_spades):
        fresh_deck.shuffle()
        fresh_deck.add(ace_of_spades)
        assert fresh_deck.remove_top() == ace_of_spades


@pytest.mark.unit
class TestDeckRender:
    """渲染测试."""

    def test_render_header(self, fresh_deck):
        rendered = fresh_deck.render()
        assert rendered.startswith("Deck:\n")
        assert len(rendered) == len("Deck:\n") + 52 * 48
        assert str(fresh_deck) == rendered

    def test_render_order(self, ace_of_spades):
        """按从底到顶顺序拼接."""
        two_of_clubs = Card(Rank.TWO, Suit.CLUBS)
        deck = Deck([ace_of_spades, two_of_clubs])
        assert deck.render() == "Deck:\n" + ace_of_spades.render() + two_of_clubs.render()

    def test_render_empty(self):
        assert Deck([]).render() == "Deck:\n"

    def test_repr(self, fresh_deck):
        assert repr(fresh_deck) == "Deck(size=52)"
