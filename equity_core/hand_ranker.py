"""
Hand ranking and comparison.

A HandRank is (category, kickers): tuple ordering compares the category
first and then the kicker values lexicographically, so ranks can be
compared directly or through compare_hands().
"""

from typing import NamedTuple, Sequence, Tuple

from .card_deck import Card, InvalidHandError
from .game_constants import ACE, HandCategory, VALUE_TO_RANK
from .hand_detector import HandEvaluationError, detect_categories, detect_straights

ROYAL_VALUES = frozenset(range(10, ACE + 1))


class HandRank(NamedTuple):
    category: HandCategory
    kickers: Tuple[int, ...] = ()

    @classmethod
    def high_card(cls, a, b, c, d, e):
        return cls(HandCategory.HIGH_CARD, (a, b, c, d, e))

    @classmethod
    def one_pair(cls, pair, k1, k2, k3):
        return cls(HandCategory.ONE_PAIR, (pair, k1, k2, k3))

    @classmethod
    def two_pair(cls, high_pair, low_pair, kicker):
        return cls(HandCategory.TWO_PAIR, (high_pair, low_pair, kicker))

    @classmethod
    def three_of_a_kind(cls, trips, k1, k2):
        return cls(HandCategory.THREE_OF_A_KIND, (trips, k1, k2))

    @classmethod
    def straight(cls, high):
        return cls(HandCategory.STRAIGHT, (high,))

    @classmethod
    def flush(cls, a, b, c, d, e):
        return cls(HandCategory.FLUSH, (a, b, c, d, e))

    @classmethod
    def full_house(cls, trips, pair):
        return cls(HandCategory.FULL_HOUSE, (trips, pair))

    @classmethod
    def four_of_a_kind(cls, quad, kicker):
        return cls(HandCategory.FOUR_OF_A_KIND, (quad, kicker))

    @classmethod
    def straight_flush(cls, high):
        return cls(HandCategory.STRAIGHT_FLUSH, (high,))

    @classmethod
    def royal_flush(cls):
        return cls(HandCategory.ROYAL_FLUSH, ())


def _top(values: Sequence[int], n: int, what: str) -> Tuple[int, ...]:
    # Buckets are pre-sorted; running short means the detector miscounted
    if len(values) < n:
        raise HandEvaluationError(f"Expected {n} {what}, found {len(values)}: {list(values)}")
    return tuple(values[:n])


def rank_cards(cards: Sequence[Card]) -> HandRank:
    """Rank the best five-card hand among 5-7 cards"""
    if not 5 <= len(cards) <= 7:
        raise InvalidHandError(f"Can only rank 5 to 7 cards, got {len(cards)}")

    signals = detect_categories(cards)

    if signals.flush_cards is not None:
        suited_straights = detect_straights(signals.flush_cards)
        if suited_straights is not None:
            suited_values = {card.value for card in signals.flush_cards}
            if suited_straights[0] == ACE and ROYAL_VALUES <= suited_values:
                return HandRank.royal_flush()
            return HandRank.straight_flush(suited_straights[0])
        return HandRank.flush(*_top([card.value for card in signals.flush_cards], 5, "flush cards"))

    if signals.quad is not None:
        rest = sorted(signals.trips + signals.pairs + signals.singles, reverse=True)
        return HandRank.four_of_a_kind(signals.quad, *_top(rest, 1, "quad kickers"))

    if len(signals.trips) >= 2 or (signals.trips and signals.pairs):
        # Higher of the two qualifying values always fills the trips slot
        other = signals.trips[1] if len(signals.trips) >= 2 else signals.pairs[0]
        first = signals.trips[0]
        return HandRank.full_house(max(first, other), min(first, other))

    if signals.straight_highs is not None:
        return HandRank.straight(signals.straight_highs[0])

    if len(signals.trips) == 1:
        rest = sorted(signals.pairs + signals.singles, reverse=True)
        return HandRank.three_of_a_kind(signals.trips[0], *_top(rest, 2, "trips kickers"))

    if len(signals.pairs) >= 2:
        rest = sorted(signals.pairs[2:] + signals.singles, reverse=True)
        return HandRank.two_pair(signals.pairs[0], signals.pairs[1], *_top(rest, 1, "two pair kickers"))

    if len(signals.pairs) == 1:
        return HandRank.one_pair(signals.pairs[0], *_top(signals.singles, 3, "pair kickers"))

    return HandRank.high_card(*_top(signals.singles, 5, "high cards"))


def evaluate_hand(hand: Sequence[Card], board: Sequence[Card]) -> HandRank:
    """Evaluate poker hand strength for showdown"""
    return rank_cards(list(hand) + list(board))


def compare_kickers(values1: Sequence[int], values2: Sequence[int]) -> int:
    for v1, v2 in zip(values1, values2):
        if v1 != v2:
            return 1 if v1 > v2 else -1
    # Common prefix: the longer sequence wins
    if len(values1) != len(values2):
        return 1 if len(values1) > len(values2) else -1
    return 0


def compare_hands(hand1: HandRank, hand2: HandRank) -> int:
    """1 if hand1 wins, -1 if hand2 wins, 0 for a tie"""
    if hand1.category != hand2.category:
        return 1 if hand1.category > hand2.category else -1
    return compare_kickers(hand1.kickers, hand2.kickers)


HAND_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}


def describe_hand(rank: HandRank) -> str:
    """Readable form such as 'Full House (K 7)'"""
    name = HAND_NAMES[rank.category]
    if not rank.kickers:
        return name
    return f"{name} ({' '.join(VALUE_TO_RANK[v] for v in rank.kickers)})"
