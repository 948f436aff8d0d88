"""
Category detection for 5-7 card sets: flush subsets, straight runs and
value multiplicities. The ranker combines these signals into a HandRank.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

from .card_deck import Card
from .game_constants import ACE, LOW_ACE


class HandEvaluationError(RuntimeError):
    """Raised when detector or ranker bookkeeping is inconsistent"""


class CategorySignals(NamedTuple):
    flush_cards: Optional[Tuple[Card, ...]]
    straight_highs: Optional[Tuple[int, ...]]
    quad: Optional[int]
    trips: Tuple[int, ...]
    pairs: Tuple[int, ...]
    singles: Tuple[int, ...]


def detect_flush(cards: Sequence[Card]) -> Optional[Tuple[Card, ...]]:
    """All cards of the flush suit, highest first, or None.

    Every suited card is kept (not just the top five) since a straight
    flush can use a lower five-card run than the best plain flush.
    """
    suit_counts = {}
    for card in cards:
        suit_counts[card.suit] = suit_counts.get(card.suit, 0) + 1

    for suit, count in suit_counts.items():
        if count >= 5:
            flush_cards = [card for card in cards if card.suit == suit]
            flush_cards.sort(key=lambda card: card.value, reverse=True)
            return tuple(flush_cards)
    return None


def detect_straights(cards: Sequence[Card]) -> Optional[Tuple[int, ...]]:
    """High card of every five-long run, highest first, or None.

    The ace also counts as 1 so A-2-3-4-5 reports a high of 5.
    """
    if len(cards) < 5:
        return None

    values = sorted({card.value for card in cards})
    if ACE in values:
        values.insert(0, LOW_ACE)

    straight_highs = []
    run_length = 1
    for low, high in zip(values, values[1:]):
        if low + 1 == high:
            run_length += 1
            if run_length >= 5:
                straight_highs.append(high)
        else:
            run_length = 1

    if not straight_highs:
        return None
    return tuple(sorted(straight_highs, reverse=True))


def detect_multiples(cards: Sequence[Card]) -> Tuple[Optional[int], Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]:
    """Partition the values present into (quad, trips, pairs, singles)"""
    counts = {}
    for card in cards:
        counts[card.value] = counts.get(card.value, 0) + 1

    quad = None
    trips: List[int] = []
    pairs: List[int] = []
    singles: List[int] = []

    for value, count in counts.items():
        if count == 4:
            quad = value
        elif count == 3:
            trips.append(value)
        elif count == 2:
            pairs.append(value)
        elif count == 1:
            singles.append(value)
        else:
            raise HandEvaluationError(f"Value {value} appears {count} times")

    return (
        quad,
        tuple(sorted(trips, reverse=True)),
        tuple(sorted(pairs, reverse=True)),
        tuple(sorted(singles, reverse=True)),
    )


def detect_categories(cards: Sequence[Card]) -> CategorySignals:
    quad, trips, pairs, singles = detect_multiples(cards)
    return CategorySignals(
        flush_cards=detect_flush(cards),
        straight_highs=detect_straights(cards),
        quad=quad,
        trips=trips,
        pairs=pairs,
        singles=singles,
    )
