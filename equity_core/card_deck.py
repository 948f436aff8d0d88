from typing import Iterable, List, NamedTuple, Sequence

from .game_constants import (
    CODE_TO_SUIT, RANK_TO_VALUE, SUIT_SYMBOLS, SUIT_TO_CODE, VALUE_TO_RANK,
)


class CardParseError(ValueError):
    """Raised for a card token that is not a rank character plus a suit character"""


class InvalidHandError(ValueError):
    """Raised for a hand/board combination that cannot occur at the table"""


class DeckExhaustedError(RuntimeError):
    """Raised when dealing from an empty deck"""


class Card(NamedTuple):
    value: int  # 2..14, ace high
    suit: int   # 0..3, see SUITS

    @property
    def rank(self):
        return VALUE_TO_RANK[self.value]

    def pretty(self):
        return f"{self.rank}{SUIT_SYMBOLS[self.suit]}"

    def __str__(self):
        return f"{self.rank}{CODE_TO_SUIT[self.suit]}"

    def __repr__(self):
        return str(self)


def create_deck() -> List[Card]:
    """Full 52-card deck in generation order (not shuffled)"""
    return [Card(value, suit) for suit in range(4) for value in range(2, 15)]


def remove_known_cards(deck: List[Card], hand: Sequence[Card], board: Sequence[Card]) -> List[Card]:
    known = set(hand) | set(board)
    deck[:] = [card for card in deck if card not in known]
    return deck


class Deck:
    def __init__(self):
        self.reset()

    def reset(self):
        self.cards = create_deck()

    def remove_known(self, hand: Sequence[Card], board: Sequence[Card]):
        remove_known_cards(self.cards, hand, board)

    def shuffle(self, rng):
        """Shuffle in place with a numpy Generator"""
        rng.shuffle(self.cards)

    def deal(self) -> Card:
        if not self.cards:
            raise DeckExhaustedError("Deck ran out of cards")
        return self.cards.pop()

    def draw(self, n=1) -> List[Card]:
        return [self.deal() for _ in range(n)]

    def __len__(self):
        return len(self.cards)


def parse_card(token: str) -> Card:
    if len(token) != 2:
        raise CardParseError(f"Invalid card '{token}': expected two characters like 'Ah'")
    rank, suit = token[0], token[1]
    if rank not in RANK_TO_VALUE:
        raise CardParseError(f"Invalid card value '{rank}' in '{token}'")
    if suit not in SUIT_TO_CODE:
        raise CardParseError(f"Invalid card suit '{suit}' in '{token}'")
    return Card(RANK_TO_VALUE[rank], SUIT_TO_CODE[suit])


def parse_cards(text: str) -> List[Card]:
    """Parse whitespace separated tokens, e.g. 'Ah Kd 7c'"""
    return [parse_card(token) for token in text.split()]


def format_cards(cards: Iterable[Card], pretty=False) -> str:
    return " ".join(card.pretty() if pretty else str(card) for card in cards)
