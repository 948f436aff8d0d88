"""
Card model and hand ranking engine for Texas Hold'em equity simulation
"""

from .game_constants import HandCategory, TrialOutcome
from .card_deck import (
    Card, Deck, CardParseError, DeckExhaustedError, InvalidHandError,
    create_deck, parse_card, parse_cards, format_cards,
)
from .hand_detector import CategorySignals, HandEvaluationError, detect_categories
from .hand_ranker import HandRank, evaluate_hand, rank_cards, compare_hands, describe_hand

__all__ = ['HandCategory', 'TrialOutcome', 'Card', 'Deck', 'CardParseError', 'DeckExhaustedError',
           'InvalidHandError', 'create_deck', 'parse_card', 'parse_cards', 'format_cards',
           'CategorySignals', 'HandEvaluationError', 'detect_categories',
           'HandRank', 'evaluate_hand', 'rank_cards', 'compare_hands', 'describe_hand']
