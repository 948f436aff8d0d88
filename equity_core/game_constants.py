import os
from enum import Enum, IntEnum

# Card notation
RANKS = "23456789TJQKA"
SUITS = "hdcs"  # hearts, diamonds, clubs, spades -> suit codes 0..3
SUIT_SYMBOLS = {0: '♥', 1: '♦', 2: '♣', 3: '♠'}

RANK_TO_VALUE = {rank: value for value, rank in enumerate(RANKS, start=2)}
VALUE_TO_RANK = {value: rank for rank, value in RANK_TO_VALUE.items()}
SUIT_TO_CODE = {suit: code for code, suit in enumerate(SUITS)}
CODE_TO_SUIT = {code: suit for suit, code in SUIT_TO_CODE.items()}

ACE = 14
LOW_ACE = 1  # ace playing low in the wheel

# Table geometry
HAND_SIZE = 2
BOARD_SIZE = 5
MIN_PLAYERS = 2
MAX_PLAYERS = 23  # 52 - 2 - 5 >= 2 * (players - 1)
DEFAULT_PLAYER_RANGE = (2, 5)

# Simulation settings (environment overrides)
def env_int(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got '{raw}'") from None


DEFAULT_SIMULATIONS = env_int("POKER_SIMULATIONS", 1000000)
DEFAULT_WORKERS = env_int("POKER_WORKERS", 0) or (os.cpu_count() or 1)
DEFAULT_BATCH_SIZE = env_int("POKER_BATCH_SIZE", 10000)


# Hand categories, weakest first
class HandCategory(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


# Result of a single trial for the tracked player
class TrialOutcome(Enum):
    WIN = 0
    TIE = 1
    LOSS = 2
