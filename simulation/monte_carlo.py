"""
Monte Carlo equity simulation.

Each trial deals random opponent hands and the rest of the board from a
freshly shuffled deck, ranks every player and scores the tracked player as
a win, tie or loss. Trials are grouped into fixed-size batches; every batch
draws from its own child of a numpy SeedSequence, so a given seed produces
the same counts no matter how many worker processes run the batches.
"""

import time
from concurrent.futures import ProcessPoolExecutor
from functools import reduce
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from equity_core.card_deck import Card, Deck, InvalidHandError
from equity_core.game_constants import (
    BOARD_SIZE, DEFAULT_BATCH_SIZE, DEFAULT_PLAYER_RANGE, DEFAULT_SIMULATIONS, DEFAULT_WORKERS,
    HAND_SIZE, MAX_PLAYERS, MIN_PLAYERS, TrialOutcome,
)
from equity_core.hand_ranker import compare_hands, evaluate_hand
from equity_core.logging_utils import get_logger

logger = get_logger(__name__)


class TrialCounts(NamedTuple):
    wins: int = 0
    ties: int = 0
    losses: int = 0

    @property
    def total(self):
        return self.wins + self.ties + self.losses


def combine_counts(a: TrialCounts, b: TrialCounts) -> TrialCounts:
    return TrialCounts(a.wins + b.wins, a.ties + b.ties, a.losses + b.losses)


class SimulationResult(NamedTuple):
    win_rate: float
    tie_rate: float
    loss_rate: float

    @classmethod
    def from_counts(cls, counts: TrialCounts):
        total = counts.total
        if total == 0:
            raise ValueError("Cannot compute rates from zero trials")
        return cls(counts.wins / total, counts.ties / total, counts.losses / total)

    def expected_value(self, num_players: int) -> float:
        """Net return of a $1 bet when the winner takes the whole pot"""
        return num_players * self.win_rate + self.tie_rate - 1.0


def validate_situation(hand: Sequence[Card], board: Sequence[Card], num_players: int,
                       simulations: Optional[int] = None):
    """Reject impossible setups before any trial runs"""
    if len(hand) != HAND_SIZE:
        raise InvalidHandError(f"Invalid hand length: expected {HAND_SIZE} cards, found {len(hand)}")
    if len(board) > BOARD_SIZE:
        raise InvalidHandError(f"Invalid board length: expected at most {BOARD_SIZE} cards, found {len(board)}")

    known = list(hand) + list(board)
    for card in known:
        if not (2 <= card.value <= 14 and 0 <= card.suit <= 3):
            raise InvalidHandError(f"Card out of range: value {card.value}, suit {card.suit}")

    duplicates = sorted({str(card) for card in known if known.count(card) > 1})
    if duplicates:
        raise InvalidHandError(f"Duplicate cards in hand/board: {' '.join(duplicates)}")

    if not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
        raise InvalidHandError(f"Number of players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {num_players}")
    if simulations is not None and simulations <= 0:
        raise InvalidHandError(f"Number of simulations must be positive, got {simulations}")


def run_trial(hand: Sequence[Card], board: Sequence[Card], num_players: int, rng) -> TrialOutcome:
    """Play out one random completion and score it for the tracked player"""
    deck = Deck()
    deck.remove_known(hand, board)
    deck.shuffle(rng)

    opponent_hands = [deck.draw(2) for _ in range(num_players - 1)]

    simulated_board = list(board)
    while len(simulated_board) < BOARD_SIZE:
        simulated_board.append(deck.deal())

    player_rank = evaluate_hand(hand, simulated_board)

    beaten = tied = 0
    for other_hand in opponent_hands:
        result = compare_hands(player_rank, evaluate_hand(other_hand, simulated_board))
        if result < 0:
            # One stronger opponent decides the trial
            return TrialOutcome.LOSS
        if result > 0:
            beaten += 1
        else:
            tied += 1

    if tied == len(opponent_hands):
        return TrialOutcome.TIE
    if beaten == len(opponent_hands):
        return TrialOutcome.WIN
    # Split between beaten and tied opponents: neither a clean win nor a full tie
    return TrialOutcome.LOSS


def _simulate_batch(args) -> TrialCounts:
    """Worker entry point: (hand, board, num_players, trials, seed_sequence)"""
    hand, board, num_players, trials, seed_sequence = args
    rng = np.random.default_rng(seed_sequence)

    wins = ties = losses = 0
    for _ in range(trials):
        outcome = run_trial(hand, board, num_players, rng)
        if outcome is TrialOutcome.WIN:
            wins += 1
        elif outcome is TrialOutcome.TIE:
            ties += 1
        else:
            losses += 1
    return TrialCounts(wins, ties, losses)


def plan_batches(simulations: int, batch_size: int = DEFAULT_BATCH_SIZE) -> List[int]:
    """Split the trial count into batch sizes; the last batch takes the remainder"""
    if batch_size <= 0:
        raise ValueError(f"Batch size must be positive, got {batch_size}")
    full, remainder = divmod(simulations, batch_size)
    batches = [batch_size] * full
    if remainder:
        batches.append(remainder)
    return batches


def simulate_poker_hand(hand: Sequence[Card], board: Sequence[Card], num_players: int,
                        simulations: int = DEFAULT_SIMULATIONS, workers: Optional[int] = None,
                        seed: Optional[int] = None, batch_size: int = DEFAULT_BATCH_SIZE) -> SimulationResult:
    """Estimate win/tie/loss rates against num_players - 1 random opponents.

    Args:
        hand: the tracked player's two hole cards
        board: 0-5 known community cards
        num_players: players at the table, tracked player included
        simulations: number of trials
        workers: worker processes (1 runs in-process, None uses the default)
        seed: root seed; None draws fresh entropy

    Returns:
        SimulationResult with rates summing to 1.0
    """
    validate_situation(hand, board, num_players, simulations)
    hand, board = tuple(hand), tuple(board)

    batches = plan_batches(simulations, batch_size)
    seeds = np.random.SeedSequence(seed).spawn(len(batches))
    jobs = [(hand, board, num_players, trials, child) for trials, child in zip(batches, seeds)]

    workers = min(workers or DEFAULT_WORKERS, len(jobs))
    logger.debug("Simulating %d trials for %d players in %d batches on %d workers",
                 simulations, num_players, len(jobs), workers)

    start = time.perf_counter()
    if workers > 1:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            batch_counts = list(executor.map(_simulate_batch, jobs))
    else:
        batch_counts = [_simulate_batch(job) for job in jobs]

    counts = reduce(combine_counts, batch_counts, TrialCounts())
    result = SimulationResult.from_counts(counts)
    logger.info("%d players: %d wins, %d ties, %d losses in %.2fs",
                num_players, counts.wins, counts.ties, counts.losses, time.perf_counter() - start)
    return result


def simulate_player_range(hand: Sequence[Card], board: Sequence[Card],
                          players: Optional[Iterable[int]] = None,
                          **kwargs) -> List[Tuple[int, SimulationResult]]:
    """Run simulate_poker_hand for each player count (default 2..5)"""
    if players is None:
        low, high = DEFAULT_PLAYER_RANGE
        players = range(low, high + 1)
    return [(num_players, simulate_poker_hand(hand, board, num_players, **kwargs))
            for num_players in players]
