"""
Monte Carlo win/tie/loss simulation for Texas Hold'em situations
"""

from .monte_carlo import (
    TrialCounts, SimulationResult, combine_counts, validate_situation, run_trial,
    plan_batches, simulate_poker_hand, simulate_player_range,
)

__all__ = ['TrialCounts', 'SimulationResult', 'combine_counts', 'validate_situation', 'run_trial',
           'plan_batches', 'simulate_poker_hand', 'simulate_player_range']
