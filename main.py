import argparse
import sys

from equity_core.card_deck import InvalidHandError, format_cards, parse_cards
from equity_core.game_constants import BOARD_SIZE, DEFAULT_PLAYER_RANGE, DEFAULT_SIMULATIONS
from equity_core.hand_ranker import describe_hand, evaluate_hand
from equity_core.logging_utils import LOG_LEVEL, setup_logging
from simulation.monte_carlo import simulate_player_range, validate_situation


def build_parser():
    parser = argparse.ArgumentParser(
        prog="poker-equity",
        description="Simulates a poker hand against random opponents",
    )
    parser.add_argument("-H", "--hand", help="hole cards, e.g. 'Ah Kd'")
    parser.add_argument("-b", "--board", default="", help="known board cards, e.g. '2c 5h 7d'")
    parser.add_argument("--min-players", type=int, default=DEFAULT_PLAYER_RANGE[0])
    parser.add_argument("--max-players", type=int, default=DEFAULT_PLAYER_RANGE[1])
    parser.add_argument("-n", "--simulations", type=int, default=DEFAULT_SIMULATIONS,
                        help="trials per player count")
    parser.add_argument("-w", "--workers", type=int, default=None, help="worker processes")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible runs")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def format_result(num_players, result):
    return (
        f"Number of players: {num_players}. "
        f"Simulated Win rate: {result.win_rate * 100:.2f}%, "
        f"Simulated Tie rate: {result.tie_rate * 100:.2f}%, "
        f"EV 1$ bet {result.expected_value(num_players):.2f}$"
    )


def main(argv=None):
    """Parse the situation, run the player sweep and print one line per player count"""
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else LOG_LEVEL)

    hand_input = args.hand
    if hand_input is None:
        # Interactive mode
        print("=" * 60)
        print("TEXAS HOLD'EM EQUITY SIMULATOR")
        print("=" * 60)
        hand_input = input("\nHole cards (e.g. 'Ah Kd'): ")
        args.board = input("Board cards (blank for preflop): ") or ""

    try:
        hand = parse_cards(hand_input)
        board = parse_cards(args.board)
        if args.max_players < args.min_players:
            raise InvalidHandError(f"Invalid player range: {args.min_players}..{args.max_players}")
        validate_situation(hand, board, args.min_players, args.simulations)
        validate_situation(hand, board, args.max_players, args.simulations)
        print(f"Hand: {format_cards(hand, pretty=True)}  Board: {format_cards(board, pretty=True) or '-'}")
        if len(board) == BOARD_SIZE:
            print(f"Made hand: {describe_hand(evaluate_hand(hand, board))}")

        results = simulate_player_range(
            hand, board,
            players=range(args.min_players, args.max_players + 1),
            simulations=args.simulations,
            workers=args.workers,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for num_players, result in results:
        print(format_result(num_players, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
