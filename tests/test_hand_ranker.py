"""
Tests for hand ranking and comparison
"""

import pytest

from equity_core.card_deck import Card, InvalidHandError, parse_cards
from equity_core.game_constants import HandCategory
from equity_core.hand_ranker import (
    HandRank, compare_hands, compare_kickers, describe_hand, evaluate_hand, rank_cards,
)


def rank(text):
    return rank_cards(parse_cards(text))


class TestCategories:
    def test_high_card(self):
        assert rank("3h 5d 6s 7h 9h Jc Kd") == HandRank.high_card(13, 11, 9, 7, 6)

    @pytest.mark.parametrize("text", ["2h 4d 6c 8s Th", "Ks 3d 9c 7h 5s", "Ah Qd 8c 6s 4h"])
    def test_unpaired_five_cards_are_high_card_descending(self, text):
        values = sorted((card.value for card in parse_cards(text)), reverse=True)
        assert rank(text) == HandRank.high_card(*values)

    def test_one_pair(self):
        assert rank("Th Td 2c 5s 8h Kd 3c") == HandRank.one_pair(10, 13, 8, 5)

    def test_two_pair(self):
        assert rank("Th Td 2c 2s 8h Kd 3c") == HandRank.two_pair(10, 2, 13)

    def test_three_pairs_uses_third_pair_as_kicker(self):
        assert rank("Th Td 8c 8s 6h 6d 3c") == HandRank.two_pair(10, 8, 6)

    def test_three_of_a_kind(self):
        assert rank("7h 7d 7c 2s Jh 9d 4c") == HandRank.three_of_a_kind(7, 11, 9)

    def test_straight(self):
        assert rank("5h 6d 7c 8s 9h Kd 2c") == HandRank.straight(9)

    def test_straight_ace_low(self):
        hand = [Card(14, 0), Card(3, 0)]
        board = [Card(4, 0), Card(5, 0), Card(2, 1), Card(8, 1)]
        assert evaluate_hand(hand, board) == HandRank.straight(5)

    def test_straight_beats_trips_in_same_hand(self):
        assert rank("7h 7d 7c 8s 9h Td Jc") == HandRank.straight(11)

    def test_straight_with_pair(self):
        assert rank("2h 3d 4c 5s 6h 6d Kc") == HandRank.straight(6)

    def test_flush(self):
        hand = [Card(5, 1), Card(8, 1)]
        board = [Card(8, 2), Card(14, 0), Card(4, 1), Card(14, 1), Card(6, 1)]
        assert evaluate_hand(hand, board) == HandRank.flush(14, 8, 6, 5, 4)

    def test_flush_keeps_five_highest_of_six(self):
        assert rank("2h 4h 7h 9h Jh Kh Ac") == HandRank.flush(13, 11, 9, 7, 4)

    def test_flush_beats_straight_in_same_hand(self):
        assert rank("5h 6h 7h 8d 9h 2h Kh") == HandRank.flush(13, 9, 7, 6, 5)


class TestFullHouse:
    def test_trips_and_pair(self):
        assert rank("7h 7d 7c 5s 5h 8d 4c") == HandRank.full_house(7, 5)

    def test_higher_value_fills_the_trips_slot(self):
        hand = [Card(2, 0), Card(2, 1)]
        board = [Card(2, 2), Card(3, 0), Card(3, 1)]
        assert evaluate_hand(hand, board) == HandRank.full_house(3, 2)

    def test_two_trips(self):
        hand = [Card(2, 0), Card(2, 1)]
        board = [Card(2, 2), Card(3, 3), Card(3, 0), Card(3, 1)]
        assert evaluate_hand(hand, board) == HandRank.full_house(3, 2)

    def test_trips_with_two_pairs_takes_best_pair(self):
        assert rank("5h 5d 5c 9s 9h 3d 3c") == HandRank.full_house(9, 5)

    def test_equal_full_houses_from_different_cards(self):
        first = rank("Kh Kd Kc 7s 7h 2d 3c")
        second = rank("Ks Kd Kc 7d 7c 4h 5s")
        assert first == second == HandRank.full_house(13, 7)
        assert compare_hands(first, second) == 0


class TestFourOfAKind:
    @pytest.mark.parametrize("board, kicker", [
        ("2c 2s 9h 8h 8d", 9),
        ("2c 2s 6h 8h 8d", 8),
        ("2c 2s 7h 7d 7c", 7),
        ("2c 2s 6h Td 5c", 10),
    ])
    def test_kicker_is_best_remaining_value(self, board, kicker):
        hand = parse_cards("2h 2d")
        assert evaluate_hand(hand, parse_cards(board)) == HandRank.four_of_a_kind(2, kicker)

    def test_quad_aces_with_deuces_on_board(self):
        hand = parse_cards("As Ad")
        board = parse_cards("Ah Ac 2s 2d 2h")
        assert evaluate_hand(hand, board) == HandRank.four_of_a_kind(14, 2)


class TestStraightFlush:
    def test_straight_flush(self):
        hand = [Card(2, 0), Card(3, 0)]
        board = [Card(4, 0), Card(5, 0), Card(6, 0), Card(8, 1)]
        assert evaluate_hand(hand, board) == HandRank.straight_flush(6)

    def test_run_across_suits_is_not_a_straight_flush(self):
        hand = [Card(2, 0), Card(3, 0)]
        board = [Card(4, 0), Card(5, 0), Card(6, 1), Card(8, 0)]
        assert evaluate_hand(hand, board) == HandRank.flush(8, 5, 4, 3, 2)

    def test_straight_flush_ace_low(self):
        hand = [Card(14, 0), Card(3, 0)]
        board = [Card(4, 0), Card(5, 0), Card(2, 0), Card(8, 1)]
        assert evaluate_hand(hand, board) == HandRank.straight_flush(5)

    def test_straight_flush_beats_pair_in_hand(self):
        hand = [Card(8, 0), Card(8, 1)]
        board = [Card(9, 0), Card(10, 0), Card(11, 0), Card(12, 0)]
        assert evaluate_hand(hand, board) == HandRank.straight_flush(12)

    def test_straight_flush_uses_lower_run_than_top_flush_cards(self):
        # Top five hearts are A K 6 5 4; the run is 2-6
        assert rank("2h 3h 4h 5h 6h Kh Ah") == HandRank.straight_flush(6)
        assert rank("8h 9h Th Jh Qh 2h Kc") == HandRank.straight_flush(12)

    def test_king_high_with_offsuit_ace(self):
        hand = [Card(9, 1), Card(9, 2)]
        board = [Card(10, 1), Card(11, 1), Card(12, 1), Card(13, 1), Card(14, 0)]
        assert evaluate_hand(hand, board) == HandRank.straight_flush(13)

    def test_royal_flush(self):
        hand = [Card(9, 1), Card(9, 2)]
        board = [Card(10, 1), Card(11, 1), Card(12, 1), Card(13, 1), Card(14, 1)]
        assert evaluate_hand(hand, board) == HandRank.royal_flush()

    def test_suited_run_is_never_a_plain_flush(self):
        for text in ["2s 3s 4s 5s 6s Ks Kd", "As 2s 3s 4s 5s 9s Qd", "Ts Js Qs Ks As 9s 8s"]:
            assert rank(text).category in (HandCategory.STRAIGHT_FLUSH, HandCategory.ROYAL_FLUSH)


class TestComparison:
    def test_three_of_a_kind_tie(self):
        assert compare_hands(HandRank.three_of_a_kind(10, 9, 8), HandRank.three_of_a_kind(10, 9, 8)) == 0

    def test_three_of_a_kind_first_kicker(self):
        assert compare_hands(HandRank.three_of_a_kind(10, 9, 6), HandRank.three_of_a_kind(10, 8, 6)) == 1

    def test_three_of_a_kind_second_kicker(self):
        assert compare_hands(HandRank.three_of_a_kind(10, 9, 8), HandRank.three_of_a_kind(10, 9, 7)) == 1

    def test_flush_last_card(self):
        assert compare_hands(HandRank.flush(10, 9, 8, 7, 4), HandRank.flush(10, 9, 8, 7, 5)) == -1

    def test_two_pair_kicker(self):
        assert compare_hands(HandRank.two_pair(10, 9, 8), HandRank.two_pair(10, 9, 7)) == 1

    def test_one_pair_kicker(self):
        assert compare_hands(HandRank.one_pair(10, 9, 8, 7), HandRank.one_pair(10, 9, 8, 6)) == 1

    def test_flush_tie(self):
        assert compare_hands(HandRank.flush(14, 8, 6, 5, 4), HandRank.flush(14, 8, 6, 5, 4)) == 0

    def test_high_card_tie(self):
        assert compare_hands(HandRank.high_card(10, 9, 8, 7, 4), HandRank.high_card(10, 9, 8, 7, 4)) == 0

    def test_full_house_slots_ignore_which_value_is_tripled(self):
        board = parse_cards("2d 2c 3d 3c")
        first = evaluate_hand(parse_cards("2h 5d"), board)
        second = evaluate_hand(parse_cards("3h 4h"), board)
        assert first == second == HandRank.full_house(3, 2)
        assert compare_hands(second, first) == 0

    def test_category_outranks_kickers(self):
        ladder = [
            HandRank.high_card(14, 13, 12, 11, 9),
            HandRank.one_pair(2, 5, 4, 3),
            HandRank.two_pair(3, 2, 4),
            HandRank.three_of_a_kind(2, 4, 3),
            HandRank.straight(5),
            HandRank.flush(7, 5, 4, 3, 2),
            HandRank.full_house(2, 3),
            HandRank.four_of_a_kind(2, 3),
            HandRank.straight_flush(5),
            HandRank.royal_flush(),
        ]
        for lower, higher in zip(ladder, ladder[1:]):
            assert compare_hands(higher, lower) == 1
            assert compare_hands(lower, higher) == -1
            assert lower < higher
        assert sorted(reversed(ladder)) == ladder

    def test_royal_flushes_tie(self):
        assert compare_hands(HandRank.royal_flush(), HandRank.royal_flush()) == 0

    def test_compare_kickers(self):
        assert compare_kickers([10, 9], [10, 9]) == 0
        assert compare_kickers([10, 9, 2], [10, 9]) == 1
        assert compare_kickers([10], [11]) == -1


def test_rank_cards_rejects_wrong_card_count():
    with pytest.raises(InvalidHandError):
        rank("Ah Kd Qc Js")
    with pytest.raises(InvalidHandError):
        rank("Ah Kd Qc Js 9h 8d 7c 6s")


def test_describe_hand():
    assert describe_hand(HandRank.full_house(13, 7)) == "Full House (K 7)"
    assert describe_hand(HandRank.straight(5)) == "Straight (5)"
    assert describe_hand(HandRank.royal_flush()) == "Royal Flush"
