"""Tests for snake_engine.movement."""

import logging
import random

from snake_engine.board import DIRECTIONS, Cell, get_new_head_position
from snake_engine.movement import (
    DEFAULT_MOVE,
    PATTERNS,
    Session,
    chase_tail,
    choose_move,
    decide,
    follow_pattern,
    most_open_space,
    random_safe_move,
)
from snake_engine.safety import get_safe_moves

NONE_SAFE = {"up": False, "down": False, "left": False, "right": False}


class TestChooseMove:
    def test_single_segment_always_finds_a_legal_move(self, make_state) -> None:
        session = Session(rng=random.Random(0))
        head = (2, 2)
        for turn in range(30):
            state = make_state([head], width=5, height=5, turn=turn)
            move = choose_move(state, session)
            assert get_safe_moves(state)[move]
            new_head = get_new_head_position(Cell(*head), move)
            assert 0 <= new_head.x < 5 and 0 <= new_head.y < 5
            head = tuple(new_head)

    def test_boxed_in_falls_back_to_default(self, make_state) -> None:
        state = make_state([(0, 0), (1, 0), (1, 1), (0, 1), (0, 2)], width=3, height=3)
        session = Session(last_direction="left")
        assert choose_move(state, session) == DEFAULT_MOVE
        assert session.last_direction == "left"

    def test_internal_fault_falls_back_to_default(self) -> None:
        assert choose_move(None, Session()) == DEFAULT_MOVE

    def test_records_last_direction(self, make_state) -> None:
        session = Session()
        move = choose_move(make_state([(5, 5), (5, 4), (5, 3)]), session)
        assert session.last_direction == move

    def test_same_state_and_memory_give_same_move(self, make_state) -> None:
        state = make_state(
            [(5, 5), (5, 4), (5, 3), (4, 3), (3, 3), (3, 4)],
            opponents=[("a", [(8, 8), (8, 9), (9, 9)], 50)],
            food=[(1, 1), (9, 2)],
            turn=17,
        )
        first = choose_move(state, Session(pattern_index=3))
        second = choose_move(state, Session(pattern_index=3))
        assert first == second

    def test_hunting_takes_priority(self, make_state) -> None:
        state = make_state(
            [(5, 5), (5, 4), (5, 3), (5, 2), (5, 1), (5, 0)],
            opponents=[("prey", [(8, 5), (9, 5)], 90)],
            food=[(0, 10)],
        )
        assert choose_move(state, Session()) == "right"

    def test_debug_logging_does_not_change_move(self, make_state, caplog) -> None:
        state = make_state([(5, 5), (5, 4), (5, 3)], food=[(2, 7)], turn=3)
        with caplog.at_level(logging.INFO):
            quiet = choose_move(state, Session())
        with caplog.at_level(logging.DEBUG):
            verbose = choose_move(state, Session())
        assert quiet == verbose
        assert "Open space" in caplog.text


class TestDecide:
    def test_pattern_cursor_advances(self, make_state, all_safe, space) -> None:
        state = make_state([(5, 5)])
        session = Session()
        assert decide(state, session, all_safe, space()) == "right"
        assert session.pattern_index == 1
        assert decide(state, session, all_safe, space()) == "down"
        assert session.pattern_index == 2

    def test_continues_straight(self, make_state, all_safe, space) -> None:
        state = make_state([(5, 5)])
        session = Session(last_direction="left")
        assert decide(state, session, all_safe, space(4, 4, 4, 4)) == "left"

    def test_most_space_when_nothing_else_applies(self, make_state, all_safe, space) -> None:
        state = make_state([(5, 5)])
        assert decide(state, Session(), all_safe, space(2, 3, 1, 3)) == "down"

    def test_roomless_moves_pick_first_in_order(self, make_state, space) -> None:
        state = make_state([(5, 5)])
        safe = {"up": False, "down": False, "left": True, "right": True}
        moves = {
            decide(state, Session(rng=random.Random(seed)), safe, space(0, 0, 0, 0))
            for seed in range(20)
        }
        assert moves == {"left"}

    def test_moves_into_vacating_tails_are_deterministic(self, make_state) -> None:
        # Only legal moves enter opponent tails, which profile to zero space
        state = make_state(
            [(1, 1)],
            opponents=[
                ("a", [(4, 2), (3, 2), (2, 2), (2, 1)], 100),
                ("b", [(4, 0), (3, 0), (2, 0), (1, 0)], 100),
                ("c", [(0, 4), (0, 3), (0, 2), (0, 1)], 100),
                ("d", [(4, 4), (3, 4), (2, 4), (1, 4), (1, 3), (1, 2)], 100),
            ],
            width=5,
            height=5,
        )
        assert all(get_safe_moves(state).values())
        moves = {choose_move(state, Session(rng=random.Random(seed))) for seed in range(20)}
        assert moves == {"up"}


class TestRandomSafeMove:
    def test_only_legal_moves(self) -> None:
        safe = {"up": True, "down": False, "left": True, "right": False}
        moves = {random_safe_move(Session(rng=random.Random(seed)), safe) for seed in range(20)}
        assert moves <= {"up", "left"}
        assert moves

    def test_seeded_choice_is_reproducible(self, all_safe) -> None:
        first = random_safe_move(Session(rng=random.Random(7)), all_safe)
        second = random_safe_move(Session(rng=random.Random(7)), all_safe)
        assert first == second

    def test_nothing_legal(self) -> None:
        assert random_safe_move(Session(), NONE_SAFE) is None


class TestDecideEdges:
    def test_nothing_legal(self, make_state, space) -> None:
        assert decide(make_state([(5, 5)]), Session(), NONE_SAFE, space()) is None

    def test_illegal_strategy_answer_is_ignored(self, make_state, space) -> None:
        # Food straight up, but up is not legal and nothing else is
        state = make_state([(5, 5)], food=[(5, 8)])
        safe = {"up": False, "down": False, "left": False, "right": False}
        assert decide(state, Session(), safe, space()) is None


class TestFallbacks:
    def test_pattern_picks_long_pattern_for_long_snakes(self, all_safe, space) -> None:
        session = Session()
        assert follow_pattern(session, 16, all_safe, space()) == PATTERNS["perimeter"][0]
        assert len(PATTERNS["perimeter"]) == 12
        assert len(PATTERNS["spiral"]) == 9

    def test_pattern_skips_cramped_steps(self, all_safe, space) -> None:
        session = Session()
        assert follow_pattern(session, 3, all_safe, space(right=5)) == "down"
        assert session.pattern_index == 2

    def test_pattern_wraps_around(self, all_safe, space) -> None:
        session = Session(pattern_index=8)
        assert follow_pattern(session, 3, all_safe, space()) == "right"
        assert session.pattern_index == 0

    def test_chase_tail_prefers_room(self, make_state, all_safe, space) -> None:
        me = make_state([(5, 5), (5, 4), (4, 4), (3, 4), (3, 3)]).you
        assert chase_tail(me, all_safe, space(left=3, down=4)) == "down"

    def test_chase_tail_needs_a_body(self, make_state, all_safe, space) -> None:
        assert chase_tail(make_state([(5, 5)]).you, all_safe, space()) is None

    def test_most_open_space_order_breaks_ties(self, all_safe, space) -> None:
        assert most_open_space(all_safe, space(5, 5, 5, 5)) == DIRECTIONS[0]
        assert most_open_space(NONE_SAFE, space()) is None
