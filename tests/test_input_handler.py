from __future__ import annotations

import pytest

from input_handler import Action, action_for_key, apply_action
from model import Arrow, GameState


@pytest.mark.parametrize(
    "key, expected",
    [
        ("q", Action.QUIT),
        ("ctrl+c", Action.QUIT),
        ("up", Action.MOVE_UP),
        ("down", Action.MOVE_DOWN),
        ("space", Action.SHOOT),
        (" ", Action.SHOOT),
        ("Q", Action.QUIT),
        ("left", None),
        ("w", None),
    ],
)
def test_action_for_key(key, expected):
    assert action_for_key(key) is expected


def test_quit_returns_false_and_leaves_state():
    state = GameState(archer=4)

    assert apply_action(state, Action.QUIT) is False
    assert state.archer == 4
    assert state.arrows == []


def test_moves_are_clamped_to_lane_range():
    state = GameState(archer=0, height=20)
    assert apply_action(state, Action.MOVE_UP) is True
    assert state.archer == 0

    state.archer = 19
    apply_action(state, Action.MOVE_DOWN)
    assert state.archer == 19

    apply_action(state, Action.MOVE_UP)
    assert state.archer == 18


def test_shoot_spawns_arrow_at_column_two_on_archer_lane():
    state = GameState(archer=7)

    apply_action(state, Action.SHOOT)

    assert state.arrows == [Arrow(x=2, y=7)]


def test_shoot_respects_active_arrow_cap():
    state = GameState()

    for _ in range(5):
        apply_action(state, Action.SHOOT)
    assert len(state.arrows) == 3

    state.arrows[0].active = False
    apply_action(state, Action.SHOOT)
    assert state.active_arrow_count() == 3


def test_shoot_cap_is_configurable():
    state = GameState()

    for _ in range(5):
        apply_action(state, Action.SHOOT, max_arrows=1)

    assert len(state.arrows) == 1
