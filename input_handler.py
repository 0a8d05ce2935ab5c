#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""키 입력 -> 게임 액션 매핑."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from config import ARROW_START_X, MAX_ARROWS
from model import Arrow, GameState


class Action(Enum):
    QUIT = "quit"
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    SHOOT = "shoot"


KEY_BINDINGS: Dict[str, Action] = {
    "q": Action.QUIT,
    "ctrl+c": Action.QUIT,
    "up": Action.MOVE_UP,
    "down": Action.MOVE_DOWN,
    "space": Action.SHOOT,
}


def action_for_key(key: str) -> Optional[Action]:
    return KEY_BINDINGS.get(str(key).strip().lower() if key != " " else "space")


def apply_action(state: GameState, action: Action, max_arrows: int = MAX_ARROWS) -> bool:
    if action is Action.QUIT:
        return False
    if action is Action.MOVE_UP:
        state.archer = max(0, state.archer - 1)
    elif action is Action.MOVE_DOWN:
        state.archer = min(state.height - 1, state.archer + 1)
    elif action is Action.SHOOT and state.active_arrow_count() < max_arrows:
        state.arrows.append(Arrow(x=ARROW_START_X, y=state.archer))
    return True
