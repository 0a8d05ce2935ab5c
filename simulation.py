#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Simulation step.

한 틱의 처리 순서:
1. 화살 전진
2. 풍선 상승 + 좌우 흔들림(클램프)
3. 충돌 판정 (화살 x 풍선 전수 검사)
4. 정리 (비활성 화살/터진 풍선 제거, 명중 풍선은 1프레임 폭발로 전환)
5. 스폰

각 단계 함수는 상태를 직접 갱신하고 로그용 이벤트 문자열을 돌려준다.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from config import ARROW_HIT_REACH, ARROW_START_X, LOG_LIMIT
from game_settings import DEFAULT_SETTINGS, GameSettings
from input_handler import Action, action_for_key, apply_action
from model import Arrow, Balloon, Explosion, GameState
from spawner import BalloonSpawner


def initial_state(settings: GameSettings = DEFAULT_SETTINGS) -> GameState:
    return GameState(
        width=settings.width,
        height=settings.height,
        archer=settings.archer_start,
        min_balloon_x=settings.min_balloon_x,
        max_balloon_x=settings.max_balloon_x,
    )


def arrow_hits(arrow: Arrow, balloon: Balloon) -> bool:
    return (
        arrow.x + ARROW_HIT_REACH >= balloon.x
        and arrow.x <= balloon.x + balloon.width
        and arrow.y >= balloon.y
        and arrow.y <= balloon.y + balloon.height
    )


def advance_arrows(state: GameState, step: int = 2) -> List[str]:
    events: List[str] = []
    for arrow in state.arrows:
        if not arrow.active:
            continue
        arrow.x += step
        if arrow.x >= state.width:
            arrow.active = False
            events.append(f"arrow missed on lane {arrow.y}")
    return events


def advance_balloons(state: GameState, rng: random.Random) -> List[str]:
    events: List[str] = []
    for balloon in state.balloons:
        if balloon.popped:
            continue
        balloon.y -= 1
        balloon.x += rng.randint(-1, 1)
        balloon.x = max(state.min_balloon_x, min(state.max_balloon_x, balloon.x))
        if balloon.y < 0:
            balloon.popped = True
            events.append(f"balloon escaped at x={balloon.x}")
    return events


def resolve_collisions(state: GameState) -> List[str]:
    events: List[str] = []
    for arrow in state.arrows:
        for balloon in state.balloons:
            if not arrow.active:
                break
            if balloon.popped or not arrow_hits(arrow, balloon):
                continue
            arrow.active = False
            balloon.explode()
            state.score += 1
            events.append(f"pop balloon at ({balloon.x},{balloon.y}) score={state.score}")
    return events


def cleanup(state: GameState) -> List[Explosion]:
    """비활성 화살과 터진 풍선을 목록에서 뺀다.

    명중으로 터진 풍선은 Explosion 으로 옮겨 다음 틱 시작 전까지 그려진다.
    """
    explosions = [Explosion(x=b.x, y=b.y, color=b.color, symbol=list(b.symbol)) for b in state.balloons if b.hit]
    state.arrows[:] = [a for a in state.arrows if a.active]
    state.balloons[:] = [b for b in state.balloons if not b.popped]
    state.explosions.extend(explosions)
    return explosions


@dataclass
class BalloonArcherEngine:
    settings: GameSettings = DEFAULT_SETTINGS
    rng: random.Random = field(default_factory=random.Random)
    state: Optional[GameState] = None
    spawner: Optional[BalloonSpawner] = None
    log: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.state is None:
            self.state = initial_state(self.settings)
        if self.spawner is None:
            self.spawner = BalloonSpawner(self.rng, self.settings)

    def add_log(self, message: str) -> None:
        self.log.append(f"[T{self.state.tick:03}] {message}")
        if len(self.log) > LOG_LIMIT:
            self.log = self.log[-LOG_LIMIT:]

    def tick_once(self) -> None:
        state = self.state
        state.explosions.clear()

        events = advance_arrows(state, self.settings.arrow_step)
        events += advance_balloons(state, self.rng)
        events += resolve_collisions(state)
        cleanup(state)

        spawned = self.spawner.maybe_spawn()
        if spawned is not None:
            state.balloons.append(spawned)
            events.append(f"spawn balloon at ({spawned.x},{spawned.y})")

        state.tick += 1
        for ev in events:
            self.add_log(ev)

    def perform(self, action: Action) -> bool:
        """입력 액션을 반영한다. QUIT 이면 False."""
        before = self.state.active_arrow_count()
        running = apply_action(self.state, action, max_arrows=self.settings.max_arrows)
        if action is Action.SHOOT:
            if self.state.active_arrow_count() > before:
                self.add_log(f"shoot from lane {self.state.archer} (x={ARROW_START_X})")
            else:
                self.add_log(f"shoot refused ({self.settings.max_arrows} arrows in flight)")
        return running

    def handle_key(self, key: str) -> bool:
        action = action_for_key(key)
        if action is None:
            return True
        return self.perform(action)


def build_default_engine(*, seed: Optional[int] = None, settings: GameSettings = DEFAULT_SETTINGS) -> BalloonArcherEngine:
    return BalloonArcherEngine(settings=settings, rng=random.Random(seed))
