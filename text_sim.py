#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""텍스트 기반 Balloon Archer 시뮬레이션 실행기.

터미널 입력 없이 엔진을 N틱 돌리고, 매 틱마다 아래를 출력한다.
- 요약(점수/화살/풍선 수)
- 궁수/화살/풍선 좌표
- 보드 스냅샷
- 최근 로그
"""

from __future__ import annotations

import argparse
from typing import Optional

from pydantic import ValidationError

from game_settings import GameSettings, load_settings, settings_json
from input_handler import Action
from renderer import board_text
from simulation import BalloonArcherEngine, build_default_engine


def _dump_system(engine: BalloonArcherEngine) -> None:
    print("[SYSTEM]")
    print(f"- 틱: {engine.state.tick}")
    print(f"- 설정값: {settings_json(engine.settings)}")


def _dump_entities(engine: BalloonArcherEngine) -> None:
    state = engine.state
    print(f"[ARCHER] lane={state.archer}")
    print(f"[ARROWS] count={len(state.arrows)}")
    for i, arrow in enumerate(state.arrows):
        print(f"- #{i:02d} pos=({arrow.x},{arrow.y}) active={arrow.active}")
    print(f"[BALLOONS] count={len(state.balloons)}")
    for i, b in enumerate(state.balloons):
        print(f"- #{i:02d} pos=({b.x},{b.y}) size={b.width}x{b.height} color={b.color}")
    if state.explosions:
        print(f"[EXPLOSIONS] count={len(state.explosions)}")
        for i, boom in enumerate(state.explosions):
            print(f"- #{i:02d} pos=({boom.x},{boom.y})")


def run_text_simulation(
    ticks: int,
    seed: int,
    *,
    shoot_every: int = 0,
    settings: Optional[GameSettings] = None,
    show_board: bool = True,
) -> BalloonArcherEngine:
    engine = build_default_engine(seed=seed, settings=settings or load_settings())

    print(f"[TEXT-SIM] 시작 seed={seed}, ticks={ticks}")
    _dump_system(engine)
    for tick in range(1, ticks + 1):
        if shoot_every > 0 and (tick - 1) % shoot_every == 0:
            engine.perform(Action.SHOOT)
        engine.tick_once()

        state = engine.state
        print(f"\n{'=' * 28} Tick {tick:02d} {'=' * 28}")
        print(f"[SUMMARY] score={state.score} arrows={len(state.arrows)} balloons={len(state.balloons)}")
        _dump_entities(engine)
        if show_board:
            print("[BOARD]")
            print(board_text(state))

        print("[RECENT LOGS]")
        if engine.log:
            for ln in engine.log[-10:]:
                print(f"- {ln}")
        else:
            print("- (없음)")

    print(f"\n[TEXT-SIM] 완료 score={engine.state.score}")
    return engine


def main() -> None:
    parser = argparse.ArgumentParser(description="텍스트 기반 Balloon Archer 시뮬레이션")
    parser.add_argument("--ticks", type=int, default=50, help="진행할 틱 수(기본: 50)")
    parser.add_argument("--seed", type=int, default=42, help="랜덤 시드(기본: 42)")
    parser.add_argument("--shoot-every", type=int, default=5, help="N틱마다 자동 발사(0이면 발사 안 함)")
    parser.add_argument("--settings", default=None, help="설정 JSON 파일 경로")
    parser.add_argument("--no-board", action="store_true", help="보드 스냅샷 출력 생략")
    args = parser.parse_args()

    if args.ticks <= 0:
        raise SystemExit("--ticks 는 1 이상이어야 합니다.")

    try:
        settings = load_settings(args.settings)
    except ValidationError as exc:
        raise SystemExit(f"Error running program: {exc}")

    run_text_simulation(
        ticks=args.ticks,
        seed=args.seed,
        shoot_every=max(0, args.shoot_every),
        settings=settings,
        show_board=not args.no_board,
    )


if __name__ == "__main__":
    main()
