#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Balloon Archer 아케이드 창 실행기.

터미널판과 같은 엔진/래스터라이저를 쓰고, 격자를 색 구간 단위로 그린다.

Usage:
    python arcade_game.py [--seed 7] [--tick-seconds 0.1] [--settings settings.json]
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from pydantic import ValidationError
from rich.color import Color

from config import BORDER_COLOR, CONTROLS_COLOR, CONTROLS_HELP, SCORE_COLOR, TITLE, TITLE_COLOR
from game_settings import load_settings
from renderer import iter_runs, rasterize
from simulation import BalloonArcherEngine, build_default_engine

try:
    import arcade
except ImportError:  # optional dependency
    arcade = None


FONT_CANDIDATES: tuple[str, ...] = (
    "DejaVu Sans Mono",
    "Menlo",
    "Consolas",
    "Noto Sans Mono",
    "Courier New",
    "monospace",
)

CELL_W = 11
CELL_H = 20
MARGIN = 40
DEFAULT_RGB = (230, 230, 230)


def _pick_font_name() -> str:
    """설치된 고정폭 폰트 후보 중 첫 번째를 선택한다."""

    try:
        import pyglet

        for name in FONT_CANDIDATES:
            if pyglet.font.have_font(name):
                return name
    except Exception:
        pass
    return FONT_CANDIDATES[0]


@lru_cache(maxsize=64)
def xterm_rgb(color: Optional[str]) -> tuple[int, int, int]:
    """xterm-256 색 번호를 RGB 로 바꾼다."""
    if color is None:
        return DEFAULT_RGB
    triplet = Color.parse(f"color({color})").get_truecolor()
    return triplet.red, triplet.green, triplet.blue


def key_name(symbol: int, modifiers: int = 0) -> Optional[str]:
    if arcade is None:
        return None
    if symbol == arcade.key.C and modifiers & arcade.key.MOD_CTRL:
        return "ctrl+c"
    names = {
        arcade.key.UP: "up",
        arcade.key.DOWN: "down",
        arcade.key.SPACE: "space",
        arcade.key.Q: "q",
    }
    return names.get(symbol)


@dataclass
class TickAccumulator:
    tick_seconds: float = 0.1
    accumulator: float = 0.0
    max_catch_up: int = 5

    def update(self, dt: float) -> int:
        """dt 동안 진행해야 할 틱 수. 너무 밀리면 max_catch_up 에서 끊는다."""
        self.accumulator += max(0.0, dt)
        ticks = 0
        while self.accumulator >= self.tick_seconds:
            self.accumulator -= self.tick_seconds
            ticks += 1
            if ticks >= self.max_catch_up:
                self.accumulator = 0.0
                break
        return ticks


class BalloonArcherArcadeWindow(arcade.Window if arcade else object):
    def __init__(self, engine: BalloonArcherEngine):
        if arcade is None:
            raise RuntimeError("arcade 패키지가 설치되어 있지 않습니다.")
        state = engine.state
        board_w = state.width * CELL_W
        board_h = state.height * CELL_H
        super().__init__(board_w + MARGIN * 2, board_h + MARGIN * 4, "Balloon Archer")
        self.engine = engine
        self.clock = TickAccumulator(tick_seconds=engine.settings.tick_seconds)
        self.selected_font = _pick_font_name()
        self.board_left = MARGIN
        self.board_top = MARGIN * 3 + board_h
        self.board_w = board_w
        self.board_h = board_h

    def on_draw(self) -> None:
        self.clear((18, 20, 26))
        state = self.engine.state

        arcade.draw_text(
            TITLE,
            self.width / 2,
            self.height - 30,
            xterm_rgb(TITLE_COLOR),
            16,
            anchor_x="center",
            bold=True,
            font_name=self.selected_font,
        )

        left = self.board_left - 6
        right = self.board_left + self.board_w + 6
        bottom = self.board_top - self.board_h - 6
        top = self.board_top + 6
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, xterm_rgb(BORDER_COLOR), 2)

        for row_idx, row in enumerate(rasterize(state)):
            y = self.board_top - (row_idx + 1) * CELL_H + 4
            for col, chunk, color in iter_runs(row):
                if not chunk.strip():
                    continue
                arcade.draw_text(
                    chunk,
                    self.board_left + col * CELL_W,
                    y,
                    xterm_rgb(color),
                    12,
                    font_name=self.selected_font,
                )

        arcade.draw_text(
            f"Score: {state.score}",
            self.width / 2,
            MARGIN + 20,
            xterm_rgb(SCORE_COLOR),
            13,
            anchor_x="center",
            font_name=self.selected_font,
        )
        arcade.draw_text(
            CONTROLS_HELP,
            self.width / 2,
            MARGIN - 6,
            xterm_rgb(CONTROLS_COLOR),
            11,
            anchor_x="center",
            font_name=self.selected_font,
        )

    def on_update(self, delta_time: float) -> None:
        for _ in range(self.clock.update(delta_time)):
            self.engine.tick_once()

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        name = key_name(symbol, modifiers)
        if name is None:
            return
        if not self.engine.handle_key(name):
            self.close()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Balloon Archer (arcade window)")
    parser.add_argument("--seed", type=int, default=None, help="난수 시드(기본: 무작위)")
    parser.add_argument("--tick-seconds", type=float, default=None, help="틱 간격(초, 기본: 0.1)")
    parser.add_argument("--settings", default=None, help="설정 JSON 파일 경로")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    if arcade is None:
        raise SystemExit("Error running program: 실행하려면 `pip install arcade`가 필요합니다.")

    try:
        settings = load_settings(args.settings, tick_seconds=args.tick_seconds)
    except ValidationError as exc:
        raise SystemExit(f"Error running program: {exc}")

    engine = build_default_engine(seed=args.seed, settings=settings)
    BalloonArcherArcadeWindow(engine)
    arcade.run()
    print(f"Final score: {engine.state.score}")


if __name__ == "__main__":
    main()
