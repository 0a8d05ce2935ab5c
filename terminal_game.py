#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Balloon Archer 터미널 실행기.

Usage:
    python terminal_game.py [--seed 7] [--tick-seconds 0.1] [--settings settings.json]

고정 틱 스케줄러 루프:
    repeat { 다음 틱까지 입력 대기(select) -> 밀린 틱 진행 -> 렌더 }
"""

from __future__ import annotations

import argparse
import os
import select
import sys
import termios
import time
import tty
from typing import Callable, List, Optional, Protocol, TextIO

from pydantic import ValidationError
from rich.console import Console, RenderableType
from rich.live import Live

from game_settings import load_settings
from renderer import render_frame
from simulation import BalloonArcherEngine, build_default_engine

MAX_CATCH_UP_TICKS = 5

_ESCAPE_KEYS = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
}


def decode_keys(data: str) -> List[str]:
    """cbreak 모드에서 읽은 원시 입력을 키 이름 목록으로 바꾼다."""
    keys: List[str] = []
    i = 0
    while i < len(data):
        seq = data[i:i + 3]
        if seq in _ESCAPE_KEYS:
            keys.append(_ESCAPE_KEYS[seq])
            i += 3
            continue
        ch = data[i]
        i += 1
        if ch == "\x1b":
            keys.append("esc")
        elif ch == "\x03":
            keys.append("ctrl+c")
        elif ch == " ":
            keys.append("space")
        elif ch.isprintable():
            keys.append(ch.lower())
    return keys


class KeySource(Protocol):
    def read_keys(self, timeout: float) -> List[str]:
        ...


class TerminalKeyReader:
    """stdin 을 cbreak 모드로 바꾸고 select 로 논블로킹 폴링한다."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self._saved: Optional[list] = None

    def __enter__(self) -> "TerminalKeyReader":
        if not self.stream.isatty():
            raise RuntimeError("stdin is not a terminal")
        fd = self.stream.fileno()
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved)
            self._saved = None

    def read_keys(self, timeout: float) -> List[str]:
        fd = self.stream.fileno()
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout))
        if not ready:
            return []
        return decode_keys(os.read(fd, 64).decode("utf-8", errors="ignore"))


def run_loop(
    engine: BalloonArcherEngine,
    keys: KeySource,
    display: Callable[[RenderableType], None],
    *,
    clock: Callable[[], float] = time.monotonic,
    max_ticks: Optional[int] = None,
) -> int:
    """quit 키(또는 max_ticks)까지 게임을 돌리고 진행한 틱 수를 돌려준다."""
    tick_seconds = engine.settings.tick_seconds
    start_tick = engine.state.tick
    next_tick = clock() + tick_seconds
    display(render_frame(engine.state))

    while True:
        for key in keys.read_keys(next_tick - clock()):
            if not engine.handle_key(key):
                return engine.state.tick - start_tick

        now = clock()
        behind = 0
        while now >= next_tick:
            engine.tick_once()
            next_tick += tick_seconds
            behind += 1
            if max_ticks is not None and engine.state.tick - start_tick >= max_ticks:
                display(render_frame(engine.state))
                return engine.state.tick - start_tick
            if behind >= MAX_CATCH_UP_TICKS:
                next_tick = now + tick_seconds
                break

        display(render_frame(engine.state))


def play(engine: BalloonArcherEngine, console: Optional[Console] = None) -> int:
    console = console or Console()
    with TerminalKeyReader() as reader:
        with Live(render_frame(engine.state), console=console, screen=True, auto_refresh=False) as live:
            try:
                run_loop(engine, reader, lambda frame: live.update(frame, refresh=True))
            except KeyboardInterrupt:
                pass
    return engine.state.score


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Balloon Archer (terminal)")
    parser.add_argument("--seed", type=int, default=None, help="난수 시드(기본: 무작위)")
    parser.add_argument("--tick-seconds", type=float, default=None, help="틱 간격(초, 기본: 0.1)")
    parser.add_argument("--settings", default=None, help="설정 JSON 파일 경로")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        settings = load_settings(args.settings, tick_seconds=args.tick_seconds)
        engine = build_default_engine(seed=args.seed, settings=settings)
        score = play(engine)
    except (RuntimeError, ValidationError) as exc:
        raise SystemExit(f"Error running program: {exc}")
    print(f"Final score: {score}")


if __name__ == "__main__":
    main()
