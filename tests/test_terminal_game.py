from __future__ import annotations

import io
import sys
from random import Random

import pytest

import terminal_game
from game_settings import GameSettings
from simulation import BalloonArcherEngine


class _FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class _ScriptedKeys:
    """호출마다 timeout 만큼 시계를 진행시키고 준비된 키를 돌려준다."""

    def __init__(self, clock: _FakeClock, script: list[list[str]], jump: float = 0.0):
        self.clock = clock
        self.script = list(script)
        self.jump = jump
        self.timeouts: list[float] = []

    def read_keys(self, timeout: float) -> list[str]:
        self.timeouts.append(timeout)
        self.clock.now += max(0.0, timeout) + self.jump
        return self.script.pop(0) if self.script else []


def _engine() -> BalloonArcherEngine:
    return BalloonArcherEngine(settings=GameSettings(spawn_chance=0.0, tick_seconds=0.25), rng=Random(1))


def test_decode_keys_handles_arrows_space_and_ctrl_c():
    assert terminal_game.decode_keys("\x1b[A\x1b[B \x03Q") == ["up", "down", "space", "ctrl+c", "q"]
    assert terminal_game.decode_keys("\x1bOA") == ["up"]
    assert terminal_game.decode_keys("\x1b") == ["esc"]
    assert terminal_game.decode_keys("\x1b[C\x1b[D") == ["right", "left"]
    assert terminal_game.decode_keys("") == []


def test_run_loop_ticks_between_input_and_stops_on_quit():
    clock = _FakeClock()
    keys = _ScriptedKeys(clock, [["space"], [], [], ["q"]])
    frames = []
    engine = _engine()

    ran = terminal_game.run_loop(engine, keys, frames.append, clock=clock)

    assert ran == 3
    assert engine.state.arrows[0].x == 8
    assert len(frames) == 4
    assert keys.timeouts == [0.25, 0.25, 0.25, 0.25]


def test_run_loop_stops_after_max_ticks():
    clock = _FakeClock()
    engine = _engine()
    frames = []

    ran = terminal_game.run_loop(engine, _ScriptedKeys(clock, []), frames.append, clock=clock, max_ticks=5)

    assert ran == 5
    assert engine.state.tick == 5
    assert frames


def test_run_loop_caps_catch_up_ticks_when_far_behind():
    clock = _FakeClock()
    keys = _ScriptedKeys(clock, [[], ["q"]], jump=2.0)
    engine = _engine()

    ran = terminal_game.run_loop(engine, keys, lambda frame: None, clock=clock)

    assert ran == terminal_game.MAX_CATCH_UP_TICKS
    assert keys.timeouts[1] == pytest.approx(0.25)


def test_key_reader_requires_a_terminal():
    with pytest.raises(RuntimeError):
        with terminal_game.TerminalKeyReader(io.StringIO()):
            pass


def test_parse_args(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["terminal_game.py", "--seed", "7", "--tick-seconds", "0.2"])

    args = terminal_game.parse_args()

    assert args.seed == 7
    assert args.tick_seconds == 0.2
    assert args.settings is None


def test_main_reports_startup_failure(monkeypatch):
    def _boom(engine, console=None):
        raise RuntimeError("stdin is not a terminal")

    monkeypatch.setattr(terminal_game, "play", _boom)

    with pytest.raises(SystemExit) as exc:
        terminal_game.main(["--seed", "1"])

    assert "Error running program" in str(exc.value)


def test_main_reports_bad_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text('{"max_arrows": -1}', encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        terminal_game.main(["--settings", str(path)])

    assert "Error running program" in str(exc.value)


def test_main_prints_final_score(monkeypatch, capsys):
    monkeypatch.setattr(terminal_game, "play", lambda engine, console=None: 4)

    terminal_game.main([])

    assert "Final score: 4" in capsys.readouterr().out
