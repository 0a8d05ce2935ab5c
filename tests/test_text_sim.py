from __future__ import annotations

import sys

import pytest

import text_sim
from game_settings import GameSettings


def test_run_text_simulation_dumps_every_tick(capsys):
    engine = text_sim.run_text_simulation(ticks=12, seed=3, shoot_every=4)
    out = capsys.readouterr().out

    assert engine.state.tick == 12
    assert "[TEXT-SIM] 시작 seed=3, ticks=12" in out
    assert "Tick 12" in out
    assert out.count("[BOARD]") == 12
    assert "shoot from lane 10" in out
    assert "[TEXT-SIM] 완료" in out


def test_run_text_simulation_is_deterministic_for_a_seed(capsys):
    settings = GameSettings(spawn_chance=0.5)
    a = text_sim.run_text_simulation(ticks=40, seed=9, shoot_every=2, settings=settings, show_board=False)
    b = text_sim.run_text_simulation(ticks=40, seed=9, shoot_every=2, settings=settings, show_board=False)
    capsys.readouterr()

    assert a.state == b.state
    assert a.log == b.log


def test_main_rejects_non_positive_ticks(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["text_sim.py", "--ticks", "0"])

    with pytest.raises(SystemExit):
        text_sim.main()
