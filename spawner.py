#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

from random import Random
from typing import Optional

from game_settings import DEFAULT_SETTINGS, GameSettings
from model import BALLOON_ARTS, BALLOON_COLORS, Balloon


class BalloonSpawner:
    def __init__(self, rng: Random, settings: GameSettings = DEFAULT_SETTINGS):
        self.rng = rng
        self.settings = settings

    @property
    def spawn_row(self) -> int:
        return self.settings.height - 1

    def x_range(self, glyph_width: int) -> tuple[int, int]:
        """스폰 x 범위 [min_x, max_x). 화면 오른쪽 절반에서만 나온다."""
        min_x = self.settings.screen_width // 2
        max_x = self.settings.screen_width - glyph_width - 2
        return min_x, max(min_x + 1, max_x)

    def create(self) -> Balloon:
        idx = self.rng.randrange(len(BALLOON_ARTS))
        art = BALLOON_ARTS[idx]
        min_x, max_x = self.x_range(len(art[0]))
        return Balloon.from_art(art, BALLOON_COLORS[idx], x=self.rng.randrange(min_x, max_x), y=self.spawn_row)

    def maybe_spawn(self) -> Optional[Balloon]:
        if self.rng.random() >= self.settings.spawn_chance:
            return None
        return self.create()
