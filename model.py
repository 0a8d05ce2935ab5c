#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Data model (glyph tables + dataclasses).

UI 프레임워크와 독립적인 순수 모델 계층.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import List, Tuple

from config import (
    ARCHER_START_LANE,
    BALLOON_MARGIN,
    BOARD_H,
    BOARD_W,
    SCREEN_WIDTH,
)


# =============================
# Glyphs
# =============================
ARCHER_GLYPH = "|)"
ARROW_GLYPH = "═>"

EXPLOSION_GLYPH: Tuple[str, ...] = (
    "  \\|/  ",
    "  /|\\  ",
    "   *   ",
)
EXPLOSION_WIDTH = 7
EXPLOSION_HEIGHT = 3

BALLOON_ARTS: Tuple[Tuple[str, ...], ...] = (
    (
        "  .-^^-.",
        " /      \\",
        "|        |",
        " \\      /",
        "  `----´",
        "    ||   ",
    ),
    (
        "  .===.",
        " (     )",
        "|       |",
        " (     )",
        "  `---´",
        "   ||  ",
    ),
    (
        "  _____",
        " /     \\",
        "|   ○   |",
        " \\     /",
        "  ‾‾‾‾‾",
        "   ||   ",
    ),
    (
        "  .===.",
        " /     \\",
        "|   •   |",
        " \\     /",
        "  `---´",
        "   ||   ",
    ),
)

# BALLOON_ARTS 와 같은 순서 (분홍/빨강/파랑/초록)
BALLOON_COLORS: Tuple[str, ...] = ("213", "204", "39", "48")


# =============================
# Entities
# =============================
@dataclass
class Arrow:
    x: int
    y: int
    active: bool = True
    symbol: str = ARROW_GLYPH


@dataclass
class Balloon:
    x: int
    y: int
    symbol: List[str]
    color: str
    width: int
    height: int
    popped: bool = False
    hit: bool = False

    @classmethod
    def from_art(cls, art: Tuple[str, ...], color: str, x: int, y: int) -> "Balloon":
        """폭/높이는 첫 줄 길이와 줄 수로 정한다."""
        return cls(x=x, y=y, symbol=list(art), color=color, width=len(art[0]), height=len(art))

    def explode(self) -> None:
        self.popped = True
        self.hit = True
        self.symbol = list(EXPLOSION_GLYPH)
        self.width = EXPLOSION_WIDTH
        self.height = EXPLOSION_HEIGHT


@dataclass
class Explosion:
    """화살에 맞은 풍선이 남기는 1프레임짜리 잔상."""

    x: int
    y: int
    color: str
    symbol: List[str] = field(default_factory=lambda: list(EXPLOSION_GLYPH))


@dataclass
class GameState:
    width: int = BOARD_W
    height: int = BOARD_H
    archer: int = ARCHER_START_LANE
    score: int = 0
    tick: int = 0
    min_balloon_x: int = BOARD_W // 2
    max_balloon_x: int = SCREEN_WIDTH - BALLOON_MARGIN
    arrows: List[Arrow] = field(default_factory=list)
    balloons: List[Balloon] = field(default_factory=list)
    explosions: List[Explosion] = field(default_factory=list)

    def active_arrow_count(self) -> int:
        return sum(1 for a in self.arrows if a.active)

    def live_balloons(self) -> List[Balloon]:
        return [b for b in self.balloons if not b.popped]
