#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Runtime settings.

- schema validation: pydantic
- JSON I/O: orjson

설정 파일은 선택 사항이다. 경로가 없으면 config.py 기본값을 그대로 쓴다.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import orjson
from pydantic import BaseModel, ConfigDict, Field, model_validator

from config import (
    ARCHER_START_LANE,
    ARROW_STEP,
    BALLOON_MARGIN,
    BOARD_H,
    BOARD_PADDING,
    MAX_ARROWS,
    SCREEN_WIDTH,
    SPAWN_CHANCE,
    TICK_SECONDS,
)


class GameSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    screen_width: int = Field(default=SCREEN_WIDTH, ge=24, le=400)
    height: int = Field(default=BOARD_H, ge=4, le=200)
    archer_start: int = Field(default=ARCHER_START_LANE, ge=0)
    max_arrows: int = Field(default=MAX_ARROWS, ge=1, le=20)
    arrow_step: int = Field(default=ARROW_STEP, ge=1, le=10)
    spawn_chance: float = Field(default=SPAWN_CHANCE, ge=0.0, le=1.0)
    tick_seconds: float = Field(default=TICK_SECONDS, gt=0.0, le=5.0)

    @model_validator(mode="after")
    def _check_lane(self) -> "GameSettings":
        if self.archer_start >= self.height:
            raise ValueError(f"archer_start({self.archer_start}) must be below height({self.height})")
        return self

    @property
    def width(self) -> int:
        return self.screen_width - BOARD_PADDING

    @property
    def min_balloon_x(self) -> int:
        return self.width // 2

    @property
    def max_balloon_x(self) -> int:
        return self.screen_width - BALLOON_MARGIN


DEFAULT_SETTINGS = GameSettings()


def _read_json(path: Path, fallback: object) -> object:
    try:
        return orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError):
        return fallback


def load_settings(path: Optional[str | Path] = None, **overrides: object) -> GameSettings:
    """설정 파일(JSON)을 읽어 검증한다.

    읽을 수 없는 파일은 기본값으로 대체하고, 모르는 키는 버린다.
    값의 타입/범위 오류는 pydantic.ValidationError 로 그대로 올린다.
    """
    raw: Dict[str, object] = {}
    if path is not None:
        loaded = _read_json(Path(path), {})
        if isinstance(loaded, dict):
            raw = {k: v for k, v in loaded.items() if k in GameSettings.model_fields}
    raw.update({k: v for k, v in overrides.items() if v is not None})
    return GameSettings.model_validate(raw)


def settings_json(settings: GameSettings) -> str:
    return orjson.dumps(settings.model_dump(), option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS).decode("utf-8")
