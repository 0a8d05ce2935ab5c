#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Game configuration.

규칙: 이 파일에는 '상수/설정'만 둡니다. (로직 금지)
"""

# --- Screen ---
SCREEN_WIDTH = 80
BOARD_PADDING = 2
BOARD_W = SCREEN_WIDTH - BOARD_PADDING   # 78
BOARD_H = 20

# --- Simulation ---
TICK_SECONDS = 0.1           # 10Hz 고정 틱
ARCHER_START_LANE = 10
MAX_ARROWS = 3
ARROW_START_X = 2
ARROW_STEP = 2
ARROW_HIT_REACH = 4          # 화살 끝(촉)까지의 충돌 오프셋
SPAWN_CHANCE = 0.1
BALLOON_MARGIN = 7           # max_balloon_x = SCREEN_WIDTH - BALLOON_MARGIN

# --- Log ---
LOG_LIMIT = 50

# --- Colors (xterm-256 index) ---
ARCHER_COLOR = "214"
BORDER_COLOR = "63"
TITLE_COLOR = "213"
SCORE_COLOR = "205"
CONTROLS_COLOR = "241"

# --- Text ---
TITLE = "🎯 Balloon Archer 🎈"
CONTROLS_HELP = "Controls: ↑/↓ to move, SPACE to shoot, q to quit"
