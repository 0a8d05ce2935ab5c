#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Board renderer.

rasterize() 는 상태를 (문자, 색) 격자로 찍는 순수 함수이고,
render_frame() 은 그 격자를 rich 패널로 감싸 제목/점수/조작법과 합친다.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from rich import box
from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from config import ARCHER_COLOR, BORDER_COLOR, CONTROLS_COLOR, CONTROLS_HELP, SCORE_COLOR, TITLE, TITLE_COLOR
from model import ARCHER_GLYPH, GameState

Cell = Tuple[str, Optional[str]]
Grid = List[List[Cell]]

BLANK: Cell = (" ", None)


def xterm_style(color: Optional[str], *, bold: bool = False) -> str:
    if color is None:
        return "bold" if bold else ""
    style = f"color({color})"
    return f"bold {style}" if bold else style


def _blit(grid: Grid, x: int, y: int, lines: Sequence[str], color: Optional[str]) -> None:
    """여러 줄 글리프를 한 글자씩 찍는다. 격자 밖은 잘라낸다."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    for dy, line in enumerate(lines):
        row = y + dy
        if not 0 <= row < height:
            continue
        for dx, ch in enumerate(line):
            col = x + dx
            if 0 <= col < width:
                grid[row][col] = (ch, color)


def rasterize(state: GameState) -> Grid:
    grid: Grid = [[BLANK for _ in range(state.width)] for _ in range(state.height)]

    _blit(grid, 0, state.archer, [ARCHER_GLYPH], ARCHER_COLOR)

    for arrow in state.arrows:
        if arrow.active and 0 <= arrow.x < state.width:
            _blit(grid, arrow.x, arrow.y, [arrow.symbol], None)

    for balloon in state.balloons:
        if not balloon.popped:
            _blit(grid, balloon.x, balloon.y, balloon.symbol, balloon.color)

    for boom in state.explosions:
        _blit(grid, boom.x, boom.y, boom.symbol, boom.color)

    return grid


def iter_runs(row: Sequence[Cell]) -> Iterable[Tuple[int, str, Optional[str]]]:
    """같은 색이 이어지는 구간을 (시작 열, 문자열, 색) 으로 묶는다."""
    start = 0
    buf: List[str] = []
    color: Optional[str] = None
    for col, (ch, c) in enumerate(row):
        if buf and c != color:
            yield start, "".join(buf), color
            start, buf = col, []
        color = c
        buf.append(ch)
    if buf:
        yield start, "".join(buf), color


def board_text(state: GameState) -> str:
    return "\n".join("".join(ch for ch, _ in row) for row in rasterize(state))


def board_renderable(state: GameState) -> Text:
    text = Text(no_wrap=True, overflow="crop")
    for i, row in enumerate(rasterize(state)):
        if i:
            text.append("\n")
        for _, chunk, color in iter_runs(row):
            text.append(chunk, style=xterm_style(color))
    return text


def render_frame(state: GameState) -> Group:
    board = Panel(
        board_renderable(state),
        box=box.ROUNDED,
        border_style=xterm_style(BORDER_COLOR),
        padding=(0, 1),
        width=state.width + 4,
        expand=False,
    )
    return Group(
        Align.center(Text(TITLE, style=xterm_style(TITLE_COLOR, bold=True))),
        Text(""),
        Align.center(board),
        Text(""),
        Align.center(Text(f"Score: {state.score}", style=xterm_style(SCORE_COLOR))),
        Text(""),
        Align.center(Text(CONTROLS_HELP, style=xterm_style(CONTROLS_COLOR))),
    )
