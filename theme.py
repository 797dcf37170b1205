"""
theme.py

Colours, sizes and fonts for the timer window.

``Theme`` is the base look.  ``OverrideTheme`` wraps any theme, answers
for the properties it was given and forwards everything else, so a single
colour can be changed without copying the whole palette.
"""

from __future__ import annotations

import pygame

import config

# ── colours ────────────────────────────────────────────────────────────────
WHITE  = (255, 255, 255)
BLACK  = (0, 0, 0)
GREY   = (60, 60, 60)
GREEN  = (0, 255, 0)
RED    = (255, 0, 0)
LIGHT_GREEN  = (144, 238, 144)
LIGHT_YELLOW = (255, 255, 153)
BG     = (0, 0, 0, 180)

_BASE_COLORS = {
    "background":              (24, 24, 24),
    "foreground":              WHITE,
    "stage":                   LIGHT_GREEN,
    "next":                    LIGHT_YELLOW,
    "progress_bar_background": GREY,
    "progress_bar_filled":     GREEN,
    "progress_bar_text":       WHITE,
    "button":                  (70, 70, 90),
    "button_text":             WHITE,
    "dialog_background":       (40, 40, 40),
    "dialog_border":           WHITE,
    "overlay":                 BG,
}

_BASE_SIZES = {
    "padding":        8,
    "bar_height":     22,
    "button_height":  30,
    "button_width":   96,
}


class Theme:
    """Base palette; fonts are created lazily and cached per size."""

    def __init__(self, colors=None, sizes=None, font_name=None):
        self._colors = dict(colors or _BASE_COLORS)
        self._sizes = dict(sizes or _BASE_SIZES)
        self._font_name = font_name if font_name is not None else config.FONT_NAME
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    def color(self, name: str):
        return self._colors[name]

    def size(self, name: str) -> int:
        return self._sizes[name]

    def font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(self._font_name, size, bold=bold)
        return self._fonts[key]


class OverrideTheme:
    """Answer for the overridden colours, delegate the rest to *base*."""

    def __init__(self, base, colors=None):
        self.base = base
        self.colors = dict(colors or {})

    def color(self, name: str):
        if name in self.colors:
            return self.colors[name]
        return self.base.color(name)

    def size(self, name: str) -> int:
        return self.base.size(name)

    def font(self, size: int, bold: bool = False):
        return self.base.font(size, bold)


def make_theme() -> OverrideTheme:
    """Default look: base theme with red progress-bar fill."""
    return OverrideTheme(Theme(), {"progress_bar_filled": RED})
