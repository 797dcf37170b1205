"""
settings_dialog.py – modal "Set Font Size" form.

The dialog only collects text; it is drawn by ``overlays.draw_font_dialog``
(which also fills in the Apply / Cancel hit boxes) and its answers travel
through ``EventManager`` like every other action.
"""

from __future__ import annotations

import re

import pygame
from pygame.locals import *

import config

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_MAX_CHARS = 4


def parse_font_size(text: str) -> int | None:
    """Leading integer of *text* inside the allowed range, else None."""
    m = _LEADING_INT.match(text)
    if not m:
        return None
    size = int(m.group(1))
    if not config.MIN_FONT_SIZE <= size <= config.MAX_FONT_SIZE:
        return None
    return size


class FontSizeDialog:
    title = "Set Font Size"
    label = "Font Size"

    def __init__(self, current: int):
        self.text = str(current)
        self.apply_rect: pygame.Rect | None = None
        self.cancel_rect: pygame.Rect | None = None

    # ── answers ────────────────────────────────────────────────────────
    def submit(self) -> dict:
        size = parse_font_size(self.text)
        if size is None:
            print(f"[settings] ignoring font size {self.text!r}")
            return {"type": "close_dialog"}
        return {"type": "set_font_size", "size": size}

    def cancel(self) -> dict:
        return {"type": "close_dialog"}

    # ── input ──────────────────────────────────────────────────────────
    def handle_key(self, event) -> dict | None:
        if event.key in (K_RETURN, K_KP_ENTER):
            return self.submit()
        if event.key == K_ESCAPE:
            return self.cancel()
        if event.key == K_BACKSPACE:
            self.text = self.text[:-1]
            return None

        ch = getattr(event, "unicode", "")
        if ch and (ch.isdigit() or (ch in "+-" and not self.text)):
            if len(self.text) < _MAX_CHARS:
                self.text += ch
        return None

    def handle_click(self, pos) -> dict | None:
        if self.apply_rect is not None and self.apply_rect.collidepoint(pos):
            return self.submit()
        if self.cancel_rect is not None and self.cancel_rect.collidepoint(pos):
            return self.cancel()
        return None
