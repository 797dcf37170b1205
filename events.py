#!/usr/bin/env python3
"""
events.py  – central hub

• Translates raw Pygame events (keys, clicks, the countdown timer) to
  high-level action dicts.
• Exposes a thread-safe queue so the tick and every user intent are
  applied one after another on the main loop – the playback state is
  never touched from two places at once.
"""

from __future__ import annotations
import queue
import pygame
from pygame.locals import *

import config

Action = dict      # alias for readability

# posted by SDL's timer thread once per TICK_MS
TICK_EVENT = pygame.USEREVENT + 1


class PygameTicker:
    """Countdown tick source backed by ``pygame.time.set_timer``."""

    def __init__(self, interval_ms: int | None = None):
        self.interval_ms = interval_ms or config.TICK_MS

    def start(self, generation: int = 0) -> None:
        # re-setting an active timer restarts its interval from zero; the
        # stamp lets the controller drop ticks the old timer already posted
        tick = pygame.event.Event(TICK_EVENT, gen=generation)
        pygame.time.set_timer(tick, self.interval_ms)

    def stop(self) -> None:
        pygame.time.set_timer(TICK_EVENT, 0)


class EventManager:
    _fifo: "queue.Queue[Action]" = queue.Queue()      # global, thread-safe

    # ── SDL / keyboard / mouse path ───────────────────────────────────
    @classmethod
    def handle(cls, event, buttons=None, dialog=None) -> None:
        """Translate one Pygame event → action and enqueue it."""
        act = cls._translate_pygame(event, buttons or {}, dialog)
        if act:
            cls._fifo.put(act)

    # ── programmatic path ─────────────────────────────────────────────
    @classmethod
    def post(cls, action: Action) -> None:
        """Enqueue an already-formed action dict, e.g. ``{"type": "skip"}``."""
        cls._fifo.put(action)

    # ── main-loop consumer ────────────────────────────────────────────
    @classmethod
    def poll(cls) -> Action | None:
        """Return next queued action or None (non-blocking)."""
        try:
            return cls._fifo.get_nowait()
        except queue.Empty:
            return None

    @classmethod
    def clear(cls) -> None:
        while cls.poll() is not None:
            pass

    # ── internal translator ───────────────────────────────────────────
    @staticmethod
    def _translate_pygame(event, buttons, dialog) -> Action | None:
        if event.type == QUIT:
            return {"type": "quit"}

        if event.type == TICK_EVENT:
            # timer ticks always carry a stamp; generations start at 1, so an
            # unstamped tick never matches the armed one
            return {"type": "tick", "gen": getattr(event, "gen", 0)}

        # the font-size dialog is modal: it sees keys and clicks first
        if dialog is not None:
            if event.type == KEYDOWN:
                return dialog.handle_key(event)
            if event.type == MOUSEBUTTONDOWN and event.button == 1:
                return dialog.handle_click(event.pos)
            return None

        if event.type == KEYDOWN:
            if event.key in (K_ESCAPE, K_q):
                return {"type": "quit"}
            if event.key == K_SPACE:
                return {"type": "toggle_pause"}
            if event.key in (K_RIGHT, K_n):
                return {"type": "skip"}
            if event.key == K_s:
                return {"type": "open_settings"}
            if event.key == K_f:
                return {"type": "toggle_fullscreen"}

        if event.type == MOUSEBUTTONDOWN and event.button == 1:
            for name, rect in buttons.items():
                if rect.collidepoint(event.pos) and name in _BUTTON_ACTIONS:
                    return dict(_BUTTON_ACTIONS[name])

        return None


_BUTTON_ACTIONS: dict[str, Action] = {
    "next":     {"type": "skip"},
    "pause":    {"type": "toggle_pause"},
    "settings": {"type": "open_settings"},
}
