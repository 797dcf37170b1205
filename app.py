#!/usr/bin/env python3
"""
app.py – stage-timer window (with EventManager)

Walks the loaded playlist with a PlaybackController.  The countdown tick
arrives as a pygame timer event; it and every key press or click are
turned into actions by events.py and applied here, on the main loop,
one at a time.
"""
from __future__ import annotations

from typing import Optional

import pygame

import config
from events           import EventManager, PygameTicker
from overlays         import draw_font_dialog, draw_timer
from playback         import PlaybackController, Snapshot
from playlist_loader  import Playlist
from settings_dialog  import FontSizeDialog
from theme            import make_theme


class TimerApp:
    def __init__(self, playlist: Playlist, *, fullscreen: Optional[bool] = None):
        # window ----------------------------------------------------------
        pygame.init()
        self.fullscreen = config.FULLSCREEN if fullscreen is None else fullscreen
        self.screen = self._set_mode()
        pygame.display.set_caption(config.WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        # look ------------------------------------------------------------
        self.theme     = make_theme()
        self.font_size = config.FONT_SIZE
        self.dialog: Optional[FontSizeDialog] = None
        self.buttons: dict[str, pygame.Rect] = {}

        # core state ------------------------------------------------------
        self.playlist   = playlist
        self.controller = PlaybackController(
            playlist, PygameTicker(), on_change=self._on_change
        )
        self.snapshot: Optional[Snapshot] = None

    def _set_mode(self) -> pygame.Surface:
        if self.fullscreen:
            return pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        return pygame.display.set_mode(config.WINDOWED_SIZE, pygame.RESIZABLE)

    def _on_change(self, snap: Snapshot) -> None:
        self.snapshot = snap

    # ── actions ───────────────────────────────────────────────────────────
    def apply(self, act: dict) -> bool:
        """Apply one action; returns False when the app should quit."""
        t = act["type"]
        if t == "quit":
            return False
        if t == "tick":
            self.controller.tick(act.get("gen"))
        elif t == "skip":
            self.controller.skip()
        elif t == "toggle_pause":
            self.controller.toggle_pause()
        elif t == "open_settings":
            self.dialog = FontSizeDialog(self.font_size)
        elif t == "set_font_size":
            self.font_size = act["size"]
            self.dialog = None
        elif t == "close_dialog":
            self.dialog = None
        elif t == "toggle_fullscreen":
            self.fullscreen ^= True
            self.screen = self._set_mode()
        return True

    # ── main loop ─────────────────────────────────────────────────────────
    def run(self):
        self.controller.start()
        running = True
        while running:
            for e in pygame.event.get():
                EventManager.handle(e, self.buttons, self.dialog)

            while running and (act := EventManager.poll()):
                running = self.apply(act)

            snap = self.snapshot or self.controller.snapshot()
            self.buttons = draw_timer(
                self.screen, snap, self.theme, self.font_size, self.playlist.counter
            )
            if self.dialog is not None:
                draw_font_dialog(self.screen, self.dialog, self.theme)

            pygame.display.flip()
            self.clock.tick(config.FPS)

        self.controller.stop()
        pygame.quit()
