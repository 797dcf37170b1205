"""
overlays.py

Pygame layout for the timer window: person, stage, the two progress bars,
the "next" line and the button row – plus the modal font-size dialog.
"""

from __future__ import annotations

import pygame

import config
from playback import Snapshot
from renderer import render_button, render_progress_bar, render_text
from timing import format_duration


# ── helpers ────────────────────────────────────────────────────────────────
def _label_sizes(font_size: int) -> tuple[int, int, int]:
    """(person, stage, next) point sizes for a base *font_size*."""
    return (
        font_size + config.PERSON_FONT_DELTA,
        font_size + config.STAGE_FONT_DELTA,
        font_size + config.NEXT_FONT_DELTA,
    )


def _button_row(sw: int, y: int, theme, names: list[str]) -> dict[str, pygame.Rect]:
    pad = theme.size("padding")
    bw, bh = theme.size("button_width"), theme.size("button_height")
    x = pad
    rects: dict[str, pygame.Rect] = {}
    for name in names:
        rects[name] = pygame.Rect(x, y, min(bw, sw - x - pad), bh)
        x += bw + pad
    return rects


# ── main entry point ───────────────────────────────────────────────────────
def draw_timer(
    surface: pygame.Surface,
    snap: Snapshot,
    theme,
    font_size: int,
    show_counter: bool,
) -> dict[str, pygame.Rect]:
    """Draw one frame; returns the button hit boxes by name."""
    sw, _ = surface.get_size()
    pad = theme.size("padding")
    bar_h = theme.size("bar_height")
    person_pt, stage_pt, next_pt = _label_sizes(font_size)
    ui_font = theme.font(config.UI_FONT_SIZE)

    surface.fill(theme.color("background"))
    y = pad

    # ── person / stage ──────────────────────────────────────────────────
    r = render_text(surface, snap.person, theme.font(person_pt, bold=True),
                    theme.color("foreground"), (pad, y))
    y = r.bottom + pad // 2

    r = render_text(surface, snap.act, theme.font(stage_pt),
                    theme.color("stage"), (pad, y))
    y = r.bottom + pad

    # ── act progress: remaining time on top ─────────────────────────────
    bar = pygame.Rect(pad, y, sw - 2 * pad, bar_h)
    remaining = "" if snap.done else format_duration(snap.remaining_us)
    if snap.paused:
        remaining += "  (paused)"
    render_progress_bar(surface, bar, snap.progress, remaining, theme, ui_font)
    y = bar.bottom + pad

    # ── overall progress ───────────────────────────────────────────────
    bar = pygame.Rect(pad, y, sw - 2 * pad, bar_h)
    render_progress_bar(surface, bar, snap.overall,
                        snap.overall_label if show_counter else "", theme, ui_font)
    y = bar.bottom + pad

    # ── next person ─────────────────────────────────────────────────────
    if snap.next_label:
        r = render_text(surface, snap.next_label, theme.font(next_pt),
                        theme.color("next"), (pad, y))
        y = r.bottom + pad

    # ── buttons ─────────────────────────────────────────────────────────
    buttons = _button_row(sw, y, theme, ["next", "pause", "settings"])
    captions = {
        "next": "Next",
        "pause": "Resume" if snap.paused else "Pause",
        "settings": "Settings",
    }
    for name, rect in buttons.items():
        render_button(surface, rect, captions[name], theme, ui_font)
    return buttons


def draw_font_dialog(surface: pygame.Surface, dialog, theme) -> None:
    """Centre the dialog box and record its Apply / Cancel hit boxes."""
    sw, sh = surface.get_size()
    pad = theme.size("padding")
    bh = theme.size("button_height")
    font = theme.font(config.UI_FONT_SIZE)

    shade = pygame.Surface((sw, sh), pygame.SRCALPHA)
    shade.fill(theme.color("overlay"))
    surface.blit(shade, (0, 0))

    w, h = config.SETTINGS_DIALOG_SIZE
    w, h = min(w, sw), min(h, sh)
    box = pygame.Rect((sw - w) // 2, (sh - h) // 2, w, h)
    pygame.draw.rect(surface, theme.color("dialog_background"), box)
    pygame.draw.rect(surface, theme.color("dialog_border"), box, 1)

    y = box.y + pad
    r = render_text(surface, dialog.title, theme.font(config.UI_FONT_SIZE, bold=True),
                    theme.color("foreground"), (box.x + pad, y))
    y = r.bottom + pad

    r = render_text(surface, dialog.label, font, theme.color("foreground"),
                    (box.x + pad, y))
    y = r.bottom + pad // 2

    entry = pygame.Rect(box.x + pad, y, box.width - 2 * pad, bh)
    pygame.draw.rect(surface, theme.color("progress_bar_background"), entry)
    render_text(surface, dialog.text + "_", font, theme.color("foreground"),
                (entry.x + pad // 2, entry.y + pad // 2))

    bw = (box.width - 3 * pad) // 2
    by = box.bottom - pad - bh
    dialog.apply_rect = render_button(
        surface, pygame.Rect(box.x + pad, by, bw, bh), "Apply", theme, font)
    dialog.cancel_rect = render_button(
        surface, pygame.Rect(box.x + 2 * pad + bw, by, bw, bh), "Cancel", theme, font)
