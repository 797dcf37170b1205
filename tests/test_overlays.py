import pygame
import pytest

from overlays import draw_font_dialog, draw_timer
from playback import PlaybackController
from settings_dialog import FontSizeDialog
from theme import make_theme


@pytest.fixture
def surface():
    pygame.font.init()
    yield pygame.Surface((600, 300))


def test_draw_timer_returns_buttons(surface, two_by_two):
    two_by_two.show_next = True
    pc = PlaybackController(two_by_two)
    pc.start()

    buttons = draw_timer(surface, pc.snapshot(), make_theme(), 25, True)

    assert set(buttons) == {"next", "pause", "settings"}
    assert all(surface.get_rect().contains(r) for r in buttons.values())


def test_draw_timer_done_state(surface, two_by_two):
    pc = PlaybackController(two_by_two)
    pc.start()
    for _ in range(4):
        pc.skip()
    snap = pc.snapshot()
    assert snap.done and snap.overall > 1.0

    buttons = draw_timer(surface, snap, make_theme(), 25, True)
    assert "next" in buttons


def test_draw_font_dialog_sets_hit_boxes(surface):
    d = FontSizeDialog(25)
    draw_font_dialog(surface, d, make_theme())

    assert d.apply_rect is not None and d.cancel_rect is not None
    assert not d.apply_rect.colliderect(d.cancel_rect)
    assert d.handle_click(d.cancel_rect.center) == {"type": "close_dialog"}
