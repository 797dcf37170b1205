import pygame
import pytest
from pygame.locals import KEYDOWN, QUIT, K_n

import config
from app import TimerApp
from events import TICK_EVENT
from settings_dialog import FontSizeDialog
from timing import TICK_HZ


@pytest.fixture
def app(two_by_two, event_queue):
    a = TimerApp(two_by_two, fullscreen=False)
    yield a
    if pygame.get_init():  # run() already stopped the controller and quit
        a.controller.stop()
    pygame.quit()


def test_window_setup(app):
    assert app.screen.get_size() == config.WINDOWED_SIZE
    assert pygame.display.get_caption()[0] == config.WINDOW_TITLE
    assert app.font_size == config.FONT_SIZE


def test_actions_drive_the_controller(app):
    app.controller.start()

    assert app.apply({"type": "tick"})
    assert app.snapshot.remaining_us == 1 * TICK_HZ

    app.apply({"type": "toggle_pause"})
    assert app.snapshot.paused

    app.apply({"type": "skip"})
    assert (app.snapshot.act, app.snapshot.paused) == ("main", False)


def test_font_size_is_cosmetic(app):
    app.controller.start()
    before = app.controller.snapshot()

    app.apply({"type": "open_settings"})
    assert isinstance(app.dialog, FontSizeDialog)

    app.apply({"type": "set_font_size", "size": 40})
    assert app.font_size == 40
    assert app.dialog is None
    assert app.controller.snapshot() == before


def test_close_dialog_keeps_font_size(app):
    app.apply({"type": "open_settings"})
    app.apply({"type": "close_dialog"})
    assert app.dialog is None
    assert app.font_size == config.FONT_SIZE


def test_quit_stops_applying(app):
    assert app.apply({"type": "quit"}) is False


def test_run_drains_queue_until_quit(app, event_queue):
    event_queue.post({"type": "skip"})
    event_queue.post({"type": "quit"})

    app.run()

    assert app.controller.state.act_index == 1
    assert not app.controller.armed
    assert event_queue.poll() is None


def test_tick_queued_behind_a_skip_does_not_count(app):
    # run() arms generation 1 before it reads the queue; the skip re-arms
    # as 2, so both ticks below were posted by the old timer
    pygame.event.post(pygame.event.Event(KEYDOWN, key=K_n, unicode="n", mod=0))
    pygame.event.post(pygame.event.Event(TICK_EVENT, gen=1))
    pygame.event.post(pygame.event.Event(TICK_EVENT))
    pygame.event.post(pygame.event.Event(QUIT))

    app.run()

    st = app.controller.state
    assert (st.person_index, st.act_index) == (0, 1)
    assert st.remaining_us == st.total_us == 1 * TICK_HZ
