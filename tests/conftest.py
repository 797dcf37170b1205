import os

# headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from playlist_loader import Act, Playlist
from timing import TICK_HZ


class ManualTicker:
    """Records start/stop calls instead of running a clock."""

    def __init__(self):
        self.calls = []

    def start(self, generation=0):
        self.calls.append("start")
        self.generation = generation

    def stop(self):
        self.calls.append("stop")

    @property
    def running(self):
        return bool(self.calls) and self.calls[-1] == "start"


def secs(n):
    return int(n * TICK_HZ)


@pytest.fixture
def ticker():
    return ManualTicker()


@pytest.fixture
def two_by_two():
    """persons A, B; acts intro (2s) and main (1s)."""
    return Playlist(
        persons=["A", "B"],
        acts=(Act("intro", secs(2), "2s"), Act("main", secs(1), "1s")),
    )


@pytest.fixture
def write_yaml(tmp_path):
    def _write(text, name="playlist.yaml"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return str(p)
    return _write


@pytest.fixture
def event_queue():
    from events import EventManager
    EventManager.clear()
    yield EventManager
    EventManager.clear()
