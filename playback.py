"""
playback.py

Countdown / playlist state machine for the stage timer.

Every person walks through the same ordered list of acts.  A one-second
tick counts the current act down; at zero (or on an explicit skip) the
controller advances to the next act, then to the next person, and finally
into the terminal "Done" state.

    Running ──tick──▶ Running            remaining > 0
    Running ──tick──▶ Running(next) | Done   remaining hit 0
    Running ──pause─▶ Paused ──resume─▶ Running
    Running|Paused ──skip──▶ Running(next) | Done
    Done                                 terminal

The controller never owns a clock.  It is handed a *ticker* – anything
with ``start(generation)`` / ``stop()`` – and calls ``stop()`` before every
``start()`` so two tick sources can never overlap.  Every arming gets a
new generation number; a tick stamped with an older one was already in
flight when the act changed and is dropped.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Optional

from playlist_loader import Playlist
from timing import TICK_HZ

DONE_LABEL = "Done"
LAST_LABEL = "Next: Last"


# ── Tick sources ────────────────────────────────────────────────────────────
class NullTicker:
    """Ticker that does nothing; the caller feeds ``tick()`` by hand."""

    def start(self, generation: int = 0) -> None:
        pass

    def stop(self) -> None:
        pass


# ── Data structures ─────────────────────────────────────────────────────────
@dataclass
class PlaybackState:
    person_index: int = 0
    act_index: int = 0
    remaining_us: int = 0
    total_us: int = 0            # length of the current act
    paused: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Everything the window needs to draw one frame."""
    person: str
    act: str
    remaining_us: int
    total_us: int
    progress: float
    overall: float
    overall_label: str
    next_label: str
    paused: bool
    done: bool
    person_index: int
    act_index: int


# ── Controller ──────────────────────────────────────────────────────────────
class PlaybackController:
    """Owns the single PlaybackState of this process."""

    def __init__(
        self,
        playlist: Playlist,
        ticker=None,
        on_change: Optional[Callable[[Snapshot], None]] = None,
    ) -> None:
        self.playlist = playlist
        self.ticker = ticker or NullTicker()
        self.on_change = on_change

        self.state = PlaybackState()
        self._lock = threading.RLock()
        self._armed = False
        self._generation = 0
        self._overall = 0.0

    # ---------------------------------------------------------------- props
    @property
    def done(self) -> bool:
        return self.state.person_index >= len(self.playlist.persons)

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def generation(self) -> int:
        return self._generation

    # ----------------------------------------------------------- lifecycle
    def start(self) -> None:
        with self._lock:
            self.state = PlaybackState()
            if not self.playlist.acts:
                # nothing to time for anybody
                self.state.person_index = len(self.playlist.persons)
            self._person_changed()

            if self.done:
                self._disarm()
            else:
                self._load_act()
            self._notify()

    def tick(self, generation: Optional[int] = None) -> None:
        """
        One periodic decrement; ignored while paused, unarmed or done.

        *generation* is the stamp the tick source put on the tick.  A tick
        from an earlier arming is stale and changes nothing; ``None`` means
        the caller drives the clock by hand and is always current.
        """
        with self._lock:
            if not self._armed or self.done:
                return
            if generation is not None and generation != self._generation:
                return
            if self.state.paused:
                self._notify()
                return

            st = self.state
            st.remaining_us = max(0, st.remaining_us - TICK_HZ)
            self._notify()

            if st.remaining_us == 0:
                self._disarm()
                self.advance()

    def advance(self) -> None:
        """Move to the next act, the next person, or Done."""
        with self._lock:
            if self.done:
                return

            st = self.state
            st.act_index += 1
            if st.act_index >= len(self.playlist.acts):
                st.act_index = 0
                st.person_index += 1
                self._person_changed()

            if self.done:
                self._disarm()
            else:
                self._load_act()
            self._notify()

    def skip(self) -> None:
        """User intent: abandon the current act and restart the tick."""
        with self._lock:
            if self.done:
                return
            self.state.paused = False
            self.advance()

    def toggle_pause(self) -> bool:
        with self._lock:
            if not self.done:
                self.state.paused = not self.state.paused
                self._notify()
            return self.state.paused

    def stop(self) -> None:
        """Release the tick source (window closing)."""
        with self._lock:
            self._disarm()

    # ------------------------------------------------------------- derived
    def progress_fraction(self) -> float:
        with self._lock:
            total = self.state.total_us
            if total <= 0:
                return 0.0
            return min(1.0, max(0.0, self.state.remaining_us / total))

    def overall_fraction(self) -> float:
        return self._overall

    def overall_label(self) -> str:
        n = len(self.playlist.persons)
        # at Done person_index == n; show "n / n", not "n+1 / n"
        return f"{min(self.state.person_index + 1, n)} / {n}"

    def next_label(self) -> str:
        if not self.playlist.show_next:
            return ""
        persons = self.playlist.persons
        nxt = self.state.person_index + 1
        if nxt >= len(persons):
            return LAST_LABEL
        return f"Next: {persons[nxt]}"

    def current_person(self) -> str:
        if self.done:
            return DONE_LABEL
        return self.playlist.persons[self.state.person_index]

    def current_act(self) -> str:
        if self.done:
            return ""
        return self.playlist.acts[self.state.act_index].name

    def snapshot(self) -> Snapshot:
        with self._lock:
            st = self.state
            return Snapshot(
                person=self.current_person(),
                act=self.current_act(),
                remaining_us=st.remaining_us,
                total_us=st.total_us,
                progress=self.progress_fraction(),
                overall=self._overall,
                overall_label=self.overall_label(),
                next_label=self.next_label(),
                paused=st.paused,
                done=self.done,
                person_index=st.person_index,
                act_index=st.act_index,
            )

    # ------------------------------------------------------------ internals
    def _load_act(self) -> None:
        dur = self.playlist.acts[self.state.act_index].duration_us
        self.state.remaining_us = dur
        self.state.total_us = dur
        self.state.paused = False
        self._arm()

    def _arm(self) -> None:
        # stop must precede start: never two tick sources at once
        self.ticker.stop()
        self._generation += 1
        self.ticker.start(self._generation)
        self._armed = True

    def _disarm(self) -> None:
        self.ticker.stop()
        self._armed = False

    def _person_changed(self) -> None:
        n = len(self.playlist.persons)
        self._overall = (self.state.person_index + 1) / n if n else 0.0
        if self.done:
            print("[playback] done")
        else:
            name = self.playlist.persons[self.state.person_index]
            print(f"[playback] → {name} ({self.state.person_index + 1}/{n})")

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())
