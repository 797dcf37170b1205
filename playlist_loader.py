"""
playlist_loader.py

Reads the YAML playlist that drives the timer:

    persons: [Alice, Bob]
    random:  false          # shuffle persons once at load
    acts:
      - {name: Intro, time: 30s}
      - {name: Talk,  time: 4m30s}
    counter: true           # show the "i / n" caption on the overall bar
    next:    true           # show who is up next

Every act's ``time`` must be a duration literal understood by
``timing.parse_duration``.  Bad literals fail the load; all of them are
reported at once so the file can be fixed in one pass.
"""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import yaml

from timing import format_duration, parse_duration


class ConfigError(Exception):
    """Playlist file is missing, unreadable or malformed."""


# ── Data structures ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Act:
    name: str
    duration_us: int
    literal: str = ""            # the text as written in the file


@dataclass
class Playlist:
    persons: List[str] = field(default_factory=list)
    acts: Tuple[Act, ...] = ()
    random: bool = False
    counter: bool = False
    show_next: bool = False      # YAML key "next"
    source: Optional[str] = None


# ── Loading ─────────────────────────────────────────────────────────────────
def _read_document(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"failed to read file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse yaml: {e}") from e

    if data is None:             # empty document
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"failed to parse yaml: expected a mapping at top level, "
            f"got {type(data).__name__}"
        )
    return data


def _as_list(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _build_acts(raw_acts: list) -> Tuple[Act, ...]:
    acts: list[Act] = []
    bad: list[str] = []

    for i, raw in enumerate(raw_acts, 1):
        if not isinstance(raw, dict):
            raise ConfigError(f"act #{i} must be a mapping with 'name' and 'time'")
        name = str(raw.get("name") or "")
        literal = "" if raw.get("time") is None else str(raw.get("time"))
        try:
            acts.append(Act(name, parse_duration(literal), literal))
        except ValueError:
            bad.append(f"act #{i} {name!r}: time {literal!r}")

    if bad:
        raise ConfigError("invalid act durations:\n  " + "\n  ".join(bad))
    return tuple(acts)


def load_playlist(path: str, rng: Optional[_random.Random] = None) -> Playlist:
    """
    Load and parse *path*.

    ``rng`` is only consulted when the file sets ``random: true``; pass a
    seeded ``random.Random`` for a reproducible order.
    """
    data = _read_document(path)

    persons = [str(p) for p in _as_list(data, "persons")]
    acts = _build_acts(_as_list(data, "acts"))

    playlist = Playlist(
        persons=persons,
        acts=acts,
        random=bool(data.get("random", False)),
        counter=bool(data.get("counter", False)),
        show_next=bool(data.get("next", False)),
        source=path,
    )

    if playlist.random:
        (rng or _random.Random()).shuffle(playlist.persons)

    print(f"[playlist] loaded {len(persons)} persons × {len(acts)} acts from {path}")
    return playlist


# -------------------------------------------------------------------------
if __name__ == "__main__":
    import argparse, sys
    ap = argparse.ArgumentParser(description="Check a timer playlist file")
    ap.add_argument("path", help="playlist YAML file")
    args = ap.parse_args()

    try:
        pl = load_playlist(args.path)
    except ConfigError as e:
        sys.exit(f"✗ {e}")

    per_person = sum(a.duration_us for a in pl.acts)
    for a in pl.acts:
        print(f"  {a.name:<20} {format_duration(a.duration_us):>10}")
    print(f"  {'per person':<20} {format_duration(per_person):>10}")
    print(f"  {'total':<20} {format_duration(per_person * len(pl.persons)):>10}")
    print(f"✓ {len(pl.persons)} persons: {', '.join(pl.persons) or 'none'}")
