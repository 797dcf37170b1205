# =========  timing.py  =========
"""
Duration helpers on a micro-second timeline.

Act lengths are written as Go-style duration literals ("1m30s", "1.5h",
"300ms") and kept internally as integer micro-seconds so that one tick
is exactly ``TICK_HZ`` units and no float drift creeps in.
"""

from __future__ import annotations

import re

TICK_HZ = 1_000_000          # micro-seconds per second – one tick

# unit → nano-seconds; parsing happens in ns, storage in µs
_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,             # U+00B5 micro sign
    "μs": 1_000,             # U+03BC greek mu
    "ms": 1_000_000,
    "s":  1_000_000_000,
    "m":  60 * 1_000_000_000,
    "h":  3600 * 1_000_000_000,
}

_PART_RE = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]+)")


def parse_duration(text: str) -> int:
    """
    Parse a duration literal into **micro-seconds**.

    A literal is an optional sign followed by one or more
    ``<number><unit>`` parts, e.g. ``"2h45m"`` or ``"-1.5s"``.  The bare
    string ``"0"`` is the only unit-less literal allowed.

    Raises ValueError on anything else.
    """
    if not isinstance(text, str):
        raise ValueError(f"invalid duration {text!r}")

    s = orig = text
    neg = False
    if s[:1] in ("-", "+"):
        neg = s[0] == "-"
        s = s[1:]

    if s == "0":
        return 0
    if not s:
        raise ValueError(f"invalid duration {orig!r}")

    total_ns = 0
    pos = 0
    while pos < len(s):
        m = _PART_RE.match(s, pos)
        if not m:
            raise ValueError(f"invalid duration {orig!r}")
        whole, frac, unit = m.group(1), m.group(2), m.group(3)
        if not whole and not frac:
            raise ValueError(f"invalid duration {orig!r}")
        if unit not in _UNIT_NS:
            raise ValueError(f"unknown unit {unit!r} in duration {orig!r}")

        scale = _UNIT_NS[unit]
        total_ns += int(whole or 0) * scale
        if frac:
            total_ns += int(frac) * scale // 10 ** len(frac)
        pos = m.end()

    us = total_ns // 1_000
    return -us if neg else us


def _fmt_frac(value: int, unit: int) -> str:
    """``value / unit`` without trailing zeros (1_500_000, 1e6 → "1.5")."""
    whole, rest = divmod(value, unit)
    if not rest:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{rest:0{digits}d}".rstrip("0")


def format_duration(us: int) -> str:
    """
    Render micro-seconds the way Go's ``Duration.String()`` does:
    ``90s → "1m30s"``, ``1h → "1h0m0s"``, ``0 → "0s"``, ``0.5s → "500ms"``.
    """
    if us == 0:
        return "0s"

    sign = "-" if us < 0 else ""
    us = abs(us)

    if us < TICK_HZ:
        if us < 1_000:
            return f"{sign}{us}µs"
        return f"{sign}{_fmt_frac(us, 1_000)}ms"

    h, rem = divmod(us, 3600 * TICK_HZ)
    m, rem = divmod(rem, 60 * TICK_HZ)
    secs = _fmt_frac(rem, TICK_HZ) + "s"

    if h:
        return f"{sign}{h}h{m}m{secs}"
    if m:
        return f"{sign}{m}m{secs}"
    return f"{sign}{secs}"
