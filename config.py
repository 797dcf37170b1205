# config.py
"""
Configuration settings for the stage timer.

The playlist itself (persons, acts, flags) comes from the YAML file given
on the command line; everything here is about how the window looks and
how often it ticks.
"""

# ── Basic Application Settings ──────────────────────────────────────────────

FPS = 30

WINDOW_TITLE = "Timer GUI"

# Display settings
FULLSCREEN = False
WINDOWED_SIZE = (600, 300)

# ── Countdown ──────────────────────────────────────────────────────────────

# Period of the countdown tick in milliseconds.  Each tick removes exactly
# one second from the current act, so changing this only speeds the clock
# up or down (useful for rehearsals).
TICK_MS = 1000

# ── Fonts ──────────────────────────────────────────────────────────────────

FONT_NAME = "monospace"

# Base size; the labels add their own delta on top of it
FONT_SIZE     = 25
MIN_FONT_SIZE = 6
MAX_FONT_SIZE = 120

PERSON_FONT_DELTA = 10
STAGE_FONT_DELTA  = 5
NEXT_FONT_DELTA   = 8

# Buttons and progress-bar captions
UI_FONT_SIZE = 16

# ── Settings dialog ────────────────────────────────────────────────────────

SETTINGS_DIALOG_SIZE = (300, 200)
