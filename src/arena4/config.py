# src/arena4/config.py

from __future__ import annotations

import os

WIDTH = 7
HEIGHT = 4
CONNECT_N = 4

# Search horizon in plies below the root move
SEARCH_DEPTH = int(os.environ.get("ARENA4_SEARCH_DEPTH", "5"))

# Stand-ins for +/- infinity (32-bit int bounds)
SCORE_MAX = 2**31 - 1
SCORE_MIN = -(2**31)

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.5

LOG_LEVEL = os.environ.get("ARENA4_LOG_LEVEL", "WARNING")
