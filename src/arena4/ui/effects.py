from __future__ import annotations
import itertools
import sys
import time
from typing import Optional, TextIO

from arena4 import config

_FRAMES = "|/-\\"


def ai_thinking(label: str, delay: Optional[float] = None, out: Optional[TextIO] = None) -> None:
    """Spin for `delay` seconds (AI_THINK_DELAY_SEC by default) so AI moves are not instant."""
    delay = config.AI_THINK_DELAY_SEC if delay is None else delay
    if delay <= 0:
        return

    stream = out if out is not None else sys.stdout
    if not config.AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    deadline = time.monotonic() + delay
    for frame in itertools.cycle(_FRAMES):
        if time.monotonic() >= deadline:
            break
        stream.write(f"\r{label} is thinking... {frame}")
        stream.flush()
        time.sleep(0.08)

    # wipe the spinner line
    stream.write("\r" + " " * (len(label) + 20) + "\r")
    stream.flush()
