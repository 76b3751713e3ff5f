from __future__ import annotations
from arena4 import config

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[1;31m"
FG_BLUE = "\033[1;34m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[37m"


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"
