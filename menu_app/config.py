"""Runtime configuration defaults for the menu app."""

from __future__ import annotations

import os

APP_TITLE = "Christoffel's Menu"
APP_SUB_TITLE = "Starter / Main / Dessert"

CURRENCY_SYMBOL = "R"

# Prices must stay below 10 ** MAX_PRICE_DIGITS.
MAX_PRICE_DIGITS = 9

# List fade-in when the item count changes.
FADE_START_OPACITY = 0.6
FADE_DURATION_SECONDS = 0.3

DEBUG_LOG_PATH = "/tmp/menu-app-debug.log"
_DEBUG_LOG_OVERRIDE_ENV = "MENU_APP_DEBUG_LOG"


def resolve_debug_log_path() -> str:
    """
    Resolve the debug log path.

    Resolution order:
    1. MENU_APP_DEBUG_LOG (if set and non-empty)
    2. DEBUG_LOG_PATH
    """
    override = os.environ.get(_DEBUG_LOG_OVERRIDE_ENV, "").strip()
    if override:
        return os.path.expanduser(override)
    return DEBUG_LOG_PATH
