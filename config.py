# config.py
# Process-wide settings for the college football watchability board.
#
# Everything here is read once from the environment at import time and
# never changed afterwards.

from __future__ import annotations

import os
from typing import Final

# ----------------------------------------------------------------------
# Fetch
# ----------------------------------------------------------------------

WATCH_ENV: Final[str] = os.getenv("WATCH_ENV", "production").lower()

PRODUCTION_SCOREBOARD_URL: Final[str] = (
    "https://site.api.espn.com/apis/site/v2/sports/football/college-football/scoreboard"
)
TESTING_SCOREBOARD_URL: Final[str] = os.getenv(
    "TESTING_SCOREBOARD_URL", "http://localhost:8000/scoreboard.json"
)

# Explicit override wins over WATCH_ENV
SCOREBOARD_URL_OVERRIDE: Final[str] = os.getenv("SCOREBOARD_URL", "").strip()

# groups=80 is FBS on ESPN
SCOREBOARD_GROUPS: Final[str] = os.getenv("SCOREBOARD_GROUPS", "80")
SCOREBOARD_LIMIT: Final[int] = int(os.getenv("SCOREBOARD_LIMIT", "300"))
SCOREBOARD_DAYS_BACK: Final[int] = int(os.getenv("SCOREBOARD_DAYS_BACK", "0"))
SCOREBOARD_DAYS_AHEAD: Final[int] = int(os.getenv("SCOREBOARD_DAYS_AHEAD", "1"))

FETCH_TIMEOUT: Final[float] = float(os.getenv("FETCH_TIMEOUT", "8.0"))
POLL_SECONDS: Final[int] = int(os.getenv("POLL_SECONDS", "60"))

DEBUG: Final[bool] = os.getenv("DEBUG_WATCH", "1").lower() not in ("0", "false", "no")

# ----------------------------------------------------------------------
# Presentation
# ----------------------------------------------------------------------

BAR_TRACK_WIDTH: Final[float] = 200.0
BAR_OUTLINE_COLOR: Final[str] = "#000000"

# Team colors arrive without the leading '#'
DEFAULT_ALTERNATE_COLOR: Final[str] = "000000"
SENTINEL_COLOR: Final[str] = "ff0000"

REGULAR_PERIODS: Final[int] = 4


def scoreboard_url() -> str:
    """Endpoint for the current environment."""
    if SCOREBOARD_URL_OVERRIDE:
        return SCOREBOARD_URL_OVERRIDE
    if WATCH_ENV == "testing":
        return TESTING_SCOREBOARD_URL
    return PRODUCTION_SCOREBOARD_URL
