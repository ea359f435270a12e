# vibe_tags.py
# Simple, deterministic 1–2 word tags by watchability tier.
# Scores run 0 (not started) to 288 (dead-even game, clock at zero).

from typing import Final, Tuple

# (minimum score, tag), highest tier first
TIERS: Final[Tuple[Tuple[int, str], ...]] = (
    (250, "Must Watch"),
    (200, "Nail-Biter"),
    (150, "Heating Up"),
    (100, "Worth a Look"),
    (50, "Background TV"),
    (1, "Early Going"),
)

NOT_STARTED: Final[str] = "Not Started"


def pick_vibe(score: int) -> str:
    """Return a short vibe tag for the given watchability score."""
    s = int(score)
    for floor, tag in TIERS:
        if s >= floor:
            return tag
    return NOT_STARTED
