from typing import Iterable, Optional

from models import Broadcast, Odds, Situation


def hex_color(raw: str) -> str:
    """
    Feed colors come as 'RRGGBB' (sometimes already '#RRGGBB').
    Output: '#RRGGBB'
    """
    return "#" + raw.strip().lstrip("#")


def rank_label(rank: Optional[int]) -> str:
    """'#5' for a ranked team, '' otherwise."""
    if rank is None:
        return ""
    return f"#{rank}"


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def down_distance_text(situation: Optional[Situation]) -> str:
    """
    '3rd & 7 at MICH 35' while a down is in play; '' between plays,
    at kickoffs, or when there is no live situation.
    """
    if situation is None or situation.down <= 0:
        return ""
    text = f"{ordinal(situation.down)} & {situation.distance}"
    if situation.possession_text:
        text += f" at {situation.possession_text}"
    return text


def broadcast_label(broadcasts: Iterable[Broadcast]) -> str:
    """
    Network names joined with ' / '. National and international markets
    come first; order within a group follows the feed.
    """
    national: list[str] = []
    other: list[str] = []
    for b in broadcasts:
        bucket = national if b.market.lower() in ("national", "international") else other
        for nm in b.names:
            nm = nm.strip()
            if nm and nm not in national and nm not in other:
                bucket.append(nm)
    return " / ".join(national + other)


def odds_label(odds: Optional[Odds]) -> str:
    """'MICH -7.5 · O/U 48.5', or '' without odds."""
    if odds is None:
        return ""
    return f"{odds.details} · O/U {odds.over_under:g}"
