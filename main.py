# main.py
import argparse
import time
from typing import List, Optional

from config import POLL_SECONDS
from espn_adapter import Failure, FetchState, Loading, fetch_scoreboard
from models import Competition
from presentation import GameCard, TeamLine, build_cards, line_score_header

SCHEDULED = "STATUS_SCHEDULED"


def _has_kicked_off(competition: Competition) -> bool:
    return competition.status.type.name != SCHEDULED


def _cell(value: Optional[int]) -> str:
    return "-" if value is None else str(value)


def _format_team_row(line: TeamLine, with_ot: bool) -> str:
    """'#5 MICH (6-1) ●  7  3  0 10 | 20' style row for one team."""
    name = f"{line.rank_label} {line.abbreviation}".strip()
    if line.is_error:
        name = f"!! {name}"
    if line.record:
        name += f" ({line.record})"
    if line.has_possession:
        name += " ●"

    cells = [_cell(v) for v in line.periods]
    if with_ot:
        cells.append(_cell(line.overtime))
    periods = " ".join(f"{c:>3}" for c in cells)
    return f"{name:<22}{periods} | {line.total:>3}"


def _format_console_block(card: GameCard, header: List[str]) -> str:
    """Build the console text we print for a single game."""
    with_ot = "OT" in header
    first_pct = card.bar.left.width / card.bar.track_width
    second_pct = card.bar.right.width / card.bar.track_width

    network = card.broadcast or "Streaming / Local"
    head = " ".join(f"{h:>3}" for h in header)

    lines = [
        f"🏈 {card.matchup} — {network} — {card.status_text}",
        f"Watchability: {card.watchability} ({card.vibe})",
        f"{'':<22}{head} |   T",
        _format_team_row(card.first, with_ot),
        _format_team_row(card.second, with_ot),
        f"Win prob: {card.first.abbreviation} {first_pct:.0%} / "
        f"{card.second.abbreviation} {second_pct:.0%}",
    ]
    if card.situation_text:
        lines.append(card.situation_text)
    if card.odds:
        lines.append(card.odds)
    lines.append("-" * 40)
    return "\n".join(lines)


def render(state: FetchState, include_scheduled: bool = False) -> str:
    """Exactly one of: loading line, full game list, error panel."""
    if isinstance(state, Loading):
        return "[LOADING] fetching scoreboard..."

    if isinstance(state, Failure):
        return "\n".join(
            [
                "=" * 40,
                "[ERROR] could not load scoreboard",
                f"reason: {state.error.describe()}",
                "=" * 40,
            ]
        )

    keep = None if include_scheduled else _has_kicked_off
    cards = build_cards(state.response, keep=keep)
    if not cards:
        return "[INFO] no games to show"

    header = line_score_header(cards)
    return "\n".join(_format_console_block(card, header) for card in cards)


def run_cycle(url: Optional[str] = None, include_scheduled: bool = False) -> FetchState:
    print(render(Loading()), flush=True)
    state = fetch_scoreboard(url=url)
    print(render(state, include_scheduled=include_scheduled), flush=True)
    return state


def run(url: Optional[str] = None, include_scheduled: bool = False, once: bool = False) -> None:
    print("[RUN] starting college football watchability board", flush=True)

    while True:
        run_cycle(url=url, include_scheduled=include_scheduled)
        if once:
            return
        time.sleep(POLL_SECONDS)


def main():
    parser = argparse.ArgumentParser(description="Rank live college football games by watchability.")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Fetch and render a single cycle, then exit.",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Include games that have not kicked off yet.",
    )
    parser.add_argument(
        "--url",
        help="Scoreboard endpoint (defaults to the configured environment).",
    )

    args = parser.parse_args()
    run(url=args.url, include_scheduled=args.all, once=args.once)


if __name__ == "__main__":
    main()
