"""Rebuild board snapshots from a JSONL match log."""

import json
from dataclasses import dataclass, field, replace
from pathlib import Path


@dataclass
class BoardSnapshot:
    """Board state after one logged event."""

    game: int = 0
    layout: list[str] = field(default_factory=list)
    board: str = ""
    flips: int = 0
    last_action: str = ""
    finished: bool = False

    def visible_card(self, index: int) -> str:
        """Get the display code for a slot ("##" face down, "" removed)."""
        state = self.board[index]
        if state == "u":
            return self.layout[index]
        if state == "r":
            return ""
        return "##"


def load_events(path: Path | str) -> list[dict]:
    """Load all events from JSONL file."""
    events = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                events.append(json.loads(line))
    return events


def build_boards(events: list[dict]) -> list[BoardSnapshot]:
    """Build displayable snapshots from events.

    Events that do not change the board (session_start) still produce a
    snapshot so the viewer can show them.
    """
    snapshots: list[BoardSnapshot] = []
    current = BoardSnapshot()

    for event in events:
        event_type = event.get("type")

        if event_type == "session_start":
            current = BoardSnapshot(
                last_action=f"Session started ({event.get('slot_count', 0)} slots)"
            )

        elif event_type == "deal":
            layout = event.get("layout", "")
            current = BoardSnapshot(
                game=event.get("game", 0),
                layout=layout.split(",") if layout else [],
                board=event.get("board", ""),
                last_action="Cards dealt",
            )

        elif event_type == "tap":
            current.board = event.get("board", current.board)
            current.flips = event.get("flips", current.flips)
            current.last_action = (
                f"Tap slot {event.get('slot')}: {event.get('outcome', '')}"
            )

        elif event_type == "resolve":
            current.board = event.get("board", current.board)
            current.last_action = "Pair resolved"

        elif event_type == "game_end":
            current.flips = event.get("flips", current.flips)
            current.finished = True
            current.last_action = f"Game over - total flips: {current.flips}"

        else:
            continue

        snapshots.append(replace(current, layout=list(current.layout)))

    return snapshots


def find_game_start(snapshots: list[BoardSnapshot], game_num: int) -> int | None:
    """Find the snapshot index of the deal for a game."""
    for i, s in enumerate(snapshots):
        if s.game == game_num and s.last_action == "Cards dealt":
            return i
    return None
