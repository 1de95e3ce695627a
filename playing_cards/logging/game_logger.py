"""Match logger for step-by-step replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from playing_cards.models.slot import Slot, TapOutcome

from .formatters import format_board, format_layout


class GameLogConfig(BaseModel):
    """Configuration for match logging."""

    enabled: bool = False
    output_path: str = "match_log.jsonl"


class GameLogger:
    """Logger for match events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of a match.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize match logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, slot_count: int, seed: int | None) -> None:
        """Log session start.

        Args:
            slot_count: Number of slots on the board.
            seed: Random seed used for deals, if fixed.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "slot_count": slot_count,
            "seed": seed,
        })

    def log_deal(self, game_num: int, slots: list[Slot]) -> None:
        """Log a fresh deal with the full card layout.

        Args:
            game_num: Game number within the session.
            slots: Slots after the deal.
        """
        self._write({
            "type": "deal",
            "game": game_num,
            "layout": format_layout(slots),
            "board": format_board(slots),
        })

    def log_tap(
        self,
        game_num: int,
        slot_index: int,
        outcome: TapOutcome,
        flips: int,
        slots: list[Slot],
    ) -> None:
        """Log a single tap.

        Args:
            game_num: Game number within the session.
            slot_index: Slot that was tapped.
            outcome: What the tap did.
            flips: Flip counter after the tap.
            slots: Slots after the tap.
        """
        self._write({
            "type": "tap",
            "game": game_num,
            "slot": slot_index,
            "outcome": outcome.value,
            "flips": flips,
            "board": format_board(slots),
        })

    def log_resolve(self, game_num: int, slots: list[Slot]) -> None:
        """Log a deferred pair being resolved."""
        self._write({
            "type": "resolve",
            "game": game_num,
            "board": format_board(slots),
        })

    def log_game_end(self, game_num: int, flips: int) -> None:
        """Log game end with the total flip count.

        Args:
            game_num: Game number within the session.
            flips: Total flips in the game.
        """
        self._write({
            "type": "game_end",
            "game": game_num,
            "flips": flips,
        })
