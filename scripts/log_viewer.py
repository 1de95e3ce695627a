#!/usr/bin/env python3
"""Interactive viewer for memory match logs.

Usage:
    python scripts/log_viewer.py match_log.jsonl

Keys:
    n: Next step
    p: Previous step
    c: Continuous playback (1 sec interval), any key to stop
    g: Jump to game number
    r: Toggle revealing face-down cards
    q: Quit
"""

import argparse
import curses
import sys
from pathlib import Path

from playing_cards.logging.replay import (
    BoardSnapshot,
    build_boards,
    find_game_start,
    load_events,
)

ROW_WIDTH = 4


def draw_screen(
    stdscr, snapshot: BoardSnapshot, step: int, total: int, reveal: bool
) -> None:
    """Draw the current snapshot to the screen."""
    stdscr.clear()
    height, width = stdscr.getmaxyx()
    width = min(width, 100)

    line = 0
    sep = "=" * 60

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 1

    game_info = f"Game {snapshot.game} / Flips {snapshot.flips}"
    step_info = f"Step {step + 1}/{total}"
    done = "  [DONE]" if snapshot.finished else ""
    middle_space = 60 - len(game_info) - len(done) - len(step_info)
    header = f"{game_info}{done}{' ' * max(middle_space, 1)}{step_info}"
    stdscr.addnstr(line, 0, header, width - 1)
    line += 1

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 2

    stdscr.addnstr(line, 0, f"Last: {snapshot.last_action}", width - 1)
    line += 2

    # Board grid
    for start in range(0, len(snapshot.layout), ROW_WIDTH):
        cells = []
        for i in range(start, min(start + ROW_WIDTH, len(snapshot.layout))):
            label = snapshot.visible_card(i)
            if reveal and label == "##":
                label = snapshot.layout[i].lower()
            cells.append(f"{i:>2}:{label:<4}")
        stdscr.addnstr(line, 0, "  ".join(cells), width - 1)
        line += 1

    line += 1
    stdscr.addnstr(line, 0, sep, width - 1)
    line += 1

    help_line = "[n]ext [p]rev [c]ontinuous [g]ame [r]eveal [q]uit"
    stdscr.addnstr(line, 0, help_line, width - 1)

    stdscr.refresh()


def input_number(stdscr, prompt: str) -> int | None:
    """Get a number from the user."""
    height, width = stdscr.getmaxyx()
    stdscr.addnstr(height - 2, 0, prompt, width - 1)
    stdscr.clrtoeol()
    stdscr.refresh()

    curses.echo()
    curses.curs_set(1)
    try:
        inp = stdscr.getstr(height - 2, len(prompt), 10).decode("utf-8")
        return int(inp) if inp.strip() else None
    except (ValueError, curses.error):
        return None
    finally:
        curses.noecho()
        curses.curs_set(0)


def main_loop(stdscr, snapshots: list[BoardSnapshot]) -> None:
    """Main event loop."""
    curses.curs_set(0)
    stdscr.nodelay(False)
    stdscr.timeout(-1)

    step = 0
    total = len(snapshots)
    reveal = False

    while True:
        draw_screen(stdscr, snapshots[step], step, total, reveal)

        try:
            key = stdscr.getch()
        except curses.error:
            continue

        if key == ord("q"):
            break
        elif key == ord("n"):
            if step < total - 1:
                step += 1
        elif key == ord("p"):
            if step > 0:
                step -= 1
        elif key == ord("r"):
            reveal = not reveal
        elif key == ord("c"):
            # Continuous playback
            stdscr.nodelay(True)
            stdscr.timeout(1000)
            while step < total - 1:
                step += 1
                draw_screen(stdscr, snapshots[step], step, total, reveal)
                try:
                    k = stdscr.getch()
                    if k != -1:
                        break
                except curses.error:
                    pass
            stdscr.nodelay(False)
            stdscr.timeout(-1)
        elif key == ord("g"):
            num = input_number(stdscr, "Jump to game: ")
            if num is not None:
                idx = find_game_start(snapshots, num)
                if idx is not None:
                    step = idx


def main() -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Interactive viewer for memory match logs"
    )
    parser.add_argument("logfile", type=Path, help="Path to match log file (JSONL)")
    args = parser.parse_args()

    if not args.logfile.exists():
        print(f"Error: File not found: {args.logfile}", file=sys.stderr)
        return 1

    print(f"Loading {args.logfile}...")
    events = load_events(args.logfile)
    print(f"Loaded {len(events)} events")

    snapshots = build_boards(events)
    print(f"Built {len(snapshots)} displayable boards")

    if not snapshots:
        print("Error: No boards to display", file=sys.stderr)
        return 1

    curses.wrapper(lambda stdscr: main_loop(stdscr, snapshots))
    return 0


if __name__ == "__main__":
    sys.exit(main())
