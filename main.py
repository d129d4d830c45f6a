from __future__ import annotations

import argparse
import os
from pathlib import Path

from game.engine import GameEngine
from game.ruleset import DEFAULT_RULES
from state.persistence import ScoreStore
from ui.cli import gameloop


# Config
highscore_rules = DEFAULT_RULES["highscores"]
HIGHSCORE_ENV = "SIMON_HIGHSCORES"


def default_highscore_path(environ=None) -> Path:
    """Resolve the high score file from the environment, once, at startup."""
    environ = os.environ if environ is None else environ

    override = environ.get(HIGHSCORE_ENV)
    if override:
        return Path(override)

    home = environ.get("HOME") or environ.get("USERPROFILE") or Path.home()
    return Path(home) / highscore_rules["filename"]


def build_parser():
    ap = argparse.ArgumentParser(
        prog="simon",
        description="Simon Says: repeat the growing color sequence.",
    )
    sub = ap.add_subparsers(dest="command")
    sub.add_parser("play", help="Start a new game")
    sub.add_parser("highscore", help="View high scores")
    sub.add_parser("reset", help="Clear high scores")
    sub.add_parser("plot", help="Chart the high score table")
    return ap


def run(argv=None, *, store=None, engine=None, **io):
    """Dispatch one command. ``io`` is forwarded to the game loop."""
    ap = build_parser()
    args = ap.parse_args(argv)
    write = io.get("write", print)

    if store is None:
        store = ScoreStore(
            default_highscore_path(),
            max_entries=highscore_rules["max_entries"],
        )

    if args.command is None:
        write(ap.format_help())
        write('Use the "play" command to start the game!')
        return None

    if args.command == "play":
        return gameloop(store, engine or GameEngine(), **io)

    if args.command == "highscore":
        write(store.show())
        return None

    if args.command == "reset":
        store.reset()
        write("High scores cleared!")
        return None

    if args.command == "plot":
        # Imported here, matplotlib is slow to load
        from plot.plot import compute_table_stats, plot_highscores

        table = store.load()
        if not table:
            write("No high scores yet.")
            return None
        # The chart sits beside the score file, e.g. ~/.simon_highscores.png
        out = plot_highscores(table, store.path.with_suffix(".png"))
        stats = compute_table_stats(table)
        write(
            f"{stats['count']} scores, best {stats['best']:.0f}, "
            f"mean {stats['mean']:.2f}, median {stats['median']:.1f}"
        )
        write(f"Chart written to {out}")
        return out

    return None


def main():
    run()


if __name__ == "__main__":
    main()
