import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bubblepop.const import BUBBLE_DIAMETER, HUD_HEIGHT, SCREEN_H, SCREEN_W
from bubblepop.store.highscores import HighScoreStore
from bubblepop.store.settings import SettingsStore


def print_scores(store: HighScoreStore) -> None:
    scores = store.load_top()
    print("Top 10 Players")
    if not scores:
        print("  (no scores yet)")
    for rank, entry in enumerate(scores, start=1):
        print(f"{rank:>3}. {entry.name:<20} {entry.score:>6}")


def main():
    parser = argparse.ArgumentParser(description="Bubble Pop Launcher")
    parser.add_argument("--name", default="", help="Player name (required to play)")
    parser.add_argument("--screen", default=f"{SCREEN_W}x{SCREEN_H}", help="Screen size WxH, e.g. 480x800")
    parser.add_argument("--duration", type=int, help="Save a new game duration in seconds (10-120)")
    parser.add_argument("--max-bubbles", type=int, help="Save a new bubble limit (1-20)")
    parser.add_argument("--reset-settings", action="store_true", help="Restore default settings")
    parser.add_argument("--scores", action="store_true", help="Print the high-score table and exit")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        w, h = map(int, args.screen.lower().split("x"))
    except ValueError:
        parser.error(f"--screen must look like 480x800, got {args.screen!r}")
    if w <= BUBBLE_DIAMETER or h <= HUD_HEIGHT + BUBBLE_DIAMETER:
        parser.error(f"--screen {w}x{h} is too small for a bubble")

    settings = SettingsStore()
    highscores = HighScoreStore()

    if args.reset_settings:
        settings.reset()
    if args.duration is not None or args.max_bubbles is not None:
        settings.save(game_duration=args.duration, max_bubbles=args.max_bubbles)

    if args.scores:
        print_scores(highscores)
        return

    if not args.name.strip():
        if args.reset_settings or args.duration is not None or args.max_bubbles is not None:
            return
        parser.error("--name is required to play")

    # pygame is only needed once we actually open a window
    from bubblepop.app.loop import run_game

    run_game(
        player_name=args.name.strip(),
        screen_size=(w, h),
        settings=settings,
        highscores=highscores,
    )


if __name__ == "__main__":
    main()
