from __future__ import annotations

import argparse
import logging

from .autoplay import play_session
from .engine import GameConfig


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def is_valid_balls(v: int) -> bool:
    """Return True for at least one ball."""
    return v >= 1


def is_valid_accuracy(v: int) -> bool:
    """Return True if accuracy is within zero to one hundred inclusive."""
    return 0 <= v <= 100


def main(argv=None) -> int:
    """Run a scripted game in text mode and print each click.

    The bot clicks at a fixed interval and hits with the given accuracy.
    """
    parser = argparse.ArgumentParser(description="AuraBall autoplay (CLI)")
    parser.add_argument("--seed", dest="seed", type=int, help="Random seed for reproducibility", default=None)
    parser.add_argument("--balls", dest="num_balls", type=int, default=4, help="Number of balls (default 4)")
    parser.add_argument("--accuracy", dest="accuracy", type=int, default=75, help="Hit chance per click in percent (default 75)")
    parser.add_argument("--click-every", dest="click_every", type=int, default=20, help="Frames between clicks (default 20)")
    parser.add_argument("--max-frames", dest="max_frames", type=int, default=10_000, help="Frame budget before giving up")
    parser.add_argument("--log-level", dest="log_level", choices=LOG_LEVELS, default="WARNING")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not is_valid_balls(args.num_balls) or not is_valid_accuracy(args.accuracy):
        print("Invalid input. Please try again.")
        return 2
    if args.click_every < 1 or args.max_frames < 1:
        print("Invalid input. Please try again.")
        return 2

    cfg = GameConfig(num_balls=args.num_balls)

    for event, data in play_session(
        cfg,
        seed=args.seed,
        accuracy=args.accuracy,
        click_every=args.click_every,
        max_frames=args.max_frames,
    ):
        if event == "start":
            print(f"Start of play - {data['balls']} balls - score {data['score']}")
        elif event == "hit":
            x, y = data["pos"]
            print(f"Frame {data['frame']}: {data['message']} ({x:.0f}, {y:.0f}) - balls left {data['balls_left']}")
        elif event == "miss":
            x, y = data["pos"]
            print(f"Frame {data['frame']}: {data['message']} ({x:.0f}, {y:.0f}) - score {data['score']}")
        elif event == "win":
            print(f"Wow! You are the winner! Final Score: {data['score']} ({data['clicks']} clicks, {data['frame']} frames)")
        elif event == "timeout":
            print(f"Out of time after {data['frame']} frames. Score: {data['score']}, balls left: {data['balls_left']}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
