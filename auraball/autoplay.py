from __future__ import annotations

"""Scripted headless player for AuraBall.

`play_session` drives the engine frame by frame and yields simple events,
so text front ends and batch probes can run whole games without a window.
Events are `(name, data)` tuples: start, hit, miss, win or timeout.
"""

from typing import Dict, Generator, Optional, Tuple
import random

from .engine import GameConfig, GameState, new_game, on_click, tick


# Random miss targets tried before falling back to an off-canvas click
MISS_ATTEMPTS = 20
OFF_CANVAS_PX = 100.0


def pick_miss_point(state: GameState, rng: random.Random) -> Tuple[float, float]:
    """Return a click point that lies outside every ball.

    Random canvas points are tried first. If all are covered, a point well
    outside the canvas is used, which always counts as a miss.
    """
    cfg = state.config
    for _ in range(MISS_ATTEMPTS):
        px = rng.random() * cfg.width
        py = rng.random() * cfg.height
        if not any(b.contains(px, py) for b in state.balls):
            return px, py
    return -OFF_CANVAS_PX, -OFF_CANVAS_PX


def play_session(
    cfg: Optional[GameConfig] = None,
    seed: Optional[int] = None,
    accuracy: int = 75,
    click_every: int = 20,
    max_frames: int = 10_000,
) -> Generator[Tuple[str, Dict], None, None]:
    """Play one game and yield an event for each click and for the ending.

    Every `click_every` frames the bot rolls `accuracy` percent. On success
    it clicks the centre of the topmost ball, otherwise it clicks empty space.
    The session ends with a win or after `max_frames` frames.
    """
    cfg = cfg or GameConfig()
    rng = random.Random(seed)
    state = new_game(cfg, rng)

    yield ("start", {"balls": len(state.balls), "score": state.score})

    if not state.balls:
        # Nothing to pop, nothing to click
        state.won = True
        yield ("win", {"frame": 0, "score": state.score, "clicks": 0})
        return

    clicks = 0
    for frame in range(1, max_frames + 1):
        tick(state)
        if frame % click_every:
            continue

        if rng.randint(0, 99) < accuracy:
            target = state.balls[-1]
            px, py = target.x, target.y
        else:
            px, py = pick_miss_point(state, rng)
        result = on_click(state, px, py)
        clicks += 1

        yield (
            "hit" if result.hit else "miss",
            {
                "frame": frame,
                "pos": (px, py),
                "message": result.splash.message,
                "score": result.score,
                "balls_left": result.balls_left,
            },
        )

        if result.won:
            yield ("win", {"frame": frame, "score": state.score, "clicks": clicks})
            return

    yield (
        "timeout",
        {"frame": max_frames, "score": state.score, "balls_left": len(state.balls), "clicks": clicks},
    )
