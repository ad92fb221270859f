from __future__ import annotations

"""Pygame App for AuraBall.

Run with: `python -m gui.app`.

Controls:
  - Click: pop a ball (missing costs points)
  - Enter: restart after winning
  - Q/Esc: quit
"""

import argparse
import logging
import random
import sys

try:
    import pygame
except Exception as e:  # pragma: no cover - runtime dependency hint
    print("Pygame is required for GUI. Install via: pip install pygame", file=sys.stderr)
    raise

from auraball.engine import GameConfig, GameState, new_game, on_click, request_restart, tick

from . import constants as C
from .renderer import Renderer


log = logging.getLogger(__name__)

# Left, middle and right buttons. Wheel buttons (4, 5) are not clicks.
CLICK_BUTTONS = (1, 2, 3)
RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def parse_args(argv=None):
    """Parse command line flags for the GUI app."""
    p = argparse.ArgumentParser(description="AuraBall (Pygame)")
    p.add_argument("--seed", type=int, default=None, help="Deterministic seed (optional)")
    p.add_argument("--balls", type=int, default=GameConfig.num_balls)
    p.add_argument("--fps", type=int, default=C.TARGET_FPS)
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    return p.parse_args(argv)


def handle_event(state: GameState, event: pygame.event.Event, rng: random.Random) -> bool:
    """Apply one pygame event to the game state.

    Returns False when the event asks the app to quit.
    """
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key in QUIT_KEYS:
            return False
        if event.key in RESTART_KEYS and request_restart(state, rng):
            log.info("new round started")
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button in CLICK_BUTTONS:
        px, py = event.pos
        result = on_click(state, px, py)
        if result is not None and result.won:
            log.info("round won with score %d", result.score)
    return True


def run_frame(state: GameState, events, renderer: Renderer, rng: random.Random) -> bool:
    """Handle pending events, then tick and draw one frame.

    Returns False as soon as an event asks to quit; the frame is then
    neither ticked nor drawn.
    """
    for event in events:
        if not handle_event(state, event, rng):
            return False
    tick(state)
    renderer.draw(state)
    return True


def run(argv=None) -> int:
    """Run the pygame window until the player quits.

    Each frame ticks the game once, then draws it. Events are handled
    between frames so clicks never interleave with a tick.
    """
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.balls < 1 or args.fps < 1:
        print("Invalid input. Please try again.")
        return 2

    pygame.init()
    pygame.display.set_caption(C.WINDOW_TITLE)
    screen = pygame.display.set_mode(C.CANVAS_SIZE)
    clock = pygame.time.Clock()

    rng = random.Random(args.seed)
    cfg = GameConfig(width=C.CANVAS_SIZE[0], height=C.CANVAS_SIZE[1], num_balls=args.balls)
    state = new_game(cfg, rng)
    renderer = Renderer(screen, rng)

    try:
        while True:
            clock.tick(args.fps)
            if not run_frame(state, pygame.event.get(), renderer, rng):
                break
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(run())
