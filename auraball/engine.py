from __future__ import annotations

"""Game rules for AuraBall.

Everything here is plain Python so the rules can run headless. The GUI owns a
single `GameState` and calls `tick` once per frame and `on_click` for each
pointer press. The two are never re-entrant with each other.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import logging
import math
import random


log = logging.getLogger(__name__)

HIT_MESSAGE = "Good job!"
MISS_MESSAGE = "Gotcha!"

FULL_ALPHA = 255


@dataclass(frozen=True)
class GameConfig:
    width: int = 500
    height: int = 500
    num_balls: int = 4
    ball_diameter: float = 30
    # Initial speed range per axis, [min, max)
    min_speed: float = 2.0
    max_speed: float = 5.0
    start_score: int = 1000
    miss_penalty: int = 25
    # Splash growth and fade per frame
    splash_growth: int = 4
    splash_fade: int = 3
    splash_max_size: int = 150
    # Losing aura banner fade per frame
    banner_fade: int = 5

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas must be positive, got {self.width}x{self.height}")
        if self.num_balls < 0:
            raise ValueError(f"num_balls must be >= 0, got {self.num_balls}")
        if self.ball_diameter <= 0:
            raise ValueError(f"ball_diameter must be > 0, got {self.ball_diameter}")
        if self.min_speed > self.max_speed:
            raise ValueError("min_speed must not exceed max_speed")
        if self.miss_penalty < 0:
            raise ValueError(f"miss_penalty must be >= 0, got {self.miss_penalty}")
        if self.splash_growth < 0:
            raise ValueError(f"splash_growth must be >= 0, got {self.splash_growth}")
        # Zero fade would keep splashes and the banner alive forever
        if self.splash_fade <= 0:
            raise ValueError(f"splash_fade must be > 0, got {self.splash_fade}")
        if self.banner_fade <= 0:
            raise ValueError(f"banner_fade must be > 0, got {self.banner_fade}")


@dataclass
class Ball:
    x: float
    y: float
    x_speed: float
    y_speed: float
    diameter: float = 30

    @property
    def radius(self) -> float:
        return self.diameter / 2

    def update(self, width: int, height: int) -> None:
        # Flip a velocity component once its axis leaves the canvas. No clamping.
        self.x += self.x_speed
        self.y += self.y_speed
        if self.x < 0 or self.x > width:
            self.x_speed *= -1
        if self.y < 0 or self.y > height:
            self.y_speed *= -1

    def contains(self, px: float, py: float) -> bool:
        """Return True if a point lies strictly inside the ball."""
        return math.hypot(px - self.x, py - self.y) < self.radius


@dataclass
class Splash:
    x: float
    y: float
    message: str
    size: int = 0
    alpha: int = FULL_ALPHA
    max_size: int = 150

    def update(self, growth: int, fade: int) -> None:
        self.size += growth
        self.alpha -= fade

    def is_done(self) -> bool:
        return self.alpha <= 0

    def shows_message(self) -> bool:
        """Return True once the splash has grown past half its max size."""
        return self.size > self.max_size / 2


@dataclass
class GameState:
    config: GameConfig
    balls: List[Ball] = field(default_factory=list)
    splashes: List[Splash] = field(default_factory=list)
    # Defaults to the configured start score
    score: Optional[int] = None
    won: bool = False
    losing_aura: bool = False
    losing_aura_alpha: int = FULL_ALPHA

    def __post_init__(self):
        if self.score is None:
            self.score = self.config.start_score


@dataclass
class ClickResult:
    """Outcome of a single pointer press, for logging and front ends."""

    hit: bool
    splash: Splash
    score: int
    balls_left: int
    won: bool


def spawn_ball(cfg: GameConfig, rng: random.Random) -> Ball:
    """Return a ball at a random canvas position with random speeds.

    Speeds are drawn from [min_speed, max_speed) on each axis.
    """
    span = cfg.max_speed - cfg.min_speed
    return Ball(
        x=rng.random() * cfg.width,
        y=rng.random() * cfg.height,
        x_speed=cfg.min_speed + rng.random() * span,
        y_speed=cfg.min_speed + rng.random() * span,
        diameter=cfg.ball_diameter,
    )


def spawn_balls(cfg: GameConfig, rng: random.Random) -> List[Ball]:
    """Return the configured number of fresh balls."""
    return [spawn_ball(cfg, rng) for _ in range(cfg.num_balls)]


def new_game(cfg: GameConfig, rng: random.Random) -> GameState:
    """Build the state for a new game with fresh balls and full score."""
    return GameState(config=cfg, balls=spawn_balls(cfg, rng), score=cfg.start_score)


def tick(state: GameState) -> None:
    """Advance balls, splashes and the losing aura banner by one frame."""
    cfg = state.config
    for ball in state.balls:
        ball.update(cfg.width, cfg.height)

    for splash in state.splashes:
        splash.update(cfg.splash_growth, cfg.splash_fade)
    state.splashes = [s for s in state.splashes if not s.is_done()]

    if state.losing_aura:
        state.losing_aura_alpha -= cfg.banner_fade
        if state.losing_aura_alpha <= 0:
            state.losing_aura = False


def find_hit(balls: List[Ball], px: float, py: float) -> Optional[int]:
    """Return the index of the topmost ball under a point, if any.

    Balls added later are drawn on top, so the scan runs newest first.
    """
    for i in range(len(balls) - 1, -1, -1):
        if balls[i].contains(px, py):
            return i
    return None


def on_click(state: GameState, px: float, py: float) -> Optional[ClickResult]:
    """Apply a pointer press at (px, py).

    A hit removes the ball and leaves a "Good job!" splash. A miss leaves a
    "Gotcha!" splash, costs the miss penalty and raises the losing aura
    banner. Clicks are ignored once the game is won.
    """
    if state.won:
        return None

    cfg = state.config
    idx = find_hit(state.balls, px, py)
    if idx is not None:
        del state.balls[idx]
        splash = Splash(px, py, HIT_MESSAGE, max_size=cfg.splash_max_size)
        log.debug("hit at (%.1f, %.1f), %d balls left", px, py, len(state.balls))
    else:
        splash = Splash(px, py, MISS_MESSAGE, max_size=cfg.splash_max_size)
        state.score -= cfg.miss_penalty
        state.losing_aura = True
        state.losing_aura_alpha = FULL_ALPHA
        log.debug("miss at (%.1f, %.1f), score now %d", px, py, state.score)
    state.splashes.append(splash)

    if not state.balls:
        state.won = True
        log.debug("all balls cleared, final score %d", state.score)

    return ClickResult(
        hit=idx is not None,
        splash=splash,
        score=state.score,
        balls_left=len(state.balls),
        won=state.won,
    )


def restart(state: GameState, rng: random.Random) -> None:
    """Reset the game in place: fresh balls, no splashes, full score."""
    cfg = state.config
    state.won = False
    state.splashes = []
    state.balls = spawn_balls(cfg, rng)
    state.score = cfg.start_score
    log.debug("restarted with %d balls", len(state.balls))


def request_restart(state: GameState, rng: random.Random) -> bool:
    """Restart only if the game has been won. Return True if it restarted."""
    if not state.won:
        return False
    restart(state, rng)
    return True
