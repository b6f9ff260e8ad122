import enum
import logging
from typing import NamedTuple

import numpy as np

from coin_catch.config import CASUAL
from coin_catch.difficulty import DifficultyController
from coin_catch.entities import Basket, Coin
from coin_catch.sample import NO_INPUT
from coin_catch.scoring import ScoreBoard, overlaps
from coin_catch.storage import MemoryStore

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class TickResult(NamedTuple):
    spawned: int = 0
    caught: int = 0
    missed: int = 0
    levelled_up: bool = False
    game_over: bool = False


class Snapshot(NamedTuple):
    """Read-only view of a session for the HUD and the renderer."""

    phase: Phase
    score: int
    best_score: int
    total_currency: int
    level: int
    misses: int
    max_misses: int
    leveled: bool
    fall_speed: float
    spawn_interval: float
    coin_count: int
    level_banner: bool


class Session:
    """One play session: the state machine plus the per-tick simulation.

    The session is built in ``IDLE`` and starts itself ``autostart_ms``
    after ``created_at``. While ``RUNNING`` each ``tick`` performs, in
    order: spawn check, difficulty update, basket update from the input
    sample, then advance-and-collide for every coin in list order. The
    store is read once here and written on every counter change.
    """

    def __init__(self, config=CASUAL, store=None, rng=None, created_at=0.0):
        self.config = config
        self.store = store if store is not None else MemoryStore()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.play_width = float(config.play_width)
        self.play_height = float(config.play_height)

        self.scores = ScoreBoard(self.store)
        self.difficulty = DifficultyController(config)
        self.basket = Basket.for_play_area(config, self.play_width, self.play_height)
        self.coins = []

        self.phase = Phase.IDLE
        self.created_at = created_at
        self.autostart_at = created_at + config.autostart_ms
        self.level_banner_until = None
        self.now = created_at

    # --- State machine ---

    def start(self, now):
        self.scores.reset_round()
        self.difficulty.reset(now)
        self.coins = []
        self.level_banner_until = None
        self.phase = Phase.RUNNING
        logger.info("Session started (%s mode) at %.0f ms", self.config.name, now)

    def restart(self, now):
        """Start a fresh round; best score and total currency are kept."""
        self.start(now)

    def end(self):
        self.phase = Phase.GAME_OVER
        logger.info("Game over: score %d, level %d, best %d",
                    self.scores.score, self.difficulty.level, self.scores.best_score)

    @property
    def running(self):
        return self.phase is Phase.RUNNING

    @property
    def game_over(self):
        return self.phase is Phase.GAME_OVER

    def resize(self, width, height):
        self.play_width = float(width)
        self.play_height = float(height)
        self.basket.anchor(self.play_width, self.play_height)

    # --- Simulation ---

    def tick(self, now, sample=NO_INPUT):
        self.now = now
        if self.phase is Phase.IDLE:
            if now >= self.autostart_at:
                self.start(now)
            return TickResult()
        if self.phase is not Phase.RUNNING:
            return TickResult()

        spawned = 0
        if self.difficulty.should_spawn(now):
            self.coins.append(Coin.spawn(self.rng, self.play_width, self.difficulty.fall_speed,
                                         self.config.coin_radius))
            self.difficulty.on_spawn(now)
            spawned = 1

        levelled_up = self.difficulty.update(now)
        if levelled_up:
            self.level_banner_until = now + self.config.level_banner_ms
        elif self.level_banner_until is not None and now >= self.level_banner_until:
            self.level_banner_until = None

        self.basket.compute_target(sample, self.play_width, self.play_height)
        self.basket.follow_target()

        caught, missed = self._update_coins()
        return TickResult(spawned, caught, missed, levelled_up, self.game_over)

    def _update_coins(self):
        caught = missed = 0
        bounds = self.basket.bounds()
        for coin in self.coins[:]:
            coin.advance(self.play_height)

            if coin.active and overlaps(coin, bounds):
                coin.active = False
                self.coins.remove(coin)
                self.scores.record_catch()
                caught += 1
                logger.debug("Caught coin at (%.0f, %.0f), score %d", coin.x, coin.y, self.scores.score)
            elif not coin.active:
                self.coins.remove(coin)
                missed += 1
                logger.debug("Missed coin at x=%.0f", coin.x)
                if self.difficulty.record_miss():
                    self.end()
                    break
        return caught, missed

    def snapshot(self):
        return Snapshot(
            phase=self.phase,
            score=self.scores.score,
            best_score=self.scores.best_score,
            total_currency=self.scores.total_currency,
            level=self.difficulty.level,
            misses=self.difficulty.misses,
            max_misses=self.config.max_misses,
            leveled=self.config.leveled,
            fall_speed=self.difficulty.fall_speed,
            spawn_interval=self.difficulty.spawn_interval,
            coin_count=len(self.coins),
            level_banner=self.level_banner_until is not None,
        )
