import logging
import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from coin_catch.config import get_config
from coin_catch.controls import ActionSampler
from coin_catch.loop import FixedStepClock, LoopDriver
from coin_catch.render import Renderer
from coin_catch.session import Phase, Session
from coin_catch.storage import MemoryStore

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

logger = logging.getLogger(__name__)


class GameEnv(gym.Env):
    """
    A Gymnasium environment for "Coin Catch".
    Coins fall from the top of the screen and the player steers a basket to
    catch them. One ``step`` is one frame of simulated time. In casual mode
    the game never ends on its own; in leveled mode missing too many coins
    within one level ends the episode.
    """
    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    # User-facing control string
    user_guide = (
        "Controls: ←→ (and ↑↓ in leveled mode) or the mouse to move the basket."
    )

    # User-facing game description
    game_description = (
        "Catch the falling Mall Dollar coins in your basket. Leveled mode speeds up every "
        "10 seconds and ends after 3 misses in a level."
    )

    # Frames auto-advance for smooth, real-time gameplay
    auto_advance = True

    MAX_STEPS = 5000

    REWARD_CATCH = 1.0
    REWARD_MISS = -1.0
    REWARD_GAME_OVER = -10.0

    def __init__(self, render_mode="rgb_array", mode="casual", config=None, store=None):
        super().__init__()
        self.render_mode = render_mode
        self.config = config if config is not None else get_config(mode)
        self.store = store if store is not None else MemoryStore()

        self.screen_width = int(self.config.play_width)
        self.screen_height = int(self.config.play_height)

        # Gymnasium spaces
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.screen_height, self.screen_width, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        # Pygame setup for headless rendering
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.screen_width, self.screen_height))
        self.renderer = Renderer(self.screen)

        # Game state (initialized in reset)
        self.sampler = ActionSampler()
        self.clock = None
        self.session = None
        self.driver = None
        self.steps = 0

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        options = options or {}

        self.steps = 0
        self.sampler = ActionSampler()
        self.clock = FixedStepClock(self.config.frame_ms)
        self.session = Session(self.config, store=self.store, rng=self.np_random, created_at=self.clock.now())
        if options.get("skip_autostart"):
            self.session.start(self.clock.now())
        self.driver = LoopDriver(self.session, self.sampler, self.clock, renderer=self.renderer)
        self.renderer.draw(self.session)

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.session.game_over:
            # Nothing moves once the session has ended
            return self._get_observation(), 0.0, True, False, self._get_info()

        self.sampler.set_action(action)
        result = self.driver.step()
        self.clock.wait_next_frame()
        self.steps += 1

        reward = result.caught * self.REWARD_CATCH
        if self.config.leveled:
            reward += result.missed * self.REWARD_MISS
        if result.game_over:
            reward += self.REWARD_GAME_OVER

        terminated = bool(result.game_over)
        truncated = self.steps >= self.MAX_STEPS

        return (
            self._get_observation(),
            float(reward),
            terminated,
            truncated,
            self._get_info()
        )

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        state = self.session.snapshot()
        return {
            "score": state.score,
            "best_score": state.best_score,
            "total_currency": state.total_currency,
            "level": state.level,
            "missed": state.misses,
            "steps": self.steps,
            "phase": state.phase.value,
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test reset
        obs, info = self.reset(seed=0)
        assert obs.shape == (self.screen_height, self.screen_width, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)
        assert self.session.phase is Phase.IDLE

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.screen_height, self.screen_width, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert isinstance(trunc, bool)
        assert isinstance(info, dict)

        logger.info("Implementation validated successfully")
