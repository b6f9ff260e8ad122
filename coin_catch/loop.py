"""Frame clocks and the driver that runs one tick plus one draw per frame."""
import logging

import pygame

logger = logging.getLogger(__name__)


class FixedStepClock:
    """Deterministic clock: every frame is exactly ``step_ms`` long."""

    def __init__(self, step_ms, start=0.0):
        self.step_ms = step_ms
        self._now = float(start)

    def now(self):
        return self._now

    def wait_next_frame(self):
        self._now += self.step_ms


class PygameFrameClock:
    """Wall clock paced by ``pygame.time.Clock`` at a fixed frame rate."""

    def __init__(self, fps):
        self.fps = fps
        self.clock = pygame.time.Clock()

    def now(self):
        return float(pygame.time.get_ticks())

    def wait_next_frame(self):
        self.clock.tick(self.fps)


class LoopDriver:
    """Runs a session until it ends, ``stop`` is called or ``max_ticks`` pass.

    ``before_tick`` lets the host pump its own events (window close, restart
    key) once per frame before the simulation step.
    """

    def __init__(self, session, sampler, clock, renderer=None, before_tick=None):
        self.session = session
        self.sampler = sampler
        self.clock = clock
        self.renderer = renderer
        self.before_tick = before_tick
        self.ticks = 0
        self._stopped = False

    def stop(self):
        self._stopped = True

    def step(self):
        result = self.session.tick(self.clock.now(), self.sampler.current_input())
        if self.renderer is not None:
            self.renderer.draw(self.session)
        self.ticks += 1
        return result

    def run(self, max_ticks=None):
        self._stopped = False
        ticks = 0
        while not self._stopped:
            if self.before_tick is not None:
                self.before_tick(self)
                if self._stopped:
                    break
            self.step()
            ticks += 1
            if self.session.game_over:
                logger.info("Loop stopped after game over")
                break
            if max_ticks is not None and ticks >= max_ticks:
                break
            self.clock.wait_next_frame()
        return ticks
