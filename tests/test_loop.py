import numpy as np

from coin_catch.config import get_config
from coin_catch.controls import ActionSampler
from coin_catch.entities import Coin
from coin_catch.loop import FixedStepClock, LoopDriver
from coin_catch.session import Phase, Session


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, session):
        self.frames.append(session.snapshot())


def test_fixed_step_clock():
    clock = FixedStepClock(10, start=5)
    assert clock.now() == 5
    clock.wait_next_frame()
    clock.wait_next_frame()
    assert clock.now() == 25


def test_run_ticks_and_draws_each_frame(casual):
    renderer = RecordingRenderer()
    driver = LoopDriver(casual, ActionSampler(), FixedStepClock(10), renderer=renderer)
    assert driver.run(max_ticks=100) == 100
    assert driver.ticks == 100
    assert len(renderer.frames) == 100
    # Autostart fires on the tick at 800 ms, which is the 81st frame
    assert renderer.frames[79].phase is Phase.IDLE
    assert renderer.frames[80].phase is Phase.RUNNING


def test_renderer_sees_post_update_state(casual):
    casual.start(0)
    x, y = casual.basket.center
    casual.coins.append(Coin(x=x, y=y - 5, radius=20, speed=5))
    renderer = RecordingRenderer()
    driver = LoopDriver(casual, ActionSampler(), FixedStepClock(10, start=10), renderer=renderer)
    driver.step()
    assert renderer.frames[0].score == 1
    assert renderer.frames[0].coin_count == 0


def test_run_stops_on_game_over():
    session = Session(get_config("leveled"), rng=np.random.default_rng(0))
    session.start(0)
    session.difficulty.misses = 2
    session.coins.append(Coin(x=20, y=session.play_height, radius=20, speed=10))
    driver = LoopDriver(session, ActionSampler(), FixedStepClock(10, start=10))
    assert driver.run(max_ticks=1000) == 3
    assert session.game_over


def test_before_tick_can_stop(casual):
    def stop_after_five(driver):
        if driver.ticks == 5:
            driver.stop()

    driver = LoopDriver(casual, ActionSampler(), FixedStepClock(10), before_tick=stop_after_five)
    assert driver.run() == 5
