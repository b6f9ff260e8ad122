import numpy as np
import pytest

from coin_catch.config import CASUAL, LEVELED, get_config
from coin_catch.sample import InputSample
from coin_catch.entities import Basket, Coin


def test_spawn_within_play_width(rng):
    for _ in range(200):
        coin = Coin.spawn(rng, 640, 3.0, 20)
        assert 20 <= coin.x <= 620
        assert coin.y == -20
        assert coin.active
        assert coin.speed == 3.0


def test_spawn_in_narrow_area(rng):
    coin = Coin.spawn(rng, 30, 3.0, 20)
    assert coin.x == 20


def test_advance_moves_by_speed_until_inactive():
    coin = Coin(x=50, y=-20, radius=20, speed=7)
    previous = coin.y
    while coin.active:
        coin.advance(400)
        if coin.active:
            assert coin.y == pytest.approx(previous + 7)
            assert coin.y - coin.radius <= 400
        previous = coin.y
    assert coin.y - coin.radius > 400

    frozen = coin.y
    coin.advance(400)
    assert coin.y == frozen


def test_coin_exactly_at_edge_stays_active():
    coin = Coin(x=50, y=410, radius=20, speed=10)
    coin.advance(400)
    assert coin.y == 420
    assert coin.active


def test_basket_starts_centered():
    basket = Basket.for_play_area(CASUAL, 640, 400)
    assert basket.x == 280
    assert basket.y == 400 - 60 - 40
    assert (basket.target_x, basket.target_y) == (basket.x, basket.y)


def test_pointer_centers_target_on_pointer():
    basket = Basket.for_play_area(CASUAL, 640, 400)
    basket.compute_target(InputSample(pointer=(500, 10)), 640, 400)
    assert basket.target_x == 460
    # Casual basket ignores the vertical pointer position
    assert basket.target_y == basket.y


def test_horizontal_target_is_clamped():
    basket = Basket.for_play_area(CASUAL, 640, 400)
    basket.compute_target(InputSample(pointer=(10000, 0)), 640, 400)
    assert basket.target_x == 560
    basket.compute_target(InputSample(pointer=(-50, 0)), 640, 400)
    assert basket.target_x == 0


def test_keys_nudge_target_and_win_over_pointer():
    basket = Basket.for_play_area(CASUAL, 640, 400)
    start = basket.target_x
    basket.compute_target(InputSample(pointer=(0, 0), held=frozenset({"right"})), 640, 400)
    assert basket.target_x == start + 10
    basket.compute_target(InputSample(held=frozenset({"left", "right"})), 640, 400)
    assert basket.target_x == start + 10


def test_casual_ignores_vertical_keys():
    basket = Basket.for_play_area(CASUAL, 640, 400)
    y = basket.target_y
    basket.compute_target(InputSample(held=frozenset({"up"})), 640, 400)
    assert basket.target_y == y


def test_casual_vertical_keys_leave_pointer_in_control():
    basket = Basket.for_play_area(CASUAL, 640, 400)
    basket.compute_target(InputSample(pointer=(500, 10), held=frozenset({"up"})), 640, 400)
    assert basket.target_x == 460
    basket.compute_target(InputSample(pointer=(100, 10), held=frozenset({"down", "left"})), 640, 400)
    assert basket.target_x == 450


def test_leveled_vertical_keys_take_over_from_pointer():
    basket = Basket.for_play_area(LEVELED, 640, 400)
    x = basket.target_x
    basket.compute_target(InputSample(pointer=(500, 300), held=frozenset({"up"})), 640, 400)
    assert basket.target_x == x


def test_no_input_keeps_target():
    basket = Basket.for_play_area(CASUAL, 640, 400)
    basket.target_x = 123
    basket.compute_target(InputSample(), 640, 400)
    assert basket.target_x == 123


def test_leveled_target_stays_in_lower_band():
    basket = Basket.for_play_area(LEVELED, 640, 400)
    basket.compute_target(InputSample(pointer=(100, 0)), 640, 400)
    assert basket.target_y == pytest.approx(240)
    basket.compute_target(InputSample(pointer=(100, 1000)), 640, 400)
    assert basket.target_y == 400 - 60 - 20

    for _ in range(100):
        basket.compute_target(InputSample(held=frozenset({"up"})), 640, 400)
    assert basket.target_y == pytest.approx(240)


def test_leveled_keys_move_both_axes():
    basket = Basket.for_play_area(LEVELED, 640, 400)
    basket.compute_target(InputSample(pointer=(320, 300)), 640, 400)
    x, y = basket.target_x, basket.target_y
    basket.compute_target(InputSample(held=frozenset({"left", "up"})), 640, 400)
    assert basket.target_x == x - 12
    assert basket.target_y == y - 12


def test_follow_target_lands_strictly_between():
    rng = np.random.default_rng(7)
    basket = Basket.for_play_area(LEVELED, 640, 400)
    for _ in range(200):
        pointer = (rng.uniform(-100, 740), rng.uniform(-100, 500))
        basket.compute_target(InputSample(pointer=pointer), 640, 400)
        before = (basket.x, basket.y)
        basket.follow_target()
        for prev, now, target in zip(before, (basket.x, basket.y), (basket.target_x, basket.target_y)):
            if prev == target:
                assert now == target
            else:
                assert min(prev, target) < now < max(prev, target)
        assert 0 <= basket.x <= 560
        assert 240 <= basket.y <= 320


def test_follow_is_exponential():
    basket = Basket(x=0, y=300, width=80, height=60, smoothing=0.15, target_x=100)
    basket.follow_target()
    assert basket.x == pytest.approx(15)
    basket.follow_target()
    assert basket.x == pytest.approx(15 + 85 * 0.15)
    assert basket.y == 300


def test_anchor_after_resize():
    basket = Basket.for_play_area(CASUAL, 640, 400)
    basket.x = basket.target_x = 560
    basket.anchor(320, 600)
    assert basket.y == 600 - 60 - 60
    assert basket.x == 240
    assert basket.target_x == 240


def test_resize_row_sits_above_start_row():
    basket = Basket.for_play_area(get_config("casual", resize_margin=80), 640, 400)
    assert basket.y == 400 - 60 - 40
    basket.anchor(640, 400)
    assert basket.y == 400 - 60 - 80
    assert basket.target_y == basket.y
    basket.follow_target()
    assert basket.y == 400 - 60 - 80


def test_bounds():
    basket = Basket(x=80, y=500, width=100, height=60, smoothing=0.15)
    assert basket.bounds() == (80, 180, 500, 560)
    assert basket.center == (130, 530)
