"""Game constants and the two mode presets."""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GameConfig:
    """Tunable parameters shared by the casual and leveled modes.

    Times are in milliseconds, distances in pixels and speeds in pixels per
    tick. The ``leveled`` flag switches both the spawn policy (continuous
    ramp vs. level-derived interval) and the miss policy (ignored vs.
    limited).
    """

    name: str = "casual"
    leveled: bool = False

    # Play area
    play_width: float = 640
    play_height: float = 400
    fps: int = 60

    # Coin
    coin_size: float = 40

    # Basket
    basket_width: float = 80
    basket_height: float = 60
    basket_margin: float = 40
    resize_margin: float = 60
    smoothing: float = 0.15
    key_step: float = 10
    vertical_band: float = 0.6  # top of the leveled movement band, as a fraction of play height

    # Fall speed
    initial_fall_speed: float = 3
    max_speed: float = 12
    speed_increment: float = 0.1

    # Spawning
    spawn_interval: float = 1500
    min_spawn_interval: float = 400
    spawn_decrement: float = 20

    # Levels
    level_duration: float = 10000
    level_speed_increment: float = 1.2
    level_interval_step: float = 80
    level_banner_ms: float = 1500
    max_misses: int = 3

    # Session
    autostart_ms: float = 800

    def __post_init__(self):
        if not 0 < self.smoothing < 1:
            raise ValueError(f"smoothing must lie in (0, 1), got {self.smoothing}")
        if self.play_width <= 0 or self.play_height <= 0:
            raise ValueError("play area must have a positive size")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.min_spawn_interval > self.spawn_interval:
            raise ValueError("min_spawn_interval cannot exceed spawn_interval")
        if self.initial_fall_speed > self.max_speed:
            raise ValueError("initial_fall_speed cannot exceed max_speed")
        if self.max_misses < 1:
            raise ValueError(f"max_misses must be at least 1, got {self.max_misses}")

    @property
    def coin_radius(self):
        return self.coin_size / 2

    @property
    def frame_ms(self):
        return 1000.0 / self.fps


CASUAL = GameConfig()

LEVELED = GameConfig(
    name="leveled",
    leveled=True,
    smoothing=0.2,
    key_step=12,
    basket_margin=20,
    autostart_ms=1000,
)

PRESETS = {
    CASUAL.name: CASUAL,
    LEVELED.name: LEVELED,
}


def get_config(mode="casual", **overrides):
    """Return the preset for ``mode`` with any field ``overrides`` applied."""
    try:
        config = PRESETS[mode]
    except KeyError:
        raise ValueError(f"unknown mode {mode!r}, expected one of {sorted(PRESETS)}") from None
    if overrides:
        config = replace(config, **overrides)
    return config
