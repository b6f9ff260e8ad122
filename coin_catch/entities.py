from dataclasses import dataclass
from typing import NamedTuple, Optional

from coin_catch.sample import DIRECTIONS, HORIZONTAL


class Bounds(NamedTuple):
    left: float
    right: float
    top: float
    bottom: float


@dataclass(eq=False)
class Coin:
    """A falling coin. Moves straight down at a constant speed."""

    x: float
    y: float
    radius: float
    speed: float
    active: bool = True

    @classmethod
    def spawn(cls, rng, play_width, speed, radius):
        # Degenerate play areas narrower than a coin collapse to the left edge
        high = max(radius, play_width - radius)
        x = float(rng.uniform(radius, high)) if high > radius else radius
        return cls(x=x, y=-radius, radius=radius, speed=speed)

    def advance(self, play_height):
        if not self.active:
            return
        self.y += self.speed
        if self.y - self.radius > play_height:
            self.active = False

    def bounds(self):
        return Bounds(self.x - self.radius, self.x + self.radius, self.y - self.radius, self.y + self.radius)


@dataclass
class Basket:
    """The player-controlled catcher.

    ``x``/``y`` is the top-left corner. The basket never jumps: every tick it
    covers ``smoothing`` of the remaining distance to its target, and only the
    target is driven by input.
    """

    x: float
    y: float
    width: float
    height: float
    smoothing: float
    key_step: float = 10
    two_axis: bool = False
    margin: float = 40
    resize_margin: float = 60
    vertical_band: float = 0.6
    target_x: Optional[float] = None
    target_y: Optional[float] = None

    def __post_init__(self):
        if self.target_x is None:
            self.target_x = self.x
        if self.target_y is None:
            self.target_y = self.y

    @classmethod
    def for_play_area(cls, config, play_width, play_height):
        return cls(
            x=play_width / 2 - config.basket_width / 2,
            y=play_height - config.basket_height - config.basket_margin,
            width=config.basket_width,
            height=config.basket_height,
            smoothing=config.smoothing,
            key_step=config.key_step,
            two_axis=config.leveled,
            margin=config.basket_margin,
            resize_margin=config.resize_margin,
            vertical_band=config.vertical_band,
        )

    @property
    def axes(self):
        return DIRECTIONS if self.two_axis else HORIZONTAL

    def compute_target(self, sample, play_width, play_height):
        """Move the target from one input sample, then clamp it.

        Keys only take over from the pointer when one of them moves the
        basket, so a casual basket still follows the pointer while up or
        down is held.
        """
        if sample.holds_any(self.axes):
            if "left" in sample.held:
                self.target_x -= self.key_step
            if "right" in sample.held:
                self.target_x += self.key_step
            if self.two_axis:
                if "up" in sample.held:
                    self.target_y -= self.key_step
                if "down" in sample.held:
                    self.target_y += self.key_step
        elif sample.pointer is not None:
            px, py = sample.pointer
            self.target_x = px - self.width / 2
            if self.two_axis:
                self.target_y = py - self.height / 2
        self.clamp_target(play_width, play_height)

    def clamp_target(self, play_width, play_height):
        self.target_x = _clamp(self.target_x, 0, play_width - self.width)
        if self.two_axis:
            low, high = self.vertical_range(play_height)
            self.target_y = _clamp(self.target_y, low, high)

    def vertical_range(self, play_height):
        low = play_height * self.vertical_band
        high = play_height - self.height - self.margin
        return low, max(low, high)

    def follow_target(self):
        self.x += (self.target_x - self.x) * self.smoothing
        if self.two_axis:
            self.y += (self.target_y - self.y) * self.smoothing

    def anchor(self, play_width, play_height):
        """Re-seat the basket after the play area changed size.

        A casual basket moves to its resize row, ``resize_margin`` above the
        bottom edge, which sits higher than the row it starts on.
        """
        if not self.two_axis:
            self.y = play_height - self.height - self.resize_margin
            self.target_y = self.y
        self.clamp_target(play_width, play_height)
        self.x = _clamp(self.x, 0, max(0.0, play_width - self.width))
        if self.two_axis:
            self.y = _clamp(self.y, *self.vertical_range(play_height))

    def bounds(self):
        return Bounds(self.x, self.x + self.width, self.y, self.y + self.height)

    @property
    def center(self):
        return self.x + self.width / 2, self.y + self.height / 2


def _clamp(value, low, high):
    # Saturating; when the range is empty the lower edge wins
    return max(low, min(value, high))
