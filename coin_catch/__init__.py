import gymnasium as gym

from coin_catch.config import CASUAL, LEVELED, GameConfig, get_config
from coin_catch.session import Phase, Session

__all__ = ["CASUAL", "LEVELED", "GameConfig", "Phase", "Session", "get_config"]

for _mode in ("casual", "leveled"):
    gym.register(
        id=f"CoinCatch-{_mode.capitalize()}-v0",
        entry_point="coin_catch.env:GameEnv",
        kwargs={"mode": _mode},
    )
