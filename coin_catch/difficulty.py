import logging

logger = logging.getLogger(__name__)


class DifficultyController:
    """Owns fall speed, spawn cadence and, in leveled mode, the level clock.

    Casual mode ramps continuously: every spawn makes coins a little faster
    and the next spawn a little sooner. Leveled mode derives the spawn
    interval from the level and only speeds coins up on a level change.
    """

    def __init__(self, config):
        self.config = config
        self.reset(now=0.0)

    def reset(self, now):
        self.fall_speed = float(self.config.initial_fall_speed)
        self.spawn_interval = float(self.config.spawn_interval)
        self.level = 1
        self.misses = 0
        self.last_spawn = 0.0
        self.level_start = now
        if self.config.leveled:
            self.spawn_interval = self.level_interval()

    def level_interval(self):
        cfg = self.config
        return max(cfg.min_spawn_interval, cfg.spawn_interval - self.level * cfg.level_interval_step)

    def should_spawn(self, now):
        return now - self.last_spawn > self.spawn_interval

    def on_spawn(self, now):
        self.last_spawn = now
        if self.config.leveled:
            return
        cfg = self.config
        self.fall_speed = min(cfg.max_speed, self.fall_speed + cfg.speed_increment)
        self.spawn_interval = max(cfg.min_spawn_interval, self.spawn_interval - cfg.spawn_decrement)

    def update(self, now):
        """Advance the level clock. Returns True when a new level began.

        At most one level is gained per call, however long the gap since the
        last tick was.
        """
        if not self.config.leveled:
            return False
        levelled_up = False
        if now - self.level_start > self.config.level_duration:
            self.level += 1
            self.misses = 0
            self.fall_speed = min(self.config.max_speed, self.fall_speed + self.config.level_speed_increment)
            self.level_start = now
            levelled_up = True
            logger.info("Level %d, fall speed %.1f", self.level, self.fall_speed)
        self.spawn_interval = self.level_interval()
        return levelled_up

    def record_miss(self):
        """Count a miss. Returns True once the miss limit has been reached."""
        if not self.config.leveled:
            return False
        self.misses += 1
        return self.misses >= self.config.max_misses
