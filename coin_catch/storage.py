"""Durable counters: best score and lifetime currency.

The session reads each key once when it is built and writes every change
straight through. A value that cannot be read back as an integer counts
as 0.
"""
import json
import logging
import os

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "catch_game_best_score"
TOTAL_CURRENCY_KEY = "catch_game_total_dollar"


def _to_int(key, raw):
    if raw is None:
        return 0
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring unreadable value %r for %s", raw, key)
        return 0


class MemoryStore:
    """Dict-backed store, used by the environment and the tests."""

    def __init__(self, initial=None):
        self.data = dict(initial or {})

    def get(self, key):
        return _to_int(key, self.data.get(key))

    def set(self, key, value):
        self.data[key] = int(value)


class JsonFileStore:
    """Keeps all keys in one JSON object on disk, rewritten on every set."""

    def __init__(self, path):
        self.path = path
        self.data = self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read scores from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring scores file %s: expected an object", self.path)
            return {}
        return data

    def get(self, key):
        return _to_int(key, self.data.get(key))

    def set(self, key, value):
        self.data[key] = int(value)
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w") as f:
            json.dump(self.data, f)
        os.replace(tmp_path, self.path)
