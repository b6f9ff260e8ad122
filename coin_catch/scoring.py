import logging

from coin_catch.storage import BEST_SCORE_KEY, TOTAL_CURRENCY_KEY

logger = logging.getLogger(__name__)


def overlaps(coin, bounds):
    """Bounding-box test of a coin against the basket rectangle.

    Uses the coin's enclosing square rather than its circle, so a coin that
    only grazes the basket corner still counts as caught.
    """
    return (coin.y + coin.radius > bounds.top and
            coin.y - coin.radius < bounds.bottom and
            coin.x + coin.radius > bounds.left and
            coin.x - coin.radius < bounds.right)


class ScoreBoard:
    """Round score plus the two persisted counters."""

    def __init__(self, store):
        self.store = store
        self.score = 0
        self.best_score = store.get(BEST_SCORE_KEY)
        self.total_currency = store.get(TOTAL_CURRENCY_KEY)

    def reset_round(self):
        self.score = 0

    def record_catch(self):
        self.score += 1
        self.total_currency += 1
        self.store.set(TOTAL_CURRENCY_KEY, self.total_currency)

        if self.score > self.best_score:
            self.best_score = self.score
            self.store.set(BEST_SCORE_KEY, self.best_score)
            logger.debug("New best score %d", self.best_score)
