def policy(env):
    # Strategy: chase the coin closest to the ground, since it is the next one that can be missed.
    # Steer on the basket's target rather than its position, because the basket lags its target.
    session = env.session
    basket = session.basket
    if not session.coins:
        return [0, 0, 0]  # Nothing to catch

    coin = max(session.coins, key=lambda c: c.y)
    target_center = basket.target_x + basket.width / 2
    dx = coin.x - target_center

    if dx > basket.key_step / 2:
        return [4, 0, 0]  # Move right
    elif dx < -basket.key_step / 2:
        return [3, 0, 0]  # Move left
    return [0, 0, 0]  # Already under the coin
