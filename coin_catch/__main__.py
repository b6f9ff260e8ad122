"""Play Coin Catch in a window: ``python -m coin_catch [--mode leveled]``."""
import argparse
import logging
import os
import sys

import pygame

from coin_catch.config import get_config
from coin_catch.controls import PygameSampler
from coin_catch.loop import LoopDriver, PygameFrameClock
from coin_catch.render import Renderer
from coin_catch.session import Session
from coin_catch.storage import JsonFileStore

DEFAULT_SCORES = os.path.join(os.path.expanduser("~"), ".coin_catch", "scores.json")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="coin_catch", description="Catch the falling coins.")
    parser.add_argument("--mode", choices=["casual", "leveled"], default="casual")
    parser.add_argument("--scores", default=os.environ.get("COIN_CATCH_SCORES", DEFAULT_SCORES),
                        help="JSON file holding the best score and total currency")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    # A real window is needed for human play
    if os.environ.get("SDL_VIDEODRIVER") == "dummy":
        del os.environ["SDL_VIDEODRIVER"]

    config = get_config(args.mode)
    pygame.init()
    window = pygame.display.set_mode((int(config.play_width), int(config.play_height)), pygame.RESIZABLE)
    pygame.display.set_caption("Coin Catch")

    clock = PygameFrameClock(config.fps)
    session = Session(config, store=JsonFileStore(args.scores), created_at=clock.now())
    sampler = PygameSampler()
    renderer = Renderer(window)
    quit_requested = False

    def pump_events(driver):
        nonlocal quit_requested
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
                driver.stop()
            elif event.type == pygame.VIDEORESIZE:
                renderer.surface = pygame.display.get_surface()
                session.resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                print("Restarting.")
                session.restart(clock.now())
            sampler.handle_event(event, window.get_size())
        pygame.display.flip()

    print(f"Coin Catch ({config.name} mode). Arrow keys or mouse to move, R to restart.")
    driver = LoopDriver(session, sampler, clock, renderer=renderer, before_tick=pump_events)

    while not quit_requested:
        driver.run()
        if quit_requested:
            break
        state = session.snapshot()
        print(f"Game over. Score: {state.score}, Best: {state.best_score}, Total: {state.total_currency:,}")
        print("Press 'R' to play again.")
        # Keep the overlay up until the player restarts or closes the window
        while session.game_over and not quit_requested:
            pump_events(driver)
            renderer.draw(session)
            clock.wait_next_frame()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
