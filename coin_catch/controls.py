"""Polled input: one ``InputSample`` per tick, no event queue."""
import pygame

from coin_catch.sample import NO_INPUT, InputSample

# MultiDiscrete movement component: 0=none 1=up 2=down 3=left 4=right
MOVEMENT_TO_DIRECTION = {1: "up", 2: "down", 3: "left", 4: "right"}

ARROW_KEYS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
}


class ActionSampler:
    """Turns agent actions into input samples.

    ``set_action`` is called by the environment before each tick; the
    session then reads the sample back through ``current_input``.
    """

    def __init__(self):
        self._sample = NO_INPUT

    def set_action(self, action):
        movement = int(action[0])
        direction = MOVEMENT_TO_DIRECTION.get(movement)
        held = frozenset((direction,)) if direction else frozenset()
        self._sample = InputSample(pointer=None, held=held)

    def current_input(self):
        return self._sample


class PygameSampler:
    """Reads the mouse, touch and arrow keys of a live pygame window.

    ``handle_event`` keeps the last finger position from touch events; the
    mouse position is polled directly. Once a touch has been seen the
    sampler sticks to touch, as a mouse position is meaningless afterwards.
    """

    def __init__(self, offset=(0, 0)):
        self.offset = offset
        self.touch = None
        self.is_touch = False
        self.mouse_seen = False

    def handle_event(self, event, window_size):
        if event.type == pygame.FINGERMOTION or event.type == pygame.FINGERDOWN:
            self.is_touch = True
            w, h = window_size
            self.touch = (event.x * w, event.y * h)
        elif event.type == pygame.MOUSEMOTION:
            self.mouse_seen = True

    def current_input(self):
        keys = pygame.key.get_pressed()
        held = frozenset(name for key, name in ARROW_KEYS.items() if keys[key])

        pointer = None
        if self.is_touch:
            pointer = self.touch
        elif self.mouse_seen:
            pointer = pygame.mouse.get_pos()
        if pointer is not None:
            pointer = (pointer[0] - self.offset[0], pointer[1] - self.offset[1])
        return InputSample(pointer=pointer, held=held)
