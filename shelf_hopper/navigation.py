import logging
from collections import namedtuple
from enum import IntEnum

import pygame


logger = logging.getLogger(__name__)


class Direction(IntEnum):
    # Values match action[0] of the env's MultiDiscrete action space.
    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class InputSnapshot(namedtuple("InputSnapshot", ["left", "right", "up", "down"], defaults=(False, False, False, False))):
    """Which logical directions are active on this tick."""

    __slots__ = ()

    @classmethod
    def from_keys(cls, pressed, just_pressed=()):
        """
        Arrow keys only count on the tick they go down; WASD counts while held.
        `pressed` is the sequence from pygame.key.get_pressed(), `just_pressed`
        the key codes seen in this tick's KEYDOWN events.
        """
        just_pressed = set(just_pressed)
        return cls(
            left=pygame.K_LEFT in just_pressed or bool(pressed[pygame.K_a]),
            right=pygame.K_RIGHT in just_pressed or bool(pressed[pygame.K_d]),
            up=pygame.K_UP in just_pressed or bool(pressed[pygame.K_w]),
            down=pygame.K_DOWN in just_pressed or bool(pressed[pygame.K_s]),
        )


def pick_direction(snapshot):
    """Left beats right beats up beats down; only one direction is used per tick."""
    if snapshot.left:
        return Direction.LEFT
    elif snapshot.right:
        return Direction.RIGHT
    elif snapshot.up:
        return Direction.UP
    elif snapshot.down:
        return Direction.DOWN
    return Direction.NONE


def _nearest_left(cur, layout):
    candidate = None
    for shelf in layout.shelves_at_level(cur.level):
        if shelf.end < cur.start:
            if candidate is None or candidate.end < shelf.end:
                candidate = shelf
    return candidate


def _nearest_right(cur, layout):
    # Ranked by `end`, not `start`, same as the left rule.
    candidate = None
    for shelf in layout.shelves_at_level(cur.level):
        if cur.end < shelf.start:
            if candidate is None or shelf.end < candidate.end:
                candidate = shelf
    return candidate


def _nearest_vertical(cur, layout, level):
    candidate = None
    best = None
    for shelf in layout.shelves_at_level(level):
        distance = abs(shelf.span_sum - cur.span_sum)
        if candidate is None or distance < best:
            candidate, best = shelf, distance
    return candidate


def resolve(cur, layout, direction):
    """
    Pick the shelf the player should occupy after moving `direction` from `cur`.

    Returns a ShelfPosition, or None when no move is possible. Ties go to the
    shelf that comes first in layout order. Never raises for any layout.
    """
    direction = Direction(direction)

    if direction == Direction.LEFT:
        target = _nearest_left(cur, layout)
    elif direction == Direction.RIGHT:
        target = _nearest_right(cur, layout)
    elif direction == Direction.UP:
        target = None if cur.level >= layout.top_level else _nearest_vertical(cur, layout, cur.level + 1)
    elif direction == Direction.DOWN:
        target = None if cur.level <= 0 else _nearest_vertical(cur, layout, cur.level - 1)
    else:
        target = None

    if direction != Direction.NONE:
        logger.debug("resolve %s from %s -> %s", direction.name, tuple(cur), tuple(target) if target else None)
    return target


def resolve_input(cur, layout, snapshot):
    return resolve(cur, layout, pick_direction(snapshot))
