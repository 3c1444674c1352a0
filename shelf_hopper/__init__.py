from shelf_hopper.layout import DEFAULT_LAYOUT, ShelfLayout, ShelfPosition
from shelf_hopper.navigation import Direction, InputSnapshot, pick_direction, resolve, resolve_input
from shelf_hopper.player import Player

__all__ = [
    "DEFAULT_LAYOUT",
    "ShelfLayout",
    "ShelfPosition",
    "Direction",
    "InputSnapshot",
    "pick_direction",
    "resolve",
    "resolve_input",
    "Player",
]
