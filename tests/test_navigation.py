from __future__ import annotations

import copy
from collections import defaultdict

import pygame
import pytest

from shelf_hopper.layout import DEFAULT_LAYOUT, ShelfLayout, ShelfPosition
from shelf_hopper.navigation import Direction, InputSnapshot, pick_direction, resolve, resolve_input

ALL_DIRECTIONS = [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]


def test_left_picks_nearest_shelf_by_right_edge(two_level_layout: ShelfLayout) -> None:
    assert resolve(ShelfPosition(1, 3, 7), two_level_layout, Direction.LEFT) == ShelfPosition(1, -12, 1)


def test_right_picks_next_shelf(two_level_layout: ShelfLayout) -> None:
    assert resolve(ShelfPosition(1, -12, 1), two_level_layout, Direction.RIGHT) == ShelfPosition(1, 3, 7)


def test_up_picks_closest_midpoint_sum(two_level_layout: ShelfLayout) -> None:
    # |-11| = 11 vs |10| = 10
    assert resolve(ShelfPosition(0, -8, 8), two_level_layout, Direction.UP) == ShelfPosition(1, 3, 7)


def test_down_uses_same_rule_as_up(two_level_layout: ShelfLayout) -> None:
    assert resolve(ShelfPosition(1, -12, 1), two_level_layout, Direction.DOWN) == ShelfPosition(0, -8, 8)


def test_isolated_shelf_has_no_moves() -> None:
    layout = ShelfLayout(level_count=1, width=32, shelves=[(0, -8, 8)])
    for direction in ALL_DIRECTIONS:
        assert resolve(ShelfPosition(0, -8, 8), layout, direction) is None


def test_edges_of_a_level_have_no_sideways_move(two_level_layout: ShelfLayout) -> None:
    assert resolve(ShelfPosition(1, -12, 1), two_level_layout, Direction.LEFT) is None
    assert resolve(ShelfPosition(1, 3, 7), two_level_layout, Direction.RIGHT) is None


@pytest.mark.parametrize("shelf", DEFAULT_LAYOUT.shelves_at_level(0))
def test_down_from_bottom_level_is_no_move(shelf: ShelfPosition) -> None:
    assert resolve(shelf, DEFAULT_LAYOUT, Direction.DOWN) is None


@pytest.mark.parametrize("shelf", DEFAULT_LAYOUT.shelves_at_level(DEFAULT_LAYOUT.top_level))
def test_up_from_top_level_is_no_move(shelf: ShelfPosition) -> None:
    assert resolve(shelf, DEFAULT_LAYOUT, Direction.UP) is None


def test_empty_level_above_is_no_move() -> None:
    layout = ShelfLayout(level_count=3, width=32, shelves=[(0, 0, 4), (2, 0, 4)])
    assert resolve(ShelfPosition(0, 0, 4), layout, Direction.UP) is None
    assert resolve(ShelfPosition(2, 0, 4), layout, Direction.DOWN) is None


def test_none_direction_is_no_move() -> None:
    assert resolve(DEFAULT_LAYOUT.initial_shelf, DEFAULT_LAYOUT, Direction.NONE) is None


def test_resolve_does_not_mutate_layout() -> None:
    before = copy.deepcopy(DEFAULT_LAYOUT.shelves)
    for shelf in DEFAULT_LAYOUT:
        for direction in ALL_DIRECTIONS:
            resolve(shelf, DEFAULT_LAYOUT, direction)
    assert DEFAULT_LAYOUT.shelves == before


def test_every_result_is_a_layout_shelf() -> None:
    for shelf in DEFAULT_LAYOUT:
        for direction in ALL_DIRECTIONS:
            target = resolve(shelf, DEFAULT_LAYOUT, direction)
            assert target is None or target in DEFAULT_LAYOUT


def test_right_ranks_candidates_by_end_not_start() -> None:
    # (0, 5, 20) starts closer but (0, 8, 10) ends first.
    layout = ShelfLayout(level_count=1, width=64, shelves=[(0, 0, 2), (0, 5, 20), (0, 8, 10)])
    assert resolve(ShelfPosition(0, 0, 2), layout, Direction.RIGHT) == ShelfPosition(0, 8, 10)


def test_vertical_tie_goes_to_first_shelf_in_layout_order() -> None:
    # From (4, 1, 4) the two level-3 shelves are both 9 away.
    assert resolve(ShelfPosition(4, 1, 4), DEFAULT_LAYOUT, Direction.DOWN) == ShelfPosition(3, -7, 3)


def test_sideways_tie_goes_to_first_shelf_in_layout_order() -> None:
    layout = ShelfLayout(level_count=1, width=64, shelves=[(0, 10, 12), (0, -6, 2), (0, -3, 2)])
    assert resolve(ShelfPosition(0, 10, 12), layout, Direction.LEFT) == ShelfPosition(0, -6, 2)


def test_right_tie_goes_to_first_shelf_in_layout_order() -> None:
    layout = ShelfLayout(level_count=1, width=64, shelves=[(0, 0, 2), (0, 6, 10), (0, 4, 10)])
    assert resolve(ShelfPosition(0, 0, 2), layout, Direction.RIGHT) == ShelfPosition(0, 6, 10)


def test_overlapping_layout_does_not_crash() -> None:
    layout = ShelfLayout(level_count=2, width=32, shelves=[(0, 0, 5), (0, 3, 8), (0, -4, -1), (1, 2, 6)])
    for shelf in layout:
        for direction in ALL_DIRECTIONS:
            resolve(shelf, layout, direction)
    assert resolve(ShelfPosition(0, 3, 8), layout, Direction.LEFT) == ShelfPosition(0, -4, -1)


def test_right_then_left_returns_home_on_symmetric_layout() -> None:
    layout = ShelfLayout(level_count=1, width=32, shelves=[(0, -10, -6), (0, -2, 2), (0, 6, 10)])
    home = ShelfPosition(0, -2, 2)

    right = resolve(home, layout, Direction.RIGHT)
    assert resolve(right, layout, Direction.LEFT) == home


def test_resolve_accepts_raw_movement_codes() -> None:
    assert resolve(DEFAULT_LAYOUT.initial_shelf, DEFAULT_LAYOUT, 1) == ShelfPosition(1, 3, 7)


@pytest.mark.parametrize(
    "snapshot,expected",
    [
        (InputSnapshot(), Direction.NONE),
        (InputSnapshot(left=True, right=True), Direction.LEFT),
        (InputSnapshot(right=True, up=True, down=True), Direction.RIGHT),
        (InputSnapshot(up=True, down=True), Direction.UP),
        (InputSnapshot(down=True), Direction.DOWN),
        (InputSnapshot(True, True, True, True), Direction.LEFT),
    ],
)
def test_pick_direction_priority(snapshot: InputSnapshot, expected: Direction) -> None:
    assert pick_direction(snapshot) == expected


def test_simultaneous_left_and_right_resolves_left_only(two_level_layout: ShelfLayout) -> None:
    cur = ShelfPosition(1, 3, 7)
    # Right alone would be no move here; left wins and produces a move.
    assert resolve_input(cur, two_level_layout, InputSnapshot(left=True, right=True)) == ShelfPosition(1, -12, 1)

    cur = ShelfPosition(1, -12, 1)
    assert resolve_input(cur, two_level_layout, InputSnapshot(left=True, right=True)) is None


def test_snapshot_from_keys_held_wasd_and_pressed_arrows() -> None:
    pressed = defaultdict(bool, {pygame.K_w: True, pygame.K_LEFT: True})

    snapshot = InputSnapshot.from_keys(pressed)
    # Holding an arrow key does not repeat; held W does.
    assert snapshot == InputSnapshot(up=True)

    snapshot = InputSnapshot.from_keys(pressed, just_pressed=[pygame.K_RIGHT])
    assert snapshot == InputSnapshot(right=True, up=True)
