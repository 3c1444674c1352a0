"""
Grid-to-pixel geometry and drawing for shelves and the player token.

Grid x = 0 sits at the horizontal centre of the screen. Level 0 sits on the
bottom edge and each level is one row of screen_height / (level_count + 1)
pixels higher.
"""
import pygame


COLOR_SKY = (127, 216, 255)
COLOR_SHELF = (25, 25, 112)
COLOR_STROKE = (250, 235, 215)
COLOR_PLAYER = (240, 248, 255)

STROKE_WIDTH = 2
SHELF_CORNER_RADIUS = 10


def cell_size(layout, screen_width, screen_height):
    """(unit, row): pixels per grid unit horizontally and per level vertically."""
    return screen_width / layout.width, screen_height / (layout.level_count + 1)


def shelf_rect(shelf, layout, screen_width, screen_height):
    unit, row = cell_size(layout, screen_width, screen_height)
    left = screen_width / 2 + shelf.start * unit
    right = screen_width / 2 + shelf.end * unit
    bottom = screen_height - row * shelf.level
    return pygame.Rect(round(left), round(bottom - unit), round(right - left), round(unit))


def player_rect(shelf, layout, screen_width, screen_height):
    unit, row = cell_size(layout, screen_width, screen_height)
    # Integer midpoint, truncated toward zero.
    mid = int((shelf.start + shelf.end) / 2)
    center_x = screen_width / 2 + unit * mid
    center_y = screen_height - row * shelf.level - unit * 1.5
    rect = pygame.Rect(0, 0, round(unit), round(unit))
    rect.center = (round(center_x), round(center_y))
    return rect


def draw_shelves(surface, layout):
    width, height = surface.get_size()
    for shelf in layout:
        rect = shelf_rect(shelf, layout, width, height)
        pygame.draw.rect(surface, COLOR_SHELF, rect, border_radius=SHELF_CORNER_RADIUS)
        pygame.draw.rect(surface, COLOR_STROKE, rect, STROKE_WIDTH, border_radius=SHELF_CORNER_RADIUS)


def draw_player(surface, layout, shelf):
    width, height = surface.get_size()
    rect = player_rect(shelf, layout, width, height)
    pygame.draw.rect(surface, COLOR_PLAYER, rect)
    pygame.draw.rect(surface, COLOR_STROKE, rect, STROKE_WIDTH)
