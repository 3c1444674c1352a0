import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame
import os

from shelf_hopper import render
from shelf_hopper.layout import DEFAULT_LAYOUT, ShelfLayout
from shelf_hopper.navigation import Direction, InputSnapshot, pick_direction, resolve
from shelf_hopper.player import Player

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    """
    Hop a token between fixed shelves. Each tick takes one movement code and
    moves the token to the nearest shelf in that direction, if there is one.
    """
    metadata = {"render_modes": ["rgb_array"]}

    user_guide = (
        "Controls: ← → to hop along a level, ↑ ↓ to change level. WASD works too while held."
    )

    game_description = (
        "Hop between shelves stacked on six levels. Visit every shelf to finish."
    )

    # Nothing happens between inputs.
    auto_advance = False

    # --- Constants ---
    SCREEN_WIDTH, SCREEN_HEIGHT = 640, 400
    FPS = 30
    MAX_STEPS = 1000

    # Rewards
    REWARD_NEW_SHELF = 1.0

    # Colors
    COLOR_TEXT = (25, 25, 112)
    COLOR_TEXT_SHADOW = (250, 235, 215)

    def __init__(self, render_mode="rgb_array", layout=None):
        super().__init__()

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.SCREEN_WIDTH, self.SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_ui = pygame.font.SysFont("monospace", 18, bold=True)

        self.layout = layout if layout is not None else DEFAULT_LAYOUT

        # --- State Variables (initialized in reset) ---
        self.player = None
        self.visited = None
        self.steps = None
        self.score = None
        self.game_over = None
        self.moved = None

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        if options and "layout" in options:
            layout = options["layout"]
            self.layout = layout if isinstance(layout, ShelfLayout) else ShelfLayout.from_config(layout)

        self.steps = 0
        self.score = 0.0
        self.game_over = False
        self.moved = False

        self.player = Player(self.layout.initial_shelf)
        self.visited = {self.player.current_shelf}

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.game_over:
            return self._get_observation(), 0.0, True, False, self._get_info()

        movement = Direction(int(action[0]))
        # action[1] and action[2] (space / shift) have no effect here.

        reward = 0.0
        self.steps += 1

        target = resolve(self.player.current_shelf, self.layout, movement)
        self.moved = self.player.move_to(target)
        self.player.check_in(self.layout)

        if self.moved and self.player.current_shelf not in self.visited:
            self.visited.add(self.player.current_shelf)
            reward += self.REWARD_NEW_SHELF

        self.score += reward

        terminated = False
        if len(self.visited) == len(self.layout):
            terminated = True
        elif self.steps >= self.MAX_STEPS:
            terminated = True
        self.game_over = terminated

        return self._get_observation(), reward, terminated, False, self._get_info()

    def step_input(self, snapshot):
        """
        Step with a raw input snapshot, applying the left/right/up/down priority.
        A tick with no direction held is not a step: nothing moves and the step
        count does not advance.
        """
        direction = pick_direction(snapshot)
        if direction == Direction.NONE:
            self.moved = False
            return self._get_observation(), 0.0, self.game_over, False, self._get_info()
        return self.step([direction, 0, 0])

    def _get_observation(self):
        self.screen.fill(render.COLOR_SKY)
        render.draw_shelves(self.screen, self.layout)
        render.draw_player(self.screen, self.layout, self.player.current_shelf)
        self._render_ui()

        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _render_ui(self):
        self._draw_text(f"LEVEL: {self.player.level}", (10, 10))
        self._draw_text(f"SCORE: {int(self.score)}", (self.SCREEN_WIDTH - 130, 10))

    def _draw_text(self, text, pos):
        shadow_surface = self.font_ui.render(text, True, self.COLOR_TEXT_SHADOW)
        text_surface = self.font_ui.render(text, True, self.COLOR_TEXT)
        self.screen.blit(shadow_surface, (pos[0] + 1, pos[1] + 1))
        self.screen.blit(text_surface, pos)

    def _get_info(self):
        return {
            "steps": self.steps,
            "score": self.score,
            "level": self.player.level,
            "shelf": tuple(self.player.current_shelf),
            "moved": self.moved,
            "visited": len(self.visited),
            "moves": self.player.moves,
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Call after construction to verify the env contract.
        '''
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        obs, info = self.reset()
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc is False
        assert isinstance(info, dict)

        print("✓ Implementation validated successfully")


if __name__ == "__main__":
    import logging

    logging.basicConfig(level=logging.DEBUG if os.environ.get("SHELF_HOPPER_DEBUG") else logging.INFO)

    # Headless by default; open a real window for manual play.
    os.environ["SDL_VIDEODRIVER"] = "x11"

    env = GameEnv()
    obs, info = env.reset()

    pygame.display.init()
    screen = pygame.display.set_mode((env.SCREEN_WIDTH, env.SCREEN_HEIGHT))
    pygame.display.set_caption("Shelf Hopper")
    clock = pygame.time.Clock()

    running = True
    while running:
        just_pressed = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            if event.type == pygame.KEYDOWN:
                just_pressed.append(event.key)
                if event.key == pygame.K_r:
                    print("Resetting environment.")
                    obs, info = env.reset()

        snapshot = InputSnapshot.from_keys(pygame.key.get_pressed(), just_pressed)

        if not env.game_over:
            obs, reward, terminated, truncated, info = env.step_input(snapshot)
            if info["moved"]:
                print(f"new shelf: {info['shelf']}")
            if terminated:
                print(f"Episode finished! Visited {info['visited']} shelves in {info['steps']} steps.")

        surf = pygame.surfarray.make_surface(np.transpose(obs, (1, 0, 2)))
        screen.blit(surf, (0, 0))
        pygame.display.flip()

        clock.tick(env.FPS)

    env.close()
