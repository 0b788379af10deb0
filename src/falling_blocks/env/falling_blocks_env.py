from __future__ import annotations

import random
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, GameConfig, GameEngine, ShapeKind
from falling_blocks.visualization.palette import color_for_value


class FallingBlocksEnv(gym.Env):
    """
    Headless driver: the agent plays the role of the keyboard, the env plays the gravity timer.

    Actions (5 total, see `Action`):
      0: Nothing
      1: Move Left
      2: Move Right
      3: Rotate
      4: Down (one gravity tick)

    Every step applies the action and then one gravity tick, except DOWN which is
    the tick itself. Reward is the score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.game = GameEngine.from_config(self.config)
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)

        h, w = self.game.height, self.game.width
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=len(ShapeKind), shape=(h, w), dtype=np.int8),
                "next_piece": spaces.Discrete(len(ShapeKind) + 1),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "board": self.game.board.astype(np.int8),
            "next_piece": int(self.game.next_piece.kind),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared_total": self.game.lines_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game.rng = random.Random(seed)
        self.game.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        action = Action(int(action))
        score_before = self.game.score

        self.game.step(action)
        if action != Action.DOWN:
            self.game.tick_down()

        self._steps += 1
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        reward = float(self.game.score - score_before)
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        grid = self.game.board
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(grid[y, x]))
        return img

    def close(self) -> None:
        pass
