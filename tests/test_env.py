import unittest

import numpy as np
import gymnasium as gym

import falling_blocks.env  # noqa: F401  ensure registration
from falling_blocks.env.falling_blocks_env import FallingBlocksEnv
from falling_blocks.game import Action, GameConfig


class FallingBlocksEnvTests(unittest.TestCase):
    def test_reset_returns_observation_in_space(self):
        env = FallingBlocksEnv()
        obs, info = env.reset(seed=0)
        self.assertTrue(env.observation_space.contains(obs))
        self.assertEqual(obs["board"].shape, (20, 10))
        self.assertEqual(info["score"], 0)

    def test_reset_with_seed_is_repeatable(self):
        env = FallingBlocksEnv()
        first, _ = env.reset(seed=3)
        second, _ = env.reset(seed=3)
        np.testing.assert_array_equal(first["board"], second["board"])
        self.assertEqual(first["next_piece"], second["next_piece"])

    def test_every_step_applies_gravity(self):
        env = FallingBlocksEnv()
        env.reset(seed=1)
        env.step(Action.NONE)
        self.assertEqual(env.game.current_position[1], 1)
        env.step(Action.DOWN)
        self.assertEqual(env.game.current_position[1], 2)

    def test_gravity_only_play_terminates(self):
        env = FallingBlocksEnv(GameConfig(height=8, width=4))
        env.reset(seed=5)
        terminated = truncated = False
        total_reward = 0.0
        steps = 0
        while not (terminated or truncated):
            _, reward, terminated, truncated, _ = env.step(Action.DOWN)
            total_reward += reward
            steps += 1
        self.assertTrue(terminated)
        self.assertEqual(total_reward, float(env.game.score))
        self.assertLess(steps, env.max_episode_steps)

    def test_rgb_render(self):
        env = FallingBlocksEnv(render_mode="rgb_array")
        env.reset(seed=0)
        img = env.render()
        self.assertEqual(img.shape, (240, 120, 3))
        self.assertEqual(img.dtype, np.uint8)

    def test_registered_with_gymnasium(self):
        env = gym.make("FallingBlocks-v0")
        obs, _ = env.reset(seed=2)
        self.assertIn("board", obs)
        env.close()


if __name__ == "__main__":
    unittest.main()
