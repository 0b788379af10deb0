"""Gymnasium environment for the falling-block puzzle."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register the default 20x10 environment
register(
    id="FallingBlocks-v0",
    entry_point="falling_blocks.env.falling_blocks_env:FallingBlocksEnv",
)

__all__ = ["FallingBlocks-v0"]
