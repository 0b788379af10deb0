from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from falling_blocks.game import GameConfig, GameEngine, print_grid


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="falling-blocks", description="Falling-block grid puzzle")
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--width", type=int, default=10, help="Even widths keep the spawn centered")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--gravity-ms", type=int, default=500)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--text", action="store_true",
                   help="Headless: let pieces fall with gravity only and print the final board")
    p.add_argument("--max-ticks", type=int, default=100_000,
                   help="Tick limit for --text mode")
    return p


def run_text(config: GameConfig, max_ticks: int) -> int:
    game = GameEngine.from_config(config)
    ticks = 0
    while not game.game_over and ticks < max_ticks:
        game.tick_down()
        ticks += 1
    print_grid(game.board)
    print(f"Ticks: {ticks}  Score: {game.score}  Lines: {game.lines_cleared_total}")
    return game.score


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="[FALLING_BLOCKS] %(asctime)s %(name)s - %(message)s")

    config = GameConfig(
        height=args.height,
        width=args.width,
        random_seed=args.seed,
        gravity_ms=args.gravity_ms,
    )
    if args.text:
        run_text(config, args.max_ticks)
        return

    from falling_blocks.visualization.human_play import run
    run(config, cell_size=args.cell_size)
