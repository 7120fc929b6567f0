import argparse
import logging
import sys

from pydantic import ValidationError

from snake_game.config import GRID_SIZE, START_CELL, GameConfig


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake-game", description="Play Snake in a pygame window.")
    parser.add_argument("--grid-size", type=int, help=f"Cells per side (default: {GRID_SIZE})")
    parser.add_argument("--cell-size", type=int, help="Pixels per cell (default: 20)")
    parser.add_argument(
        "--interval",
        type=int,
        dest="initial_interval_ms",
        help="Starting milliseconds between moves (default: 100)",
    )
    parser.add_argument("--seed", type=int, help="Seed for food placement")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    fields = {
        name: value
        for name, value in vars(args).items()
        if name in GameConfig.model_fields and value is not None
    }

    # Keep the default start cell unless it falls off a smaller grid
    if args.grid_size is not None and args.grid_size > 0:
        start = min(START_CELL[0], args.grid_size // 2)
        fields["start_cell"] = (start, start)

    if "initial_interval_ms" in fields:
        default_min = GameConfig.model_fields["min_interval_ms"].default
        fields["min_interval_ms"] = min(default_min, fields["initial_interval_ms"])

    return GameConfig(**fields)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ValidationError as e:
        print(f"Invalid settings:\n{e}", file=sys.stderr)
        return 2

    # pygame is only loaded once the settings are valid
    from snake_game.game_instances.local_loop import LocalLoop

    LocalLoop(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
