import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'knmaze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

MOVE_KEYS = {"N": "NORTH", "S": "SOUTH", "E": "EAST", "W": "WEST"}


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return n


def add_maze_args(p: argparse.ArgumentParser):
    p.add_argument("--width", type=positive_int, default=10, help="Maze Width")
    p.add_argument("--height", type=positive_int, default=10, help="Maze Height")
    p.add_argument("--seed", type=int, default=None, help="Random Seed")
    p.add_argument("--algo", type=str, default="simple", choices=["simple", "depth", "wilson"], help="Generation Algorithm")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="KN Maze: perfect maze generator with a wall-querying cursor")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    add_maze_args(gen_parser)
    gen_parser.add_argument("--out", type=str, help="Write the raw mask dump to this file")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor / junction counts")

    walk_parser = subparsers.add_parser("walk", help="Generate a maze and walk the cursor through it")
    add_maze_args(walk_parser)
    walk_parser.add_argument("moves", help="Moves as a string of N/S/E/W, e.g. NNEESW")

    verify_parser = subparsers.add_parser("verify", help="Check that a mask dump is a perfect maze")
    verify_parser.add_argument("input_file", help="Path to mask dump")

    return parser


def run_walk(maze, moves: str, logger) -> int:
    """Applies the moves, refusing any that run into a wall. Returns the number blocked."""
    from knmaze.core.grid import Direction

    blocked = 0
    for key in moves.upper():
        if key not in MOVE_KEYS:
            raise ValueError(f"Unknown move '{key}', use N, S, E or W")
        direction = Direction[MOVE_KEYS[key]]
        if maze.is_wall(direction):
            blocked += 1
            logger.info(f"{key}: wall at {maze.coords}")
            continue
        maze.move(direction)
        logger.info(f"{key}: -> {maze.coords}")
    return blocked


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("knmaze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        from knmaze.api import generate
        logger.info(f"Generating {args.width}x{args.height} maze with {args.algo.upper()}...")
        maze = generate(args.algo, args.width, args.height, seed=args.seed)
        logger.info(f"Done. Cursor starts at {maze.coords}")

        if args.stats:
            from knmaze.core.complexity import MazeAnalyzer
            stats = MazeAnalyzer.calculate_stats(maze.grid)
            logger.info(f"Stats: {stats}")

        if args.out:
            from knmaze.io.serializer import MaskDump
            logger.info(f"Saving mask dump to {args.out}...")
            MaskDump.save(maze.grid, args.out)
            logger.info("Save complete.")

    elif args.command == "walk":
        from knmaze.api import generate
        maze = generate(args.algo, args.width, args.height, seed=args.seed)
        logger.info(f"Start at {maze.coords}")
        try:
            blocked = run_walk(maze, args.moves, logger)
        except ValueError as e:
            logger.error(str(e))
            return 2
        print(f"Final position: {maze.coords} ({blocked} moves blocked)")

    elif args.command == "verify":
        from knmaze.io.serializer import MaskDump
        from knmaze.core.complexity import MazeAnalyzer
        logger.info(f"Loading {args.input_file}...")
        try:
            grid = MaskDump.load(args.input_file)
        except (OSError, ValueError) as e:
            logger.error(f"Cannot read {args.input_file}: {e}")
            return 2
        ok = MazeAnalyzer.is_perfect(grid)
        print(f"{grid.width}x{grid.height}: {'perfect maze' if ok else 'NOT a perfect maze'}")
        return 0 if ok else 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
