import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'trailblazer' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from trailblazer.algo.base import AlgorithmType


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Trailblazer: perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--rows", type=int, default=10, help="Maze rows")
    gen_parser.add_argument("--cols", type=int, default=10, help="Maze columns")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--algo", type=str, default=AlgorithmType.BINARY_TREE.value,
                            choices=[a.value for a in AlgorithmType], help="Generation Algorithm")
    gen_parser.add_argument("--array", action="store_true", help="Print the 0/1 wall array instead of ASCII")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor statistics")
    gen_parser.add_argument("--out", type=str, help="Write the ASCII maze to this file")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation at several sizes")
    bench_parser.add_argument("--size", type=int, default=1000, help="Largest benchmark size")
    bench_parser.add_argument("--seed", type=int, default=42, help="Random Seed")

    return parser


def run_generate(args, logger: logging.Logger):
    from trailblazer.maze import Maze

    logger.info(f"Generating {args.rows}x{args.cols} maze with {args.algo.upper()}...")
    maze = Maze(args.rows, args.cols, args.algo, seed=args.seed)

    if args.stats:
        from trailblazer.core.complexity import MazeStats
        stats = MazeStats.calculate_stats(maze.grid)
        logger.info(f"Stats: {stats}")

    if args.array:
        text = "\n".join("".join(str(v) for v in row) for row in maze.array) + "\n"
    else:
        text = maze.string

    if args.out:
        logger.info(f"Saving maze to {args.out}...")
        with open(args.out, "w") as f:
            f.write(text)
        logger.info("Save complete.")
    else:
        print(text, end="")


def run_benchmark(args, logger: logging.Logger):
    from trailblazer.maze import Maze

    sizes = sorted({s for s in (10, 100, args.size // 2, args.size) if 0 < s <= args.size})
    logger.info(f"Running Generation Benchmark (up to {args.size}x{args.size})...")

    print(f"\n{'SIZE':<12} | {'TIME (s)':<10} | {'CELLS/SEC':<12}")
    print("-" * 40)
    for size in sizes:
        t_start = time.time()
        Maze(size, size, seed=args.seed)
        duration = time.time() - t_start
        rate = (size * size) / duration if duration > 0 else float("inf")
        print(f"{f'{size}x{size}':<12} | {duration:<10.4f} | {rate:<12,.0f}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("trailblazer")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        run_generate(args, logger)
    elif args.command == "benchmark":
        run_benchmark(args, logger)


if __name__ == "__main__":
    main()
