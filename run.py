"""cavegen CLI entry point.

Generates a cave for the given dimensions and seed and prints a JSON summary
(tile counts, room sizes, generation metrics). Configuration comes from flags
and CAVEGEN_* environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from cavegen import CaveConfig, CaveGenError, CaveMap, __version__
from cavegen.logging_utils import log

# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    cavegen cave generator

    Build a cellular-automaton cave map and report its structure. Options can
    be provided via CLI flags or environment variables. If both are present,
    CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          CAVEGEN_WIDTH               Map width in tiles (default: 32)
          CAVEGEN_HEIGHT              Map height in tiles (default: 32)
          CAVEGEN_SEED                Seed (default: random)
          CAVEGEN_FILL_PERCENT        Initial fill threshold 0-100 (default: 50)
          CAVEGEN_SMOOTH_ITERATIONS   Maximum smoothing passes (default: 255)
          CAVEGEN_MIN_REGION_SIZE     Regions below this are pruned (default: 50)
          CAVEGEN_CORRIDOR_RADIUS     Corridor carving radius (default: 7)
          CAVEGEN_LOG_LEVEL           debug|info|warn|error (default: info)

        Examples:
          # Generate the default 32x32 map with seed 42
          python run.py generate --seed 42

          # A wider map with narrower corridors
          python run.py generate --width 80 --height 40 --corridor-radius 2

          # Load variables from .env then generate
          python run.py --env-file .env generate
        """
    )

    parser = argparse.ArgumentParser(
        prog="cavegen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"cavegen {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a map and print a JSON summary",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a cave map and summarize its rooms and tiles",
    )
    gen_parser.add_argument("--width", type=int, default=None, help="Map width (default: env or 32)")
    gen_parser.add_argument("--height", type=int, default=None, help="Map height (default: env or 32)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed (default: env or random)")
    gen_parser.add_argument("--fill-percent", dest="fill_percent", type=int, default=None)
    gen_parser.add_argument("--smooth-iterations", dest="smooth_iterations", type=int, default=None)
    gen_parser.add_argument("--min-region-size", dest="min_region_size", type=int, default=None)
    gen_parser.add_argument("--corridor-radius", dest="corridor_radius", type=int, default=None)
    gen_parser.set_defaults(command="generate")

    return parser.parse_args(_with_default_command(argv))


def _with_default_command(argv: list[str]) -> list[str]:
    """Insert `generate` after the global options when no subcommand is given."""
    argv = list(argv)
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--env-file":
            i += 2
        elif arg.startswith("--env-file=") or arg in ("-h", "--help", "--version"):
            i += 1
        else:
            break
    # A dangling --env-file is left for argparse to report
    if i > len(argv) or (i < len(argv) and argv[i] == "generate"):
        return argv
    argv.insert(i, "generate")
    return argv


def summarize(cave: CaveMap) -> dict:
    return {
        "seed": cave.seed,
        "width": cave.width,
        "height": cave.height,
        "rooms": [room.size for room in cave.rooms],
        "metrics": cave.metrics,
    }


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if _COLOR_ENABLED:
        _color_init()
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    overrides = {
        key: getattr(args, key, None)
        for key in ("width", "height", "seed", "fill_percent", "smooth_iterations", "min_region_size", "corridor_radius")
    }
    try:
        cave = CaveMap(CaveConfig.from_env(**overrides))
    except CaveGenError as e:
        prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
        print(f"{prefix} {e}", file=sys.stderr)
        log.error(event="config_rejected", error=str(e))
        return 2

    log.debug(event="generated", seed=cave.seed, width=cave.width, height=cave.height, rooms=len(cave.rooms))
    print(json.dumps(summarize(cave), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
