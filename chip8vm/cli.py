import argparse
import logging
import sys
from pathlib import Path

from .config import LOG_LEVELS, EmulatorConfig
from .errors import Chip8Error
from .interpreter import Interpreter

logger = logging.getLogger(__name__)


def read_rom(path):
    """Read a ROM image; raises FileNotFoundError for missing files."""
    path = Path(path)
    with open(path, "rb") as f:
        data = f.read()
    logger.info("Loading ROM: %s (%d bytes)", path.name, len(data))
    return data


def build_parser():
    parser = argparse.ArgumentParser(prog="chip8vm", description="CHIP-8 emulator")
    parser.add_argument("rom", help="ROM file to load at 0x200")
    parser.add_argument("--cpu-hz", type=int, default=600, help="instructions per second (default: 600)")
    parser.add_argument("--timer-hz", type=int, default=60, help="timer rate (default: 60)")
    parser.add_argument("--scale", type=int, default=10, help="window pixels per CHIP-8 pixel (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="seed for the CXKK random source")
    parser.add_argument("--grid", action="store_true", help="draw a debug grid over the display")
    parser.add_argument("--no-hud", action="store_true", help="hide the FPS / cycles overlay")
    parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = EmulatorConfig.from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        rom = read_rom(args.rom)
    except OSError as e:
        print(f"Error: cannot read ROM {args.rom}: {e}", file=sys.stderr)
        return 1

    vm = Interpreter.from_config(config)
    try:
        vm.load_program(rom)
    except Chip8Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # imported here so the core never needs a display
    from .frontend import run
    run(vm, config, caption=f"CHIP-8 Emulator - {Path(args.rom).name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
