import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

DEFAULT_SCALE = 10
DEFAULT_DELAY = 2      # ms between cycles


@dataclass
class EmulatorConfig:
    rom_path: str
    scale: int = DEFAULT_SCALE
    cycle_delay: int = DEFAULT_DELAY
    debug: bool = False


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chip8", description="CHIP-8 interpreter")
    parser.add_argument("scale", type=_positive_int,
                        help="Window pixels per CHIP-8 pixel")
    parser.add_argument("delay", type=_non_negative_int,
                        help="Milliseconds between CPU cycles")
    parser.add_argument("rom", help="ROM file to load at 0x200")
    parser.add_argument("--debug", action="store_true",
                        help="Enable verbose debug logging")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> EmulatorConfig:
    args = build_parser().parse_args(argv)
    return EmulatorConfig(rom_path=args.rom, scale=args.scale,
                          cycle_delay=args.delay, debug=args.debug)
