"""Application entry-point for the CHIP-8 interpreter.
Run `python main.py <scale> <delay> <rom>` from the project root to launch the GUI."""
import logging

from chip8.config import parse_args
from chip8_gui.main_window import run


def main(argv=None):
    config = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if config.debug else logging.INFO,
                        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    run(config)


if __name__ == "__main__":
    main()
