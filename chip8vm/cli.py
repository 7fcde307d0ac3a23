import argparse
import logging
import sys

from . import config
from .errors import ProgramLoadError, ProgramNotFoundError
from .interpreter import Chip8

log = logging.getLogger(__name__)


def configure_logging(verbose=0):
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger("chip8vm").setLevel(level)


def build_parser():
    parser = argparse.ArgumentParser(prog="chip8vm", description="Run a CHIP-8 ROM.")
    parser.add_argument("rom", help="path to the ROM image")
    parser.add_argument("--scale", type=int, default=config.scale,
                        help="window pixels per CHIP-8 pixel (default: %(default)s)")
    parser.add_argument("--keymap", choices=("cosmac", "hex"), default="cosmac",
                        help="host keyboard layout (default: %(default)s)")
    parser.add_argument("--stack-depth", type=int, default=config.STACK_DEPTH,
                        help="maximum subroutine nesting (default: %(default)s)")
    parser.add_argument("--show-fps", action="store_true", help="draw a frame rate counter")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for load messages, -vv to trace every instruction")
    return parser


def run_window(vm, args):
    """Open the pyglet window and block until it closes."""
    # the window module needs a display, so it is only imported once a ROM has loaded
    import pyglet
    from .window import Chip8Window

    window = Chip8Window(vm, scale=args.scale, keymap=args.keymap, show_fps=args.show_fps)
    pyglet.app.run()
    return window


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error("--scale must be at least 1")
    if args.stack_depth < 1:
        parser.error("--stack-depth must be at least 1")
    configure_logging(args.verbose)

    try:
        vm = Chip8.from_file(args.rom, stack_depth=args.stack_depth)
    except ProgramNotFoundError as e:
        log.error("ROM not found: %s", e.path)
        return 2
    except ProgramLoadError as e:
        log.error("Could not load ROM: %s", e)
        return 2

    window = run_window(vm, args)
    if window.error is not None:
        log.error("Emulation error: %s", window.error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
