from logging import getLogger

from .commands import Command, Create, FloodFill, Line, Quit, Rectangle

logger = getLogger(__name__)


class ParseError(ValueError):
    pass


def _ints(args: list[str]) -> list[int]:
    try:
        return [int(a) for a in args]
    except ValueError as e:
        raise ParseError(f"Coordinates must be integers, got '{' '.join(args)}'") from e


def _expect(name: str, args: list[str], count: int):
    if len(args) != count:
        raise ParseError(f"{name} expects {count} arguments, got {len(args)}")


def parse_command(text: str) -> Command | Quit:
    """Turn one line of user input into a command.

    Accepts `C w h`, `L x1 y1 x2 y2`, `R x1 y1 x2 y2`, `B x y c` and `Q`,
    with the command letter in either case.
    """
    parts = text.split()
    if not parts:
        raise ParseError("Empty command")

    name, args = parts[0].upper(), parts[1:]

    match name:
        case "C":
            _expect("Create", args, 2)
            width, height = _ints(args)
            if width < 1 or height < 1:
                raise ParseError(f"Canvas size must be positive, got {width}x{height}")
            return Create(width, height)
        case "L":
            _expect("Line", args, 4)
            return Line(*_ints(args))
        case "R":
            _expect("Rectangle", args, 4)
            return Rectangle(*_ints(args))
        case "B":
            _expect("FloodFill", args, 3)
            x, y = _ints(args[:2])
            colour = args[2]
            if len(colour) != 1:
                raise ParseError(f"Fill colour must be a single character, got '{colour}'")
            return FloodFill(x, y, colour)
        case "Q":
            _expect("Quit", args, 0)
            return Quit()
        case _:
            logger.warning(f"Unhandled cmd '{text}'")
            raise ParseError(f"Unknown command '{parts[0]}'")
