from collections.abc import Iterable
from logging import getLogger

from .canvas import Canvas
from .commands import Command, Quit
from .draw import apply_command
from .parser import ParseError, parse_command
from .render import render
from .result import Err, Ok, Result

logger = getLogger(__name__)


class DrawSession:
    """Owns the current canvas and applies commands to it in order."""

    def __init__(self, canvas: Canvas | None = None):
        self.canvas: Canvas | None = canvas
        self.finished: bool = False

    def apply(self, command: Command) -> Result:
        result = apply_command(command, self.canvas)
        match result:
            case Ok(value=canvas) if not canvas.is_empty:
                self.canvas = canvas
            case Err(error=error):
                logger.warning(f"{command} rejected: {error}")
        return result

    def execute(self, line: str) -> str:
        """Parse and apply one line of input, returning the text to display."""
        try:
            command = parse_command(line)
        except ParseError as e:
            logger.warning(f"Bad input '{line}': {e}")
            return str(e)

        if isinstance(command, Quit):
            self.finished = True
            return ""

        match self.apply(command):
            case Ok(value=canvas):
                return render(canvas)
            case Err(error=error):
                return error.message

    def run_script(self, lines: Iterable[str]) -> list[str]:
        outputs: list[str] = []
        for line in lines:
            if self.finished:
                break
            if not line.strip():
                continue
            outputs.append(self.execute(line))
        return outputs
