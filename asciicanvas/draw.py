"""
Command processor for the character canvas.

Every routine here is pure: it takes a command and the current `Canvas`
and returns an `Ok` with a new canvas or an `Err` describing why the
command could not be applied. The input canvas is never modified.
"""

from collections import deque
from logging import getLogger

from .canvas import BLANK, BORDER_HORIZONTAL, BORDER_VERTICAL, INK, Canvas, Row
from .commands import Create, FloodFill, Line, Rectangle
from .result import CanvasError, Err, Ok, Result

logger = getLogger(__name__)

NO_CANVAS = "No Canvas presented to draw line on."


def apply_command(command: object, canvas: Canvas | None = None) -> Result:
    """Apply one command to `canvas`.

    Values outside the known command set are treated as a no-op that
    yields the empty canvas.
    """
    logger.debug(f"Applying {command}")
    match command:
        case Create():
            return create_canvas(command)
        case Line():
            return draw_line(command, canvas)
        case Rectangle():
            return draw_rectangle(command, canvas)
        case FloodFill():
            return flood_fill(command, canvas)
        case _:
            logger.warning(f"Unhandled command '{command}'")
            return Ok(Canvas.empty())


def create_canvas(command: Create) -> Result:
    border_row: Row = (BORDER_HORIZONTAL,) * (command.width + 2)
    inner_row: Row = (BORDER_VERTICAL, *(BLANK,) * command.width, BORDER_VERTICAL)
    return Ok(Canvas((border_row, *(inner_row,) * command.height, border_row)))


def draw_line(command: Line, canvas: Canvas | None, pixel: str = INK) -> Result:
    if canvas is None:
        return Err(CanvasError(NO_CANVAS))
    if command.is_horizontal:
        return _plot_horizontal(command, canvas, pixel)
    if command.is_vertical:
        return _plot_vertical(command, canvas, pixel)
    return Err(CanvasError(f"{command.orientation} lines not supported."))


def _plot_horizontal(command: Line, canvas: Canvas, pixel: str) -> Result:
    line = command.normalize()
    if not canvas.h_line_fits(line):
        return Err(CanvasError(f"{command} line will not fit."))

    row = canvas.row(line.y1)
    length = line.x2 - line.x1 + 1
    updated = row[: line.x1] + (pixel,) * length + row[line.x2 + 1 :]
    cells = list(canvas.cells)
    cells[line.y1] = updated
    return Ok(Canvas(tuple(cells)))


def _plot_vertical(command: Line, canvas: Canvas, pixel: str) -> Result:
    line = command.normalize()
    if not canvas.v_line_fits(line):
        return Err(CanvasError(f"{command} line will not fit."))

    x = line.x1
    cells = list(canvas.cells)
    for y in range(line.y1, line.y2 + 1):
        row = cells[y]
        cells[y] = row[:x] + (pixel,) + row[x + 1 :]
    return Ok(Canvas(tuple(cells)))


def draw_rectangle(command: Rectangle, canvas: Canvas | None) -> Result:
    """Draw the outline of `command` as four lines.

    The fit is checked up front so a rectangle is either drawn whole or
    not at all.
    """
    if canvas is None:
        return Err(CanvasError(NO_CANVAS))

    top, bottom, left, right = command.normalize().edges()
    if not canvas.rectangle_fits(top, left):
        return Err(CanvasError(f"{command} rectangle will not fit."))

    return (
        draw_line(top, canvas)
        .and_then(lambda c: draw_line(bottom, c))
        .and_then(lambda c: draw_line(left, c))
        .and_then(lambda c: draw_line(right, c))
    )


def span_bounds(row: list[str], x: int, line_pixel: str = INK) -> tuple[int, int]:
    """Return the fillable span `[start, end)` of `row` that contains `x`.

    The span is bounded by the nearest `line_pixel` on either side, or by
    the border columns when there is none.
    """
    start = 1
    for i in range(x, -1, -1):
        if row[i] == line_pixel:
            start = i + 1
            break

    end = len(row) - 1
    for i in range(x + 1, len(row)):
        if row[i] == line_pixel:
            end = i
            break

    return start, end


def flood_fill(command: FloodFill, canvas: Canvas | None, line_pixel: str = INK) -> Result:
    """Scanline flood fill of the region containing `(command.x, command.y)`.

    - Spans are bounded only by `line_pixel`; any other character is
      repainted with `command.colour`.
    - Pending requests live in a FIFO queue, and a cell is never queued
      twice at the same time.
    """
    if canvas is None:
        return Err(CanvasError(NO_CANVAS))
    if not canvas.in_interior(command.x, command.y):
        return Err(CanvasError(f"FloodFill starting point {command} is outside the Canvas."))
    if canvas.cell(command.x, command.y) == line_pixel:
        return Err(CanvasError(f"FloodFill starting point {command} is on a Line."))

    colour = command.colour
    grid = [list(row) for row in canvas.cells]
    last_row = len(grid) - 1

    queue: deque[tuple[int, int]] = deque([(command.x, command.y)])
    pending: set[tuple[int, int]] = {(command.x, command.y)}
    spans = 0

    while queue:
        x, y = queue.popleft()
        pending.discard((x, y))

        row = grid[y]
        start, end = span_bounds(row, x, line_pixel)
        row[start:end] = [colour] * (end - start)
        spans += 1

        # Queue cells above and below the span that still need filling
        for ny in (y - 1, y + 1):
            if not 0 < ny < last_row:
                continue
            neighbour = grid[ny]
            for nx in range(start, end):
                c = neighbour[nx]
                if c != line_pixel and c != colour and (nx, ny) not in pending:
                    queue.append((nx, ny))
                    pending.add((nx, ny))

    logger.debug(f"{command} filled {spans} spans")
    return Ok(Canvas(tuple(tuple(row) for row in grid)))
