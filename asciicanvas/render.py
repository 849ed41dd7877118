from .canvas import Canvas


def render(canvas: Canvas) -> str:
    """Render `canvas` as text, one line per row. The empty canvas renders as ''."""
    return "\n".join("".join(row) for row in canvas.cells)
