from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Create:
    width: int
    height: int

    def __str__(self) -> str:
        return f"Create({self.width},{self.height})"


@dataclass(frozen=True)
class Line:
    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2

    @property
    def orientation(self) -> str:
        if self.is_horizontal:
            return "Horizontal"
        if self.is_vertical:
            return "Vertical"
        return "Diagonal"

    def normalize(self) -> "Line":
        """Return the same segment with `x1 <= x2` and `y1 <= y2`."""
        return replace(
            self,
            x1=min(self.x1, self.x2),
            x2=max(self.x1, self.x2),
            y1=min(self.y1, self.y2),
            y2=max(self.y1, self.y2),
        )

    def __str__(self) -> str:
        return f"Line({self.x1},{self.y1},{self.x2},{self.y2})"


@dataclass(frozen=True)
class Rectangle:
    x1: int
    y1: int
    x2: int
    y2: int

    def normalize(self) -> "Rectangle":
        """Return the same rectangle with `(x1, y1)` as the top-left corner."""
        return replace(
            self,
            x1=min(self.x1, self.x2),
            x2=max(self.x1, self.x2),
            y1=min(self.y1, self.y2),
            y2=max(self.y1, self.y2),
        )

    def edges(self) -> tuple[Line, Line, Line, Line]:
        """Top, bottom, left and right edges, in drawing order."""
        return (
            Line(self.x1, self.y1, self.x2, self.y1),
            Line(self.x1, self.y2, self.x2, self.y2),
            Line(self.x1, self.y1, self.x1, self.y2),
            Line(self.x2, self.y1, self.x2, self.y2),
        )

    def __str__(self) -> str:
        return f"Rectangle({self.x1},{self.y1},{self.x2},{self.y2})"


@dataclass(frozen=True)
class FloodFill:
    x: int
    y: int
    colour: str

    def __str__(self) -> str:
        return f"FloodFill({self.x},{self.y},{self.colour})"


@dataclass(frozen=True)
class Quit:
    """Ends an interactive session. Never handed to the drawing core."""


Command = Create | Line | Rectangle | FloodFill
