"""Two-variant result type returned by every drawing operation."""

from collections.abc import Callable
from dataclasses import dataclass

from .canvas import Canvas


@dataclass(frozen=True)
class CanvasError:
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Ok[T]:
    value: T

    def is_ok(self) -> bool:
        return True

    def and_then[U](self, fn: "Callable[[T], Ok[U] | Err]") -> "Ok[U] | Err":
        return fn(self.value)


@dataclass(frozen=True)
class Err:
    error: CanvasError

    def is_ok(self) -> bool:
        return False

    def and_then(self, fn: Callable[..., object]) -> "Err":
        return self


type Result = Ok[Canvas] | Err
