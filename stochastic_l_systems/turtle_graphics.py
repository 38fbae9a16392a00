"""
Turtle graphics for generated L-system strings.

Symbols understood by the turtle:

    F, L, R : move forward by the current length, drawing a line
    +       : turn left by the angle delta
    -       : turn right by the angle delta
    [       : save (position, heading, length), then scale the length
    ]       : restore the last saved (position, heading, length)

Anything else is ignored by the turtle (it may still matter to the grammar,
like the X of the ABOP plants).

Coordinates are screen coordinates: y grows downward and a heading of 0
points up. Drawing is done in two passes over the same symbols. The first
pass only measures the bounding rectangle, the second records the segments
relative to the top-left corner of that rectangle, so the drawing always fits
a canvas of exactly the measured size.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Tuple

from stochastic_l_systems.errors import StackUnderflowError

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


class SymbolKind(Enum):
    FORWARD = "forward"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    PUSH = "push"
    POP = "pop"
    INERT = "inert"


SYMBOL_KINDS = {
    "F": SymbolKind.FORWARD,
    "L": SymbolKind.FORWARD,
    "R": SymbolKind.FORWARD,
    "+": SymbolKind.TURN_LEFT,
    "-": SymbolKind.TURN_RIGHT,
    "[": SymbolKind.PUSH,
    "]": SymbolKind.POP,
}


def classify(symbol: str) -> SymbolKind:
    return SYMBOL_KINDS.get(symbol, SymbolKind.INERT)


def classify_string(symbols: Iterable[str]) -> List[SymbolKind]:
    """Resolve every symbol to its turtle command once, ahead of both passes."""
    return [classify(ch) for ch in symbols]


@dataclass(frozen=True)
class TurtleDescriptor:
    """
    Start state of the turtle.

    Args:
        angle: Angle delta for '+' and '-', in degrees.
        length: Initial step length.
        length_multiplier: Factor applied to the step length on each '['.
        pen_width: Line width, used to widen the bounding rectangle.
        start: Start position.
    """

    angle: float
    length: float = 8.0
    length_multiplier: float = 1.0
    pen_width: float = 1.0
    start: Point = (0.0, 0.0)

    def __post_init__(self):
        if self.pen_width <= 0:
            raise ValueError(f"pen_width must be > 0, got {self.pen_width}")

    @property
    def angle_radians(self) -> float:
        return math.radians(self.angle)

    @classmethod
    def from_radians(cls, angle: float, length: float = 8.0, **kwargs) -> "TurtleDescriptor":
        return cls(math.degrees(angle), length, **kwargs)


@dataclass(frozen=True)
class StackFrame:
    position: Point
    heading: float
    length: float


@dataclass(frozen=True)
class BoundingRect:
    """Axis-aligned rectangle with integer pixel edges."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def contains(self, point: Point) -> bool:
        x, y = point
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass(frozen=True)
class TurtleGeometry:
    """
    Result of interpreting a string.

    ``segments`` are in canvas coordinates, that is relative to the top-left
    corner of ``bounds``. ``bounds`` is in the turtle's own frame.
    ``unclosed`` counts branches still open at the end of the string.
    ``pen_width`` is the width the bounds were widened for.
    """

    segments: Tuple[Segment, ...]
    bounds: BoundingRect
    unclosed: int = 0
    pen_width: float = 1.0

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    @property
    def origin(self) -> Point:
        return float(self.bounds.left), float(self.bounds.top)

    def world_segments(self) -> List[Segment]:
        """Segments moved back into the turtle's frame."""
        ox, oy = self.origin
        return [((x0 + ox, y0 + oy), (x1 + ox, y1 + oy)) for (x0, y0), (x1, y1) in self.segments]

    def __len__(self) -> int:
        return len(self.segments)


def _walk(
    kinds: List[SymbolKind],
    desc: TurtleDescriptor,
    on_line: Callable[[Point, Point], None],
) -> int:
    """
    Run the turtle over already classified symbols.

    Calls on_line(start, end) for every line drawn, in drawing order.

    Returns:
        int: Stack depth left at the end of the string.
    """
    x, y = desc.start
    heading = 0.0
    length = desc.length
    delta = desc.angle_radians
    stack: List[StackFrame] = []

    for i, kind in enumerate(kinds):
        if kind is SymbolKind.FORWARD:
            nx = x + length * math.sin(heading)
            ny = y - length * math.cos(heading)
            on_line((x, y), (nx, ny))
            x, y = nx, ny
        elif kind is SymbolKind.TURN_LEFT:
            heading -= delta
        elif kind is SymbolKind.TURN_RIGHT:
            heading += delta
        elif kind is SymbolKind.PUSH:
            stack.append(StackFrame((x, y), heading, length))
            length *= desc.length_multiplier
        elif kind is SymbolKind.POP:
            if not stack:
                raise StackUnderflowError(i)
            frame = stack.pop()
            (x, y), heading, length = frame.position, frame.heading, frame.length

    return len(stack)


class _RectMeasure:
    def __init__(self, start: Point):
        x, y = start
        self.left = math.floor(x)
        self.right = math.ceil(x)
        self.top = math.floor(y)
        self.bottom = math.ceil(y)

    def __call__(self, p0: Point, p1: Point) -> None:
        x, y = p1
        self.left = min(self.left, math.floor(x))
        self.right = max(self.right, math.ceil(x))
        self.top = min(self.top, math.floor(y))
        self.bottom = max(self.bottom, math.ceil(y))

    def rect(self, pen_width: float) -> BoundingRect:
        # widen the trailing edges so strokes on the edge are not clipped
        delta = math.ceil(pen_width / 2)
        return BoundingRect(self.left, self.top, self.right + delta, self.bottom + delta)


def _measure(kinds: List[SymbolKind], desc: TurtleDescriptor) -> Tuple[BoundingRect, int]:
    tracker = _RectMeasure(desc.start)
    depth = _walk(kinds, desc, tracker)
    return tracker.rect(desc.pen_width), depth


def measure(symbols: str, desc: TurtleDescriptor) -> BoundingRect:
    """First pass only: the bounding rectangle of the drawing."""
    rect, _ = _measure(classify_string(symbols), desc)
    return rect


def interpret(symbols: str, desc: TurtleDescriptor) -> TurtleGeometry:
    """
    Interpret a generated string as turtle graphics.

    Args:
        symbols: Generated L-system string.
        desc: Turtle descriptor.

    Returns:
        TurtleGeometry: Segments relative to the bounding rectangle and the
        rectangle itself.

    Raises:
        StackUnderflowError: A ']' has no matching '['.
    """
    kinds = classify_string(symbols)

    bounds, depth = _measure(kinds, desc)
    if depth:
        logger.warning("%d branch(es) left open at end of string", depth)

    ox, oy = bounds.left, bounds.top
    segments: List[Segment] = []

    def record(p0: Point, p1: Point) -> None:
        segments.append(((p0[0] - ox, p0[1] - oy), (p1[0] - ox, p1[1] - oy)))

    _walk(kinds, desc, record)
    logger.debug("turtle drew %d segments in a %dx%d rectangle", len(segments), bounds.width, bounds.height)
    return TurtleGeometry(tuple(segments), bounds, depth, desc.pen_width)
