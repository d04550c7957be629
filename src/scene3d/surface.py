"""Render surfaces that receive projected polygons.

The scene only talks to the :class:`RenderSurface` protocol. The terminal
implementation rasterises pushed outlines into a grid of character cells and
presents the grid as an ANSI frame, one coloured block per cell.
"""

from __future__ import annotations

import math
from typing import List, Optional, Protocol, Sequence, Tuple

from .polygon import Color
from .terminal import TerminalController

Bounds = Tuple[float, float, float, float]
Cell = Optional[int]

DEFAULT_BOUNDS: Bounds = (-150.0, -150.0, 150.0, 150.0)
MIN_SIZE = 10


class SurfaceUnavailable(RuntimeError):
    """Raised when a render surface cannot be acquired."""


class RenderSurface(Protocol):
    def push(self, x: float, y: float, color: Color) -> None: ...

    def polygon(self, line_width: float) -> None: ...

    def clear(self, color: Color) -> None: ...

    def update(self) -> None: ...

    def closed(self) -> bool: ...


def ansi_from_rgba(color: Sequence[int]) -> Optional[int]:
    """Map an RGBA colour onto the ANSI 256-colour cube, ``None`` if transparent."""
    if len(color) > 3 and color[3] == 0:
        return None
    r = int(max(0, min(5, round(color[0] / 255 * 5))))
    g = int(max(0, min(5, round(color[1] / 255 * 5))))
    b = int(max(0, min(5, round(color[2] / 255 * 5))))
    return 16 + 36 * r + 6 * g + b


class TerminalSurface:
    """Character-cell canvas for a :class:`TerminalController`.

    World coordinates inside ``bounds`` (left, bottom, right, top) are scaled
    onto the cell grid with Y pointing up. ``polygon(line_width)`` consumes the
    vertices pushed since the previous call: a positive width strokes the
    outline, zero fills the interior.
    """

    _GLYPH = "█"

    def __init__(
        self,
        controller: Optional[TerminalController] = None,
        *,
        bounds: Bounds = DEFAULT_BOUNDS,
        size: Optional[Tuple[int, int]] = None,
    ) -> None:
        left, bottom, right, top = bounds
        if right <= left or top <= bottom:
            raise ValueError(f"Invalid surface bounds {bounds}")
        self._controller = controller
        self._bounds = bounds
        self._size = size
        self.width = 0
        self.height = 0
        self._background: Cell = None
        self._cells: List[List[Cell]] = []
        self._pending: List[Tuple[float, float, Cell]] = []
        self._closed = False
        self.last_frame: Optional[str] = None

    def __enter__(self) -> "TerminalSurface":
        if self._controller is not None:
            self._controller.__enter__()
        try:
            self.open()
        except SurfaceUnavailable:
            if self._controller is not None:
                self._controller.restore()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._closed = True
        if self._controller is not None:
            self._controller.restore()

    def open(self) -> None:
        size = self._size
        if size is None:
            if self._controller is None:
                raise SurfaceUnavailable("No terminal controller or canvas size given")
            size = self._controller.size_tuple()
        width, height = size
        if width < MIN_SIZE or height < MIN_SIZE:
            raise SurfaceUnavailable(
                f"Terminal window too small for rendering ({width}x{height}). "
                f"Resize to at least {MIN_SIZE}x{MIN_SIZE} characters."
            )
        self.width = width
        self.height = height
        self._cells = self._blank_cells()

    # RenderSurface ----------------------------------------------------

    def push(self, x: float, y: float, color: Color) -> None:
        col, row = self.to_cell(x, y)
        self._pending.append((col, row, ansi_from_rgba(color)))

    def polygon(self, line_width: float) -> None:
        vertices, self._pending = self._pending, []
        if not vertices:
            return
        if line_width > 0:
            for start, end in zip(vertices, vertices[1:]):
                self._stroke(start, end)
            if len(vertices) == 1:
                self._plot(round(vertices[0][0]), round(vertices[0][1]), vertices[0][2])
        else:
            self._fill(vertices)

    def clear(self, color: Color) -> None:
        self._background = ansi_from_rgba(color)
        self._pending = []
        self._cells = self._blank_cells()

    def update(self) -> None:
        self.last_frame = self.compose_frame()
        if self._controller is not None:
            self._controller.draw(self.last_frame)

    def closed(self) -> bool:
        if not self._closed and self._controller is not None:
            self._closed = self._controller.quit_requested()
        return self._closed

    def close(self) -> None:
        self._closed = True

    # Canvas helpers ---------------------------------------------------

    def to_cell(self, x: float, y: float) -> Tuple[float, float]:
        left, bottom, right, top = self._bounds
        col = (x - left) / (right - left) * (self.width - 1)
        row = (top - y) / (top - bottom) * (self.height - 1)
        return col, row

    def cell(self, col: int, row: int) -> Cell:
        return self._cells[row][col]

    def painted_cells(self) -> List[Tuple[int, int]]:
        return [
            (col, row)
            for row, cells in enumerate(self._cells)
            for col, value in enumerate(cells)
            if value is not None
        ]

    def compose_frame(self) -> str:
        reset = "\033[0m"
        background = "" if self._background is None else f"\033[48;5;{self._background}m"
        lines: List[str] = []
        for row in self._cells:
            current: Cell = None
            parts: List[str] = [background]
            for color in row:
                if color != current:
                    if color is None:
                        parts.append(reset + background)
                    else:
                        parts.append(f"\033[38;5;{color}m")
                    current = color
                parts.append(" " if color is None else self._GLYPH)
            parts.append(reset)
            lines.append("".join(parts))
        return "\n".join(lines)

    def _blank_cells(self) -> List[List[Cell]]:
        return [[None for _ in range(self.width)] for _ in range(self.height)]

    def _plot(self, col: int, row: int, color: Cell) -> None:
        if color is None:
            return
        if 0 <= col < self.width and 0 <= row < self.height:
            self._cells[row][col] = color

    def _stroke(self, start: Tuple[float, float, Cell], end: Tuple[float, float, Cell]) -> None:
        x0, y0 = round(start[0]), round(start[1])
        x1, y1 = round(end[0]), round(end[1])
        color = start[2]
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self._plot(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def _fill(self, vertices: Sequence[Tuple[float, float, Cell]]) -> None:
        color = vertices[0][2]
        edges = list(zip(vertices, vertices[1:] + vertices[:1]))
        for row in range(self.height):
            crossings: List[float] = []
            for (ax, ay, _), (bx, by, _) in edges:
                if (ay <= row < by) or (by <= row < ay):
                    crossings.append(ax + (row - ay) * (bx - ax) / (by - ay))
            crossings.sort()
            for start, end in zip(crossings[::2], crossings[1::2]):
                for col in range(math.ceil(start), math.floor(end) + 1):
                    self._plot(col, row, color)
