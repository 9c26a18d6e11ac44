"""Rendering backend for the 2D scene.

Shapes draw through the small ``Renderer`` protocol instead of calling GL
directly, so the drawing code can be exercised without a window. The
``GLRenderer`` implementation maps each primitive onto the legacy
fixed-function pipeline (immediate mode, matrix stack).

Colour and line width are global GL state: every ``draw()`` sets them
explicitly rather than relying on whatever the previous entity left behind.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import ContextManager, Iterable, Iterator, Optional, Protocol, Sequence, Tuple

from OpenGL.GL import (
    glBegin,
    glEnd,
    glVertex2f,
    glColor3f,
    glLineWidth,
    glPointSize,
    glPushMatrix,
    glPopMatrix,
    glTranslatef,
    glRotatef,
    glScalef,
    glClear,
    glClearColor,
    glMatrixMode,
    glLoadIdentity,
    glDisable,
    glEnable,
    glBlendFunc,
    GL_POINTS,
    GL_LINES,
    GL_LINE_STRIP,
    GL_LINE_LOOP,
    GL_POLYGON,
    GL_COLOR_BUFFER_BIT,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_DEPTH_TEST,
    GL_BLEND,
    GL_LINE_SMOOTH,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
)
from OpenGL.GLU import gluOrtho2D

from config import DEFAULT_LINE_WIDTH, DEFAULT_POINT_SIZE

Vertex = Tuple[float, float]
Color = Tuple[float, float, float]


class Renderer(Protocol):
    def push(self) -> None: ...
    def pop(self) -> None: ...
    def translate(self, x: float, y: float) -> None: ...
    def rotate(self, degrees: float) -> None: ...
    def scale(self, sx: float, sy: float) -> None: ...
    def set_color(self, color: Color) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def set_point_size(self, size: float) -> None: ...
    def points(self, vertices: Iterable[Vertex]) -> None: ...
    def lines(self, vertices: Iterable[Vertex]) -> None: ...
    def line_strip(self, vertices: Iterable[Vertex]) -> None: ...
    def line_loop(self, vertices: Iterable[Vertex]) -> None: ...
    def polygon(self, vertices: Iterable[Vertex], colors: Optional[Sequence[Color]] = None) -> None: ...
    def transform(self) -> ContextManager[None]: ...


@contextmanager
def pushed(renderer: Renderer) -> Iterator[None]:
    """Bracket a block of transform calls with a symmetric push/pop."""
    renderer.push()
    try:
        yield
    finally:
        renderer.pop()


class GLRenderer:
    """Immediate-mode OpenGL backend with the world origin at screen centre."""

    def __init__(self, width: int, height: int, clear_color: Sequence[float]) -> None:
        self.width = width
        self.height = height
        self.clear_color = tuple(clear_color)

    def setup(self) -> None:  # pragma: no cover - visual
        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_LINE_SMOOTH)
        glClearColor(*self.clear_color)

    def begin_frame(self) -> None:  # pragma: no cover - visual
        glClear(GL_COLOR_BUFFER_BIT)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        gluOrtho2D(-half_w, half_w, -half_h, half_h)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glLineWidth(DEFAULT_LINE_WIDTH)
        glPointSize(DEFAULT_POINT_SIZE)

    # ------------------------------------------------------------ transforms
    def push(self) -> None:  # pragma: no cover - visual
        glPushMatrix()

    def pop(self) -> None:  # pragma: no cover - visual
        glPopMatrix()

    def translate(self, x: float, y: float) -> None:  # pragma: no cover - visual
        glTranslatef(x, y, 0.0)

    def rotate(self, degrees: float) -> None:  # pragma: no cover - visual
        glRotatef(degrees, 0.0, 0.0, 1.0)

    def scale(self, sx: float, sy: float) -> None:  # pragma: no cover - visual
        glScalef(sx, sy, 1.0)

    def transform(self) -> ContextManager[None]:
        return pushed(self)

    # ---------------------------------------------------------------- state
    def set_color(self, color: Color) -> None:  # pragma: no cover - visual
        glColor3f(*color)

    def set_line_width(self, width: float) -> None:  # pragma: no cover - visual
        glLineWidth(max(1.0, float(width)))

    def set_point_size(self, size: float) -> None:  # pragma: no cover - visual
        glPointSize(max(1.0, float(size)))

    # ------------------------------------------------------------ primitives
    def _emit(self, mode: int, vertices: Iterable[Vertex]) -> None:  # pragma: no cover - visual
        glBegin(mode)
        for x, y in vertices:
            glVertex2f(x, y)
        glEnd()

    def points(self, vertices: Iterable[Vertex]) -> None:  # pragma: no cover - visual
        self._emit(GL_POINTS, vertices)

    def lines(self, vertices: Iterable[Vertex]) -> None:  # pragma: no cover - visual
        self._emit(GL_LINES, vertices)

    def line_strip(self, vertices: Iterable[Vertex]) -> None:  # pragma: no cover - visual
        self._emit(GL_LINE_STRIP, vertices)

    def line_loop(self, vertices: Iterable[Vertex]) -> None:  # pragma: no cover - visual
        self._emit(GL_LINE_LOOP, vertices)

    def polygon(self, vertices: Iterable[Vertex], colors: Optional[Sequence[Color]] = None) -> None:  # pragma: no cover - visual
        if colors is None:
            self._emit(GL_POLYGON, vertices)
            return
        glBegin(GL_POLYGON)
        for (x, y), color in zip(vertices, colors):
            glColor3f(*color)
            glVertex2f(x, y)
        glEnd()


__all__ = ["Renderer", "GLRenderer", "pushed", "Vertex", "Color"]
