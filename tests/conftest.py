import contextlib

import pytest

from sacred_geometry.params import DisplayTier, NumericParameter, ParameterSet, WIDE
from sacred_geometry.surface import Surface


class RecordingSurface(Surface):

    """Surface that records primitives instead of drawing them.

    Lines are recorded with the rotation in effect, so tests can check
    both the local (unrotated) coordinates and the frame they were drawn
    in.
    """

    def __init__(self):
        self.ops = []
        self.rotation = 0.0
        self.alpha = 1.0
        self.origin = None
        self.width = None
        self.color = None
        self.depth = 0

    def clear_frame(self):
        self.ops.append(("clear",))
        self.rotation = 0.0

    def set_origin(self, x, y):
        self.origin = (x, y)

    def set_stroke_opacity(self, alpha):
        self.alpha = alpha

    def set_stroke_width(self, width):
        self.width = width

    def set_stroke_color(self, rgb):
        self.color = tuple(rgb)

    def draw_circle(self, x, y, diameter):
        self.ops.append(("circle", x, y, diameter, self.alpha))

    def draw_line(self, x1, y1, x2, y2):
        self.ops.append(("line", x1, y1, x2, y2, self.rotation, self.alpha))

    @contextlib.contextmanager
    def save(self):
        saved = self.rotation
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1
            self.rotation = saved

    def rotate(self, radians):
        self.rotation += radians

    def export_frame(self, filename, fmt="png"):
        self.ops.append(("export", filename, fmt))
        return filename

    @property
    def circles(self):
        return [op for op in self.ops if op[0] == "circle"]

    @property
    def lines(self):
        return [op for op in self.ops if op[0] == "line"]


# circle_diameter ceiling 50 + overshoot 250 -> fade-out at 300
SMALL = DisplayTier(
    "small",
    max_width=None,
    overshoot=250,
    overrides={
        "burst_radius":    NumericParameter(0, 500, 1, 200),
        "circle_diameter": NumericParameter(0, 50, 1, 10),
        "line_length":     NumericParameter(0, 500, 1, 400),
    })


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def params():
    return ParameterSet(WIDE)


@pytest.fixture
def small_params():
    return ParameterSet(SMALL)
