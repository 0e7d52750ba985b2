# cairo-sandbox: Interactive sandbox for cairo graphics.
#
# Copyright (C) 2020  Brandon Lewis
#
# This program is free software: you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public License
# as published by the Free Software Foundation, either version 3 of
# the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program.  If not, see
# <https://www.gnu.org/licenses/>.


"""The two pattern families.

`CircleElement` is a radial burst: one circle at the origin plus
`axis_count` circles evenly spaced on a ring of `burst_radius`.
`LineElement` is the wave: for every outer rotation, a fan of chords
mirrored about the rotated vertical axis.

Both re-derive their geometry from the parameter set in `resize()`
rather than listening for changes.
"""

import itertools
import math

from .helpers import Point, frange


class CircleElement(object):

    """A radial burst of circles sharing a single diameter."""

    def __init__(self, params, diameter=None):
        self.growing = diameter is not None
        self.diameter = params.circle_diameter if diameter is None else diameter
        self.resize(params)

    def __repr__(self):
        return "<CircleElement axis=%d radius=%g diameter=%g>" % (
            self.axis, self.radius, self.diameter)

    def resize(self, params):
        self.axis = params.axis_count
        self.step = 2 * math.pi / self.axis
        self.radius = params.burst_radius
        # growth continues from wherever it was
        if not self.growing:
            self.diameter = params.circle_diameter

    def expand(self, speed):
        self.growing = True
        self.diameter += speed

    def alpha(self, max_diameter):
        if max_diameter <= 0:
            return 1.0
        return min(max(1.0 - self.diameter / max_diameter, 0.0), 1.0)

    def angles(self):
        return [i * self.step for i in range(self.axis)]

    def positions(self):
        """Circle centers: the origin, then the ring by increasing angle."""
        return [Point(0, 0)] + [
            Point.from_polar(self.radius, theta)
            for theta in self.angles()
        ]

    def render(self, surface, params):
        surface.set_stroke_opacity(self.alpha(params.max_diameter))
        for center in self.positions():
            surface.draw_circle(center.x, center.y, self.diameter)


class LineElement(object):

    """The wave: rotated fans of chords mirrored about the local y axis."""

    def __init__(self, params):
        self.resize(params)

    def __repr__(self):
        return "<LineElement length=%g outer=%g inner=%g>" % (
            self.length, self.outer_step, self.inner_step)

    def resize(self, params):
        self.length = params.line_length
        self.outer_step = params.line_outer_step
        self.inner_step = params.line_inner_step

    def chords(self):
        """(A, B) endpoint pairs in the unrotated frame."""
        ret = []
        for r in frange(0, 180, self.inner_step):
            r = math.radians(r)
            a = Point(math.sin(r) * self.length, math.cos(r) * self.length)
            b = Point(math.sin(-r) * self.length, math.cos(-r) * self.length)
            ret.append((a, b))
        return ret

    def segments(self):
        """Yield (rotation in degrees, A, B) for every drawn segment."""
        chords = self.chords()
        for angle in frange(0, 360, self.outer_step):
            for a, b in chords:
                yield angle, a, b

    def render(self, surface, params):
        surface.set_stroke_opacity(1.0)
        for angle, group in itertools.groupby(self.segments(), key=lambda s: s[0]):
            with surface.save():
                surface.rotate(math.radians(angle))
                for unused, a, b in group:
                    surface.draw_line(a.x, a.y, b.x, b.y)
