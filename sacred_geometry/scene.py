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


"""The ordered collection of live pattern instances."""

from .elements import CircleElement, LineElement
from .helpers import Point, Rect


class Scene(object):

    """Radial bursts in insertion order, plus the single wave.

    Bursts are drawn back to front in the order they were added, so the
    oldest (largest, faintest) burst sits underneath the newer ones.
    """

    def __init__(self, params):
        seed = CircleElement(params, diameter=0 if params.animate else None)
        self.circles = [seed]
        self.wave = LineElement(params)

    def __len__(self):
        return len(self.circles)

    def __iter__(self):
        return iter(self.circles)

    def add(self, circle):
        self.circles.append(circle)

    def retire(self, circles):
        retired = set(id(c) for c in circles)
        self.circles = [c for c in self.circles if id(c) not in retired]

    def resize(self, params):
        for circle in self.circles:
            circle.resize(params)
        self.wave.resize(params)

    def render_frame(self, surface, params, width, height):
        surface.clear_frame()
        window = Rect.from_top_left(Point(0, 0), width, height)
        surface.set_origin(*window.center)
        surface.set_stroke_color(params.stroke_color)
        surface.set_stroke_width(params.stroke_width)
        for circle in self.circles:
            circle.render(surface, params)
        self.wave.render(surface, params)
