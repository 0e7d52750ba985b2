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


"""The drawing surface the generators render through.

`Surface` is the narrow interface the engine needs from its host. The
only real implementation is `CairoSurface`, which wraps a cairo context;
tests substitute a recording fake.
"""

import logging
import math
import os

import cairo

from .errors import ExportFailure
from .helpers import Save


logger = logging.getLogger(__name__)


def export_filename(now, fmt="png"):
    """Name for an exported frame, derived from the timestamp `now`."""
    return "Export%s.%s" % (now.strftime("%d%m%Y%H%M%S"), fmt)


class Surface(object):

    """ABC for the host drawing surface."""

    def clear_frame(self):
        raise NotImplementedError()

    def set_origin(self, x, y):
        raise NotImplementedError()

    def set_stroke_opacity(self, alpha):
        raise NotImplementedError()

    def set_stroke_width(self, width):
        raise NotImplementedError()

    def set_stroke_color(self, rgb):
        raise NotImplementedError()

    def draw_circle(self, x, y, diameter):
        raise NotImplementedError()

    def draw_line(self, x1, y1, x2, y2):
        raise NotImplementedError()

    def save(self):
        """Context manager restoring the transform and stroke on exit."""
        raise NotImplementedError()

    def rotate(self, radians):
        raise NotImplementedError()

    def export_frame(self, filename, fmt="png"):
        raise NotImplementedError()


class CairoSurface(Surface):

    """Surface backed by a cairo context.

    Shapes are stroked as they are drawn, never filled. Stroke color and
    opacity are tracked here and combined into a single RGBA source,
    since cairo has no separate notion of stroke opacity.
    """

    def __init__(self, cr, background=(0, 0, 0)):
        self.cr = cr
        self.background = background
        self.color = (1.0, 1.0, 1.0)
        self.alpha = 1.0

    def _update_source(self):
        self.cr.set_source_rgba(*self.color, self.alpha)

    def clear_frame(self):
        self.cr.identity_matrix()
        with Save(self.cr):
            self.cr.set_source_rgb(*self.background)
            self.cr.paint()

    def set_origin(self, x, y):
        self.cr.translate(x, y)

    def set_stroke_opacity(self, alpha):
        self.alpha = min(max(alpha, 0.0), 1.0)
        self._update_source()

    def set_stroke_width(self, width):
        self.cr.set_line_width(width)

    def set_stroke_color(self, rgb):
        self.color = tuple(rgb)
        self._update_source()

    def draw_circle(self, x, y, diameter):
        self.cr.new_sub_path()
        self.cr.arc(x, y, diameter * 0.5, 0, 2 * math.pi)
        self.cr.stroke()

    def draw_line(self, x1, y1, x2, y2):
        self.cr.move_to(x1, y1)
        self.cr.line_to(x2, y2)
        self.cr.stroke()

    def save(self):
        return _SaveStroke(self)

    def rotate(self, radians):
        self.cr.rotate(radians)

    def export_frame(self, filename, fmt="png"):
        """Write the current frame to `filename`.

        Only image surfaces can be exported as PNG; vector surfaces are
        written by whoever created them.
        """
        if fmt != "png":
            raise ExportFailure("Unsupported export format: %s" % fmt)

        target = self.cr.get_target()
        if not isinstance(target, cairo.ImageSurface):
            raise ExportFailure("Only image surfaces can be exported")

        try:
            target.flush()
            target.write_to_png(filename)
        except (cairo.Error, OSError) as e:
            raise ExportFailure("Could not write %s: %s" % (filename, e))
        logger.info("exported %s", os.path.abspath(filename))
        return filename


class _SaveStroke(Save):

    """Save, which also restores the tracked stroke color and opacity."""

    def __init__(self, surface):
        Save.__init__(self, surface.cr)
        self.surface = surface

    def __enter__(self):
        Save.__enter__(self)
        self.saved = (self.surface.color, self.surface.alpha)

    def __exit__(self, *exc):
        Save.__exit__(self, *exc)
        self.surface.color, self.surface.alpha = self.saved
