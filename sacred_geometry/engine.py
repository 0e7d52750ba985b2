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


"""Engine: the parameter set, scene and clock, driven one frame at a time.

The engine is the single context object handed to the frame handler.
One call to `frame()` is one tick of the animation clock followed by
one render, and nothing else mutates the scene.
"""

import datetime
import logging
import os

from .clock import AnimationClock
from .errors import ExportFailure
from .params import ParameterSet
from .scene import Scene
from .surface import export_filename


logger = logging.getLogger(__name__)


class Engine(object):

    def __init__(self, params=None, now=None):
        self.params = params if params is not None else ParameterSet()
        self.scene = Scene(self.params)
        self.clock = AnimationClock()
        self.clock.sync(self.params, now)
        self.frames = 0
        self.skipped = 0

    def changed(self, now=None):
        """Re-derive every element after a parameter change."""
        self.scene.resize(self.params)
        self.clock.sync(self.params, now)

    def set(self, name, value, now=None):
        value = self.params.set(name, value)
        self.changed(now)
        return value

    def update(self, mapping, now=None):
        names = self.params.update(mapping)
        self.changed(now)
        return names

    def set_animate(self, flag, now=None):
        return self.set("animate", flag, now)

    def set_tier(self, tier):
        self.params.set_tier(tier)
        self.scene.resize(self.params)

    def randomize(self, rng=None):
        self.params.randomize(rng)
        self.changed()

    def reload_preset(self, path, now=None):
        names = self.params.load_preset(path)
        self.changed(now)
        return names

    def advance(self, now=None):
        return self.clock.tick(self.scene, self.params, now)

    def render(self, surface, width, height):
        self.scene.render_frame(surface, self.params, width, height)

    def frame(self, surface, width, height, now=None):
        """Advance and render one frame.

        A frame that raises is logged and skipped; the caller's loop keeps
        running.
        """
        try:
            report = self.advance(now)
            self.render(surface, width, height)
        except Exception:
            self.skipped += 1
            logger.exception("skipping frame %d", self.frames)
            return None
        finally:
            self.frames += 1
        return report

    def export(self, surface, directory=".", now=None):
        now = now or datetime.datetime.now()
        path = os.path.join(directory, export_filename(now))
        try:
            return surface.export_frame(path, "png")
        except ExportFailure:
            logger.error("export to %s failed", path)
            raise
