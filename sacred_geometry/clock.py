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


"""Animation clock: spawns radial bursts and grows them each frame."""

import logging
import time

from .elements import CircleElement


logger = logging.getLogger(__name__)


def now_ms():
    return time.monotonic() * 1000.0


class TickReport(object):

    """What a single tick did to the scene."""

    def __init__(self, spawned=None, retired=()):
        self.spawned = spawned
        self.retired = list(retired)

    def __repr__(self):
        return "<TickReport spawned=%r retired=%d>" % (
            self.spawned, len(self.retired))


class ClockState(object):
    """ABC For the Animation Clock State Machine"""

    running = False

    def enable(self, now):
        raise NotImplementedError()

    def disable(self):
        raise NotImplementedError()

    def tick(self, scene, params, now):
        raise NotImplementedError()


class Idle(ClockState):

    def enable(self, now):
        return Running(now)

    def disable(self):
        return self

    def tick(self, scene, params, now):
        return TickReport()


class Running(ClockState):

    running = True

    def __init__(self, baseline):
        self.baseline = baseline

    def enable(self, now):
        return self

    def disable(self):
        # live bursts freeze at their current diameter
        return Idle()

    def tick(self, scene, params, now):
        spawned = None
        if now >= self.baseline + params.spawn_period_ms:
            spawned = CircleElement(params, diameter=0)
            scene.add(spawned)
            self.baseline = now
            logger.debug("spawned %r", spawned)

        # grow everything before retiring anything, so that removing a
        # burst never skips the one after it.
        circles = list(scene.circles)
        for circle in circles:
            circle.expand(params.animation_speed)

        limit = params.max_diameter
        retired = []
        if limit > 0:
            # a burst is never retired in the tick that spawned it
            retired = [c for c in circles
                       if c.diameter >= limit and c is not spawned]
        if retired:
            scene.retire(retired)
            logger.debug("retired %d burst(s)", len(retired))
        return TickReport(spawned, retired)


class AnimationClock(object):

    """Drives the spawn/grow/retire cycle of the radial bursts.

    Time is passed in as milliseconds, so the same clock runs off the
    display's frame clock interactively and off simulated time when
    rendering offline.
    """

    def __init__(self):
        self.state = Idle()

    @property
    def running(self):
        return self.state.running

    @property
    def baseline(self):
        return getattr(self.state, "baseline", None)

    def enable(self, now=None):
        self.state = self.state.enable(now_ms() if now is None else now)

    def disable(self):
        self.state = self.state.disable()

    def sync(self, params, now=None):
        if params.animate:
            self.enable(now)
        else:
            self.disable()

    def tick(self, scene, params, now=None):
        return self.state.tick(scene, params, now_ms() if now is None else now)
