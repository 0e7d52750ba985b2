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


"""Parameters driving the geometry, and the display tier table.

Every slider-backed value lives in a `ParameterSet`. Values are always
clamped into the declared range of their parameter, so the generators
never see an axis count below one or a zero step size. Widgets for these
parameters live in `params.gtk`; this module has no toolkit dependency
and is what the offline renderer and the tests use.
"""

from collections import OrderedDict
import json
import logging
import math
import os
import random

from ..errors import InvalidParameter, PresetError


logger = logging.getLogger(__name__)


class Parameter(object):

    """A uniform interface for the values held by a ParameterSet."""

    def require(self, value, allowed_types):
        """Raise an error if `value` is not one of `allowed_types`.

        `allowed_types` may be a tuple or a single type.
        """

        if not isinstance(value, allowed_types):
            raise TypeError("Expected one of %s, got %r." % (
                ", ".join(repr(t) for t in allowed_types),
                value
            ))

    def parse(self, text):
        raise NotImplementedError

    def clamp(self, value):
        """Return `(stored_value, clamped)` for an incoming value."""
        return value, False


class NumericParameter(Parameter):

    """A scalar numeric value, with a finite range.

    The parameter is integer-valued when its default is an int, like a
    browser range input.
    """

    def __init__(self, lower, upper, step=1, default=0):
        allowed = (int, float)
        self.require(lower, allowed)
        self.require(upper, allowed)
        self.require(step, allowed)
        self.require(default, allowed)
        if not lower <= default <= upper:
            raise ValueError(
                "default {} not in range [{}, {}]".format(default, lower, upper))
        if step <= 0:
            raise ValueError("step must be positive, got {}".format(step))
        self.lower = lower
        self.upper = upper
        self.step = step
        self.default = default
        self.integer = isinstance(default, int)

    def __repr__(self):
        return "Numeric(%g, %g, %g, %g)" % (
            self.lower, self.upper, self.step, self.default)

    def parse(self, text):
        try:
            value = float(text)
        except (TypeError, ValueError):
            raise InvalidParameter("Could not parse {!r} as a number".format(text))
        if math.isnan(value):
            raise InvalidParameter("NaN is not a valid parameter value")
        return value

    def clamp(self, value):
        if isinstance(value, str):
            value = self.parse(value)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidParameter("Expected a number, got {!r}".format(value))
        if math.isnan(value):
            return self.default, True

        stored = min(max(value, self.lower), self.upper)
        if self.integer:
            stored = int(round(stored))
        return stored, stored != value

    def random(self, rng):
        """Uniform value in [lower, upper], inclusive."""
        if self.integer:
            return rng.randint(int(self.lower), int(self.upper))
        steps = int((self.upper - self.lower) // self.step)
        return min(self.lower + rng.randint(0, steps) * self.step, self.upper)


class ToggleParameter(Parameter):

    """A parameter representing a binary choice."""

    truthy = ("true", "1", "yes", "on")
    falsy = ("false", "0", "no", "off")

    def __init__(self, default):
        self.require(default, bool)
        self.default = default

    def parse(self, text):
        if text.lower() in self.truthy:
            return True
        elif text.lower() in self.falsy:
            return False

        raise InvalidParameter("Could not parse {} as bool".format(text))

    def clamp(self, value):
        if isinstance(value, str):
            value = self.parse(value)
        return bool(value), False


class ColorParameter(Parameter):

    """An RGB stroke color, components in [0, 1]."""

    def __init__(self, r=0, g=0, b=0):
        self.require(r, (int, float))
        self.require(g, (int, float))
        self.require(b, (int, float))
        self.default = (r, g, b)

    def parse(self, text):
        text = text.lstrip("#")
        if not len(text) == 6:
            raise InvalidParameter("Could not parse as color: " + text)

        try:
            return tuple(int(text[i:i + 2], 16) / 0xFF for i in (0, 2, 4))
        except ValueError:
            raise InvalidParameter("Could not parse as color: " + text)

    def clamp(self, value):
        if isinstance(value, str):
            value = self.parse(value)
        try:
            if len(value) != 3:
                raise InvalidParameter(
                    "Expected an (r, g, b) triple, got {!r}".format(value))
            stored = tuple(min(max(float(c), 0.0), 1.0) for c in value)
        except (TypeError, ValueError) as e:
            raise InvalidParameter(
                "Could not use {!r} as a color: {}".format(value, e))
        return stored, stored != tuple(value)


class DisplayTier(object):

    """One row of the display tier table.

    A tier overrides the range and default of a few size-dependent
    parameters, supplies the overshoot margin added to the diameter
    ceiling to get the fade-out diameter, and decides how much of the
    window the canvas takes.
    """

    def __init__(self, name, max_width, overshoot, overrides,
                 height_scale=1.0, height_margin=0):
        self.name = name
        self.max_width = max_width
        self.overshoot = overshoot
        self.overrides = overrides
        self.height_scale = height_scale
        self.height_margin = height_margin

    def __repr__(self):
        return "<DisplayTier %s>" % self.name

    def matches(self, width):
        return self.max_width is None or width <= self.max_width

    def canvas_size(self, width, height):
        return width, max(0, height * self.height_scale - self.height_margin)


COMPACT = DisplayTier(
    "compact",
    max_width=1280,
    overshoot=150,
    overrides={
        "burst_radius":    NumericParameter(0, 200, 1, 100),
        "circle_diameter": NumericParameter(0, 300, 1, 100),
        "line_length":     NumericParameter(0, 200, 1, 130),
    },
    height_scale=0.5)

WIDE = DisplayTier(
    "wide",
    max_width=None,
    overshoot=250,
    overrides={
        "burst_radius":    NumericParameter(0, 500, 1, 200),
        "circle_diameter": NumericParameter(0, 500, 1, 100),
        "line_length":     NumericParameter(0, 500, 1, 400),
    },
    height_margin=100)

TIERS = (COMPACT, WIDE)


def tier_for_width(width):
    for tier in TIERS:
        if tier.matches(width):
            return tier
    return TIERS[-1]


def default_parameters():
    return OrderedDict((
        ("axis_count",      NumericParameter(1, 24, 1, 6)),
        ("burst_radius",    NumericParameter(0, 500, 1, 200)),
        ("circle_diameter", NumericParameter(0, 500, 1, 100)),
        ("line_length",     NumericParameter(0, 500, 1, 400)),
        ("line_outer_step", NumericParameter(1, 360, 1, 30)),
        ("line_inner_step", NumericParameter(1, 180, 1, 30)),
        ("stroke_width",    NumericParameter(1, 10, 1, 2)),
        ("animation_speed", NumericParameter(0, 10, 1, 1)),
        ("spawn_frequency", NumericParameter(1, 10, 1, 5)),
        ("animate",         ToggleParameter(False)),
        ("stroke_color",    ColorParameter(1.0, 1.0, 1.0)),
    ))


class ParameterSet(object):

    """The current configuration of the generator.

    Values are read with `params.axis_count` or `params["axis_count"]`
    and written with `set()`, which clamps instead of failing. Derived
    quantities (`spawn_period_ms`, `max_diameter`) are computed on access,
    so they always reflect the current tier and ranges.
    """

    def __init__(self, tier=WIDE, **values):
        self.params = default_parameters()
        self.values = {}
        self.tier = None
        self.set_tier(tier, reset=True)
        self.update(values)

    def __getattr__(self, name):
        # only called for names missing from the instance dict
        values = self.__dict__.get("values")
        if values is not None and name in values:
            return values[name]
        raise AttributeError(name)

    def __getitem__(self, name):
        return self.values[name]

    def __contains__(self, name):
        return name in self.params

    def __repr__(self):
        return "<ParameterSet %s %r>" % (self.tier.name, self.values)

    def get(self, name):
        return self.values[name]

    def parameter(self, name):
        return self.params[name]

    def bounded(self):
        """The (name, NumericParameter) pairs, in definition order."""
        return [(name, param) for name, param in self.params.items()
                if isinstance(param, NumericParameter)]

    def set(self, name, value):
        """Store `value` for `name`, clamped to the declared range.

        Returns the value actually stored. Text is parsed first; text that
        cannot be parsed leaves the current value in place.
        """
        param = self.params[name]
        try:
            stored, clamped = param.clamp(value)
        except InvalidParameter as e:
            logger.warning("%s: %s, keeping %r", name, e, self.values.get(name))
            return self.values.get(name, param.default)

        if clamped:
            logger.warning("%s: %r not allowed, clamped to %r",
                           name, value, stored)
        self.values[name] = stored
        return stored

    def update(self, mapping):
        """Set every entry of `mapping`; returns the names that changed."""
        changed = []
        for name, value in mapping.items():
            if name not in self.params:
                logger.warning("ignoring unknown parameter %r", name)
                continue
            before = self.values.get(name)
            if self.set(name, value) != before:
                changed.append(name)
        return changed

    def set_tier(self, tier, reset=False):
        """Switch the range table to `tier`.

        Current values are clamped into the new ranges. With `reset`, every
        value falls back to its (tier-specific) default.
        """
        self.tier = tier
        self.params.update(tier.overrides)
        for name, param in self.params.items():
            if reset or name not in self.values:
                self.values[name] = param.default
            else:
                self.set(name, self.values[name])
        logger.debug("display tier %s, max diameter %g",
                     tier.name, self.max_diameter)

    def apply_tier_defaults(self):
        for name, param in self.tier.overrides.items():
            self.values[name] = param.default

    def randomize(self, rng=None):
        """Give every bounded control a uniform value within its range."""
        rng = rng or random
        for name, param in self.bounded():
            self.values[name] = param.random(rng)

    def load_environment(self, environ=None):
        """Take values from the environment, by parameter name."""
        environ = os.environ if environ is None else environ
        changed = []
        for name, param in self.params.items():
            if name not in environ:
                continue
            try:
                value = param.parse(environ[name])
            except InvalidParameter as e:
                logger.warning("environment %s: %s", name, e)
                continue
            self.set(name, value)
            changed.append(name)
        return changed

    def load_preset(self, path):
        """Apply a JSON preset of `{"name": value}` pairs."""
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise PresetError("Could not load preset {}: {}".format(path, e))

        if not isinstance(data, dict):
            raise PresetError("Preset {} is not a JSON object".format(path))

        logger.info("loaded preset %s", path)
        return self.update(data)

    def snapshot(self):
        ret = dict(self.values)
        ret["spawn_period_ms"] = self.spawn_period_ms
        ret["max_diameter"] = self.max_diameter
        ret["tier"] = self.tier.name
        return ret

    @property
    def spawn_period_ms(self):
        """Time between spawns; a higher frequency slider spawns sooner."""
        upper = self.params["spawn_frequency"].upper
        return int((upper + 1 - self.values["spawn_frequency"]) * 1000)

    @property
    def max_diameter(self):
        """Diameter at which an animated burst has faded out entirely."""
        return self.params["circle_diameter"].upper + self.tier.overshoot
