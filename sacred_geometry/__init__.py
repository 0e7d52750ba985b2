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


"""Procedural sacred geometry: radial circle bursts and mirrored waves."""

from .clock import AnimationClock
from .elements import CircleElement, LineElement
from .engine import Engine
from .errors import (
    ExportFailure, InvalidParameter, PresetError, SacredGeometryError)
from .params import COMPACT, WIDE, ParameterSet, tier_for_width
from .scene import Scene
from .surface import CairoSurface, Surface, export_filename

__version__ = "0.1.0"
