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


"""Exception types raised by the geometry engine and its front-ends."""


class SacredGeometryError(Exception):
    pass


class InvalidParameter(SacredGeometryError, ValueError):

    """Raised when text cannot be interpreted as a parameter value.

    Out-of-range numbers never raise: the parameter set clamps them.
    """


class PresetError(SacredGeometryError):

    """A preset file is missing, unreadable, or not a JSON object."""


class ExportFailure(SacredGeometryError):

    """The drawing surface could not produce or save a raster."""
