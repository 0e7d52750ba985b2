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


"""Offline rendering of sacred geometry frames.

Renders frames to a file as determined by the given options, with
simulated time, so an animation renders identically on every run.

The following modes of operation are supported:
- oneshot    -- advance the requested number of frames, write the last.
- sequence   -- write each frame as a separate file in the given directory
                (png and svg only).
- slideshow  -- write each frame as a separate page in the given file
                (ps and pdf only).
"""

import argparse
import logging
import os
import random
import sys

import cairo

from .engine import Engine
from .errors import SacredGeometryError
from .params import ParameterSet, tier_for_width
from .surface import CairoSurface


logger = logging.getLogger(__name__)


class UserError(Exception):
    pass


class SurfaceWrapper:
    """Abstract the different output formats cairo supports.

    There are some wierd asymmetries in the cairo API. This family of
    classes attempts to smooth this over.

    In particular, there's no obvious way to create a "blank" PNG
    surface for painting. Rather, one creates an ImageSurface and writes
    it as a .png file.
    """

    @classmethod
    def from_args(self, args):
        fmt = args.format
        if   fmt == "png": return PngSurfaceWrapper(args)
        elif fmt == "ps":  return PsSurfaceWrapper(args)
        elif fmt == "pdf": return PdfSurfaceWrapper(args)
        elif fmt == "svg": return SvgSurfaceWrapper(args)
        raise UserError("Unknown format: %s" % fmt)

    def __init__(self, args):
        self.width, self.height = args.size
        self.frame_ms = 1000.0 / args.fps
        self.frames = args.frames
        self.output = args.output
        self.surface = None
        self.cr = None

    def open(self, path):
        """Create the cairo surface writing to `path`."""
        raise NotImplementedError

    def step(self, engine, index):
        return engine.frame(
            CairoSurface(self.cr), self.width, self.height,
            now=index * self.frame_ms)

    def oneshot(self, engine):
        self.open(self.output)
        try:
            for i in range(self.frames):
                engine.advance(i * self.frame_ms)
            engine.render(CairoSurface(self.cr), self.width, self.height)
        finally:
            self.write()

    def sequence(self, engine):
        if not os.path.isdir(self.output):
            os.makedirs(self.output)
        for i in range(self.frames):
            self.open(os.path.join(self.output, "%d.%s" % (i, self.extension)))
            try:
                self.step(engine, i)
            finally:
                self.write()

    def slideshow(self, engine):
        raise UserError("The %s format does not support slideshows." %
                        self.extension)

    def write(self):
        self.surface.finish()
        logger.info("wrote %s", self.path)


class PngSurfaceWrapper(SurfaceWrapper):

    extension = "png"

    def open(self, path):
        self.path = path
        self.surface = cairo.ImageSurface(
            cairo.Format.ARGB32, int(self.width), int(self.height))
        self.cr = cairo.Context(self.surface)

    def write(self):
        self.surface.write_to_png(self.path)
        self.surface.finish()
        logger.info("wrote %s", self.path)


class SvgSurfaceWrapper(SurfaceWrapper):

    extension = "svg"

    def open(self, path):
        self.path = path
        self.surface = cairo.SVGSurface(path, self.width, self.height)
        self.cr = cairo.Context(self.surface)


class PagedSurfaceWrapper(SurfaceWrapper):

    def sequence(self, engine):
        raise UserError("The %s format does not support sequences, "
                        "use slideshow." % self.extension)

    def slideshow(self, engine):
        self.open(self.output)
        try:
            for i in range(self.frames):
                self.step(engine, i)
                self.cr.show_page()
        finally:
            self.write()


class PdfSurfaceWrapper(PagedSurfaceWrapper):

    extension = "pdf"

    def open(self, path):
        self.path = path
        self.surface = cairo.PDFSurface(path, self.width, self.height)
        self.cr = cairo.Context(self.surface)


class PsSurfaceWrapper(PagedSurfaceWrapper):

    extension = "ps"

    def open(self, path):
        self.path = path
        self.surface = cairo.PSSurface(path, self.width, self.height)
        self.cr = cairo.Context(self.surface)


def make_parser():
    desc = "Render sacred geometry frames to image files."
    parser = argparse.ArgumentParser(description=desc)

    parser.add_argument(
        "-m", "--mode",
        help="Specifies output mode",
        metavar="MODE",
        choices=("oneshot", "sequence", "slideshow"),
        default="oneshot"
    )

    parser.add_argument(
        "-f", "--format",
        help="Output file format",
        metavar="FMT",
        choices=("png", "ps", "pdf", "svg"),
        default="png"
    )

    parser.add_argument(
        "-o", "--output",
        help="The output file path (a directory in sequence mode)",
        metavar="FILE",
        type=str,
        required=True
    )

    parser.add_argument(
        "-s", "--size",
        help="The width and height of the canvas in pixels",
        nargs=2,
        type=int,
        default=(1600, 900)
    )

    parser.add_argument(
        "-n", "--frames",
        help="Number of frames to simulate",
        type=int,
        default=1
    )

    parser.add_argument(
        "--fps",
        help="Simulated frame rate",
        type=float,
        default=60.0
    )

    parser.add_argument(
        "--animate",
        help="Enable the burst animation",
        action="store_true"
    )

    parser.add_argument(
        "--preset",
        help="JSON file of parameter values",
        metavar="FILE"
    )

    parser.add_argument(
        "-p", "--param",
        help="Specify the value of a parameter.",
        nargs=2,
        metavar=("NAME", "VALUE"),
        dest="params",
        action="append",
        default=[]
    )

    parser.add_argument(
        "--randomize",
        help="Randomize every bounded parameter before rendering",
        action="store_true"
    )

    parser.add_argument(
        "--seed",
        help="Seed for --randomize",
        type=int
    )

    parser.add_argument(
        "-v", "--verbose",
        help="Log spawns, retirements and clamped values",
        action="store_true"
    )

    return parser


def build_engine(args, environ=None):
    """Parameter precedence: tier defaults, environment, preset, -p."""
    params = ParameterSet(tier_for_width(args.size[0]))
    params.load_environment(environ)
    if args.preset:
        params.load_preset(args.preset)
    if args.randomize:
        params.randomize(random.Random(args.seed))
    for name, value in args.params:
        if name not in params:
            raise UserError("Unknown parameter: %s" % name)
        params.set(name, value)
    if args.animate:
        params.set("animate", True)
    return Engine(params, now=0)


def main(argv=None):
    args = make_parser().parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S')

    try:
        if args.frames < 1:
            raise UserError("--frames must be at least 1")
        if args.fps <= 0:
            raise UserError("--fps must be positive")
        engine = build_engine(args)
        wrapper = SurfaceWrapper.from_args(args)

        if   args.mode == "oneshot":   wrapper.oneshot(engine)
        elif args.mode == "sequence":  wrapper.sequence(engine)
        elif args.mode == "slideshow": wrapper.slideshow(engine)
    except (UserError, SacredGeometryError) as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
