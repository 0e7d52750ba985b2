#!/usr/bin/python3
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


"""
Interactive sacred geometry generator.

Radial circle bursts and a wave of mirrored chords, adjustable live from
a panel of sliders, optionally animated as expanding, fading bursts.
"""

import argparse
import logging
import os
import sys

import cairo
import gi
gi.require_version("Gtk", "3.0")
gi.require_version("Gdk", "3.0")
gi.require_foreign("cairo")
from gi.repository import GLib
from gi.repository import Gtk
from gi.repository import Gdk

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler

from .clock import now_ms
from .engine import Engine
from .errors import ExportFailure, PresetError
from .params import ParameterSet, tier_for_width
from .params.gtk import ParameterPanel
from .surface import CairoSurface


logger = logging.getLogger(__name__)


class FileWatcher(object):

    """Fire a callback when the specified file changes."""

    def __init__(self):
        self.callbacks = {}
        self.ev_handler = FileSystemEventHandler()
        self.ev_handler.on_modified = self.modified
        self.observer = Observer()
        self.observer.daemon = True

    def start(self):
        self.observer.start()

    def watchFile(self, path, callback):
        # unlike inotify, `watchdog` cannot watch a single file for
        # changes directly. instead we must watch the parent directory
        # for all events, and filter out the ones we don't care about.
        path = os.path.abspath(path)
        parent = os.path.split(path)[0]
        self.observer.schedule(self.ev_handler, parent, recursive=False)
        self.callbacks[path] = callback

    def modified(self, event):
        path = os.path.abspath(event.src_path)
        if path in self.callbacks:
            self.callbacks[path]()


class GUI(object):

    """Gtk window showing the scene next to its parameter panel."""

    panel_width = 420

    def __init__(self, engine, preset=None, export_dir="."):
        self.engine = engine
        self.preset = preset
        self.export_dir = export_dir
        self.fw = FileWatcher()
        if preset is not None:
            self.fw.watchFile(preset, self.onFileChanged)

        self.da = Gtk.DrawingArea()
        self.da.connect('draw', self.draw)
        self.da.add_tick_callback(self.update)

        self.parameters = Gtk.ScrolledWindow()
        self.panel = ParameterPanel(
            engine.params, self.onParamChanged, self.onRandomize, self.onExport)

        pane = Gtk.Paned(orientation=Gtk.Orientation.HORIZONTAL)
        pane.pack1(self.da, True, False)
        pane.pack2(self.parameters, False, True)

        self.window = Gtk.Window()
        self.window.set_title("Sacred Geometry")
        self.window.connect("destroy", Gtk.main_quit)
        self.window.connect("configure-event", self.onConfigure)
        self.window.add(pane)

        width, height = self.getScreenSize()
        canvas_width, canvas_height = engine.params.tier.canvas_size(width, height)
        self.window.resize(int(canvas_width) + self.panel_width, int(canvas_height))
        pane.set_position(int(canvas_width))

        self.panel.makeWidgets(self.parameters)
        self.window.show_all()

    def getScreenSize(self):
        display = Gdk.Display.get_default()
        monitor = display.get_primary_monitor() if display else None
        if monitor is None:
            return 1024, 768
        geom = monitor.get_geometry()
        return geom.width, geom.height

    def run(self):
        self.fw.start()
        Gtk.main()

    def onConfigure(self, window, event):
        tier = tier_for_width(event.width)
        if tier is not self.engine.params.tier:
            logger.info("switching to %s display tier", tier.name)
            self.engine.set_tier(tier)
            self.panel.makeWidgets(self.parameters)
        return False

    def onParamChanged(self, name, value):
        self.engine.set(name, value)

    def onRandomize(self):
        self.engine.randomize()
        self.panel.refresh()

    def onExport(self):
        alloc = self.da.get_allocation()
        surface = cairo.ImageSurface(cairo.Format.ARGB32, alloc.width, alloc.height)
        target = CairoSurface(cairo.Context(surface))
        self.engine.render(target, alloc.width, alloc.height)
        try:
            self.engine.export(target, self.export_dir)
        except ExportFailure as e:
            self.notify("Export failed", str(e))

    def notify(self, title, message):
        dialog = Gtk.MessageDialog(
            transient_for=self.window,
            message_type=Gtk.MessageType.ERROR,
            buttons=Gtk.ButtonsType.CLOSE,
            text=title)
        dialog.format_secondary_text(message)
        dialog.connect("response", lambda d, unused: d.destroy())
        dialog.show()

    def onFileChanged(self):
        GLib.idle_add(self.reload)

    def reload(self, *unused):
        logger.info("reloading: %s", self.preset)
        try:
            self.engine.reload_preset(self.preset)
        except PresetError as e:
            logger.warning("%s", e)
        self.panel.refresh()
        return False

    def update(self, widget, frame_clock):
        try:
            self.engine.advance(now_ms())
        except Exception:
            logger.exception("animation tick failed")
        widget.queue_draw()
        return GLib.SOURCE_CONTINUE

    def draw(self, widget, cr):
        alloc = widget.get_allocation()
        try:
            self.engine.render(CairoSurface(cr), alloc.width, alloc.height)
        except Exception:
            logger.exception("skipping frame")
        return True


def main(argv=None):
    desc = "Interactive sacred geometry generator."
    parser = argparse.ArgumentParser(description=desc)
    parser.add_argument(
        "--preset",
        help="JSON file of parameter values, reloaded when it changes",
        metavar="FILE")
    parser.add_argument(
        "--animate",
        help="Start with the burst animation enabled",
        action="store_true")
    parser.add_argument(
        "--export-dir",
        help="Directory exported frames are written to",
        default=".")
    parser.add_argument(
        "-v", "--verbose",
        help="Log spawns, retirements and clamped values",
        action="store_true")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S')

    display = Gdk.Display.get_default()
    monitor = display.get_primary_monitor() if display else None
    width = monitor.get_geometry().width if monitor else 1024

    params = ParameterSet(tier_for_width(width))
    params.load_environment()
    if args.preset:
        try:
            params.load_preset(args.preset)
        except PresetError as e:
            logger.warning("%s", e)
    if args.animate:
        params.set("animate", True)

    engine = Engine(params)
    GUI(engine, args.preset, args.export_dir).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
