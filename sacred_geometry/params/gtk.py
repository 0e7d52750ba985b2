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


"""Gtk widgets for the parameters of a ParameterSet."""

import gi
gi.require_version("Gtk", "3.0")
from gi.repository import Gtk

from . import NumericParameter, ToggleParameter


LABELS = {
    "axis_count": "Axis",
    "burst_radius": "Radius",
    "circle_diameter": "Circle diameter",
    "line_length": "Line length",
    "line_outer_step": "Line step",
    "line_inner_step": "Line gap",
    "stroke_width": "Stroke weight",
    "animation_speed": "Speed",
    "spawn_frequency": "Frequency",
    "animate": "Animate",
}

ANIMATION_CONTROLS = ("animation_speed", "spawn_frequency")


class NumericWidget(object):

    """A scale and spin button sharing one Gtk.Adjustment."""

    def __init__(self, name, param, value, on_change):
        self.name = name
        self.adjustment = Gtk.Adjustment(
            value,
            param.lower,
            param.upper,
            param.step)
        self.adjustment.connect(
            "value-changed",
            lambda adj: on_change(self.name, self.getValue()))
        self.digits = 0 if param.integer else 2
        self.integer = param.integer

    def makeWidget(self, entry_group):
        scale = Gtk.Scale.new(
            Gtk.Orientation.HORIZONTAL,
            self.adjustment)
        scale.set_draw_value(False)
        scale.set_digits(self.digits)
        entry = Gtk.SpinButton.new(self.adjustment, self.adjustment.get_step_increment(), self.digits)
        entry_group.add_widget(entry)

        ret = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL)
        ret.pack_start(entry, False, False, 12)
        ret.pack_start(scale, True, True, 12)
        ret.show()
        return ret

    def getValue(self):
        value = self.adjustment.get_value()
        return int(round(value)) if self.integer else value

    def setValue(self, value):
        self.adjustment.set_value(value)


class ToggleWidget(object):

    """A check button bound to a boolean parameter."""

    def __init__(self, name, value, on_change):
        self.name = name
        self.widget = Gtk.CheckButton()
        self.widget.set_active(value)
        self.widget.connect(
            "toggled",
            lambda button: on_change(self.name, button.get_active()))

    def makeWidget(self, entry_group):
        return self.widget

    def getValue(self):
        return self.widget.get_active()

    def setValue(self, value):
        self.widget.set_active(value)


class ParameterPanel(object):

    """Builds the controls for a ParameterSet inside a container.

    `on_change(name, value)` is called whenever the user moves a control;
    `on_randomize` and `on_export` back the two buttons. The panel is
    rebuilt from scratch when the ranges change (a new display tier).
    """

    def __init__(self, params, on_change, on_randomize, on_export):
        self.params = params
        self.on_change = on_change
        self.on_randomize = on_randomize
        self.on_export = on_export
        self.widgets = {}
        self.rows = {}
        self.updating = False

    def changed(self, name, value):
        if not self.updating:
            self.on_change(name, value)
        if name == "animate":
            self.showAnimationControls(value)

    def makeWidgets(self, container):
        """Create a widget for each parameter, adding them into `container`.

        All of the widgets are added to a child container. If
        container already contains widgets, they are destroyed first.
        """
        listbox = Gtk.ListBox()
        listbox.set_selection_mode(Gtk.SelectionMode.NONE)

        size_group = Gtk.SizeGroup(mode=Gtk.SizeGroupMode.HORIZONTAL)
        entry_group = Gtk.SizeGroup(mode=Gtk.SizeGroupMode.HORIZONTAL)

        self.widgets = {}
        self.rows = {}
        for name, param in self.params.params.items():
            if isinstance(param, NumericParameter):
                control = NumericWidget(name, param, self.params[name], self.changed)
            elif isinstance(param, ToggleParameter):
                control = ToggleWidget(name, self.params[name], self.changed)
            else:
                # colors are configured through presets only
                continue

            row = Gtk.ListBoxRow()
            box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
            label = Gtk.Label.new("<b><tt>%s</tt></b>" % LABELS.get(name, name))
            widget = control.makeWidget(entry_group)

            box.show()
            box.set_border_width(5)
            row.add(box)

            label.show()
            label.set_use_markup(True)
            label.set_justify(Gtk.Justification.LEFT)
            box.pack_start(label, False, True, 12)

            size_group.add_widget(label)
            box.pack_end(widget, True, True, 12)
            listbox.add(row)
            self.widgets[name] = control
            self.rows[name] = row

        buttons = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        randomize = Gtk.Button.new_with_label("Randomize")
        randomize.connect("clicked", lambda *unused: self.on_randomize())
        export = Gtk.Button.new_with_label("Export")
        export.connect("clicked", lambda *unused: self.on_export())
        buttons.pack_start(randomize, True, True, 12)
        buttons.pack_start(export, True, True, 12)
        row = Gtk.ListBoxRow()
        row.add(buttons)
        listbox.add(row)

        for child in container.get_children():
            child.destroy()

        container.add(listbox)
        container.show_all()
        self.listbox = listbox
        self.showAnimationControls(self.params.animate)

    def showAnimationControls(self, visible):
        for name in ANIMATION_CONTROLS:
            if name in self.rows:
                self.rows[name].set_visible(visible)

    def refresh(self):
        """Push the current parameter values into the widgets."""
        self.updating = True
        try:
            for name, control in self.widgets.items():
                control.setValue(self.params[name])
        finally:
            self.updating = False
