import datetime
import logging

import pytest

from conftest import RecordingSurface
from sacred_geometry.engine import Engine
from sacred_geometry.errors import ExportFailure
from sacred_geometry.params import COMPACT, ParameterSet, WIDE


class BrokenSurface(RecordingSurface):

    def draw_circle(self, x, y, diameter):
        raise RuntimeError("no canvas")


class UnwritableSurface(RecordingSurface):

    def export_frame(self, filename, fmt="png"):
        raise ExportFailure("disk full")


class HighestRandom(object):

    def randint(self, lower, upper):
        return upper


def test_frame_advances_then_renders(small_params, surface):
    small_params.update({"animate": True, "animation_speed": 5})
    engine = Engine(small_params, now=0)
    report = engine.frame(surface, 200, 200, now=16)
    assert report.spawned is None
    assert engine.scene.circles[0].diameter == 5
    assert all(op[3] == 5 for op in surface.circles)
    assert engine.frames == 1


def test_bad_frame_is_skipped(params, caplog):
    engine = Engine(params, now=0)
    with caplog.at_level(logging.ERROR):
        assert engine.frame(BrokenSurface(), 100, 100, now=0) is None
    assert engine.skipped == 1
    assert "skipping frame" in caplog.text

    surface = RecordingSurface()
    engine.frame(surface, 100, 100, now=16)
    assert len(surface.circles) == params.axis_count + 1
    assert engine.frames == 2


def test_set_rederives_scene(params):
    engine = Engine(params, now=0)
    assert engine.set("axis_count", 40) == 24
    assert engine.scene.circles[0].axis == 24
    engine.set("line_inner_step", 10)
    assert engine.scene.wave.inner_step == 10


def test_set_animate_drives_clock(params):
    engine = Engine(params, now=0)
    assert not engine.clock.running
    engine.set_animate(True, now=500)
    assert engine.clock.running
    assert engine.clock.baseline == 500
    engine.set_animate(False)
    assert not engine.clock.running


def test_randomize_changes_render(params):
    engine = Engine(params, now=0)
    before = RecordingSurface()
    engine.render(before, 100, 100)

    engine.randomize(HighestRandom())
    assert params.axis_count == 24
    assert params.line_outer_step == 360
    assert engine.scene.circles[0].axis == 24
    assert engine.scene.circles[0].diameter == 500

    after = RecordingSurface()
    engine.render(after, 100, 100)
    assert len(after.circles) == 25
    assert len(after.lines) == 1
    assert before.ops != after.ops


def test_update_and_tier(params):
    engine = Engine(params, now=0)
    engine.update({"burst_radius": 480})
    engine.set_tier(COMPACT)
    assert engine.scene.circles[0].radius == 200
    engine.set_tier(WIDE)
    assert params.max_diameter == 750


def test_reload_preset(params, tmp_path):
    path = tmp_path / "preset.json"
    path.write_text('{"axis_count": 3}')
    engine = Engine(params, now=0)
    assert engine.reload_preset(str(path)) == ["axis_count"]
    assert engine.scene.circles[0].axis == 3


def test_export_name(params, surface, tmp_path):
    engine = Engine(params, now=0)
    now = datetime.datetime(2024, 3, 9, 14, 5, 7)
    path = engine.export(surface, str(tmp_path), now=now)
    assert path == str(tmp_path / "Export09032024140507.png")
    assert surface.ops[-1] == ("export", path, "png")


def test_export_failure_propagates(params):
    engine = Engine(params, now=0)
    with pytest.raises(ExportFailure):
        engine.export(UnwritableSurface())
    # rendering is unaffected
    surface = RecordingSurface()
    engine.frame(surface, 100, 100, now=0)
    assert surface.circles
