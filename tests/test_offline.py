import os

import pytest

from sacred_geometry import offline


def run(*argv):
    return offline.main(list(argv))


def test_oneshot_png(tmp_path):
    path = str(tmp_path / "frame.png")
    assert run("-o", path, "-s", "320", "240") == 0
    with open(path, "rb") as f:
        assert f.read(4) == b"\x89PNG"


def test_sequence_png(tmp_path):
    out = str(tmp_path / "frames")
    assert run("-m", "sequence", "-o", out, "-s", "160", "120",
               "-n", "3", "--animate") == 0
    assert sorted(os.listdir(out)) == ["0.png", "1.png", "2.png"]


def test_sequence_svg(tmp_path):
    out = str(tmp_path / "frames")
    assert run("-m", "sequence", "-f", "svg", "-o", out,
               "-s", "160", "120", "-n", "2") == 0
    assert sorted(os.listdir(out)) == ["0.svg", "1.svg"]


def test_slideshow_pdf(tmp_path):
    path = str(tmp_path / "frames.pdf")
    assert run("-m", "slideshow", "-f", "pdf", "-o", path,
               "-s", "160", "120", "-n", "2") == 0
    assert os.path.getsize(path) > 0


def test_slideshow_png_is_a_user_error(tmp_path, capsys):
    path = str(tmp_path / "frames.png")
    assert run("-m", "slideshow", "-o", path, "-s", "160", "120") == 1
    assert "slideshow" in capsys.readouterr().err


def test_unknown_param_is_a_user_error(tmp_path, capsys):
    path = str(tmp_path / "frame.png")
    assert run("-o", path, "-s", "160", "120", "-p", "bogus", "1") == 1
    assert "bogus" in capsys.readouterr().err


def test_bad_preset_is_a_user_error(tmp_path):
    path = str(tmp_path / "frame.png")
    assert run("-o", path, "-s", "160", "120",
               "--preset", str(tmp_path / "missing.json")) == 1


def test_build_engine_precedence(tmp_path):
    preset = tmp_path / "preset.json"
    preset.write_text('{"axis_count": 12, "burst_radius": 150}')
    args = offline.make_parser().parse_args([
        "-o", "out.png", "-s", "800", "600", "--preset", str(preset),
        "-p", "axis_count", "8", "--animate"])
    engine = offline.build_engine(args, environ={"axis_count": "3", "line_length": "90"})

    params = engine.params
    assert params.tier.name == "compact"
    assert params.axis_count == 8
    assert params.burst_radius == 150
    assert params.line_length == 90
    assert params.animate is True
    assert engine.clock.running
    assert engine.scene.circles[0].diameter == 0


def test_randomize_with_seed_is_repeatable():
    argv = ["-o", "out.png", "--randomize", "--seed", "42"]
    first = offline.build_engine(offline.make_parser().parse_args(argv), environ={})
    second = offline.build_engine(offline.make_parser().parse_args(argv), environ={})
    assert first.params.snapshot() == second.params.snapshot()


@pytest.mark.parametrize("argv", [["-n", "0"], ["--fps", "0"]])
def test_bad_timing_options(tmp_path, argv):
    assert run("-o", str(tmp_path / "frame.png"), *argv) == 1


def test_bad_color_preset_still_renders(tmp_path):
    preset = tmp_path / "preset.json"
    preset.write_text('{"stroke_color": 5}')
    path = str(tmp_path / "frame.png")
    assert run("-o", path, "-s", "160", "120", "--preset", str(preset)) == 0
    assert os.path.getsize(path) > 0
