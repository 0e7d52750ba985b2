from sacred_geometry.elements import CircleElement
from sacred_geometry.scene import Scene


def test_initial_scene_static(params):
    scene = Scene(params)
    assert len(scene) == 1
    assert scene.circles[0].diameter == 100
    assert scene.wave.length == params.line_length


def test_initial_scene_animated(params):
    params.set("animate", True)
    scene = Scene(params)
    assert scene.circles[0].diameter == 0


def test_render_frame_order(params, surface):
    params.update({"axis_count": 6, "line_outer_step": 30, "line_inner_step": 30})
    scene = Scene(params)
    scene.add(CircleElement(params, diameter=40))
    scene.render_frame(surface, params, 800, 600)

    assert surface.ops[0] == ("clear",)
    assert surface.origin == (400, 300)
    assert surface.color == (1.0, 1.0, 1.0)
    assert surface.width == 2

    kinds = [op[0] for op in surface.ops[1:]]
    assert kinds == ["circle"] * 14 + ["line"] * 72
    diameters = [op[3] for op in surface.circles]
    assert diameters == [100] * 7 + [40] * 7


def test_static_scene_scenario(params, surface):
    params.update({"axis_count": 6, "burst_radius": 200, "circle_diameter": 100})
    Scene(params).render_frame(surface, params, 1920, 980)
    assert len(surface.circles) == 7
    assert all(op[3] == 100 for op in surface.circles)


def test_resize_reaches_every_element(params):
    scene = Scene(params)
    scene.add(CircleElement(params, diameter=0))
    params.update({"axis_count": 9, "line_length": 50})
    scene.resize(params)
    assert [c.axis for c in scene] == [9, 9]
    assert scene.wave.length == 50


def test_retire_keeps_order(params):
    scene = Scene(params)
    extra = [CircleElement(params, diameter=d) for d in (1, 2, 3)]
    for circle in extra:
        scene.add(circle)
    scene.retire([extra[1]])
    assert [c.diameter for c in scene] == [100, 1, 3]
