import pytest

from config import LandscapeConfig
from render.compositor import frame_plan, render_frame
from render.surfaces import RecordingSurface
from terrain.scene import initialize, initialize_from_config, on_resize


def test_initialize_is_seed_deterministic():
    a = initialize((640, 480), layer_count=4, seed=123)
    b = initialize((640, 480), layer_count=4, seed=123)
    assert a.palette == b.palette
    assert a.sun == b.sun
    assert a.layers == b.layers
    assert a.silhouette(2) == b.silhouette(2)

    c = initialize((640, 480), layer_count=4, seed=124)
    assert c.layers != a.layers


def test_fixed_hue_and_frontmost_color():
    scene = initialize((800, 600), layer_count=6, seed=9, hue=120.0)
    assert scene.palette.top.hue == 120.0
    assert scene.frontmost_color == scene.layers[0].fill
    assert scene.bottom_color == scene.palette.bottom
    assert [l.index for l in scene.layers] == list(range(6))


def test_end_to_end_draw_sequence():
    scene = initialize((800, 600), layer_count=6, seed=2024, hue=120.0)
    surf = RecordingSurface(800, 600)
    render_frame(scene, surf)
    assert surf.kinds() == ["gradient", "ellipse"] + ["polygon"] * 6
    labels = [op.label for op in frame_plan(scene)]
    assert labels == ["sky", "sun", "layer5", "layer4", "layer3", "layer2", "layer1", "layer0"]

    grad = surf.calls[0]
    assert grad[1] == (0.0, 0.0, 800.0, 600.0)
    assert [o for o, _ in grad[2]] == [0.0, 0.4]
    # frontmost layer is painted last
    assert surf.calls[-1][2] == scene.layers[0].fill.to_rgb()


def test_render_is_idempotent():
    scene = initialize((320, 240), layer_count=3, seed=77)
    s1 = RecordingSurface(320, 240)
    s2 = RecordingSurface(320, 240)
    render_frame(scene, s1)
    render_frame(scene, s2)
    assert s1.calls == s2.calls


def test_resize_round_trip_restores_geometry():
    scene = initialize((800, 600), layer_count=6, seed=31)
    bigger = on_resize(scene, (1200, 900))
    assert bigger.viewport == (1200, 900)
    assert bigger.palette == scene.palette
    assert [l.jaggedness for l in bigger.layers] == [l.jaggedness for l in scene.layers]
    assert [l.fill for l in bigger.layers] == [l.fill for l in scene.layers]
    assert bigger.layers[3].bounds != scene.layers[3].bounds

    back = on_resize(bigger, (800, 600))
    assert [l.bounds for l in back.layers] == [l.bounds for l in scene.layers]
    assert [(l.start_noise, l.end_noise) for l in back.layers] == \
        [(l.start_noise, l.end_noise) for l in scene.layers]
    assert back.sun == scene.sun


def test_resize_to_same_size_is_noop():
    scene = initialize((400, 300), layer_count=2, seed=1)
    assert on_resize(scene, (400, 300)) is scene


def test_invalid_inputs_raise():
    with pytest.raises(ValueError):
        initialize((0, 600))
    with pytest.raises(ValueError):
        initialize((800, 600), layer_count=0)
    scene = initialize((100, 100), layer_count=1, seed=1)
    with pytest.raises(ValueError):
        on_resize(scene, (100, -5))


def test_initialize_from_config():
    cfg = LandscapeConfig(layer_count=3, width=200, height=150, seed=5, hue=10.0)
    scene = initialize_from_config(cfg)
    assert scene.viewport == (200, 150)
    assert scene.layer_count == 3
    assert scene.palette.top.hue == 10.0
    assert scene.noise.octaves == cfg.noise_octaves
