import numpy as np

from render.compositor import render_frame, render_image
from render.surfaces import ImageSurface, RecordingSurface, gradient_rows
from terrain.scene import initialize


def test_gradient_rows_hold_last_stop():
    rows = gradient_rows(100, [(0.0, (0, 0, 0)), (0.4, (200, 100, 50))])
    assert rows.shape == (100, 3)
    assert int(rows[0][0]) < int(rows[30][0])
    assert all(tuple(int(c) for c in r) == (200, 100, 50) for r in rows[40:])


def test_image_surface_primitives():
    surf = ImageSurface(40, 30)
    surf.fill_rect((0, 0, 40, 30), (10, 20, 30))
    assert surf.image.getpixel((5, 5)) == (10, 20, 30)
    surf.fill_polygon([(-20, 30), (0, 0), (60, 0), (61, 30)], (255, 0, 0))
    assert surf.image.getpixel((20, 20)) == (255, 0, 0)
    surf.fill_ellipse((10, 5, 20, 20), (0, 255, 0))
    assert surf.image.getpixel((20, 15)) == (0, 255, 0)


def test_render_image_frontmost_layer_covers_bottom_edge():
    scene = initialize((160, 120), layer_count=4, seed=3, hue=60.0)
    img = render_image(scene)
    assert img.size == (160, 120)
    arr = np.asarray(img)
    front = scene.layers[0].fill.to_rgb()
    bottom = [tuple(int(c) for c in px) for px in arr[-1]]
    assert sum(px == front for px in bottom) > 0.9 * len(bottom)
    # layer 0 is at most 18px tall here, so the top row is never its color
    assert tuple(int(c) for c in arr[0, 0]) != front


def test_recording_surface_logs_and_clears():
    scene = initialize((120, 80), layer_count=2, seed=6)
    surf = RecordingSurface(120, 80)
    surf.fill_rect((0, 0, 120, 80), scene.frontmost_color.to_rgb())
    render_frame(scene, surf)
    assert surf.kinds() == ["rect", "gradient", "ellipse", "polygon", "polygon"]
    assert surf.calls[0] == ("rect", (0, 0, 120, 80), scene.frontmost_color.to_rgb())
    surf.clear()
    assert surf.calls == []
    render_frame(scene, surf)
    assert surf.kinds() == ["gradient", "ellipse", "polygon", "polygon"]
