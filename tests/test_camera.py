import pytest

from overworld.camera import Camera, lerp
from overworld.entity import Entity
from overworld.geometry import Rect, Vector2


def _camera_on(position):
    target = Entity()
    target.position = position
    cam = Camera()
    cam.set_size(Vector2(400, 300))
    cam.set_bounds(Rect(0, 0, 800, 800))
    cam.set_target(target)
    return cam, target


def test_lerp_endpoints():
    assert lerp(3.0, 9.0, 0.0) == 3.0
    assert lerp(3.0, 9.0, 1.0) == 9.0


def test_lerp_midpoint_is_between():
    v = lerp(3.0, 9.0, 0.5)
    assert 3.0 < v < 9.0
    assert v - 3.0 == pytest.approx(9.0 - v)


def test_set_size_centres_view():
    cam = Camera()
    cam.set_size((400, 300))
    assert cam.view.size == Vector2(400, 300)
    assert cam.view.center == Vector2(200, 150)


def test_update_without_target_raises():
    cam = Camera()
    with pytest.raises(RuntimeError):
        cam.update(0.016)


def test_update_moves_toward_target():
    cam, target = _camera_on(Vector2(400, 400))
    before = cam.view.center
    cam.update(0.016)
    after = cam.view.center
    assert abs(after.x - target.position.x) < abs(before.x - target.position.x)
    assert after.x == pytest.approx(lerp(before.x, target.position.x, Camera.follow_speed))


def test_update_converges_on_target_inside_bounds():
    cam, target = _camera_on(Vector2(400, 400))
    for _ in range(300):
        cam.update(0.016)
    assert cam.view.center.x == pytest.approx(target.position.x, abs=1e-3)
    assert cam.view.center.y == pytest.approx(target.position.y, abs=1e-3)


def test_view_is_clamped_to_top_left_corner():
    cam, _ = _camera_on(Vector2(10, 10))
    for _ in range(300):
        cam.update(0.016)
    assert cam.view.center.x == pytest.approx(cam.view.size.x / 2, abs=1e-3)
    assert cam.view.center.y == pytest.approx(cam.view.size.y / 2, abs=1e-3)


def test_view_is_clamped_to_bottom_right_corner():
    cam, _ = _camera_on(Vector2(790, 790))
    for _ in range(300):
        cam.update(0.016)
    assert cam.view.rect.right == pytest.approx(cam.bounds.right, abs=1e-3)
    assert cam.view.rect.bottom == pytest.approx(cam.bounds.bottom, abs=1e-3)