import math

import pytest

from orbitview.spaceship import Spaceship


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name, args))

        return record


def approx_vec(v):
    return pytest.approx(v, abs=1e-9)


def length(v):
    return math.sqrt(sum(c * c for c in v))


def test_initial_state():
    ship = Spaceship()
    assert ship.position == (0.0, 0.0, 5.0)
    assert ship.look == approx_vec((0.0, 0.0, -1.0))
    assert ship.up == (0.0, 1.0, 0.0)
    assert ship.third_person_view is False


def test_forward_then_backward_returns_home():
    ship = Spaceship()
    ship.turn_right()
    start = ship.position
    ship.move_forward()
    assert ship.position != approx_vec(start)
    ship.move_backward()
    assert ship.position == approx_vec(start)


def test_forward_moves_by_move_step():
    ship = Spaceship()
    ship.turn_left()
    start = ship.position
    ship.move_forward()
    moved = [a - b for a, b in zip(ship.position, start)]
    assert length(moved) == pytest.approx(ship.move_step)


def test_move_forward_sets_target_look():
    ship = Spaceship()
    ship.turn_right()
    ship.turn_right()
    ship.move_forward()
    assert ship.target_look == ship.look


def test_turn_left_and_right_cancel():
    ship = Spaceship()
    original = ship.look
    ship.turn_left()
    assert ship.look != approx_vec(original)
    ship.turn_right()
    assert ship.look == approx_vec(original)


def test_look_stays_unit_length():
    ship = Spaceship()
    for _ in range(7):
        ship.rotate_yaw()
        ship.rotate_pitch()
        assert length(ship.look) == pytest.approx(1.0)


def test_rotate_yaw_matches_turn_right():
    a, b = Spaceship(), Spaceship()
    a.rotate_yaw()
    b.turn_right()
    assert a.look == approx_vec(b.look)


def test_rotate_roll_keeps_up_unit_and_orthogonal():
    ship = Spaceship()
    for _ in range(5):
        ship.rotate_roll()
        assert length(ship.up) == pytest.approx(1.0)
        assert sum(u * l for u, l in zip(ship.up, ship.look)) == pytest.approx(0.0, abs=1e-9)


def test_roll_full_circle_restores_up():
    ship = Spaceship()
    steps = round(360 / ship.rotate_step)
    for _ in range(steps):
        ship.rotate_roll()
    assert ship.up == approx_vec((0.0, 1.0, 0.0))


def test_turn_up_raises_nose_without_moving_camera():
    ship = Spaceship()
    look = ship.look
    ship.turn_up()
    assert ship.target_look[1] > 0
    assert ship.look == approx_vec(look)


def test_turn_down_lowers_nose():
    ship = Spaceship()
    ship.turn_down()
    assert ship.target_look[1] < 0


def test_turn_up_then_down_restores_heading():
    ship = Spaceship()
    heading = ship.target_look
    ship.turn_up()
    ship.turn_down()
    assert ship.target_look == approx_vec(heading)


def test_pitch_ship_preserves_length():
    ship = Spaceship()
    ship.pitch_ship(37.0)
    assert length(ship.target_look) == pytest.approx(1.0)


def test_pitch_ship_parallel_to_up_does_nothing():
    ship = Spaceship()
    ship.target_look = (0.0, 1.0, 0.0)
    ship.pitch_ship(10.0)
    assert ship.target_look == (0.0, 1.0, 0.0)


def test_toggle_camera_view():
    ship = Spaceship()
    ship.toggle_camera_view()
    assert ship.third_person_view is True
    ship.toggle_camera_view()
    assert ship.third_person_view is False


def test_first_person_camera():
    ship = Spaceship()
    ship.turn_right()
    eye, center, up = ship.camera_view()
    assert eye == ship.position
    assert [c - e for c, e in zip(center, eye)] == approx_vec(list(ship.look))
    assert up == ship.up


def test_third_person_camera_sits_behind_ship():
    ship = Spaceship()
    ship.turn_left()
    ship.toggle_camera_view()
    eye, center, _ = ship.camera_view()
    assert center == ship.position
    assert eye[1] == 0.0
    assert eye[0] == pytest.approx(ship.position[0] - ship.look[0])
    assert eye[2] == pytest.approx(ship.position[2] - ship.look[2])


def test_model_transform_initial_heading():
    translation, yaw, pitch, factor = Spaceship().model_transform(5)
    assert translation == (0.0, 0.0, 5.0)
    assert abs(yaw) == pytest.approx(180.0)
    assert pitch == pytest.approx(0.0)
    assert factor * 5 == pytest.approx(1.0)


def test_model_transform_rejects_zero_scale():
    with pytest.raises(ValueError):
        Spaceship().model_transform(0)


def test_render_calls_match_transform():
    ship = Spaceship()
    ship.turn_up()
    renderer = RecordingRenderer()
    ship.render(renderer, 4)
    translation, yaw, pitch, factor = ship.model_transform(4)
    assert renderer.calls == [
        ("push_matrix", ()),
        ("translate", translation),
        ("rotate", (yaw, 0.0, 1.0, 0.0)),
        ("rotate", (pitch, 1.0, 0.0, 0.0)),
        ("scale", (factor, factor, factor)),
        ("color", (1.0, 0.0, 0.0)),
        ("solid_cone", (0.1, 0.3, 10, 10)),
        ("pop_matrix", ()),
    ]