import math

import pytest

from mazecaster.player import MOVE_SPEED, ROTATION_SPEED, Player


def test_move_forward_along_x_axis():
    p = Player((150.0, 150.0), 0.0, math.pi / 3.0)
    p.move_forward(5.0)
    assert p.pos == pytest.approx((155.0, 150.0))


def test_move_forward_then_backward_returns_home():
    p = Player((10.0, 20.0), 1.234, math.pi / 3.0)
    p.move_forward(7.5)
    p.move_backward(7.5)
    assert p.pos == pytest.approx((10.0, 20.0))


def test_move_forward_distance_equals_speed():
    p = Player((0.0, 0.0), 2.1, math.pi / 3.0)
    p.move_forward(3.0)
    assert math.hypot(*p.pos) == pytest.approx(3.0)


def test_turn_left_wraps_below_zero():
    p = Player((0.0, 0.0), 0.0, 1.0)
    p.turn_left(0.5)
    assert p.a == pytest.approx(2 * math.pi - 0.5)


def test_turn_right_wraps_above_full_turn():
    p = Player((0.0, 0.0), 2 * math.pi - 0.1, 1.0)
    p.turn_right(0.3)
    assert p.a == pytest.approx(0.2)


def test_turn_left_then_right_restores_angle():
    p = Player((0.0, 0.0), 1.0, 1.0)
    p.turn_left(0.25)
    p.turn_right(0.25)
    assert p.a == pytest.approx(1.0)


def test_keyboard_forward_matches_move_forward():
    a = Player((50.0, 50.0), 0.7, 1.0)
    b = Player((50.0, 50.0), 0.7, 1.0)
    a.update_keyboard({"w"})
    b.move_forward(MOVE_SPEED)
    assert a.pos == pytest.approx(b.pos)


def test_keyboard_turns():
    p = Player((0.0, 0.0), 1.0, 1.0)
    p.update_keyboard({"D"})
    assert p.a == pytest.approx(1.0 + ROTATION_SPEED)
    p.update_keyboard(["a"])
    assert p.a == pytest.approx(1.0)


def test_keyboard_forward_and_back_cancel():
    p = Player((30.0, 40.0), 0.3, 1.0)
    p.update_keyboard({"w", "s"})
    assert p.pos == pytest.approx((30.0, 40.0))


def test_keyboard_no_keys_changes_nothing():
    p = Player((30.0, 40.0), 0.3, 1.0)
    p.update_keyboard(set())
    assert (p.pos, p.a) == ((30.0, 40.0), 0.3)


def test_gamepad_axes_move_player():
    p = Player((0.0, 0.0), 0.0, 1.0)
    p.update_gamepad(1.0, -0.5, False, False)
    assert p.pos == pytest.approx((MOVE_SPEED, -0.5 * MOVE_SPEED))
    assert p.a == 0.0


def test_gamepad_buttons_turn_player():
    p = Player((0.0, 0.0), 1.0, 1.0)
    p.update_gamepad(0.0, 0.0, False, True)
    assert p.a == pytest.approx(1.0 + ROTATION_SPEED)
    p.update_gamepad(0.0, 0.0, True, False)
    assert p.a == pytest.approx(1.0)