import math

import pytest

from world.player import Direction, Player


def test_no_keys_no_movement():
    player = Player((5, 5), speed=100.0)
    player.update(1.0)
    assert player.position == (5, 5)


def test_key_down_moves_at_speed():
    player = Player((0, 0), speed=100.0)
    player.on_key_down(Direction.RIGHT)
    player.update(0.5)
    assert player.position.x == pytest.approx(50.0)
    assert player.position.y == pytest.approx(0.0)


def test_key_up_stops_movement():
    player = Player((0, 0), speed=10.0)
    player.on_key_down(Direction.UP)
    player.update(1.0)
    player.on_key_up(Direction.UP)
    player.update(1.0)
    assert player.position.y == pytest.approx(10.0)


def test_diagonal_speed_is_normalised():
    player = Player((0, 0), speed=10.0)
    player.on_key_down(Direction.UP)
    player.on_key_down(Direction.LEFT)
    player.update(1.0)
    assert player.position.length() == pytest.approx(10.0)
    assert player.position.x == pytest.approx(-10.0 / math.sqrt(2))


def test_opposing_keys_cancel():
    player = Player((0, 0))
    player.on_key_down(Direction.LEFT)
    player.on_key_down(Direction.RIGHT)
    assert player.velocity.length() == 0


def test_pointer_move_sets_aim():
    player = Player((10, 10))
    player.on_pointer_move((10, 30))
    assert player.aim == pytest.approx(90.0)
    player.on_pointer_move((0, 10))
    assert player.aim == pytest.approx(180.0)


def test_avatar_follows_player_and_aim(renderer):
    player = Player((0, 0), speed=10.0)
    player.on_pointer_move((10, 0))
    player.on_key_down(Direction.DOWN)
    player.update(1.0)
    player.draw(renderer)
    assert player.avatar.position == player.position
    assert player.avatar.angle == pytest.approx(-90.0)
    assert renderer.depth == 0
    assert renderer.count("polygon") == 1


def test_avatar_synced_when_drawn(renderer):
    player = Player((0, 0), speed=10.0)
    player.on_key_down(Direction.RIGHT)
    player.update(1.0)
    player.on_pointer_move((20, 0))
    player.draw(renderer)
    assert player.avatar.position == (10.0, 0.0)
    assert player.avatar.angle == pytest.approx(-90.0)
