import pytest

from soko_logic.movement import Direction, MoveOutcome, resolve_move


def no_walls(x, y):
    return False


def walls_at(*cells):
    blocked = set(cells)
    return lambda x, y: (x, y) in blocked


def test_free_step():
    res = resolve_move((5, 5), set(), Direction.UP, no_walls)
    assert res.outcome is MoveOutcome.MOVED
    assert res.accepted
    assert res.player == (5, 6)
    assert res.boxes == frozenset()
    assert res.box_from is None and res.box_to is None


def test_blocked_by_wall():
    res = resolve_move((5, 5), {(1, 1)}, Direction.UP, walls_at((5, 6)))
    assert res.outcome is MoveOutcome.BLOCKED_WALL
    assert not res.accepted
    assert res.player == (5, 5)
    assert res.boxes == {(1, 1)}


def test_push_success():
    res = resolve_move((5, 5), {(5, 6)}, Direction.UP, no_walls)
    assert res.outcome is MoveOutcome.PUSHED
    assert res.player == (5, 6)
    assert res.boxes == {(5, 7)}
    assert (res.box_from, res.box_to) == ((5, 6), (5, 7))


def test_push_into_wall():
    res = resolve_move((5, 5), {(5, 6)}, Direction.UP, walls_at((5, 7)))
    assert res.outcome is MoveOutcome.BLOCKED_BOX
    assert res.player == (5, 5)
    assert res.boxes == {(5, 6)}


def test_push_blocked_by_second_box():
    boxes = {(5, 6), (5, 7)}
    res = resolve_move((5, 5), boxes, Direction.UP, no_walls)
    assert res.outcome is MoveOutcome.BLOCKED_BOX
    assert res.player == (5, 5)
    assert res.boxes == boxes


def test_input_set_is_not_mutated():
    boxes = {(5, 6)}
    resolve_move((5, 5), boxes, Direction.UP, no_walls)
    assert boxes == {(5, 6)}


@pytest.mark.parametrize("direction, player, box", [
    (Direction.DOWN, (5, 4), (5, 3)),
    (Direction.LEFT, (4, 5), (3, 5)),
    (Direction.RIGHT, (6, 5), (7, 5)),
])
def test_push_every_direction(direction, player, box):
    start_box = direction.step((5, 5))
    res = resolve_move((5, 5), {start_box}, direction, no_walls)
    assert res.outcome is MoveOutcome.PUSHED
    assert res.player == player
    assert res.boxes == {box}


def test_boxes_elsewhere_do_not_matter():
    res = resolve_move((5, 5), {(6, 6), (4, 4)}, Direction.UP, no_walls)
    assert res.outcome is MoveOutcome.MOVED
    assert res.boxes == {(6, 6), (4, 4)}


def test_direction_helpers():
    assert Direction.UP.step((0, 0), 2) == (0, 2)
    assert Direction.LEFT.delta == (-1, 0)
    assert Direction.DOWN.to_velocity(3.0) == (0.0, -3.0)
    assert Direction.from_key("r") is Direction.RIGHT
    assert Direction.from_key("Up") is Direction.UP
    with pytest.raises(ValueError):
        Direction.from_key("x")
