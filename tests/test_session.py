from soko_logic.config import GameConfig
from soko_logic.movement import Direction, MoveOutcome
from soko_logic.session import PlayState

# blank line + 6x3 map: 6x4, left margin 7, top margin 6; the middle map row
# is row 8 (y 7) -> player (8, 7), box (9, 7), goal (11, 7)
CORRIDOR = """
######
#@$ .#
######
"""

OPEN = """
#####
#   #
# @ #
#   #
#####
"""


def test_initial_placement():
    play = PlayState.from_level_str(CORRIDOR)
    assert play.player_cell == (8, 7)
    assert play.box_cells == {(9, 7)}
    assert play.player.position == (8 * 16.0, 7 * 16.0)
    assert play.is_idle()
    assert not play.is_solved()


def test_push_moves_player_and_box():
    play = PlayState.from_level_str(CORRIDOR)
    res = play.request(Direction.RIGHT)
    assert res is not None and res.outcome is MoveOutcome.PUSHED
    assert play.player_cell == (9, 7)
    assert play.box_cells == {(10, 7)}
    assert play.player.moving_to == ((9, 7), Direction.RIGHT)
    box = play.box_actors()[0]
    assert box.moving_to == ((10, 7), Direction.RIGHT)
    assert play.player.facing is Direction.RIGHT


def test_request_ignored_while_in_flight():
    play = PlayState.from_level_str(CORRIDOR)
    play.request(Direction.RIGHT)
    pending = play.player.moving_to
    assert play.request(Direction.RIGHT) is None
    assert play.request(Direction.LEFT) is None
    assert play.player.moving_to == pending
    assert play.player_cell == (9, 7)
    assert play.box_cells == {(10, 7)}


def test_motion_completes_and_snaps():
    play = PlayState.from_level_str(CORRIDOR)
    play.request(Direction.RIGHT)
    ticks = play.settle(1.0 / 60.0)
    assert ticks > 1
    assert play.is_idle()
    assert play.player.position == (9 * 16.0, 7 * 16.0)
    assert play.box_actors()[0].position == (10 * 16.0, 7 * 16.0)


def test_solve_corridor():
    play = PlayState.from_level_str(CORRIDOR)
    play.request(Direction.RIGHT)
    play.settle()
    res = play.request(Direction.RIGHT)
    assert res.outcome is MoveOutcome.PUSHED
    play.settle()
    assert play.box_cells == {(11, 7)}
    assert play.is_solved()

    # box is against the wall now
    res = play.request(Direction.RIGHT)
    assert res.outcome is MoveOutcome.BLOCKED_BOX
    assert play.player_cell == (10, 7)
    assert play.is_idle()


def test_rejected_move_changes_nothing():
    play = PlayState.from_level_str(CORRIDOR)
    res = play.request(Direction.UP)
    assert res.outcome is MoveOutcome.BLOCKED_WALL
    assert play.player_cell == (8, 7)
    assert play.player.moving_to is None
    assert play.player.facing is Direction.DOWN


def test_held_input_last_accepted_direction_wins():
    play = PlayState.from_level_str(OPEN)
    start = play.player_cell
    res = play.request_held(up=True, right=True)
    assert res is not None and res.direction is Direction.RIGHT
    assert play.player_cell == (start[0] + 1, start[1])


def test_held_input_skips_blocked_directions():
    play = PlayState.from_level_str(CORRIDOR)
    # up and down are walls, right pushes the box
    res = play.request_held(up=True, down=True, right=True)
    assert res.outcome is MoveOutcome.PUSHED
    assert play.request_held(right=True) is None


def test_held_input_nothing_accepted():
    play = PlayState.from_level_str(CORRIDOR)
    assert play.request_held(up=True, down=True, left=True) is None
    assert play.request_held() is None
    assert play.player_cell == (8, 7)


def test_config_speed_and_cell_size():
    cfg = GameConfig(cell_size=10.0, move_speed=1000.0)
    play = PlayState.from_level_str(OPEN, cfg)
    x, y = play.player_cell
    assert play.player.position == (x * 10.0, y * 10.0)
    play.request(Direction.LEFT)
    play.tick(0.5)
    assert play.is_idle()
    assert play.player.position == ((x - 1) * 10.0, y * 10.0)
