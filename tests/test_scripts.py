import os
import sys

from soko_logic.movement import Direction

ROOT = os.path.join(os.path.dirname(__file__), "..")
CONFIG = os.path.join(ROOT, "configs", "game.yaml")
SMALL = os.path.join(ROOT, "soko_logic", "levels", "examples", "small.txt")


def _run(main, argv):
    argv_bak = list(sys.argv)
    sys.argv = argv
    try:
        main()
    finally:
        sys.argv = argv_bak


def test_parse_moves():
    from scripts.play import parse_moves
    assert parse_moves("UR dl") == [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]


def test_play_smoke(capsys):
    from scripts.play import main
    _run(main, ["play", "--config", CONFIG, "--level", f"{SMALL}#0", "--moves", "D"])
    out = capsys.readouterr().out
    assert "accepted: 1" in out
    assert "solved: False" in out


def test_show_level_smoke(capsys):
    from scripts.show_level import main
    _run(main, ["show", "--config", CONFIG])
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "7x7"
    assert "boxes: 1, goals: 1" in out
