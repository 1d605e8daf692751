import io

import pytest

from micromouse.api import MazeApi, MoveError


def make_api(replies: str = ""):
    out = io.StringIO()
    return MazeApi(io.StringIO(replies), out), out


def test_maze_dimensions_are_parsed():
    api, out = make_api("16\n8\n")
    assert api.maze_width() == 16
    assert api.maze_height() == 8
    assert out.getvalue() == "mazeWidth\nmazeHeight\n"


def test_non_numeric_dimension_reads_as_zero():
    api, _ = make_api("abc\n")
    assert api.maze_width() == 0


def test_dimension_uses_numeric_prefix():
    api, _ = make_api("12abc\n")
    assert api.maze_height() == 12


@pytest.mark.parametrize(
    "method, command",
    [("wall_front", "wallFront"), ("wall_right", "wallRight"),
     ("wall_left", "wallLeft"), ("was_reset", "wasReset")],
)
def test_boolean_queries(method, command):
    api, out = make_api("true\nfalse\n")
    assert getattr(api, method)() is True
    assert getattr(api, method)() is False
    assert out.getvalue() == f"{command}\n{command}\n"


def test_replies_may_share_a_line():
    api, _ = make_api("true false\n")
    assert api.wall_front() is True
    assert api.wall_left() is False


def test_move_forward_default_distance_omits_number():
    api, out = make_api("ack\n")
    api.move_forward()
    assert out.getvalue() == "moveForward \n"


def test_move_forward_with_distance():
    api, out = make_api("ack\n")
    api.move_forward(3)
    assert out.getvalue() == "moveForward 3\n"


def test_move_forward_rejected():
    api, _ = make_api("crash\n")
    with pytest.raises(MoveError) as info:
        api.move_forward()
    assert info.value.response == "crash"


def test_turns_consume_ack():
    api, out = make_api("ack\nack\ntrue\n")
    api.turn_right()
    api.turn_left()
    assert api.wall_front() is True
    assert out.getvalue() == "turnRight\nturnLeft\nwallFront\n"


def test_ack_reset():
    api, out = make_api("ack\n")
    api.ack_reset()
    assert out.getvalue() == "ackReset\n"


def test_drawing_commands_do_not_read():
    api, out = make_api("")
    api.set_wall(1, 2, "n")
    api.clear_wall(3, 4, "e")
    api.set_color(0, 0, "G")
    api.clear_color(5, 6)
    api.clear_all_color()
    api.set_text(0, 0, "abc")
    api.clear_text(7, 8)
    api.clear_all_text()
    assert out.getvalue().splitlines() == [
        "setWall 1 2 n",
        "clearWall 3 4 e",
        "setColor 0 0 G",
        "clearColor 5 6",
        "clearAllColor",
        "setText 0 0 abc",
        "clearText 7 8",
        "clearAllText",
    ]


def test_end_of_input_raises():
    api, _ = make_api("")
    with pytest.raises(EOFError):
        api.wall_front()