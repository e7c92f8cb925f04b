import pytest

from pestkit.position import Position


def measure_skip(text, pos, n):
    p = Position(text, pos)
    if p.skip(n):
        return p.pos - pos
    return None


def test_new_rejects_non_boundary():
    heart = "💖"
    with pytest.raises(ValueError):
        Position(heart, 1)
    assert Position(heart, len(heart.encode("utf-8"))).pos == 4


def test_new_rejects_out_of_range():
    with pytest.raises(ValueError):
        Position("ab", 3)
    with pytest.raises(ValueError):
        Position("ab", -1)


def test_from_start():
    assert Position.from_start("").pos == 0
    assert Position.from_start("ab").pos == 0


def test_empty():
    assert Position("", 0).match_string("")
    assert not Position("", 0).match_string("a")


def test_parts():
    text = "asdasdf"
    assert Position(text, 0).match_string("asd")
    assert Position(text, 3).match_string("asdf")


def test_match_string_advances_only_on_success():
    p = Position.from_start("abc")
    assert not p.match_string("abd")
    assert p.pos == 0
    assert p.match_string("ab")
    assert p.pos == 2


@pytest.mark.parametrize(
    "pos, expected",
    [
        (0, (1, 1)),
        (1, (1, 2)),
        (2, (1, 3)),
        (3, (1, 4)),
        (4, (2, 1)),
        (5, (2, 2)),
        (6, (2, 3)),
        (7, (3, 1)),
        (8, (3, 2)),
        (11, (3, 3)),
    ],
)
def test_line_col(pos, expected):
    assert Position("a\rb\nc\r\nd嗨", pos).line_col() == expected


def test_line_col_multibyte():
    assert Position("abcd嗨", 7).line_col() == (1, 6)


@pytest.mark.parametrize(
    "pos, expected",
    [
        (0, "a\rb\n"),
        (1, "a\rb\n"),
        (2, "a\rb\n"),
        (3, "a\rb\n"),
        (4, "c\r\n"),
        (5, "c\r\n"),
        (6, "c\r\n"),
        (7, "d嗨"),
        (8, "d嗨"),
        (11, "d嗨"),
    ],
)
def test_line_of(pos, expected):
    assert Position("a\rb\nc\r\nd嗨", pos).line_of() == expected


def test_line_of_empty():
    assert Position("", 0).line_of() == ""


def test_line_of_new_line():
    assert Position("\n", 0).line_of() == "\n"


def test_line_of_between_new_line():
    assert Position("\n\n", 1).line_of() == "\n"


def test_find_line_bounds():
    p = Position("abc\ndef\nghi", 5)
    assert p.find_line_start() == 4
    assert p.find_line_end() == 8


def test_skip_empty():
    assert measure_skip("", 0, 0) == 0
    assert measure_skip("", 0, 1) is None


def test_skip():
    text = "d嗨"
    assert measure_skip(text, 0, 0) == 0
    assert measure_skip(text, 0, 1) == 1
    assert measure_skip(text, 1, 1) == 3


def test_skip_failure_leaves_position():
    p = Position("ab", 1)
    assert not p.skip(2)
    assert p.pos == 1


def test_skip_back():
    p = Position("d嗨", 4)
    assert p.skip_back(1)
    assert p.pos == 1
    assert not p.skip_back(2)
    assert p.pos == 1
    assert p.skip_back(1)
    assert p.pos == 0


def test_skip_until():
    start = Position.from_start("ab ac")

    p = start.copy()
    p.skip_until(["a", "b"])
    assert p.pos == 0

    p = start.copy()
    p.skip_until(["b"])
    assert p.pos == 1

    p = start.copy()
    p.skip_until(["ab"])
    assert p.pos == 0

    p = start.copy()
    p.skip_until(["ac", "z"])
    assert p.pos == 3

    p = start.copy()
    assert not p.skip_until(["z"])
    assert p.pos == 5


def test_match_range():
    assert Position("b", 0).match_range("a", "c")
    assert Position("b", 0).match_range("b", "b")
    assert not Position("b", 0).match_range("a", "a")
    assert not Position("b", 0).match_range("c", "c")
    assert Position("b", 0).match_range("a", "嗨")


def test_match_range_multibyte_advances_by_bytes():
    p = Position.from_start("嗨")
    assert p.match_range("a", "嗨")
    assert p.pos == 3


def test_match_insensitive():
    text = "AsdASdF"
    assert Position(text, 0).match_insensitive("asd")
    assert Position(text, 3).match_insensitive("asdf")


def test_match_insensitive_too_long():
    p = Position.from_start("ab")
    assert not p.match_insensitive("abc")
    assert p.pos == 0


def test_match_char_does_not_move():
    p = Position.from_start("嗨a")
    assert p.match_char("嗨")
    assert not p.match_char("a")
    assert p.pos == 0


def test_match_char_by():
    p = Position.from_start("7x")
    assert p.match_char_by(str.isdigit)
    assert p.pos == 1
    assert not p.match_char_by(str.isdigit)
    assert p.pos == 1


def test_at_start_and_end():
    p = Position.from_start("a")
    assert p.at_start()
    assert not p.at_end()
    assert p.skip(1)
    assert p.at_end()
    assert not p.at_start()


def test_cmp():
    start = Position.from_start("a")
    end = start.copy()
    assert end.skip(1)
    assert start < end
    assert not end < start


def test_cmp_different_inputs_raises():
    pos1 = Position.from_start("a")
    pos2 = Position.from_start("b")
    assert (pos1 == pos2) is False
    with pytest.raises(ValueError):
        pos1 < pos2


def test_equality_and_hash():
    text = "a"
    start = Position.from_start(text)
    positions = {start}
    assert Position(text, 0) in positions
    assert Position("b", 0) not in positions


def test_copy_is_independent():
    p = Position.from_start("ab")
    q = p.copy()
    assert q.skip(1)
    assert p.pos == 0
    assert q.pos == 1


def test_span_from_different_inputs_raises():
    with pytest.raises(ValueError):
        Position.from_start("a").span(Position.from_start("b"))


def test_repr():
    assert repr(Position("ab", 1)) == "Position(pos=1)"