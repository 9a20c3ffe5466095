"""Test line number range helpers."""

from line_opener.line_numbers import seek_line, validate_external


def test_validate_external():
    assert validate_external(1, 4)
    assert validate_external(4, 4)
    assert not validate_external(0, 4)
    assert not validate_external(5, 4)
    assert not validate_external(1, 0)


def test_seek_line_moves_one_down_when_backward():
    assert seek_line(3, backward=False) == 3
    assert seek_line(3, backward=True) == 4
