"""Test line counting and byte offset resolution."""

import pytest

from line_opener.src.errors import FileError
from line_opener.src.offsets import compute_offset, count_lines, scan_lines


def test_count_lines_trailing_newline(make_file):
    """A trailing newline does not add a line; an unterminated tail does."""
    assert count_lines(make_file("a\nb\nc\n")) == 3
    assert count_lines(make_file("a\nb\nc")) == 3
    assert count_lines(make_file("\n\n")) == 2
    assert count_lines(make_file(b"")) == 0


def test_compute_offset_each_line(four_lines):
    """Offsets accumulate line length plus the newline."""
    assert compute_offset(four_lines, 1) == 0
    assert compute_offset(four_lines, 2) == 6
    assert compute_offset(four_lines, 3) == 12
    assert compute_offset(four_lines, 4) == 18


def test_compute_offset_past_end_is_file_size(four_lines):
    assert compute_offset(four_lines, 5) == 21
    assert compute_offset(four_lines, 50) == 21


def test_compute_offset_counts_bytes_not_characters(make_file):
    """Multi-byte characters advance the offset by their encoded length."""
    path = make_file("héllo\nwörld\n")
    assert compute_offset(path, 2) == len("héllo\n".encode("utf-8"))


def test_compute_offset_rejects_line_zero(four_lines):
    with pytest.raises(ValueError):
        compute_offset(four_lines, 0)


def test_missing_file_raises_file_error(tmp_path):
    missing = str(tmp_path / "nope.txt")
    with pytest.raises(FileError) as excinfo:
        compute_offset(missing, 1)
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    with pytest.raises(FileError):
        count_lines(missing)


def test_scan_lines_single_pass(four_lines):
    """scan_lines reports total, size and target offset together."""
    with open(four_lines, "rb") as handle:
        handle.read(3)
        scan = scan_lines(handle, 3)
    assert scan.total_lines == 4
    assert scan.size == 21
    assert scan.offset == 12


def test_scan_lines_without_target(four_lines):
    with open(four_lines, "rb") as handle:
        scan = scan_lines(handle)
    assert scan.offset == 0
    assert scan.total_lines == 4
