"""Shared fixtures: small text files written into tmp_path."""

import pytest


@pytest.fixture
def make_file(tmp_path):
    """Factory writing bytes or text to a file and returning its path as str."""
    def _make(content, name="sample.txt"):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return str(path)
    return _make


@pytest.fixture
def four_lines(make_file):
    return make_file("hello\nthere\nwhats\nup\n", "1.txt")


@pytest.fixture
def one_line(make_file):
    return make_file("am i clear now\n", "2.txt")


@pytest.fixture
def empty(make_file):
    return make_file(b"", "3.txt")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep LINE_OPENER_* variables from the host out of the tests."""
    for name in (
        "LINE_OPENER_POSITION",
        "LINE_OPENER_DIRECTION",
        "LINE_OPENER_ENCODING",
        "LINE_OPENER_CHUNK_SIZE",
        "LINE_OPENER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
