import pytest

from hexloom.bbp import InvalidArgumentError, get_digits
from hexloom.streaming import collect_prefix, iter_hex_chunks, iter_hex_digits


def test_iter_hex_digits_matches_get_digits():
    assert list(iter_hex_digits(5, 21)) == get_digits(5, 21)
    assert list(iter_hex_digits(0, 0)) == []


def test_iter_hex_digits_rejects_negative():
    with pytest.raises(InvalidArgumentError):
        list(iter_hex_digits(-3, 4))
    with pytest.raises(InvalidArgumentError):
        list(iter_hex_digits(0, -4))


def test_iter_hex_chunks_sizes():
    chunks = list(iter_hex_chunks(0, 10, 4))
    assert chunks == ["243f", "6a88", "85"]


def test_iter_hex_chunks_upper():
    assert "".join(iter_hex_chunks(0, 16, 5, upper=True)) == "243F6A8885A308D3"


def test_iter_hex_chunks_bad_size():
    with pytest.raises(ValueError):
        list(iter_hex_chunks(0, 4, 0))


def test_collect_prefix():
    assert collect_prefix(["243f", "6a88", "85"], 6) == "243f6a"
    assert collect_prefix(["243f"], 10) == "243f"
    assert collect_prefix(iter_hex_chunks(0, 64, 3), 0) == ""
