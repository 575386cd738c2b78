import pytest

from hdbcore.randutil import CS_ALPHANUM, rand_alphanum_bytes, rand_alphanum_string


@pytest.mark.parametrize("n", [0, 1, 17, 1000])
def test_bytes_length(n):
    assert len(rand_alphanum_bytes(n)) == n


def test_bytes_within_charset():
    data = rand_alphanum_bytes(2000)
    assert set(data) <= set(CS_ALPHANUM)


def test_string_within_charset():
    s = rand_alphanum_string(500)
    assert len(s) == 500
    assert s.isalnum() and s.isascii()


def test_random_output_varies():
    assert len(set(rand_alphanum_string(1000))) > 1


def test_empty_string():
    assert rand_alphanum_string(0) == ""


def test_negative_length():
    with pytest.raises(ValueError):
        rand_alphanum_string(-1)