import io

import pytest

from hdbcore.lob import Lob, LobError, NullLob


class FakeScanner:
    def __init__(self, data):
        self.data = data

    def scan(self, writer):
        writer.write(self.data)


class FailingScanner:
    def scan(self, writer):
        raise OSError("read failed")


def test_scan_writes_content():
    out = io.BytesIO()
    lob = Lob(writer=out)
    lob.scan(FakeScanner(b"hello lob"))
    assert out.getvalue() == b"hello lob"


def test_scan_without_writer():
    with pytest.raises(LobError, match="initial writer"):
        Lob().scan(FakeScanner(b"x"))


def test_scan_invalid_source():
    with pytest.raises(TypeError, match="invalid scan type"):
        Lob(writer=io.BytesIO()).scan(b"raw bytes")


def test_scan_error_propagates():
    with pytest.raises(OSError):
        Lob(writer=io.BytesIO()).scan(FailingScanner())


def test_value_returns_reader():
    reader = io.BytesIO(b"content")
    lob = Lob(reader)
    assert lob.value() is reader
    lob.reader = None
    assert lob.value() is None


def test_null_lob_scan_none():
    nl = NullLob(Lob(io.BytesIO(b"x"), io.BytesIO()), valid=True)
    nl.scan(None)
    assert nl.valid is False
    assert nl.value() is None


def test_null_lob_scan_value():
    reader = io.BytesIO(b"in")
    out = io.BytesIO()
    nl = NullLob(Lob(reader, out))
    nl.scan(FakeScanner(b"data"))
    assert nl.valid is True
    assert out.getvalue() == b"data"
    assert nl.value() is reader


def test_null_lob_scan_error_keeps_invalid():
    nl = NullLob(Lob(writer=io.BytesIO()))
    with pytest.raises(TypeError):
        nl.scan(42)
    assert nl.valid is False


def test_null_lob_without_lob():
    with pytest.raises(LobError):
        NullLob().scan(FakeScanner(b"x"))