"""CESU-8 encoding and decoding.

CESU-8 is UTF-8 in which code points beyond the Basic Multilingual Plane are
written as a UTF-16 surrogate pair, each surrogate encoded in three bytes.
"""

from __future__ import annotations

from typing import Callable, Optional

CESU_MAX = 6
"""Maximum number of bytes used by the CESU-8 encoding of one code point."""

UTF8 = "UTF-8"
CESU8 = "CESU-8"

RUNE_ERROR = 0xFFFD
MAX_RUNE = 0x10FFFF

_UTF_MAX = 4
_RUNE_SELF = 0x80

_TX = 0x80
_T2 = 0xC0
_T3 = 0xE0
_T4 = 0xF0
_T5 = 0xF8

_MASKX = 0x3F
_MASK2 = 0x1F
_MASK3 = 0x0F
_MASK4 = 0x07

_RUNE1_MAX = (1 << 7) - 1
_RUNE2_MAX = (1 << 11) - 1
_RUNE3_MAX = (1 << 16) - 1

_SURROGATE_MIN = 0xD800
_SURROGATE_LOW = 0xDC00
_SURROGATE_MAX = 0xDFFF
_SURROGATE_SELF = 0x10000

# Permitted range of the second byte for lead bytes with a narrower range in strict UTF-8.
_UTF8_SECOND_BYTE = {
    0xE0: (0xA0, 0xBF),
    0xED: (0x80, 0x9F),
    0xF0: (0x90, 0xBF),
    0xF4: (0x80, 0x8F),
}


class DecodeError(ValueError):
    """Raised when invalid encoded data is met while transforming."""

    def __init__(self, enc: str, pos: int, value: bytes) -> None:
        self.enc = enc
        self.pos = pos
        self.value = bytes(value)
        super().__init__(f"invalid {enc}: {self.value.hex()} at position {pos}")


ErrorHandler = Callable[[DecodeError], int]


def _is_surrogate(r: int) -> bool:
    return _SURROGATE_MIN <= r <= _SURROGATE_MAX


def _utf16_encode(r: int) -> tuple[int, int]:
    if r < _SURROGATE_SELF or r > MAX_RUNE:
        return RUNE_ERROR, RUNE_ERROR
    r -= _SURROGATE_SELF
    return _SURROGATE_MIN + ((r >> 10) & 0x3FF), _SURROGATE_LOW + (r & 0x3FF)


def _utf16_decode(high: int, low: int) -> int:
    if _SURROGATE_MIN <= high < _SURROGATE_LOW and _SURROGATE_LOW <= low <= _SURROGATE_MAX:
        return (((high - _SURROGATE_MIN) << 10) | (low - _SURROGATE_LOW)) + _SURROGATE_SELF
    return RUNE_ERROR


def _encode_basic(r: int) -> bytes:
    """Encode r like UTF-8, but permitting surrogate code points."""
    i = r & 0xFFFFFFFF
    if i <= _RUNE1_MAX:
        return bytes((i,))
    if i <= _RUNE2_MAX:
        return bytes((_T2 | (i >> 6), _TX | (i & _MASKX)))
    if i > MAX_RUNE:
        i = RUNE_ERROR
    if i <= _RUNE3_MAX:
        return bytes((_T3 | (i >> 12), _TX | ((i >> 6) & _MASKX), _TX | (i & _MASKX)))
    return bytes(
        (
            _T4 | (i >> 18),
            _TX | ((i >> 12) & _MASKX),
            _TX | ((i >> 6) & _MASKX),
            _TX | (i & _MASKX),
        )
    )


def _decode_at(p: bytes, i: int) -> tuple[int, int, bool]:
    """Decode one UTF-8 sequence (surrogates allowed) at offset i: (rune, size, short)."""
    n = len(p) - i
    if n < 1:
        return RUNE_ERROR, 0, True
    c0 = p[i]
    if c0 < _TX:
        return c0, 1, False
    if c0 < _T2:
        return RUNE_ERROR, 1, False

    if n < 2:
        return RUNE_ERROR, 1, True
    c1 = p[i + 1]
    if c1 < _TX or c1 >= _T2:
        return RUNE_ERROR, 1, False
    if c0 < _T3:
        r = (c0 & _MASK2) << 6 | (c1 & _MASKX)
        if r <= _RUNE1_MAX:
            return RUNE_ERROR, 1, False
        return r, 2, False

    if n < 3:
        return RUNE_ERROR, 1, True
    c2 = p[i + 2]
    if c2 < _TX or c2 >= _T2:
        return RUNE_ERROR, 1, False
    if c0 < _T4:
        r = (c0 & _MASK3) << 12 | (c1 & _MASKX) << 6 | (c2 & _MASKX)
        if r <= _RUNE2_MAX:
            return RUNE_ERROR, 1, False
        return r, 3, False

    if n < 4:
        return RUNE_ERROR, 1, True
    c3 = p[i + 3]
    if c3 < _TX or c3 >= _T2:
        return RUNE_ERROR, 1, False
    if c0 < _T5:
        r = (c0 & _MASK4) << 18 | (c1 & _MASKX) << 12 | (c2 & _MASKX) << 6 | (c3 & _MASKX)
        if r <= _RUNE3_MAX or r > MAX_RUNE:
            return RUNE_ERROR, 1, False
        return r, 4, False

    return RUNE_ERROR, 1, False


def _utf8_decode_at(p: bytes, i: int) -> tuple[int, int, bool]:
    """Decode one strict UTF-8 sequence at offset i: (rune, size, short)."""
    if i < len(p):
        c0 = p[i]
        if c0 in (0xC0, 0xC1) or c0 >= 0xF5:
            return RUNE_ERROR, 1, False
        bounds = _UTF8_SECOND_BYTE.get(c0)
        if bounds is not None and i + 1 < len(p) and not bounds[0] <= p[i + 1] <= bounds[1]:
            return RUNE_ERROR, 1, False
    return _decode_at(p, i)


def _cesu_decode_at(p: bytes, i: int) -> tuple[int, int]:
    high, n1, _ = _decode_at(p, i)
    if not _is_surrogate(high):
        return high, n1
    low, n2, _ = _decode_at(p, i + n1)
    if low == RUNE_ERROR:
        return low, n1 + n2
    return _utf16_decode(high, low), n1 + n2


def _cesu_full_rune_at(p: bytes, i: int) -> bool:
    high, n, short = _decode_at(p, i)
    if short:
        return False
    if not _is_surrogate(high):
        return True
    _, _, short = _decode_at(p, i + n)
    return not short


def rune_len(r: int) -> int:
    """Return the number of bytes needed to encode r in CESU-8, or -1 if r is invalid."""
    if r < 0:
        return -1
    if r <= _RUNE1_MAX:
        return 1
    if r <= _RUNE2_MAX:
        return 2
    if r <= _RUNE3_MAX:
        return 3
    if r <= MAX_RUNE:
        return CESU_MAX
    return -1


def encode_rune(r: int) -> bytes:
    """Return the CESU-8 encoding of code point r."""
    if r <= _RUNE3_MAX:
        return _encode_basic(r)
    high, low = _utf16_encode(r)
    return _encode_basic(high) + _encode_basic(low)


def decode_rune(p: bytes) -> tuple[int, int]:
    """Decode the first CESU-8 encoding in p, returning the code point and its width in bytes."""
    return _cesu_decode_at(bytes(p), 0)


def full_rune(p: bytes) -> bool:
    """Report whether p begins with a full CESU-8 encoding of a code point."""
    return _cesu_full_rune_at(bytes(p), 0)


def size(p: bytes) -> int:
    """Return the number of bytes needed to encode UTF-8 data p in CESU-8."""
    data = bytes(p)
    n = 0
    i = 0
    while i < len(data):
        r, width, _ = _decode_at(data, i)
        i += width
        n += rune_len(r)
    return n


def string_size(s: str) -> int:
    """Return the number of bytes needed to encode s in CESU-8."""
    return sum(rune_len(ord(c)) for c in s)


def replace_error_handler(err: DecodeError) -> int:
    """Error handler replacing invalid data with U+FFFD.

    Raises TypeError if err is not a DecodeError.
    """
    if not isinstance(err, DecodeError):
        raise TypeError(f"expected DecodeError, got {type(err).__name__}")
    return ord("\ufffd")


class _Transformer:
    def __init__(self, error_handler: Optional[ErrorHandler] = None) -> None:
        self._error_handler = error_handler

    def _handle(self, err: DecodeError) -> int:
        if self._error_handler is None:
            raise err
        return self._error_handler(err)


class Encoder(_Transformer):
    """Transforms UTF-8 encoded data into CESU-8."""

    def __init__(self, error_handler: Optional[ErrorHandler] = None) -> None:
        super().__init__(error_handler)

    def transform(self, src: bytes, at_eof: bool = True) -> tuple[bytes, int]:
        """Transform src, returning the output and the number of source bytes consumed.

        Unless at_eof is true, an incomplete trailing sequence is left unconsumed.
        """
        data = bytes(src)
        out = bytearray()
        i = 0
        end = len(data)
        while i < end:
            b = data[i]
            if b < _RUNE_SELF:
                out.append(b)
                i += 1
                continue
            r, width, short = _utf8_decode_at(data, i)
            if not at_eof and end - i < _UTF_MAX and short:
                break
            if r == RUNE_ERROR:
                r = self._handle(DecodeError(UTF8, i, data))
            if rune_len(r) == -1:
                raise ValueError("internal UTF-8 to CESU-8 transformation error")
            out += encode_rune(r)
            i += width
        return bytes(out), i

    def encode(self, text: str) -> bytes:
        """Encode text to CESU-8."""
        out, _ = self.transform(text.encode("utf-8", "surrogatepass"), True)
        return out


class Decoder(_Transformer):
    """Transforms CESU-8 encoded data into UTF-8."""

    def __init__(self, error_handler: Optional[ErrorHandler] = None) -> None:
        super().__init__(error_handler)

    def transform(self, src: bytes, at_eof: bool = True) -> tuple[bytes, int]:
        """Transform src, returning the output and the number of source bytes consumed.

        Unless at_eof is true, an incomplete trailing sequence is left unconsumed.
        """
        data = bytes(src)
        out = bytearray()
        i = 0
        end = len(data)
        while i < end:
            b = data[i]
            if b < _RUNE_SELF:
                out.append(b)
                i += 1
                continue
            if not at_eof and end - i < CESU_MAX and not _cesu_full_rune_at(data, i):
                break
            r, width = _cesu_decode_at(data, i)
            if r == RUNE_ERROR:
                r = self._handle(DecodeError(CESU8, i, data))
            if r < 0 or r > MAX_RUNE or _is_surrogate(r):
                raise ValueError("internal CESU-8 to UTF-8 transformation error")
            out += chr(r).encode("utf-8")
            i += width
        return bytes(out), i

    def decode(self, data: bytes) -> str:
        """Decode CESU-8 data to a string."""
        out, _ = self.transform(data, True)
        return out.decode("utf-8")


_DEFAULT_ENCODER = Encoder()
_DEFAULT_DECODER = Decoder()


def default_encoder() -> Encoder:
    """Return the shared UTF-8 to CESU-8 encoder without error handler."""
    return _DEFAULT_ENCODER


def default_decoder() -> Decoder:
    """Return the shared CESU-8 to UTF-8 decoder without error handler."""
    return _DEFAULT_DECODER