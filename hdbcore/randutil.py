"""Cryptographically random alphanumeric data."""

from __future__ import annotations

import secrets

CS_ALPHANUM = b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def rand_alphanum_bytes(n: int) -> bytes:
    """Return n random bytes drawn from the alphanumeric character set."""
    if n < 0:
        raise ValueError(f"negative length {n}")
    size = len(CS_ALPHANUM)
    return bytes(CS_ALPHANUM[b % size] for b in secrets.token_bytes(n))


def rand_alphanum_string(n: int) -> str:
    """Return a random string of n alphanumeric characters."""
    return rand_alphanum_bytes(n).decode("ascii")