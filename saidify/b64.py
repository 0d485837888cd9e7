# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.

"""Base64URL integer codec.

Fixed-width conversion between non-negative integers and Base64URL-safe
characters, used by the version preamble (dialect 2) and by qb64 code
handling.  Each character carries 6 bits, most significant first.

References
----------
- RFC 4648 §5 — URL and filename safe alphabet
- CESR spec §3 — Base64 integer encoding of counts and sizes
"""

from __future__ import annotations

from typing import Dict

from saidify.exceptions import DecodeError

__all__ = [
    "B64_ALPHABET",
    "B64_CHR_BY_IDX",
    "B64_IDX_BY_CHR",
    "int_to_b64",
    "b64_to_int",
    "int_to_hex",
]


# ---------------------------------------------------------------------------
# Base64url alphabet and lookup tables
# ---------------------------------------------------------------------------

B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

B64_CHR_BY_IDX: Dict[int, str] = dict(enumerate(B64_ALPHABET))

B64_IDX_BY_CHR: Dict[str, int] = {ch: idx for idx, ch in enumerate(B64_ALPHABET)}


def int_to_b64(value: int, min_digits: int = 1) -> str:
    """Encode a non-negative integer as Base64URL characters.

    Parameters
    ----------
    value : int
        The integer to encode.
    min_digits : int
        Minimum output width; shorter results are left-padded with ``A``
        (the zero digit).  At least one character is always produced.

    Returns
    -------
    str
        Base64URL digits, most significant first.

    Raises
    ------
    ValueError
        If *value* is negative.
    """
    if value < 0:
        raise ValueError(f"Cannot Base64 encode negative integer {value}")

    digits = [B64_CHR_BY_IDX[value % 64]]
    value //= 64
    while value:
        digits.append(B64_CHR_BY_IDX[value % 64])
        value //= 64

    digits.reverse()
    return "A" * (min_digits - len(digits)) + "".join(digits)


def b64_to_int(chars: str) -> int:
    """Decode a string of Base64URL characters to an integer.

    Raises
    ------
    DecodeError
        If *chars* is empty or holds a character outside the alphabet.
    """
    if not chars:
        raise DecodeError("Empty string, conversion undefined.")

    value = 0
    for ch in chars:
        idx = B64_IDX_BY_CHR.get(ch)
        if idx is None:
            raise DecodeError(f"Invalid base64url character: {ch!r}")
        value = (value << 6) | idx
    return value


def int_to_hex(value: int, length: int = 0) -> str:
    """Lowercase hex of *value*, left-padded with ``0`` to *length*."""
    return f"{value:0{length}x}" if length else f"{value:x}"
