# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.

"""Fully-qualified Base64 (qb64) encoding of raw digests.

A qb64 primitive is the derivation code followed by the Base64URL
encoding of the raw value, with no ``=`` padding and a total length of
exactly ``fs`` characters.

Encoding works on a 3-byte boundary.  The raw value is prefixed with
``ps`` pad bytes (to reach the boundary) and ``ls`` lead bytes, all zero.
After Base64 conversion the first ``ps`` characters carry only zero bits
and are replaced by the code, which must therefore be ``ps - ls``
characters long modulo 4.

For a 32-byte digest with a one-character code: ``ps = 1``, the 33
prefixed bytes encode to 44 characters, the first is dropped and the
code prepended, giving 44 characters again.

References
----------
- CESR spec §3.4 — Code tables and pad size
- CESR spec §3.5 — Fully qualified Base64 conversion
"""

from __future__ import annotations

import base64
import logging
from typing import Tuple, Union

from saidify.b64 import B64_IDX_BY_CHR
from saidify.codes import size_of
from saidify.exceptions import (
    DecodeError,
    EmptyCodeError,
    InsufficientRawBytesError,
    InvalidCodeSizeForPaddingError,
    VariableSizeUnsupportedError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "raw_size",
    "validate_raw_size",
    "qb64b",
    "qb64",
    "decode_qb64b",
    "decode_qb64",
]


def raw_size(code: str) -> int:
    """Number of raw bytes a primitive with *code* carries.

    Inverse of the Base64 expansion over the value characters, less the
    lead bytes.

    Raises
    ------
    EmptyCodeError
        If *code* is empty.
    UnsupportedCodeError
        If *code* is unknown.
    VariableSizeUnsupportedError
        If *code* is variable sized.
    """
    if not code:
        raise EmptyCodeError()

    sizage = size_of(code)
    if sizage.fs == -1:
        raise VariableSizeUnsupportedError(
            f"Variable sized code {code!r} is not supported"
        )
    cs = sizage.hs + sizage.ss
    return (sizage.fs - cs) * 3 // 4 - sizage.ls


def validate_raw_size(raw: bytes, code: str) -> bytes:
    """Return the first ``raw_size(code)`` bytes of *raw*.

    Raises
    ------
    InsufficientRawBytesError
        If *raw* is shorter than the raw size.
    """
    rs = raw_size(code)
    if len(raw) < rs:
        raise InsufficientRawBytesError(
            f"Not enough raw bytes for code {code!r}: "
            f"expected {rs}, got {len(raw)}"
        )
    return bytes(raw[:rs])


def qb64b(raw: bytes, code: str) -> bytes:
    """Encode *raw* as fully-qualified Base64 bytes.

    Parameters
    ----------
    raw : bytes
        Raw digest.  Bytes beyond the code's raw size are ignored.
    code : str
        Derivation code.

    Returns
    -------
    bytes
        ``fs`` bytes of ASCII qb64 text.

    Raises
    ------
    InvalidCodeSizeForPaddingError
        If the code size does not agree with the pad size.
    InsufficientRawBytesError
        If *raw* is shorter than the code's raw size.
    """
    raw = validate_raw_size(raw, code)
    sizage = size_of(code)
    cs = sizage.hs + sizage.ss
    ps = (3 - ((len(raw) + sizage.ls) % 3)) % 3

    if cs % 4 != ps - sizage.ls:
        raise InvalidCodeSizeForPaddingError(
            f"Invalid code size {cs} for pad size {ps} and lead size "
            f"{sizage.ls} of code {code!r}"
        )

    prepadded = bytes(ps + sizage.ls) + raw
    full = code.encode("utf-8") + base64.urlsafe_b64encode(prepadded)[ps:]

    if len(full) != sizage.fs:
        raise InvalidCodeSizeForPaddingError(
            f"Encoded size {len(full)} does not match full size "
            f"{sizage.fs} of code {code!r}"
        )
    return full


def qb64(raw: bytes, code: str) -> str:
    """Encode *raw* as fully-qualified Base64 text."""
    return qb64b(raw, code).decode("utf-8")


def decode_qb64(text: str) -> Tuple[str, bytes]:
    """Split a qb64 primitive into its code and raw value.

    Only the first ``fs`` characters are read.

    Raises
    ------
    EmptyCodeError
        If *text* is empty.
    UnsupportedCodeError
        If the code is unknown.
    DecodeError
        If *text* is short, holds non-Base64 characters or has non-zero
        pad or lead bits.
    """
    if not text:
        raise EmptyCodeError()

    hard = size_of(text[:1]).hs
    code = text[:hard]
    sizage = size_of(code)
    if sizage.fs == -1:
        raise VariableSizeUnsupportedError(
            f"Variable sized code {code!r} is not supported"
        )
    if len(text) < sizage.fs:
        raise DecodeError(
            f"Need {sizage.fs} characters for code {code!r}, got {len(text)}"
        )

    cs = sizage.hs + sizage.ss
    value = text[cs:sizage.fs]
    bad = [ch for ch in value if ch not in B64_IDX_BY_CHR]
    if bad:
        raise DecodeError(f"Invalid base64url character: {bad[0]!r}")

    # Replace the code characters with zero digits so the pad bits land
    # in whole leading bytes.
    ps = cs % 4
    paw = base64.urlsafe_b64decode("A" * ps + value)
    if any(paw[:ps + sizage.ls]):
        raise DecodeError(f"Non-zero pad or lead bits in {code!r} primitive")

    return code, paw[ps + sizage.ls:]


def decode_qb64b(data: Union[bytes, bytearray]) -> Tuple[str, bytes]:
    """Byte-text variant of :func:`decode_qb64`."""
    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"qb64b is not UTF-8 text: {e}") from e
    return decode_qb64(text)
