# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.

"""Derivation code table for self-addressing digests.

Each derivation code names a digest algorithm together with the shape of
its fully-qualified Base64 (qb64) encoding.  The shape is described by a
:class:`Sizage`:

- ``hs`` — hard size, characters in the fixed code prefix
- ``ss`` — soft size, characters in a variable code suffix (0 here)
- ``ls`` — lead size, zero bytes prepended to the raw value
- ``fs`` — full size, characters of code plus encoded value
  (``-1`` marks a variable sized code)

Only fixed size, one-character codes are defined.

References
----------
- CESR spec §3 — Encoding Tables
- KERI spec — Self-Addressing Derivation Codes
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from saidify.exceptions import UnsupportedCodeError

__all__ = [
    "DigestCodex",
    "DigDex",
    "Sizage",
    "SIZES",
    "size_of",
]


@dataclass(frozen=True)
class DigestCodex:
    """Supported self-addressing digest derivation codes."""

    Blake3_256: str = "E"  # Blake3 256 bit digest
    Blake2b_256: str = "F"  # Blake2b 256 bit digest
    SHA3_256: str = "H"  # SHA3 256 bit digest
    SHA2_256: str = "I"  # SHA2 256 bit digest

    def __iter__(self) -> Iterator[str]:
        return iter(astuple(self))

    def __contains__(self, code: object) -> bool:
        return code in astuple(self)


DigDex = DigestCodex()


@dataclass(frozen=True)
class Sizage:
    hs: int
    ss: int
    ls: int
    fs: int


SIZES: Mapping[str, Sizage] = MappingProxyType({
    DigDex.Blake3_256: Sizage(hs=1, ss=0, ls=0, fs=44),
    DigDex.Blake2b_256: Sizage(hs=1, ss=0, ls=0, fs=44),
    DigDex.SHA3_256: Sizage(hs=1, ss=0, ls=0, fs=44),
    DigDex.SHA2_256: Sizage(hs=1, ss=0, ls=0, fs=44),
})


def size_of(code: str) -> Sizage:
    """Return the :class:`Sizage` for *code*.

    Raises
    ------
    UnsupportedCodeError
        If *code* is not in :data:`SIZES`.
    """
    try:
        return SIZES[code]
    except KeyError:
        raise UnsupportedCodeError.for_code(code) from None
