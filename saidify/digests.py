# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.

"""Digest algorithm registry keyed by derivation code.

Maps each code in :data:`saidify.codes.DigDex` to the hash constructor
that produces its raw digest.  Blake3 comes from the ``blake3`` package;
the others are ``hashlib`` built-ins.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

import blake3

from saidify.codes import DigDex
from saidify.exceptions import UnsupportedCodeError

logger = logging.getLogger(__name__)

__all__ = [
    "Digestage",
    "DIGESTS",
    "digest",
]


@dataclass(frozen=True)
class Digestage:
    """Digest descriptor.

    Attributes
    ----------
    klas : callable
        Hash constructor taking the serialized bytes.
    name : str
        Human readable algorithm name.
    size : int, optional
        ``digest_size`` passed to the constructor, when it takes one.
    length : int, optional
        ``length`` passed to ``.digest()``, for extendable output hashes.
    """

    klas: Callable[..., Any]
    name: str
    size: Optional[int] = None
    length: Optional[int] = None


DIGESTS: Mapping[str, Digestage] = MappingProxyType({
    DigDex.Blake3_256: Digestage(klas=blake3.blake3, name="blake3-256"),
    DigDex.Blake2b_256: Digestage(klas=hashlib.blake2b, name="blake2b-256", size=32),
    DigDex.SHA3_256: Digestage(klas=hashlib.sha3_256, name="sha3-256"),
    DigDex.SHA2_256: Digestage(klas=hashlib.sha256, name="sha2-256"),
})


def digest(code: str, ser: bytes) -> bytes:
    """Digest *ser* with the algorithm named by *code*.

    Raises
    ------
    UnsupportedCodeError
        If *code* has no registered algorithm.
    """
    digestage = DIGESTS.get(code)
    if digestage is None:
        raise UnsupportedCodeError.for_code(code)

    ckwa: Dict[str, int] = {}
    if digestage.size:
        ckwa["digest_size"] = digestage.size
    dkwa: Dict[str, int] = {}
    if digestage.length:
        dkwa["length"] = digestage.length

    raw = digestage.klas(ser, **ckwa).digest(**dkwa)
    logger.debug("%s digest of %d bytes", digestage.name, len(ser))
    return raw
