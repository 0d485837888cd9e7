# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.

"""Serialization dispatch and version-field sizing.

Serializes field maps to bytes by kind (JSON, CBOR, MGPK) and rewrites
the ``v`` version string so that its size field equals the byte length
of the final serialization.

Key order is never changed: the digest covers the serialized bytes, so
the insertion order of the caller's dict is part of the identifier.

References
----------
- KERI spec §7 — Version String Field
- KID0003 — Serialization
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Tuple

import cbor2
import msgpack

from saidify.exceptions import MissingVersionFieldError, UnsupportedKindError
from saidify.versioning import Protocols, Serials, Version, deversify, versify

logger = logging.getLogger(__name__)

__all__ = [
    "as_kind",
    "dumps",
    "serialize",
    "sizeify",
]


def as_kind(kind: Any) -> Serials:
    """Coerce *kind* (a :class:`Serials` or its string value) to Serials."""
    try:
        return Serials(kind)
    except ValueError:
        raise UnsupportedKindError(
            f"Unsupported serialization kind = {kind!r}"
        ) from None


def dumps(data: Dict[str, Any], kind: Serials = Serials.JSON) -> bytes:
    """Serialize *data* to bytes in the given *kind*.

    JSON is compact with no whitespace and keeps non-ASCII text as UTF-8.
    Floats keep Python's ``repr`` form, so ``1.0`` stays ``1.0``.

    Raises
    ------
    ValueError
        If a JSON value is ``NaN`` or infinite, which JSON cannot carry.
    UnsupportedKindError
        If *kind* is not a known serialization.
    """
    kind = as_kind(kind)
    if kind == Serials.JSON:
        return json.dumps(
            data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        ).encode("utf-8")
    if kind == Serials.CBOR:
        return cbor2.dumps(data)
    return msgpack.packb(data, use_bin_type=True)


def serialize(data: Dict[str, Any], kind: Optional[Serials] = None) -> bytes:
    """Serialize *data*, taking the kind from its ``v`` field if not given.

    Falls back to JSON when neither *kind* nor a version string is present.
    """
    if kind is None:
        kind = deversify(data["v"]).kind if "v" in data else Serials.JSON
    return dumps(data, kind)


def sizeify(
    data: Dict[str, Any],
    kind: Optional[Serials] = None,
) -> Tuple[bytes, Protocols, Serials, Dict[str, Any], Version]:
    """Size the ``v`` field of *data* to its own serialization.

    The mapping is serialized once to measure its length, the version
    string is regenerated with that size, and the mapping is serialized
    again.  Version strings are fixed width, so the second serialization
    has the measured length.

    Parameters
    ----------
    data : dict
        Field map holding a ``v`` version string.  Not mutated.
    kind : Serials, optional
        Serialization kind; overrides the kind in the version string.

    Returns
    -------
    tuple
        ``(raw, proto, kind, data, vrsn)`` where *raw* is the final
        serialization of the returned, resized *data*.

    Raises
    ------
    MissingVersionFieldError
        If *data* has no ``v`` field.
    InvalidVersionStringError
        If the ``v`` field cannot be parsed.
    """
    if "v" not in data:
        raise MissingVersionFieldError()

    proto, vrsn, knd, _ = deversify(data["v"])
    kind = knd if kind is None else as_kind(kind)

    work = dict(data)
    raw = dumps(work, kind)
    size = len(raw)

    work["v"] = versify(proto, vrsn, kind, size)
    raw = dumps(work, kind)
    logger.debug("sized %s %s field map to %d bytes", proto.value, kind.value, size)

    return raw, proto, kind, work, vrsn
