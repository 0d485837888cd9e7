# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.

"""SAID derivation, injection and verification.

A self-addressing identifier (SAID) is computed over a field map whose
label field (``d`` by default) holds a placeholder of ``#`` characters
as long as the final qb64 SAID.  When the map carries a ``v`` version
string, its size field is set first, with the placeholder in place, so
the size is also correct once the real SAID replaces the placeholder.

Algorithm (matches keripy ``Saider.saidify``):

1. Copy the map and put ``'#' * fs`` at the label.
2. Resize the ``v`` field, if present.
3. Serialize (insertion order, compact JSON or CBOR/MGPK).
4. Digest with the algorithm named by the derivation code.
5. qb64 encode the digest with the code prefix.

References
----------
- KERI spec / KID0009 — SAID computation
- ToIP ACDC specification — Self-addressing data
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from saidify.config import DEFAULT_CODE, DEFAULT_KIND, DEFAULT_LABEL, PAD_CHARACTER
from saidify.codes import size_of
from saidify.digests import digest
from saidify.exceptions import (
    InsufficientDigestLengthError,
    MissingDigestFieldError,
    MissingLabelError,
)
from saidify.matter import qb64, raw_size
from saidify.serialization import as_kind, serialize, sizeify
from saidify.versioning import Serials

logger = logging.getLogger(__name__)

__all__ = [
    "check",
    "derive_said_bytes",
    "saidify",
    "verify",
]


def derive_said_bytes(
    data: Dict[str, Any],
    code: str = DEFAULT_CODE,
    kind: Optional[Serials] = DEFAULT_KIND,
    label: str = DEFAULT_LABEL,
) -> Tuple[bytes, Dict[str, Any]]:
    """Compute the raw SAID digest of *data*.

    Parameters
    ----------
    data : dict
        Field map containing *label*.  Not mutated.
    code : str
        Derivation code (default Blake3-256, ``E``).
    kind : Serials, optional
        Serialization kind.  ``None`` takes the kind from the ``v`` field,
        or JSON when there is none.
    label : str
        Field that holds the SAID.

    Returns
    -------
    tuple
        ``(raw, sad)``: the raw digest bytes and the copied map with the
        placeholder at *label* and a sized ``v`` field.

    Raises
    ------
    MissingLabelError
        If *label* is not a key of *data*.
    UnsupportedCodeError
        If *code* is unknown.
    InsufficientDigestLengthError
        If the digest is shorter than the code's raw size.
    """
    if label not in data:
        raise MissingLabelError.for_label(label)

    sad = dict(data)
    sizage = size_of(code)
    sad[label] = PAD_CHARACTER * sizage.fs

    if kind is not None:
        kind = as_kind(kind)
    if "v" in sad:
        _, _, kind, sad, _ = sizeify(sad, kind)

    ser = serialize(sad, kind)
    dig = digest(code, ser)

    rs = raw_size(code)
    if len(dig) < rs:
        raise InsufficientDigestLengthError(
            f"Digest of {len(dig)} bytes is shorter than {rs} bytes "
            f"required by code {code!r}"
        )

    logger.debug("derived %s SAID over %d serialized bytes", code, len(ser))
    return dig[:rs], sad


def saidify(
    data: Dict[str, Any],
    label: str = DEFAULT_LABEL,
    code: str = DEFAULT_CODE,
    kind: Optional[Serials] = DEFAULT_KIND,
) -> Tuple[str, Dict[str, Any]]:
    """Compute the SAID of *data* and inject it at *label*.

    Example::

        >>> said, sad = saidify({"d": "", "a": 1})
        >>> sad["d"] == said
        True

    Returns
    -------
    tuple
        ``(said, sad)``: the 44-character qb64 SAID and a copy of *data*
        with the SAID at *label* (and a sized ``v`` field, if present).
    """
    raw, sad = derive_said_bytes(data, code=code, kind=kind, label=label)
    said = qb64(raw, code)
    sad[label] = said
    return said, sad


def verify(
    sad: Dict[str, Any],
    said: Optional[str] = None,
    label: str = DEFAULT_LABEL,
    code: str = DEFAULT_CODE,
    kind: Optional[Serials] = DEFAULT_KIND,
    prefixed: bool = False,
    versioned: bool = False,
) -> bool:
    """Check that *sad* is self-addressed.

    The SAID is recomputed from *sad* with its label field swapped for the
    placeholder, then compared to *said* when given, else to ``sad[label]``.

    Parameters
    ----------
    sad : dict
        SAIDified field map.
    said : str, optional
        Expected SAID supplied by the caller.
    prefixed : bool
        Also require ``sad[label] == said``.
    versioned : bool
        Also require the ``v`` field to match its recomputed size.

    Returns
    -------
    bool
        ``True`` if every requested check passes.

    Raises
    ------
    MissingDigestFieldError
        If *label* is not a key of *sad*.
    """
    valid, _, _ = check(
        sad,
        said=said,
        label=label,
        code=code,
        kind=kind,
        prefixed=prefixed,
        versioned=versioned,
    )
    return valid


def check(
    sad: Dict[str, Any],
    said: Optional[str] = None,
    label: str = DEFAULT_LABEL,
    code: str = DEFAULT_CODE,
    kind: Optional[Serials] = DEFAULT_KIND,
    prefixed: bool = False,
    versioned: bool = False,
) -> Tuple[bool, str, Dict[str, Any]]:
    """Run the :func:`verify` checks and also return what was recomputed.

    Returns
    -------
    tuple
        ``(valid, computed, derived)``: the verdict, the recomputed qb64
        SAID and the placeholder map it was digested from.
    """
    if label not in sad:
        raise MissingDigestFieldError(f"Missing digest field labeled {label!r}")

    raw, derived = derive_said_bytes(sad, code=code, kind=kind, label=label)
    computed = qb64(raw, code)

    if prefixed and sad[label] != said:
        logger.debug("embedded SAID %r does not match expected %r", sad[label], said)
        return False, computed, derived

    if versioned and "v" in sad and sad["v"] != derived["v"]:
        logger.debug("version string %r does not match resized %r", sad["v"], derived["v"])
        return False, computed, derived

    expected = said if said is not None else sad[label]
    return expected == computed, computed, derived
