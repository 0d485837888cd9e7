# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.

"""Version string (``v`` field) generation and parsing.

A version string carries protocol, protocol version, serialization kind
and the byte size of the serialized mapping.  Two dialects exist:

- **Dialect 1** (``KERI10JSON000000_``): 17 characters, hexadecimal
  version digits and a 6-hex-digit size, terminated by ``_``.
- **Dialect 2** (``KERICAAJSONAAAA.``): 16 characters, one Base64 major
  digit, two Base64 minor digits and a 4-digit Base64 size, terminated
  by ``.``.

Major versions below 2 are written in dialect 1, all others in dialect 2.

References
----------
- KERI spec §7 — Version String Field
- CESR spec §4 — Version 2 field map version string
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from saidify.b64 import b64_to_int, int_to_b64, int_to_hex
from saidify.exceptions import (
    DecodeError,
    InvalidVersionStringError,
    UnsupportedKindError,
)

__all__ = [
    "Protocols",
    "Serials",
    "Version",
    "VRSN_1_0",
    "VRSN_1_1",
    "VRSN_2_0",
    "Smellage",
    "VER1_FULL_SPAN",
    "VER1_TERM",
    "VER2_FULL_SPAN",
    "VER2_TERM",
    "VEREX",
    "rematch",
    "deversify",
    "versify",
]


class Protocols(str, Enum):
    KERI = "KERI"
    ACDC = "ACDC"


class Serials(str, Enum):
    JSON = "JSON"
    CBOR = "CBOR"
    MGPK = "MGPK"


@dataclass(frozen=True)
class Version:
    major: int = 1
    minor: int = 0


VRSN_1_0 = Version(1, 0)
VRSN_1_1 = Version(1, 1)
VRSN_2_0 = Version(2, 0)


class Smellage(NamedTuple):
    """Fields recovered from a version string."""

    proto: Protocols
    vrsn: Version
    kind: Serials
    size: int


# Dialect 1: KERI10JSON000123_
VER1_FULL_SPAN = 17
VER1_TERM = "_"
VER1_RAW_SIZE = 6
VEREX1 = (
    r"(?P<proto1>[A-Z]{4})(?P<major1>[0-9a-f])(?P<minor1>[0-9a-f])"
    r"(?P<kind1>[A-Z]{4})(?P<size1>[0-9a-f]{6})_"
)

# Dialect 2: KERICAAJSONAAAA.
VER2_FULL_SPAN = 16
VER2_TERM = "."
VER2_RAW_SIZE = 4
VEREX2 = (
    r"(?P<proto2>[A-Z]{4})(?P<major2>[0-9A-Za-z_-])(?P<minor2>[0-9A-Za-z_-]{2})"
    r"(?P<kind2>[A-Z]{4})(?P<size2>[0-9A-Za-z_-]{4})\."
)

VEREX = re.compile(f"{VEREX2}|{VEREX1}")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _proto_and_kind(proto: str, kind: str, full: str) -> tuple[Protocols, Serials]:
    try:
        protocol = Protocols(proto)
    except ValueError:
        raise InvalidVersionStringError(
            f"Invalid protocol {proto} in string = {full}"
        ) from None
    try:
        serial = Serials(kind)
    except ValueError:
        raise InvalidVersionStringError(
            f"Invalid serialization kind {kind} in string = {full}"
        ) from None
    return protocol, serial


def _parse_hex_fields(match: re.Match) -> Smellage:
    """Parse dialect 1 groups (hexadecimal version and size)."""
    full = match.group(0)
    proto, kind = _proto_and_kind(match.group("proto1"), match.group("kind1"), full)
    try:
        major = int(match.group("major1"), 16)
        minor = int(match.group("minor1"), 16)
        size = int(match.group("size1"), 16)
    except ValueError as e:
        raise InvalidVersionStringError(
            f"Invalid hex field in string = {full}: {e}"
        ) from e
    return Smellage(proto, Version(major, minor), kind, size)


def _parse_b64_fields(match: re.Match) -> Smellage:
    """Parse dialect 2 groups (Base64 version and size)."""
    full = match.group(0)
    proto, kind = _proto_and_kind(match.group("proto2"), match.group("kind2"), full)
    try:
        major = b64_to_int(match.group("major2"))
    except DecodeError as e:
        raise InvalidVersionStringError(
            f"Invalid major version in string = {full}: {e.message}"
        ) from e
    if major < 2:
        raise InvalidVersionStringError(
            f"Incompatible major version {major} with string = {full}"
        )
    try:
        minor = b64_to_int(match.group("minor2"))
        size = b64_to_int(match.group("size2"))
    except DecodeError as e:
        raise InvalidVersionStringError(
            f"Invalid Base64 field in string = {full}: {e.message}"
        ) from e
    return Smellage(proto, Version(major, minor), kind, size)


def rematch(match: re.Match) -> Smellage:
    """Dispatch a :data:`VEREX` match to its dialect's field parser."""
    full = match.group(0)
    if len(full) == VER2_FULL_SPAN and full.endswith(VER2_TERM):
        return _parse_b64_fields(match)
    if len(full) == VER1_FULL_SPAN and full.endswith(VER1_TERM):
        return _parse_hex_fields(match)
    raise InvalidVersionStringError(f"Invalid version string = {full}")


def deversify(vs: str) -> Smellage:
    """Parse a version string of either dialect.

    Returns
    -------
    Smellage
        ``(proto, vrsn, kind, size)``.

    Raises
    ------
    InvalidVersionStringError
        If *vs* does not hold a valid version string.
    """
    if not isinstance(vs, str):
        raise InvalidVersionStringError(
            f"Version string must be a str, got {type(vs).__name__}"
        )
    match = VEREX.search(vs)
    if not match:
        raise InvalidVersionStringError(f"Invalid version string = {vs}")
    return rematch(match)


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

def versify(
    proto: Protocols = Protocols.KERI,
    vrsn: Version = VRSN_1_0,
    kind: Serials = Serials.JSON,
    size: int = 0,
) -> str:
    """Generate a version string.

    Raises
    ------
    InvalidVersionStringError
        If the protocol is unknown or a field does not fit the width its
        dialect allows.
    UnsupportedKindError
        If *kind* is not a known serialization.
    """
    try:
        proto = Protocols(proto)
    except ValueError:
        raise InvalidVersionStringError(f"Invalid protocol = {proto!r}") from None
    try:
        kind = Serials(kind)
    except ValueError:
        raise UnsupportedKindError(
            f"Unsupported serialization kind = {kind!r}"
        ) from None
    if size < 0 or vrsn.major < 0 or vrsn.minor < 0:
        raise InvalidVersionStringError(
            f"Negative field in version {vrsn} size {size}"
        )

    if vrsn.major < 2:
        if vrsn.minor > 0xf or size > 0xffffff:
            raise InvalidVersionStringError(
                f"Version {vrsn.major}.{vrsn.minor} with size {size} "
                f"does not fit a version 1 string"
            )
        major = int_to_hex(vrsn.major)
        minor = int_to_hex(vrsn.minor)
        formatted_size = int_to_hex(size, VER1_RAW_SIZE)
        return f"{proto.value}{major}{minor}{kind.value}{formatted_size}{VER1_TERM}"

    if vrsn.major > 63 or vrsn.minor > 64 ** 2 - 1 or size > 64 ** VER2_RAW_SIZE - 1:
        raise InvalidVersionStringError(
            f"Version {vrsn.major}.{vrsn.minor} with size {size} "
            f"does not fit a version 2 string"
        )
    major = int_to_b64(vrsn.major)
    minor = int_to_b64(vrsn.minor, 2)
    formatted_size = int_to_b64(size, VER2_RAW_SIZE)
    return f"{proto.value}{major}{minor}{kind.value}{formatted_size}{VER2_TERM}"
