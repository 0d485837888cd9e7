# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Self-Addressing Identifier (SAID) derivation, encoding and verification."""

__version__ = "0.1.0"

from saidify.b64 import b64_to_int, int_to_b64
from saidify.codes import DigDex, Sizage, SIZES, size_of
from saidify.digests import DIGESTS, digest
from saidify.exceptions import (
    DecodeError,
    EmptyCodeError,
    ErrorCode,
    InsufficientDigestLengthError,
    InsufficientRawBytesError,
    InvalidCodeSizeForPaddingError,
    InvalidVersionStringError,
    MissingDigestFieldError,
    MissingLabelError,
    MissingVersionFieldError,
    SAIDError,
    UnsupportedCodeError,
    UnsupportedKindError,
    VariableSizeUnsupportedError,
)
from saidify.matter import decode_qb64, decode_qb64b, qb64, qb64b, raw_size, validate_raw_size
from saidify.said import check, derive_said_bytes, saidify, verify
from saidify.serialization import dumps, serialize, sizeify
from saidify.versioning import (
    VRSN_1_0,
    VRSN_1_1,
    VRSN_2_0,
    Protocols,
    Serials,
    Smellage,
    Version,
    deversify,
    versify,
)

__all__ = [
    # SAID derivation
    "saidify",
    "derive_said_bytes",
    "verify",
    "check",
    # Qualified encoding
    "qb64",
    "qb64b",
    "decode_qb64",
    "decode_qb64b",
    "raw_size",
    "validate_raw_size",
    # Tables
    "DigDex",
    "Sizage",
    "SIZES",
    "size_of",
    "DIGESTS",
    "digest",
    # Serialization and versions
    "dumps",
    "serialize",
    "sizeify",
    "versify",
    "deversify",
    "Protocols",
    "Serials",
    "Smellage",
    "Version",
    "VRSN_1_0",
    "VRSN_1_1",
    "VRSN_2_0",
    # Base64
    "int_to_b64",
    "b64_to_int",
    # Errors
    "ErrorCode",
    "SAIDError",
    "MissingLabelError",
    "UnsupportedCodeError",
    "UnsupportedKindError",
    "MissingVersionFieldError",
    "InvalidVersionStringError",
    "InsufficientDigestLengthError",
    "InsufficientRawBytesError",
    "EmptyCodeError",
    "VariableSizeUnsupportedError",
    "InvalidCodeSizeForPaddingError",
    "MissingDigestFieldError",
    "DecodeError",
]
