# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""SAID derivation exceptions mapped to error codes.

Every failure here is an input or programming error: none are transient
and none are retried.  ``verify`` reports a digest mismatch as ``False``
and only raises for structurally invalid input.
"""

from enum import Enum


class ErrorCode(str, Enum):
    MISSING_LABEL = "MISSING_LABEL"
    UNSUPPORTED_CODE = "UNSUPPORTED_CODE"
    UNSUPPORTED_KIND = "UNSUPPORTED_KIND"
    MISSING_VERSION_FIELD = "MISSING_VERSION_FIELD"
    INVALID_VERSION_STRING = "INVALID_VERSION_STRING"
    INSUFFICIENT_DIGEST_LENGTH = "INSUFFICIENT_DIGEST_LENGTH"
    INSUFFICIENT_RAW_BYTES = "INSUFFICIENT_RAW_BYTES"
    EMPTY_CODE = "EMPTY_CODE"
    VARIABLE_SIZE_UNSUPPORTED = "VARIABLE_SIZE_UNSUPPORTED"
    INVALID_CODE_SIZE_FOR_PADDING = "INVALID_CODE_SIZE_FOR_PADDING"
    MISSING_DIGEST_FIELD = "MISSING_DIGEST_FIELD"
    DECODE_ERROR = "DECODE_ERROR"


class SAIDError(Exception):
    """Base exception for SAID operations.

    Carries an error code from :class:`ErrorCode` alongside the message.
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class MissingLabelError(SAIDError):
    """The SAID label field is absent from the data being SAIDified."""

    def __init__(self, message: str = "Missing SAID label field"):
        super().__init__(ErrorCode.MISSING_LABEL, message)

    @classmethod
    def for_label(cls, label: str) -> "MissingLabelError":
        return cls(f"Missing id field labeled {label!r} in data")


class UnsupportedCodeError(SAIDError):
    """Derivation code is not in the size table or the digest registry."""

    def __init__(self, message: str = "Unsupported derivation code"):
        super().__init__(ErrorCode.UNSUPPORTED_CODE, message)

    @classmethod
    def for_code(cls, code: str) -> "UnsupportedCodeError":
        return cls(f"Unsupported digest algorithm code = {code!r}")


class UnsupportedKindError(SAIDError):
    """Serialization kind has no encoder."""

    def __init__(self, message: str = "Unsupported serialization kind"):
        super().__init__(ErrorCode.UNSUPPORTED_KIND, message)


class MissingVersionFieldError(SAIDError):
    """``sizeify`` was handed data without a ``v`` field."""

    def __init__(self, message: str = 'Missing version field "v" in data'):
        super().__init__(ErrorCode.MISSING_VERSION_FIELD, message)


class InvalidVersionStringError(SAIDError):
    """Version preamble cannot be parsed or generated."""

    def __init__(self, message: str = "Invalid version string"):
        super().__init__(ErrorCode.INVALID_VERSION_STRING, message)


class InsufficientDigestLengthError(SAIDError):
    """Digest output is shorter than the code's raw size."""

    def __init__(self, message: str = "Digest too short for derivation code"):
        super().__init__(ErrorCode.INSUFFICIENT_DIGEST_LENGTH, message)


class InsufficientRawBytesError(SAIDError):
    """Raw material is shorter than the code's raw size."""

    def __init__(self, message: str = "Not enough raw bytes for derivation code"):
        super().__init__(ErrorCode.INSUFFICIENT_RAW_BYTES, message)


class EmptyCodeError(SAIDError):
    def __init__(self, message: str = "Empty derivation code"):
        super().__init__(ErrorCode.EMPTY_CODE, message)


class VariableSizeUnsupportedError(SAIDError):
    """Soft-sized codes (``fs == -1``) are not supported."""

    def __init__(self, message: str = "Variable sized codes are not supported"):
        super().__init__(ErrorCode.VARIABLE_SIZE_UNSUPPORTED, message)


class InvalidCodeSizeForPaddingError(SAIDError):
    """Code size and pad size disagree, so qb64 would not be ``fs`` long."""

    def __init__(self, message: str = "Invalid code size for padding"):
        super().__init__(ErrorCode.INVALID_CODE_SIZE_FOR_PADDING, message)


class MissingDigestFieldError(SAIDError):
    """``verify`` was handed data without the SAID label field."""

    def __init__(self, message: str = "Missing digest field"):
        super().__init__(ErrorCode.MISSING_DIGEST_FIELD, message)


class DecodeError(SAIDError):
    """Base64URL text cannot be decoded."""

    def __init__(self, message: str = "Base64URL decode failed"):
        super().__init__(ErrorCode.DECODE_ERROR, message)
