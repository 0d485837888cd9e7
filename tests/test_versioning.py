# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Tests for version string generation and parsing (saidify.versioning).

Covers both dialects (hex ``_`` and Base64 ``.``), round trips, the
major-version minimum on the Base64 dialect, unknown protocol and kind
tags, and fields too wide for their dialect.
"""

from __future__ import annotations

import pytest

from saidify.exceptions import ErrorCode, InvalidVersionStringError, UnsupportedKindError
from saidify.versioning import (
    VER1_FULL_SPAN,
    VER2_FULL_SPAN,
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


class TestVersifyDialect1:
    """Major versions below 2: hex fields, 17 characters, ``_``."""

    def test_default(self):
        vs = versify()
        assert vs == "KERI10JSON000000_"
        assert len(vs) == VER1_FULL_SPAN

    @pytest.mark.parametrize(
        "proto,vrsn,kind,size,expected",
        [
            (Protocols.KERI, VRSN_1_0, Serials.JSON, 65, "KERI10JSON000041_"),
            (Protocols.ACDC, VRSN_1_0, Serials.JSON, 86, "ACDC10JSON000056_"),
            (Protocols.KERI, VRSN_1_0, Serials.CBOR, 255, "KERI10CBOR0000ff_"),
            (Protocols.KERI, VRSN_1_0, Serials.MGPK, 256, "KERI10MGPK000100_"),
            (Protocols.KERI, VRSN_1_1, Serials.JSON, 4095, "KERI11JSON000fff_"),
        ],
    )
    def test_literals(self, proto, vrsn, kind, size, expected):
        vs = versify(proto, vrsn, kind, size)
        assert vs == expected
        assert deversify(vs) == (proto, vrsn, kind, size)

    def test_size_too_large(self):
        with pytest.raises(InvalidVersionStringError):
            versify(Protocols.KERI, VRSN_1_0, Serials.JSON, 0x1000000)

    def test_minor_too_large(self):
        with pytest.raises(InvalidVersionStringError):
            versify(Protocols.KERI, Version(1, 16), Serials.JSON, 0)


class TestVersifyDialect2:
    """Major versions 2 and up: Base64 fields, 16 characters, ``.``."""

    def test_zero_size(self):
        vs = versify(Protocols.KERI, VRSN_2_0, Serials.JSON, 0)
        assert vs == "KERICAAJSONAAAA."
        assert len(vs) == VER2_FULL_SPAN

    @pytest.mark.parametrize(
        "proto,kind,size,expected",
        [
            (Protocols.KERI, Serials.JSON, 65, "KERICAAJSONAABB."),
            (Protocols.ACDC, Serials.CBOR, 86, "ACDCCAACBORAABW."),
            (Protocols.KERI, Serials.MGPK, 65, "KERICAAMGPKAABB."),
        ],
    )
    def test_literals(self, proto, kind, size, expected):
        vs = versify(proto, VRSN_2_0, kind, size)
        assert vs == expected
        assert deversify(vs) == (proto, VRSN_2_0, kind, size)

    def test_minor_version_base64(self):
        vs = versify(Protocols.ACDC, Version(2, 65), Serials.JSON, 0)
        assert vs == "ACDCCBBJSONAAAA."

    def test_size_too_large(self):
        with pytest.raises(InvalidVersionStringError):
            versify(Protocols.KERI, VRSN_2_0, Serials.JSON, 64 ** 4)


class TestRoundTrip:
    """deversify(versify(...)) recovers every representable tuple."""

    @pytest.mark.parametrize("proto", list(Protocols))
    @pytest.mark.parametrize("kind", list(Serials))
    @pytest.mark.parametrize(
        "vrsn",
        [Version(0, 0), VRSN_1_0, Version(1, 15), VRSN_2_0, Version(3, 7), Version(63, 4095)],
    )
    @pytest.mark.parametrize("size", [0, 1, 4095, 0xffffff])
    def test_round_trip(self, proto, kind, vrsn, size):
        vs = versify(proto, vrsn, kind, size)
        assert deversify(vs) == Smellage(proto, vrsn, kind, size)


class TestDeversify:
    def test_returns_named_fields(self):
        smellage = deversify("ACDC10JSON000056_")
        assert smellage.proto == Protocols.ACDC
        assert smellage.vrsn == VRSN_1_0
        assert smellage.kind == Serials.JSON
        assert smellage.size == 86

    def test_embedded_in_longer_text(self):
        """The version string is found inside surrounding text."""
        assert deversify('{"v":"KERI10JSON000041_"').size == 65

    def test_no_match(self):
        with pytest.raises(InvalidVersionStringError) as exc_info:
            deversify("not a version string")
        assert exc_info.value.code == ErrorCode.INVALID_VERSION_STRING

    def test_uppercase_hex_rejected(self):
        with pytest.raises(InvalidVersionStringError):
            deversify("KERI10JSON0000FF_")

    def test_unknown_protocol(self):
        with pytest.raises(InvalidVersionStringError):
            deversify("ABCD10JSON000000_")

    def test_unknown_kind(self):
        with pytest.raises(InvalidVersionStringError):
            deversify("KERI10YAML000000_")

    def test_unknown_kind_dialect2(self):
        with pytest.raises(InvalidVersionStringError):
            deversify("KERICAAYAMLAAAA.")

    def test_base64_dialect_rejects_major_below_2(self):
        """Base64 version strings must carry a major version of 2 or more."""
        with pytest.raises(InvalidVersionStringError) as exc_info:
            deversify("KERIBAAJSONAAAA.")
        assert "major" in exc_info.value.message

    def test_not_a_string(self):
        with pytest.raises(InvalidVersionStringError):
            deversify(None)  # type: ignore[arg-type]


class TestVersifyTags:
    """Unknown tags raise saidify errors, not bare ValueError."""

    def test_unknown_protocol(self):
        with pytest.raises(InvalidVersionStringError):
            versify("ABCD", VRSN_1_0, Serials.JSON, 0)  # type: ignore[arg-type]

    def test_unknown_kind(self):
        with pytest.raises(UnsupportedKindError) as exc_info:
            versify(Protocols.KERI, VRSN_1_0, "YAML", 0)  # type: ignore[arg-type]
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_KIND

    def test_string_tags_accepted(self):
        assert versify("ACDC", VRSN_1_0, "CBOR", 16) == "ACDC10CBOR000010_"  # type: ignore[arg-type]
