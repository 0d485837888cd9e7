# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Tests for the derivation code table and digest registry.

Covers table invariants (Base64 quantization, lead sizes), parity between
the size table and the digest registry, and digest output against the
underlying hash libraries.
"""

from __future__ import annotations

import hashlib
from dataclasses import FrozenInstanceError

import blake3
import pytest

from saidify.codes import SIZES, DigDex, Sizage, size_of
from saidify.digests import DIGESTS, digest
from saidify.exceptions import ErrorCode, UnsupportedCodeError


class TestCodex:
    def test_codes(self):
        assert DigDex.Blake3_256 == "E"
        assert DigDex.Blake2b_256 == "F"
        assert DigDex.SHA3_256 == "H"
        assert DigDex.SHA2_256 == "I"

    def test_membership(self):
        assert "E" in DigDex
        assert "X" not in DigDex
        assert "Blake3_256" not in DigDex

    def test_codex_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DigDex.Blake3_256 = "X"  # type: ignore[misc]


class TestSizeTable:
    """Static invariants every code must satisfy."""

    def test_full_size_quantized(self, code):
        sizage = size_of(code)
        assert sizage.fs % 4 == 0
        assert sizage.fs % 4 != 3

    def test_fixed_size_only(self, code):
        sizage = size_of(code)
        assert sizage.ss == 0
        assert sizage.ls in (0, 1, 2)
        assert sizage.hs == len(code)

    def test_every_code_is_44_chars(self, code):
        assert size_of(code) == Sizage(hs=1, ss=0, ls=0, fs=44)

    def test_unknown_code(self):
        with pytest.raises(UnsupportedCodeError) as exc_info:
            size_of("X")
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_CODE

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SIZES["X"] = Sizage(hs=1, ss=0, ls=0, fs=44)  # type: ignore[index]


class TestDigestRegistry:
    """Registry parity with the size table and with the hash libraries."""

    def test_registry_matches_size_table(self):
        assert set(DIGESTS) == set(SIZES) == set(DigDex)

    def test_digest_is_32_bytes(self, code):
        assert len(digest(code, b"abc")) == 32

    def test_blake3(self):
        assert digest("E", b"abc") == blake3.blake3(b"abc").digest()

    def test_blake2b_256(self):
        assert digest("F", b"abc") == hashlib.blake2b(b"abc", digest_size=32).digest()

    def test_sha3_256(self):
        assert digest("H", b"abc") == hashlib.sha3_256(b"abc").digest()

    def test_sha2_256(self):
        assert digest("I", b"abc") == hashlib.sha256(b"abc").digest()

    def test_algorithms_differ(self):
        digests = {digest(code, b"same input") for code in DigDex}
        assert len(digests) == len(DIGESTS)

    def test_unknown_code(self):
        with pytest.raises(UnsupportedCodeError):
            digest("X", b"abc")
