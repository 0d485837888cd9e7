# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Result models printed by the saidify CLI."""

from typing import Optional

from pydantic import BaseModel, Field


class SaidResult(BaseModel):
    """A computed SAID."""

    said: str = Field(..., description="qb64 SAID")
    code: str = Field(..., description="Derivation code")
    algorithm: str = Field(..., description="Digest algorithm name")
    kind: str = Field(..., description="Serialization kind digested")
    label: str = Field(..., description="Field holding the SAID")


class VerifyResult(BaseModel):
    """Outcome of checking a SAIDified structure."""

    valid: bool
    expected: Optional[str] = Field(None, description="SAID being checked")
    computed: str = Field(..., description="SAID recomputed from the data")
    code: str
    kind: str
    label: str


class VersionResult(BaseModel):
    """Fields of a version string."""

    version_string: str
    protocol: str
    major: int
    minor: int
    kind: str
    size: int
    dialect: int = Field(..., description="1 for hex (_), 2 for Base64 (.)")
