"""
Module 01 - Schemas
File: proof.py

Purpose: Portable, hex-encoded inclusion proof document.

A ProofDocument carries everything an offline verifier needs: the digest
algorithm name, the item, its leaf digest, the sibling path and the root.
Any implementation that uses the same leaf ordering and digest can be
cross-checked against it by comparing hex strings.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ProofFormatError


PROOF_SCHEMA_VERSION = "v1"

_HEX_RE = re.compile(r"^(?:[0-9a-f]{2})*$")


def _normalize_hex(value: str) -> str:
    value = value.strip().lower()
    if value.startswith("0x"):
        value = value[2:]
    if not _HEX_RE.match(value):
        raise ValueError(f"not an even-length hex string: {value[:16]!r}")
    return value


class ProofDocument(BaseModel):
    """
    Serializable inclusion proof for one item.

    All byte fields are lowercase hex without prefix; a ``0x`` prefix or
    uppercase digits are accepted on input and normalized.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default=PROOF_SCHEMA_VERSION)
    algorithm: str = Field(..., min_length=1, description="hashlib digest name")
    variant: str = Field(default="layered", description="Tree variant that produced the proof")
    leaf_index: int = Field(..., ge=0, description="Position of the leaf in the input ordering")
    item_hex: str = Field(..., description="The original item")
    leaf_hex: str = Field(..., description="Digest of the item")
    siblings: list[str] = Field(default_factory=list, description="Sibling digests, leaf to root")
    root_hex: str = Field(..., description="Root the proof commits to")

    @field_validator("schema_version")
    @classmethod
    def _check_schema_version(cls, v: str) -> str:
        if v != PROOF_SCHEMA_VERSION:
            raise ValueError(
                f"unsupported schema_version {v!r}, expected {PROOF_SCHEMA_VERSION!r}"
            )
        return v

    @field_validator("item_hex", "leaf_hex", "root_hex")
    @classmethod
    def _check_hex(cls, v: str) -> str:
        return _normalize_hex(v)

    @field_validator("root_hex")
    @classmethod
    def _check_root_present(cls, v: str) -> str:
        if not v:
            raise ValueError("root_hex must not be empty")
        return v

    @field_validator("siblings")
    @classmethod
    def _check_sibling_hex(cls, v: list[str]) -> list[str]:
        return [_normalize_hex(s) for s in v]

    @property
    def item(self) -> bytes:
        return bytes.fromhex(self.item_hex)

    @property
    def leaf(self) -> bytes:
        return bytes.fromhex(self.leaf_hex)

    @property
    def root(self) -> bytes:
        return bytes.fromhex(self.root_hex)

    @property
    def sibling_digests(self) -> list[bytes]:
        return [bytes.fromhex(s) for s in self.siblings]

    def to_json(self) -> str:
        """Serialize with stable key order and indentation."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, text: str) -> "ProofDocument":
        """
        Parse a proof document.

        Raises:
            ProofFormatError: If the text is not a valid proof document
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise ProofFormatError(
                f"Invalid proof document: {e.error_count()} error(s)",
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e


__all__ = [
    "PROOF_SCHEMA_VERSION",
    "ProofDocument",
]
