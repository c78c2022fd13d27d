"""
Module 01 - Schemas
File: verification.py

Purpose: Result format for cross-checking tree variants against each other.
"""

from pydantic import BaseModel, ConfigDict, Field

from .errors import MerkleError


class CrossCheckReport(BaseModel):
    """
    Outcome of building several tree variants from the same leaves and
    comparing their roots and proofs by hex digest.
    """

    model_config = ConfigDict(extra="forbid")

    algorithm: str = Field(..., min_length=1)
    leaf_count: int = Field(..., ge=0)
    variants: list[str] = Field(default_factory=list)
    roots: dict[str, str | None] = Field(
        default_factory=dict,
        description="Root hex per variant (None for an empty tree)",
    )
    proofs_checked: int = Field(default=0, ge=0)
    mismatches: list[MerkleError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every variant agreed on every root and proof."""
        return not self.mismatches

    def summary(self) -> dict:
        """Compact dict for CLI output."""
        return {
            "ok": self.ok,
            "algorithm": self.algorithm,
            "leaf_count": self.leaf_count,
            "roots": self.roots,
            "proofs_checked": self.proofs_checked,
            "mismatches": [m.message for m in self.mismatches],
        }


__all__ = ["CrossCheckReport"]
