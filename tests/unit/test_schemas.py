"""
Module 01 - Schema Unit Tests
Tests for merkle_engine/schemas: error taxonomy, proof documents and
cross-check reports.
"""
import json

import pytest
from pydantic import ValidationError

from merkle_engine.schemas import (
    PROOF_SCHEMA_VERSION,
    ConfigError,
    CrossCheckReport,
    ErrorCodes,
    MerkleError,
    MerkleException,
    ProofDocument,
    ProofFormatError,
    UnsupportedHashAlgorithmError,
)


DIGEST = "ab" * 32


def make_document(**overrides):
    data = {
        "algorithm": "sha256",
        "leaf_index": 0,
        "item_hex": "61",
        "leaf_hex": DIGEST,
        "siblings": [DIGEST],
        "root_hex": DIGEST,
    }
    data.update(overrides)
    return ProofDocument(**data)


class TestErrors:
    """Tests for the error models and exceptions."""

    def test_error_model_round_trip(self):
        error = MerkleError(code=ErrorCodes.ROOT_MISMATCH, message="roots differ", details={"a": 1})
        exc = error.to_exception()

        assert isinstance(exc, MerkleException)
        assert exc.code == ErrorCodes.ROOT_MISMATCH
        assert exc.to_error_model() == error

    def test_error_model_forbids_extra(self):
        with pytest.raises(ValidationError):
            MerkleError(code="X", message="m", unexpected=True)

    def test_exception_defaults(self):
        exc = MerkleException("boom")

        assert exc.code == "MERKLE_ERROR"
        assert exc.details == {}
        assert str(exc) == "boom"
        assert "boom" in repr(exc)

    def test_unsupported_hash(self):
        exc = UnsupportedHashAlgorithmError("md6")

        assert exc.algorithm == "md6"
        assert exc.code == ErrorCodes.UNSUPPORTED_HASH_ALGORITHM
        assert exc.details["algorithm"] == "md6"
        assert "md6" in str(exc)

    def test_subclass_codes(self):
        assert ProofFormatError("bad").code == ErrorCodes.PROOF_FORMAT_ERROR
        assert ConfigError("bad").code == ErrorCodes.CONFIG_ERROR
        assert isinstance(ConfigError("bad"), MerkleException)


class TestProofDocument:
    """Tests for ProofDocument validation and serialization."""

    def test_defaults(self):
        document = make_document()

        assert document.schema_version == PROOF_SCHEMA_VERSION
        assert document.variant == "layered"

    def test_unknown_schema_version_rejected(self):
        with pytest.raises(ValidationError):
            make_document(schema_version="v9")

    def test_from_json_unknown_schema_version(self):
        text = make_document().to_json().replace(f'"{PROOF_SCHEMA_VERSION}"', '"v9"')

        with pytest.raises(ProofFormatError):
            ProofDocument.from_json(text)

    def test_hex_normalized(self):
        document = make_document(root_hex="0X" + DIGEST.upper(), siblings=[" 0x" + DIGEST + " "])

        assert document.root_hex == DIGEST
        assert document.siblings == [DIGEST]

    def test_byte_accessors(self):
        document = make_document()

        assert document.item == b"a"
        assert document.leaf == bytes.fromhex(DIGEST)
        assert document.root == bytes.fromhex(DIGEST)
        assert document.sibling_digests == [bytes.fromhex(DIGEST)]

    def test_empty_item_allowed(self):
        assert make_document(item_hex="").item == b""

    @pytest.mark.parametrize("field,value", [
        ("root_hex", "abc"),
        ("root_hex", "zz"),
        ("root_hex", ""),
        ("root_hex", "0x"),
        ("leaf_hex", "xyz0"),
        ("siblings", ["0"]),
        ("leaf_index", -1),
        ("algorithm", ""),
    ])
    def test_invalid_fields(self, field, value):
        with pytest.raises(ValidationError):
            make_document(**{field: value})

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            make_document(comment="hi")

    def test_json_round_trip(self):
        document = make_document(variant="linked", leaf_index=4)
        text = document.to_json()

        assert json.loads(text)["variant"] == "linked"
        assert ProofDocument.from_json(text) == document

    def test_from_json_invalid(self):
        with pytest.raises(ProofFormatError) as exc_info:
            ProofDocument.from_json('{"algorithm": "sha256"}')

        assert exc_info.value.code == ErrorCodes.PROOF_FORMAT_ERROR
        assert exc_info.value.details["errors"]

    def test_from_json_not_json(self):
        with pytest.raises(ProofFormatError):
            ProofDocument.from_json("not json at all")


class TestCrossCheckReport:
    """Tests for CrossCheckReport."""

    def test_ok_without_mismatches(self):
        report = CrossCheckReport(algorithm="sha256", leaf_count=2, roots={"layered": DIGEST})

        assert report.ok
        assert report.summary() == {
            "ok": True,
            "algorithm": "sha256",
            "leaf_count": 2,
            "roots": {"layered": DIGEST},
            "proofs_checked": 0,
            "mismatches": [],
        }

    def test_not_ok_with_mismatch(self):
        report = CrossCheckReport(algorithm="sha256", leaf_count=2)
        report.mismatches.append(MerkleError(code=ErrorCodes.ROOT_MISMATCH, message="differ"))

        assert not report.ok
        assert report.summary()["mismatches"] == ["differ"]

    def test_negative_leaf_count_rejected(self):
        with pytest.raises(ValidationError):
            CrossCheckReport(algorithm="sha256", leaf_count=-1)
