"""
Module 03 - Merkle Proof Wrapper Unit Tests
Tests for merkle_engine/merkle/merkle_proofs.py
"""
import pytest

from fixtures import h, make_items
from merkle_engine.crypto.hashing import HashlibHash, sha256, to_hex
from merkle_engine.merkle import (
    MerkleProof,
    MerkleProver,
    MerkleVerifier,
    build_tree,
)
from merkle_engine.schemas import ProofDocument, UnsupportedHashAlgorithmError


class TestMerkleProof:
    """Tests for the MerkleProof dataclass."""

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            MerkleProof(leaf=h(b"a"), index=-1, siblings=[], root=h(b"a"))

    def test_depth(self):
        proof = MerkleProof(leaf=h(b"a"), index=0, siblings=[h(b"b"), h(b"c")], root=b"r")

        assert proof.depth == 2

    def test_frozen(self):
        proof = MerkleProof(leaf=h(b"a"), index=0, siblings=[], root=h(b"a"))

        with pytest.raises(AttributeError):
            proof.index = 1


class TestMerkleProver:
    """Tests for MerkleProver."""

    def test_prove_item(self, tree_cls, abc_items):
        tree = tree_cls()
        tree.build(abc_items)

        proof = MerkleProver.prove(tree, b"b")

        assert proof.index == 1
        assert proof.leaf == h(b"b")
        assert proof.root == tree.get_root()
        assert proof.siblings == tree.generate_proof(b"b")

    def test_prove_missing_item(self, tree_cls, abc_items):
        tree = tree_cls()
        tree.build(abc_items)

        assert MerkleProver.prove(tree, b"z") is None

    def test_prove_index_out_of_range(self, tree_cls):
        tree = tree_cls()
        tree.build(make_items(3))

        assert MerkleProver.prove_index(tree, 3) is None

    def test_prove_empty_tree(self, tree_cls):
        tree = tree_cls()
        tree.build([])

        assert MerkleProver.prove(tree, b"a") is None
        assert MerkleProver.prove_index(tree, 0) is None

    def test_prove_index_for_duplicate(self, tree_cls):
        tree = tree_cls()
        tree.build([b"x", b"x"])

        assert MerkleProver.prove(tree, b"x").index == 0
        assert MerkleProver.prove_index(tree, 1).index == 1


class TestMerkleVerifier:
    """Tests for MerkleVerifier."""

    def test_verify_bundled_proof(self, tree_cls):
        tree = tree_cls()
        tree.build(make_items(9))

        for index in range(9):
            proof = MerkleProver.prove_index(tree, index)
            assert MerkleVerifier.verify(proof, tree.hash_function)

    def test_verify_detects_wrong_leaf(self):
        tree = build_tree(make_items(4))
        proof = MerkleProver.prove(tree, b"leaf1")
        forged = MerkleProof(leaf=sha256(b"forged"), index=1, siblings=proof.siblings, root=proof.root)

        assert not MerkleVerifier.verify(forged, tree.hash_function)

    def test_verify_item(self):
        tree = build_tree(make_items(4))
        siblings = tree.generate_proof(b"leaf2")

        assert MerkleVerifier.verify_item(b"leaf2", siblings, tree.get_root(), tree.hash_function)
        assert not MerkleVerifier.verify_item(b"leaf3", siblings, tree.get_root(), tree.hash_function)
        assert not MerkleVerifier.verify_item(b"leaf2", siblings, None, tree.hash_function)


class TestProofDocuments:
    """Tests for converting proofs to and from portable documents."""

    def _document(self, items=None, item=b"leaf3", algorithm="sha256", variant="layered"):
        items = items or make_items(6)
        hash_fn = HashlibHash(algorithm)
        tree = build_tree(items, variant, hash_fn)
        proof = MerkleProver.prove(tree, item)
        return tree, proof.to_document(item, hash_fn.name, variant)

    def test_to_document_fields(self):
        tree, document = self._document()

        assert document.algorithm == "sha256"
        assert document.variant == "layered"
        assert document.leaf_index == 3
        assert document.item_hex == b"leaf3".hex()
        assert document.leaf_hex == to_hex(h(b"leaf3"))
        assert document.root_hex == to_hex(tree.get_root())
        assert document.sibling_digests == tree.generate_proof(b"leaf3")

    def test_from_document(self):
        tree, document = self._document()
        proof = MerkleProof.from_document(document)

        assert proof == MerkleProver.prove(tree, b"leaf3")

    def test_verify_document(self):
        _, document = self._document(variant="linked")

        assert MerkleVerifier.verify_document(document)

    def test_verify_document_other_digest(self):
        _, document = self._document(algorithm="sha3_256")

        assert MerkleVerifier.verify_document(document)

    def test_verify_document_survives_json(self):
        _, document = self._document()

        assert MerkleVerifier.verify_document(ProofDocument.from_json(document.to_json()))

    def test_verify_document_against_trusted_root(self):
        tree, document = self._document()
        other = build_tree(make_items(5))

        assert MerkleVerifier.verify_document(document, root=tree.get_root())
        assert not MerkleVerifier.verify_document(document, root=other.get_root())

    def test_item_must_match_leaf(self):
        _, document = self._document()
        tampered = document.model_copy(update={"item_hex": b"leaf4".hex()})

        assert not MerkleVerifier.verify_document(tampered)

    def test_tampered_sibling(self):
        _, document = self._document()
        siblings = list(document.siblings)
        siblings[0] = to_hex(sha256(b"x"))
        tampered = document.model_copy(update={"siblings": siblings})

        assert not MerkleVerifier.verify_document(tampered)

    def test_unknown_algorithm(self):
        _, document = self._document()
        tampered = document.model_copy(update={"algorithm": "md6"})

        with pytest.raises(UnsupportedHashAlgorithmError):
            MerkleVerifier.verify_document(tampered)
