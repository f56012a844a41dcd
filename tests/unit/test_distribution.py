"""
Distribution Unit Tests
Tests for rewardtree/merkle/distribution.py

- normalize + build in one step
- address lookup, proof per address, parallel prove_all
- claim payloads and base-58 dumps
"""
import pytest

from fixtures.recipients import make_address, make_recipients
from rewardtree.config.runtime import MerkleConfig
from rewardtree.crypto.encoding import decode_digest, encode_digest
from rewardtree.merkle.distribution import (
    Distribution,
    proof_to_base58,
    roots_equal,
    tree_to_base58,
)
from rewardtree.merkle.merkle_proofs import verify_proof
from rewardtree.merkle.merkle_tree import build_merkle_tree
from rewardtree.merkle.normalizer import normalize
from rewardtree.schemas.errors import LeafIndexError, UnsortedInputError
from rewardtree.schemas.proof import ProofPayload


@pytest.fixture
def dist(recipients):
    return Distribution.from_recipients(recipients)


class TestConstruction:

    def test_root_matches_direct_build(self, recipients, dist):
        direct = build_merkle_tree(normalize(recipients))
        assert roots_equal(dist.root, direct.root)

    def test_counts(self, dist):
        assert dist.recipient_count == 5
        assert len(dist.recipients) == 8
        assert dist.tree.leaf_count == 8

    def test_root_b58(self, dist):
        assert decode_digest(dist.root_b58) == dist.root

    def test_validation_errors_propagate(self, recipients):
        with pytest.raises(UnsortedInputError):
            Distribution.from_recipients(list(reversed(recipients)))

    def test_config_is_used(self, recipients):
        plain = Distribution.from_recipients(recipients)
        separated = Distribution.from_recipients(recipients, MerkleConfig(domain_separation=True))
        assert not roots_equal(plain.root, separated.root)


class TestProofs:

    def test_index_of(self, recipients, dist):
        for i, r in enumerate(recipients):
            assert dist.index_of(r.address) == i

    def test_index_of_unknown(self, dist):
        with pytest.raises(LeafIndexError):
            dist.index_of(make_address(250))

    def test_placeholder_not_addressable(self, dist):
        with pytest.raises(LeafIndexError):
            dist.index_of(dist.recipients[-1].address)

    def test_prove_address(self, recipients, dist):
        target = recipients[3]
        proof = dist.prove_address(target.address)
        assert verify_proof(target, proof, dist.root)

    def test_prove_placeholder_index(self, dist):
        proof = dist.prove(7)
        assert verify_proof(dist.recipients[7], proof, dist.root)

    def test_prove_out_of_range(self, dist):
        with pytest.raises(LeafIndexError):
            dist.prove(8)

    def test_prove_all_in_order(self, recipients, dist):
        proofs = dist.prove_all(max_workers=4)

        assert len(proofs) == len(recipients)
        for r, proof in zip(recipients, proofs):
            assert verify_proof(r, proof, dist.root)

    def test_prove_all_matches_sequential(self, dist):
        parallel = dist.prove_all(max_workers=3)
        sequential = [dist.prove(i) for i in range(dist.recipient_count)]
        assert parallel == sequential

    @pytest.mark.slow
    def test_large_distribution(self):
        entries = make_recipients(200)
        dist = Distribution.from_recipients(entries)
        proofs = dist.prove_all()

        assert dist.tree.leaf_count == 256
        assert all(len(p) == 8 for p in proofs)
        assert all(verify_proof(r, p, dist.root) for r, p in zip(entries, proofs))


class TestPayloads:

    def test_claim_payload_fields(self, recipients, dist):
        payload = dist.claim_payload(2)

        assert payload.index == 2
        assert payload.address == recipients[2].address
        assert payload.amount == recipients[2].amount
        assert payload.usdc_amount == recipients[2].usdc_amount
        assert payload.root == dist.root_b58
        assert len(payload.proof) == len(payload.path) == 3

    def test_payload_dict_uses_wire_names(self, dist):
        data = dist.claim_payload(0).to_dict()

        assert "usdcAmount" in data
        assert "usdc_amount" not in data
        assert set(data) >= {"proof", "path"}

    def test_payload_round_trip(self, recipients, dist):
        data = dist.claim_payload_for(recipients[4].address).to_dict()
        payload = ProofPayload.model_validate(data)

        assert verify_proof(recipients[4], payload.to_proof(), dist.root)

    def test_claim_payloads(self, dist):
        payloads = dist.claim_payloads(max_workers=2)
        assert [p.index for p in payloads] == list(range(5))

    def test_payload_rejects_unknown_fields(self):
        with pytest.raises(ValueError):
            ProofPayload.model_validate({"proof": [], "path": [], "extra": 1})


class TestBase58Dumps:

    def test_tree_to_base58(self, dist):
        levels = tree_to_base58(dist.tree)

        assert [len(level) for level in levels] == [8, 4, 2, 1]
        assert levels[-1] == [dist.root_b58]

    def test_proof_to_base58(self, dist):
        proof = dist.prove(1)
        assert proof_to_base58(proof) == [encode_digest(s) for s in proof.siblings]

    def test_roots_equal(self, dist):
        assert roots_equal(dist.root, bytes(dist.root))
        assert not roots_equal(dist.root, bytes(32))
