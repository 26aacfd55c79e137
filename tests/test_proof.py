import random

import pytest

from poseidon_merkle.constants import MODULUS
from poseidon_merkle.merkle import build_tree, hash_leaves
from poseidon_merkle.proof import Proof, find_path
from poseidon_merkle.sponge import PoseidonSponge


def _hash(values):
    sponge = PoseidonSponge()
    sponge.update(values)
    return sponge.squeeze()


def _random_leaves(count, seed):
    rng = random.Random(seed)
    return [rng.randrange(MODULUS) for _ in range(count)]


def _full_tree():
    hashed = hash_leaves(_random_leaves(5, seed=10))
    proof_hash = hash_leaves(_random_leaves(1, seed=11))[0]
    hashed.insert(2, proof_hash)
    while len(hashed) & (len(hashed) - 1):
        hashed.append(0)
    return build_tree(hashed, 3), proof_hash


def _half_tree():
    hashed = hash_leaves(_random_leaves(2, seed=12))
    proof_hash = hash_leaves(_random_leaves(1, seed=13))[0]
    hashed.insert(2, proof_hash)
    while len(hashed) < 2**5:
        hashed.append(0)
    return build_tree(hashed, 5), proof_hash


def test_full_tree():
    tree, proof_hash = _full_tree()
    proof = find_path(tree, proof_hash, 3)
    assert len(proof.path) == 4
    assert proof.verify(tree) is True


def test_half_tree():
    tree, proof_hash = _half_tree()
    proof = find_path(tree, proof_hash, 5)
    assert len(proof.path) == 6
    assert proof.verify(tree) is True


def test_path_ends_with_root():
    tree, proof_hash = _full_tree()
    proof = find_path(tree, proof_hash, 3)
    assert proof.path[3] == (tree.root, 0)
    assert proof.height == 3


def test_path_levels_chain_upwards():
    tree, proof_hash = _half_tree()
    proof = find_path(tree, proof_hash, 5)
    assert proof_hash in proof.path[0]
    for level in range(4):
        assert _hash(proof.path[level]) in proof.path[level + 1]
    assert _hash(proof.path[4]) == tree.root


def test_odd_index_takes_left_sibling():
    leaves = [1, 2, 3, 4]
    tree = build_tree(leaves, 2)
    proof = find_path(tree, 4, 2)
    assert proof.path[0] == (3, 4)
    assert proof.path[1] == (tree.nodes[1][0], tree.nodes[1][1])


def test_verify_against_other_tree_fails():
    tree, proof_hash = _full_tree()
    other = build_tree([0] * 8, 3)
    proof = find_path(tree, proof_hash, 3)
    assert proof.verify(other) is False


def test_missing_value_raises():
    tree = build_tree([1, 2, 3, 4], 2)
    with pytest.raises(ValueError):
        find_path(tree, 99, 2)


def test_height_below_tree_height_raises():
    tree, proof_hash = _full_tree()
    with pytest.raises(ValueError):
        find_path(tree, proof_hash, 2)


def test_larger_height_leaves_zero_pairs():
    tree = build_tree([1, 2, 3, 4], 2)
    proof = find_path(tree, 1, 4)
    assert proof.path[2] == (0, 0)
    assert proof.path[3] == (0, 0)
    assert proof.path[4] == (tree.root, 0)
    assert proof.verify(tree) is (_hash([0, 0]) == tree.root)


def test_verify_without_pairs_raises():
    tree = build_tree([7], 0)
    proof = find_path(tree, 7, 0)
    assert proof.path == ((tree.root, 0),)
    with pytest.raises(ValueError):
        proof.verify(tree)


def test_handmade_proof_verifies_by_top_pair():
    tree = build_tree([1, 2], 1)
    proof = Proof(path=((1, 2), (tree.root, 0)))
    assert proof.verify(tree) is True
    assert Proof(path=((2, 1), (tree.root, 0))).verify(tree) is False