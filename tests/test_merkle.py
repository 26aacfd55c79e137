import random

import pytest

from poseidon_merkle.merkle import MerkleTree, build_tree, hash_leaves
from poseidon_merkle.constants import MODULUS
from poseidon_merkle.sponge import PoseidonSponge


def _hash(values):
    sponge = PoseidonSponge()
    sponge.update(values)
    return sponge.squeeze()


def _random_leaves(count, seed):
    rng = random.Random(seed)
    return [rng.randrange(MODULUS) for _ in range(count)]


def test_full_tree():
    hashed = hash_leaves(_random_leaves(5, seed=1))
    proof_hash = hash_leaves(_random_leaves(1, seed=2))[0]
    hashed.insert(2, proof_hash)
    while len(hashed) & (len(hashed) - 1):
        hashed.append(0)
    tree = build_tree(hashed, 3)
    assert [len(tree.nodes[level]) for level in range(4)] == [8, 4, 2, 1]
    assert tree.height == 3
    assert tree.root == tree.nodes[3][0]
    assert tree.nodes[1][1] == _hash([hashed[2], hashed[3]])
    assert tree.root == _hash(tree.nodes[2])


def test_half_tree():
    hashed = hash_leaves(_random_leaves(2, seed=3))
    hashed.insert(2, hash_leaves(_random_leaves(1, seed=4))[0])
    while len(hashed) < 2**5:
        hashed.append(0)
    tree = build_tree(hashed, 5)
    assert [len(tree.nodes[level]) for level in range(6)] == [32, 16, 8, 4, 2, 1]
    assert tree.root == _hash(tree.nodes[4])


def test_empty_tree():
    tree = build_tree([0] * 8, 3)
    for level in range(4):
        assert len(set(tree.nodes[level])) == 1
    assert tree.nodes[1][0] == _hash([0, 0])
    assert tree.root == _hash([tree.nodes[2][0]] * 2)


def test_hash_leaves_hashes_each_leaf():
    leaves = [3, 1, 4]
    assert hash_leaves(leaves) == [_hash([leaf]) for leaf in leaves]
    assert hash_leaves([]) == []


def test_leaves_are_level_zero():
    leaves = [1, 2, 3, 4]
    tree = build_tree(leaves, 2)
    assert tree.nodes[0] == leaves


def test_height_zero_root_is_first_leaf():
    tree = build_tree([42], 0)
    assert tree.root == 42
    assert tree.height == 0


def test_more_leaves_than_height_covers():
    tree = build_tree([1, 2, 3, 4, 5, 6, 7, 8], 2)
    assert len(tree.nodes[2]) == 2
    assert tree.root == tree.nodes[2][0]


def test_odd_layer_raises():
    with pytest.raises(ValueError):
        build_tree([1, 2, 3], 1)


def test_too_few_leaves_raises():
    with pytest.raises(ValueError):
        build_tree([1, 2], 3)


def test_empty_leaves_raise():
    with pytest.raises(ValueError):
        build_tree([], 3)


def test_negative_height_raises():
    with pytest.raises(ValueError):
        build_tree([1, 2], -1)


def test_tree_is_plain_data():
    tree = MerkleTree(nodes={0: [5]}, root=5)
    assert tree.height == 0
    assert tree == build_tree([5], 0)