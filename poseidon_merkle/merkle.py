"""Binary Merkle trees hashed with the Poseidon sponge."""

from collections.abc import Iterable
from dataclasses import dataclass

from .sponge import PoseidonSponge


def _digest(values: Iterable[int]) -> int:
    sponge = PoseidonSponge()
    sponge.update(values)
    return sponge.squeeze()


@dataclass
class MerkleTree:
    """Layers of a Merkle tree, level 0 being the leaves, and its root."""

    nodes: dict[int, list[int]]
    root: int

    @property
    def height(self) -> int:
        """Number of hashed levels above the leaves."""
        return len(self.nodes) - 1


def hash_leaves(leaves: Iterable[int]) -> list[int]:
    """Return the Poseidon hash of each leaf on its own."""
    return [_digest([leaf]) for leaf in leaves]


def build_tree(hashed_leaves: Iterable[int], height: int) -> MerkleTree:
    """Build ``height`` levels of pairwise hashes above the given leaves.

    The root is the first node of the top level. Raises ValueError if a level
    to be hashed has an odd number of nodes or if no root is left.
    """
    if height < 0:
        raise ValueError(f"height must not be negative, got {height}")
    layer = list(hashed_leaves)
    nodes = {0: layer}
    for level in range(1, height + 1):
        if len(layer) % 2:
            raise ValueError(
                f"level {level - 1} has an odd number of nodes ({len(layer)})"
            )
        layer = [_digest(pair) for pair in zip(layer[::2], layer[1::2])]
        nodes[level] = layer
    if not layer:
        raise ValueError("tree has no root: too few leaves for its height")
    return MerkleTree(nodes=nodes, root=layer[0])