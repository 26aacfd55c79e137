"""Membership paths through a Poseidon Merkle tree."""

from collections.abc import Iterable
from dataclasses import dataclass

from .merkle import MerkleTree
from .sponge import PoseidonSponge


def _digest(values: Iterable[int]) -> int:
    sponge = PoseidonSponge()
    sponge.update(values)
    return sponge.squeeze()


@dataclass(frozen=True)
class Proof:
    """Sibling pairs from the leaf level upwards, ending with ``(root, 0)``."""

    path: tuple[tuple[int, int], ...]

    @property
    def height(self) -> int:
        """Number of hashed pairs in the path."""
        return len(self.path) - 1

    def verify(self, tree: MerkleTree) -> bool:
        """Return whether the topmost pair of the path hashes to the tree's root.

        Raises ValueError for a proof with no hashed pairs.
        """
        if self.height < 1:
            raise ValueError("proof has no pairs to hash")
        return _digest(self.path[self.height - 1]) == tree.root


def find_path(tree: MerkleTree, value_hash: int, height: int) -> Proof:
    """Return the path from a hashed leaf up to the root of ``tree``.

    At each level the first node equal to the running hash is taken together
    with its sibling. Raises ValueError if ``height`` is below the tree's
    height or the value is not found on some level.
    """
    if height < tree.height:
        raise ValueError(
            f"proof height {height} is below the tree height {tree.height}"
        )
    path = [(0, 0)] * (height + 1)
    path[height] = (tree.root, 0)
    current = value_hash
    for level in range(tree.height):
        layer = tree.nodes[level]
        try:
            index = layer.index(current)
        except ValueError:
            raise ValueError(f"value not found on level {level}") from None
        start = index - index % 2
        pair = (layer[start], layer[start + 1])
        path[level] = pair
        current = _digest(pair)
    return Proof(path=tuple(path))