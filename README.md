# poseidon_merkle

The Poseidon permutation and sponge over the BN254 scalar field (width 5, S-box x^5,
8 full and 60 partial rounds), and binary Merkle trees built on that hash, with
membership proofs.

Field elements are plain Python integers in `range(MODULUS)`, where
`poseidon_merkle.constants.MODULUS` is the BN254 scalar field prime. The package
has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Hashing

```python
from poseidon_merkle.poseidon import Poseidon, permute
from poseidon_merkle.sponge import PoseidonSponge

state = permute([0, 1, 2, 3, 4])     # five field elements in, five out
same = Poseidon((0, 1, 2, 3, 4)).permute()

sponge = PoseidonSponge()
sponge.update([1, 2, 3])
digest = sponge.squeeze()            # a single field element
```

`permute` and `Poseidon` raise `ValueError` unless given exactly five inputs. The
permutation runs four full rounds, sixty partial rounds with a single S-box, then
four more full rounds.

`PoseidonSponge` absorbs its pending inputs in chunks of five (the last chunk padded
with zeros), adding each chunk to its state and running the permutation once per
chunk; `squeeze` then clears the pending inputs and returns the first element of the
state. Squeezing with no pending inputs absorbs a single zero. The state carries over
from one squeeze to the next, so use a fresh sponge for an independent hash.

## Parameters

`poseidon_merkle.constants` holds the field modulus, the round counts, the S-box
exponent and its inverse, the MDS matrix (`MDS_RAW`) and the round constants
(`ROUND_CONSTANTS_RAW`), all as `0x`-prefixed hex strings. The round constants are
generated at import time with the Grain LFSR procedure for these parameters.

`poseidon_merkle.params` turns them into field elements and provides the round steps:

- `hex_to_field(s)`: the field element for a `0x`-prefixed big-endian hex string;
  raises `ValueError` for an odd number of digits, non-hex digits or more than 64 bytes.
- `round_constants()` and `mds()`: the constants and the matrix as integers (cached).
- `sbox(f)` and `sbox_inv(f)`: `f**5` and its inverse in the field.
- `load_round_constants(round_index, round_consts)`: the five constants of one round
  from a block; raises `IndexError` if the block is too short.
- `apply_round_constants(state, round_consts)` and `apply_mds(state)`: the
  AddRoundConstants and MixLayer steps; both raise `ValueError` for a state that is
  not five elements long.

## Merkle trees and proofs

```python
from poseidon_merkle.merkle import hash_leaves, build_tree
from poseidon_merkle.proof import find_path

height = 3
leaves = hash_leaves([11, 22, 33, 44, 55])
leaves += [0] * (2 ** height - len(leaves))   # pad the leaf layer to 2**height

tree = build_tree(leaves, height)
print(tree.root, tree.height)

proof = find_path(tree, leaves[2], height)
assert proof.verify(tree)
```

`hash_leaves` hashes each value on its own with a fresh sponge. `build_tree` hashes
adjacent pairs of nodes layer by layer, `height` times, and keeps every layer in
`MerkleTree.nodes`, keyed by level: level 0 holds the leaves, and `root` is the first
node of the top level. It raises `ValueError` for a negative height, for a level with
an odd number of nodes, or when no node is left for the root; padding the leaves to
`2**height` avoids all of these.

`find_path(tree, value_hash, height)` walks up from the leaf level: on each level it
takes the first node equal to the running hash, records it with its sibling as a pair,
and hashes that pair to get the running hash for the next level. The resulting
`Proof.path` holds one pair per level and ends with `(root, 0)`; a `height` larger than
the tree's leaves zero pairs between the last level and the root entry. It raises
`ValueError` if `height` is below the tree's height or the value is not found on some
level.

`Proof.verify(tree)` hashes the topmost recorded pair (the one just below the root
entry) and checks that it equals the tree's root. It raises `ValueError` for a proof
with no pairs to hash.

## What it does not do

This is a library only: there is no command-line tool. Trees and proofs live in
memory; there is no way to save or load them, and a tree cannot be updated in place
once built.