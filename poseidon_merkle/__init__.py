"""Poseidon hashing over the BN254 scalar field and Merkle trees with membership proofs."""

__version__ = "0.1.0"
__all__ = ["constants", "params", "poseidon", "sponge", "merkle", "proof"]