"""The width-5 Poseidon permutation over the BN254 scalar field (Hades design)."""

from collections.abc import Sequence
from dataclasses import dataclass

from .constants import FULL_ROUNDS, PARTIAL_ROUNDS, WIDTH
from .params import (
    apply_mds,
    apply_round_constants,
    load_round_constants,
    round_constants,
    sbox,
)


def _full_round(state: tuple[int, ...], consts: tuple[int, ...]) -> tuple[int, ...]:
    state = apply_round_constants(state, consts)
    return apply_mds(tuple(sbox(value) for value in state))


def _partial_round(state: tuple[int, ...], consts: tuple[int, ...]) -> tuple[int, ...]:
    first, *rest = apply_round_constants(state, consts)
    return apply_mds((sbox(first), *rest))


def permute(inputs: Sequence[int]) -> tuple[int, ...]:
    """Return the Poseidon permutation of ``WIDTH`` field elements.

    Half of the full rounds run first, then the partial rounds with a single
    S-box, then the other half of the full rounds.
    """
    state = tuple(inputs)
    if len(state) != WIDTH:
        raise ValueError(f"Poseidon takes {WIDTH} inputs, got {len(state)}")

    half_full_rounds = FULL_ROUNDS // 2
    constants = round_constants()
    first_end = half_full_rounds * WIDTH
    second_end = first_end + PARTIAL_ROUNDS * WIDTH
    first_block = constants[:first_end]
    second_block = constants[first_end:second_end]
    third_block = constants[second_end:]

    for round_index in range(half_full_rounds):
        state = _full_round(state, load_round_constants(round_index, first_block))
    for round_index in range(PARTIAL_ROUNDS):
        state = _partial_round(state, load_round_constants(round_index, second_block))
    for round_index in range(half_full_rounds):
        state = _full_round(state, load_round_constants(round_index, third_block))
    return state


@dataclass(frozen=True)
class Poseidon:
    """A set of ``WIDTH`` inputs to the Poseidon permutation."""

    inputs: tuple[int, ...]

    def __post_init__(self) -> None:
        inputs = tuple(self.inputs)
        if len(inputs) != WIDTH:
            raise ValueError(f"Poseidon takes {WIDTH} inputs, got {len(inputs)}")
        object.__setattr__(self, "inputs", inputs)

    def permute(self) -> tuple[int, ...]:
        """Return the permutation of the inputs."""
        return permute(self.inputs)