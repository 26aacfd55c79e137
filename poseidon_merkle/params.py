"""Field helpers and round operations of the width-5 Poseidon permutation.

Field elements are plain ``int`` values in ``range(MODULUS)``. A permutation
state is a sequence of ``WIDTH`` such elements.
"""

from collections.abc import Sequence
from functools import lru_cache
import string

from .constants import (
    MDS_RAW,
    MODULUS,
    ROUND_CONSTANTS_COUNT,
    ROUND_CONSTANTS_RAW,
    SBOX_EXPONENT,
    SBOX_INV_EXPONENT,
    WIDTH,
)

_HEX_DIGITS = frozenset(string.hexdigits)
_WIDE_BYTES = 64


def hex_to_field(s: str) -> int:
    """Return the field element congruent to a 0x-prefixed big-endian hex string.

    Raises ValueError if the digits are not valid hex bytes or do not fit in
    64 bytes.
    """
    digits = s[2:]
    if len(digits) % 2 or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"invalid hex parameter: {s!r}")
    if len(digits) // 2 > _WIDE_BYTES:
        raise ValueError(f"hex parameter longer than {_WIDE_BYTES} bytes: {s!r}")
    return int(digits, 16) % MODULUS if digits else 0


def sbox(f: int) -> int:
    """Return ``f`` raised to the S-box exponent."""
    return pow(f, SBOX_EXPONENT, MODULUS)


def sbox_inv(f: int) -> int:
    """Return the element whose S-box image is ``f``."""
    return pow(f, SBOX_INV_EXPONENT, MODULUS)


@lru_cache(maxsize=None)
def round_constants() -> tuple[int, ...]:
    """Return all round constants as field elements, in round order."""
    constants = tuple(hex_to_field(raw) for raw in ROUND_CONSTANTS_RAW)
    if len(constants) != ROUND_CONSTANTS_COUNT:
        raise ValueError(
            f"expected {ROUND_CONSTANTS_COUNT} round constants, got {len(constants)}"
        )
    return constants


@lru_cache(maxsize=None)
def mds() -> tuple[tuple[int, ...], ...]:
    """Return the MDS matrix as rows of field elements."""
    return tuple(tuple(hex_to_field(item) for item in row) for row in MDS_RAW)


def _check_state(state: Sequence[int], name: str) -> None:
    if len(state) != WIDTH:
        raise ValueError(f"{name} must hold {WIDTH} elements, got {len(state)}")


def load_round_constants(round_index: int, round_consts: Sequence[int]) -> tuple[int, ...]:
    """Return the constants of the given round from a block of round constants.

    Raises IndexError if the block is too short for that round.
    """
    start = round_index * WIDTH
    chunk = tuple(round_consts[start:start + WIDTH])
    if round_index < 0 or len(chunk) != WIDTH:
        raise IndexError(f"no round constants for round {round_index}")
    return chunk


def apply_round_constants(state: Sequence[int], round_consts: Sequence[int]) -> tuple[int, ...]:
    """Add the round constants to the state (AddRoundConstants)."""
    _check_state(state, "state")
    _check_state(round_consts, "round constants")
    return tuple((value + const) % MODULUS for value, const in zip(state, round_consts))


def apply_mds(state: Sequence[int]) -> tuple[int, ...]:
    """Multiply the state by the MDS matrix (MixLayer)."""
    _check_state(state, "state")
    return tuple(
        sum(entry * value for entry, value in zip(row, state)) % MODULUS
        for row in mds()
    )