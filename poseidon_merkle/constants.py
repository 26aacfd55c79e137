"""Parameters of the Poseidon permutation over the BN254 scalar field, width 5.

The round constants come from the Grain LFSR procedure of the Poseidon
reference parameter generator, run with a prime field, the x^5 S-box,
254-bit elements, width 5, 8 full rounds and 60 partial rounds. The MDS
matrix is the one produced by the same procedure.
"""

from collections import deque
from collections.abc import Iterator

MODULUS = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001
"""Order of the BN254 scalar field."""

WIDTH = 5
FULL_ROUNDS = 8
PARTIAL_ROUNDS = 60
FIELD_BITS = 254
SBOX_EXPONENT = 5

SBOX_INV_EXPONENT = sum(
    limb << (64 * position)
    for position, limb in enumerate(
        (
            14981214993055009997,
            6006880321387387405,
            10624953561019755799,
            2789598613442376532,
        )
    )
)
"""Inverse of 5 modulo MODULUS - 1: raising to it undoes the S-box."""

ROUND_CONSTANTS_COUNT = (FULL_ROUNDS + PARTIAL_ROUNDS) * WIDTH

_FIELD_TYPE_PRIME = 1
_SBOX_TYPE_POWER = 0
_WARMUP_STEPS = 160
_TAPS = (62, 51, 38, 23, 13, 0)


def _bits(value: int, width: int) -> list[int]:
    return [int(bit) for bit in format(value, f"0{width}b")]


def _grain_bits() -> Iterator[int]:
    """Yield the self-shrinking Grain LFSR output for these parameters."""
    state = deque(
        _bits(_FIELD_TYPE_PRIME, 2)
        + _bits(_SBOX_TYPE_POWER, 4)
        + _bits(FIELD_BITS, 12)
        + _bits(WIDTH, 12)
        + _bits(FULL_ROUNDS, 10)
        + _bits(PARTIAL_ROUNDS, 10)
        + [1] * 30,
        maxlen=80,
    )

    def step() -> int:
        bit = 0
        for tap in _TAPS:
            bit ^= state[tap]
        state.append(bit)
        return bit

    for _ in range(_WARMUP_STEPS):
        step()

    while True:
        keep = step()
        value = step()
        if keep:
            yield value


def _generate_round_constants() -> tuple[str, ...]:
    stream = _grain_bits()

    def draw() -> int:
        result = 0
        for _ in range(FIELD_BITS):
            result = (result << 1) | next(stream)
        return result

    constants = []
    while len(constants) < ROUND_CONSTANTS_COUNT:
        candidate = draw()
        while candidate >= MODULUS:
            candidate = draw()
        constants.append(f"0x{candidate:064x}")
    return tuple(constants)


ROUND_CONSTANTS_RAW: tuple[str, ...] = _generate_round_constants()
"""Round constants as 0x-prefixed big-endian hex strings, in round order."""

MDS_RAW: tuple[tuple[str, ...], ...] = (
    (
        "0x251e7fdf99591080080b0af133b9e4369f22e57ace3cd7f64fc6fdbcf38d7da1",
        "0x25fb50b65acf4fb047cbd3b1c17d97c7fe26ea9ca238d6e348550486e91c7765",
        "0x293d617d7da72102355f39ebf62f91b06deb5325f367a4556ea1e31ed5767833",
        "0x104d0295ab00c85e960111ac25da474366599e575a9b7edf6145f14ba6d3c1c4",
        "0x0aaa35e2c84baf117dea3e336cd96a39792b3813954fe9bf3ed5b90f2f69c977",
    ),
    (
        "0x2a70b9f1d4bbccdbc03e17c1d1dcdb02052903dc6609ea6969f661b2eb74c839",
        "0x281154651c921e746315a9934f1b8a1bba9f92ad8ef4b979115b8e2e991ccd7a",
        "0x28c2be2f8264f95f0b53c732134efa338ccd8fdb9ee2b45fb86a894f7db36c37",
        "0x21888041e6febd546d427c890b1883bb9b626d8cb4dc18dcc4ec8fa75e530a13",
        "0x14ddb5fada0171db80195b9592d8cf2be810930e3ea4574a350d65e2cbff4941",
    ),
    (
        "0x2f69a7198e1fbcc7dea43265306a37ed55b91bff652ad69aa4fa8478970d401d",
        "0x001c1edd62645b73ad931ab80e37bbb267ba312b34140e716d6a3747594d3052",
        "0x15b98ce93e47bc64ce2f2c96c69663c439c40c603049466fa7f9a4b228bfc32b",
        "0x12c7e2adfa524e5958f65be2fbac809fcba8458b28e44d9265051de33163cf9c",
        "0x2efc2b90d688134849018222e7b8922eaf67ce79816ef468531ec2de53bbd167",
    ),
    (
        "0x0c3f050a6bf5af151981e55e3e1a29a13c3ffa4550bd2514f1afd6c5f721f830",
        "0x0dec54e6dbf75205fa75ba7992bd34f08b2efe2ecd424a73eda7784320a1a36e",
        "0x1c482a25a729f5df20225815034b196098364a11f4d988fb7cc75cf32d8136fa",
        "0x2625ce48a7b39a4252732624e4ab94360812ac2fc9a14a5fb8b607ae9fd8514a",
        "0x07f017a7ebd56dd086f7cd4fd710c509ed7ef8e300b9a8bb9fb9f28af710251f",
    ),
    (
        "0x2a20e3a4a0e57d92f97c9d6186c6c3ea7c5e55c20146259be2f78c2ccc2e3595",
        "0x1049f8210566b51faafb1e9a5d63c0ee701673aed820d9c4403b01feb727a549",
        "0x02ecac687ef5b4b568002bd9d1b96b4bef357a69e3e86b5561b9299b82d69c8e",
        "0x2d3a1aea2e6d44466808f88c9ba903d3bdcb6b58ba40441ed4ebcf11bbe1e37b",
        "0x14074bb14c982c81c9ad171e4f35fe49b39c4a7a72dbb6d9c98d803bfed65e64",
    ),
)
"""MDS matrix rows as 0x-prefixed big-endian hex strings."""