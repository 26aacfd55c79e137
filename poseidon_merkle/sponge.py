"""A sponge that absorbs field elements in chunks of ``WIDTH`` and squeezes one out."""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from .constants import MODULUS, WIDTH
from .poseidon import permute


def _chunks(values: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Yield ``WIDTH``-sized chunks of ``values``, the last padded with zeros."""
    for start in range(0, len(values), WIDTH):
        chunk = tuple(values[start:start + WIDTH])
        yield chunk + (0,) * (WIDTH - len(chunk))


@dataclass
class PoseidonSponge:
    """Collects inputs and hashes them with the Poseidon permutation.

    The internal state carries over from one squeeze to the next.
    """

    inputs: list[int] = field(default_factory=list)
    state: tuple[int, ...] = (0,) * WIDTH

    def update(self, inputs: Iterable[int]) -> None:
        """Append elements to the pending inputs."""
        self.inputs.extend(inputs)

    def squeeze(self) -> int:
        """Absorb the pending inputs, clear them and return the first state element.

        With no pending inputs a single zero is absorbed.
        """
        pending = self.inputs or [0]
        for chunk in _chunks(pending):
            absorbed = tuple(
                (value + current) % MODULUS for value, current in zip(chunk, self.state)
            )
            self.state = permute(absorbed)
        self.inputs.clear()
        return self.state[0]