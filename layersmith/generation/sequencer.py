"""Deterministic pseudo-random stream shared by every generation step.

The generator is ``ARC4-SEEDRANDOM/1``: the RC4 keystream construction used
by the widely deployed ``seedrandom`` library. The seed's text is mixed into
a key, the first 256 keystream bytes are discarded, and each float is built
from 48 keystream bits topped up byte-by-byte to a full 52-bit mantissa.
Given the same seed, the stream matches ``seedrandom(seed)`` exactly, so
collections stay reproducible across implementations.
"""

import logging


logger = logging.getLogger(__name__)

ALGORITHM = "ARC4-SEEDRANDOM/1"

_WIDTH = 256
_MASK = _WIDTH - 1
_CHUNKS = 6
_START_DENOM = _WIDTH**_CHUNKS  # 2 ** 48
_SIGNIFICANCE = 2**52
_OVERFLOW = 2**53


def _seed_text(seed: int | str) -> str:
    # Numbers get a trailing NUL so that 42 and "42" give different streams.
    if isinstance(seed, bool):
        raise TypeError("seed must be an int or str, not bool")
    if isinstance(seed, int):
        return f"{seed}\0"
    if isinstance(seed, str):
        return seed
    raise TypeError(f"seed must be an int or str, got {type(seed).__name__}")


def _utf16_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def _mix_key(text: str) -> list[int]:
    key: dict[int, int] = {}
    smear = 0
    for j, unit in enumerate(_utf16_units(text)):
        slot = j & _MASK
        smear ^= key.get(slot, 0) * 19
        key[slot] = (smear + unit) & _MASK
    return [key[i] for i in range(len(key))]


class _ARC4:
    """RC4 keystream with the initial 256 bytes discarded."""

    def __init__(self, key: list[int]) -> None:
        if not key:
            key = [0]
        keylen = len(key)
        s = list(range(_WIDTH))
        j = 0
        for i in range(_WIDTH):
            t = s[i]
            j = (j + key[i % keylen] + t) & _MASK
            s[i] = s[j]
            s[j] = t
        self._s = s
        self._i = 0
        self._j = 0
        self.take(_WIDTH)

    def take(self, count: int) -> int:
        """Return the next ``count`` keystream bytes as one big-endian int."""
        s = self._s
        i, j = self._i, self._j
        r = 0
        for _ in range(count):
            i = (i + 1) & _MASK
            t = s[i]
            j = (j + t) & _MASK
            s[i] = s[j]
            s[j] = t
            r = r * _WIDTH + s[(s[i] + t) & _MASK]
        self._i, self._j = i, j
        return r


class DeterministicSequencer:
    """Seeded stream of floats in [0, 1).

    Single consumer, strictly ordered: the order of ``next()`` calls is part
    of the reproducibility contract, so the sequencer is not thread-safe.

    Args:
        seed: Integer or string seed
    """

    algorithm = ALGORITHM

    def __init__(self, seed: int | str) -> None:
        self.seed = seed
        self._arc4 = _ARC4(_mix_key(_seed_text(seed)))
        self.draws = 0

    def next(self) -> float:
        n = self._arc4.take(_CHUNKS)
        d = _START_DENOM
        x = 0
        while n < _SIGNIFICANCE:
            n = (n + x) * _WIDTH
            d *= _WIDTH
            x = self._arc4.take(1)
        while n >= _OVERFLOW:
            n //= 2
            d //= 2
            x >>= 1
        self.draws += 1
        return (n + x) / d

    def next_index(self, bound: int) -> int:
        """Draw one value and scale it to an index in ``[0, bound)``."""
        return int(self.next() * bound)

    def __repr__(self) -> str:
        return f"DeterministicSequencer(seed={self.seed!r}, draws={self.draws})"
