"""
Deterministic randomness for doormat generation.

Two independent sources, both keyed by one integer seed:
  - a uniform stream: numpy PCG64 (numpy.random.Generator). Output depends only on
    the seed and the exact order of calls.
  - coherent 2D value noise: integer lattice values from a 32-bit hash mix, quintic
    fade interpolation, 4 octaves (lacunarity 2, gain 0.5) normalized to [0, 1).
    Stateless; keyed by a noise seed derived from the integer seed.

Visual reproducibility depends on both algorithms and on the call order used by
stripes.py and render/.
"""
from typing import Any, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

NOISE_OCTAVES = 4
NOISE_FALLOFF = 0.5

_MASK32 = 0xFFFFFFFF


def _hash_lattice(ix: np.ndarray, iy: np.ndarray, seed: int) -> np.ndarray:
    """32-bit integer mix of a lattice point; returns values in [0, 1)."""
    n = (ix * 374761393 + iy * 668265263 + seed * 362437) & _MASK32
    n = (n ^ 61) ^ (n >> 16)
    n = (n + (n << 3)) & _MASK32
    n = n ^ (n >> 4)
    n = (n * 0x27D4EB2D) & _MASK32
    n = n ^ (n >> 15)
    return n.astype(np.float64) / 2**32


def _fade(t: np.ndarray) -> np.ndarray:
    # Perlin fade curve
    return t * t * t * (t * (t * 6 - 15) + 10)


def value_noise_2d(x, y, seed: int) -> np.ndarray:
    """Single octave of smooth value noise in [0, 1). Accepts scalars or arrays."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    x0 = np.floor(x)
    y0 = np.floor(y)
    sx = _fade(x - x0)
    sy = _fade(y - y0)
    ix0 = x0.astype(np.int64)
    iy0 = y0.astype(np.int64)
    n00 = _hash_lattice(ix0, iy0, seed)
    n10 = _hash_lattice(ix0 + 1, iy0, seed)
    n01 = _hash_lattice(ix0, iy0 + 1, seed)
    n11 = _hash_lattice(ix0 + 1, iy0 + 1, seed)
    top = n00 + (n10 - n00) * sx
    bottom = n01 + (n11 - n01) * sx
    return top + (bottom - top) * sy


def fbm_2d(x, y, seed: int, octaves: int = NOISE_OCTAVES, falloff: float = NOISE_FALLOFF) -> np.ndarray:
    amp = 1.0
    freq = 1.0
    total = 0.0
    norm = 0.0
    for o in range(octaves):
        total = total + amp * value_noise_2d(np.multiply(x, freq), np.multiply(y, freq), seed + 1013 * o)
        norm += amp
        amp *= falloff
        freq *= 2.0
    return total / max(norm, 1e-9)


def _noise_seed(seed: int) -> int:
    """Noise seed derived from the integer seed; independent of the uniform stream."""
    return ((seed * 2654435761) ^ 0x9E3779B9) & 0x7FFFFFFF


class SeededRandom:
    """
    Single-consumer deterministic RNG passed explicitly into every stage needing randomness.
    Re-seeding with the same integer reproduces the same outputs for the same call sequence.
    """

    def __init__(self, seed: int = 0):
        self.seed(seed)

    def seed(self, n: int) -> None:
        """Reset both the uniform stream and the noise source."""
        self._seed = int(n)
        self._gen = np.random.Generator(np.random.PCG64(self._seed % (1 << 64)))
        self._noise_seed = _noise_seed(self._seed)

    @property
    def current_seed(self) -> int:
        return self._seed

    # --- uniform stream ---

    def uniform(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self._gen.random())

    def uniform_range(self, lo: float, hi: float) -> float:
        """Uniform float in [lo, hi)."""
        return lo + (hi - lo) * float(self._gen.random())

    def uniform_choice(self, sequence: Sequence[T]) -> T | None:
        """Uniform pick from a sequence; None when empty."""
        if not sequence:
            return None
        return sequence[int(self._gen.integers(len(sequence)))]

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """
        Pick one item with probability proportional to its weight, using a single uniform draw.
        Equivalent to comparing one roll against cumulative thresholds.
        """
        if not items:
            raise ValueError("weighted_choice needs at least one item")
        total = float(sum(weights))
        r = self.uniform() * total
        for item, w in zip(items, weights):
            if r < w:
                return item
            r -= w
        return items[-1]

    def jitter(self, shape: int | tuple[int, ...], amount: float) -> np.ndarray:
        """Batch of uniform deviates in [-amount, amount), drawn in row-major order."""
        return self._gen.uniform(-amount, amount, size=shape)

    # --- coherent noise ---

    def noise2d(self, x, y):
        """Seeded 2D coherent noise in [0, 1); nearby coordinates give close values."""
        v = fbm_2d(x, y, self._noise_seed)
        return float(v) if np.ndim(v) == 0 else v

    def noise1d(self, x):
        return self.noise2d(x, 0.0)

    # --- snapshots ---

    def get_state(self) -> dict[str, Any]:
        return {
            "seed": self._seed,
            "noise_seed": self._noise_seed,
            "bit_generator": self._gen.bit_generator.state,
        }

    def set_state(self, state: dict[str, Any]) -> None:
        self._seed = int(state["seed"])
        self._noise_seed = int(state["noise_seed"])
        bit_gen = np.random.PCG64()
        bit_gen.state = state["bit_generator"]
        self._gen = np.random.Generator(bit_gen)

    @classmethod
    def from_state(cls, state: dict[str, Any]) -> "SeededRandom":
        rng = cls.__new__(cls)
        rng.set_state(state)
        return rng
