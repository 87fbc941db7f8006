import numpy as np


class DatasetGenerator:
    """
    Reproducible integer datasets with one dominant value.

    `dominance` is the fraction of positions holding the dominant value;
    those positions are chosen at random and every other position draws a
    uniform value from [low, high] that is never the dominant value, so the
    dominant value is the mode whenever dominance is high enough.
    """
    def __init__(self, size, dominance=0.5, low=-1000, high=1000, seed=None):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        if not 0.0 <= dominance <= 1.0:
            raise ValueError(f"dominance must be within [0, 1], got {dominance}")
        if low > high:
            raise ValueError(f"low ({low}) must not exceed high ({high})")

        self.size = size
        self.dominance = dominance
        self.low = low
        self.high = high
        self.seed = seed
        self.rng = np.random.default_rng(seed)

        self.dominant_count = int(round(size * dominance))
        if low == high and self.dominant_count < size:
            raise ValueError("range [low, high] needs at least two values for non-dominant entries")

        self.dominant_value = int(self.rng.integers(low, high, endpoint=True))

    def generate(self):
        # 1. Background: uniform draws over [low, high] minus the dominant value
        #    (draw from a range one shorter and shift values at/above it up by one)
        others = self.size - self.dominant_count
        background = self.rng.integers(self.low, self.high, size=others, endpoint=False) if others else np.empty(0, dtype=np.int64)
        background = np.where(background >= self.dominant_value, background + 1, background)

        # 2. Pick the dominant positions
        positions = self.rng.choice(self.size, size=self.dominant_count, replace=False) if self.size else np.empty(0, dtype=np.int64)

        # 3. Assemble
        data = np.empty(self.size, dtype=np.int64)
        mask = np.zeros(self.size, dtype=bool)
        mask[positions] = True
        data[mask] = self.dominant_value
        data[~mask] = background
        return data.tolist()
