"""
Orientation Tracker

Per-cubicle twist (corners, mod 3) or flip (edges, mod 2) of the cubie
currently in that cubicle, relative to how the home cubie of the cubicle
would sit there.
"""

import numpy as np


class OrientationTracker:
    def __init__(self, size, modulus, values=None):
        self.modulus = modulus
        if values is None:
            self.values = np.zeros(size, dtype=np.uint8)
            return

        values = [int(v) for v in values]
        if len(values) != size:
            raise ValueError(f"Orientation vector needs {size} entries, got {len(values)}")
        for pos, v in enumerate(values):
            if not 0 <= v < modulus:
                raise ValueError(f"Invalid orientation {v} at position {pos} (must be in 0..{modulus - 1})")
        self.values = np.array(values, dtype=np.uint8)

    def __len__(self):
        return len(self.values)

    def __eq__(self, other):
        if not isinstance(other, OrientationTracker):
            return NotImplemented
        return self.modulus == other.modulus and np.array_equal(self.values, other.values)

    __hash__ = None

    def __repr__(self):
        return f"{tuple(int(v) for v in self.values)}"

    def copy(self):
        clone = OrientationTracker.__new__(OrientationTracker)
        clone.modulus = self.modulus
        clone.values = self.values.copy()
        return clone

    def get(self, position):
        return int(self.values[int(position)])

    def apply(self, swap_indices, addends):
        """
        Reindex then add, both from the pre-move vector:
            new[i] = (old[swap_indices[i]] + addends[i]) % modulus

        Args:
            swap_indices: permutation of 0..N-1 saying where each slot's value comes from
            addends: per-slot increments
        """
        addends = [int(a) for a in addends]
        for pos, a in enumerate(addends):
            if not 0 <= a < self.modulus:
                raise ValueError(f"Invalid addend {a} at position {pos} (must be in 0..{self.modulus - 1})")
        swap_indices = np.asarray(swap_indices, dtype=np.intp)
        addends = np.asarray(addends, dtype=np.uint8)
        size = len(self.values)
        if swap_indices.shape != (size,) or addends.shape != (size,):
            raise ValueError(f"Orientation update needs {size} swap indices and {size} addends")
        if not np.array_equal(np.sort(swap_indices), np.arange(size)):
            raise ValueError(f"Swap indices are not a permutation: {swap_indices.tolist()}")
        self._apply(swap_indices, addends)

    def _apply(self, swap_indices, addends):
        # Tables from MoveTables are already checked arrays
        self.values = (self.values[swap_indices] + addends) % self.modulus

    def is_zero(self):
        return not self.values.any()

    def total(self):
        """Sum of all entries mod the modulus; every legal move keeps this at 0."""
        return int(self.values.sum()) % self.modulus

    def as_list(self):
        return [int(v) for v in self.values]
