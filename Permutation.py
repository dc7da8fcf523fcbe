"""
Permutation Tracker

Maps each cubicle (fixed position) to the cubie (piece) currently sitting in
it. One tracker is used for the 8 corners and another for the 12 edges.

The mapping is stored as a fixed-length numpy array indexed by cubicle
ordinal, so perm[cubicle] == cubie. It is always a bijection.
"""

import numpy as np


def disjoint_cycle_decompose(mapping):
    """
    Split a permutation into its disjoint cycles, fixed points included.

    Args:
        mapping: sequence where mapping[position] is the piece in that position

    Returns:
        List of cycles (lists of positions), longest first. Each cycle is
        followed position -> piece, treating the piece as the next position.
    """
    cycles = []
    seen = set()
    for start in mapping:
        start = int(start)
        if start in seen:
            continue
        cycle = []
        current = start
        while current not in seen:
            seen.add(current)
            cycle.append(current)
            current = int(mapping[current])
        cycles.append(cycle)

    cycles.sort(key=len, reverse=True)
    return cycles


class PermutationTracker:
    """
    Cubicle -> cubie mapping for one kind of piece.

    Args:
        labels: IntEnum naming the positions (Corner or Edge)
        mapping: optional initial mapping; defaults to the identity
    """

    def __init__(self, labels, mapping=None):
        self.labels = labels
        size = len(labels)
        if mapping is None:
            self.map = np.arange(size, dtype=np.int8)
            return

        values = [int(v) for v in mapping]
        if len(values) != size:
            raise ValueError(f"{labels.__name__} permutation needs {size} entries, got {len(values)}")
        if sorted(values) != list(range(size)):
            raise ValueError(f"{labels.__name__} permutation is not a bijection: {values}")
        self.map = np.array(values, dtype=np.int8)

    def __len__(self):
        return len(self.map)

    def __eq__(self, other):
        if not isinstance(other, PermutationTracker):
            return NotImplemented
        return self.labels is other.labels and np.array_equal(self.map, other.map)

    __hash__ = None

    def __repr__(self):
        named = [[self.labels(p).name for p in cycle] for cycle in self.cycles()]
        return f"{named}"

    def copy(self):
        clone = PermutationTracker.__new__(PermutationTracker)
        clone.labels = self.labels
        clone.map = self.map.copy()
        return clone

    def get(self, cubicle):
        """Cubie currently in `cubicle`."""
        return self.labels(int(self.map[self.labels(cubicle)]))

    def apply_cycle(self, *cycle):
        """
        Move the cubie in cycle[i] to cycle[i+1], and the last one to cycle[0].

        The right-hand side is read with fancy indexing, which copies, so all
        four assignments see the old mapping.

        Raises:
            ValueError: unless the cycle names exactly 4 distinct cubicles
        """
        if len(cycle) == 1 and not isinstance(cycle[0], (int, np.integer)):
            cycle = tuple(cycle[0])
        sources = [int(self.labels(p)) for p in cycle]
        if len(sources) != 4 or len(set(sources)) != 4:
            raise ValueError(f"A face turn cycles 4 distinct cubicles, got {list(cycle)}")
        targets = sources[1:] + sources[:1]
        self._move(sources, targets)

    def _move(self, sources, targets):
        self.map[targets] = self.map[sources]

    def is_identity(self):
        return bool(np.array_equal(self.map, np.arange(len(self.map))))

    def cycles(self):
        """Disjoint cycles of the current mapping as lists of labels, longest first."""
        return [[self.labels(p) for p in cycle] for cycle in disjoint_cycle_decompose(self.map)]

    def parity(self):
        """0 for an even permutation, 1 for an odd one."""
        return sum(len(cycle) - 1 for cycle in disjoint_cycle_decompose(self.map)) % 2

    def as_list(self):
        return [self.labels(int(v)) for v in self.map]
