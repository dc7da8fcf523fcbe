"""
Move Tables

The 12 quarter-turn operators and the fixed data describing what each one
does to the cube:

  - a 4-cycle of corner cubicles and a 4-cycle of edge cubicles
    (the cubie in element i moves to element i+1, wrapping around)
  - a (swap_indices, addends) pair for the corner orientation vector and
    another for the edge orientation vector:
        new[i] = (old[swap_indices[i]] + addends[i]) % modulus

All tables are indexed by Move ordinal. See lemma 11.4 of Chen,
"Group Theory and the Rubik's Cube", for how the orientation addends arise.
"""

from enum import IntEnum

import numpy as np

from Cubies import Corner, Edge, Face


class Move(IntEnum):
    F = 0
    R = 1
    U = 2
    B = 3
    L = 4
    D = 5
    F_PRIME = 6
    R_PRIME = 7
    U_PRIME = 8
    B_PRIME = 9
    L_PRIME = 10
    D_PRIME = 11

    @property
    def face(self):
        return Face[self.name[0]]

    @property
    def is_prime(self):
        return self >= Move.F_PRIME

    @property
    def notation(self):
        return self.name[0] + ("'" if self.is_prime else "")

    @property
    def inverse(self):
        return INVERSE_MOVE[self]

    @classmethod
    def parse(cls, value):
        """
        Coerce a Move, an ordinal, or one of the 12 notation strings ("F", "F'", ...).

        Raises:
            ValueError: for anything outside the 12 operators
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return _BY_NOTATION[value.strip()]
            except KeyError:
                raise ValueError(f"Invalid move: {value!r}") from None
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Invalid move: {value!r}")
        return cls(int(value))

    def __str__(self):
        return self.notation


# Enumeration order used by the solver
MOVES = tuple(Move)

INVERSE_MOVE = {m: Move((m + 6) % 12) for m in Move}

_BY_NOTATION = {m.notation: m for m in Move}


C = Corner
E = Edge

CORNER_CYCLES = (
    (C.URF, C.DFR, C.DLF, C.UFL),  # F
    (C.UBR, C.DRB, C.DFR, C.URF),  # R
    (C.URF, C.UFL, C.ULB, C.UBR),  # U
    (C.ULB, C.DBL, C.DRB, C.UBR),  # B
    (C.UFL, C.DLF, C.DBL, C.ULB),  # L
    (C.DRB, C.DBL, C.DLF, C.DFR),  # D
    (C.URF, C.UFL, C.DLF, C.DFR),  # F'
    (C.UBR, C.URF, C.DFR, C.DRB),  # R'
    (C.URF, C.UBR, C.ULB, C.UFL),  # U'
    (C.ULB, C.UBR, C.DRB, C.DBL),  # B'
    (C.UFL, C.ULB, C.DBL, C.DLF),  # L'
    (C.DRB, C.DFR, C.DLF, C.DBL),  # D'
)

EDGE_CYCLES = (
    (E.UF, E.RF, E.DF, E.LF),  # F
    (E.UR, E.RB, E.DR, E.RF),  # R
    (E.UB, E.UR, E.UF, E.UL),  # U
    (E.UB, E.LB, E.DB, E.RB),  # B
    (E.UL, E.LF, E.DL, E.LB),  # L
    (E.DF, E.DR, E.DB, E.DL),  # D
    (E.UF, E.LF, E.DF, E.RF),  # F'
    (E.UR, E.RF, E.DR, E.RB),  # R'
    (E.UB, E.UL, E.UF, E.UR),  # U'
    (E.UB, E.RB, E.DB, E.LB),  # B'
    (E.UL, E.LB, E.DL, E.LF),  # L'
    (E.DF, E.DL, E.DB, E.DR),  # D'
)

_CO_NONE = (0, 0, 0, 0, 0, 0, 0, 0)
_EO_NONE = (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)

# (swap_indices, addends) for the corner orientation vector x
CORNER_ORIENTATION = (
    ((5, 0, 2, 3, 4, 6, 1, 7), (1, 2, 0, 0, 0, 2, 1, 0)),  # F
    ((0, 6, 1, 3, 4, 5, 7, 2), (0, 1, 2, 0, 0, 0, 2, 1)),  # R
    ((1, 2, 3, 0, 4, 5, 6, 7), _CO_NONE),                  # U
    ((0, 1, 7, 2, 3, 5, 6, 4), (0, 0, 1, 2, 1, 0, 0, 2)),  # B
    ((3, 1, 2, 4, 5, 0, 6, 7), (2, 0, 0, 1, 2, 1, 0, 0)),  # L
    ((0, 1, 2, 3, 7, 4, 5, 6), _CO_NONE),                  # D
    ((1, 6, 2, 3, 4, 0, 5, 7), (1, 2, 0, 0, 0, 2, 1, 0)),  # F'
    ((0, 2, 7, 3, 4, 5, 1, 6), (0, 1, 2, 0, 0, 0, 2, 1)),  # R'
    ((3, 0, 1, 2, 4, 5, 6, 7), _CO_NONE),                  # U'
    ((0, 1, 3, 4, 7, 5, 6, 2), (0, 0, 1, 2, 1, 0, 0, 2)),  # B'
    ((5, 1, 2, 0, 3, 4, 6, 7), (2, 0, 0, 1, 2, 1, 0, 0)),  # L'
    ((0, 1, 2, 3, 5, 6, 7, 4), _CO_NONE),                  # D'
)

# (swap_indices, addends) for the edge orientation vector y
EDGE_ORIENTATION = (
    ((0, 1, 7, 3, 4, 5, 2, 10, 8, 9, 6, 11), (0, 0, 1, 0, 0, 0, 1, 1, 0, 0, 1, 0)),  # F
    ((0, 6, 2, 3, 4, 1, 9, 7, 8, 5, 10, 11), _EO_NONE),                             # R
    ((3, 0, 1, 2, 4, 5, 6, 7, 8, 9, 10, 11), _EO_NONE),                             # U
    ((5, 1, 2, 3, 0, 8, 6, 7, 4, 9, 10, 11), (1, 0, 0, 0, 1, 1, 0, 0, 1, 0, 0, 0)),  # B
    ((0, 1, 2, 4, 11, 5, 6, 3, 8, 9, 10, 7), _EO_NONE),                             # L
    ((0, 1, 2, 3, 4, 5, 6, 7, 9, 10, 11, 8), _EO_NONE),                             # D
    ((0, 1, 6, 3, 4, 5, 10, 2, 8, 9, 7, 11), (0, 0, 1, 0, 0, 0, 1, 1, 0, 0, 1, 0)),  # F'
    ((0, 5, 2, 3, 4, 9, 1, 7, 8, 6, 10, 11), _EO_NONE),                             # R'
    ((1, 2, 3, 0, 4, 5, 6, 7, 8, 9, 10, 11), _EO_NONE),                             # U'
    ((4, 1, 2, 3, 8, 0, 6, 7, 5, 9, 10, 11), (1, 0, 0, 0, 1, 1, 0, 0, 1, 0, 0, 0)),  # B'
    ((0, 1, 2, 7, 3, 5, 6, 11, 8, 9, 10, 4), _EO_NONE),                             # L'
    ((0, 1, 2, 3, 4, 5, 6, 7, 11, 8, 9, 10), _EO_NONE),                             # D'
)


def _as_arrays(table):
    return tuple(
        (np.array(swap, dtype=np.intp), np.array(addends, dtype=np.uint8))
        for swap, addends in table
    )


# numpy copies of the orientation tables, ready for fancy indexing
CORNER_ORIENTATION_ARRAYS = _as_arrays(CORNER_ORIENTATION)
EDGE_ORIENTATION_ARRAYS = _as_arrays(EDGE_ORIENTATION)
