"""
Cube State

Coordinate-level model of a 3x3x3 cube:

    sigma  corner permutation   (cubicle -> cubie, 8 entries)
    tau    edge permutation     (cubicle -> cubie, 12 entries)
    x      corner orientation   (per cubicle, mod 3)
    y      edge orientation     (per cubicle, mod 2)

The cube is mutated only by applying one of the 12 quarter-turn operators at
a time. Sticker colors are never stored; get_face() derives them from the
four coordinates.
"""

from Cubies import Corner, Edge, Face, NUM_CORNERS, NUM_EDGES, corner_face, edge_face
from MoveNotation import parse_moves
from MoveTables import (
    CORNER_CYCLES,
    CORNER_ORIENTATION_ARRAYS,
    EDGE_CYCLES,
    EDGE_ORIENTATION_ARRAYS,
    Move,
)
from Orientation import OrientationTracker
from Permutation import PermutationTracker

# Corner cubicles on each face, clockwise from the top-left sticker
FACE_CORNERS = {
    Face.F: (Corner.UFL, Corner.URF, Corner.DFR, Corner.DLF),
    Face.R: (Corner.URF, Corner.UBR, Corner.DRB, Corner.DFR),
    Face.U: (Corner.ULB, Corner.UBR, Corner.URF, Corner.UFL),
    Face.B: (Corner.UBR, Corner.ULB, Corner.DBL, Corner.DRB),
    Face.L: (Corner.ULB, Corner.UFL, Corner.DLF, Corner.DBL),
    Face.D: (Corner.DLF, Corner.DFR, Corner.DRB, Corner.DBL),
}

# Edge cubicles on each face, clockwise from the top sticker
FACE_EDGES = {
    Face.F: (Edge.UF, Edge.RF, Edge.DF, Edge.LF),
    Face.R: (Edge.UR, Edge.RB, Edge.DR, Edge.RF),
    Face.U: (Edge.UB, Edge.UR, Edge.UF, Edge.UL),
    Face.B: (Edge.UB, Edge.LB, Edge.DB, Edge.RB),
    Face.L: (Edge.UL, Edge.LF, Edge.DL, Edge.LB),
    Face.D: (Edge.DF, Edge.DR, Edge.DB, Edge.DL),
}

# Row-major sticker index of the k-th corner / edge in the lists above
CORNER_SLOTS = (0, 2, 8, 6)
EDGE_SLOTS = (1, 5, 7, 3)
CENTER_SLOT = 4

# Face names used for facelet dictionaries (same order as the scanner input)
FACE_NAMES = ['up', 'down', 'front', 'back', 'left', 'right']
FACE_BY_NAME = {
    'up': Face.U,
    'down': Face.D,
    'front': Face.F,
    'back': Face.B,
    'left': Face.L,
    'right': Face.R,
}


def _cycle_indices(cycles):
    moves = []
    for cycle in cycles:
        sources = [int(p) for p in cycle]
        moves.append((sources, sources[1:] + sources[:1]))
    return tuple(moves)


_CORNER_MOVES = _cycle_indices(CORNER_CYCLES)
_EDGE_MOVES = _cycle_indices(EDGE_CYCLES)


class Cube:
    def __init__(self):
        # solved: identity permutations, zero orientations
        self.sigma = PermutationTracker(Corner)
        self.tau = PermutationTracker(Edge)
        self.x = OrientationTracker(NUM_CORNERS, 3)
        self.y = OrientationTracker(NUM_EDGES, 2)

    @classmethod
    def from_state(cls, corners, edges, corner_orientation=None, edge_orientation=None):
        """
        Build a cube from explicit coordinates.

        Args:
            corners: 8 corner cubies, in cubicle order
            edges: 12 edge cubies, in cubicle order
            corner_orientation: 8 values in {0, 1, 2} (default all 0)
            edge_orientation: 12 values in {0, 1} (default all 0)

        Raises:
            ValueError: if a permutation is not a bijection or an orientation is out of range
        """
        cube = cls()
        cube.sigma = PermutationTracker(Corner, [Corner(c) for c in corners])
        cube.tau = PermutationTracker(Edge, [Edge(e) for e in edges])
        if corner_orientation is not None:
            cube.x = OrientationTracker(NUM_CORNERS, 3, corner_orientation)
        if edge_orientation is not None:
            cube.y = OrientationTracker(NUM_EDGES, 2, edge_orientation)
        return cube

    def clone(self):
        new_cube = Cube.__new__(Cube)
        new_cube.sigma = self.sigma.copy()
        new_cube.tau = self.tau.copy()
        new_cube.x = self.x.copy()
        new_cube.y = self.y.copy()
        return new_cube

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return (self.sigma == other.sigma and self.tau == other.tau
                and self.x == other.x and self.y == other.y)

    __hash__ = None

    def __repr__(self):
        return f"σ = {self.sigma!r}\nτ = {self.tau!r}\nx = {self.x!r}\ny = {self.y!r}"

    def apply_move(self, move):
        """
        Apply one quarter turn.

        Args:
            move: a Move, or one of "F", "R", "U", "B", "L", "D" with an optional "'"

        Returns:
            self, so calls can be chained
        """
        m = Move.parse(move)

        sources, targets = _CORNER_MOVES[m]
        self.sigma._move(sources, targets)
        sources, targets = _EDGE_MOVES[m]
        self.tau._move(sources, targets)

        swap_indices, addends = CORNER_ORIENTATION_ARRAYS[m]
        self.x._apply(swap_indices, addends)
        swap_indices, addends = EDGE_ORIENTATION_ARRAYS[m]
        self.y._apply(swap_indices, addends)
        return self

    def apply_moves(self, moves):
        """Apply a notation string (e.g. "R2U'F") or an iterable of moves, in order."""
        if isinstance(moves, str):
            moves = parse_moves(moves)
        for m in moves:
            self.apply_move(m)
        return self

    def is_solved(self):
        return (self.sigma.is_identity() and self.tau.is_identity()
                and self.x.is_zero() and self.y.is_zero())

    def corner_orientation(self, corner):
        return self.x.get(Corner(corner))

    def edge_orientation(self, edge):
        return self.y.get(Edge(edge))

    def get_face(self, face):
        """
        Stickers visible on one face, row-major from the top-left.

        The top row is the first three entries, the middle row the next three,
        the bottom row the last three. Views follow the usual unfolded net:
        U is seen with B at its top edge, D with F at its top edge, and the
        four side faces with U at their top edge.
        """
        face = Face.parse(face)
        stickers = [face] * 9

        for k, cubicle in enumerate(FACE_CORNERS[face]):
            cubie = self.sigma.get(cubicle)
            stickers[CORNER_SLOTS[k]] = corner_face(cubicle, cubie, face, self.x.get(cubicle))

        for k, cubicle in enumerate(FACE_EDGES[face]):
            cubie = self.tau.get(cubicle)
            stickers[EDGE_SLOTS[k]] = edge_face(cubicle, cubie, face, self.y.get(cubicle))

        return stickers

    def to_facelets(self):
        """All six faces as {'up': 'UUUUUUUUU', ...}, keyed by FACE_NAMES."""
        return {
            name: ''.join(f.name for f in self.get_face(FACE_BY_NAME[name]))
            for name in FACE_NAMES
        }

    def solve(self, solver):
        """Ask `solver` for a solution, apply it to this cube, and return it."""
        moves = solver.find_solution(self)
        self.apply_moves(moves)
        return moves


def new_solved_cube():
    return Cube()


def apply_move(cube, move):
    """Apply `move` to `cube` in place and return the same cube."""
    return cube.apply_move(move)


def is_solved(cube):
    return cube.is_solved()


def get_face(cube, face):
    return cube.get_face(face)
