"""
Cubie Identifiers

Names for the six faces, the 8 corner cubicles and the 12 edge cubicles of a
3x3x3 cube. A cubie (physical piece) is named after the cubicle it occupies
when the cube is solved, so the same enumerations are used for both.

Face letters double as sticker colors: a sticker is "colored U" if it belongs
to the face that is on top when the cube is solved.
"""

from enum import IntEnum


class Face(IntEnum):
    F = 0
    R = 1
    U = 2
    B = 3
    L = 4
    D = 5

    @classmethod
    def parse(cls, value):
        """Look up a face by letter ('F') or ordinal; raises ValueError otherwise."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(f"Invalid face name: {value!r}") from None
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Invalid face: {value!r}")
        return cls(value)

    def __str__(self):
        return self.name


class Corner(IntEnum):
    UFL = 0
    URF = 1
    UBR = 2
    ULB = 3
    DBL = 4
    DLF = 5
    DFR = 6
    DRB = 7

    def __str__(self):
        return self.name


class Edge(IntEnum):
    UB = 0
    UR = 1
    UF = 2
    UL = 3
    LB = 4
    RB = 5
    RF = 6
    LF = 7
    DB = 8
    DR = 9
    DF = 10
    DL = 11

    def __str__(self):
        return self.name


NUM_CORNERS = len(Corner)
NUM_EDGES = len(Edge)

# Faces of each corner, clockwise, starting with the U/D face
CORNER_FACES = {
    Corner.UFL: (Face.U, Face.F, Face.L),
    Corner.URF: (Face.U, Face.R, Face.F),
    Corner.UBR: (Face.U, Face.B, Face.R),
    Corner.ULB: (Face.U, Face.L, Face.B),
    Corner.DBL: (Face.D, Face.B, Face.L),
    Corner.DLF: (Face.D, Face.L, Face.F),
    Corner.DFR: (Face.D, Face.F, Face.R),
    Corner.DRB: (Face.D, Face.R, Face.B),
}

EDGE_FACES = {
    Edge.UB: (Face.U, Face.B),
    Edge.UR: (Face.U, Face.R),
    Edge.UF: (Face.U, Face.F),
    Edge.UL: (Face.U, Face.L),
    Edge.LB: (Face.B, Face.L),
    Edge.RB: (Face.B, Face.R),
    Edge.RF: (Face.F, Face.R),
    Edge.LF: (Face.F, Face.L),
    Edge.DB: (Face.D, Face.B),
    Edge.DR: (Face.D, Face.R),
    Edge.DF: (Face.D, Face.F),
    Edge.DL: (Face.D, Face.L),
}


def decompose_corner(corner):
    return CORNER_FACES[Corner(corner)]


def decompose_edge(edge):
    return EDGE_FACES[Edge(edge)]


def orient_corner(corner, orientation):
    """
    Faces of a corner cubie after twisting it by `orientation` (0, 1 or 2).

    Element i of the result is the sticker that ends up on face i of the
    cubicle holding the cubie.
    """
    faces = decompose_corner(corner)
    if orientation == 0:
        return faces
    if orientation == 1:
        return (faces[1], faces[2], faces[0])
    if orientation == 2:
        return (faces[2], faces[0], faces[1])
    raise ValueError(f"Invalid corner orientation: {orientation!r}")


def orient_edge(edge, orientation):
    faces = decompose_edge(edge)
    if orientation == 0:
        return faces
    if orientation == 1:
        return (faces[1], faces[0])
    raise ValueError(f"Invalid edge orientation: {orientation!r}")


def corner_face(cubicle, cubie, face, orientation):
    """Sticker shown on `face` by the cubie sitting in corner `cubicle`."""
    oriented = orient_corner(cubie, orientation)
    faces = decompose_corner(cubicle)
    if face not in faces:
        raise ValueError(f"Corner {Corner(cubicle).name} does not touch face {Face(face).name}")
    return oriented[faces.index(face)]


def edge_face(cubicle, cubie, face, orientation):
    """Sticker shown on `face` by the cubie sitting in edge `cubicle`."""
    oriented = orient_edge(cubie, orientation)
    faces = decompose_edge(cubicle)
    if face not in faces:
        raise ValueError(f"Edge {Edge(cubicle).name} does not touch face {Face(face).name}")
    return oriented[faces.index(face)]
