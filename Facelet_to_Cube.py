"""
Facelets -> Cube

Builds a Cube from the 54 visible stickers, the inverse of Cube.get_face().

Input is a dict keyed by 'up', 'down', 'front', 'back', 'left', 'right', each
holding 9 stickers in the same row-major layout get_face() produces (a flat
list, a 9-character string, or a 3x3 nested list). The sticker symbols are
arbitrary: whatever symbol sits in the center of a face is taken as that
face's color, so both face letters ("UUUUUUUUU") and color letters
("YYYYYYYYY") work.
"""

from Cube import (
    CENTER_SLOT,
    CORNER_SLOTS,
    EDGE_SLOTS,
    FACE_BY_NAME,
    FACE_CORNERS,
    FACE_EDGES,
    FACE_NAMES,
    Cube,
)
from Cubies import Corner, Edge, Face, decompose_corner, decompose_edge, orient_corner, orient_edge

# Standard scheme: U=Yellow, D=White, F=Blue, B=Green, L=Orange, R=Red
COLOR_SCHEME = {
    Face.U: 'Y',
    Face.D: 'W',
    Face.F: 'B',
    Face.B: 'G',
    Face.L: 'O',
    Face.R: 'R',
}

# Every (oriented sticker tuple) -> (cubie, orientation)
_CORNER_LOOKUP = {orient_corner(c, o): (c, o) for c in Corner for o in range(3)}
_EDGE_LOOKUP = {orient_edge(e, o): (e, o) for e in Edge for o in range(2)}


def _sticker_index(cubicles, slots, cubicle):
    return slots[cubicles.index(cubicle)]


# For each cubicle, where its stickers live: [(face, index in that face), ...]
# in the cubicle's own face order
CORNER_FACELETS = {
    c: [(f, _sticker_index(FACE_CORNERS[f], CORNER_SLOTS, c)) for f in decompose_corner(c)]
    for c in Corner
}
EDGE_FACELETS = {
    e: [(f, _sticker_index(FACE_EDGES[f], EDGE_SLOTS, e)) for f in decompose_edge(e)]
    for e in Edge
}


def format_face(face):
    """Flatten one face (string, flat list or 3x3 nested list) to 9 stickers."""
    if isinstance(face, str):
        flat = list(face)
    elif not isinstance(face, (list, tuple)):
        raise ValueError(f"A face must be a string or a list of stickers, got {type(face).__name__}")
    else:
        flat = []
        for item in face:
            if isinstance(item, (list, tuple)):
                flat.extend(item)
            else:
                flat.append(item)
    if len(flat) != 9:
        raise ValueError(f"A face needs 9 stickers, got {len(flat)}")
    return [str(s) for s in flat]


def format_facelets(cube_obj):
    """Normalize an input dict to {face_name: [9 stickers]}."""
    if not isinstance(cube_obj, dict):
        raise ValueError(f"Faces must be given as an object keyed by face name, got {type(cube_obj).__name__}")
    missing = [name for name in FACE_NAMES if name not in cube_obj]
    if missing:
        raise ValueError(f"Missing face(s): {', '.join(missing)}")
    return {name: format_face(cube_obj[name]) for name in FACE_NAMES}


def color_map(facelets):
    """Map each sticker symbol to a Face using the six centers."""
    centers = {name: facelets[name][CENTER_SLOT] for name in FACE_NAMES}
    if len(set(centers.values())) != 6:
        raise ValueError(f"Center stickers must be six distinct colors, got {centers}")
    return {symbol: FACE_BY_NAME[name] for name, symbol in centers.items()}


def facelet_to_piece(facelets):
    """
    Identify the cubie and orientation in every cubicle.

    Returns:
        (corners, corner_ori, edges, edge_ori), each in cubicle order
    """
    colors = color_map(facelets)

    def face_of(name, index):
        symbol = facelets[name][index]
        if symbol not in colors:
            raise ValueError(f"Unknown color {symbol!r} on {name}[{index}]")
        return colors[symbol]

    names = {face: name for name, face in FACE_BY_NAME.items()}

    corners, corner_ori = [], []
    for c in Corner:
        stickers = tuple(face_of(names[f], i) for f, i in CORNER_FACELETS[c])
        if stickers not in _CORNER_LOOKUP:
            raise ValueError(f"Impossible corner colors {[s.name for s in stickers]} at {c.name}")
        cubie, ori = _CORNER_LOOKUP[stickers]
        corners.append(cubie)
        corner_ori.append(ori)

    edges, edge_ori = [], []
    for e in Edge:
        stickers = tuple(face_of(names[f], i) for f, i in EDGE_FACELETS[e])
        if stickers not in _EDGE_LOOKUP:
            raise ValueError(f"Impossible edge colors {[s.name for s in stickers]} at {e.name}")
        cubie, ori = _EDGE_LOOKUP[stickers]
        edges.append(cubie)
        edge_ori.append(ori)

    for kind, pieces in (("corner", corners), ("edge", edges)):
        seen = set()
        for p in pieces:
            if p in seen:
                raise ValueError(f"The {p.name} {kind} appears more than once")
            seen.add(p)

    return corners, corner_ori, edges, edge_ori


def check_solvable(cube):
    """
    Raise ValueError unless `cube` can be reached from solved by face turns:
    corner twists sum to 0 mod 3, edge flips sum to 0 mod 2, and the corner
    and edge permutations have the same parity.
    """
    if cube.x.total() != 0:
        raise ValueError("Unsolvable cube: a single corner is twisted")
    if cube.y.total() != 0:
        raise ValueError("Unsolvable cube: a single edge is flipped")
    if cube.sigma.parity() != cube.tau.parity():
        raise ValueError("Unsolvable cube: two pieces are swapped")


def facelet_to_cube(cube_obj, check=True):
    facelets = format_facelets(cube_obj)
    corners, corner_ori, edges, edge_ori = facelet_to_piece(facelets)
    new_cube = Cube.from_state(corners, edges, corner_ori, edge_ori)
    if check:
        check_solvable(new_cube)
    return new_cube


def faces_to_colors(facelets, scheme=COLOR_SCHEME):
    """Translate face-letter stickers ('U', 'R', ...) to color letters."""
    return {
        name: ''.join(scheme[Face.parse(s)] for s in format_face(face))
        for name, face in facelets.items()
    }


def colors_to_faces(facelets, scheme=COLOR_SCHEME):
    """Translate color-letter stickers back to face letters."""
    reverse = {color: face for face, color in scheme.items()}
    result = {}
    for name, face in facelets.items():
        stickers = format_face(face)
        unknown = [s for s in stickers if s not in reverse]
        if unknown:
            raise ValueError(f"Unknown color(s) on {name}: {unknown}")
        result[name] = ''.join(reverse[s].name for s in stickers)
    return result
