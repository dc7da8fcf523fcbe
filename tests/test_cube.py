import pytest

from Cube import Cube, apply_move, get_face, is_solved, new_solved_cube
from Cubies import Corner, Edge, Face
from IDDFSSolver import NullSolver
from MoveTables import Move

F, R, U, B, L, D = Face.F, Face.R, Face.U, Face.B, Face.L, Face.D

ALL_MOVES = list(Move)


def test_default_solved():
    assert Cube().is_solved()
    assert is_solved(new_solved_cube())


@pytest.mark.parametrize("face", list(Face))
def test_solved_faces_are_uniform(face):
    assert Cube().get_face(face) == [face] * 9


@pytest.mark.parametrize("m", ALL_MOVES)
def test_single_move_unsolves(m):
    cube = Cube()
    cube.apply_move(m)
    assert not cube.is_solved()


@pytest.mark.parametrize("m", ALL_MOVES)
def test_four_quarter_turns_are_identity(m):
    cube = Cube()
    cube.apply_moves("RUF'DLB")
    before = cube.clone()
    for _ in range(4):
        cube.apply_move(m)
    assert cube == before


@pytest.mark.parametrize("m", ALL_MOVES)
def test_move_then_inverse_is_identity(m):
    cube = Cube()
    cube.apply_move(m)
    cube.apply_move(m.inverse)
    assert cube.is_solved()


@pytest.mark.parametrize("face", "FRUBLD")
def test_face_then_prime_notation(face):
    cube = Cube()
    cube.apply_moves(face + face + "'")
    assert cube.is_solved()


def test_move_and_unmove():
    cube = Cube()
    cube.apply_moves("FRUBLD")
    assert not cube.is_solved()
    cube.apply_moves("D'L'B'U'R'F'")
    assert cube.is_solved()


def test_permute_bottom_corners():
    cube = Cube()
    cube.apply_moves("R'UR'D2RU'R'D2R2")
    cube.apply_moves("R2D2RUR'D2RU'R")
    assert cube.is_solved()


def test_sexy_move_has_order_six():
    cube = Cube()
    for i in range(6):
        cube.apply_moves("RUR'U'")
        assert cube.is_solved() == (i == 5)


def test_permutations_stay_bijections():
    cube = Cube()
    cube.apply_moves("R2U'FLB2DRF'UUB'LD'")
    assert sorted(cube.sigma.as_list()) == list(Corner)
    assert sorted(cube.tau.as_list()) == list(Edge)


def test_moves_keep_orientation_and_parity_invariants():
    cube = Cube()
    for m in [Move.R, Move.F, Move.U_PRIME, Move.B, Move.L, Move.D, Move.F_PRIME, Move.B]:
        cube.apply_move(m)
        assert cube.x.total() == 0
        assert cube.y.total() == 0
        assert cube.sigma.parity() == cube.tau.parity()
        assert all(v in (0, 1, 2) for v in cube.x.as_list())
        assert all(v in (0, 1) for v in cube.y.as_list())


def test_orientation_after_f():
    cube = Cube().apply_move(Move.F)
    assert cube.corner_orientation(Corner.URF) == 2
    assert cube.corner_orientation(Corner.DFR) == 1
    assert cube.corner_orientation(Corner.UBR) == 0
    assert cube.edge_orientation(Edge.RF) == 1
    assert cube.edge_orientation(Edge.UR) == 0
    assert cube.sigma.get(Corner.URF) == Corner.UFL
    assert cube.tau.get(Edge.RF) == Edge.UF


def test_clone_is_independent():
    cube = Cube()
    clone = cube.clone()
    clone.apply_move(Move.R)
    assert cube.is_solved()
    assert cube != clone


def test_apply_move_accepts_notation_and_chains():
    cube = Cube()
    assert cube.apply_move("R") is cube
    assert apply_move(cube, "R'") is cube
    assert cube.is_solved()


@pytest.mark.parametrize("bad", ["R2", "X", "", 12, None])
def test_apply_move_rejects_unknown_moves(bad):
    with pytest.raises(ValueError):
        Cube().apply_move(bad)


def test_get_face_rejects_unknown_face():
    with pytest.raises(ValueError):
        Cube().get_face("X")
    with pytest.raises(ValueError):
        Cube().get_face(6)


@pytest.mark.parametrize("bad", [True, False, 1.0, None])
def test_face_parse_rejects_non_integers(bad):
    with pytest.raises(ValueError):
        Face.parse(bad)
    with pytest.raises(ValueError):
        Cube().get_face(bad)


def test_face_parse_accepts_ordinals():
    assert Face.parse(1) == Face.R
    assert Face.parse("u") == Face.U


def test_get_face_accepts_letters():
    cube = Cube().apply_move(Move.F)
    assert cube.get_face("R") == get_face(cube, Face.R)


def test_move_f():
    cube = Cube()
    cube.apply_moves("F")
    assert cube.get_face(F) == [F] * 9
    assert cube.get_face(R) == [U, R, R, U, R, R, U, R, R]
    assert cube.get_face(U) == [U, U, U, U, U, U, L, L, L]
    assert cube.get_face(B) == [B] * 9
    assert cube.get_face(L) == [L, L, D, L, L, D, L, L, D]
    assert cube.get_face(D) == [R, R, R, D, D, D, D, D, D]


def test_move_r():
    cube = Cube()
    cube.apply_moves("R")
    assert cube.get_face(F) == [F, F, D, F, F, D, F, F, D]
    assert cube.get_face(R) == [R] * 9
    assert cube.get_face(U) == [U, U, F, U, U, F, U, U, F]
    assert cube.get_face(B) == [U, B, B, U, B, B, U, B, B]
    assert cube.get_face(L) == [L] * 9
    assert cube.get_face(D) == [D, D, B, D, D, B, D, D, B]


def test_move_u():
    cube = Cube()
    cube.apply_moves("U")
    assert cube.get_face(F) == [R, R, R, F, F, F, F, F, F]
    assert cube.get_face(R) == [B, B, B, R, R, R, R, R, R]
    assert cube.get_face(U) == [U] * 9
    assert cube.get_face(B) == [L, L, L, B, B, B, B, B, B]
    assert cube.get_face(L) == [F, F, F, L, L, L, L, L, L]
    assert cube.get_face(D) == [D] * 9


def test_move_b():
    cube = Cube()
    cube.apply_moves("B")
    assert cube.get_face(F) == [F] * 9
    assert cube.get_face(R) == [R, R, D, R, R, D, R, R, D]
    assert cube.get_face(U) == [R, R, R, U, U, U, U, U, U]
    assert cube.get_face(B) == [B] * 9
    assert cube.get_face(L) == [U, L, L, U, L, L, U, L, L]
    assert cube.get_face(D) == [D, D, D, D, D, D, L, L, L]


def test_move_l():
    cube = Cube()
    cube.apply_moves("L")
    assert cube.get_face(F) == [U, F, F, U, F, F, U, F, F]
    assert cube.get_face(R) == [R] * 9
    assert cube.get_face(U) == [B, U, U, B, U, U, B, U, U]
    assert cube.get_face(B) == [B, B, D, B, B, D, B, B, D]
    assert cube.get_face(L) == [L] * 9
    assert cube.get_face(D) == [F, D, D, F, D, D, F, D, D]


def test_move_d():
    cube = Cube()
    cube.apply_moves("D")
    assert cube.get_face(F) == [F, F, F, F, F, F, L, L, L]
    assert cube.get_face(R) == [R, R, R, R, R, R, F, F, F]
    assert cube.get_face(U) == [U] * 9
    assert cube.get_face(B) == [B, B, B, B, B, B, R, R, R]
    assert cube.get_face(L) == [L, L, L, L, L, L, B, B, B]
    assert cube.get_face(D) == [D] * 9


def test_moved_faces():
    cube = Cube()
    cube.apply_moves("R2U'FLB2")

    assert cube.get_face(U) == [U, D, B, B, U, U, R, L, B]
    assert cube.get_face(R) == [U, F, U, U, R, L, U, R, L]
    assert cube.get_face(F) == [D, F, L, U, F, L, L, B, L]
    assert cube.get_face(D) == [F, R, F, F, D, U, D, D, B]
    assert cube.get_face(L) == [R, L, F, R, L, B, B, D, D]
    assert cube.get_face(B) == [R, B, F, D, B, F, D, R, R]


def test_every_color_shows_nine_times():
    cube = Cube().apply_moves("R2U'FLB2DRF'")
    stickers = [s for face in Face for s in cube.get_face(face)]
    for face in Face:
        assert stickers.count(face) == 9


def test_to_facelets():
    assert Cube().to_facelets() == {
        'up': 'UUUUUUUUU',
        'down': 'DDDDDDDDD',
        'front': 'FFFFFFFFF',
        'back': 'BBBBBBBBB',
        'left': 'LLLLLLLLL',
        'right': 'RRRRRRRRR',
    }
    assert Cube().apply_moves("F").to_facelets()['right'] == 'URRURRURR'


def test_from_state():
    moved = Cube().apply_moves("FR")
    rebuilt = Cube.from_state(moved.sigma.as_list(), moved.tau.as_list(),
                              moved.x.as_list(), moved.y.as_list())
    assert rebuilt == moved
    assert Cube.from_state(range(8), range(12)).is_solved()


def test_from_state_rejects_invalid_coordinates():
    with pytest.raises(ValueError):
        Cube.from_state([0] * 8, range(12))
    with pytest.raises(ValueError):
        Cube.from_state(range(8), range(12), [3] + [0] * 7)
    with pytest.raises(ValueError):
        Cube.from_state(range(8), range(12), None, [2] + [0] * 11)
    with pytest.raises(ValueError):
        Cube.from_state(range(8), range(11))


def test_solve_with_null_solver():
    cube = Cube().apply_moves("R")
    assert cube.solve(NullSolver()) == []
    assert not cube.is_solved()


def test_repr_shows_all_coordinates():
    text = repr(Cube().apply_moves("F"))
    assert "σ" in text and "τ" in text
    assert "x = (1, 2, 0, 0, 0, 2, 1, 0)" in text
