import pytest

from Cubies import Corner, Edge
from Permutation import PermutationTracker, disjoint_cycle_decompose


def test_starts_as_identity():
    perm = PermutationTracker(Corner)
    assert perm.is_identity()
    assert len(perm) == 8
    for c in Corner:
        assert perm.get(c) == c
    assert perm.parity() == 0


def test_identity_cycles_are_fixed_points():
    cycles = PermutationTracker(Edge).cycles()
    assert len(cycles) == 12
    assert all(len(c) == 1 for c in cycles)


def test_apply_cycle_moves_each_piece_forward():
    perm = PermutationTracker(Corner)
    perm.apply_cycle(Corner.UFL, Corner.URF, Corner.UBR, Corner.ULB)

    assert perm.get(Corner.URF) == Corner.UFL
    assert perm.get(Corner.UBR) == Corner.URF
    assert perm.get(Corner.ULB) == Corner.UBR
    assert perm.get(Corner.UFL) == Corner.ULB
    # untouched cubicles keep their cubies
    assert perm.get(Corner.DRB) == Corner.DRB


def test_apply_cycle_accepts_a_sequence():
    a = PermutationTracker(Edge)
    b = PermutationTracker(Edge)
    a.apply_cycle(Edge.UF, Edge.RF, Edge.DF, Edge.LF)
    b.apply_cycle([Edge.UF, Edge.RF, Edge.DF, Edge.LF])
    assert a == b


def test_apply_cycle_keeps_a_bijection():
    perm = PermutationTracker(Edge)
    perm.apply_cycle(Edge.UB, Edge.UR, Edge.UF, Edge.UL)
    perm.apply_cycle(Edge.UF, Edge.RF, Edge.DF, Edge.LF)
    assert sorted(perm.as_list()) == list(Edge)


def test_four_cycles_return_to_identity():
    perm = PermutationTracker(Corner)
    for _ in range(3):
        perm.apply_cycle(Corner.URF, Corner.DFR, Corner.DLF, Corner.UFL)
        assert not perm.is_identity()
    perm.apply_cycle(Corner.URF, Corner.DFR, Corner.DLF, Corner.UFL)
    assert perm.is_identity()


def test_four_cycle_is_odd():
    perm = PermutationTracker(Corner)
    perm.apply_cycle(Corner.UFL, Corner.URF, Corner.UBR, Corner.ULB)
    assert perm.parity() == 1

    cycles = perm.cycles()
    assert len(cycles) == 5
    assert len(cycles[0]) == 4
    assert set(cycles[0]) == {Corner.UFL, Corner.URF, Corner.UBR, Corner.ULB}


def test_disjoint_cycle_decompose():
    assert disjoint_cycle_decompose([1, 0, 2]) == [[1, 0], [2]]
    assert disjoint_cycle_decompose([0, 1, 2]) == [[0], [1], [2]]
    assert disjoint_cycle_decompose([1, 2, 0, 4, 3]) == [[1, 2, 0], [4, 3]]


def test_copy_is_independent():
    perm = PermutationTracker(Corner)
    clone = perm.copy()
    clone.apply_cycle(Corner.UFL, Corner.URF, Corner.UBR, Corner.ULB)
    assert perm.is_identity()
    assert not clone.is_identity()
    assert perm != clone


def test_explicit_mapping():
    perm = PermutationTracker(Corner, [1, 0, 2, 3, 4, 5, 6, 7])
    assert perm.get(Corner.UFL) == Corner.URF
    assert perm.parity() == 1


@pytest.mark.parametrize("mapping", [
    [0, 0, 2, 3, 4, 5, 6, 7],
    [0, 1, 2, 3, 4, 5, 6],
    [0, 1, 2, 3, 4, 5, 6, 8],
])
def test_rejects_non_bijections(mapping):
    with pytest.raises(ValueError):
        PermutationTracker(Corner, mapping)


def test_rejects_unknown_cubicle():
    with pytest.raises(ValueError):
        PermutationTracker(Corner).get(8)


def test_repr_lists_named_cycles():
    perm = PermutationTracker(Corner)
    perm.apply_cycle(Corner.UFL, Corner.URF, Corner.UBR, Corner.ULB)
    assert "ULB" in repr(perm)


@pytest.mark.parametrize("cycle", [
    (Corner.UFL, Corner.URF, Corner.DLF, Corner.UFL),
    (Corner.UFL, Corner.URF),
    (Corner.UFL, Corner.URF, Corner.UBR, Corner.ULB, Corner.DBL),
])
def test_apply_cycle_rejects_malformed_cycles(cycle):
    perm = PermutationTracker(Corner)
    with pytest.raises(ValueError):
        perm.apply_cycle(*cycle)
    assert perm.is_identity()
