import random
from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from norcina.edge import (
    SOLVED_EDGES,
    Edge,
    EdgePosition,
    move_pieces,
    sticker,
)
from norcina.geometry import Axis, Direction, Face
from norcina.moves import Amount, Move

PERPENDICULAR_PAIRS = [(f1, f2) for f1, f2 in permutations(Face, 2) if f1.axis != f2.axis]


def apply(edges, moves):
    for mov in moves:
        edges = move_pieces(edges, mov)
    return edges


@pytest.mark.parametrize("f1,f2", PERPENDICULAR_PAIRS)
def test_from_faces_produces_edge_with_those_faces(f1, f2):
    faces = EdgePosition.from_faces([f1, f2]).faces()
    assert faces in ((f1, f2), (f2, f1))


@pytest.mark.parametrize("index", range(12))
def test_turn_distance_distribution_is_1_6_5(index):
    position = EdgePosition.from_index(index)
    distances = sorted(position.turn_distance(other) for other in EdgePosition.all())
    assert distances == [0] + [1] * 6 + [2] * 5


@pytest.mark.parametrize("position", EdgePosition.all())
def test_faces_from_faces_round_trip(position):
    assert EdgePosition.from_faces(position.faces()) == position


def test_from_faces_rejects_parallel_faces():
    with pytest.raises(ValueError):
        EdgePosition.from_faces([Face.R, Face.L])


def test_invalid_indices_raise():
    with pytest.raises(ValueError):
        Edge.solved(12)
    with pytest.raises(ValueError):
        EdgePosition.from_index(12)


def test_solved_edge_zero_fields():
    edge = Edge.solved(0)
    assert edge.a() is Direction.POSITIVE
    assert edge.b() is Direction.POSITIVE
    assert edge.normal() is Axis.X
    assert edge.orientation() is Direction.POSITIVE
    assert edge.is_oriented()
    assert edge.position() == EdgePosition(0)


def test_display():
    assert str(Edge.solved(0)) == "UF (✓)"
    assert str(EdgePosition(0)) == "UF"
    assert str(EdgePosition(4)) == "FR"
    assert str(Edge.solved(0).with_oriented(False)) == "UF (x)"


def test_with_oriented_round_trip():
    edge = Edge.solved(7)
    flipped = edge.with_oriented(False)
    assert not flipped.is_oriented()
    assert flipped.position() == edge.position()
    assert flipped.with_oriented(True) == edge


def test_with_orientation():
    edge = EdgePosition(5).with_orientation(Direction.NEGATIVE)
    assert edge.position() == EdgePosition(5)
    assert edge.orientation() is Direction.NEGATIVE


def test_no_swaps_count_is_zero():
    assert Edge.count_swaps(SOLVED_EDGES) == 0


def test_count_swaps_single_and_cycle():
    edges = list(SOLVED_EDGES)
    edges[0], edges[5] = edges[5], edges[0]
    assert Edge.count_swaps(edges) == 1
    edges = list(SOLVED_EDGES)
    edges[1], edges[2], edges[3] = edges[2], edges[3], edges[1]
    assert Edge.count_swaps(edges) == 2


@pytest.mark.parametrize("seed", range(5))
def test_random_edges_are_valid(seed):
    edges = Edge.random(random.Random(seed))
    assert sorted(e.position().index for e in edges) == list(range(12))
    assert sum(int(e.orientation()) for e in edges) % 2 == 0


def test_random_is_deterministic_for_seed():
    first = Edge.random(random.Random(3))
    second = Edge.random(random.Random(3))
    assert list(first) == list(second)
    assert sorted(e.position().index for e in first) == list(range(12))


@pytest.mark.parametrize("index", range(12))
def test_contains_exactly_its_faces(index):
    position = EdgePosition.from_index(index)
    contained = {face for face in Face if position.contains_face(face)}
    assert contained == set(position.faces())
    assert len(contained) == 2


def test_direction_on_normal_raises():
    position = EdgePosition(0)
    with pytest.raises(ValueError):
        position.direction_on_axis(position.normal())


@pytest.mark.parametrize("index", range(12))
def test_orientation_and_other_face_cover_position(index):
    position = EdgePosition.from_index(index)
    assert {position.orientation_face(), position.other_face()} == set(position.faces())
    assert position.orientation_face().axis == position.orientation_axis()


@pytest.mark.parametrize("position", EdgePosition.all())
def test_sticker_on_solved_matches_face(position):
    piece = position.pick(SOLVED_EDGES)
    for face in position.faces():
        assert sticker(piece, position, face) == face


def test_sticker_on_flipped_edge_swaps_colours():
    position = EdgePosition(0)
    piece = position.pick(SOLVED_EDGES).with_oriented(False)
    a, b = position.faces()
    assert sticker(piece, position, a) == b
    assert sticker(piece, position, b) == a


def test_sticker_rejects_face_on_normal():
    position = EdgePosition(0)
    with pytest.raises(ValueError):
        sticker(position.pick(SOLVED_EDGES), position, Face.R)


@pytest.mark.parametrize("face", list(Face))
def test_four_quarter_turns_are_identity(face):
    mov = Move(face, Amount.SINGLE)
    assert apply(SOLVED_EDGES, [mov] * 4) == SOLVED_EDGES


@pytest.mark.parametrize("face", list(Face))
def test_two_singles_equal_double(face):
    single = Move(face, Amount.SINGLE)
    double = Move(face, Amount.DOUBLE)
    assert apply(SOLVED_EDGES, [single, single]) == move_pieces(SOLVED_EDGES, double)


@pytest.mark.parametrize("mov", Move.all())
def test_move_only_permutes_its_layer(mov):
    moved = move_pieces(SOLVED_EDGES, mov)
    for position in EdgePosition.all():
        piece = position.pick(moved)
        if position.contains_face(mov.face):
            assert piece.position().contains_face(mov.face)
        else:
            assert piece == position.pick(SOLVED_EDGES)
    assert sum(p.position() != pos for pos, p in zip(EdgePosition.all(), moved)) == 4


def test_front_quarter_turn_flips_its_edges():
    moved = move_pieces(SOLVED_EDGES, Move(Face.F, Amount.SINGLE))
    for position, piece in zip(EdgePosition.all(), moved):
        assert piece.is_oriented() == (not position.contains_face(Face.F))


def test_right_turn_keeps_orientation():
    moved = move_pieces(SOLVED_EDGES, Move(Face.R, Amount.SINGLE))
    assert all(piece.is_oriented() for piece in moved)


@given(st.lists(st.sampled_from(Move.all()), max_size=30))
def test_moves_then_inverses_restore(moves):
    edges = apply(SOLVED_EDGES, moves)
    assert sum(int(e.orientation()) for e in edges) % 2 == 0
    restored = apply(edges, [mov.inverse() for mov in reversed(moves)])
    assert restored == SOLVED_EDGES