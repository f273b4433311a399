import random

import pytest
from hypothesis import given, strategies as st

from norcina.geometry import Direction, Face
from norcina.moves import R, R2, RP, U, UP, Amount, Move, parse_alg

all_moves = st.sampled_from(Move.all())
amounts = st.sampled_from(list(Amount))
faces = st.sampled_from(list(Face))


def test_all_has_every_face_amount_pair_once():
    moves = Move.all()
    assert len(moves) == 18
    assert len(set(moves)) == 18
    assert moves[:3] == (R, R2, RP)


@given(faces, amounts)
def test_constructor_and_accessors_maintain_values(face, amount):
    mov = Move(face, amount)
    assert mov.face == face
    assert mov.amount == amount
    assert mov.axis == face.axis


@given(faces, amounts)
def test_inverse_is_involution(face, amount):
    mov = Move(face, amount)
    assert mov.inverse() == Move(face, amount.reverse())
    assert mov.inverse().inverse() == mov


@given(st.integers(min_value=1, max_value=3))
def test_amount_reverse_sums_to_full_turn(n):
    amount = Amount.from_u8(n)
    assert (n + int(amount.reverse())) % 4 == 0


@given(st.integers(min_value=1, max_value=3))
def test_amount_times_direction(n):
    amount = Amount.from_u8(n)
    assert amount * Direction.from_bool(False) == amount
    assert amount * Direction.from_bool(True) == Amount.from_u8(4 - n)


def test_amount_from_invalid_raises():
    with pytest.raises(ValueError):
        Amount.from_u8(0)


def test_display():
    assert str(Move(Face.R, Amount.DOUBLE)) == "R2"
    assert str(Move(Face.R, Amount.REVERSE)) == "R'"
    assert str(Move(Face.R, Amount.SINGLE)) == "R "


@given(st.integers())
def test_random_produces_known_move(seed):
    assert Move.random(random.Random(seed)) in Move.all()


@given(st.lists(all_moves, max_size=20))
def test_parse_alg_round_trips_display(moves):
    text = " ".join(str(m) for m in moves)
    assert parse_alg(text) == moves


def test_parse_alg_accepts_p_suffix():
    assert parse_alg("R U RP UP") == [R, U, RP, UP]


def test_parse_alg_empty():
    assert parse_alg("   ") == []


def test_parse_alg_unknown_raises():
    with pytest.raises(ValueError):
        parse_alg("R X")