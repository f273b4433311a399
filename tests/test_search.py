import random

import pytest

from norcina.alg import Alg
from norcina.cube import Cube
from norcina.moves import RP, UP, Move, R, U
from norcina.search import (
    SearchSolution,
    manhattan_distance,
    search_bfs,
    search_idastar,
    solve_bfs,
    solve_manhattan,
)


def test_manhattan_distance_values():
    assert manhattan_distance(Cube.SOLVED) == 0
    assert manhattan_distance(Cube.SOLVED.mov([R])) == 8


def test_connect():
    assert SearchSolution.connect(Cube.SOLVED, Cube.SOLVED.mov_single(R)) == R
    assert SearchSolution.connect(Cube.SOLVED, Cube.SOLVED) is None


def test_moves_and_alg():
    s0 = Cube.SOLVED
    s1 = s0.mov_single(R)
    s2 = s1.mov_single(U)
    solution = SearchSolution([s0, s1, s2])
    assert solution.moves() == [R, U]
    assert solution.alg() == Alg([R, U])
    assert solution.final_state() == s2


def test_moves_rejects_disconnected_states():
    solution = SearchSolution([Cube.SOLVED, Cube.SOLVED.mov([R, U])])
    with pytest.raises(ValueError):
        solution.moves()


def test_final_state_of_empty_solution():
    with pytest.raises(ValueError):
        SearchSolution([]).final_state()


def test_concat():
    s0 = Cube.SOLVED
    s1 = s0.mov_single(R)
    s2 = s1.mov_single(U)
    joined = SearchSolution([s0, s1]).concat(SearchSolution([s1, s2]))
    assert joined.states == [s0, s1, s2]
    with pytest.raises(ValueError):
        SearchSolution([s0, s1]).concat(SearchSolution([s2, s0]))


def test_solve_bfs_two_moves():
    solution = solve_bfs(Cube.SOLVED.mov([R, U]))
    assert solution.moves() == [UP, RP]
    assert solution.final_state().is_solved()


def test_search_bfs_on_goal_state():
    solution = search_bfs(Cube.SOLVED, Cube.is_solved)
    assert solution.states == [Cube.SOLVED]


def test_idastar_with_zero_heuristic():
    solution = search_idastar(Cube.SOLVED.mov([R]), lambda cube: 0, Cube.is_solved)
    assert solution.moves() == [RP]


def test_solve_manhattan_two_moves():
    solution = solve_manhattan(Cube.SOLVED.mov([R, U]))
    assert solution.moves() == [UP, RP]


@pytest.mark.parametrize("mov", Move.all())
def test_solve_manhattan_single_move(mov):
    solution = solve_manhattan(Cube.SOLVED.mov([mov]))
    assert solution.moves() == [mov.inverse()]


@pytest.mark.parametrize("seed", range(5))
def test_solve_manhattan_random_scrambles(seed):
    rng = random.Random(64920 + seed)
    scramble = Alg.random(Move, 2, rng)
    cube = Cube.SOLVED.mov(scramble)
    solution = solve_manhattan(cube)
    assert cube.mov(solution.alg()).is_solved()
    assert len(solution.moves()) <= 2