"""Searching for move sequences between cube states."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable

from norcina.alg import Alg
from norcina.cube import Cube
from norcina.moves import Move


@dataclass
class SearchSolution:
    """A path of states, each one move away from the previous."""

    states: list[Cube] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.states = list(self.states)

    @staticmethod
    def connect(start: Cube, end: Cube) -> Move | None:
        """The move that takes ``start`` to ``end``, if there is one."""
        return next((mov for mov in Move.all() if start.mov_single(mov) == end), None)

    def moves(self) -> list[Move]:
        """The moves between consecutive states."""
        result = []
        for start, end in zip(self.states, self.states[1:]):
            mov = self.connect(start, end)
            if mov is None:
                raise ValueError("consecutive states are not one move apart")
            result.append(mov)
        return result

    def alg(self) -> Alg:
        return Alg(self.moves())

    def final_state(self) -> Cube:
        if not self.states:
            raise ValueError("empty solution has no final state")
        return self.states[-1]

    def concat(self, other: SearchSolution) -> SearchSolution:
        """This path followed by ``other``, which must start where this one ends."""
        if not other.states or self.final_state() != other.states[0]:
            raise ValueError("solutions do not connect")
        return SearchSolution(self.states + other.states[1:])


def search_bfs(initial_state: Cube, goal: Callable[[Cube], bool]) -> SearchSolution:
    """Breadth-first search for the shortest path to a goal state."""
    if goal(initial_state):
        return SearchSolution([initial_state])

    parents: dict[Cube, Cube | None] = {initial_state: None}
    queue = deque([initial_state])

    def path_to(state: Cube) -> list[Cube]:
        path = []
        current: Cube | None = state
        while current is not None:
            path.append(current)
            current = parents[current]
        return path[::-1]

    while queue:
        node = queue.popleft()
        for _, state in node.neighbors():
            if state in parents:
                continue
            parents[state] = node
            if goal(state):
                return SearchSolution(path_to(state))
            queue.append(state)

    raise RuntimeError("search space exhausted without reaching a goal")


def solve_bfs(state: Cube) -> SearchSolution:
    return search_bfs(state, Cube.is_solved)


def search_idastar(
    initial_state: Cube,
    heuristic: Callable[[Cube], int],
    goal: Callable[[Cube], bool],
) -> SearchSolution:
    """Iterative deepening A* search with unit move costs."""
    path = [initial_state]
    on_path = {initial_state}

    def search(cost: int, bound: int) -> tuple[bool, int | None]:
        node = path[-1]
        estimate = cost + heuristic(node)
        if estimate > bound:
            return False, estimate
        if goal(node):
            return True, estimate

        candidates = [
            (1 + heuristic(state), state)
            for _, state in node.neighbors()
            if state not in on_path
        ]
        candidates.sort(key=lambda candidate: candidate[0])

        minimum: int | None = None
        for _, state in candidates:
            path.append(state)
            on_path.add(state)
            found, value = search(cost + 1, bound)
            if found:
                return True, value
            if value is not None and (minimum is None or value < minimum):
                minimum = value
            path.pop()
            on_path.discard(state)
        return False, minimum

    bound = heuristic(initial_state)
    while True:
        found, value = search(0, bound)
        if found:
            return SearchSolution(list(path))
        if value is None:
            raise RuntimeError("search space exhausted without reaching a goal")
        bound = value


def manhattan_distance(state: Cube) -> int:
    """Sum of the turn distances of every piece from its home position."""
    corners = sum(pos.turn_distance(piece.position()) for pos, piece in state.corner_positions())
    edges = sum(pos.turn_distance(piece.position()) for pos, piece in state.edge_positions())
    return corners + edges


def solve_manhattan(state: Cube) -> SearchSolution:
    return search_idastar(state, manhattan_distance, Cube.is_solved)