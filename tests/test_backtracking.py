import math

import pytest

from algokit.backtracking import (
    hamiltonian_cycles,
    n_queens,
    rat_in_maze,
    tower_of_hanoi,
)

SOURCE_GRAPH = [
    [0, 1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 0, 0, 0, 0],
    [0, 1, 0, 1, 0, 0, 0, 1],
    [0, 0, 1, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 1],
    [1, 0, 1, 0, 0, 0, 1, 0],
]

SOURCE_MAZE = ["0000", "000X", "000X", "0X00"]


def test_hamiltonian_cycles_are_valid():
    cycles = hamiltonian_cycles(SOURCE_GRAPH, 0)
    assert cycles
    for cycle in cycles:
        assert cycle[0] == cycle[-1] == 0
        assert sorted(cycle[:-1]) == list(range(len(SOURCE_GRAPH)))
        for a, b in zip(cycle, cycle[1:]):
            assert SOURCE_GRAPH[a][b] == 1


def test_hamiltonian_cycles_come_in_both_directions():
    cycles = {tuple(c) for c in hamiltonian_cycles(SOURCE_GRAPH, 0)}
    assert all(tuple(reversed(c)) in cycles for c in cycles)


def test_hamiltonian_cycles_are_distinct():
    cycles = hamiltonian_cycles(SOURCE_GRAPH, 0)
    assert len({tuple(c) for c in cycles}) == len(cycles)


def test_path_graph_has_no_cycle():
    path = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert hamiltonian_cycles(path, 0) == []


def test_hamiltonian_bad_start():
    with pytest.raises(IndexError):
        hamiltonian_cycles(SOURCE_GRAPH, 8)


def _check_queens(board):
    n = len(board)
    assert all(sum(row) == 1 for row in board)
    assert all(sum(board[r][c] for r in range(n)) == 1 for c in range(n))
    queens = [(r, c) for r in range(n) for c in range(n) if board[r][c]]
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [4, 5, 8])
def test_n_queens_valid(n):
    board = n_queens(n)
    assert len(board) == n
    _check_queens(board)


def test_n_queens_four_first_solution():
    assert n_queens(4) == [
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 1, 0, 0],
    ]


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_unsolvable(n):
    assert n_queens(n) is None


def test_n_queens_negative():
    with pytest.raises(ValueError):
        n_queens(-1)


def test_rat_in_maze_source_paths_are_valid():
    solutions = rat_in_maze(SOURCE_MAZE)
    assert solutions
    cells = len(SOURCE_MAZE) + len(SOURCE_MAZE[0]) - 1
    for grid in solutions:
        assert grid[0][0] == 1
        assert grid[-1][-1] == 1
        assert sum(map(sum, grid)) == cells
        for i, row in enumerate(SOURCE_MAZE):
            for j, cell in enumerate(row):
                if cell == "X":
                    assert grid[i][j] == 0
    assert len({str(g) for g in solutions}) == len(solutions)


@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_rat_in_open_maze_counts_paths(size):
    maze = ["0" * size] * size
    assert len(rat_in_maze(maze)) == math.comb(2 * (size - 1), size - 1)


def test_rat_in_blocked_maze():
    assert rat_in_maze(["0X", "X0"]) == []


def test_rat_reaches_walled_destination():
    assert len(rat_in_maze(["00", "0X"])) == len(rat_in_maze(["00", "00"]))


def test_rat_ragged_maze():
    with pytest.raises(ValueError):
        rat_in_maze(["000", "00"])


@pytest.mark.parametrize("disks", [0, 1, 2, 3, 6])
def test_hanoi_moves_are_legal(disks):
    moves = tower_of_hanoi(disks)
    assert len(moves) == 2**disks - 1
    pegs = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    for disk, src, dest in moves:
        assert pegs[src][-1] == disk
        pegs[src].pop()
        assert not pegs[dest] or pegs[dest][-1] > disk
        pegs[dest].append(disk)
    assert pegs["C"] == list(range(disks, 0, -1))


def test_hanoi_single_disk():
    assert tower_of_hanoi(1) == [(1, "A", "C")]


def test_hanoi_negative():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)