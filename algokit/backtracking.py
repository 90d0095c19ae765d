"""Backtracking searches: Hamiltonian cycles, N queens, rat in a maze, and the Tower of Hanoi."""

from __future__ import annotations

from typing import Iterator, Sequence

BLOCKED = "X"


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]], start: int = 0
) -> list[list[int]]:
    """Every Hamiltonian cycle through ``start``, each listed as vertices ending back at ``start``.

    ``adjacency`` is a square matrix in which a truthy entry marks an edge.
    Cycles come in the order a depth-first search over ascending vertex
    numbers finds them, so each undirected cycle appears in both directions.
    """
    size = len(adjacency)
    if not 0 <= start < size:
        raise IndexError(f"start {start} outside 0..{size - 1}")
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")

    cycles: list[list[int]] = []
    path = [start]
    visited = {start}

    def extend(vertex: int) -> None:
        if len(path) == size:
            if adjacency[vertex][start]:
                cycles.append([*path, start])
            return
        for neighbour, connected in enumerate(adjacency[vertex]):
            if connected and neighbour not in visited:
                visited.add(neighbour)
                path.append(neighbour)
                extend(neighbour)
                path.pop()
                visited.remove(neighbour)

    extend(start)
    return cycles


def n_queens(n: int) -> list[list[int]] | None:
    """First placement of ``n`` non-attacking queens, as a 0/1 board, or None if there is none.

    Queens are placed column by column, trying rows from the top.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    rows_of_columns: list[int] = []
    used_rows: set[int] = set()
    used_diffs: set[int] = set()
    used_sums: set[int] = set()

    def place(column: int) -> bool:
        if column >= n:
            return True
        for row in range(n):
            if row in used_rows or row - column in used_diffs or row + column in used_sums:
                continue
            used_rows.add(row)
            used_diffs.add(row - column)
            used_sums.add(row + column)
            rows_of_columns.append(row)
            if place(column + 1):
                return True
            rows_of_columns.pop()
            used_rows.remove(row)
            used_diffs.remove(row - column)
            used_sums.remove(row + column)
        return False

    if not place(0):
        return None
    board = [[0] * n for _ in range(n)]
    for column, row in enumerate(rows_of_columns):
        board[row][column] = 1
    return board


def rat_in_maze(maze: Sequence[str]) -> list[list[list[int]]]:
    """Every path from the top-left to the bottom-right cell moving only right or down.

    ``maze`` is a list of equal-length rows in which ``"X"`` marks a wall.
    Each path is returned as a 0/1 grid marking the cells it passes through.
    The destination cell counts as reached even when it is a wall.
    """
    rows = list(maze)
    if not rows or not rows[0]:
        raise ValueError("maze must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("maze rows must all have the same length")
    last_row, last_col = len(rows) - 1, len(rows[0]) - 1
    grid = [[0] * (last_col + 1) for _ in rows]
    solutions: list[list[list[int]]] = []

    def walk(i: int, j: int) -> None:
        if (i, j) == (last_row, last_col):
            solution = [list(row) for row in grid]
            solution[i][j] = 1
            solutions.append(solution)
            return
        if i > last_row or j > last_col or rows[i][j] == BLOCKED:
            return
        grid[i][j] = 1
        walk(i, j + 1)
        walk(i + 1, j)
        grid[i][j] = 0

    walk(0, 0)
    return solutions


def tower_of_hanoi(
    disks: int, source: str = "A", helper: str = "B", target: str = "C"
) -> list[tuple[int, str, str]]:
    """The moves ``(disk, from_peg, to_peg)`` that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")

    def moves(n: int, src: str, via: str, dest: str) -> Iterator[tuple[int, str, str]]:
        if n == 0:
            return
        yield from moves(n - 1, src, dest, via)
        yield (n, src, dest)
        yield from moves(n - 1, via, src, dest)

    return list(moves(disks, source, helper, target))