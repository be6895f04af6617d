"""Sudoku validation and solving on 9x9 boards of '1'..'9' and '.' cells."""

from __future__ import annotations

from dataclasses import dataclass, field

SIZE = 9
EMPTY = "."
DIGITS = "123456789"


def _box(row: int, col: int) -> int:
    return row // 3 * 3 + col // 3


def is_valid_sudoku(board: list[list[str]]) -> bool:
    """Return True when no row, column or 3x3 box repeats a filled cell."""
    rows = [set() for _ in range(SIZE)]
    cols = [set() for _ in range(SIZE)]
    boxes = [set() for _ in range(SIZE)]
    for r, line in enumerate(board):
        for c, value in enumerate(line):
            if value == EMPTY:
                continue
            for seen in (rows[r], cols[c], boxes[_box(r, c)]):
                if value in seen:
                    return False
                seen.add(value)
    return True


def _check_shape(board: list[list[str]]) -> None:
    if len(board) != SIZE or any(len(line) != SIZE for line in board):
        raise ValueError("board must be 9 by 9")
    for line in board:
        for value in line:
            if value != EMPTY and value not in DIGITS:
                raise ValueError(f"invalid cell {value!r}")


@dataclass
class _Grid:
    cells: list[list[int]] = field(default_factory=lambda: [[0] * SIZE for _ in range(SIZE)])
    rows: list[set[int]] = field(default_factory=lambda: [set() for _ in range(SIZE)])
    cols: list[set[int]] = field(default_factory=lambda: [set() for _ in range(SIZE)])
    boxes: list[set[int]] = field(default_factory=lambda: [set() for _ in range(SIZE)])

    def place(self, r: int, c: int, v: int) -> None:
        self.cells[r][c] = v
        self.rows[r].add(v)
        self.cols[c].add(v)
        self.boxes[_box(r, c)].add(v)

    def clear(self, r: int, c: int) -> None:
        v = self.cells[r][c]
        self.cells[r][c] = 0
        self.rows[r].discard(v)
        self.cols[c].discard(v)
        self.boxes[_box(r, c)].discard(v)

    def allows(self, r: int, c: int, v: int) -> bool:
        return v not in self.rows[r] and v not in self.cols[c] and v not in self.boxes[_box(r, c)]


def solve_sudoku(board: list[list[str]]) -> None:
    """Fill ``board`` in place, tracking used digits per row, column and box.

    Raises ValueError for a malformed board or one with no solution; the
    board is then left unchanged.
    """
    _check_shape(board)
    grid = _Grid()
    for r, line in enumerate(board):
        for c, value in enumerate(line):
            if value != EMPTY:
                grid.place(r, c, int(value))

    empties = [(r, c) for r in range(SIZE) for c in range(SIZE) if grid.cells[r][c] == 0]

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        r, c = empties[index]
        for v in range(1, SIZE + 1):
            if grid.allows(r, c, v):
                grid.place(r, c, v)
                if fill(index + 1):
                    return True
                grid.clear(r, c)
        return False

    if not fill(0):
        raise ValueError("puzzle has no solution")
    for r, line in enumerate(grid.cells):
        board[r][:] = [str(v) for v in line]


def _fits(board: list[list[str]], digit: str, r: int, c: int) -> bool:
    top, left = r // 3 * 3, c // 3 * 3
    return not any(
        board[r][i] == digit
        or board[i][c] == digit
        or board[top + i % 3][left + i // 3] == digit
        for i in range(SIZE)
    )


def solve_sudoku_simple(board: list[list[str]]) -> None:
    """Fill ``board`` in place by plain backtracking over the board itself.

    Raises ValueError for a malformed board or one with no solution; the
    board is then left unchanged.
    """
    _check_shape(board)

    def fill() -> bool:
        for r in range(SIZE):
            for c in range(SIZE):
                if board[r][c] != EMPTY:
                    continue
                for digit in DIGITS:
                    if _fits(board, digit, r, c):
                        board[r][c] = digit
                        if fill():
                            return True
                        board[r][c] = EMPTY
                return False
        return True

    if not fill():
        raise ValueError("puzzle has no solution")