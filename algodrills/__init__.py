"""Classic algorithm exercises: strings, arrays, searching, backtracking,
sudoku, linked lists, tree walks and shortest paths."""

__version__ = "0.1.0"