"""Fill a crossword grid with a list of words by backtracking.

The grid is a list of equal-length strings where ``+`` marks a blocked cell
and ``-`` an empty one. A word may be placed down or across, starting at any
cell that is empty or already holds the word's first letter, as long as every
cell it covers is inside the grid and is either empty or holds the same letter.
"""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

BLOCKED = "+"
EMPTY = "-"
GRID_SIZE = 10

Cell = Tuple[int, int]


class _Direction(Enum):
    DOWN = (1, 0)
    ACROSS = (0, 1)


def parse_words(text: str) -> List[str]:
    """Split a ``;``-separated word list; a single trailing separator is ignored."""
    pieces = text.split(";")
    if pieces[-1] == "":
        pieces.pop()
    return pieces


class _Board:
    def __init__(self, grid: Iterable[str]) -> None:
        self.cells = [list(row) for row in grid]
        widths = {len(row) for row in self.cells}
        if len(widths) > 1:
            raise ValueError("every grid row must have the same length")
        self.height = len(self.cells)
        self.width = widths.pop() if widths else 0

    def span(self, row: int, col: int, direction: _Direction, length: int) -> List[Cell]:
        d_row, d_col = direction.value
        return [(row + d_row * step, col + d_col * step) for step in range(length)]

    def fits(self, word: str, span: Sequence[Cell]) -> bool:
        for letter, (row, col) in zip(word, span):
            if not (0 <= row < self.height and 0 <= col < self.width):
                return False
            cell = self.cells[row][col]
            if cell != EMPTY and (cell == BLOCKED or cell != letter):
                return False
        return True

    def place(self, word: str, span: Sequence[Cell]) -> List[Cell]:
        written = []
        for letter, (row, col) in zip(word, span):
            if self.cells[row][col] == EMPTY:
                self.cells[row][col] = letter
                written.append((row, col))
        return written

    def clear(self, written: Iterable[Cell]) -> None:
        for row, col in written:
            self.cells[row][col] = EMPTY

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.cells]


def solve_crossword(grid: Iterable[str], words: Iterable[str]) -> Optional[List[str]]:
    """Return the filled grid, or None when the words cannot all be placed.

    Words are placed in the given order; for each one the cells are tried
    row by row, and at each cell down before across.
    """
    board = _Board(grid)
    word_list = list(words)

    def solve(index: int) -> bool:
        if index == len(word_list):
            return True
        word = word_list[index]
        first = word[:1]
        for row in range(board.height):
            for col in range(board.width):
                cell = board.cells[row][col]
                if cell != EMPTY and cell != first:
                    continue
                for direction in _Direction:
                    span = board.span(row, col, direction, len(word))
                    if not board.fits(word, span):
                        continue
                    written = board.place(word, span)
                    if solve(index + 1):
                        return True
                    board.clear(written)
        return False

    return board.rows() if solve(0) else None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ten grid rows and a ``;``-separated word list, then print the solution."""
    parser = argparse.ArgumentParser(
        prog="crossword",
        description="Fill a 10x10 crossword grid ('+' blocked, '-' empty) with words.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default="-",
        help="file holding the grid rows and the word list (default: standard input)",
    )
    args = parser.parse_args(argv)
    with args.input as stream:
        tokens = stream.read().split()

    if len(tokens) < GRID_SIZE:
        parser.error(f"expected {GRID_SIZE} grid rows followed by a ';'-separated word list")
    grid = tokens[:GRID_SIZE]
    words = parse_words(tokens[GRID_SIZE]) if len(tokens) > GRID_SIZE else []

    try:
        solution = solve_crossword(grid, words)
    except ValueError as error:
        parser.error(str(error))
    if solution is None:
        return 1
    for row in solution:
        print(row)
    return 0