#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Square matrix of exact fractions and its determinant

The grid is filled cell by cell in row-major order while a matrix is read
from the input. Rows are stored in the order they were appended; a row map
translates logical row indices to stored rows, so swapping two rows is an
update of the map rather than a copy of the cells.
"""

import logging
from typing import Iterable, List, Optional, Union

import numpy as np

from .fraction import ExactFraction

__all__ = ['MatrixGrid']

LOG = logging.getLogger(__name__)


class MatrixGrid:
    """Square container of ExactFraction cells

    Cells are appended left to right, row by row. Once all order*order cells
    are present, compute_determinant() reduces the grid to row echelon form
    in place and returns the integer determinant.

    Example:
        >>> grid = MatrixGrid(2)
        >>> for row, col, value in [(0, 0, 1), (0, 1, 2), (1, 0, 3), (1, 1, 4)]:
        ...     grid.append(value, row, col)
        >>> grid.compute_determinant()
        -2
    """

    def __init__(self, order: int):
        if order < 0:
            raise ValueError(f"negative matrix order: {order}")
        self._order = order
        self._rows: List[List[ExactFraction]] = []
        self._row_map = list(range(order))
        self._cell_count = 0

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Union[int, ExactFraction]]]) -> 'MatrixGrid':
        """Build a grid from nested integer rows (lists, tuples or a 2D numpy array)"""
        rows = [list(row) for row in rows]
        grid = cls(len(rows))
        for i, row in enumerate(rows):
            if len(row) != len(rows):
                raise ValueError(f"Row {i + 1} has {len(row)} entries, expected {len(rows)}")
            for j, value in enumerate(row):
                grid.append(value if isinstance(value, ExactFraction) else int(value), i, j)
        return grid

    @property
    def order(self) -> int:
        return self._order

    @property
    def cell_count(self) -> int:
        return self._cell_count

    def is_complete(self) -> bool:
        return self._cell_count == self._order * self._order

    def append(self, value: Union[int, ExactFraction], row: int, col: int) -> None:
        """Add the next cell in row-major order

        Args:
            value (int or ExactFraction):
                Cell value.

            row, col (int):
                Position of the cell. Appending at column 0 of the next row
                starts a new row; cells must arrive in row-major order.
        """
        if self._cell_count >= self._order * self._order or row >= self._order:
            raise IndexError(f"Matrix of order {self._order} is already full, cannot add ({row}, {col})")
        if row == len(self._rows):
            self._rows.append([])
        self._rows[row].append(ExactFraction(value))
        self._cell_count += 1

    def value_at(self, row: int, col: int) -> ExactFraction:
        return self._rows[self._row_map[row]][col]

    def set_value_at(self, row: int, col: int, value: ExactFraction) -> None:
        self._rows[self._row_map[row]][col] = value

    def right_of(self, row: int, col: int) -> Optional[ExactFraction]:
        """Cell to the right, None at the last column"""
        if col + 1 >= self._order:
            return None
        return self.value_at(row, col + 1)

    def below(self, row: int, col: int) -> Optional[ExactFraction]:
        """Cell below, None at the last row"""
        if row + 1 >= self._order:
            return None
        return self.value_at(row + 1, col)

    def swap_rows(self, row_a: int, row_b: int) -> None:
        self._row_map[row_a], self._row_map[row_b] = self._row_map[row_b], self._row_map[row_a]

    def clone(self) -> 'MatrixGrid':
        """Copy holding the current cell values in logical row order"""
        grid = MatrixGrid(self._order)
        for row in range(len(self._rows)):
            for col in range(len(self._rows[self._row_map[row]])):
                grid.append(self.value_at(row, col), row, col)
        return grid

    def compute_determinant(self) -> int:
        """Determinant by Gaussian elimination on exact fractions

        A zero in the top left corner is fixed once by swapping in the first
        row with a non-zero leading entry, which flips the sign of the result.
        No further pivoting takes place: a zero on the diagonal at any later
        step ends the elimination with a determinant of 0. The grid is left in
        row echelon form.

        Returns:
            (int): The determinant.

        Raises:
            ValueError: if not all cells have been appended.
        """
        if not self.is_complete():
            raise ValueError(f"Matrix of order {self._order} is incomplete: "
                             f"{self._cell_count} of {self._order * self._order} values")
        n = self._order
        if n == 0:
            return 1
        sign = 1
        if self.value_at(0, 0).is_zero():
            pivot_row = next((row for row in range(1, n) if not self.value_at(row, 0).is_zero()), None)
            if pivot_row is None:
                return 0
            self.swap_rows(0, pivot_row)
            sign = -1
            LOG.info("Swapped rows: 1 and %d", pivot_row + 1)

        for diag in range(n):
            pivot = self.value_at(diag, diag)
            if pivot.is_zero():
                return 0
            for row in range(diag + 1, n):
                factor = self.value_at(row, diag).divide(pivot).reduce()
                if factor.is_zero():
                    continue
                for col in range(diag, n):
                    scaled = factor.multiply(self.value_at(diag, col)).reduce()
                    self.set_value_at(row, col, self.value_at(row, col).subtract(scaled).reduce())

        return sign * self._diagonal_product().to_integer()

    def _diagonal_product(self) -> ExactFraction:
        product = self.value_at(0, 0)
        for diag in range(1, self._order):
            product = product.multiply(self.value_at(diag, diag)).reduce()
        return product

    def to_array(self) -> np.ndarray:
        """Cells as a 2D numpy array of ExactFraction objects"""
        array = np.empty((len(self._rows), self._order), dtype=object)
        for row in range(len(self._rows)):
            for col in range(len(self._rows[self._row_map[row]])):
                array[row, col] = self.value_at(row, col)
        return array

    def to_multiline_string(self) -> str:
        """One line per row, cells separated by single spaces"""
        return '\n'.join(' '.join(str(value) for value in self._rows[self._row_map[row]])
                         for row in range(len(self._rows)))

    def __str__(self) -> str:
        return self.to_multiline_string()

    def __repr__(self) -> str:
        return f"MatrixGrid(order={self._order}, cells={self._cell_count})"
