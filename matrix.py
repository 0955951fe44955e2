#Matrix class

import logging
from collections import namedtuple
import numpy as np
from scipy import sparse

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

Entry = namedtuple('Entry', ['row', 'col', 'value'])


# Rows or entries do not fit the matrix shape
class ShapeError(ValueError):
    pass


# Dense row-major matrix; m[i] is row i as a mutable list
class Matrix:
    def __init__(self, rows):
        self.data = [list(row) for row in rows]
        if self.data:
            width = len(self.data[0])
            for i, row in enumerate(self.data):
                if len(row) != width:
                    raise ShapeError(f"Row {i} has {len(row)} columns, expected {width}.")

    def shape(self):
        return len(self.data), len(self.data[0]) if self.data else 0

    def __getitem__(self, index):
        return self.data[index]

    def __setitem__(self, index, row):
        row = list(row)
        rows, cols = self.shape()
        if rows and len(row) != cols:
            raise ShapeError(f"Row has {len(row)} columns, expected {cols}.")
        self.data[index] = row

    def __eq__(self, other):
        if isinstance(other, Matrix):
            return self.data == other.data
        return NotImplemented

    def __repr__(self):
        return f"Matrix({self.data!r})"

    def to_numpy(self):
        return np.array(self.data, dtype=float).reshape(self.shape())


# Coordinate-list builder: (row, col, value) entries in insertion order
class COOMatrix:
    def __init__(self):
        self._data = []

    def push(self, row, col, value):
        if row < 0 or col < 0:
            raise ShapeError(f"Entry ({row}, {col}) has a negative index.")
        self._data.append(Entry(row, col, value))

    def data(self):
        return list(self._data)

    # Smallest shape holding every pushed entry
    def shape(self):
        if not self._data:
            return 0, 0
        return (max(entry.row for entry in self._data) + 1,
                max(entry.col for entry in self._data) + 1)

    def to_sparse(self):
        rows, cols = self.shape()
        if not self._data:
            return sparse.coo_matrix((rows, cols))
        row_idx, col_idx, values = zip(*self._data)
        return sparse.coo_matrix((values, (row_idx, col_idx)), shape=(rows, cols))

    # Duplicate coordinates are summed
    def to_dense(self):
        dense = self.to_sparse().toarray()
        logger.debug("densified %d entries into shape %s", len(self._data), dense.shape)
        return Matrix(dense.tolist())
