"""
List to Matrix Conversion
=========================

Convert lists of rows into rectangular numpy tables.
"""

import numpy as np
from typing import Optional, Sequence

from .errors import MeshShapeError


def list_to_matrix(rows: Sequence[Sequence], n_cols: Optional[int] = None,
                   dtype=np.float64, name: str = "rows") -> np.ndarray:
    """
    Convert a list of equal-length rows into a 2D array.

    Args:
        rows: sequence of rows
        n_cols: required row length; None accepts the first row's length
        dtype: dtype of the resulting array
        name: what the rows describe, used in error messages

    Returns:
        array of shape (len(rows), n_cols); (0, n_cols or 0) when empty

    Raises:
        MeshShapeError: rows differ in length or do not have n_cols entries
    """
    if len(rows) == 0:
        return np.zeros((0, n_cols or 0), dtype=dtype)

    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise MeshShapeError(
                f"{name} are not rectangular: row {i} has {len(row)} "
                f"entries, row 0 has {width}")

    if n_cols is not None and width != n_cols:
        raise MeshShapeError(
            f"{name} must have {n_cols} columns, got {width}")

    return np.array(rows, dtype=dtype)
