"""
Mesh I/O Functions
==================

Read ``.mesh`` files into numpy tables and TetMesh instances.
"""

import logging
import numpy as np
from typing import Optional, Tuple

from .errors import MeshReadError
from .list_to_matrix import list_to_matrix
from .medit_format import TETRAHEDRA, TRIANGLES, VERTICES
from .medit_reader import read_mesh_lists
from .tet_mesh import TetMesh

logger = logging.getLogger(__name__)


def _narrow(table: np.ndarray, dtype) -> np.ndarray:
    """
    Cast a float64/int64 table to the requested dtype.

    Integer targets are range-checked so that narrowing never wraps around.
    """
    dtype = np.dtype(dtype)
    if table.dtype == dtype:
        return table
    if dtype.kind in "iu" and table.size > 0:
        info = np.iinfo(dtype)
        if table.min() < info.min or table.max() > info.max:
            raise OverflowError(
                f"values in [{table.min()}, {table.max()}] do not fit "
                f"in {dtype.name}")
    return table.astype(dtype)


def read_mesh(filename: str, scalar_dtype=np.float64,
              index_dtype=np.int64) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Read a ``.mesh`` file into rectangular tables.

    Parsing always happens in float64/int64; the result is then converted to
    ``scalar_dtype`` and ``index_dtype``.

    Args:
        filename: path of the .mesh file
        scalar_dtype: dtype of vertex coordinates
        index_dtype: dtype of tetrahedron and triangle indices

    Returns:
        V: shape (n_vertices, 3) vertex positions
        T: shape (n_tetrahedra, 4) 0-based tetrahedron indices
        F: shape (n_triangles, 3) 0-based triangle indices

    Raises:
        MeshReadError: the file could not be read or a table is not
            rectangular
        OverflowError: indices do not fit in ``index_dtype``
    """
    lists = read_mesh_lists(filename)

    V = list_to_matrix(lists.vertices, VERTICES.width, np.float64,
                       name="vertices")
    T = list_to_matrix(lists.tetrahedra, TETRAHEDRA.width, np.int64,
                       name="tetrahedra")
    F = list_to_matrix(lists.triangles, TRIANGLES.width, np.int64,
                       name="triangles")

    V = _narrow(V, scalar_dtype)
    T = _narrow(T, index_dtype)
    F = _narrow(F, index_dtype)

    assert V.shape[1] == 3
    assert T.shape[1] == 4
    assert F.shape[1] == 3
    return V, T, F


def load_mesh(filename: str, check_indices: bool = True,
              scalar_dtype=np.float64,
              index_dtype=np.int64) -> Tuple[bool, Optional[TetMesh]]:
    """
    Load a ``.mesh`` file, reporting failure instead of raising.

    The reason for a failure is logged at ERROR level on the ``tetmesh``
    logger.

    Args:
        filename: path of the .mesh file
        check_indices: verify all connectivity indices reference a vertex
        scalar_dtype: dtype of vertex coordinates
        index_dtype: dtype of connectivity indices

    Returns:
        (True, mesh) on success, (False, None) otherwise
    """
    try:
        V, T, F = read_mesh(filename, scalar_dtype, index_dtype)
        mesh = TetMesh(V, T, F, check_indices=check_indices)
    except (MeshReadError, OverflowError) as exc:
        logger.error("Failed to load %s: %s", filename, exc)
        return False, None
    return True, mesh
