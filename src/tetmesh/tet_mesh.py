"""
Tetrahedral Mesh
================

Container for a loaded tetrahedral volume mesh.
"""

import numpy as np
from typing import Optional

from .errors import MeshIndexError


def _as_table(data, n_cols: int, kinds: str, default_dtype,
              name: str) -> np.ndarray:
    """Coerce data to a 2D array with n_cols columns and a dtype in kinds."""
    table = np.asarray(data)
    if table.size == 0:
        dtype = table.dtype if table.dtype.kind in kinds else default_dtype
        return np.zeros((0, n_cols), dtype=dtype)
    if table.dtype.kind not in kinds:
        raise ValueError(f"{name} has unsupported dtype {table.dtype}")
    if table.ndim != 2 or table.shape[1] != n_cols:
        raise ValueError(f"{name} must have shape (n_{name}, {n_cols})")
    return table


class TetMesh:
    """
    Tetrahedral volume mesh with boundary triangles.

    Attributes:
        vertices: np.ndarray, shape (n_vertices, 3)
            Vertex coordinates
        tetrahedra: np.ndarray, shape (n_tetrahedra, 4)
            0-based vertex indices of each tetrahedron
        triangles: np.ndarray, shape (n_triangles, 3)
            0-based vertex indices of each triangle face
    """

    def __init__(self, vertices: np.ndarray, tetrahedra: np.ndarray,
                 triangles: Optional[np.ndarray] = None,
                 check_indices: bool = True):
        """
        Initialize mesh and validate its tables.

        Args:
            vertices: shape (n_vertices, 3), vertex coordinates
            tetrahedra: shape (n_tetrahedra, 4), vertex indices
            triangles: shape (n_triangles, 3), vertex indices; empty if None
            check_indices: verify every index lies in [0, n_vertices)
        """
        if triangles is None:
            triangles = np.zeros((0, 3), dtype=np.int64)

        self.vertices = _as_table(vertices, 3, "fiu", np.float64, "vertices")
        if self.vertices.dtype.kind != "f":
            self.vertices = self.vertices.astype(np.float64)
        self.tetrahedra = _as_table(tetrahedra, 4, "iu", np.int64,
                                    "tetrahedra")
        self.triangles = _as_table(triangles, 3, "iu", np.int64, "triangles")

        if check_indices:
            self.check_indices()

    @classmethod
    def from_file(cls, filename: str, check_indices: bool = True,
                  scalar_dtype=np.float64, index_dtype=np.int64) -> "TetMesh":
        """
        Read a TetMesh from a ``.mesh`` file.

        Raises:
            MeshReadError: the file could not be loaded
        """
        from .mesh_io import read_mesh

        V, T, F = read_mesh(filename, scalar_dtype, index_dtype)
        return cls(V, T, F, check_indices=check_indices)

    @property
    def n_vertices(self) -> int:
        """Number of vertices in the mesh."""
        return len(self.vertices)

    @property
    def n_tetrahedra(self) -> int:
        """Number of tetrahedra in the mesh."""
        return len(self.tetrahedra)

    @property
    def n_triangles(self) -> int:
        """Number of triangle faces in the mesh."""
        return len(self.triangles)

    def check_indices(self) -> None:
        """
        Verify that all connectivity references existing vertices.

        Raises:
            MeshIndexError: an index lies outside [0, n_vertices)
        """
        for name, table in (("tetrahedra", self.tetrahedra),
                            ("triangles", self.triangles)):
            if table.size == 0:
                continue
            bad = np.argwhere((table < 0) | (table >= self.n_vertices))
            if len(bad) > 0:
                row, col = bad[0]
                raise MeshIndexError(
                    f"{name}[{row}, {col}] = {table[row, col]} is outside "
                    f"[0, {self.n_vertices})")

    def __repr__(self) -> str:
        return (f"TetMesh(n_vertices={self.n_vertices}, "
                f"n_tetrahedra={self.n_tetrahedra}, "
                f"n_triangles={self.n_triangles})")
