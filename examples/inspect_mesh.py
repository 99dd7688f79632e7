"""
Inspect Mesh Example
====================

Loads a MEDIT .mesh file and prints a short summary of its contents.

Usage:
    python inspect_mesh.py path/to/volume.mesh
"""

import logging
import numpy as np
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tetmesh import load_mesh, setup_logging


def inspect_mesh(filename):
    """Load a mesh and print counts and the bounding box."""
    print("=" * 60)
    print(f"tetmesh: {filename}")
    print("=" * 60)

    ok, mesh = load_mesh(filename)
    if not ok:
        print("\nLoading failed, see the log above")
        return None

    print(f"\nMesh: {mesh.n_vertices} vertices, {mesh.n_tetrahedra} tetrahedra, "
          f"{mesh.n_triangles} triangles")

    if mesh.n_vertices > 0:
        lo = mesh.vertices.min(axis=0)
        hi = mesh.vertices.max(axis=0)
        print(f"Bounding box: {np.array2string(lo)} -> {np.array2string(hi)}")

    return mesh


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    setup_logging(logging.DEBUG)
    mesh = inspect_mesh(sys.argv[1])
    sys.exit(0 if mesh is not None else 1)
