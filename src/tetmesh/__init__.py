"""
tetmesh
=======

Reader for tetrahedral volume meshes stored in the MEDIT ``.mesh`` text
format.

Modules:
    tokenizer: typed tokens over a .mesh text stream
    medit_reader: header validation and section reading into lists
    mesh_io: conversion to numpy tables and the boolean-result loader
    tet_mesh: TetMesh container with index validation
"""

from .errors import (
    MeshReadError,
    MeshIOError,
    MeshFormatError,
    MeshTruncationError,
    MeshShapeError,
    MeshIndexError,
)
from .medit_reader import MeshLists, read_mesh_lists, read_mesh_stream
from .list_to_matrix import list_to_matrix
from .mesh_io import read_mesh, load_mesh
from .tet_mesh import TetMesh
from .logging_config import setup_logging

__version__ = "0.1.0"
__all__ = [
    "MeshReadError",
    "MeshIOError",
    "MeshFormatError",
    "MeshTruncationError",
    "MeshShapeError",
    "MeshIndexError",
    "MeshLists",
    "read_mesh_lists",
    "read_mesh_stream",
    "list_to_matrix",
    "read_mesh",
    "load_mesh",
    "TetMesh",
    "setup_logging",
]
