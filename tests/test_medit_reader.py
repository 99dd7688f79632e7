"""
Tests for MEDIT Reader
======================
"""

import io
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tetmesh.medit_reader import (
    MeshLists, read_header, read_section, read_mesh_stream, read_mesh_lists
)
from tetmesh.medit_format import VERTICES, TRIANGLES, TETRAHEDRA
from tetmesh.tokenizer import MeshTokenizer
from tetmesh.errors import (
    MeshReadError, MeshIOError, MeshFormatError, MeshTruncationError
)


HEADER = "MeshVersionFormatted 1\nDimension 3\n"

TWO_VERTEX_MESH = """MeshVersionFormatted 1
Dimension 3
Vertices
2
0.0 0.0 0.0 0
1.0 0.0 0.0 0
Triangles
0
Tetrahedra
0
"""

SINGLE_TET_MESH = """MeshVersionFormatted 1
Dimension 3
# unit tetrahedron
Vertices
4
0 0 0 1
1 0 0 1
0 1 0 1
0 0 1 1

Triangles
2
1 2 3 10
1 2 4 11

Tetrahedra
1
1 2 3 4 5
End
"""


def _read(text):
    return read_mesh_stream(io.StringIO(text))


class TestHeader:
    """Tests for MeshVersionFormatted / Dimension validation."""

    def test_same_line_values(self):
        tok = MeshTokenizer(io.StringIO(HEADER))
        assert read_header(tok) == (1, 3)

    def test_values_on_next_line(self):
        """Values may follow their keyword on the next line."""
        tok = MeshTokenizer(io.StringIO(
            "MeshVersionFormatted\n1\nDimension\n3\n"))
        assert read_header(tok) == (1, 3)

    def test_leading_comments_and_blank_lines(self):
        tok = MeshTokenizer(io.StringIO(
            "# generated by tetgen\n\n# more\nMeshVersionFormatted 1\n"
            "\n# between\nDimension 3\n"))
        assert read_header(tok) == (1, 3)

    def test_wrong_first_keyword(self):
        tok = MeshTokenizer(io.StringIO("MeshVersion 1\nDimension 3\n"))
        with pytest.raises(MeshFormatError, match="MeshVersion"):
            read_header(tok)

    def test_version_two_rejected(self):
        tok = MeshTokenizer(io.StringIO("MeshVersionFormatted 2\nDimension 3\n"))
        with pytest.raises(MeshFormatError, match="MeshVersionFormatted"):
            read_header(tok)

    def test_dimension_two_rejected(self):
        tok = MeshTokenizer(io.StringIO("MeshVersionFormatted 1\nDimension 2\n"))
        with pytest.raises(MeshFormatError, match="Dimension"):
            read_header(tok)

    def test_missing_dimension_keyword(self):
        tok = MeshTokenizer(io.StringIO("MeshVersionFormatted 1\nVertices\n0\n"))
        with pytest.raises(MeshFormatError, match="Vertices"):
            read_header(tok)

    def test_missing_version_value(self):
        tok = MeshTokenizer(io.StringIO("MeshVersionFormatted\n"))
        with pytest.raises(MeshFormatError):
            read_header(tok)

    def test_empty_input(self):
        tok = MeshTokenizer(io.StringIO(""))
        with pytest.raises(MeshTruncationError):
            read_header(tok)


class TestReadSection:
    """Tests for counted section reading."""

    def test_vertices_discard_reference(self):
        tok = MeshTokenizer(io.StringIO("Vertices\n2\n0.5 1 -2 7\n3 4 5.25 -1\n"))
        rows = read_section(tok, VERTICES)
        assert rows == [[0.5, 1.0, -2.0], [3.0, 4.0, 5.25]]
        assert all(isinstance(x, float) for row in rows for x in row)

    def test_connectivity_is_zero_based(self):
        tok = MeshTokenizer(io.StringIO("Tetrahedra\n2\n1 2 3 4 0\n5 6 7 8 3\n"))
        assert read_section(tok, TETRAHEDRA) == [[0, 1, 2, 3], [4, 5, 6, 7]]

    def test_empty_section(self):
        tok = MeshTokenizer(io.StringIO("Triangles\n0\n"))
        assert read_section(tok, TRIANGLES) == []

    def test_count_on_keyword_line(self):
        tok = MeshTokenizer(io.StringIO("Vertices 1\n1 2 3 0\n"))
        assert read_section(tok, VERTICES) == [[1.0, 2.0, 3.0]]

    def test_records_may_span_lines(self):
        tok = MeshTokenizer(io.StringIO("Triangles\n2\n1 2\n3 0 4 5 6 0\n"))
        assert read_section(tok, TRIANGLES) == [[0, 1, 2], [3, 4, 5]]

    def test_reference_not_validated(self):
        """Arbitrary reference ids, including floats, are accepted."""
        tok = MeshTokenizer(io.StringIO("Vertices\n2\n0 0 0 -99\n1 1 1 2.5\n"))
        assert len(read_section(tok, VERTICES)) == 2

    def test_out_of_range_indices_pass_through(self):
        tok = MeshTokenizer(io.StringIO("Triangles\n1\n1 2 100 0\n"))
        assert read_section(tok, TRIANGLES) == [[0, 1, 99]]

    def test_keyword_mismatch(self):
        tok = MeshTokenizer(io.StringIO("Tetrahedra\n0\n"))
        with pytest.raises(MeshFormatError, match="Triangles"):
            read_section(tok, TRIANGLES)

    def test_missing_count(self):
        tok = MeshTokenizer(io.StringIO("Vertices\nTriangles\n0\n"))
        with pytest.raises(MeshTruncationError, match="number of vertices"):
            read_section(tok, VERTICES)

    def test_negative_count(self):
        tok = MeshTokenizer(io.StringIO("Vertices\n-1\n"))
        with pytest.raises(MeshFormatError):
            read_section(tok, VERTICES)

    def test_float_index_rejected(self):
        tok = MeshTokenizer(io.StringIO("Triangles\n1\n1.0 2 3 0\n"))
        with pytest.raises(MeshTruncationError, match="triangle indices"):
            read_section(tok, TRIANGLES)

    def test_missing_reference_field(self):
        tok = MeshTokenizer(io.StringIO("Tetrahedra\n1\n1 2 3 4\n"))
        with pytest.raises(MeshTruncationError, match="reference"):
            read_section(tok, TETRAHEDRA)

    def test_comment_inside_block_fails(self):
        """Comments are only skipped in front of keywords."""
        tok = MeshTokenizer(io.StringIO("Vertices\n2\n0 0 0 0\n# no\n1 0 0 0\n"))
        with pytest.raises(MeshTruncationError):
            read_section(tok, VERTICES)


class TestReadMeshStream:
    """Tests for whole-document reading."""

    def test_two_vertex_scenario(self):
        lists = _read(TWO_VERTEX_MESH)
        assert lists.vertices == [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]]
        assert lists.triangles == []
        assert lists.tetrahedra == []

    def test_single_tetrahedron(self):
        lists = _read(SINGLE_TET_MESH)
        assert isinstance(lists, MeshLists)
        assert len(lists.vertices) == 4
        assert lists.triangles == [[0, 1, 2], [0, 1, 3]]
        assert lists.tetrahedra == [[0, 1, 2, 3]]

    def test_all_sections_empty(self):
        lists = _read(HEADER + "Vertices\n0\nTriangles\n0\nTetrahedra\n0\n")
        assert lists == MeshLists([], [], [])

    def test_indices_within_vertex_range(self):
        lists = _read(SINGLE_TET_MESH)
        n_vertices = len(lists.vertices)
        for row in lists.tetrahedra + lists.triangles:
            assert all(0 <= i < n_vertices for i in row)

    def test_sections_out_of_order(self):
        text = HEADER + "Vertices\n0\nTetrahedra\n0\nTriangles\n0\n"
        with pytest.raises(MeshFormatError, match="Triangles"):
            _read(text)

    def test_truncated_vertex_block(self):
        """Five vertices declared, three supplied."""
        text = (HEADER + "Vertices\n5\n0 0 0 0\n1 0 0 0\n0 1 0 0\n"
                "Triangles\n0\nTetrahedra\n0\n")
        with pytest.raises(MeshTruncationError, match="record 4 of 5"):
            _read(text)

    def test_truncated_at_end_of_file(self):
        text = HEADER + "Vertices\n1\n0 0 0 0\nTriangles\n1\n1 1 1\n"
        with pytest.raises(MeshTruncationError):
            _read(text)

    def test_missing_tetrahedra_section(self):
        text = HEADER + "Vertices\n0\nTriangles\n0\n"
        with pytest.raises(MeshTruncationError, match="Tetrahedra"):
            _read(text)

    def test_trailing_tokens_after_block(self):
        """Extra text after the last record is read as the next keyword."""
        text = HEADER + "Vertices\n1\n0 0 0 0 junk\nTriangles\n0\nTetrahedra\n0\n"
        with pytest.raises(MeshFormatError, match="junk"):
            _read(text)

    def test_huge_count_with_few_records(self):
        """A declared count far beyond the data is a truncation error."""
        text = HEADER + f"Vertices\n{10 ** 18}\n0 0 0 0\n"
        with pytest.raises(MeshTruncationError, match="record 2 of"):
            _read(text)

    def test_idempotent(self):
        assert _read(SINGLE_TET_MESH) == _read(SINGLE_TET_MESH)


class TestReadMeshLists:
    """Tests for reading from a path."""

    def test_read_file(self, tmp_path):
        path = tmp_path / "two.mesh"
        path.write_text(TWO_VERTEX_MESH)
        lists = read_mesh_lists(str(path))
        assert lists.vertices == [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]]

    def test_undecodable_bytes(self, tmp_path):
        path = tmp_path / "binary.mesh"
        path.write_bytes(HEADER.encode() + b"Vertices\n1\n\xff\xfe 0 0 0\n")
        with pytest.raises(MeshFormatError, match="undecodable") as excinfo:
            read_mesh_lists(str(path))
        assert "\\xff" in str(excinfo.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(MeshIOError) as excinfo:
            read_mesh_lists(str(tmp_path / "missing.mesh"))
        assert isinstance(excinfo.value, OSError)
        assert "could not be opened" in str(excinfo.value)

    def test_error_reports_line_number(self, tmp_path):
        path = tmp_path / "bad.mesh"
        path.write_text("MeshVersionFormatted 1\nDimension 2\n")
        with pytest.raises(MeshReadError) as excinfo:
            read_mesh_lists(str(path))
        assert excinfo.value.line_number == 2
        assert "line 2" in str(excinfo.value)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
