"""
MEDIT Format Description
========================

Keywords, supported header values and section descriptors for the subset of
the MEDIT ``.mesh`` format handled by this package::

    MeshVersionFormatted 1
    Dimension 3
    Vertices
    <n>
    x y z ref
    Triangles
    <n>
    i1 i2 i3 ref
    Tetrahedra
    <n>
    i1 i2 i3 i4 ref

Connectivity indices are 1-based in the file. The trailing ``ref`` of every
record is a material/boundary marker and is discarded.
"""

from dataclasses import dataclass
from enum import Enum


COMMENT_CHAR = "#"

VERSION_KEYWORD = "MeshVersionFormatted"
DIMENSION_KEYWORD = "Dimension"

SUPPORTED_VERSION = 1
SUPPORTED_DIMENSION = 3


class ValueKind(Enum):
    """Numeric type stored for the fields of a section record."""
    COORDINATE = "coordinate"
    INDEX = "index"


@dataclass(frozen=True)
class SectionSpec:
    """
    Description of one counted section.

    Attributes:
        keyword: section keyword that opens the block
        width: number of stored values per record
        has_reference: whether each record ends with a discarded ref field
        index_base: subtracted from every stored value (1 for file indices)
        value_kind: coordinates (float) or vertex indices (int)
        label: human-readable record name used in diagnostics
    """
    keyword: str
    width: int
    has_reference: bool = True
    index_base: int = 0
    value_kind: ValueKind = ValueKind.COORDINATE
    label: str = "record"

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")

    @property
    def tokens_per_record(self) -> int:
        """Tokens consumed per record, including the reference field."""
        return self.width + (1 if self.has_reference else 0)


VERTICES = SectionSpec(
    keyword="Vertices",
    width=3,
    value_kind=ValueKind.COORDINATE,
    label="vertex position",
)

TRIANGLES = SectionSpec(
    keyword="Triangles",
    width=3,
    index_base=1,
    value_kind=ValueKind.INDEX,
    label="triangle indices",
)

TETRAHEDRA = SectionSpec(
    keyword="Tetrahedra",
    width=4,
    index_base=1,
    value_kind=ValueKind.INDEX,
    label="tetrahedron indices",
)

# Order in which sections must appear in the file
SECTIONS = (VERTICES, TRIANGLES, TETRAHEDRA)
