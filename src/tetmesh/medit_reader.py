"""
MEDIT Mesh Reader
=================

Read a tetrahedral volume mesh from a MEDIT ``.mesh`` text file into lists of
rows.

The header must declare ``MeshVersionFormatted 1`` and ``Dimension 3``. It is
followed by the ``Vertices``, ``Triangles`` and ``Tetrahedra`` sections in
that order. Connectivity is converted from the file's 1-based indices to
0-based indices and the trailing reference id of every record is dropped.
"""

import logging
from typing import List, NamedTuple, Optional, TextIO, Tuple, Union

from .errors import MeshFormatError, MeshIOError, MeshTruncationError
from .medit_format import (
    DIMENSION_KEYWORD,
    SECTIONS,
    SUPPORTED_DIMENSION,
    SUPPORTED_VERSION,
    VERSION_KEYWORD,
    SectionSpec,
    TETRAHEDRA,
    TRIANGLES,
    VERTICES,
    ValueKind,
)
from .tokenizer import MeshTokenizer, Token, TokenKind, classify_token

logger = logging.getLogger(__name__)

Number = Union[int, float]


class MeshLists(NamedTuple):
    """Section rows as read from the file."""
    vertices: List[List[float]]
    tetrahedra: List[List[int]]
    triangles: List[List[int]]


def _read_header_value(tokenizer: MeshTokenizer, line: str) -> Optional[int]:
    """
    Value accompanying a header keyword.

    Taken from the keyword's own line when it carries an integer there,
    otherwise from the next token of the stream.
    """
    words = line.split()
    if len(words) >= 2:
        same_line = classify_token(words[1], tokenizer.line_number)
        if same_line.kind is TokenKind.INTEGER:
            return same_line.value

    # Value on the following line
    token = tokenizer.next_token()
    if token is None or token.kind is not TokenKind.INTEGER:
        return None
    return token.value


def _read_header_entry(tokenizer: MeshTokenizer, keyword: str,
                       expected: int) -> int:
    line = tokenizer.next_substantive_line(keyword)
    word = line.split()[0]
    if word != keyword:
        raise MeshFormatError(
            f"expected {keyword} but found '{word}'", tokenizer.line_number)

    value = _read_header_value(tokenizer, line)
    if value != expected:
        found = "nothing" if value is None else value
        raise MeshFormatError(
            f"{keyword} must be {expected}, not {found}",
            tokenizer.line_number)
    return value


def read_header(tokenizer: MeshTokenizer) -> Tuple[int, int]:
    """
    Validate the ``MeshVersionFormatted`` and ``Dimension`` declarations.

    Args:
        tokenizer: tokenizer positioned at the start of the file

    Returns:
        (version, dimension)

    Raises:
        MeshFormatError: wrong keyword, version or dimension
        MeshTruncationError: file ends inside the header
    """
    version = _read_header_entry(tokenizer, VERSION_KEYWORD, SUPPORTED_VERSION)
    dimension = _read_header_entry(tokenizer, DIMENSION_KEYWORD,
                                   SUPPORTED_DIMENSION)
    logger.debug("Header: version %d, dimension %d", version, dimension)
    return version, dimension


def _expect_keyword(tokenizer: MeshTokenizer, keyword: str) -> None:
    line = tokenizer.next_substantive_line(keyword)
    stripped = line.lstrip()
    word = stripped.split()[0]
    if word != keyword:
        raise MeshFormatError(
            f"expected section {keyword} but found '{word}'",
            tokenizer.line_number)
    # Whatever follows the keyword belongs to the section body
    tokenizer.push_back_remainder(stripped[len(word):])


def _read_count(tokenizer: MeshTokenizer, spec: SectionSpec) -> int:
    token = tokenizer.next_token()
    if token is None or token.kind is not TokenKind.INTEGER:
        raise MeshTruncationError(
            f"expecting number of {spec.keyword.lower()}",
            tokenizer.line_number)
    if token.value < 0:
        raise MeshFormatError(
            f"number of {spec.keyword.lower()} must be non-negative, "
            f"got {token.value}", token.line_number)
    return token.value


def _accepts(token: Optional[Token], kind: ValueKind) -> bool:
    if token is None:
        return False
    if kind is ValueKind.INDEX:
        return token.kind is TokenKind.INTEGER
    return token.is_numeric


def _read_record(tokenizer: MeshTokenizer, spec: SectionSpec, index: int,
                 count: int) -> List[Number]:
    record = []
    for _ in range(spec.width):
        token = tokenizer.next_token()
        if not _accepts(token, spec.value_kind):
            raise MeshTruncationError(
                f"expecting {spec.label} for record {index + 1} of {count} "
                f"in {spec.keyword}", tokenizer.line_number)
        if spec.value_kind is ValueKind.INDEX:
            record.append(token.value - spec.index_base)
        else:
            record.append(float(token.value))

    if spec.has_reference:
        # Reference ids are discarded without validation
        ref = tokenizer.next_token()
        if ref is None or not ref.is_numeric:
            raise MeshTruncationError(
                f"expecting reference id for record {index + 1} of {count} "
                f"in {spec.keyword}", tokenizer.line_number)
    return record


def read_section(tokenizer: MeshTokenizer,
                 spec: SectionSpec) -> List[List[Number]]:
    """
    Read one counted section.

    Args:
        tokenizer: tokenizer positioned before the section keyword
        spec: section descriptor (keyword, width, reference field, index base)

    Returns:
        list of ``count`` rows, each with ``spec.width`` values

    Raises:
        MeshFormatError: keyword mismatch or negative count
        MeshTruncationError: missing count, or a record with missing or
            non-numeric fields
    """
    _expect_keyword(tokenizer, spec.keyword)
    count = _read_count(tokenizer, spec)

    rows: List[List[Number]] = []
    for i in range(count):
        rows.append(_read_record(tokenizer, spec, i, count))

    logger.debug("Read %d %s", count, spec.keyword.lower())
    return rows


def read_mesh_stream(stream: TextIO) -> MeshLists:
    """
    Read a ``.mesh`` document from an open text stream.

    Args:
        stream: readable text stream positioned at the start of the document

    Returns:
        MeshLists(vertices, tetrahedra, triangles) with 0-based connectivity

    Raises:
        MeshFormatError: malformed content, including text that cannot be
            decoded
        MeshTruncationError: the document ends early
    """
    tokenizer = MeshTokenizer(stream)
    sections = {}
    try:
        read_header(tokenizer)
        for spec in SECTIONS:
            sections[spec.keyword] = read_section(tokenizer, spec)
    except UnicodeDecodeError as exc:
        # Decoding runs ahead of line reading, so no line number is known
        bad = exc.object[exc.start:exc.end]
        raise MeshFormatError(
            f"undecodable text {bad!r}: {exc.reason}") from exc

    return MeshLists(
        vertices=sections[VERTICES.keyword],
        tetrahedra=sections[TETRAHEDRA.keyword],
        triangles=sections[TRIANGLES.keyword],
    )


def read_mesh_lists(filename: str) -> MeshLists:
    """
    Load a tetrahedral volume mesh from a ``.mesh`` file.

    Args:
        filename: path of the .mesh file

    Returns:
        MeshLists(vertices, tetrahedra, triangles); vertices are
        ``[x, y, z]`` floats, tetrahedra and triangles hold 0-based indices

    Raises:
        MeshIOError: file cannot be opened
        MeshFormatError, MeshTruncationError: malformed content
    """
    try:
        f = open(filename, 'r', encoding='utf-8')
    except OSError as exc:
        raise MeshIOError(f"{filename} could not be opened: {exc}") from exc

    with f:
        lists = read_mesh_stream(f)

    logger.info("Loaded %s: %d vertices, %d triangles, %d tetrahedra",
                filename, len(lists.vertices), len(lists.triangles),
                len(lists.tetrahedra))
    return lists
