"""Reader for the section-structured, semicolon-delimited network format.

A file is a sequence of sections. Each section starts with a header line such
as ``$LINK:NO;FROMNODENO;TONODENO;...`` followed by ``;``-separated data rows.
Lines starting with ``*`` are comments.

Every section is stored verbatim in :attr:`NetworkData.sections`. Sections the
graph builder relies on are additionally decoded into typed records. Decoding
is driven by the declared column names, so reordered or narrower files are
read correctly; a section without a column list falls back to the default
layout below.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from ptvnet.config import FORMAT_CONFIG, FormatConfig
from ptvnet.logging import get_logger
from ptvnet.model.network import (
    IntermediatePoint,
    Link,
    LinkPolyPoint,
    NetworkData,
    Node,
    Point,
    Section,
    ShapeEdge,
    Version,
)

logger = get_logger(__name__)

# Column layouts used when a section header declares no columns
DEFAULT_COLUMNS: Dict[str, List[str]] = {
    "VERSION": ["VERSNR", "FILETYPE", "LANGUAGE", "UNIT"],
    "NODE": [
        "NO",
        "CODE",
        "NAME",
        "TYPENO",
        "CONTROLTYPE",
        "MAINNODENO",
        "USEMETHODIMPATNODE",
        "METHODIMPATNODE",
        "CAPPRT",
        "XCOORD",
        "YCOORD",
        "ZCOORD",
    ],
    "LINK": [
        "NO",
        "FROMNODENO",
        "TONODENO",
        "NAME",
        "TYPENO",
        "TSYSSET",
        "USERDIRECTION",
        "LENGTH",
        "NUMLANES",
        "PLANNO",
        "CAPPRT",
        "V0PRT",
    ],
    "EDGEITEM": ["EDGEID", "INDEX", "XCOORD", "YCOORD"],
    "LINKPOLY": ["FROMNODENO", "TONODENO", "INDEX", "XCOORD", "YCOORD", "ZCOORD"],
    "POINT": ["ID", "XCOORD", "YCOORD"],
    "EDGE": ["ID", "FROMPOINTID", "TOPOINTID"],
}


class FormatError(ValueError):
    """Raised when a network file cannot be decoded.

    Attributes:
        section: Name of the section being read, if any.
        line_no: 1-based line number of the offending line, if known.
    """

    def __init__(
        self,
        message: str,
        section: Optional[str] = None,
        line_no: Optional[int] = None,
    ) -> None:
        location = []
        if section is not None:
            location.append(f"section ${section}")
        if line_no is not None:
            location.append(f"line {line_no}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)
        self.section = section
        self.line_no = line_no


class _Row:
    """Access to the fields of one data row by column name."""

    def __init__(self, columns: Dict[str, int], values: List[str]) -> None:
        self._columns = columns
        self._values = values

    def text(self, name: str) -> str:
        idx = self._columns.get(name)
        if idx is None or idx >= len(self._values):
            return ""
        return self._values[idx].strip()

    def required_int(self, name: str) -> int:
        value = self.text(name)
        if not value:
            raise ValueError(f"missing required field {name}")
        return _to_int(name, value)

    def optional_int(self, name: str, default: int = 0) -> int:
        value = self.text(name)
        return _to_int(name, value) if value else default

    def required_float(self, name: str) -> float:
        value = self.text(name)
        if not value:
            raise ValueError(f"missing required field {name}")
        return _to_float(name, value)

    def optional_float(self, name: str, default: float = 0.0) -> float:
        value = self.text(name)
        return _to_float(name, value) if value else default


def _to_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"invalid integer '{value}' in field {name}") from exc


def _to_float(name: str, value: str) -> float:
    try:
        return float(value.replace(",", "."))
    except ValueError as exc:
        raise ValueError(f"invalid number '{value}' in field {name}") from exc


def _decode_version(row: _Row, data: NetworkData) -> None:
    data.version = Version(
        version=row.text("VERSNR"),
        file_type=row.text("FILETYPE"),
        language=row.text("LANGUAGE"),
        unit=row.text("UNIT"),
    )


def _decode_node(row: _Row, data: NetworkData) -> None:
    data.nodes.append(
        Node(
            no=row.required_int("NO"),
            x=row.required_float("XCOORD"),
            y=row.required_float("YCOORD"),
            z=row.optional_float("ZCOORD"),
            code=row.text("CODE"),
            name=row.text("NAME"),
            type_no=row.optional_int("TYPENO"),
        )
    )


def _decode_link(row: _Row, data: NetworkData) -> None:
    data.links.append(
        Link(
            no=row.required_int("NO"),
            from_node=row.required_int("FROMNODENO"),
            to_node=row.required_int("TONODENO"),
            length=row.text("LENGTH"),
            v0_prt=row.text("V0PRT"),
            num_lanes=row.optional_int("NUMLANES"),
            cap_prt=row.optional_int("CAPPRT"),
            name=row.text("NAME"),
            type_no=row.optional_int("TYPENO"),
            tsys_set=row.text("TSYSSET"),
        )
    )


def _decode_edge_item(row: _Row, data: NetworkData) -> None:
    data.intermediate_points.append(
        IntermediatePoint(
            edge_id=row.required_int("EDGEID"),
            index=row.required_int("INDEX"),
            x=row.required_float("XCOORD"),
            y=row.required_float("YCOORD"),
        )
    )


def _decode_link_poly(row: _Row, data: NetworkData) -> None:
    data.link_poly_points.append(
        LinkPolyPoint(
            from_node=row.required_int("FROMNODENO"),
            to_node=row.required_int("TONODENO"),
            index=row.required_int("INDEX"),
            x=row.required_float("XCOORD"),
            y=row.required_float("YCOORD"),
            z=row.optional_float("ZCOORD"),
        )
    )


def _decode_point(row: _Row, data: NetworkData) -> None:
    data.points.append(
        Point(
            id=row.required_int("ID"),
            x=row.required_float("XCOORD"),
            y=row.required_float("YCOORD"),
        )
    )


def _decode_shape_edge(row: _Row, data: NetworkData) -> None:
    data.shape_edges.append(
        ShapeEdge(
            id=row.required_int("ID"),
            from_point=row.required_int("FROMPOINTID"),
            to_point=row.required_int("TOPOINTID"),
        )
    )


DECODERS: Dict[str, Callable[[_Row, NetworkData], None]] = {
    "VERSION": _decode_version,
    "NODE": _decode_node,
    "LINK": _decode_link,
    "EDGEITEM": _decode_edge_item,
    "LINKPOLY": _decode_link_poly,
    "POINT": _decode_point,
    "EDGE": _decode_shape_edge,
}


def _column_index(name: str, headers: List[str]) -> Dict[str, int]:
    headers = headers or DEFAULT_COLUMNS.get(name, [])
    columns: Dict[str, int] = {}
    for idx, header in enumerate(headers):
        # First occurrence wins for repeated column names
        columns.setdefault(header.strip().upper(), idx)
    return columns


def read_network(
    lines: Iterable[str], config: Optional[FormatConfig] = None
) -> NetworkData:
    """Parse network file content into a :class:`NetworkData`.

    Args:
        lines: Iterable of text lines (an open file works).
        config: Format tokens; defaults to :data:`ptvnet.config.FORMAT_CONFIG`.

    Returns:
        NetworkData with typed tables and raw sections filled.

    Raises:
        FormatError: If a typed row cannot be decoded or a data row appears
            before any section header.
    """
    cfg = config or FORMAT_CONFIG
    data = NetworkData()
    section: Optional[Section] = None
    columns: Dict[str, int] = {}
    decoder: Optional[Callable[[_Row, NetworkData], None]] = None

    for line_no, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if line_no == 1:
            line = line.lstrip("\ufeff")
        if not line or cfg.is_comment(line):
            continue

        if cfg.is_section_header(line):
            name, _, header_text = line[len(cfg.section_prefix) :].partition(
                cfg.header_separator
            )
            name = name.strip().upper()
            headers = header_text.split(cfg.field_separator) if header_text else []
            section = data.sections.get(name)
            if section is None:
                section = Section(name=name, headers=headers)
                data.sections[name] = section
            elif headers and headers != section.headers:
                logger.warning(
                    "Section $%s repeated with different columns at line %d; "
                    "rows are appended under the first column list",
                    name,
                    line_no,
                )
            else:
                logger.warning(
                    "Section $%s appears more than once; rows are appended", name
                )
            columns = _column_index(name, headers or section.headers)
            decoder = DECODERS.get(name)
            continue

        if section is None:
            raise FormatError("Data row outside of any section", line_no=line_no)

        values = line.split(cfg.field_separator)
        section.rows.append(values)
        if decoder is None:
            continue
        try:
            decoder(_Row(columns, values), data)
        except ValueError as exc:
            raise FormatError(
                f"Cannot decode row: {exc}", section=section.name, line_no=line_no
            ) from exc

    data.invalidate_indexes()
    logger.debug(
        "Read %d sections: %d nodes, %d links, %d intermediate points, "
        "%d link polygon points",
        len(data.sections),
        len(data.nodes),
        len(data.links),
        len(data.intermediate_points),
        len(data.link_poly_points),
    )
    return data


def read_network_file(
    path: Union[str, Path],
    encoding: str = "utf-8",
    config: Optional[FormatConfig] = None,
) -> NetworkData:
    """Read and parse a network file from disk.

    Args:
        path: Path to the ``.net`` file.
        encoding: Text encoding of the file. Visum exports written on Windows
            are often ``cp1252``.
        config: Format tokens; defaults to :data:`ptvnet.config.FORMAT_CONFIG`.

    Returns:
        Parsed NetworkData.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        FormatError: If the file cannot be decoded with ``encoding`` or its
            content is malformed.
    """
    path = Path(path)
    logger.info("Reading network file %s (%s)", path, encoding)
    try:
        with path.open("r", encoding=encoding, newline="") as fh:
            return read_network(fh, config=config)
    except UnicodeDecodeError as exc:
        raise FormatError(
            f"Cannot decode {path} as {encoding} ({exc.reason})"
        ) from exc
