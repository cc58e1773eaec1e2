"""Command-line interface for ptvnet."""

from __future__ import annotations

import argparse
import codecs
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from ptvnet.frames import edges_frame, vertices_frame
from ptvnet.graph.builder import GraphBuildError, build_graph
from ptvnet.graph.convert import to_node_link
from ptvnet.graph.types import Graph
from ptvnet.graph.wkt import linestring_to_wkt, point_to_wkt
from ptvnet.io.reader import FormatError, read_network_file
from ptvnet.logging import get_logger, set_global_log_level
from ptvnet.model.network import NetworkData

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Clip cells longer than this with an ASCII ellipsis

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _non_negative_int(value: str) -> int:
    """Argparse type for counts that must not be negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def _encoding_name(value: str) -> str:
    """Argparse type accepting only encodings known to Python."""
    try:
        return codecs.lookup(value).name
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding: '{value}'") from None


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _geometry_summary(graph: Graph) -> dict[str, int]:
    """Count edges by number of geometry points."""
    straight = sum(1 for edge in graph.edges.values() if len(edge.geometry) == 2)
    return {
        "straight": straight,
        "shaped": len(graph.edges) - straight,
    }


def _inspect_network(
    path: Path, detail: bool = False, encoding: str = "utf-8"
) -> None:
    """Print an overview of a network file and the graph built from it."""
    network: NetworkData = read_network_file(path, encoding=encoding)

    print(f"Network file: {path}")
    if network.version is not None:
        v = network.version
        print(
            f"  Version: {v.version}  Type: {v.file_type}  "
            f"Language: {v.language}  Unit: {v.unit}"
        )

    counts = network.section_counts()
    print(f"\nSections ({len(counts)}):")
    rows = [[name, str(n)] for name, n in counts.items()]
    if detail:
        rows = [
            [name, str(n), ";".join(network.sections[name].headers)]
            for name, n in counts.items()
        ]
        print(_format_table(["Section", "Rows", "Columns"], rows, max_col_width=60))
    else:
        print(_format_table(["Section", "Rows"], rows))

    graph = build_graph(network)
    summary = _geometry_summary(graph)
    total_km = sum(edge.length for edge in graph.edges.values()) / 1000.0
    n_vertices = len(graph.vertices)
    n_edges = len(graph.edges)
    print("\nGraph:")
    print(f"  {n_vertices} {_plural(n_vertices, 'vertex', 'vertices')}")
    print(f"  {n_edges} {_plural(n_edges, 'edge')}")
    print(f"  {summary['shaped']} with shape points, {summary['straight']} straight")
    print(f"  Total length: {total_km:,.3f} km")


def _print_preview(graph: Graph, limit: int) -> None:
    print("Vertices:")
    print("id;geom")
    for vertex in list(graph.vertices.values())[:limit]:
        print(f"{vertex.id};{point_to_wkt(vertex.coord)}")

    print("\nEdges:")
    print("id;source;target;geom")
    for edge in list(graph.iter_edges())[:limit]:
        print(
            f"{edge.id};{edge.source};{edge.target};"
            f"{linestring_to_wkt(edge.geometry)}"
        )


def _extract_graph(
    path: Path,
    output_dir: Optional[Path] = None,
    fmt: str = "csv",
    limit: int = 5,
    encoding: str = "utf-8",
) -> None:
    """Build the graph of a network file and write or print it."""
    start = perf_counter()
    graph = build_graph(read_network_file(path, encoding=encoding))

    if output_dir is None:
        _print_preview(graph, limit)
    else:
        output_dir.mkdir(parents=True, exist_ok=True)
        if fmt == "json":
            target = output_dir / f"{path.stem}.graph.json"
            with target.open("w", encoding="utf-8") as fh:
                json.dump(to_node_link(graph), fh)
            logger.info("Wrote %s", target)
        else:
            vertices_path = output_dir / f"{path.stem}.vertices.csv"
            edges_path = output_dir / f"{path.stem}.edges.csv"
            vertices_frame(graph).to_csv(vertices_path, sep=";", index=False)
            edges_frame(graph).to_csv(edges_path, sep=";", index=False)
            logger.info("Wrote %s and %s", vertices_path, edges_path)

    logger.info("Extraction completed in %s", _format_duration(perf_counter() - start))


def _add_encoding_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--encoding",
        "-e",
        type=_encoding_name,
        default="utf-8",
        help="Text encoding of the network file (default: utf-8, e.g. cp1252)",
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``ptvnet`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="ptvnet",
        description="Inspect network files and extract their road graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,extract}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Summarize a network file and its graph"
    )
    inspect_parser.add_argument("network", type=Path, help="Path to .net file")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show the declared columns of every section",
    )

    _add_encoding_argument(inspect_parser)

    extract_parser = subparsers.add_parser(
        "extract", help="Extract vertices and edges with geometry"
    )
    extract_parser.add_argument("network", type=Path, help="Path to .net file")
    extract_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory; without it a preview is printed to stdout",
    )
    extract_parser.add_argument(
        "--format",
        "-f",
        choices=("csv", "json"),
        default="csv",
        help="csv: <name>.vertices.csv and <name>.edges.csv; json: node-link graph",
    )
    extract_parser.add_argument(
        "--limit",
        "-n",
        type=_non_negative_int,
        default=5,
        help="Number of vertices and edges in the stdout preview (default: 5)",
    )

    _add_encoding_argument(extract_parser)

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        if args.command == "inspect":
            _inspect_network(args.network, args.detail, args.encoding)
        elif args.command == "extract":
            _extract_graph(
                args.network, args.output, args.format, args.limit, args.encoding
            )
    except FileNotFoundError:
        logger.error(f"Network file not found: {args.network}")
        print(f"ERROR: Network file not found: {args.network}", file=sys.stderr)
        sys.exit(1)
    except (FormatError, GraphBuildError) as e:
        logger.error(f"Failed to process network: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
