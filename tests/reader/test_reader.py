"""Tests for the section reader."""

import pytest

from ptvnet.config import FormatConfig
from ptvnet.io.reader import FormatError, read_network, read_network_file


CP1252_NODES = "$NODE:NO;NAME;XCOORD;YCOORD\n1;Straße;0;0\n"


def _lines(text: str):
    return text.strip("\n").splitlines()


class TestReadNetwork:
    def test_sample_file_tables(self, sample_net_path):
        net = read_network_file(sample_net_path)

        assert net.version is not None
        assert net.version.version == "10.000"
        assert net.version.unit == "KM"

        assert [n.no for n in net.nodes] == [1, 2, 3, 4]
        assert net.nodes[0].code == "A" and net.nodes[0].name == "North"
        assert (net.nodes[3].x, net.nodes[3].y) == (0.5, 20.0)

        assert [(link.no, link.from_node, link.to_node) for link in net.links] == [
            (1, 1, 2),
            (4, 2, 1),
            (2, 2, 3),
            (2, 3, 2),
            (3, 3, 4),
        ]
        link = net.links[0]
        assert link.length == "0.010km"
        assert link.v0_prt == "50km/h"
        assert link.num_lanes == 2
        assert link.cap_prt == 1800
        assert link.tsys_set == "CAR"

        assert len(net.intermediate_points) == 2
        assert len(net.link_poly_points) == 2
        assert net.link_poly_points[0].z == 5.0

    def test_raw_sections_kept(self, sample_net_path):
        net = read_network_file(sample_net_path)
        assert list(net.sections) == [
            "VERSION",
            "TSYS",
            "NODE",
            "LINK",
            "EDGEITEM",
            "LINKPOLY",
        ]
        tsys = net.sections["TSYS"]
        assert tsys.headers == ["CODE", "NAME", "TYPE", "PCU"]
        assert tsys.rows == [
            ["CAR", "Car", "PrT", "1.000"],
            ["BUS", "Bus", "PuT", "2.000"],
        ]
        assert net.section_counts()["LINK"] == 5

    def test_columns_matched_by_header_name(self):
        net = read_network(
            _lines(
                """
$NODE:YCOORD;NO;XCOORD
5;1;3
$LINK:V0PRT;LENGTH;TONODENO;FROMNODENO;NO
60km/h;1km;1;1;9
"""
            )
        )
        assert (net.nodes[0].no, net.nodes[0].x, net.nodes[0].y) == (1, 3.0, 5.0)
        link = net.links[0]
        assert (link.no, link.from_node, link.to_node) == (9, 1, 1)
        assert link.length == "1km"
        assert link.v0_prt == "60km/h"
        assert link.num_lanes == 0

    def test_header_names_are_case_insensitive(self):
        net = read_network(_lines("$node:no;xcoord;ycoord\n1;2;3"))
        assert (net.nodes[0].x, net.nodes[0].y) == (2.0, 3.0)

    def test_default_layout_without_header(self):
        net = read_network(
            _lines(
                """
$EDGEITEM
7;2;1,5;2,5
$LINKPOLY
1;2;1;3;4;5
"""
            )
        )
        item = net.intermediate_points[0]
        assert (item.edge_id, item.index, item.x, item.y) == (7, 2, 1.5, 2.5)
        poly = net.link_poly_points[0]
        assert (poly.from_node, poly.to_node, poly.index) == (1, 2, 1)
        assert (poly.x, poly.y, poly.z) == (3.0, 4.0, 5.0)

    def test_comments_blank_lines_and_bom(self):
        net = read_network(
            [
                "\ufeff$VERSION:VERSNR;FILETYPE;LANGUAGE;UNIT",
                "* comment",
                "",
                "   ",
                "12.000;Net;DEU;KM",
            ]
        )
        assert net.version.version == "12.000"
        assert net.version.language == "DEU"

    def test_repeated_section_appends_rows(self):
        net = read_network(
            _lines("$POINT:ID;XCOORD;YCOORD\n1;0;0\n$POINT:ID;XCOORD;YCOORD\n2;1;1")
        )
        assert [p.id for p in net.points] == [1, 2]
        assert len(net.sections["POINT"].rows) == 2

    def test_repeated_section_keeps_first_columns(self, caplog):
        text = (
            "$NODE:NO;XCOORD;YCOORD\n1;0;0\n"
            "$NODE:NO;NAME;YCOORD;XCOORD\n2;B;5;7\n"
        )
        with caplog.at_level("WARNING", logger="ptvnet"):
            net = read_network(_lines(text))

        section = net.sections["NODE"]
        assert section.headers == ["NO", "XCOORD", "YCOORD"]
        assert section.rows == [["1", "0", "0"], ["2", "B", "5", "7"]]
        # Each block is decoded by its own column list
        assert [(n.no, n.x, n.y) for n in net.nodes] == [(1, 0.0, 0.0), (2, 7.0, 5.0)]
        assert "different columns at line 3" in caplog.text

    def test_points_and_shape_edges(self):
        net = read_network(
            _lines(
                "$POINT:ID;XCOORD;YCOORD\n1;0;0\n2;1;1\n"
                "$EDGE:ID;FROMPOINTID;TOPOINTID\n5;1;2"
            )
        )
        assert [(p.id, p.x, p.y) for p in net.points] == [(1, 0.0, 0.0), (2, 1.0, 1.0)]
        edge = net.shape_edges[0]
        assert (edge.id, edge.from_point, edge.to_point) == (5, 1, 2)

    def test_custom_config(self):
        cfg = FormatConfig(field_separator="|", comment_prefix="#")
        net = read_network(["# note", "$NODE:NO|XCOORD|YCOORD", "1|2|3"], config=cfg)
        assert (net.nodes[0].no, net.nodes[0].x) == (1, 2.0)


class TestReadNetworkErrors:
    def test_missing_required_field(self):
        with pytest.raises(FormatError, match="XCOORD") as exc_info:
            read_network(_lines("$NODE:NO;XCOORD;YCOORD\n1;;3"))
        assert exc_info.value.section == "NODE"
        assert exc_info.value.line_no == 2

    def test_invalid_integer(self):
        with pytest.raises(FormatError, match="FROMNODENO"):
            read_network(_lines("$LINK:NO;FROMNODENO;TONODENO\n1;x;2"))

    def test_row_before_any_section(self):
        with pytest.raises(FormatError, match="line 1"):
            read_network(["1;2;3"])

    def test_unknown_sections_are_not_decoded(self):
        net = read_network(_lines("$TURN:FROMNODENO;VIANODENO\nnot;numbers"))
        assert net.sections["TURN"].rows == [["not", "numbers"]]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_network_file(tmp_path / "missing.net")

    def test_wrong_encoding_is_a_format_error(self, tmp_path):
        path = tmp_path / "cp1252.net"
        path.write_bytes(CP1252_NODES.encode("cp1252"))
        with pytest.raises(FormatError, match="cp1252.net as utf-8") as exc_info:
            read_network_file(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_explicit_encoding(self, tmp_path):
        path = tmp_path / "cp1252.net"
        path.write_bytes(CP1252_NODES.encode("cp1252"))
        net = read_network_file(path, encoding="cp1252")
        assert net.nodes[0].name == "Straße"
