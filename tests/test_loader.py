"""Tests for matrix and edge-list input."""
from __future__ import annotations

import io
from pathlib import Path

import pytest

from cyclescope.graph.adjacency import InvalidVertex, InvalidVertexCount, MalformedMatrix
from cyclescope.loader import parse_edges, parse_matrix, read_matrix
from cyclescope.samples import SAMPLES, build_sample

TRIANGLE_TEXT = """\
0 1 0
0 0 1
1 0 0
"""


class TestParseMatrix:
    def test_rows_from_lines(self) -> None:
        assert parse_matrix(TRIANGLE_TEXT) == [[0, 1, 0], [0, 0, 1], [1, 0, 0]]

    def test_blank_lines_ignored(self) -> None:
        assert parse_matrix("\n0 1\n\n1 0\n\n") == [[0, 1], [1, 0]]

    def test_known_count_ignores_line_breaks(self) -> None:
        assert parse_matrix("0 1 0 0 0 1\n1 0 0", vertex_count=3) == [
            [0, 1, 0],
            [0, 0, 1],
            [1, 0, 0],
        ]

    def test_known_count_wrong_token_count(self) -> None:
        with pytest.raises(MalformedMatrix, match="Expected 9 entries"):
            parse_matrix("0 1 0 0", vertex_count=3)

    def test_known_count_non_positive(self) -> None:
        with pytest.raises(InvalidVertexCount):
            parse_matrix("", vertex_count=0)

    def test_ragged_rows(self) -> None:
        with pytest.raises(MalformedMatrix, match="Row 1 has 1 entries"):
            parse_matrix("0 1\n1\n")

    def test_empty(self) -> None:
        with pytest.raises(MalformedMatrix, match="empty"):
            parse_matrix("   \n\n")

    def test_non_integer_token(self) -> None:
        with pytest.raises(MalformedMatrix, match="not an integer"):
            parse_matrix("0 x\n0 0\n")

    def test_out_of_range_value(self) -> None:
        with pytest.raises(MalformedMatrix, match=r"Entry \(0, 1\) is 2"):
            parse_matrix("0 2\n0 0\n")


class TestReadMatrix:
    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "triangle.txt"
        path.write_text(TRIANGLE_TEXT)
        g = read_matrix(path)
        assert g.vertex_count == 3
        assert list(g.edges()) == [(0, 1), (1, 2), (2, 0)]

    def test_from_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "triangle.txt"
        path.write_text(TRIANGLE_TEXT)
        assert read_matrix(str(path)).edge_count == 3

    def test_from_stream(self) -> None:
        g = read_matrix(io.StringIO(TRIANGLE_TEXT))
        assert g.has_edge(2, 0)

    def test_from_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("0 1\n0 0\n"))
        g = read_matrix("-")
        assert list(g.edges()) == [(0, 1)]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_matrix(tmp_path / "nope.txt")


class TestParseEdges:
    def test_basic(self) -> None:
        g = parse_edges("0-1,1-2,2-0", 3)
        assert list(g.edges()) == [(0, 1), (1, 2), (2, 0)]

    def test_whitespace_and_trailing_comma(self) -> None:
        g = parse_edges(" 0-1 , 1-2, ", 3)
        assert g.edge_count == 2

    def test_empty_list(self) -> None:
        assert parse_edges("", 2).edge_count == 0

    def test_out_of_range(self) -> None:
        with pytest.raises(InvalidVertex):
            parse_edges("0-3", 3)

    def test_bad_item(self) -> None:
        with pytest.raises(MalformedMatrix, match="form u-v"):
            parse_edges("0:1", 3)

    def test_non_integer(self) -> None:
        with pytest.raises(MalformedMatrix, match="non-integer"):
            parse_edges("a-1", 3)


class TestSamples:
    @pytest.mark.parametrize("name", sorted(SAMPLES))
    def test_every_sample_builds(self, name: str) -> None:
        g = build_sample(name)
        assert g.vertex_count == SAMPLES[name].vertex_count
        assert g.edge_count == len(SAMPLES[name].edges)

    def test_larger_count_pads(self) -> None:
        g = build_sample("triangle", vertex_count=6)
        assert g.vertex_count == 6
        assert g.successors(5) == []

    def test_smaller_count_fails(self) -> None:
        with pytest.raises(InvalidVertex):
            build_sample("triangle", vertex_count=2)

    def test_zero_count_fails(self) -> None:
        with pytest.raises(InvalidVertexCount):
            build_sample("triangle", vertex_count=0)

    def test_unknown_sample(self) -> None:
        with pytest.raises(KeyError, match="choose from"):
            build_sample("pentagon")
