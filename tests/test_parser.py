"""
test_parser.py — Tests for the region input parser

Covers header gating, comment and blank handling, per-line skip rules,
position normalization and the file-level error paths.
"""

import logging

import pytest

from hivmap.colors import FALLBACK_COLORS
from hivmap.parser import (
    MissingHeaderError,
    NoRegionsError,
    RegionInputError,
    RegionParser,
    SubtypeRegion,
    parse_regions,
    read_regions,
)


class TestHeaderGating:
    """Only lines after a '>' header are data."""

    def test_lines_before_header_ignored(self, registry, caplog):
        text = "100 200 B\nnot data\n>seq\n300 400 C\n"
        with caplog.at_level(logging.WARNING, logger="hivmap.parser"):
            regions = parse_regions(text, registry)
        assert [(r.start, r.end, r.subtype) for r in regions] == [(300, 400, "C")]
        assert caplog.records == []

    def test_header_logged(self, registry, caplog):
        with caplog.at_level(logging.INFO, logger="hivmap.parser"):
            parse_regions(">seq1\n1 2 B\n>seq2\n", registry)
        headers = [r.getMessage() for r in caplog.records if "header" in r.getMessage()]
        assert len(headers) == 2
        assert ">seq1" in headers[0]

    def test_repeated_header_keeps_parsing(self, registry):
        regions = parse_regions(">a\n1 10 B\n>b\n20 30 C\n", registry)
        assert [r.subtype for r in regions] == ["B", "C"]

    def test_no_header_warns_and_returns_empty(self, registry, caplog):
        text = "# only comments\n\n# and blanks\n"
        parser = RegionParser(registry)
        with caplog.at_level(logging.WARNING, logger="hivmap.parser"):
            regions = parser.parse(text)
        assert regions == []
        assert parser.header_seen is False
        assert any("'>'" in r.getMessage() for r in caplog.records)

    def test_headered_but_empty_has_no_header_warning(self, registry, caplog):
        parser = RegionParser(registry)
        with caplog.at_level(logging.WARNING, logger="hivmap.parser"):
            regions = parser.parse("# c\n>seq\n\n")
        assert regions == []
        assert parser.header_seen is True
        assert caplog.records == []

    def test_header_flag_resets_between_parses(self, registry):
        parser = RegionParser(registry)
        parser.parse(">seq\n1 2 B\n")
        parser.parse("1 2 B\n")
        assert parser.header_seen is False


class TestDataLines:
    """Tokenizing and per-line skip rules."""

    def test_mixed_file(self, registry, mixed_text):
        regions = parse_regions(mixed_text, registry)
        assert [(r.start, r.end, r.subtype) for r in regions] == [
            (100, 900, "B"),
            (1200, 2400, "C"),
            (3000, 5000, "CRF 01_AE"),
            (6000, 7000, "B"),
        ]

    def test_reversed_pair_normalized(self, registry):
        (region,) = parse_regions(">s\n20 10 B\n", registry)
        assert (region.start, region.end) == (10, 20)

    def test_equal_positions_kept(self, registry):
        (region,) = parse_regions(">s\n50 50 B\n", registry)
        assert (region.start, region.end) == (50, 50)

    def test_label_whitespace_collapsed(self, registry):
        (region,) = parse_regions(">s\n1 2   CRF \t 07_BC  \n", registry)
        assert region.subtype == "CRF 07_BC"

    def test_short_line_warns_with_line_number(self, registry, caplog):
        text = ">s\n10 20\n30 40 B\n"
        with caplog.at_level(logging.WARNING, logger="hivmap.parser"):
            regions = parse_regions(text, registry)
        assert len(regions) == 1
        assert len(caplog.records) == 1
        assert "Line 2" in caplog.records[0].getMessage()

    @pytest.mark.parametrize("line", ["abc 20 B", "10 x B", "-- 20 B", "10 .5 B"])
    def test_bad_integer_skipped_silently(self, registry, caplog, line):
        with caplog.at_level(logging.WARNING, logger="hivmap.parser"):
            regions = parse_regions(f">s\n{line}\n", registry)
        assert regions == []
        assert caplog.records == []

    POSITION_CASES = [
        ("1.5 200 B", (1, 200)),
        ("100bp 300 C", (100, 300)),
        ("1_000 2000 D", (1, 2000)),
        ("100.0 500.0 B", (100, 500)),
        ("+5 2e3 B", (2, 5)),
    ]

    @pytest.mark.parametrize("line,expected", POSITION_CASES)
    def test_leading_integer_prefix(self, registry, line, expected):
        """Positions keep their leading integer and drop trailing text."""
        (region,) = parse_regions(f">s\n{line}\n", registry)
        assert (region.start, region.end) == expected

    def test_negative_positions_accepted(self, registry):
        (region,) = parse_regions(">s\n-5 10 B\n", registry)
        assert (region.start, region.end) == (-5, 10)

    def test_comment_after_header_ignored(self, registry):
        regions = parse_regions(">s\n# 1 2 B\n  # 3 4 C\n5 6 D\n", registry)
        assert [r.subtype for r in regions] == ["D"]

    def test_crlf_line_endings(self, registry):
        regions = parse_regions(">s\r\n1 2 B\r\n3 4 C\r\n", registry)
        assert [r.subtype for r in regions] == ["B", "C"]

    def test_file_order_preserved(self, registry):
        regions = parse_regions(">s\n500 600 C\n100 200 B\n", registry)
        assert [r.start for r in regions] == [500, 100]

    @pytest.mark.parametrize("text", ["", None, "   \n\t\n"])
    def test_empty_input(self, registry, text):
        assert parse_regions(text, registry) == []


class TestRegionColors:
    """Colors come from the supplied registry."""

    def test_default_and_fallback_colors(self, registry):
        regions = parse_regions(">s\n1 2 B\n3 4 X1\n5 6 X1\n7 8 X2\n", registry)
        assert regions[0].color == "#3F98F2"
        assert regions[1].color == regions[2].color == FALLBACK_COLORS[0]
        assert regions[3].color == FALLBACK_COLORS[1]

    def test_registry_shared_across_parses(self, registry):
        parse_regions(">s\n1 2 X1\n", registry)
        (region,) = parse_regions(">s\n1 2 X2\n", registry)
        assert region.color == FALLBACK_COLORS[1]

    def test_default_registry_is_fresh(self):
        (a,) = parse_regions(">s\n1 2 X9\n")
        (b,) = parse_regions(">s\n1 2 X8\n")
        assert a.color == b.color == FALLBACK_COLORS[0]

    def test_region_is_immutable(self, registry):
        (region,) = parse_regions(">s\n1 2 B\n", registry)
        with pytest.raises(AttributeError):
            region.start = 5


class TestReadRegions:
    """File-level reading and its distinct failure modes."""

    def test_reads_file(self, write_input, simple_text, registry):
        regions = read_regions(write_input(simple_text), registry)
        assert regions == [
            SubtypeRegion(100, 500, "B", "#3F98F2"),
            SubtypeRegion(500, 1000, "A1", "#FF5700"),
        ]

    def test_missing_header(self, write_input):
        with pytest.raises(MissingHeaderError, match="'>'"):
            read_regions(write_input("100 200 B\n"))

    def test_no_regions(self, write_input):
        with pytest.raises(NoRegionsError, match="No valid regions"):
            read_regions(write_input(">seq\n10 20\n"))

    def test_errors_are_value_errors(self):
        assert issubclass(MissingHeaderError, RegionInputError)
        assert issubclass(NoRegionsError, ValueError)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_regions(tmp_path / "absent.txt")
