"""Tests for table and JSON rendering."""

import orjson

from compress_bench.benchmarks import BenchmarkResult
from compress_bench.report import HEADERS, format_json, format_report, format_table

RESULTS = [
    BenchmarkResult("Gzip", 100, 40, 60.0),
    BenchmarkResult("Identity", 100, 100, 0.0),
]


class TestFormatTable:

    def test_layout(self):
        lines = format_table(RESULTS).splitlines()
        assert len(lines) == 2 + len(RESULTS)
        assert lines[1].split() == ["-" * len(h) for h in HEADERS]

    def test_right_aligned_with_padding(self):
        lines = format_table(RESULTS).splitlines()
        assert len({len(line) for line in lines}) == 1
        for line in lines:
            assert line.startswith("   ")
            assert not line.endswith(" ")

    def test_row(self):
        lines = format_table(RESULTS).splitlines()
        expected = " " * 8 + "Gzip" + " " * 21 + "100" + " " * 24 + "40" + " " * 7 + "60.00%"
        assert lines[2] == expected

    def test_header(self):
        header = format_table(RESULTS).splitlines()[0]
        assert header == "   Algorithm   Original Size (bytes)   Compressed Size (bytes)   Saving (%)"

    def test_negative_saving(self):
        table = format_table([BenchmarkResult("LZW", 3, 10, -233.333333)])
        assert table.splitlines()[2].endswith("-233.33%")

    def test_keeps_given_order(self):
        lines = format_table(list(reversed(RESULTS))).splitlines()
        assert lines[2].split()[0] == "Identity"
        assert lines[3].split()[0] == "Gzip"


class TestFormatReport:

    def test_original_size_line(self):
        report = format_report(100, RESULTS)
        assert report.splitlines()[0] == "Original Size: 100 bytes"
        assert report.splitlines()[1:] == format_table(RESULTS).splitlines()


class TestFormatJson:

    def test_payload(self):
        payload = orjson.loads(format_json(100, RESULTS))
        assert payload["original_size"] == 100
        assert [r["name"] for r in payload["results"]] == ["Gzip", "Identity"]
        assert payload["results"][0] == {
            "name": "Gzip",
            "original_size": 100,
            "compressed_size": 40,
            "saving_percent": 60.0,
        }
