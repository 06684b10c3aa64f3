"""
Tests for flow log file reading.
"""

import gzip

from conftest import make_record
from flow_log_tagger.parser import FlowLogReader, LogLineParser


class TestLogLineParser:
    """Test splitting of individual lines."""

    def test_splits_on_whitespace_runs(self):
        line = make_record().replace(" ", "  \t", 3)

        fields = LogLineParser().parse_line(line)

        assert fields is not None
        assert len(fields) == 14
        assert fields[6] == "443"
        assert fields[7] == "6"

    def test_short_line_returns_none(self):
        assert LogLineParser().parse_line("2 123456789012 eni-1") is None

    def test_empty_line_returns_none(self):
        assert LogLineParser().parse_line("") is None


class TestFlowLogReader:
    """Test reading plain and compressed flow log files."""

    def test_read_text_file(self, tmp_path):
        path = tmp_path / "flowlogs.txt"
        path.write_text(make_record("443") + "\n" + make_record("25") + "\n")

        lines = list(FlowLogReader().read_file(path))

        assert lines == [make_record("443"), make_record("25")]

    def test_read_compressed_file(self, tmp_path):
        path = tmp_path / "flowlogs.txt.gz"
        with gzip.open(path, "wt") as f:
            f.write(make_record("443") + "\n")

        lines = list(FlowLogReader().read_file(path))

        assert lines == [make_record("443")]

    def test_short_lines_are_passed_through(self, tmp_path):
        """Short lines reach the aggregator, which counts and drops them."""
        path = tmp_path / "flowlogs.txt"
        path.write_text("short line\n\n" + make_record("22") + "\n")

        lines = list(FlowLogReader().read_file(path))

        assert lines == ["short line", "", make_record("22")]
