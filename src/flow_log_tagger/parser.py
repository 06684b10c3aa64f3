"""
Parser module for reading VPC Flow Log files.
"""

import gzip
from pathlib import Path
from typing import Any, Generator, Optional, Union

from .config import FlowLogFields


class LogLineParser:
    """Splits a VPC Flow Log line into its whitespace-separated fields."""

    def __init__(self, min_fields: int = FlowLogFields.EXPECTED_FIELDS):
        self.min_fields = min_fields

    def split_line(self, line: str) -> list[str]:
        """Split a line on runs of whitespace."""
        return line.split()

    def parse_line(self, line: str) -> Optional[list[str]]:
        """Return the fields of a line, or None when it is too short."""
        fields = self.split_line(line)
        if len(fields) >= self.min_fields:
            return fields
        return None


class FlowLogReader:
    """Reads raw flow log lines, with support for gzip-compressed files."""

    def read_file(self, file_path: Union[str, Path]) -> Generator[str, None, None]:
        """Yield the raw lines of a flow log file."""
        path = Path(file_path)

        if path.suffix == ".gz":
            yield from self._read_compressed_file(path)
        else:
            yield from self._read_text_file(path)

    def _read_compressed_file(self, path: Path) -> Generator[str, None, None]:
        """Read compressed log file."""
        with gzip.open(path, "rt", encoding="utf-8") as f:
            yield from self._lines(f)

    def _read_text_file(self, path: Path) -> Generator[str, None, None]:
        """Read text log file."""
        with open(path, "r", encoding="utf-8") as f:
            yield from self._lines(f)

    @staticmethod
    def _lines(file_handle: Any) -> Generator[str, None, None]:
        for line in file_handle:
            yield line.rstrip("\r\n")

