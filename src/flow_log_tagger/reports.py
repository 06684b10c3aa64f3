"""
Report rendering for tag counts and port/protocol counts.
"""

import logging
from pathlib import Path
from typing import Iterable, Mapping, Union

from .config import ReportDefaults
from .models import AggregationSnapshot, PortProtocolKey

logger = logging.getLogger(__name__)


def tag_report_rows(tag_counts: Mapping[str, int]) -> list[str]:
    """Render tag counts as CSV rows sorted by tag."""
    rows = [ReportDefaults.TAG_HEADER]
    rows.extend(f"{tag},{count}" for tag, count in sorted(tag_counts.items()))
    return rows


def port_protocol_report_rows(
    port_protocol_counts: Mapping[PortProtocolKey, int],
) -> list[str]:
    """Render port/protocol counts as CSV rows sorted by port, then protocol."""
    rows = [ReportDefaults.PORT_PROTOCOL_HEADER]
    rows.extend(
        f"{key.port},{key.protocol},{count}"
        for key, count in sorted(port_protocol_counts.items())
    )
    return rows


def write_rows(output_path: Union[str, Path], rows: Iterable[str]) -> int:
    """Overwrite ``output_path`` with ``rows``, one per line.

    A failure to write an individual row is logged and the remaining rows are
    still attempted. Failure to open the file propagates.
    """
    written = 0
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        for row in rows:
            try:
                f.write(row + "\n")
                written += 1
            except OSError as e:
                logger.error(f"Error writing to file: {output_path} ({e})")
    return written


def write_tag_report(output_path: Union[str, Path], tag_counts: Mapping[str, int]) -> int:
    """Write the tag count report."""
    logger.info(f"Writing tag count output to file: {output_path}")
    return write_rows(output_path, tag_report_rows(tag_counts))


def write_port_protocol_report(
    output_path: Union[str, Path],
    port_protocol_counts: Mapping[PortProtocolKey, int],
) -> int:
    """Write the port/protocol combination report."""
    logger.info(f"Writing port protocol output to file: {output_path}")
    return write_rows(output_path, port_protocol_report_rows(port_protocol_counts))


class ReportPrinter:
    """Prints report tables to the console."""

    @staticmethod
    def print_summary(snapshot: AggregationSnapshot, limit: int) -> None:
        """Print both reports, truncated to ``limit`` rows each."""
        ReportPrinter.print_tag_counts(snapshot.tag_counts, limit)
        ReportPrinter.print_port_protocol_counts(snapshot.port_protocol_counts, limit)

    @staticmethod
    def print_tag_counts(tag_counts: Mapping[str, int], limit: int) -> None:
        print("\n=== Tag Counts ===")
        print(f"{'Tag':<30} {'Count':<10}")
        print("-" * 40)

        for tag, count in sorted(tag_counts.items())[:limit]:
            print(f"{tag:<30} {count:<10}")

    @staticmethod
    def print_port_protocol_counts(
        port_protocol_counts: Mapping[PortProtocolKey, int], limit: int
    ) -> None:
        print("\n=== Port/Protocol Combination Counts ===")
        print(f"{'Port':<8} {'Protocol':<12} {'Count':<10}")
        print("-" * 30)

        for key, count in sorted(port_protocol_counts.items())[:limit]:
            print(f"{key.port:<8} {key.protocol:<12} {count:<10}")
