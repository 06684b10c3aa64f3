"""
Classification and aggregation of flow log records.
"""

import logging
from collections import defaultdict
from typing import Iterable, Sequence

from .config import FlowLogFields, ValidationPolicy
from .exceptions import MalformedRecordError, RangeError
from .models import AggregationSnapshot, PortProtocolKey, RecordStats
from .parser import LogLineParser
from .tables import LookupTable, ProtocolTable
from .validators import (
    parse_int,
    validate_port,
    validate_protocol_number,
    validate_record,
)

logger = logging.getLogger(__name__)


class FlowLogAggregator:
    """Counts flow log records per tag and per port/protocol combination."""

    def __init__(
        self,
        protocols: ProtocolTable,
        lookup: LookupTable,
        policy: ValidationPolicy = ValidationPolicy.STRUCTURAL,
    ):
        self.protocols = protocols
        self.lookup = lookup
        self.policy = policy
        self.parser = LogLineParser()
        self.stats = RecordStats()
        self._tag_counts: dict[str, int] = defaultdict(int)
        self._port_protocol_counts: dict[PortProtocolKey, int] = defaultdict(int)

    def ingest(self, line: str) -> bool:
        """Classify one raw flow log line. Returns True if it was counted."""
        self.stats.lines_read += 1
        fields = self.parser.parse_line(line)
        if fields is None:
            self.stats.short += 1
            return False
        return self.ingest_fields(fields, line)

    def ingest_lines(self, lines: Iterable[str]) -> int:
        """Classify every line of an iterable, returning how many were counted."""
        return sum(1 for line in lines if self.ingest(line))

    def ingest_fields(self, fields: Sequence[str], line: str = "") -> bool:
        """Classify a record that has already been split into fields."""
        log_line = line or " ".join(fields)
        try:
            validate_record(fields, self.policy)

            dst_port = parse_int(fields[FlowLogFields.DSTPORT])
            protocol_number = parse_int(fields[FlowLogFields.PROTOCOL])

            validate_port(dst_port)
            validate_protocol_number(protocol_number)
        except MalformedRecordError as e:
            self.stats.malformed += 1
            logger.warning(f"Skipping invalid log entry: {log_line}. Reason: {e}")
            return False
        except RangeError as e:
            self.stats.out_of_range += 1
            logger.warning(f"Skipping invalid log entry: {log_line}. Reason: {e}")
            return False
        except ValueError as e:
            self.stats.non_numeric += 1
            logger.error(f"Invalid numeric data in log entry: {log_line} ({e})")
            return False

        key = PortProtocolKey(dst_port, self.protocols.resolve(protocol_number))
        tag = self.lookup.resolve(key)

        self._tag_counts[tag] += 1
        self._port_protocol_counts[key] += 1
        self.stats.accepted += 1
        return True

    def snapshot(self) -> AggregationSnapshot:
        """Return a read-only copy of the current counters."""
        return AggregationSnapshot.capture(
            self._tag_counts, self._port_protocol_counts, self.stats
        )
