"""
Data models shared by the aggregator and the report writer.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, order=True)
class PortProtocolKey:
    """Destination port and lowercase protocol name.

    Ordering is by port first, then by protocol name, which is the row order
    of the port/protocol report.
    """

    port: int
    protocol: str

    def __post_init__(self) -> None:
        if self.protocol is None:
            raise TypeError("Protocol cannot be null")

    def __str__(self) -> str:
        return f"Port: {self.port}, Protocol: {self.protocol}"


@dataclass
class RecordStats:
    """Per-run counters describing what happened to each flow log line."""

    lines_read: int = 0
    accepted: int = 0
    short: int = 0
    malformed: int = 0
    non_numeric: int = 0
    out_of_range: int = 0

    @property
    def skipped(self) -> int:
        return self.malformed + self.non_numeric + self.out_of_range

    def as_dict(self) -> dict[str, int]:
        return {
            "lines_read": self.lines_read,
            "accepted": self.accepted,
            "short": self.short,
            "malformed": self.malformed,
            "non_numeric": self.non_numeric,
            "out_of_range": self.out_of_range,
        }


@dataclass(frozen=True)
class AggregationSnapshot:
    """Read-only view of the aggregator's counters."""

    tag_counts: Mapping[str, int]
    port_protocol_counts: Mapping[PortProtocolKey, int]
    stats: RecordStats = field(default_factory=RecordStats)

    @classmethod
    def capture(
        cls,
        tag_counts: Mapping[str, int],
        port_protocol_counts: Mapping[PortProtocolKey, int],
        stats: RecordStats,
    ) -> "AggregationSnapshot":
        """Copy the given maps so later ingestion does not leak into the view."""
        return cls(
            tag_counts=MappingProxyType(dict(tag_counts)),
            port_protocol_counts=MappingProxyType(dict(port_protocol_counts)),
            stats=RecordStats(**stats.as_dict()),
        )
