"""
Flow Log Tagger package.

Classifies AWS VPC Flow Log records by destination port and protocol
against a lookup table and reports counts per tag and per port/protocol
combination.
"""

from typing import Final

# Package metadata
__version__: Final[str] = "1.0.0"
__description__: Final[str] = "AWS VPC Flow Log port/protocol tagging tool"

# Public API exports
from .aggregator import FlowLogAggregator
from .analyzer import FlowLogAnalyzer
from .config import (
    DEFAULT_CONFIG,
    EXPECTED_FIELDS,
    UNKNOWN_PROTOCOL,
    UNTAGGED,
    AnalyzerConfig,
    ValidationPolicy,
)
from .exceptions import (
    FlowLogTaggerError,
    InvalidPathError,
    MalformedRecordError,
    RangeError,
)
from .models import AggregationSnapshot, PortProtocolKey, RecordStats
from .parser import FlowLogReader, LogLineParser
from .reports import (
    port_protocol_report_rows,
    tag_report_rows,
    write_port_protocol_report,
    write_tag_report,
)
from .tables import LookupTable, ProtocolTable
from .validators import (
    validate_log_entry,
    validate_port,
    validate_protocol_number,
    validate_record,
)

__all__ = [
    # Pipeline
    "FlowLogAggregator",
    "FlowLogAnalyzer",
    # Configuration
    "DEFAULT_CONFIG",
    "EXPECTED_FIELDS",
    "UNKNOWN_PROTOCOL",
    "UNTAGGED",
    "AnalyzerConfig",
    "ValidationPolicy",
    # Errors
    "FlowLogTaggerError",
    "InvalidPathError",
    "MalformedRecordError",
    "RangeError",
    # Models
    "AggregationSnapshot",
    "PortProtocolKey",
    "RecordStats",
    # Parser
    "FlowLogReader",
    "LogLineParser",
    # Reports
    "port_protocol_report_rows",
    "tag_report_rows",
    "write_port_protocol_report",
    "write_tag_report",
    # Reference tables
    "LookupTable",
    "ProtocolTable",
    # Validators
    "validate_log_entry",
    "validate_port",
    "validate_protocol_number",
    "validate_record",
]
