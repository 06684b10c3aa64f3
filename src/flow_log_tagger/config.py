"""
Configuration module for Flow Log Tagger.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Final, Optional, Union

from .exceptions import InvalidPathError

PathLike = Union[str, Path]


class DefaultConfiguration:
    """Provides default configuration values."""

    PROTOCOLS_FILE: Final[str] = "input/protocols.csv"
    LOOKUP_FILE: Final[str] = "input/lookup.csv"
    FLOW_LOG_FILE: Final[str] = "input/flowlogs.txt"
    TAG_OUTPUT: Final[str] = "output/tagcount.csv"
    PORT_PROTOCOL_OUTPUT: Final[str] = "output/portprotocol.csv"
    LOG_DIR: Final[Path] = Path.home() / ".flow-log-tagger"
    DEFAULT_LIMIT: Final[int] = 50  # Console rows, report files are never truncated

    @classmethod
    def get_default_config(cls) -> dict[str, Any]:
        """Get default configuration dictionary."""
        return {
            "protocols_file": cls.PROTOCOLS_FILE,
            "lookup_file": cls.LOOKUP_FILE,
            "flow_log_file": cls.FLOW_LOG_FILE,
            "tag_output": cls.TAG_OUTPUT,
            "port_protocol_output": cls.PORT_PROTOCOL_OUTPUT,
            "log_dir": str(cls.LOG_DIR),
            "limit": cls.DEFAULT_LIMIT,
            "strict": False,
            "print_summary": False,
            "debug": False,
        }


class FlowLogFields:
    """Field positions of the version 2 VPC Flow Log record."""

    EXPECTED_FIELDS: Final[int] = 14

    VERSION: Final[int] = 0
    ACCOUNT_ID: Final[int] = 1
    INTERFACE_ID: Final[int] = 2
    SRCADDR: Final[int] = 3
    DSTADDR: Final[int] = 4
    SRCPORT: Final[int] = 5
    DSTPORT: Final[int] = 6
    PROTOCOL: Final[int] = 7
    PACKETS: Final[int] = 8
    BYTES: Final[int] = 9
    START: Final[int] = 10
    END: Final[int] = 11
    ACTION: Final[int] = 12
    LOG_STATUS: Final[int] = 13

    ACTIONS: Final[frozenset[str]] = frozenset({"ACCEPT", "REJECT"})


class ValueRanges:
    """Inclusive bounds for numeric record fields."""

    MAX_PORT: Final[int] = 65535
    MAX_PROTOCOL: Final[int] = 255


class ReportDefaults:
    """Sentinel values and headers used by the reports."""

    UNKNOWN_PROTOCOL: Final[str] = "unknown"
    UNTAGGED: Final[str] = "Untagged"
    TAG_HEADER: Final[str] = "Tag,Count"
    PORT_PROTOCOL_HEADER: Final[str] = "Port,Protocol,Count"


class ValidationPolicy(str, Enum):
    """How thoroughly each flow log record is checked before counting."""

    STRUCTURAL = "structural"
    STRICT = "strict"


@dataclass(frozen=True)
class AnalyzerConfig:
    """Input and output locations for one analyzer run."""

    protocols_file: Path
    lookup_file: Path
    flow_log_file: Path
    tag_output: Path
    port_protocol_output: Path
    validation_policy: ValidationPolicy = ValidationPolicy.STRUCTURAL

    def __post_init__(self) -> None:
        for name in (
            "protocols_file",
            "lookup_file",
            "flow_log_file",
            "tag_output",
            "port_protocol_output",
        ):
            value = getattr(self, name)
            if value is not None and not isinstance(value, Path):
                object.__setattr__(self, name, Path(value))
        self.validate()

    def validate(self) -> None:
        """Validate that all required input files exist."""
        ConfigurationValidator.validate_file_exists(self.protocols_file, "Protocols")
        ConfigurationValidator.validate_file_exists(self.lookup_file, "Lookup")
        ConfigurationValidator.validate_file_exists(self.flow_log_file, "Flow Log")
        if self.tag_output is None or self.port_protocol_output is None:
            raise ValueError("Both report output paths are required")


class ConfigurationValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_file_exists(path: Optional[PathLike], file_type: str) -> None:
        """Raise InvalidPathError unless ``path`` names an existing file."""
        if path is None or not Path(path).exists():
            raise InvalidPathError(f"{file_type} file path is invalid: {path}")

    @staticmethod
    def validate_limit(limit: int) -> None:
        """Validate the console row limit."""
        if limit <= 0:
            raise ValueError("Limit must be positive")


# Public API
DEFAULT_CONFIG = DefaultConfiguration.get_default_config()
EXPECTED_FIELDS = FlowLogFields.EXPECTED_FIELDS
UNKNOWN_PROTOCOL = ReportDefaults.UNKNOWN_PROTOCOL
UNTAGGED = ReportDefaults.UNTAGGED
