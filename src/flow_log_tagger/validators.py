"""
Validation helpers for flow log records and their numeric fields.
"""

import ipaddress
import re
from typing import Optional, Sequence

from .config import FlowLogFields, ValidationPolicy, ValueRanges
from .exceptions import MalformedRecordError, RangeError

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> int:
    """Parse a plain ASCII decimal integer, raising ValueError otherwise."""
    text = value.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {value!r}")
    return int(text)


def validate_protocol_number(protocol_number: int) -> None:
    """Raise RangeError unless the protocol number is within 0-255."""
    if protocol_number < 0 or protocol_number > ValueRanges.MAX_PROTOCOL:
        raise RangeError(
            f"Invalid protocol number: {protocol_number}. Must be between 0-255"
        )


def validate_port(port: int) -> None:
    """Raise RangeError unless the port is within 0-65535."""
    if port < 0 or port > ValueRanges.MAX_PORT:
        raise RangeError(f"Invalid port number: {port}. Must be between 0-65535")


def validate_log_entry(fields: Optional[Sequence[str]]) -> None:
    """Raise MalformedRecordError when a record has too few fields."""
    found = len(fields) if fields is not None else 0
    if fields is None or found < FlowLogFields.EXPECTED_FIELDS:
        raise MalformedRecordError(
            f"Malformed log entry. Expected {FlowLogFields.EXPECTED_FIELDS} parts, "
            f"found {found}"
        )


class RecordFieldValidator:
    """Field-level checks applied under the strict validation policy."""

    def validate(self, fields: Sequence[str]) -> None:
        """Check addresses, time window and action of a record."""
        self._validate_address(fields[FlowLogFields.SRCADDR], "source")
        self._validate_address(fields[FlowLogFields.DSTADDR], "destination")
        self._validate_time_window(
            fields[FlowLogFields.START], fields[FlowLogFields.END]
        )
        self._validate_action(fields[FlowLogFields.ACTION])

    @staticmethod
    def _validate_address(value: str, role: str) -> None:
        try:
            ipaddress.IPv4Address(value)
        except ValueError:
            raise MalformedRecordError(f"Invalid {role} address: {value}")

    @staticmethod
    def _validate_time_window(start: str, end: str) -> None:
        if not all(v.isascii() and v.isdecimal() for v in (start, end)):
            raise MalformedRecordError(f"Invalid time window: {start} {end}")
        if int(start) > int(end):
            raise MalformedRecordError(
                f"Start time {start} is after end time {end}"
            )

    @staticmethod
    def _validate_action(action: str) -> None:
        if action not in FlowLogFields.ACTIONS:
            raise MalformedRecordError(f"Invalid action: {action}")


def validate_record(
    fields: Optional[Sequence[str]],
    policy: ValidationPolicy = ValidationPolicy.STRUCTURAL,
) -> None:
    """Validate a split record under the given policy."""
    validate_log_entry(fields)
    if policy is ValidationPolicy.STRICT:
        RecordFieldValidator().validate(fields)  # type: ignore[arg-type]
