"""
Reference tables loaded once at startup: protocol names and port/protocol tags.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from .config import ReportDefaults
from .models import PortProtocolKey
from .validators import parse_int

logger = logging.getLogger(__name__)


def _read_data_rows(path: Union[str, Path]) -> Iterator[list[str]]:
    """Yield comma-split rows of a CSV reference file, skipping the header."""
    with open(path, "r", encoding="utf-8") as f:
        f.readline()  # Skip header
        for line in f:
            if not line.strip():
                continue
            yield line.rstrip("\r\n").split(",")


class ProtocolTable:
    """Maps IANA protocol numbers to lowercase protocol names."""

    def __init__(self, entries: Optional[Mapping[int, str]] = None):
        self._protocols: Mapping[int, str] = MappingProxyType(dict(entries or {}))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ProtocolTable":
        """Load protocol definitions, skipping rows without a numeric column."""
        logger.info(f"Loading protocols from file: {path}")
        protocols: dict[int, str] = {}

        for parts in _read_data_rows(path):
            if len(parts) < 2:
                continue
            try:
                protocol_number = parse_int(parts[0])
            except ValueError:
                logger.warning(f"Skipping invalid protocol entry: {','.join(parts)}")
                continue
            protocols[protocol_number] = parts[1].strip().lower()

        logger.info(f"Loaded {len(protocols)} protocols")
        return cls(protocols)

    def resolve(self, protocol_number: int) -> str:
        """Return the protocol name, or ``unknown`` for unmapped numbers."""
        return self._protocols.get(protocol_number, ReportDefaults.UNKNOWN_PROTOCOL)

    def __contains__(self, protocol_number: object) -> bool:
        return protocol_number in self._protocols

    def __len__(self) -> int:
        return len(self._protocols)

    def as_dict(self) -> dict[int, str]:
        return dict(self._protocols)


class LookupTable:
    """Maps (destination port, protocol) pairs to user-defined tags."""

    EXPECTED_COLUMNS = 3

    def __init__(self, entries: Optional[Mapping[PortProtocolKey, str]] = None):
        self._tags: Mapping[PortProtocolKey, str] = MappingProxyType(
            dict(entries or {})
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "LookupTable":
        """Load tag mappings from a ``dstport,protocol,tag`` CSV file."""
        logger.info(f"Loading lookup table from file: {path}")
        return cls(cls._parse_rows(_read_data_rows(path)))

    @classmethod
    def _parse_rows(cls, rows: Iterable[list[str]]) -> dict[PortProtocolKey, str]:
        tags: dict[PortProtocolKey, str] = {}
        for parts in rows:
            if len(parts) < cls.EXPECTED_COLUMNS:
                logger.warning(f"Skipping short lookup entry: {','.join(parts)}")
                continue
            try:
                port = parse_int(parts[0])
            except ValueError:
                logger.warning(f"Skipping invalid lookup entry: {','.join(parts)}")
                continue
            key = PortProtocolKey(port, parts[1].strip().lower())
            tags[key] = parts[2].strip()

        logger.info(f"Loaded {len(tags)} lookup entries")
        return tags

    def resolve(self, key: PortProtocolKey) -> str:
        """Return the tag for a key, or ``Untagged`` when none is mapped."""
        return self._tags.get(key, ReportDefaults.UNTAGGED)

    def __contains__(self, key: object) -> bool:
        return key in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def as_dict(self) -> dict[PortProtocolKey, str]:
        return dict(self._tags)
