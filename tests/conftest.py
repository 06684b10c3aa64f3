"""
Pytest configuration and fixtures for Flow Log Tagger tests.
"""

import pytest

from flow_log_tagger.config import AnalyzerConfig


def make_record(dstport="443", protocol="6", **overrides):
    """Build a 14-field flow log line with the given destination port and protocol."""
    fields = {
        "version": "2",
        "account": "123456789012",
        "eni": "eni-0a1b2c3d",
        "srcaddr": "10.0.1.201",
        "dstaddr": "198.51.100.2",
        "srcport": "49153",
        "dstport": dstport,
        "protocol": protocol,
        "packets": "25",
        "bytes": "20000",
        "start": "1620140761",
        "end": "1620140821",
        "action": "ACCEPT",
        "log_status": "OK",
    }
    fields.update(overrides)
    return " ".join(fields.values())


@pytest.fixture
def sample_protocols_data():
    """Sample protocol reference data."""
    return """Decimal,Keyword,Protocol
1,ICMP,Internet Control Message
6,TCP,Transmission Control
17,UDP,User Datagram
146-252,,Unassigned
"""


@pytest.fixture
def sample_lookup_data():
    """Sample lookup table data."""
    return """dstport,protocol,tag
25,tcp,sv_P1
23,tcp,sv_P1
443,tcp,HTTPS
68,udp,sv_P2
0,icmp,sv_P5
"""


@pytest.fixture
def sample_flow_log_data():
    """Sample VPC Flow Log data for testing."""
    return "\n".join(
        [
            make_record("443", "6"),
            make_record("25", "6"),
            make_record("23", "6", action="REJECT"),
            make_record("68", "17"),
            make_record("9999", "6"),
            make_record("443", "6"),
            "2 123456789012 eni-0a1b2c3d 10.0.1.201 198.51.100.2 49153",
        ]
    ) + "\n"


@pytest.fixture
def input_files(tmp_path, sample_protocols_data, sample_lookup_data, sample_flow_log_data):
    """Write the sample inputs to a temporary directory."""
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    paths = {
        "protocols_file": input_dir / "protocols.csv",
        "lookup_file": input_dir / "lookup.csv",
        "flow_log_file": input_dir / "flowlogs.txt",
    }
    paths["protocols_file"].write_text(sample_protocols_data)
    paths["lookup_file"].write_text(sample_lookup_data)
    paths["flow_log_file"].write_text(sample_flow_log_data)
    return paths


@pytest.fixture
def analyzer_config(tmp_path, input_files):
    """Analyzer configuration writing its reports under ``tmp_path/output``."""
    return AnalyzerConfig(
        tag_output=tmp_path / "output" / "tagcount.csv",
        port_protocol_output=tmp_path / "output" / "portprotocol.csv",
        **input_files,
    )
