"""
Tests for the protocol and lookup reference tables.
"""

import logging

import pytest

from flow_log_tagger.models import PortProtocolKey
from flow_log_tagger.tables import LookupTable, ProtocolTable


class TestProtocolTable:
    """Test protocol table loading and resolution."""

    def test_load_lowercases_names(self, tmp_path):
        path = tmp_path / "protocols.csv"
        path.write_text("Decimal,Keyword\n6,TCP\n17, UDP \n")

        table = ProtocolTable.load(path)

        assert table.as_dict() == {6: "tcp", 17: "udp"}

    def test_header_is_skipped(self, tmp_path):
        path = tmp_path / "protocols.csv"
        path.write_text("1,ICMP\n6,TCP\n")

        table = ProtocolTable.load(path)

        assert 1 not in table
        assert table.resolve(6) == "tcp"

    def test_invalid_rows_are_skipped(self, tmp_path, caplog):
        path = tmp_path / "protocols.csv"
        path.write_text(
            "Decimal,Keyword\n\n146-252,,Unassigned\nTCP\n1_7,UDP\n6,TCP\n"
        )

        with caplog.at_level(logging.WARNING):
            table = ProtocolTable.load(path)

        assert len(table) == 1
        assert "Skipping invalid protocol entry: 146-252,,Unassigned" in caplog.text
        assert "Skipping invalid protocol entry: 1_7,UDP" in caplog.text

    def test_duplicate_numbers_last_write_wins(self, tmp_path):
        path = tmp_path / "protocols.csv"
        path.write_text("Decimal,Keyword\n6,TCP\n6,TCP-Alt\n")

        assert ProtocolTable.load(path).resolve(6) == "tcp-alt"

    def test_unknown_number_resolves_to_unknown(self):
        table = ProtocolTable({6: "tcp"})

        assert table.resolve(254) == "unknown"
        assert table.resolve(999) == "unknown"

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ProtocolTable.load(tmp_path / "missing.csv")


class TestLookupTable:
    """Test lookup table loading and resolution."""

    def test_load_mappings(self, tmp_path):
        path = tmp_path / "lookup.csv"
        path.write_text("dstport,protocol,tag\n443,TCP,HTTPS\n68,udp,sv_P2\n")

        table = LookupTable.load(path)

        assert table.resolve(PortProtocolKey(443, "tcp")) == "HTTPS"
        assert table.resolve(PortProtocolKey(68, "udp")) == "sv_P2"

    def test_tag_case_is_preserved(self, tmp_path):
        path = tmp_path / "lookup.csv"
        path.write_text("dstport,protocol,tag\n31,udp,SV_P3\r\n")

        assert LookupTable.load(path).resolve(PortProtocolKey(31, "udp")) == "SV_P3"

    def test_missing_key_resolves_to_untagged(self):
        table = LookupTable({PortProtocolKey(443, "tcp"): "HTTPS"})

        assert table.resolve(PortProtocolKey(9999, "tcp")) == "Untagged"
        assert table.resolve(PortProtocolKey(443, "udp")) == "Untagged"

    def test_short_and_invalid_rows_are_skipped(self, tmp_path, caplog):
        path = tmp_path / "lookup.csv"
        path.write_text(
            "dstport,protocol,tag\n25,tcp\nabc,tcp,web\n4_43,tcp,HTTPS\n\n22,tcp,ssh\n"
        )

        with caplog.at_level(logging.WARNING):
            table = LookupTable.load(path)

        assert len(table) == 1
        assert PortProtocolKey(22, "tcp") in table
        assert "Skipping short lookup entry: 25,tcp" in caplog.text
        assert "Skipping invalid lookup entry: abc,tcp,web" in caplog.text
        assert "Skipping invalid lookup entry: 4_43,tcp,HTTPS" in caplog.text

    def test_duplicate_keys_last_write_wins(self, tmp_path):
        path = tmp_path / "lookup.csv"
        path.write_text("dstport,protocol,tag\n25,tcp,first\n25,TCP,second\n")

        assert LookupTable.load(path).resolve(PortProtocolKey(25, "tcp")) == "second"

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LookupTable.load(tmp_path / "missing.csv")
