"""
End-to-end flow log analysis: load reference tables, aggregate, write reports.
"""

import logging
from pathlib import Path
from typing import Optional

from .aggregator import FlowLogAggregator
from .config import AnalyzerConfig
from .models import AggregationSnapshot
from .parser import FlowLogReader
from .reports import write_port_protocol_report, write_tag_report
from .tables import LookupTable, ProtocolTable

logger = logging.getLogger(__name__)


class FlowLogAnalyzer:
    """Runs the classification pipeline for one configuration.

    The stages must run in order: protocols, lookup table, flow logs, output.
    ``run`` sequences all four.
    """

    def __init__(self, config: AnalyzerConfig, reader: Optional[FlowLogReader] = None):
        self.config = config
        self.reader = reader or FlowLogReader()
        self.protocols: Optional[ProtocolTable] = None
        self.lookup: Optional[LookupTable] = None
        self.aggregator: Optional[FlowLogAggregator] = None

    def load_protocols(self) -> ProtocolTable:
        self.protocols = ProtocolTable.load(self.config.protocols_file)
        return self.protocols

    def load_lookup_table(self) -> LookupTable:
        self.lookup = LookupTable.load(self.config.lookup_file)
        return self.lookup

    def process_flow_logs(self) -> AggregationSnapshot:
        """Stream the flow log file through the aggregator in a single pass."""
        if self.protocols is None or self.lookup is None:
            raise RuntimeError("Reference tables must be loaded before processing")

        logger.info(f"Processing flow logs from file: {self.config.flow_log_file}")
        self.aggregator = FlowLogAggregator(
            self.protocols, self.lookup, self.config.validation_policy
        )
        self.aggregator.ingest_lines(self.reader.read_file(self.config.flow_log_file))

        snapshot = self.aggregator.snapshot()
        stats = snapshot.stats
        logger.info(
            f"Processed {stats.lines_read} lines: {stats.accepted} counted, "
            f"{stats.short} short, {stats.skipped} skipped"
        )
        return snapshot

    def write_output(self) -> AggregationSnapshot:
        """Write both reports, creating their directories if needed."""
        if self.aggregator is None:
            raise RuntimeError("Flow logs must be processed before writing output")

        snapshot = self.aggregator.snapshot()
        for output_path in (self.config.tag_output, self.config.port_protocol_output):
            ensure_parent_dir(output_path)

        write_tag_report(self.config.tag_output, snapshot.tag_counts)
        write_port_protocol_report(
            self.config.port_protocol_output, snapshot.port_protocol_counts
        )
        return snapshot

    def run(self) -> AggregationSnapshot:
        """Run every stage and return the final counters."""
        self.load_protocols()
        self.load_lookup_table()
        self.process_flow_logs()
        return self.write_output()


def ensure_parent_dir(path: Path) -> None:
    """Create the directory that will hold ``path`` if it is missing."""
    output_dir = Path(path).parent
    if not output_dir.exists():
        output_dir.mkdir(parents=True)
        logger.info(f"Created output directory: {output_dir}")
