"""
Command-line interface for Flow Log Tagger.
"""

import argparse
import logging
from typing import Any, Optional, Sequence

from .analyzer import FlowLogAnalyzer
from .config import (
    DEFAULT_CONFIG,
    AnalyzerConfig,
    ConfigurationValidator,
    ValidationPolicy,
)
from .logging_utils import generate_run_id, log_run_end, log_run_start, setup_logger
from .reports import ReportPrinter

LOGGER_NAME = "flow_log_tagger"


class ArgumentParser:
    """Handles command-line argument parsing."""

    @classmethod
    def parse_args(cls, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
        """Parse and return command-line arguments."""
        parser = argparse.ArgumentParser(
            description="Tag VPC Flow Log records by destination port and protocol"
        )

        cls._add_input_args(parser)
        cls._add_output_args(parser)
        cls._add_processing_args(parser)

        return parser.parse_args(argv)

    @staticmethod
    def _add_input_args(parser: argparse.ArgumentParser) -> None:
        """Add input file arguments."""
        parser.add_argument(
            "--protocols-file",
            default=DEFAULT_CONFIG["protocols_file"],
            help="CSV mapping protocol numbers to names",
        )
        parser.add_argument(
            "--lookup-file",
            default=DEFAULT_CONFIG["lookup_file"],
            help="CSV mapping dstport,protocol pairs to tags",
        )
        parser.add_argument(
            "--flow-log-file",
            default=DEFAULT_CONFIG["flow_log_file"],
            help="VPC Flow Log file (plain text or .gz)",
        )

    @staticmethod
    def _add_output_args(parser: argparse.ArgumentParser) -> None:
        """Add output file arguments."""
        parser.add_argument(
            "--tag-output",
            default=DEFAULT_CONFIG["tag_output"],
            help="Destination of the tag count report",
        )
        parser.add_argument(
            "--port-protocol-output",
            default=DEFAULT_CONFIG["port_protocol_output"],
            help="Destination of the port/protocol count report",
        )
        parser.add_argument(
            "--log-dir",
            default=DEFAULT_CONFIG["log_dir"],
            help="Directory for the rotating log file",
        )

    @staticmethod
    def _add_processing_args(parser: argparse.ArgumentParser) -> None:
        """Add processing-related arguments."""
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Also validate addresses, time window and action of each record",
        )
        parser.add_argument(
            "--print",
            dest="print_summary",
            action="store_true",
            help="Print both reports to the console",
        )
        parser.add_argument(
            "--limit",
            type=int,
            default=DEFAULT_CONFIG["limit"],
            help="Limit number of rows printed with --print",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging",
        )


class ConfigurationBuilder:
    """Builds the analyzer configuration from arguments."""

    def __init__(self, args: argparse.Namespace):
        self.args = args

    def build_configuration(self) -> AnalyzerConfig:
        """Build a validated configuration from arguments."""
        if self.args.print_summary:
            ConfigurationValidator.validate_limit(self.args.limit)

        policy = (
            ValidationPolicy.STRICT if self.args.strict else ValidationPolicy.STRUCTURAL
        )
        return AnalyzerConfig(
            protocols_file=self.args.protocols_file,
            lookup_file=self.args.lookup_file,
            flow_log_file=self.args.flow_log_file,
            tag_output=self.args.tag_output,
            port_protocol_output=self.args.port_protocol_output,
            validation_policy=policy,
        )


class ConfigurationPrinter:
    """Handles printing configuration information."""

    @staticmethod
    def print_configuration(config: AnalyzerConfig) -> None:
        """Print configuration summary."""
        print("\n=== Flow Log Tagger ===")
        print(f"Protocols file: {config.protocols_file}")
        print(f"Lookup file: {config.lookup_file}")
        print(f"Flow log file: {config.flow_log_file}")
        print(f"Tag report: {config.tag_output}")
        print(f"Port/protocol report: {config.port_protocol_output}")
        print(f"Validation: {config.validation_policy.value}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = ArgumentParser.parse_args(argv)
    level = logging.DEBUG if args.debug else logging.INFO
    try:
        logger = setup_logger(LOGGER_NAME, args.log_dir, level)
    except OSError as e:
        logger = setup_logger(LOGGER_NAME, None, level)
        logger.error(f"Cannot use log directory {args.log_dir}: {e}")
        return 1
    run_id = generate_run_id()

    log_run_start(
        logger,
        run_id,
        flow_log_file=args.flow_log_file,
        strict=args.strict,
    )

    try:
        config = ConfigurationBuilder(args).build_configuration()
        if args.print_summary:
            ConfigurationPrinter.print_configuration(config)

        snapshot = FlowLogAnalyzer(config).run()

        if args.print_summary:
            ReportPrinter.print_summary(snapshot, args.limit)

        logger.info("Flow log records analyzer completed successfully")
        log_run_end(logger, run_id, True, **_stats_fields(snapshot.stats.as_dict()))
        return 0

    except Exception as e:
        logger.error(f"Flow log records analyzer failed: {e}", exc_info=True)
        log_run_end(logger, run_id, False, error=str(e))
        return 1


def _stats_fields(stats: dict[str, int]) -> dict[str, Any]:
    return {f"records_{name}": value for name, value in stats.items()}
