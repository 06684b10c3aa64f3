"""
Exception types raised by Flow Log Tagger.
"""


class FlowLogTaggerError(Exception):
    """Base class for all Flow Log Tagger errors."""


class RangeError(FlowLogTaggerError, ValueError):
    """A port or protocol number falls outside its valid range."""


class MalformedRecordError(FlowLogTaggerError, ValueError):
    """A flow log record does not match the expected layout."""


class InvalidPathError(FlowLogTaggerError, ValueError):
    """A configured input file does not exist."""
