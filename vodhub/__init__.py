"""vodhub - multi-source video catalog aggregator."""

__version__ = "0.1.0"
