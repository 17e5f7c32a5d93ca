"""Telemetry and observability helpers.

This package emits deterministic run events and entry-skip diagnostics.
"""

from .logger import RunLogger, log_entry_skipped

__all__ = ["RunLogger", "log_entry_skipped"]
