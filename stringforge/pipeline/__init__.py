"""stringforge pipeline package.

This package contains orchestration and stage telemetry for conversion runs.
"""

from .orchestrator import ConversionPipeline

__all__ = ["ConversionPipeline"]
