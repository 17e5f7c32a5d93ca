"""Input/output components for stringforge.

This package contains the Twine resource reader, platform resource writers,
and output file storage used by the pipeline.
"""

from .android_writer import AndroidResourceWriter
from .storage import ArtifactStore
from .twine_reader import parse_twine_text, read_twine_file

__all__ = ["AndroidResourceWriter", "ArtifactStore", "parse_twine_text", "read_twine_file"]
