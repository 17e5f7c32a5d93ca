"""Top-level package for stringforge.

This package converts Twine-style localized string resources into platform
resource files, rewriting printf-style placeholders into canonical,
position-numbered form. The main orchestration entry point is
`ConversionPipeline`.
"""

from .pipeline import ConversionPipeline

__all__ = ["ConversionPipeline", "__version__"]

__version__ = "0.1.0"
