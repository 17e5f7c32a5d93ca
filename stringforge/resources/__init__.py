"""Key building and document assembly components."""

from .assembler import ResourceFileAssembler, assemble_document
from .builder import KeyBuilder, build_key

__all__ = ["KeyBuilder", "ResourceFileAssembler", "assemble_document", "build_key"]
