"""Output file storage abstraction.

Responsibilities:
- Provide deterministic filesystem storage for written resource files.
- Keep writers independent from the output root directory.
"""

from __future__ import annotations

from pathlib import Path


class ArtifactStore:
    """Filesystem-backed store rooted at one output directory."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with a root output directory."""

        self.root = root

    def save_text(self, relative_path: Path, content: str) -> Path:
        """Save text content and return final path."""

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def load_text(self, relative_path: Path) -> str:
        """Load text content from the store."""

        path = self.root / relative_path
        return path.read_text(encoding="utf-8")

    def exists(self, relative_path: Path) -> bool:
        """Return whether the given file exists."""

        return (self.root / relative_path).exists()
