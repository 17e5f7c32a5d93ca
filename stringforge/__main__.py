"""Module entrypoint for running stringforge as ``python -m stringforge``."""

from __future__ import annotations

from stringforge.cli import main


if __name__ == "__main__":
    main()
