"""Module entrypoint for running Text Humanizer as ``python -m texthumanizer``."""

from __future__ import annotations

from texthumanizer.cli import main


if __name__ == "__main__":
    main()
