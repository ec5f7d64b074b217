"""CLI entry point: python -m xclibtool"""

from __future__ import annotations

from xclibtool.cli import main

if __name__ == "__main__":
    main()
