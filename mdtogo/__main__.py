"""Allow running as ``python -m mdtogo``."""

from mdtogo.cli.cli import main

if __name__ == "__main__":
    exit(main())
