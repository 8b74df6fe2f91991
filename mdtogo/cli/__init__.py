"""
Command-line interface for mdtogo.
"""

from .cli import main

__all__ = ["main"]
