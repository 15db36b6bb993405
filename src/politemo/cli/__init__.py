"""
Command-line interface for politemo.

Provides the report command for running the statement emotion pipeline.
"""

__all__ = ["report"]
