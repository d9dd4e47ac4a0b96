"""Command-line interface module for quectodom.

This module provides the ``quectodom`` tool for rendering JSON row records as
HTML tables and fetching JSON documents.
"""

from .main import main

__all__ = ["main"]
