"""
Data loading and parsing module.

This package handles all file I/O and result/catalogue parsing.
"""

from .loader import DataLoader
from .parser import ResultParser, CatalogParser

__all__ = ["DataLoader", "ResultParser", "CatalogParser"]
