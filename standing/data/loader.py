"""
Data loading and caching.

This module handles loading transcript and catalogue files from disk.
"""

import json
import logging
from pathlib import Path

from ..config import DATA_DIR, CATALOG_FILENAME

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches the JSON data files the standing system reads.

    WHY LAZY LOADING: The catalogue is only read when first accessed, so a
    results-only session never touches it.

    DATA SOURCES:
    - course_catalog.json: the department's course catalogue
    - <transcript>.json: one student's exported results
      (see scripts/fetch_results.py)

    Usage:
        loader = DataLoader()
        catalog_data = loader.catalog
        transcript_data = loader.load_transcript("sample_transcript.json")
    """

    def __init__(self, data_dir=None):
        self.data_dir = Path(data_dir) if data_dir else DATA_DIR
        # None means "not loaded yet"
        self._catalog = None
        self._transcripts_cache = {}  # Keyed by resolved path

    def _read_json(self, filepath: Path):
        if not filepath.exists():
            raise FileNotFoundError(f"No data file found at: {filepath}")
        logger.debug("Loading %s", filepath)
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)

    @property
    def catalog(self) -> dict:
        """Raw course catalogue document ({"courses": [...]})."""
        if self._catalog is None:
            self._catalog = self._read_json(self.data_dir / CATALOG_FILENAME)
        return self._catalog

    def load_transcript(self, path) -> dict:
        """
        Load a transcript document.

        Args:
            path: Absolute path, or a filename relative to the data directory

        Returns:
            {"student": {...}, "results": [...]}
        """
        filepath = Path(path)
        if not filepath.is_absolute():
            filepath = self.data_dir / filepath
        key = filepath.resolve()
        if key not in self._transcripts_cache:
            self._transcripts_cache[key] = self._read_json(filepath)
        return self._transcripts_cache[key]

    def list_transcripts(self) -> list:
        """Transcript files available in the data directory, by name."""
        return sorted(
            f.name for f in self.data_dir.glob("*.json")
            if f.name != CATALOG_FILENAME
        )
