"""Reading, selecting, reshaping, summarising and rendering CSV/TSV tables."""

__version__ = "0.1.0"