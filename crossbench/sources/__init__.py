"""Leaderboard sources and record validation."""

from crossbench.sources.base_source import BaseSource
from crossbench.sources.file_source import FileSource
from crossbench.sources.http_source import HttpSource
from crossbench.sources.validation import validate_records

__all__ = ["BaseSource", "FileSource", "HttpSource", "validate_records"]
