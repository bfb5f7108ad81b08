"""Leaderboard source reading a previously downloaded JSON file."""

import json
import logging
from pathlib import Path
from typing import Any

from crossbench.sources.base_source import BaseSource, ensure_record_list

logger = logging.getLogger(__name__)


class FileSource(BaseSource):
    """Reads a JSON array of raw model records from disk."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def source_name(self) -> str:
        return "file"

    async def fetch(self) -> list[Any]:
        logger.info(f"Loading leaderboard from {self.path}")
        data = json.loads(self.path.read_text(encoding="utf-8"))
        return ensure_record_list(data, str(self.path))
