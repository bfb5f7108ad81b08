"""File-based export of leaderboard artifacts.

Writes, into one data directory:
    data/
    ├── leaderboard_all.json          # Every model + ecosystem shares
    ├── leaderboard_performance.csv   # By overall score
    ├── leaderboard_price.csv         # By input price, cheapest first
    ├── leaderboard_value.csv         # By value score
    └── output.txt                    # Plain-text top list
"""

import csv
import json
import logging
from collections.abc import Callable
from pathlib import Path

from crossbench.consts import (
    CSV_ROW_LIMIT,
    DEFAULT_DATA_DIR,
    LEADERBOARD_JSON,
    LEGACY_ROW_LIMIT,
    LEGACY_TEXT,
    PERFORMANCE_CSV,
    PRICE_CSV,
    UNKNOWN_PRICE,
    VALUE_CSV,
)
from crossbench.evaluators.tie_break import sort_by_projection
from crossbench.models.model_config import ScoringConfig
from crossbench.models.model_entity import ModelEntity, Projection
from crossbench.models.model_stats import EcosystemStats
from crossbench.models.model_storage import ExportRecord, LeaderboardFile

logger = logging.getLogger(__name__)

CSV_HEADER = ["Rank", "Model", "Organization", "GPQA Score", "Input Price"]


def format_price(price: float) -> str:
    """Two-decimal price, or N/A for the unknown-price sentinel."""
    if price >= UNKNOWN_PRICE:
        return "N/A"
    return f"{price:.2f}"


class LeaderboardExporter:
    """Writes ranked models to JSON, CSV and text artifacts."""

    def __init__(
        self,
        data_dir: Path | str = DEFAULT_DATA_DIR,
        config: ScoringConfig | None = None,
    ):
        """Initialize exporter.

        Args:
            data_dir: Directory receiving every artifact
            config: Scoring configuration (for the tie threshold)
        """
        self.data_dir = Path(data_dir)
        self.config = config or ScoringConfig()

    @property
    def _epsilon(self) -> float:
        return self.config.epsilon_for_scale(100.0)

    def _ensure_dir(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

    # === JSON ===

    def save_leaderboard(self, entities: list[ModelEntity], ecosystem: EcosystemStats) -> Path:
        """Save every model and the ecosystem shares.

        Returns:
            Path to the saved file
        """
        self._ensure_dir()
        path = self.data_dir / LEADERBOARD_JSON

        leaderboard = LeaderboardFile(
            models=[ExportRecord.from_entity(e) for e in entities],
            ecosystem=ecosystem.shares,
        )
        path.write_text(leaderboard.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Saved leaderboard: {path} ({len(entities)} models)")
        return path

    def load_leaderboard(self) -> LeaderboardFile | None:
        """Load the saved leaderboard.

        Returns:
            LeaderboardFile if found, None otherwise
        """
        path = self.data_dir / LEADERBOARD_JSON
        if not path.exists():
            logger.warning(f"Leaderboard not found: {path}")
            return None

        data = json.loads(path.read_text(encoding="utf-8"))
        return LeaderboardFile.model_validate(data)

    # === CSV ===

    def _write_csv(
        self,
        filename: str,
        metric_column: str,
        entities: list[ModelEntity],
        metric_fn: Callable[[ModelEntity], str],
    ) -> Path:
        self._ensure_dir()
        path = self.data_dir / filename

        with path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([*CSV_HEADER, metric_column])
            for rank, entity in enumerate(entities[:CSV_ROW_LIMIT], start=1):
                writer.writerow(
                    [
                        rank,
                        entity.name,
                        entity.organization,
                        f"{entity.final_score:.3f}",
                        format_price(entity.metrics.price_input_1m),
                        metric_fn(entity),
                    ]
                )

        logger.info(f"Saved {path} ({min(len(entities), CSV_ROW_LIMIT)} rows)")
        return path

    def save_performance_csv(self, entities: list[ModelEntity]) -> Path:
        """Models by overall score with the recency tie-break."""
        ordered = sort_by_projection(entities, Projection.OVERALL, self._epsilon)
        return self._write_csv(
            PERFORMANCE_CSV,
            "Overall Score",
            ordered,
            lambda e: f"{e.ranks.clamped().overall:.2f}",
        )

    def save_price_csv(self, entities: list[ModelEntity]) -> Path:
        """Models with a known price, cheapest first."""
        known = [e for e in entities if e.metrics.price_input_1m < UNKNOWN_PRICE]
        ordered = sorted(known, key=lambda e: (e.metrics.price_input_1m, e.name))
        return self._write_csv(
            PRICE_CSV,
            "Price",
            ordered,
            lambda e: f"{e.metrics.price_input_1m:.2f}",
        )

    def save_value_csv(self, entities: list[ModelEntity]) -> Path:
        """Models with a positive value score, by value with the recency tie-break."""
        positive = [e for e in entities if e.ranks.value > 0.0]
        ordered = sort_by_projection(positive, Projection.VALUE, self._epsilon)
        return self._write_csv(
            VALUE_CSV,
            "Value Score",
            ordered,
            lambda e: f"{e.ranks.clamped().value:.2f}",
        )

    # === TEXT ===

    def save_legacy_text(self, entities: list[ModelEntity]) -> Path:
        """Plain-text top list by overall score."""
        self._ensure_dir()
        path = self.data_dir / LEGACY_TEXT

        ordered = sort_by_projection(entities, Projection.OVERALL, self._epsilon)
        lines = ["CROSSBENCH LEADERBOARD", "------------------"]
        for rank, entity in enumerate(ordered[:LEGACY_ROW_LIMIT], start=1):
            lines.append(f"{rank}. {entity.name} ({entity.ranks.clamped().overall:.2f})")

        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info(f"Saved {path}")
        return path

    def export_all(self, entities: list[ModelEntity], ecosystem: EcosystemStats) -> list[Path]:
        """Write every artifact.

        Returns:
            Paths of the written files
        """
        paths = [
            self.save_leaderboard(entities, ecosystem),
            self.save_performance_csv(entities),
            self.save_price_csv(entities),
            self.save_value_csv(entities),
            self.save_legacy_text(entities),
        ]
        logger.info(f"Exported {len(paths)} files to {self.data_dir}")
        return paths
