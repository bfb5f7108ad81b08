"""Pipeline orchestration for the complete leaderboard workflow.

This module coordinates all steps of the leaderboard pipeline:
1. Fetch raw records from a source
2. Validate (skip malformed records and duplicates)
3. Score (signals, aggregation, enrichment, confidence, ranking)
4. Drop unscored models
5. Compute ecosystem statistics
6. Export artifacts
"""

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from crossbench.consts import DEFAULT_DATA_DIR
from crossbench.evaluators.ecosystem import compute_ecosystem
from crossbench.evaluators.registry import ScoringRegistry
from crossbench.filters.view_filter import drop_unscored
from crossbench.models.model_config import EnrichmentConfig, ScoringConfig
from crossbench.models.model_entity import Modality
from crossbench.models.model_stats import LeaderboardResult
from crossbench.models.model_storage import LeaderboardFile
from crossbench.sources.base_source import BaseSource
from crossbench.sources.http_source import HttpSource
from crossbench.sources.validation import validate_records
from crossbench.storage.exporter import LeaderboardExporter

logger = logging.getLogger(__name__)


def load_scoring_config(path: Path | None = None) -> ScoringConfig:
    """Load a scoring configuration from a JSON file, or the defaults.

    Raises:
        ValidationError: If the file does not describe a valid configuration
    """
    if path is None:
        return ScoringConfig()
    logger.info(f"Loading scoring configuration from {path}")
    return ScoringConfig.model_validate_json(Path(path).read_text(encoding="utf-8"))


def run_pipeline(
    raw_records: list[Any],
    config: ScoringConfig | None = None,
    now: datetime | None = None,
    workers: int = 1,
    keep_unscored: bool = False,
    enrichment_config: EnrichmentConfig | None = None,
) -> LeaderboardResult:
    """Run validate → score → drop unscored → ecosystem on raw records.

    Args:
        raw_records: Records as handed over by a source
        config: Scoring configuration (defaults if None)
        now: Reference time for freshness (defaults to now)
        workers: Thread pool size for per-model scoring
        keep_unscored: If True, keep models whose final_score is zero
        enrichment_config: Knowledge base constants (defaults if None)

    Returns:
        LeaderboardResult with ranked models, ecosystem stats and ingest report
    """
    config = config or ScoringConfig()
    now = now or datetime.now(UTC)

    # Step 1: Validate
    logger.info(f"Step 1/4: Validating {len(raw_records)} records...")
    records, report = validate_records(raw_records)

    # Step 2: Score
    logger.info("Step 2/4: Scoring models...")
    registry = ScoringRegistry(config, enrichment_config)
    entities = registry.evaluate_batch(records, now, workers)
    failed = len(records) - len(entities)
    if failed:
        logger.warning(f"{failed} models failed scoring and were skipped")
        report.accepted -= failed
        report.skipped_invalid += failed

    # Step 3: Drop unscored
    if keep_unscored:
        logger.info("Step 3/4: Keeping unscored models")
    else:
        logger.info("Step 3/4: Dropping unscored models...")
        entities, report.dropped_unscored = drop_unscored(entities)

    text_count = sum(1 for e in entities if e.has_modality(Modality.TEXT))
    image_count = sum(1 for e in entities if e.has_modality(Modality.IMAGE))
    video_count = sum(1 for e in entities if e.has_modality(Modality.VIDEO))
    logger.info(f"Modalities: Text: {text_count}, Image: {image_count}, Video: {video_count}")

    # Step 4: Ecosystem (needs every model ranked)
    logger.info("Step 4/4: Computing ecosystem statistics...")
    ecosystem = compute_ecosystem(entities, config.ecosystem)
    logger.info(f"Ecosystem covers {len(ecosystem.organizations)} organizations")

    return LeaderboardResult(entities=entities, ecosystem=ecosystem, report=report)


def run_scrape_pipeline(
    source: BaseSource | None = None,
    data_dir: Path | None = None,
    config: ScoringConfig | None = None,
    workers: int = 1,
    keep_unscored: bool = False,
    now: datetime | None = None,
) -> LeaderboardResult:
    """Run full pipeline: fetch → validate → score → ecosystem → export.

    Args:
        source: Source to fetch from. None = leaderboard API
        data_dir: Data directory path. Uses default if None.
        config: Scoring configuration (defaults if None)
        workers: Thread pool size for per-model scoring
        keep_unscored: If True, keep models whose final_score is zero
        now: Reference time for freshness (defaults to now)

    Returns:
        LeaderboardResult of the run
    """
    start_time = datetime.now(UTC)
    source = source or HttpSource()
    data_dir = Path(data_dir) if data_dir else DEFAULT_DATA_DIR

    logger.info(f"Starting pipeline for source: {source.source_name}")
    raw_records = asyncio.run(source.fetch())
    logger.info(f"Fetched {len(raw_records)} records from {source.source_name}")

    result = run_pipeline(
        raw_records,
        config=config,
        now=now,
        workers=workers,
        keep_unscored=keep_unscored,
    )

    exporter = LeaderboardExporter(data_dir, config)
    exporter.export_all(result.entities, result.ecosystem)

    duration = (datetime.now(UTC) - start_time).total_seconds()
    logger.info(
        f"Pipeline complete in {duration:.1f}s: "
        f"{len(result.entities)} models ranked, {result.report.skipped} skipped"
    )
    return result


def load_leaderboard(data_dir: Path | None = None) -> LeaderboardFile | None:
    """Load the last exported leaderboard.

    Args:
        data_dir: Data directory path. Uses default if None.

    Returns:
        LeaderboardFile if found, None otherwise
    """
    data_dir = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
    return LeaderboardExporter(data_dir).load_leaderboard()


def main() -> None:
    """Example pipeline execution."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print("=== CrossBench Pipeline ===\n")
    try:
        result = run_scrape_pipeline()
    except Exception as e:
        print(f"Error: {e}")
        return

    print(f"Ranked {len(result.entities)} models ({result.report.skipped} skipped)")
    top = sorted(result.entities, key=lambda e: e.ranks.overall, reverse=True)[:5]
    for entity in top:
        print(f"- {entity.name}: {entity.ranks.clamped().overall:.1f} ({entity.confidence:.0f}%)")


if __name__ == "__main__":
    main()
