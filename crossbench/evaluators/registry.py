"""Scoring registry orchestrating every per-model stage."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from crossbench.enrichment.knowledge_base import KnowledgeBase
from crossbench.evaluators.aggregation import aggregate, assign_recency_tier
from crossbench.evaluators.confidence import ConfidenceEvaluator
from crossbench.evaluators.ranking import RankingEvaluator
from crossbench.evaluators.signal_collector import SignalCollector
from crossbench.models.common import _utc_now
from crossbench.models.model_config import EnrichmentConfig, ScoringConfig
from crossbench.models.model_entity import ModelEntity
from crossbench.models.model_record import RawModelRecord

logger = logging.getLogger(__name__)


class ScoringRegistry:
    """Runs the per-model scoring stages in order.

    Stage order for each model:
    - collect signals
    - aggregate final_score
    - enrich (modalities, metrics)
    - assign recency tier from freshness
    - confidence
    - ranking

    Models are independent of each other, so a batch can be spread over a
    thread pool. Ecosystem statistics are not computed here; they need every
    model of the batch to be ranked first.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        enrichment_config: EnrichmentConfig | None = None,
    ) -> None:
        self.config = config or ScoringConfig()
        self.collector = SignalCollector(self.config.signals)
        self.knowledge_base = KnowledgeBase(enrichment_config)
        self.confidence = ConfidenceEvaluator(self.config.confidence)
        self.ranking = RankingEvaluator(self.config.ranking)

    def score_record(self, record: RawModelRecord, now: datetime | None = None) -> ModelEntity:
        """Score a single validated record.

        Args:
            record: Validated raw record
            now: Reference time for freshness (defaults to now)

        Returns:
            Fully ranked model
        """
        entity = ModelEntity(
            name=record.name,
            organization=record.organization,
            signals=self.collector.collect(record),
        )

        aggregate(entity)
        self.knowledge_base.enrich(entity, record, now)
        assign_recency_tier(entity, self.config.recency)
        self.confidence.evaluate(entity)
        self.ranking.evaluate(entity)

        return entity

    def _score_or_skip(self, record: RawModelRecord, now: datetime) -> ModelEntity | None:
        try:
            return self.score_record(record, now)
        except Exception as e:
            logger.warning(f"Skipping model '{record.name}': scoring failed: {e}")
            return None

    def evaluate_batch(
        self,
        records: list[RawModelRecord],
        now: datetime | None = None,
        workers: int = 1,
    ) -> list[ModelEntity]:
        """Score multiple records, preserving input order.

        A record whose scoring fails is logged and left out; the rest of the
        batch is unaffected.

        Args:
            records: Validated raw records
            now: Reference time shared by the whole batch (defaults to now)
            workers: Thread pool size; 1 scores sequentially

        Returns:
            One ranked model per successfully scored record
        """
        now = now or _utc_now()

        if workers <= 1 or len(records) <= 1:
            scored = [self._score_or_skip(record, now) for record in records]
        else:
            logger.debug(f"Scoring {len(records)} models on {workers} workers")
            with ThreadPoolExecutor(max_workers=workers) as executor:
                scored = list(executor.map(lambda r: self._score_or_skip(r, now), records))

        return [entity for entity in scored if entity is not None]
