"""Aggregation stage: fused final score and recency tier."""

import logging
from collections.abc import Sequence

from crossbench.consts import EXTREME_SCORE_HIGH, EXTREME_SCORE_LOW
from crossbench.models.common import clamp
from crossbench.models.model_config import RecencyConfig
from crossbench.models.model_entity import ModelEntity, Signal

logger = logging.getLogger(__name__)

NO_EVIDENCE_REASON = "No Verified Signals"


def fuse_signals(signals: Sequence[Signal]) -> float:
    """Self-normalising weighted mean of signal scores.

    Returns 0.0 when there are no signals. The result is a convex combination
    of the inputs, so it stays in [0,1]; the final clamp only absorbs float
    rounding.
    """
    total_weight = sum(s.weight for s in signals)
    if total_weight <= 0:
        return 0.0
    weighted_sum = sum(s.score * s.weight for s in signals)
    return clamp(weighted_sum / total_weight, 0.0, 1.0)


def recency_tier(days_ago: int, config: RecencyConfig | None = None) -> int:
    """Map days since last verification to a 0-3 freshness bucket."""
    config = config or RecencyConfig()
    if days_ago <= config.tier_3_max_days:
        return 3
    if days_ago <= config.tier_2_max_days:
        return 2
    if days_ago <= config.tier_1_max_days:
        return 1
    return 0


def aggregate(entity: ModelEntity) -> ModelEntity:
    """Compute final_score and the evidence marker in-place."""
    if entity.signals:
        entity.final_score = fuse_signals(entity.signals)
        entity.has_evidence = True
        if entity.final_score > EXTREME_SCORE_HIGH or entity.final_score < EXTREME_SCORE_LOW:
            logger.debug(
                f"[Aggregate] {entity.name}: score={entity.final_score:.3f} "
                f"({len(entity.signals)} signals)"
            )
    else:
        entity.final_score = 0.0
        entity.has_evidence = False
        entity.confidence_reason = NO_EVIDENCE_REASON

    return entity


def assign_recency_tier(entity: ModelEntity, config: RecencyConfig | None = None) -> ModelEntity:
    """Derive the recency tier from the freshness attribute in-place.

    Freshness is attached by enrichment, so this runs once enrichment is done.
    """
    entity.recency_tier = recency_tier(entity.metrics.last_updated_days_ago, config)
    return entity
