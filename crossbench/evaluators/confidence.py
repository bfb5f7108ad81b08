"""Confidence evaluator: single authoritative reliability estimate.

Computed once per model, after enrichment, from fully-enriched inputs:

    conf = base
         + per_signal_bonus * signal_count
         + recency bonus (full if <= 30 days, half if <= 90 days)
         + versatility bonus (coding & creative > 0.75, or multimodal)
         + quality tier bonus (first match, high to low; penalty below 0.40)
         - variance_penalty * rms_deviation(signals, final_score)
         + enterprise bonus
    conf = clamp(conf, 10, 99)

With no signals the formula is skipped and confidence is the floor.
The reason string is display-only and never read back by any computation.
"""

import logging
import math
from collections.abc import Collection, Sequence

from crossbench.consts import EXTREME_CONFIDENCE_HIGH, EXTREME_CONFIDENCE_LOW
from crossbench.evaluators.aggregation import NO_EVIDENCE_REASON
from crossbench.models.common import clamp
from crossbench.models.model_config import ConfidenceConfig
from crossbench.models.model_entity import EnrichedMetrics, Modality, ModelEntity, Signal

logger = logging.getLogger(__name__)

REASON_RECENT = "Recent Verification"
REASON_VERSATILE = "Multi-Category Verified"
REASON_CONSENSUS = "High Consensus"


def consensus_deviation(signals: Sequence[Signal], final_score: float) -> float:
    """Root-mean-square deviation of signal scores from the fused score.

    Measured against the weighted consensus rather than the arithmetic mean
    of the signals.
    """
    if not signals:
        return 0.0
    sq_sum = sum((s.score - final_score) ** 2 for s in signals)
    return math.sqrt(sq_sum / len(signals))


def quality_adjustment(final_score: float, config: ConfidenceConfig) -> float:
    """Quality tier bonus, first matching tier only."""
    for tier in config.quality_tiers:
        if final_score > tier.threshold:
            return tier.bonus
    if final_score < config.low_quality_threshold:
        return -config.low_quality_penalty
    return 0.0


def is_versatile(
    metrics: EnrichedMetrics, modalities: Collection[Modality], config: ConfidenceConfig
) -> bool:
    strong_both = (
        metrics.coding_score > config.versatile_threshold
        and metrics.creative_score > config.versatile_threshold
    )
    return strong_both or len(modalities) > 1


def compute_confidence(
    signals: Sequence[Signal],
    final_score: float,
    metrics: EnrichedMetrics,
    modalities: Collection[Modality],
    config: ConfidenceConfig | None = None,
) -> tuple[float, str]:
    """Compute the confidence score and its display justification.

    Args:
        signals: Collected observations
        final_score: Fused score of those observations
        metrics: Enriched attributes (coding, creative, freshness, enterprise flag)
        modalities: Modality tags of the model
        config: Confidence table (defaults if None)

    Returns:
        Tuple of (confidence in [floor, ceiling], reason string)
    """
    config = config or ConfidenceConfig()

    if not signals:
        return config.floor, NO_EVIDENCE_REASON

    reasons: list[str] = []
    conf = config.base

    # 1. Evidence volume
    conf += len(signals) * config.per_signal_bonus

    # 2. Recency
    days = metrics.last_updated_days_ago
    if days <= config.recent_days:
        conf += config.recent_bonus
        reasons.append(REASON_RECENT)
    elif days <= config.aging_days:
        conf += config.recent_bonus * config.aging_bonus_ratio

    # 3. Versatility
    if is_versatile(metrics, modalities, config):
        conf += config.versatile_bonus
        reasons.append(REASON_VERSATILE)

    # 4. Quality tier
    conf += quality_adjustment(final_score, config)

    # 5. Consistency penalty
    conf -= config.variance_penalty * consensus_deviation(signals, final_score)

    # 6. Enterprise readiness
    if metrics.is_enterprise_ready:
        conf += config.enterprise_bonus

    if len(signals) >= config.consensus_min_signals:
        reasons.append(REASON_CONSENSUS)

    return clamp(conf, config.floor, config.ceiling), ", ".join(reasons)


class ConfidenceEvaluator:
    """Applies compute_confidence to an enriched model in-place."""

    def __init__(self, config: ConfidenceConfig | None = None) -> None:
        self.config = config or ConfidenceConfig()

    def evaluate(self, entity: ModelEntity) -> ModelEntity:
        entity.confidence, entity.confidence_reason = compute_confidence(
            entity.signals,
            entity.final_score,
            entity.metrics,
            entity.modalities,
            self.config,
        )
        if entity.confidence < EXTREME_CONFIDENCE_LOW or entity.confidence > EXTREME_CONFIDENCE_HIGH:
            logger.debug(
                f"[Confidence] {entity.name}: {entity.confidence:.1f}% "
                f"({entity.confidence_reason})"
            )
        return entity
