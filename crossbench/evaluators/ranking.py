"""Ranking evaluator computing the eight projection scores.

Each projection is an independent weighted formula over final_score,
confidence and the enriched attributes, scaled to 0-100. Values are stored
raw on the model; clamping to [0,100] happens once, at export time, via
RankScores.clamped().

Domain filtering is not hard-coded per projection: each projection carries a
ProjectionPolicy (NoFilter, ExcludeEntirely or ScaleBy) from RankingConfig.
"""

import math

from crossbench.models.common import clamp
from crossbench.models.model_config import RankingConfig
from crossbench.models.model_entity import ModelEntity, Projection, RankScores


def price_factor(price: float, config: RankingConfig) -> float:
    """1 / (1 + price/10); price is never negative so the denominator is >= 1."""
    return 1.0 / (1.0 + max(price, 0.0) / config.price_scale)


def value_score(final_score: float, price: float, config: RankingConfig) -> float:
    """Performance per unit cost on a [0,1]-based scale.

    Free models get final * 1000. Paid models use a quadratic numerator so a
    higher-scoring model never ranks below a lower-scoring one at equal price;
    log10(price + 1) + 0.1 is strictly positive for any price > 0.
    """
    if price <= 0.0:
        return final_score * config.free_value_multiplier
    log_price = math.log10(price + 1.0)
    return (final_score * final_score) / (log_price + config.value_log_offset)


class RankingEvaluator:
    """Computes all projections for a model whose confidence is final."""

    def __init__(self, config: RankingConfig | None = None) -> None:
        self.config = config or RankingConfig()

    def evaluate(self, entity: ModelEntity) -> ModelEntity:
        """Compute rank scores and update the model in-place."""
        cfg = self.config
        m = entity.metrics
        final = entity.final_score

        conf_factor = entity.confidence / 100.0
        price_f = price_factor(m.price_input_1m, cfg)
        speed_norm = clamp(m.tokens_per_sec / cfg.speed_norm_tps, 0.0, 1.0)
        speed_base = clamp(m.tokens_per_sec / cfg.speed_base_tps, 0.0, 1.0)
        ctx_norm = clamp(m.context_tokens / cfg.context_norm_tokens, 0.0, 1.0)

        w = cfg.overall_weights
        overall = (
            final * w.final
            + m.coding_score * w.coding
            + m.creative_score * w.creative
            + conf_factor * w.confidence
            + price_f * w.price
        )

        # final_score stands in as the reasoning proxy
        w = cfg.coding_weights
        coding = (
            m.coding_score * w.coding
            + final * w.final
            + ctx_norm * w.context
            + conf_factor * w.confidence
        )

        w = cfg.generative_weights
        generative = (
            final * w.final
            + m.creative_score * w.creative
            + speed_norm * w.speed
            + conf_factor * w.confidence
        )

        w = cfg.speed_weights
        speed = speed_base * w.speed + conf_factor * w.confidence + price_f * w.price

        w = cfg.enterprise_weights
        enterprise = (
            conf_factor * w.confidence
            + m.uptime_sla * w.uptime
            + m.org_maturity * w.maturity
        )

        raw = {
            Projection.OVERALL: overall * 100.0,
            Projection.VALUE: value_score(final, m.price_input_1m, cfg) * 100.0,
            Projection.CODING: coding * 100.0,
            Projection.IMAGE: generative * 100.0,
            Projection.VIDEO: generative * 100.0,
            Projection.SPEED: speed * 100.0,
            Projection.CONFIDENCE: entity.confidence,
            Projection.ENTERPRISE: enterprise * 100.0,
        }

        entity.ranks = RankScores(
            **{
                projection.value: cfg.policy_for(projection).apply(value, entity.modalities)
                for projection, value in raw.items()
            }
        )
        return entity
