"""Ecosystem statistics across organizations.

Runs after every model has been ranked, since it reads each model's final
score. Per organization it counts models and averages final_score, then
combines them into a composite share score:

    share = count * 0.4 + avg_score * 10 * 0.3
"""

from collections import defaultdict
from collections.abc import Iterable

from crossbench.models.model_config import EcosystemConfig
from crossbench.models.model_entity import ModelEntity
from crossbench.models.model_stats import EcosystemStats, OrgStats


def compute_org_stats(
    entities: Iterable[ModelEntity], fallback_org: str = "Other"
) -> dict[str, OrgStats]:
    """Group models by organization and accumulate count and score."""
    counts: dict[str, int] = defaultdict(int)
    totals: dict[str, float] = defaultdict(float)

    for entity in entities:
        org = entity.organization or fallback_org
        counts[org] += 1
        totals[org] += entity.final_score

    return {org: OrgStats(model_count=counts[org], total_score=totals[org]) for org in counts}


def share_score(stats: OrgStats, config: EcosystemConfig) -> float:
    return (
        stats.model_count * config.count_weight
        + stats.avg_score * config.score_scale * config.score_weight
    )


def compute_ecosystem(
    entities: Iterable[ModelEntity], config: EcosystemConfig | None = None
) -> EcosystemStats:
    """Compute organization aggregates and composite share scores.

    Args:
        entities: Fully ranked models

    Returns:
        EcosystemStats; empty when there are no models
    """
    config = config or EcosystemConfig()
    organizations = compute_org_stats(entities, config.fallback_org)
    shares = {org: share_score(stats, config) for org, stats in sorted(organizations.items())}
    return EcosystemStats(organizations=organizations, shares=shares)
