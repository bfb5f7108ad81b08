"""View filtering: per-view membership rules and display ordering.

This filter runs AFTER ranking. Each view lists the models relevant to one
comparison, ordered by the view's projection with the recency tie-break.
"""

import logging
from collections.abc import Callable
from enum import Enum

from crossbench.evaluators.tie_break import sort_by_projection
from crossbench.models.model_config import ScoringConfig
from crossbench.models.model_entity import Modality, ModelEntity, Projection

logger = logging.getLogger(__name__)


class View(str, Enum):
    """Dashboard views."""

    OVERALL = "overall"
    VALUE = "value"
    CODING = "coding"
    IMAGE = "image"
    VIDEO = "video"
    SPEED = "speed"
    CONFIDENCE = "conf"
    ENTERPRISE = "enterprise"
    OPEN_SOURCE = "opensource"


# Projection each view is ordered by
VIEW_PROJECTIONS: dict[View, Projection] = {
    View.OVERALL: Projection.OVERALL,
    View.VALUE: Projection.VALUE,
    View.CODING: Projection.CODING,
    View.IMAGE: Projection.IMAGE,
    View.VIDEO: Projection.VIDEO,
    View.SPEED: Projection.SPEED,
    View.CONFIDENCE: Projection.CONFIDENCE,
    View.ENTERPRISE: Projection.ENTERPRISE,
    View.OPEN_SOURCE: Projection.OVERALL,
}

# Membership rule per view; views without an entry list every model
VIEW_MEMBERSHIP: dict[View, Callable[[ModelEntity], bool]] = {
    View.OVERALL: lambda e: e.has_modality(Modality.TEXT),
    View.VALUE: lambda e: e.ranks.value > 0,
    View.CODING: lambda e: e.ranks.coding > 0,
    View.IMAGE: lambda e: e.has_modality(Modality.IMAGE),
    View.VIDEO: lambda e: e.ranks.video > 0,
    View.ENTERPRISE: lambda e: e.metrics.is_enterprise_ready,
    View.OPEN_SOURCE: lambda e: e.metrics.is_open_source,
}

VIEW_DESCRIPTIONS: dict[View, str] = {
    View.OVERALL: "Text models by overall score",
    View.VALUE: "Performance per dollar",
    View.CODING: "Coding ability",
    View.IMAGE: "Image-capable models",
    View.VIDEO: "Video generation (non-video models down-weighted)",
    View.SPEED: "Throughput",
    View.CONFIDENCE: "Evidence reliability",
    View.ENTERPRISE: "Enterprise-ready vendors",
    View.OPEN_SOURCE: "Open-weight models by overall score",
}


def drop_unscored(entities: list[ModelEntity]) -> tuple[list[ModelEntity], int]:
    """Remove models whose final_score is zero.

    Returns:
        Tuple of (kept models, number dropped)
    """
    kept = [e for e in entities if e.final_score > 0.0]
    dropped = len(entities) - len(kept)
    if dropped:
        logger.info(f"Dropped {dropped} models without a usable score")
    return kept, dropped


class ViewFilter:
    """Select and order the models shown in one view."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def apply(
        self,
        entities: list[ModelEntity],
        view: View,
        limit: int | None = None,
    ) -> list[ModelEntity]:
        """Filter models for a view and sort them for display.

        Args:
            entities: Ranked models
            view: View to build
            limit: Optional maximum number of models returned

        Returns:
            Members of the view, best first
        """
        is_member = VIEW_MEMBERSHIP.get(view)
        members = [e for e in entities if is_member is None or is_member(e)]

        ordered = sort_by_projection(
            members,
            VIEW_PROJECTIONS[view],
            self.config.epsilon_for_scale(100.0),
        )

        logger.debug(f"View {view.value}: {len(ordered)}/{len(entities)} models")

        if limit is not None:
            return ordered[:limit]
        return ordered
