"""Export file models for the leaderboard artifacts."""

from datetime import datetime

from pydantic import BaseModel, Field

from crossbench.models.common import _utc_now, clamp
from crossbench.models.model_entity import EnrichedMetrics, Modality, ModelEntity, RankScores


class MetricSnapshot(BaseModel):
    """Underlying metrics, scores normalised to 0-100 for display."""

    score: float = Field(ge=0.0, le=100.0)
    coding: float = Field(ge=0.0, le=100.0)
    creative: float = Field(ge=0.0, le=100.0)
    price: float = Field(ge=0.0, description="USD per 1M input tokens")
    speed: float = Field(ge=0.0, description="Tokens per second")
    recency_bonus: int = Field(ge=0, le=3)
    days_ago: int = Field(ge=0)


class ExportMeta(BaseModel):
    confidence: float
    conf_reason: str
    is_open_source: bool
    is_enterprise: bool
    is_image: bool
    is_video: bool
    is_text: bool
    primary_type: str


class ExportRecord(BaseModel):
    """Per-model entry of the exported leaderboard."""

    name: str
    org: str
    metrics: MetricSnapshot
    ranks: RankScores
    meta: ExportMeta

    @classmethod
    def from_entity(cls, entity: ModelEntity) -> "ExportRecord":
        m = entity.metrics
        return cls(
            name=entity.name,
            org=entity.organization,
            metrics=MetricSnapshot(
                score=clamp(entity.final_score * 100.0, 0.0, 100.0),
                coding=clamp(m.coding_score * 100.0, 0.0, 100.0),
                creative=clamp(m.creative_score * 100.0, 0.0, 100.0),
                price=m.price_input_1m,
                speed=m.tokens_per_sec,
                recency_bonus=entity.recency_tier,
                days_ago=m.last_updated_days_ago,
            ),
            ranks=entity.ranks.clamped(),
            meta=ExportMeta(
                confidence=entity.confidence,
                conf_reason=entity.confidence_reason,
                is_open_source=m.is_open_source,
                is_enterprise=m.is_enterprise_ready,
                is_image=entity.has_modality(Modality.IMAGE),
                is_video=entity.has_modality(Modality.VIDEO),
                is_text=entity.has_modality(Modality.TEXT),
                primary_type=entity.primary_type,
            ),
        )

    def to_entity(self) -> ModelEntity:
        """Rebuild a ranked model from its exported form.

        Signals are not exported, so the rebuilt model carries none; every
        field read by view filtering and ordering is restored.
        """
        modalities = set()
        if self.meta.is_text:
            modalities.add(Modality.TEXT)
        if self.meta.is_image:
            modalities.add(Modality.IMAGE)
        if self.meta.is_video:
            modalities.add(Modality.VIDEO)

        return ModelEntity(
            name=self.name,
            organization=self.org,
            modalities=modalities,
            metrics=EnrichedMetrics(
                coding_score=self.metrics.coding / 100.0,
                creative_score=self.metrics.creative / 100.0,
                price_input_1m=self.metrics.price,
                tokens_per_sec=self.metrics.speed,
                last_updated_days_ago=self.metrics.days_ago,
                is_open_source=self.meta.is_open_source,
                is_enterprise_ready=self.meta.is_enterprise,
            ),
            final_score=self.metrics.score / 100.0,
            has_evidence=self.metrics.score > 0.0,
            recency_tier=self.metrics.recency_bonus,
            confidence=self.meta.confidence,
            confidence_reason=self.meta.conf_reason,
            ranks=self.ranks,
        )


class LeaderboardFile(BaseModel):
    """leaderboard_all.json: every exported model plus ecosystem shares."""

    version: str = Field(default="1.0")
    generated_at: datetime = Field(default_factory=_utc_now)
    models: list[ExportRecord] = Field(default_factory=list)
    ecosystem: dict[str, float] = Field(default_factory=dict)
