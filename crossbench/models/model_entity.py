from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from crossbench.models.common import clamp


class Modality(str, Enum):
    """Output modalities a model can carry."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"


class Projection(str, Enum):
    """The eight ranking projections."""

    OVERALL = "overall"
    VALUE = "value"
    CODING = "coding"
    IMAGE = "image"
    VIDEO = "video"
    SPEED = "speed"
    CONFIDENCE = "confidence"
    ENTERPRISE = "enterprise"


class Signal(BaseModel):
    """One weighted observation of model performance from a named source."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(description="Source label, e.g. 'ZeroEval GPQA'")
    score: float = Field(ge=0.0, le=1.0, description="Observed score in [0,1]")
    weight: float = Field(gt=0.0, description="Trust weight of the source")


class EnrichedMetrics(BaseModel):
    """Supplementary attributes attached by the knowledge base."""

    coding_score: float = Field(default=0.0, ge=0.0, le=1.0)
    creative_score: float = Field(default=0.0, ge=0.0, le=1.0)
    price_input_1m: float = Field(default=0.0, ge=0.0, description="USD per 1M input tokens")
    tokens_per_sec: float = Field(default=0.0, ge=0.0, description="Generation throughput")
    context_tokens: float = Field(default=0.0, ge=0.0, description="Context window in tokens")
    last_updated_days_ago: int = Field(default=0, ge=0, description="Freshness in days")
    is_open_source: bool = False
    is_enterprise_ready: bool = False
    org_maturity: float = Field(default=0.0, ge=0.0, le=1.0, description="Coarse maturity tier")
    uptime_sla: float = Field(default=0.0, ge=0.0, le=1.0, description="Coarse uptime tier")


class RankScores(BaseModel):
    """Raw projection values; may overflow [0,100] until clamped for export."""

    overall: float = 0.0
    value: float = 0.0
    coding: float = 0.0
    image: float = 0.0
    video: float = 0.0
    speed: float = 0.0
    confidence: float = 0.0
    enterprise: float = 0.0

    def get(self, projection: Projection) -> float:
        """Return the raw value of a projection."""
        return getattr(self, projection.value)

    def clamped(self) -> "RankScores":
        """Return a copy with every projection clamped to [0,100]."""
        return RankScores(
            **{name: clamp(value, 0.0, 100.0) for name, value in self.model_dump().items()}
        )


class ModelEntity(BaseModel):
    """A single evaluated model moving through the scoring stages.

    Each stage owns its own derived fields:
    - aggregation: final_score, has_evidence, recency_tier
    - enrichment: modalities, metrics
    - confidence: confidence, confidence_reason
    - ranking: ranks
    """

    name: str = Field(min_length=1, description="Unique display name")
    organization: str = Field(default="Unknown")
    modalities: set[Modality] = Field(default_factory=set)
    signals: tuple[Signal, ...] = Field(default_factory=tuple)
    metrics: EnrichedMetrics = Field(default_factory=EnrichedMetrics)

    # Derived
    final_score: float = Field(default=0.0, ge=0.0, le=1.0)
    has_evidence: bool = False
    recency_tier: int = Field(default=0, ge=0, le=3)
    confidence: float = Field(default=10.0, ge=10.0, le=99.0)
    confidence_reason: str = ""
    ranks: RankScores = Field(default_factory=RankScores)

    def has_modality(self, modality: Modality) -> bool:
        return modality in self.modalities

    @computed_field
    @property
    def primary_type(self) -> str:
        """Display type: Video beats Image-only beats Multimodal beats Text."""
        if Modality.VIDEO in self.modalities:
            return "Video"
        if Modality.IMAGE in self.modalities and len(self.modalities) == 1:
            return "Image"
        if len(self.modalities) > 1:
            return "Multimodal"
        return "Text"
