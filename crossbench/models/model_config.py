"""Injectable configuration tables for the scoring engine.

Every threshold and weight used by the stages lives here so tests can probe
boundary behaviour by passing a modified table.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from crossbench.models.model_entity import Modality, Projection


class NoFilter(BaseModel):
    """Projection value is used as computed."""

    kind: Literal["none"] = "none"

    def apply(self, value: float, in_domain: bool) -> float:
        return value


class ExcludeEntirely(BaseModel):
    """Projection value is forced to zero outside the modality domain."""

    kind: Literal["exclude"] = "exclude"

    def apply(self, value: float, in_domain: bool) -> float:
        return value if in_domain else 0.0


class ScaleBy(BaseModel):
    """Projection value is scaled down outside the modality domain."""

    kind: Literal["scale"] = "scale"
    factor: float = Field(ge=0.0, le=1.0)

    def apply(self, value: float, in_domain: bool) -> float:
        return value if in_domain else value * self.factor


FilterStrategy = Annotated[
    Union[NoFilter, ExcludeEntirely, ScaleBy], Field(discriminator="kind")
]


class ProjectionPolicy(BaseModel):
    """Filter strategy for one projection and the modality defining its domain."""

    strategy: FilterStrategy = Field(default_factory=NoFilter)
    domain: Modality | None = Field(
        default=None, description="Modality an entity must carry to be in-domain"
    )

    def apply(self, value: float, modalities: set[Modality]) -> float:
        in_domain = self.domain is None or self.domain in modalities
        return self.strategy.apply(value, in_domain)


class SignalSource(BaseModel):
    """A recognised benchmark field and the trust weight of its observations."""

    field: str
    label: str
    weight: float = Field(gt=0.0)


class SignalConfig(BaseModel):
    """Fallback chains of signal sources.

    Each chain contributes at most one observation: the first source in the
    chain that yields a positive score.
    """

    chains: list[list[SignalSource]] = Field(
        default_factory=lambda: [
            [
                SignalSource(field="gpqa_score", label="ZeroEval GPQA", weight=0.50),
                SignalSource(field="average_score", label="Avg Score", weight=0.40),
            ]
        ]
    )


class RecencyConfig(BaseModel):
    """Day boundaries for recency tiers 3, 2 and 1 (anything older is tier 0)."""

    tier_3_max_days: int = Field(default=30, ge=0)
    tier_2_max_days: int = Field(default=90, ge=0)
    tier_1_max_days: int = Field(default=180, ge=0)

    @model_validator(mode="after")
    def boundaries_ascending(self) -> "RecencyConfig":
        if not self.tier_3_max_days <= self.tier_2_max_days <= self.tier_1_max_days:
            msg = "Recency tier boundaries must be ascending"
            raise ValueError(msg)
        return self


class QualityTier(BaseModel):
    """Bonus applied when final_score is strictly above the threshold."""

    threshold: float = Field(ge=0.0, le=1.0)
    bonus: float


class ConfidenceConfig(BaseModel):
    base: float = 50.0
    per_signal_bonus: float = 10.0
    recent_days: int = 30
    recent_bonus: float = 5.0
    aging_days: int = 90
    aging_bonus_ratio: float = 0.5
    versatile_threshold: float = 0.75
    versatile_bonus: float = 10.0
    quality_tiers: list[QualityTier] = Field(
        default_factory=lambda: [
            QualityTier(threshold=0.85, bonus=15.0),
            QualityTier(threshold=0.75, bonus=10.0),
            QualityTier(threshold=0.65, bonus=5.0),
        ]
    )
    low_quality_threshold: float = 0.40
    low_quality_penalty: float = 10.0
    variance_penalty: float = 50.0
    enterprise_bonus: float = 5.0
    consensus_min_signals: int = 3
    floor: float = 10.0
    ceiling: float = 99.0

    @field_validator("quality_tiers")
    @classmethod
    def tiers_descending(cls, tiers: list[QualityTier]) -> list[QualityTier]:
        """Tiers are evaluated high-to-low, first match wins."""
        return sorted(tiers, key=lambda t: t.threshold, reverse=True)


def _default_policies() -> dict[Projection, ProjectionPolicy]:
    return {
        Projection.IMAGE: ProjectionPolicy(strategy=ExcludeEntirely(), domain=Modality.IMAGE),
        Projection.VIDEO: ProjectionPolicy(strategy=ScaleBy(factor=0.3), domain=Modality.VIDEO),
    }


class OverallWeights(BaseModel):
    final: float = Field(default=0.40, ge=0.0)
    coding: float = Field(default=0.20, ge=0.0)
    creative: float = Field(default=0.15, ge=0.0)
    confidence: float = Field(default=0.15, ge=0.0)
    price: float = Field(default=0.10, ge=0.0)


class CodingWeights(BaseModel):
    coding: float = Field(default=0.6, ge=0.0)
    final: float = Field(default=0.2, ge=0.0)
    context: float = Field(default=0.1, ge=0.0)
    confidence: float = Field(default=0.1, ge=0.0)


class GenerativeWeights(BaseModel):
    """Shared by the image and video projections."""

    final: float = Field(default=0.5, ge=0.0)
    creative: float = Field(default=0.3, ge=0.0)
    speed: float = Field(default=0.1, ge=0.0)
    confidence: float = Field(default=0.1, ge=0.0)


class SpeedWeights(BaseModel):
    speed: float = Field(default=0.7, ge=0.0)
    confidence: float = Field(default=0.2, ge=0.0)
    price: float = Field(default=0.1, ge=0.0)


class EnterpriseWeights(BaseModel):
    confidence: float = Field(default=0.4, ge=0.0)
    uptime: float = Field(default=0.3, ge=0.0)
    maturity: float = Field(default=0.3, ge=0.0)


class RankingConfig(BaseModel):
    """Normalisation constants, per-projection weights and filter policies.

    Weight sets are models with defaulted fields, so a partial override only
    replaces the weights it names.
    """

    price_scale: float = Field(default=10.0, gt=0.0)
    speed_norm_tps: float = Field(default=150.0, gt=0.0)
    speed_base_tps: float = Field(default=200.0, gt=0.0)
    context_norm_tokens: float = Field(default=200_000.0, gt=0.0)

    overall_weights: OverallWeights = Field(default_factory=OverallWeights)
    coding_weights: CodingWeights = Field(default_factory=CodingWeights)
    generative_weights: GenerativeWeights = Field(default_factory=GenerativeWeights)
    speed_weights: SpeedWeights = Field(default_factory=SpeedWeights)
    enterprise_weights: EnterpriseWeights = Field(default_factory=EnterpriseWeights)

    free_value_multiplier: float = 1000.0
    value_log_offset: float = Field(default=0.1, gt=0.0)

    policies: dict[Projection, ProjectionPolicy] = Field(default_factory=_default_policies)

    def policy_for(self, projection: Projection) -> ProjectionPolicy:
        return self.policies.get(projection, ProjectionPolicy())


class EcosystemConfig(BaseModel):
    count_weight: float = 0.4
    score_scale: float = 10.0
    score_weight: float = 0.3
    fallback_org: str = "Other"


class ScoringConfig(BaseModel):
    """Complete configuration table for the scoring engine."""

    signals: SignalConfig = Field(default_factory=SignalConfig)
    recency: RecencyConfig = Field(default_factory=RecencyConfig)
    confidence: ConfidenceConfig = Field(default_factory=ConfidenceConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    ecosystem: EcosystemConfig = Field(default_factory=EcosystemConfig)
    tie_epsilon: float = Field(
        default=0.005, ge=0.0, description="Near-tie threshold on a [0,1] scale"
    )

    def epsilon_for_scale(self, scale: float) -> float:
        """Tie threshold rescaled to the range of the scores being compared."""
        return self.tie_epsilon * scale


class EnrichmentConfig(BaseModel):
    """Constants used by the knowledge base when a record omits an attribute."""

    enterprise_orgs: set[str] = Field(
        default_factory=lambda: {"openai", "anthropic", "google", "microsoft"}
    )
    enterprise_maturity: float = Field(default=0.95, ge=0.0, le=1.0)
    enterprise_uptime: float = Field(default=0.99, ge=0.0, le=1.0)
    default_maturity: float = Field(default=0.5, ge=0.0, le=1.0)
    default_uptime: float = Field(default=0.8, ge=0.0, le=1.0)
    open_source_markers: list[str] = Field(
        default_factory=lambda: ["llama", "mistral", "qwen", "falcon"]
    )
    per_token_multiplier: float = 1_000_000.0
    default_context_tokens: float = 100_000.0
    long_context_tokens: float = 160_000.0
    default_tokens_per_sec: float = 50.0
