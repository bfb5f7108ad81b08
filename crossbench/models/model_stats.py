"""Run-level statistics: ingestion counts and per-organization aggregates."""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from crossbench.models.common import _utc_now
from crossbench.models.model_entity import ModelEntity


class IngestReport(BaseModel):
    """Counts of what happened to each raw record in a batch."""

    received: int = Field(default=0, ge=0)
    accepted: int = Field(default=0, ge=0)
    skipped_invalid: int = Field(default=0, ge=0, description="Missing/empty name or bad schema")
    skipped_duplicate: int = Field(default=0, ge=0, description="Name already seen in batch")
    dropped_unscored: int = Field(default=0, ge=0, description="final_score == 0 and dropped")

    @computed_field
    @property
    def skipped(self) -> int:
        return self.skipped_invalid + self.skipped_duplicate


class OrgStats(BaseModel):
    """Aggregate of all ranked models published by one organization."""

    model_count: int = Field(default=0, ge=0)
    total_score: float = Field(default=0.0, ge=0.0)

    @computed_field
    @property
    def avg_score(self) -> float:
        if self.model_count == 0:
            return 0.0
        return self.total_score / self.model_count


class EcosystemStats(BaseModel):
    """Organization aggregates computed after every model has been ranked."""

    computed_at: datetime = Field(default_factory=_utc_now)
    organizations: dict[str, OrgStats] = Field(default_factory=dict)
    shares: dict[str, float] = Field(
        default_factory=dict, description="Key: organization, value: composite share score"
    )


class LeaderboardResult(BaseModel):
    """Outcome of one scoring run."""

    entities: list[ModelEntity] = Field(default_factory=list)
    ecosystem: EcosystemStats = Field(default_factory=EcosystemStats)
    report: IngestReport = Field(default_factory=IngestReport)
