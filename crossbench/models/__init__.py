"""Pydantic models for CrossBench."""

from crossbench.models.model_config import (
    ConfidenceConfig,
    EcosystemConfig,
    EnrichmentConfig,
    ExcludeEntirely,
    FilterStrategy,
    NoFilter,
    ProjectionPolicy,
    QualityTier,
    RankingConfig,
    RecencyConfig,
    ScaleBy,
    ScoringConfig,
    SignalConfig,
    SignalSource,
)
from crossbench.models.model_entity import (
    EnrichedMetrics,
    Modality,
    ModelEntity,
    Projection,
    RankScores,
    Signal,
)
from crossbench.models.model_record import RawModelRecord
from crossbench.models.model_stats import (
    EcosystemStats,
    IngestReport,
    LeaderboardResult,
    OrgStats,
)
from crossbench.models.model_storage import (
    ExportMeta,
    ExportRecord,
    LeaderboardFile,
    MetricSnapshot,
)

__all__ = [
    # Entity models
    "EnrichedMetrics",
    "Modality",
    "ModelEntity",
    "Projection",
    "RankScores",
    "Signal",
    # Input models
    "RawModelRecord",
    # Configuration models
    "ConfidenceConfig",
    "EcosystemConfig",
    "EnrichmentConfig",
    "ExcludeEntirely",
    "FilterStrategy",
    "NoFilter",
    "ProjectionPolicy",
    "QualityTier",
    "RankingConfig",
    "RecencyConfig",
    "ScaleBy",
    "ScoringConfig",
    "SignalConfig",
    "SignalSource",
    # Statistics models
    "EcosystemStats",
    "IngestReport",
    "LeaderboardResult",
    "OrgStats",
    # Storage models
    "ExportMeta",
    "ExportRecord",
    "LeaderboardFile",
    "MetricSnapshot",
]
