"""Pytest configuration and fixtures."""

import tempfile
from datetime import UTC, datetime
from pathlib import Path

import pytest

from crossbench.models.model_config import ScoringConfig
from crossbench.models.model_entity import (
    EnrichedMetrics,
    Modality,
    ModelEntity,
    RankScores,
    Signal,
)
from crossbench.models.model_record import RawModelRecord


@pytest.fixture
def now() -> datetime:
    """Fixed reference time so freshness is deterministic."""
    return datetime(2025, 6, 1, tzinfo=UTC)


@pytest.fixture
def scoring_config() -> ScoringConfig:
    return ScoringConfig()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def raw_records() -> list[dict]:
    """A small, realistic API payload."""
    return [
        {
            "name": "GPT-4o",
            "organization": "OpenAI",
            "gpqa_score": 0.53,
            "input_price": 2.5,
            "throughput": 110,
            "context_length": 128000,
            "updated_at": "2025-05-20T00:00:00Z",
        },
        {
            "name": "Claude 3.5 Sonnet",
            "organization": "Anthropic",
            "gpqa_score": "0.65",
            "input_price": 3.0,
            "release_date": "2025-03-01",
        },
        {
            "name": "Llama 3.1 405B",
            "organization": "Meta",
            "average_score": 0.51,
            "input_price": 0,
        },
        {
            "name": "Qwen2.5 Coder 32B",
            "organization": None,
            "gpqa_score": 0.42,
            "humaneval": 0.88,
            "modalities": ["text"],
        },
        {
            "name": "Sora",
            "organization": "OpenAI",
            "average_score": 0.70,
            "modalities": ["video", "text"],
        },
        {"name": "Mystery Model", "organization": "Nobody"},
        {"name": "", "organization": "Broken"},
        {"organization": "NoName", "gpqa_score": 0.9},
        {"name": "GPT-4o", "organization": "OpenAI", "gpqa_score": 0.99},
        "not an object",
    ]


@pytest.fixture
def make_record():
    """Factory for validated raw records."""

    def _make(name: str = "test-model", **fields) -> RawModelRecord:
        return RawModelRecord.model_validate({"name": name, **fields})

    return _make


@pytest.fixture
def make_entity():
    """Factory for ranked models with explicit fields."""

    def _make(
        name: str = "test-model",
        organization: str = "TestOrg",
        final_score: float = 0.5,
        recency_tier: int = 0,
        modalities: set[Modality] | None = None,
        signals: tuple[Signal, ...] = (),
        metrics: EnrichedMetrics | None = None,
        ranks: RankScores | None = None,
        confidence: float = 50.0,
    ) -> ModelEntity:
        return ModelEntity(
            name=name,
            organization=organization,
            final_score=final_score,
            has_evidence=bool(signals),
            recency_tier=recency_tier,
            modalities=modalities if modalities is not None else {Modality.TEXT},
            signals=signals,
            metrics=metrics or EnrichedMetrics(),
            ranks=ranks or RankScores(),
            confidence=confidence,
        )

    return _make
