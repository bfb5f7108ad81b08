"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from crossbench.models.model_config import ConfidenceConfig, ScoringConfig, SignalSource
from crossbench.models.model_entity import Modality, ModelEntity, Projection, RankScores, Signal
from crossbench.models.model_record import RawModelRecord
from crossbench.models.model_stats import IngestReport
from crossbench.models.model_storage import ExportRecord


class TestRawModelRecord:
    """Tests for RawModelRecord."""

    def test_extra_fields_kept(self):
        record = RawModelRecord.model_validate({"name": "a", "gpqa_score": 0.5, "foo": "bar"})
        assert record.raw("foo") == "bar"
        assert record.has("gpqa_score")
        assert not record.has("missing")

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.5, 0.5),
            (1, 1.0),
            ("0.75", 0.75),
            (" 0.1 ", 0.1),
            ("abc", None),
            ("", None),
            (None, None),
            (True, None),
            ("nan", None),
            (float("inf"), None),
            ([0.5], None),
            (10**400, None),
        ],
    )
    def test_get_float(self, value, expected):
        record = RawModelRecord.model_validate({"name": "a", "score": value})
        assert record.get_float("score") == expected

    def test_name_required(self):
        with pytest.raises(ValidationError):
            RawModelRecord.model_validate({"organization": "x"})

    def test_organization_defaults(self):
        assert RawModelRecord(name="a").organization == "Unknown"
        assert RawModelRecord(name="a", organization="").organization == "Unknown"
        assert RawModelRecord(name="a", organization=None).organization == "Unknown"


class TestSignal:
    def test_frozen(self):
        signal = Signal(source="a", score=0.5, weight=0.4)
        with pytest.raises(ValidationError):
            signal.score = 0.9

    def test_score_range(self):
        with pytest.raises(ValidationError):
            Signal(source="a", score=1.2, weight=0.4)

    def test_weight_positive(self):
        with pytest.raises(ValidationError):
            Signal(source="a", score=0.5, weight=0.0)

    def test_source_weight_positive(self):
        with pytest.raises(ValidationError):
            SignalSource(field="x", label="X", weight=-1.0)


class TestModelEntity:
    """Tests for ModelEntity."""

    @pytest.mark.parametrize(
        "modalities,expected",
        [
            ({Modality.TEXT}, "Text"),
            ({Modality.IMAGE}, "Image"),
            ({Modality.IMAGE, Modality.TEXT}, "Multimodal"),
            ({Modality.VIDEO, Modality.TEXT}, "Video"),
            (set(), "Text"),
        ],
    )
    def test_primary_type(self, modalities, expected):
        assert ModelEntity(name="m", modalities=modalities).primary_type == expected

    def test_defaults(self):
        entity = ModelEntity(name="m")
        assert entity.organization == "Unknown"
        assert entity.confidence == 10.0
        assert entity.final_score == 0.0

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ModelEntity(name="")

    def test_rank_get(self):
        assert RankScores(coding=42.0).get(Projection.CODING) == 42.0


class TestConfig:
    def test_epsilon_for_scale(self):
        assert ScoringConfig().epsilon_for_scale(100.0) == pytest.approx(0.5)

    def test_negative_epsilon_rejected(self):
        with pytest.raises(ValidationError):
            ScoringConfig(tie_epsilon=-0.1)

    def test_json_round_trip(self):
        config = ScoringConfig(confidence=ConfidenceConfig(base=40.0))
        restored = ScoringConfig.model_validate_json(config.model_dump_json())
        assert restored == config


class TestStats:
    def test_skipped_total(self):
        report = IngestReport(received=5, skipped_invalid=2, skipped_duplicate=1)
        assert report.skipped == 3


class TestExportRecord:
    def test_from_entity_clamps(self):
        entity = ModelEntity(
            name="m",
            final_score=0.5,
            modalities={Modality.TEXT},
            ranks=RankScores(value=5000.0, overall=-1.0),
        )
        record = ExportRecord.from_entity(entity)

        assert record.ranks.value == 100.0
        assert record.ranks.overall == 0.0
        assert record.metrics.score == 50.0
        assert record.meta.is_text is True
        assert record.meta.primary_type == "Text"
