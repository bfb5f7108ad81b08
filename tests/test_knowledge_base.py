"""Tests for knowledge base enrichment and modality detection."""

import pytest

from crossbench.enrichment.knowledge_base import KnowledgeBase
from crossbench.enrichment.modality import detect_modalities, modalities_from_name
from crossbench.models.model_config import EnrichmentConfig
from crossbench.models.model_entity import Modality


@pytest.fixture
def knowledge_base() -> KnowledgeBase:
    return KnowledgeBase()


def _enrich(knowledge_base, make_entity, make_record, now, name="test-model", final=0.6, org="TestOrg", **fields):
    record = make_record(name, organization=org, **fields)
    entity = make_entity(name=name, organization=record.organization, final_score=final)
    return knowledge_base.enrich(entity, record, now)


class TestModalityDetection:
    """Tests for modality detection."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("DALL-E 3", {Modality.IMAGE, Modality.TEXT}),
            ("Sora", {Modality.VIDEO, Modality.TEXT}),
            ("Stable Video Diffusion", {Modality.VIDEO, Modality.TEXT}),
            ("GPT-4o", {Modality.IMAGE, Modality.TEXT}),
            ("Qwen2-VL 72B", {Modality.IMAGE, Modality.TEXT}),
            ("grok-2", {Modality.IMAGE, Modality.TEXT}),
            ("grok-1", {Modality.TEXT}),
            ("Mistral Large", {Modality.TEXT}),
        ],
    )
    def test_from_name(self, name, expected):
        assert modalities_from_name(name) == expected

    def test_tags_win_over_name(self):
        assert detect_modalities("Sora", ["text"]) == {Modality.TEXT}

    def test_vision_tag_means_image(self):
        assert detect_modalities("x", ["Vision", "TEXT"]) == {Modality.IMAGE, Modality.TEXT}

    def test_unknown_tags_ignored(self):
        assert detect_modalities("x", ["audio"]) == set()


class TestPrice:
    def test_per_million_kept(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, input_price=2.5)
        assert entity.metrics.price_input_1m == 2.5

    def test_per_token_converted(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, input_price="0.000003")
        assert entity.metrics.price_input_1m == pytest.approx(3.0)

    def test_negative_is_free(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, input_price=-1)
        assert entity.metrics.price_input_1m == 0.0

    def test_oversized_price_falls_back(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, input_price=10**400)
        assert entity.metrics.price_input_1m == 0.0

    @pytest.mark.parametrize(
        "name,price", [("gpt-4-turbo", 10.0), ("gemini-1.5-flash", 0.25), ("other", 0.0)]
    )
    def test_name_fallback(self, knowledge_base, make_entity, make_record, now, name, price):
        entity = _enrich(knowledge_base, make_entity, make_record, now, name=name)
        assert entity.metrics.price_input_1m == price


class TestScores:
    def test_reported_coding_score(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, humaneval=0.88)
        assert entity.metrics.coding_score == pytest.approx(0.88)

    def test_code_model_proxy(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, name="CodeLlama", final=0.6)
        assert entity.metrics.coding_score == pytest.approx(0.63)

    def test_general_coding_proxy(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, final=0.6)
        assert entity.metrics.coding_score == pytest.approx(0.51)

    def test_proxy_capped_at_one(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, name="Sora", final=0.99)
        assert entity.metrics.creative_score == 1.0

    def test_flagship_creative(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(
            knowledge_base, make_entity, make_record, now, name="Claude Instant", final=0.6
        )
        assert entity.metrics.creative_score == pytest.approx(0.57)

    def test_default_creative(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, final=0.5)
        assert entity.metrics.creative_score == pytest.approx(0.4)


class TestAttributes:
    def test_enterprise_org(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, org="OpenAI")
        assert entity.metrics.is_enterprise_ready is True
        assert entity.metrics.org_maturity == 0.95
        assert entity.metrics.uptime_sla == 0.99

    def test_non_enterprise_org(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, org="Startup")
        assert entity.metrics.is_enterprise_ready is False
        assert entity.metrics.org_maturity == 0.5
        assert entity.metrics.uptime_sla == 0.8

    def test_open_source_marker(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, name="Llama 3.1 70B")
        assert entity.metrics.is_open_source is True

    def test_context_reported(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, context_length=32000)
        assert entity.metrics.context_tokens == 32000

    def test_context_long_name(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, name="model-128k")
        assert entity.metrics.context_tokens == 160_000

    def test_context_default(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now)
        assert entity.metrics.context_tokens == 100_000

    @pytest.mark.parametrize(
        "name,speed",
        [("gpt-3.5-turbo", 120.0), ("gemini flash", 150.0), ("o1-mini", 100.0), ("plain", 50.0)],
    )
    def test_throughput_fallback(self, knowledge_base, make_entity, make_record, now, name, speed):
        entity = _enrich(knowledge_base, make_entity, make_record, now, name=name)
        assert entity.metrics.tokens_per_sec == speed

    def test_throughput_reported(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, tokens_per_second="85")
        assert entity.metrics.tokens_per_sec == 85.0

    def test_custom_config(self, make_entity, make_record, now):
        knowledge_base = KnowledgeBase(EnrichmentConfig(enterprise_orgs={"meta"}))
        entity = _enrich(knowledge_base, make_entity, make_record, now, org="Meta")
        assert entity.metrics.is_enterprise_ready is True


class TestFreshness:
    def test_updated_at(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(
            knowledge_base, make_entity, make_record, now, updated_at="2025-05-20T00:00:00Z"
        )
        assert entity.metrics.last_updated_days_ago == 12

    def test_naive_now_taken_as_utc(self, knowledge_base, make_entity, make_record, now):
        naive = now.replace(tzinfo=None)
        entity = _enrich(
            knowledge_base, make_entity, make_record, naive, updated_at="2025-05-20T00:00:00Z"
        )
        assert entity.metrics.last_updated_days_ago == 12

    def test_release_date(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, release_date="2025-03-01")
        assert entity.metrics.last_updated_days_ago == 92

    def test_future_date_is_zero(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, updated_at="2026-01-01")
        assert entity.metrics.last_updated_days_ago == 0

    def test_unparsable_updated_at(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, updated_at="recently")
        assert entity.metrics.last_updated_days_ago == 60

    def test_unparsable_release_date(self, knowledge_base, make_entity, make_record, now):
        entity = _enrich(knowledge_base, make_entity, make_record, now, release_date=20240101)
        assert entity.metrics.last_updated_days_ago == 90

    @pytest.mark.parametrize(
        "name,days", [("model-2025-01", 15), ("model-2024", 90), ("model-2023", 365), ("m", 180)]
    )
    def test_name_year_fallback(self, knowledge_base, make_entity, make_record, now, name, days):
        entity = _enrich(knowledge_base, make_entity, make_record, now, name=name)
        assert entity.metrics.last_updated_days_ago == days
