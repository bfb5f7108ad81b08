"""Knowledge base attaching supplementary attributes to scored models.

Enrichment reads what the source provides and falls back to name-based
heuristics when a field is missing. It owns the model's modalities and
EnrichedMetrics and never touches signals, final_score or confidence.

Proxy estimates for coding and creative scores are derived from final_score
and capped at 1.0 where they are produced.
"""

import logging
from datetime import UTC, date, datetime

from crossbench.enrichment.modality import detect_modalities
from crossbench.models.common import _utc_now, clamp
from crossbench.models.model_config import EnrichmentConfig
from crossbench.models.model_entity import EnrichedMetrics, Modality, ModelEntity
from crossbench.models.model_record import RawModelRecord

logger = logging.getLogger(__name__)

# Name-based price fallbacks (USD per 1M input tokens)
PRICE_HEURISTICS = [("gpt-4", 10.0), ("flash", 0.25)]

# Name-based throughput fallbacks (tokens/sec), first match wins
SPEED_HEURISTICS = [("turbo", 120.0), ("flash", 150.0), ("mini", 100.0)]

# Freshness fallbacks (days)
UPDATED_AT_FALLBACK_DAYS = 60
RELEASE_DATE_FALLBACK_DAYS = 90
NAME_YEAR_DAYS = [("2025", 15), ("2024", 90), ("2023", 365)]
DEFAULT_DAYS = 180

# Proxy multipliers applied to final_score
CODE_MODEL_MULTIPLIER = 1.05
GENERAL_CODING_MULTIPLIER = 0.85
MULTIMODAL_CREATIVE_MULTIPLIER = 1.1
FLAGSHIP_CREATIVE_MULTIPLIER = 0.95
GENERAL_CREATIVE_MULTIPLIER = 0.80
FLAGSHIP_MARKERS = ["gpt-4", "claude", "gemini"]


def _parse_date(value: object) -> datetime | None:
    """Parse an ISO-8601 date or datetime; naive values are taken as UTC."""
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(value.strip()[:10]), datetime.min.time())
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class KnowledgeBase:
    """Attaches modalities and enriched metrics to a model."""

    def __init__(self, config: EnrichmentConfig | None = None) -> None:
        self.config = config or EnrichmentConfig()

    def enrich(
        self,
        entity: ModelEntity,
        record: RawModelRecord,
        now: datetime | None = None,
    ) -> ModelEntity:
        """Enrich a model in-place from its raw record.

        Args:
            entity: Model whose final_score has already been aggregated
            record: The raw record the model was built from
            now: Reference time for freshness (defaults to now)

        Returns:
            The same model with modalities and metrics attached
        """
        now = now or _utc_now()
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        name = entity.name.lower()

        entity.modalities = detect_modalities(entity.name, record.modalities)

        is_enterprise = entity.organization.lower() in self.config.enterprise_orgs
        entity.metrics = EnrichedMetrics(
            coding_score=self._coding_score(record, name, entity.final_score),
            creative_score=self._creative_score(
                record, name, entity.final_score, entity.modalities
            ),
            price_input_1m=self._price(record, name),
            tokens_per_sec=self._throughput(record, name),
            context_tokens=self._context_tokens(record, name),
            last_updated_days_ago=self._days_since_update(record, name, now),
            is_open_source=any(marker in name for marker in self.config.open_source_markers),
            is_enterprise_ready=is_enterprise,
            org_maturity=(
                self.config.enterprise_maturity if is_enterprise else self.config.default_maturity
            ),
            uptime_sla=(
                self.config.enterprise_uptime if is_enterprise else self.config.default_uptime
            ),
        )
        return entity

    def _price(self, record: RawModelRecord, name: str) -> float:
        """Price per 1M input tokens; sub-unit prices are per-token and get converted."""
        raw_price = record.get_float("input_price")
        if raw_price is not None:
            if raw_price < 0:
                logger.debug(f"{record.name}: negative input_price {raw_price} treated as free")
                return 0.0
            if 0.0 < raw_price < 1.0:
                return raw_price * self.config.per_token_multiplier
            return raw_price

        for marker, price in PRICE_HEURISTICS:
            if marker in name:
                return price
        return 0.0

    def _coding_score(self, record: RawModelRecord, name: str, final_score: float) -> float:
        for key in ("coding_score", "humaneval"):
            value = record.get_float(key)
            if value is not None:
                return clamp(value, 0.0, 1.0)

        multiplier = CODE_MODEL_MULTIPLIER if "code" in name else GENERAL_CODING_MULTIPLIER
        return min(1.0, final_score * multiplier)

    def _creative_score(
        self,
        record: RawModelRecord,
        name: str,
        final_score: float,
        modalities: set[Modality],
    ) -> float:
        value = record.get_float("creative_score")
        if value is not None:
            return clamp(value, 0.0, 1.0)

        if Modality.IMAGE in modalities or Modality.VIDEO in modalities:
            multiplier = MULTIMODAL_CREATIVE_MULTIPLIER
        elif any(marker in name for marker in FLAGSHIP_MARKERS):
            multiplier = FLAGSHIP_CREATIVE_MULTIPLIER
        else:
            multiplier = GENERAL_CREATIVE_MULTIPLIER
        return min(1.0, final_score * multiplier)

    def _context_tokens(self, record: RawModelRecord, name: str) -> float:
        value = record.get_float("context_length")
        if value is not None:
            return max(0.0, value)
        if "128k" in name or "200k" in name:
            return self.config.long_context_tokens
        return self.config.default_context_tokens

    def _throughput(self, record: RawModelRecord, name: str) -> float:
        for key in ("throughput", "tokens_per_second"):
            value = record.get_float(key)
            if value is not None:
                return max(0.0, value)

        for marker, speed in SPEED_HEURISTICS:
            if marker in name:
                return speed
        return self.config.default_tokens_per_sec

    def _days_since_update(self, record: RawModelRecord, name: str, now: datetime) -> int:
        for key, fallback in (
            ("updated_at", UPDATED_AT_FALLBACK_DAYS),
            ("release_date", RELEASE_DATE_FALLBACK_DAYS),
        ):
            if not record.has(key):
                continue
            parsed = _parse_date(record.raw(key))
            if parsed is None:
                return fallback
            return max(0, (now - parsed).days)

        for year, days in NAME_YEAR_DAYS:
            if year in name:
                return days
        return DEFAULT_DAYS
