"""Tests for leaderboard sources and record validation."""

import json
from unittest.mock import patch

import httpx
import pytest

from crossbench.consts import DEFAULT_SOURCE_URL, SOURCE_URL_ENV, USER_AGENT
from crossbench.sources.file_source import FileSource
from crossbench.sources.http_source import HttpSource
from crossbench.sources.validation import validate_records


def _transport(payload, status_code: int = 200, seen: list | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


class TestHttpSource:
    """Tests for HttpSource."""

    @pytest.mark.asyncio
    async def test_fetch_returns_array(self):
        seen: list[httpx.Request] = []
        source = HttpSource(
            url="https://example.test/models",
            transport=_transport([{"name": "a"}], seen=seen),
        )

        records = await source.fetch()

        assert records == [{"name": "a"}]
        assert len(seen) == 1
        assert seen[0].headers["User-Agent"] == USER_AGENT

    @pytest.mark.asyncio
    async def test_non_array_payload_rejected(self):
        source = HttpSource(
            url="https://example.test/models",
            transport=_transport({"models": []}),
        )
        with pytest.raises(ValueError, match="expected a JSON array"):
            await source.fetch()

    @pytest.mark.asyncio
    async def test_http_error_propagates_without_retry(self):
        seen: list[httpx.Request] = []
        source = HttpSource(
            url="https://example.test/models",
            transport=_transport([], status_code=503, seen=seen),
        )
        with pytest.raises(httpx.HTTPStatusError):
            await source.fetch()
        assert len(seen) == 1

    def test_url_param_wins(self):
        with patch.dict("os.environ", {SOURCE_URL_ENV: "https://env.test"}):
            assert HttpSource(url="https://param.test").url == "https://param.test"

    def test_url_from_env(self):
        with patch.dict("os.environ", {SOURCE_URL_ENV: "https://env.test"}):
            assert HttpSource().url == "https://env.test"

    def test_url_default(self):
        with patch.dict("os.environ", {SOURCE_URL_ENV: ""}):
            assert HttpSource().url == DEFAULT_SOURCE_URL


class TestFileSource:
    """Tests for FileSource."""

    @pytest.mark.asyncio
    async def test_reads_array(self, temp_dir):
        path = temp_dir / "models.json"
        path.write_text(json.dumps([{"name": "a"}, {"name": "b"}]), encoding="utf-8")

        records = await FileSource(path).fetch()
        assert [r["name"] for r in records] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_rejects_object(self, temp_dir):
        path = temp_dir / "models.json"
        path.write_text(json.dumps({"name": "a"}), encoding="utf-8")

        with pytest.raises(ValueError):
            await FileSource(path).fetch()


class TestValidateRecords:
    """Tests for validate_records."""

    def test_counts(self, raw_records):
        records, report = validate_records(raw_records)

        assert report.received == 10
        assert report.accepted == 6
        assert report.skipped_invalid == 3
        assert report.skipped_duplicate == 1
        assert report.skipped == 4
        assert len(records) == 6

    def test_first_duplicate_wins(self, raw_records):
        records, _ = validate_records(raw_records)
        gpt = next(r for r in records if r.name == "GPT-4o")
        assert gpt.get_float("gpqa_score") == 0.53

    def test_null_organization_is_unknown(self, raw_records):
        records, _ = validate_records(raw_records)
        qwen = next(r for r in records if r.name.startswith("Qwen"))
        assert qwen.organization == "Unknown"

    def test_whitespace_name_rejected(self):
        records, report = validate_records([{"name": "   "}])
        assert records == []
        assert report.skipped_invalid == 1

    def test_empty_batch(self):
        records, report = validate_records([])
        assert records == []
        assert report.received == 0

    def test_bad_modalities_type_rejected(self):
        _, report = validate_records([{"name": "a", "modalities": "text"}])
        assert report.skipped_invalid == 1
