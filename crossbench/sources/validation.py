"""Validation of raw source records before scoring."""

import logging
from typing import Any

from pydantic import ValidationError

from crossbench.models.model_record import RawModelRecord
from crossbench.models.model_stats import IngestReport

logger = logging.getLogger(__name__)


def validate_records(raw_records: list[Any]) -> tuple[list[RawModelRecord], IngestReport]:
    """Validate raw records, skipping malformed entries and duplicate names.

    The first record with a given name wins; later ones are counted as
    duplicates. Skipped records never abort the batch.

    Args:
        raw_records: Records as handed over by a source

    Returns:
        Tuple of (accepted records in input order, ingestion report)
    """
    report = IngestReport(received=len(raw_records))
    accepted: list[RawModelRecord] = []
    seen: set[str] = set()

    for index, item in enumerate(raw_records):
        if not isinstance(item, dict):
            report.skipped_invalid += 1
            logger.warning(f"Skipping record #{index}: not an object")
            continue

        try:
            record = RawModelRecord.model_validate(item)
        except ValidationError as e:
            report.skipped_invalid += 1
            logger.warning(f"Skipping record #{index}: {e.error_count()} validation errors")
            continue

        if record.name in seen:
            report.skipped_duplicate += 1
            logger.debug(f"Skipping duplicate model: {record.name}")
            continue

        seen.add(record.name)
        accepted.append(record)

    report.accepted = len(accepted)
    logger.info(
        f"Validated {report.accepted}/{report.received} records "
        f"({report.skipped_invalid} invalid, {report.skipped_duplicate} duplicates)"
    )
    return accepted, report
