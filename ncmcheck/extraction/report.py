from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List

from ..models.schema import LookupResult, Report, ReportRow
from ..registry.builder import Registry
from ..utils.dates import format_date_field
from ..utils.normalization import extract_codes, pretty_format
from .validity import is_valid, reference_day

logger = logging.getLogger(__name__)

NOT_FOUND_TEXT = "NCM não encontrado na tabela vigente"
NO_DESCRIPTION = "—"
NO_DATE = "-"
VALID_TEXT = "Vigente"
INVALID_TEXT = "Não vigente"


def build_report(text: str, registry: Registry, reference: date | datetime | None = None) -> Report:
    """Extract NCM codes from ``text`` and look each one up in ``registry``.

    Args:
        text: Free text that may mention NCM codes in any grouping.
        registry: The registry snapshot to read. It is only read, never
            modified, so several reports may share one snapshot.
        reference: Date the validity is evaluated at; defaults to today.

    Returns:
        A :class:`Report` whose results follow the order in which codes
        first appear in ``text``. Codes missing from the registry are kept
        with ``record=None`` and are never valid.
    """
    codes = extract_codes(text)
    if not codes:
        return Report()
    day = reference_day(reference)
    results: List[LookupResult] = []
    for code in codes:
        record = registry.get(code)
        if record is None:
            logger.debug("code %s not in registry", code)
            results.append(LookupResult(code=code))
            continue
        results.append(LookupResult(code=code, record=record, is_valid=is_valid(record, day)))
    return Report(codes=codes, results=results)


def to_row(result: LookupResult) -> ReportRow:
    record = result.record
    if record is None:
        description = NOT_FOUND_TEXT
        start = end = NO_DATE
    else:
        description = record.description or NO_DESCRIPTION
        start = format_date_field(record.start_raw)
        end = format_date_field(record.end_raw)
    return ReportRow(
        code=pretty_format(result.code),
        description=description,
        is_valid=result.is_valid,
        status=VALID_TEXT if result.is_valid else INVALID_TEXT,
        start=start,
        end=end,
    )


def to_rows(report: Report) -> List[ReportRow]:
    return [to_row(r) for r in report.results]
