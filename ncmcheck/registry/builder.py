"""
builder.py
~~~~~~~~~~

Builds the in-memory NCM registry from a raw dataset object (usually the
parsed ``ncm.json`` published by the Siscomex portal)::

    {
        "Data_Ultima_Atualizacao_NCM": "Vigente em 01/04/2025",
        "Nomenclaturas": [
            {"Codigo": "8471.30.19", "Descricao": "...",
             "Data_Inicio": "01/04/2022", "Data_Fim": "31/12/9999"},
            ...
        ]
    }

A dataset that is directly a list of records is accepted as well. The
registry is never edited in place: a new dataset means a new
:class:`Registry`, published through :class:`RegistryHolder`.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from ..errors import InvalidDatasetError
from ..models.schema import ClassificationRecord
from ..utils.dates import format_br_date, parse_date
from ..utils.fields import AS_OF_KEYS, CODE_KEYS, CONTAINER_KEYS, START_KEYS, resolve_field
from ..utils.normalization import normalize_code

logger = logging.getLogger(__name__)


class Registry:
    """Read-only snapshot mapping normalized codes to records."""

    def __init__(self, records: Dict[str, ClassificationRecord], as_of: Optional[str] = None) -> None:
        self._records = MappingProxyType(dict(records))
        self.as_of = as_of

    @property
    def records(self) -> Mapping[str, ClassificationRecord]:
        return self._records

    def get(self, code: str) -> Optional[ClassificationRecord]:
        return self._records.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def base_date_label(self) -> str:
        return f"Base NCM vigente em: {self.as_of or '—'}"


def _record_collection(raw: Any) -> Any:
    if isinstance(raw, Mapping):
        found = resolve_field(raw, CONTAINER_KEYS)
        return found if found is not None else raw
    return raw


def _derive_as_of(raw: Any, records: Dict[str, ClassificationRecord]) -> Optional[str]:
    meta = resolve_field(raw, AS_OF_KEYS)
    if meta is not None:
        return str(meta)
    latest = None
    for rec in records.values():
        d = rec.effective_from
        if d is not None and (latest is None or d > latest):
            latest = d
    return format_br_date(latest) if latest is not None else None


def build_registry(raw: Any, strict: bool = True) -> Registry:
    """Build a :class:`Registry` from a raw dataset.

    Args:
        raw: The parsed dataset: a mapping holding the record list under
            ``Nomenclaturas`` (any accepted spelling) or the list itself.
        strict: When ``True`` (the default) a dataset whose record
            collection is not a list raises :class:`InvalidDatasetError`.
            When ``False`` the problem is logged and an empty registry is
            returned instead.

    Returns:
        A new :class:`Registry`. Elements that are not mappings, or whose
        code normalizes to an empty string, are skipped. When two elements
        share a code the later one wins.
    """
    items = _record_collection(raw) if raw is not None else None
    if not isinstance(items, (list, tuple)):
        msg = f"dataset has no record list (got {type(items).__name__})"
        if strict:
            raise InvalidDatasetError(msg)
        logger.warning("%s; using an empty registry", msg)
        return Registry({})

    records: Dict[str, ClassificationRecord] = {}
    skipped = 0
    for item in items:
        if not isinstance(item, Mapping):
            skipped += 1
            continue
        code = normalize_code(resolve_field(item, CODE_KEYS))
        if not code:
            skipped += 1
            continue
        if code in records:
            logger.debug("duplicate code %s, keeping the later record", code)
        records[code] = ClassificationRecord.from_raw(item, code)

    if skipped:
        logger.debug("skipped %d records without a usable code", skipped)
    registry = Registry(records, as_of=_derive_as_of(raw, records))
    logger.info("registry built with %d codes (as of %s)", len(registry), registry.as_of)
    return registry


class RegistryHolder:
    """Publishes the current registry snapshot.

    ``replace`` builds the new registry completely before swapping the
    reference, so readers always see either the old or the new snapshot.
    If building fails the previous snapshot stays published.
    """

    def __init__(self, registry: Optional[Registry] = None) -> None:
        self._current = registry

    @property
    def current(self) -> Optional[Registry]:
        return self._current

    def replace(self, raw: Any) -> Registry:
        registry = build_registry(raw)
        self._current = registry
        return registry
