from __future__ import annotations
from datetime import date
from typing import Any, List, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..utils.dates import parse_date
from ..utils.fields import DESCRIPTION_KEYS, START_KEYS, END_KEYS, resolve_field
from ..utils.normalization import pretty_format


class ClassificationRecord(BaseModel):
    """One entry of the NCM registry.

    Start/end values are kept exactly as they appear in the dataset so a
    date that cannot be parsed can still be shown to the user; the parsed
    views are exposed as :attr:`effective_from` / :attr:`effective_to`.
    """
    model_config = ConfigDict(frozen=True)

    code: str
    description: Optional[str] = None
    start_raw: Any | None = None
    end_raw: Any | None = None

    @classmethod
    def from_raw(cls, item: Mapping[str, Any], code: str) -> "ClassificationRecord":
        desc = resolve_field(item, DESCRIPTION_KEYS)
        return cls(
            code=code,
            description=str(desc) if desc is not None else None,
            start_raw=resolve_field(item, START_KEYS),
            end_raw=resolve_field(item, END_KEYS),
        )

    @property
    def effective_from(self) -> Optional[date]:
        return parse_date(self.start_raw)

    @property
    def effective_to(self) -> Optional[date]:
        return parse_date(self.end_raw)


class LookupResult(BaseModel):
    """Result of looking up one extracted code in the registry."""
    code: str
    record: Optional[ClassificationRecord] = None
    is_valid: bool = False

    @property
    def found(self) -> bool:
        return self.record is not None


class ReportRow(BaseModel):
    """A :class:`LookupResult` rendered to display strings."""
    code: str
    description: str
    is_valid: bool
    status: str
    start: str
    end: str


class Report(BaseModel):
    """Ordered lookup results for one piece of text.

    ``nothing_found`` is true only when the text held no code-shaped
    substring at all, which callers report differently from a report whose
    rows are all invalid.
    """
    codes: List[str] = Field(default_factory=list)
    results: List[LookupResult] = Field(default_factory=list)

    @property
    def nothing_found(self) -> bool:
        return not self.codes

    def found_list(self) -> str:
        return ", ".join(pretty_format(c) for c in self.codes)

    def __len__(self) -> int:
        return len(self.codes)
