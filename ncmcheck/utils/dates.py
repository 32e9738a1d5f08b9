from __future__ import annotations
import re
from datetime import date, datetime
from typing import Any, Optional
from .regexes import BR_DATE_RE

BR_DATE_PAT = re.compile(BR_DATE_RE)


def parse_date(value: Any) -> Optional[date]:
    """Parse a registry date field into a :class:`date`.

    Accepts ``date``/``datetime`` objects, ISO strings (``2022-04-01`` or a
    full ISO timestamp) and the day-first ``01/04/2022`` form used by the
    official NCM exports. Returns ``None`` for anything that cannot be read,
    so a bad value behaves like a missing one.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not s:
        return None
    m = BR_DATE_PAT.match(s)
    if m:
        day, month, year = (int(g) for g in m.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        # "Z" suffix is not accepted by fromisoformat on older interpreters
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def format_date_field(value: Any) -> str:
    if value is None or value == "":
        return "-"
    d = parse_date(value)
    if d is None:
        return str(value)
    return d.isoformat()


def format_br_date(d: date) -> str:
    return d.strftime("%d/%m/%Y")
