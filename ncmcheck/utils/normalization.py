from __future__ import annotations
import re
from typing import Any
from .regexes import NCM_CODE_RE, NON_DIGIT_RE

CODE_PAT = re.compile(NCM_CODE_RE)
NON_DIGIT_PAT = re.compile(NON_DIGIT_RE)


def normalize_code(candidate: Any) -> str:
    """Keep only the digits of ``candidate``, in order.

    No length check happens here: callers decide what a non 8-digit result
    means. ``None`` normalizes to an empty string.
    """
    if candidate is None:
        return ""
    return NON_DIGIT_PAT.sub("", str(candidate))


def pretty_format(code: str) -> str:
    """Render an 8-digit code as ``NNNN.NN.NN``; anything else is returned as is."""
    d = normalize_code(code)
    if len(d) != 8:
        return code
    return f"{d[:4]}.{d[4:6]}.{d[6:8]}"


def extract_codes(text: str) -> list[str]:
    """Find NCM-shaped codes in free text.

    Codes are normalized and deduplicated, keeping the order in which each
    one first appears. Codes are not checked against any registry here.
    """
    seen: set[str] = set()
    out: list[str] = []
    for m in re.finditer(CODE_PAT, text or ""):
        code = normalize_code(m.group(0))
        if not code or code in seen:
            continue
        seen.add(code)
        out.append(code)
    return out
