from __future__ import annotations
from docx import Document


def load_docx_text(path: str) -> str:
    doc = Document(path)
    lines = [p.text for p in doc.paragraphs]

    # one line per table row, cells joined with " | "
    for table in doc.tables:
        for row in table.rows:
            lines.append(" | ".join(c.text.strip() for c in row.cells))

    return "\n".join(ln for ln in lines if ln.strip())
