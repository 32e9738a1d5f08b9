from __future__ import annotations
import fitz  # PyMuPDF


def load_pdf_text(pdf_path: str, pages: list[int] | None = None) -> str:
    doc = fitz.open(pdf_path)
    try:
        if pages is None:
            pages = list(range(len(doc)))
        return "\n".join(doc.load_page(pno).get_text() for pno in pages)
    finally:
        doc.close()
