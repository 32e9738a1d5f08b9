from __future__ import annotations

"""Command line entry point for the NCM checker.

Reads free text (inline, or from .txt/.docx/.pdf files), extracts every NCM
code it mentions and reports, for each one, whether it is currently valid
according to a local ``ncm.json`` registry.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple
from tqdm import tqdm

from .config import NCM
from .errors import InvalidDatasetError
from .extraction.report import build_report, to_rows
from .io.dataset import load_dataset
from .io.docx_parser import load_docx_text
from .io.pdf_reader import load_pdf_text
from .registry.builder import Registry, build_registry
from .utils.dates import parse_date


def _read_text(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix == ".docx":
        return load_docx_text(str(path))
    if suffix == ".pdf":
        return load_pdf_text(str(path))
    return path.read_text(encoding="utf-8")


def _log_level(name: str) -> int:
    level = getattr(logging, (name or "").upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def _load_registry(dataset: str) -> Optional[Registry]:
    path = Path(dataset)
    if not path.exists():
        return None
    return build_registry(load_dataset(path))


def _print_report(label: str, text: str, registry: Optional[Registry], reference) -> None:
    print(f"== {label}")
    report = build_report(text, registry or Registry({}), reference)
    if report.nothing_found:
        print("Nenhum NCM encontrado no texto.")
        return
    print(f"NCMs encontrados: {len(report)}")
    print(report.found_list())
    if registry is None:
        print("Nenhuma base NCM carregada. Informe o ncm.json com --dataset.")
        return
    for row in to_rows(report):
        print(" | ".join([row.code, row.description, row.status, row.start, row.end]))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Check NCM codes mentioned in text against the NCM registry.")
    ap.add_argument("--text", default=None, help="text containing NCM codes")
    ap.add_argument("--file", nargs="+", default=[], help="one or more .txt, .docx or .pdf files")
    ap.add_argument("--dataset", default=NCM.dataset_path, help="path to ncm.json")
    ap.add_argument(
        "--reference-date",
        default=NCM.reference_date or None,
        help="date validity is evaluated at (YYYY-MM-DD or DD/MM/YYYY); defaults to today",
    )
    ap.add_argument("--debug", action="store_true", help="enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else _log_level(NCM.log_level))

    if not args.text and not args.file:
        ap.error("give --text or --file")
    for f in args.file:
        if not Path(f).exists():
            ap.error(f"Not found: {f}")

    reference = None
    if args.reference_date:
        reference = parse_date(args.reference_date)
        if reference is None:
            ap.error(f"invalid --reference-date: {args.reference_date}")

    try:
        registry = _load_registry(args.dataset)
    except (InvalidDatasetError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        print(f"Arquivo inválido: {exc}", file=sys.stderr)
        return 2
    if registry is not None:
        print(registry.base_date_label())

    inputs: List[Tuple[str, str]] = []
    if args.text:
        inputs.append(("texto", args.text))
    for f in tqdm(args.file, disable=len(args.file) < 2):
        inputs.append((f, _read_text(Path(f))))

    for label, text in inputs:
        _print_report(label, text, registry, reference)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
