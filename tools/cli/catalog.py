#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from tools.principles.config import load_config
from tools.principles.loader import LoadError, PrincipleDocument, load_documents
from tools.principles.renderer import ordered, render_json, render_markdown, write_index
from tools.principles.validator import ValidationResult, validate_all


def list_principles(docs: List[PrincipleDocument], filter_text: Optional[str] = None) -> List[PrincipleDocument]:
    out = ordered(docs)
    if filter_text:
        ft = filter_text.lower()
        out = [d for d in out if ft in d.identifier.lower() or ft in d.title.lower()]
    return out


def check_catalog(
    docs: List[PrincipleDocument],
    results: Dict[str, ValidationResult],
    skipped: List[Tuple[Path, str]],
) -> int:
    for p, reason in skipped:
        print(f"[WARN] {p}: skipped ({reason})")
    n_fail = 0
    for doc in ordered(docs):
        result = results[doc.identifier]
        if result.passed:
            print(f"[OK]   {doc.identifier} {doc.path}")
            continue
        n_fail += 1
        print(f"[FAIL] {doc.identifier} {doc.path}")
        for section in result.missing:
            print(f"  - missing section: {section}")
    print(f"documents={len(docs)} passed={len(docs) - n_fail} failed={n_fail} skipped={len(skipped)}")
    return 1 if n_fail else 0


def render_catalog(
    docs: List[PrincipleDocument],
    results: Dict[str, ValidationResult],
    fmt: str,
    output: Optional[Path],
) -> int:
    base = output.parent if output else None
    render = render_json if fmt == "json" else render_markdown
    text = render(docs, results, base)
    for result in results.values():
        w = result.warning()
        if w:
            print(f"[WARN] {w}", file=sys.stderr)
    if output is None:
        sys.stdout.write(text)
        return 0
    write_index(text, output)
    print(f"indexed={len(docs)} -> {output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="SOLID principles catalog: load, check and index the principle documents")
    ap.add_argument("--docs", type=Path, help="Directory of principle documents (default: docs_dir from config)")
    ap.add_argument("--config", type=Path, help="YAML config (default: catalog.yml when present)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp_list = sub.add_parser("list", help="List loaded principles in canonical order")
    sp_list.add_argument("--filter", "-f", help="Filter (substring of id or title)")

    sub.add_parser("check", help="Report missing sections per document")

    sp_render = sub.add_parser("render", help="Render the catalog index")
    sp_render.add_argument("--format", choices=("markdown", "json"), default="markdown")
    sp_render.add_argument("--output", "-o", type=Path, help="Write the index here instead of stdout")

    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 2

    docs_dir = args.docs or Path(cfg["docs_dir"])
    skipped: List[Tuple[Path, str]] = []
    try:
        docs = load_documents(docs_dir, skipped)
    except LoadError as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 2

    if args.cmd == "list":
        found = list_principles(docs, args.filter)
        if not found:
            print("No principle documents found.")
            return 0
        for d in found:
            print(f"{d.identifier}\t{d.title}")  # tab separated for pipes
        return 0

    results = validate_all(docs, cfg["required_sections"], cfg["aliases"])
    if args.cmd == "check":
        return check_catalog(docs, results, skipped)
    output = args.output or (Path(cfg["output"]) if cfg.get("output") else None)
    return render_catalog(docs, results, args.format, output)


if __name__ == "__main__":
    raise SystemExit(main())
