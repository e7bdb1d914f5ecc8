#!/usr/bin/env python3
"""Write index/INDEX.md and index/index.json for the SOLID documents."""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from tools.principles.loader import LoadError, load_documents
from tools.principles.renderer import render_json, render_markdown, write_index
from tools.principles.validator import validate_all

ROOT = Path(__file__).resolve().parents[1]


def build(docs_dir: Path, out: Path) -> int:
    docs = load_documents(docs_dir)
    results = validate_all(docs)
    write_index(render_markdown(docs, results, out), out/"INDEX.md")
    write_index(render_json(docs, results, out), out/"index.json")
    n_ok = sum(1 for r in results.values() if r.passed)
    print(f"indexed={len(docs)} passed={n_ok} -> {out/'INDEX.md'}, {out/'index.json'}")
    return len(docs)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--docs", type=Path, default=ROOT/"docs"/"solid")
    ap.add_argument("--out", type=Path, default=ROOT/"index")
    args = ap.parse_args(argv)
    try:
        build(args.docs, args.out)
    except LoadError as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
