#!/usr/bin/env python3
"""Validate SOLID document front matter against the JSON schema and check required sections."""
import argparse
import datetime as dt
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import Draft202012Validator

from tools.principles.front_matter import read_front_matter
from tools.principles.loader import parse_document
from tools.principles.validator import validate

ROOT = Path(__file__).resolve().parents[1]
SCHEMA_PATH = ROOT/"schemas"/"principle.schema.json"


def load_schema(path: Path = SCHEMA_PATH) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def _jsonable(fm: Dict[str, Any]) -> Dict[str, Any]:
    # yaml.safe_load turns ISO dates into date objects
    return {k: v.isoformat() if isinstance(v, dt.date) else v for k, v in fm.items()}


def check_file(md_path: Path, val: Draft202012Validator) -> List[str]:
    try:
        fm, _ = read_front_matter(md_path)
    except OSError as e:
        return [f"unreadable: {type(e).__name__}: {e}"]
    except ValueError as e:
        return [str(e)]
    if not fm:
        return ["front matter missing"]
    problems = [e.message for e in sorted(val.iter_errors(_jsonable(fm)), key=lambda e: list(e.path))]
    doc, reason = parse_document(md_path)
    if doc is None:
        problems.append(f"not loadable: {reason}")
    else:
        problems.extend(f"missing section: {s}" for s in validate(doc).missing)
    return problems


def check_dir(base: Path, schema: Dict[str, Any]) -> int:
    val = Draft202012Validator(schema)
    n_fail = 0
    files = sorted(base.glob("*.md"))
    for p in files:
        problems = check_file(p, val)
        if problems:
            n_fail += 1
            print(f"[FAIL] {p}")
            for msg in problems:
                print("  -", msg)
        else:
            print(f"[OK]   {p}")
    print(f"checked={len(files)} failed={n_fail}")
    return n_fail


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--docs", type=Path, default=ROOT/"docs"/"solid")
    ap.add_argument("--schema", type=Path, default=SCHEMA_PATH)
    args = ap.parse_args(argv)
    if not args.docs.is_dir():
        print(f"[ERR] Directory not found: {args.docs}", file=sys.stderr)
        return 2
    try:
        schema = load_schema(args.schema)
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 2
    return 1 if check_dir(args.docs, schema) else 0


if __name__ == "__main__":
    raise SystemExit(main())
