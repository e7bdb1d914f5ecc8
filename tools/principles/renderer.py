"""Render the catalog index in canonical SOLID order."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from tools.principles.loader import PRINCIPLES, PrincipleDocument
from tools.principles.validator import ValidationResult


@dataclass(frozen=True)
class CatalogIndex:
    entries: Tuple[Tuple[str, str], ...]

    def __len__(self) -> int:
        return len(self.entries)

    def identifiers(self) -> List[str]:
        return [identifier for identifier, _ in self.entries]


def ordered(documents: Iterable[PrincipleDocument]) -> List[PrincipleDocument]:
    return sorted(documents, key=lambda d: PRINCIPLES.index(d.identifier))


def build_index(documents: Iterable[PrincipleDocument]) -> CatalogIndex:
    return CatalogIndex(entries=tuple((d.identifier, d.title) for d in ordered(documents)))


def _link(doc: PrincipleDocument, base: Optional[Path]) -> str:
    if base is None:
        return doc.path.name
    return Path(os.path.relpath(doc.path, base)).as_posix()


def status_text(result: Optional[ValidationResult]) -> str:
    if result is None:
        return "UNCHECKED"
    if result.passed:
        return "PASS"
    return f"FAIL (missing: {', '.join(result.missing)})"


def render_markdown(
    documents: Iterable[PrincipleDocument],
    results: Mapping[str, ValidationResult],
    base: Optional[Path] = None,
) -> str:
    docs = ordered(documents)
    lines = [
        "# SOLID Principles",
        "",
        "| Principle | Title | Status |",
        "| --- | --- | --- |",
    ]
    for doc in docs:
        title = doc.title.replace("|", "\\|")
        link = f"[{doc.identifier}]({_link(doc, base)})"
        lines.append(f"| {link} | {title} | {status_text(results.get(doc.identifier))} |")
    covered = {d.identifier for d in docs}
    absent = [p for p in PRINCIPLES if p not in covered]
    if absent:
        lines.append("")
        lines.append(f"Not covered: {', '.join(absent)}")
    return "\n".join(lines) + "\n"


def render_json(
    documents: Iterable[PrincipleDocument],
    results: Mapping[str, ValidationResult],
    base: Optional[Path] = None,
) -> str:
    items: List[Dict[str, object]] = []
    for doc in ordered(documents):
        result = results.get(doc.identifier)
        items.append({
            "path": _link(doc, base),
            "id": doc.identifier,
            "title": doc.title,
            "date": doc.created.isoformat() if doc.created else None,
            "passed": result.passed if result else None,
            "missing": list(result.missing) if result else [],
            "code_blocks": doc.code_blocks,
        })
    return json.dumps(items, ensure_ascii=False, indent=2) + "\n"


def write_index(text: str, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
