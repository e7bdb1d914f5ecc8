"""Load SOLID principle documents from a directory of markdown files."""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from tools.principles.front_matter import count_code_blocks, iter_headings, read_front_matter

PRINCIPLES = ("SRP", "OCP", "LSP", "ISP", "DIP")
PRINCIPLE_NAMES = {
    "SRP": "Single Responsibility Principle",
    "OCP": "Open/Closed Principle",
    "LSP": "Liskov Substitution Principle",
    "ISP": "Interface Segregation Principle",
    "DIP": "Dependency Inversion Principle",
}

RE_NON_ALNUM = re.compile(r"[^0-9a-z]+")


class LoadError(Exception):
    """The document directory cannot be read."""


@dataclass(frozen=True)
class PrincipleDocument:
    identifier: str
    title: str
    created: Optional[dt.date]
    body: str
    headings: Tuple[str, ...]
    path: Path
    code_blocks: int = 0


def slugify(value: str) -> str:
    return RE_NON_ALNUM.sub("", value.lower())


def normalise_identifier(value: object) -> Optional[str]:
    """Map 'srp', '02-ocp' or 'liskov-substitution-principle' to a code."""
    slug = slugify(str(value)).lstrip("0123456789")
    if not slug:
        return None
    for code, name in PRINCIPLE_NAMES.items():
        full = slugify(name)
        if slug in (code.lower(), full, full[: -len("principle")]):
            return code
    return None


def parse_date(value: object) -> Optional[dt.date]:
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        return dt.date.fromisoformat(value.strip())
    raise ValueError(f"unsupported date value {value!r}")


def parse_document(path: Path) -> Tuple[Optional[PrincipleDocument], str]:
    """Return (document, "") or (None, skip reason)."""
    try:
        fm, body = read_front_matter(path)
    except OSError as e:
        return None, f"unreadable: {type(e).__name__}: {e}"
    except ValueError as e:
        return None, str(e)

    raw_id = fm.get("id") or fm.get("principle")
    identifier = normalise_identifier(raw_id if raw_id else path.stem)
    if identifier is None:
        return None, f"not a SOLID principle: {raw_id or path.stem}"

    levels_and_text = list(iter_headings(body))
    if not levels_and_text:
        return None, "no markdown headings"

    try:
        created = parse_date(fm.get("date"))
    except ValueError:
        return None, f"invalid date: {fm.get('date')!r}"

    title = fm.get("title")
    if not isinstance(title, str) or not title.strip():
        h1 = [text for level, text in levels_and_text if level == 1]
        title = h1[0] if h1 else PRINCIPLE_NAMES[identifier]

    doc = PrincipleDocument(
        identifier=identifier,
        title=title.strip(),
        created=created,
        body=body,
        headings=tuple(text for _, text in levels_and_text),
        path=path,
        code_blocks=count_code_blocks(body),
    )
    return doc, ""


def load_documents(
    directory: Path,
    skipped: Optional[List[Tuple[Path, str]]] = None,
) -> List[PrincipleDocument]:
    directory = Path(directory)
    if not directory.exists():
        raise LoadError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise LoadError(f"Not a directory: {directory}")
    try:
        candidates = sorted(p for p in directory.iterdir() if p.suffix.lower() == ".md")
    except OSError as e:
        raise LoadError(f"Cannot read {directory}: {e}") from e

    docs: List[PrincipleDocument] = []
    seen = set()
    for p in candidates:
        if not p.is_file():
            continue
        doc, reason = parse_document(p)
        if doc is not None and doc.identifier in seen:
            doc, reason = None, f"duplicate {doc.identifier}"
        if doc is None:
            if skipped is not None:
                skipped.append((p, reason))
            continue
        seen.add(doc.identifier)
        docs.append(doc)
    return docs
