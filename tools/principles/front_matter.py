import re
from pathlib import Path
from typing import Any, Dict, Iterator, Tuple

import yaml


# --- Front-matter helpers ---

FM_RX = re.compile(r"^---\s*\n(.*?)\n---\s*\n?(.*)$", re.S)
HEADING_RX = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
FENCE_RX = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Return (front matter, body). Raises ValueError on a malformed block."""
    m = FM_RX.match(text)
    if not m:
        return {}, text
    head, body = m.group(1), m.group(2)
    try:
        fm = yaml.safe_load(head) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"invalid front matter: {e}") from e
    if not isinstance(fm, dict):
        raise ValueError("front matter is not a mapping")
    return fm, body


def read_front_matter(p: Path) -> Tuple[Dict[str, Any], str]:
    return split_front_matter(p.read_text(encoding="utf-8", errors="ignore"))


# --- Body helpers ---

def _walk_fences(body: str) -> Iterator[Tuple[str, str]]:
    """Yield (line, kind), kind being "text", "open", "code" or "close".

    A fence closes only on a bare run of its own character at least as long
    as the opening run.
    """
    fence = None
    for line in body.splitlines():
        m = FENCE_RX.match(line)
        if fence is None:
            if m:
                fence = m.group(1)
                yield line, "open"
            else:
                yield line, "text"
        elif m and m.group(1)[0] == fence[0] and len(m.group(1)) >= len(fence) and not m.group(2).strip():
            fence = None
            yield line, "close"
        else:
            yield line, "code"


def iter_headings(body: str) -> Iterator[Tuple[int, str]]:
    """Yield (level, text) for every ATX heading outside fenced code."""
    for line, kind in _walk_fences(body):
        if kind != "text":
            continue
        m = HEADING_RX.match(line)
        if m:
            yield len(m.group(1)), m.group(2).strip()


def count_code_blocks(body: str) -> int:
    return sum(1 for _, kind in _walk_fences(body) if kind == "open")
