"""Check principle documents for the required sections."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from tools.principles.loader import PrincipleDocument, slugify

REQUIRED_SECTIONS = ("Definition", "Rationale", "ViolationExample", "FixedExample")
# "Violation Example: a God class" names the section before the separator
RE_SUBTITLE = re.compile(r"\s*:|\s+[-–—]\s+")


class ValidationWarning(UserWarning):
    """A document is missing one or more required sections. Never fatal."""

    def __init__(self, identifier: str, missing: Sequence[str]):
        self.identifier = identifier
        self.missing = tuple(missing)
        super().__init__(f"{identifier}: missing sections {list(self.missing)}")


@dataclass(frozen=True)
class ValidationResult:
    identifier: str
    missing: Tuple[str, ...]
    passed: bool

    def warning(self) -> Optional[ValidationWarning]:
        if self.passed:
            return None
        return ValidationWarning(self.identifier, self.missing)


def _section_present(names: Iterable[str], headings: List[str]) -> bool:
    for name in names:
        key = slugify(name)
        if key and key in headings:
            return True
    return False


def validate(
    document: PrincipleDocument,
    required: Sequence[str] = REQUIRED_SECTIONS,
    aliases: Optional[Mapping[str, Sequence[str]]] = None,
) -> ValidationResult:
    headings = [slugify(RE_SUBTITLE.split(h, 1)[0]) for h in document.headings]
    missing = []
    for section in required:
        names = [section, *((aliases or {}).get(section) or [])]
        if not _section_present(names, headings):
            missing.append(section)
    return ValidationResult(
        identifier=document.identifier,
        missing=tuple(missing),
        passed=not missing,
    )


def validate_all(
    documents: Iterable[PrincipleDocument],
    required: Sequence[str] = REQUIRED_SECTIONS,
    aliases: Optional[Mapping[str, Sequence[str]]] = None,
) -> Dict[str, ValidationResult]:
    return {doc.identifier: validate(doc, required, aliases) for doc in documents}
