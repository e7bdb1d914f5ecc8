from pathlib import Path

import pytest

from tools.principles.loader import PrincipleDocument, load_documents
from tools.principles.validator import (
    REQUIRED_SECTIONS,
    ValidationWarning,
    validate,
    validate_all,
)


def doc_with(*headings, identifier="SRP"):
    return PrincipleDocument(
        identifier=identifier,
        title="Single Responsibility Principle",
        created=None,
        body="",
        headings=tuple(headings),
        path=Path("srp.md"),
    )


def test_all_sections_present_passes():
    result = validate(doc_with("Definition", "Rationale", "Violation Example", "Fixed Example"))
    assert result.passed is True
    assert result.missing == ()
    assert result.warning() is None


def test_missing_fixed_example_fails():
    result = validate(doc_with("Definition", "Rationale", "Violation Example"))
    assert result.passed is False
    assert "FixedExample" in result.missing
    assert result.missing == ("FixedExample",)


def test_headings_match_case_insensitively():
    result = validate(doc_with(
        "DEFINITION",
        "rationale",
        "violation-example: a God class",
        "Fixed example - splitting the class",
    ))
    assert result.passed


def test_heading_that_only_starts_with_a_section_name_does_not_count():
    result = validate(doc_with(
        "Definitions are overrated",
        "Rationale",
        "Violation Examples",
        "Fixed Examples are missing here",
    ))
    assert result.passed is False
    assert result.missing == ("Definition", "ViolationExample", "FixedExample")


def test_missing_sections_keep_required_order():
    result = validate(doc_with("Rationale"))
    assert result.missing == ("Definition", "ViolationExample", "FixedExample")


def test_heading_inside_code_fence_does_not_count(make_doc):
    p = make_doc("isp.md", "ISP", sections=("Definition", "Rationale", "Violation Example"))
    with p.open("a", encoding="utf-8") as f:
        f.write("```markdown\n## Fixed Example\n```\n")
    (doc,) = load_documents(p.parent)
    assert validate(doc).missing == ("FixedExample",)


def test_aliases_satisfy_a_section():
    doc = doc_with("Definition", "Rationale", "Bad example", "Solution")
    aliases = {"ViolationExample": ["Bad Example"], "FixedExample": ["Solution"]}
    assert validate(doc).passed is False
    assert validate(doc, aliases=aliases).passed is True


def test_custom_required_sections():
    doc = doc_with("Definition", "Summary")
    result = validate(doc, required=["Definition", "Summary", "Exercises"])
    assert result.missing == ("Exercises",)


def test_warning_is_non_fatal_user_warning():
    result = validate(doc_with("Definition", identifier="ISP"))
    w = result.warning()
    assert isinstance(w, ValidationWarning)
    assert isinstance(w, UserWarning)
    assert w.identifier == "ISP"
    assert w.missing == ("Rationale", "ViolationExample", "FixedExample")
    assert "ISP" in str(w)


def test_validate_all_keys_by_identifier(solid_dir):
    results = validate_all(load_documents(solid_dir))
    assert len(results) == 5
    assert all(r.passed for r in results.values())
    assert results["DIP"].identifier == "DIP"


@pytest.mark.parametrize("section", REQUIRED_SECTIONS)
def test_each_required_section_is_reported(section):
    present = {
        "Definition": "Definition",
        "Rationale": "Rationale",
        "ViolationExample": "Violation Example",
        "FixedExample": "Fixed Example",
    }
    headings = [h for name, h in present.items() if name != section]
    assert validate(doc_with(*headings)).missing == (section,)
