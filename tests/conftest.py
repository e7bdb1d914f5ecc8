from pathlib import Path

import pytest

SECTIONS = ("Definition", "Rationale", "Violation Example", "Fixed Example")
TITLES = {
    "SRP": "Single Responsibility Principle",
    "OCP": "Open/Closed Principle",
    "LSP": "Liskov Substitution Principle",
    "ISP": "Interface Segregation Principle",
    "DIP": "Dependency Inversion Principle",
}


def doc_text(code, sections=SECTIONS, date="2021-03-01", front_matter=True):
    lines = []
    if front_matter:
        lines += ["---", f"id: {code}", f"title: {TITLES.get(code, code)}", f"date: {date}", "---"]
    lines += [f"# {TITLES.get(code, code)}", ""]
    for section in sections:
        lines += [
            f"## {section}",
            "",
            "Some prose about the principle.",
            "",
            "```python",
            "# a comment, not a heading",
            "x = 1",
            "```",
            "",
        ]
    return "\n".join(lines)


@pytest.fixture
def make_doc(tmp_path):
    docs = tmp_path / "docs"
    docs.mkdir()

    def _make(name, code=None, **kwargs) -> Path:
        p = docs / name
        p.write_text(doc_text(code or Path(name).stem.upper(), **kwargs), encoding="utf-8")
        return p

    return _make


@pytest.fixture
def solid_dir(make_doc):
    # files load alphabetically (dip, isp, lsp, ...), not in canonical order
    paths = [make_doc(f"{code.lower()}.md", code) for code in TITLES]
    return paths[0].parent
