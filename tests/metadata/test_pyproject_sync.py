from __future__ import annotations

from pathlib import Path
import tomllib

import construct


REPO_ROOT = Path(__file__).resolve().parents[2]
README_PATH = REPO_ROOT / "README.md"
PYPROJECT_PATH = REPO_ROOT / "pyproject.toml"
STUBS_PATH = REPO_ROOT / "src" / "construct" / "stubs"


def load_pyproject() -> dict:
    with PYPROJECT_PATH.open("rb") as handle:
        return tomllib.load(handle)


def test_readme_and_pyproject_descriptions_are_in_sync() -> None:
    pyproject = load_pyproject()
    description = pyproject["project"]["description"]
    readme_text = README_PATH.read_text(encoding="utf-8")

    assert description in readme_text, "README must include the project description from pyproject.toml"


def test_package_version_matches_pyproject() -> None:
    assert load_pyproject()["project"]["version"] == construct.__version__


def test_every_referenced_stub_is_shipped() -> None:
    sources = {step.stub.source for step in construct.SCAFFOLD_STEPS if step.stub is not None}
    shipped = {path.name for path in STUBS_PATH.glob("*.txt")}

    assert sources == shipped
