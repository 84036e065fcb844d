from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def widget_names():
    """Names derived from ``acme/widget``."""

    from construct.config import NameSet

    return NameSet(
        raw="acme/widget",
        vendor_lower="acme",
        vendor_upper="Acme",
        project_lower="widget",
        project_upper="Widget",
    )
