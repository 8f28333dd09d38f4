from __future__ import annotations

from pathlib import Path

import pytest

import livecurves

PACKAGE_DIR = Path(livecurves.__file__).parent
PROJECT_DIR = PACKAGE_DIR.parent


@pytest.mark.parametrize("source", sorted(PACKAGE_DIR.glob("*.py")), ids=lambda path: path.name)
def test_license_header_names_this_project(source: Path) -> None:
    text = source.read_text(encoding="utf-8")
    assert "This file is part of livecurves" in text
    assert "GNU General Public License" in text
    assert "SCAMP" not in text


def test_setup_metadata_is_our_own() -> None:
    setup_py = PROJECT_DIR / "setup.py"
    if not setup_py.exists():
        pytest.skip("not running from a source checkout")
    text = setup_py.read_text(encoding="utf-8")
    assert 'name="livecurves"' in text
    assert "Evanstein" not in text
    assert "MarcTheSpark" not in text
