from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


BASIC_PAGE = """---
import Layout from '@layouts/Layout.astro';
---

<Layout>
  <h1>Home</h1>
</Layout>
"""


@pytest.fixture()
def basic_page() -> str:
    """A page with a frontmatter import and a ``Layout`` wrapped body."""

    return BASIC_PAGE


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    root.mkdir()
    return root
