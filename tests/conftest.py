from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.shared.fakes import FakePage, SequencedFetcher

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def three_page_fetcher() -> SequencedFetcher:
    return SequencedFetcher(
        {
            "page-1": FakePage(count=2, next_url="page-2", name="p1"),
            "page-2": FakePage(count=2, next_url="page-3", name="p2"),
            "page-3": FakePage(count=1, next_url="", name="p3"),
        }
    )
