import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data" / "page_models"


def _load(name: str) -> dict:
    return json.loads((DATA_DIR / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture
def sample_v2() -> dict:
    return _load("sample_v2")


@pytest.fixture
def legacy_landing() -> dict:
    return _load("legacy_landing")


@pytest.fixture
def responsive_v3() -> dict:
    return _load("responsive_v3")


@pytest.fixture
def with_elements(sample_v2):
    """Swap the single column's elements of the sample V2 document."""

    def build(*elements: dict) -> dict:
        sample_v2["sections"][0]["rows"][0]["columns"][0]["elements"] = list(elements)
        return sample_v2

    return build
