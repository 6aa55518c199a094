"""Structural classification of stored page documents.

None of the three generations is guaranteed to carry a trustworthy version
tag, and the legacy format has none at all, so classification sniffs shape.
Checks run in priority order and short-circuit:

1. V3: a ``3.x`` version tag, a top-level ``designTokens`` or ``meta`` field,
   or a first section whose styles are keyed by breakpoint names.
2. V2: version ``2``, a first section with a ``rows`` list, or a theme
   exposing both ``colors`` and ``typography``.
3. Anything else resolves to ``AMBIGUOUS_INPUT_POLICY``.

V3 runs first because a V3 document also satisfies the looser V2 checks.
"""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel

from .models.common import BREAKPOINTS, DocumentVersion
from .models.legacy import LegacyPageModel
from .models.v2 import PageModelV2
from .models.v3 import PageModelV3

AMBIGUOUS_INPUT_POLICY = DocumentVersion.legacy


def classify(doc: Any) -> DocumentVersion:
    if isinstance(doc, PageModelV3):
        return DocumentVersion.v3
    if isinstance(doc, PageModelV2):
        return DocumentVersion.v2
    if isinstance(doc, LegacyPageModel):
        return DocumentVersion.legacy
    if isinstance(doc, BaseModel):
        doc = doc.model_dump(by_alias=True)
    if not isinstance(doc, Mapping):
        return AMBIGUOUS_INPUT_POLICY
    if _has_v3_signal(doc):
        return DocumentVersion.v3
    if _has_v2_signal(doc):
        return DocumentVersion.v2
    return AMBIGUOUS_INPUT_POLICY


def is_page_model_v3(doc: Any) -> bool:
    return classify(doc) is DocumentVersion.v3


def is_page_model_v2(doc: Any) -> bool:
    return classify(doc) is DocumentVersion.v2


def is_legacy_page_model(doc: Any) -> bool:
    return classify(doc) is DocumentVersion.legacy


def _has_v3_signal(doc: Mapping[str, Any]) -> bool:
    if _is_v3_tag(doc.get("version")):
        return True
    if "designTokens" in doc or "meta" in doc:
        return True
    styles = _first_section(doc).get("styles")
    return isinstance(styles, Mapping) and bool(styles) and all(key in BREAKPOINTS for key in styles)


def _has_v2_signal(doc: Mapping[str, Any]) -> bool:
    version = doc.get("version")
    if version == 2 and not isinstance(version, bool):
        return True
    if isinstance(_first_section(doc).get("rows"), list):
        return True
    theme = doc.get("theme")
    return isinstance(theme, Mapping) and "colors" in theme and "typography" in theme


def _is_v3_tag(version: Any) -> bool:
    if isinstance(version, bool):
        return False
    if isinstance(version, (int, float)):
        return 3 <= version < 4
    if isinstance(version, str):
        return version == "3" or version.startswith("3.")
    return False


def _first_section(doc: Mapping[str, Any]) -> Mapping[str, Any]:
    sections = doc.get("sections")
    if isinstance(sections, (list, tuple)) and sections and isinstance(sections[0], Mapping):
        return sections[0]
    return {}


__all__ = [
    "AMBIGUOUS_INPUT_POLICY",
    "classify",
    "is_legacy_page_model",
    "is_page_model_v2",
    "is_page_model_v3",
]
