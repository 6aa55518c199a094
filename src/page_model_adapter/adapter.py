"""Normalization entry points for stored page documents.

Every function here is total: any input, including ``None`` and arbitrary
non-document values, produces a valid document of the requested
generation. Data that cannot survive a conversion is logged, never raised.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from .defaults import (
    DEFAULT_SEO_DESCRIPTION,
    DEFAULT_SEO_TITLE,
    IMPLICIT_DOWNGRADE_WARNING,
    LEGACY_DEFAULT_BACKGROUND,
    LEGACY_DEFAULT_TEXT_ALIGN,
    LEGACY_THEME_NAME,
)
from .detector import classify
from .legacy_upgrader import upgrade_legacy_model
from .models.common import DocumentVersion, ElementKind, salvage_model
from .models.legacy import LegacyPageModel, LegacySection, LegacySeo, LegacyStyle
from .models.v2 import BlockElement, BlockSection, PageModelV2, SeoMeta
from .models.v3 import PageMeta, PageModelV3
from .structure import section_to_v2, section_to_v3
from .theme_tokens import theme_to_tokens, tokens_to_theme

logger = logging.getLogger(__name__)


def create_empty_v2() -> PageModelV2:
    return PageModelV2()


def create_empty_v3() -> PageModelV3:
    return convert_v2_to_v3(create_empty_v2())


def create_empty_legacy() -> LegacyPageModel:
    return LegacyPageModel(
        seo=LegacySeo(title=DEFAULT_SEO_TITLE, description=DEFAULT_SEO_DESCRIPTION),
        style=LegacyStyle(theme=LEGACY_THEME_NAME),
        sections=[],
    )


def ensure_v2(doc: Any, *, allow_downgrade: bool = False) -> PageModelV2:
    """Return ``doc`` as a V2 document.

    V3 input is only downgraded when ``allow_downgrade`` is set; otherwise
    an empty V2 document is returned whose warnings point at
    ``convert_v3_to_v2``.
    """
    if doc is None:
        return create_empty_v2()
    if isinstance(doc, PageModelV2):
        return doc.model_copy(deep=True)

    version = classify(doc)
    if version is DocumentVersion.v2:
        return salvage_model(PageModelV2, doc)
    if version is DocumentVersion.v3:
        if allow_downgrade:
            return convert_v3_to_v2(doc)
        logger.warning("Refusing to downgrade a V3 page model implicitly; returning an empty V2 model")
        empty = create_empty_v2()
        empty.conversion_warnings = [IMPLICIT_DOWNGRADE_WARNING]
        return empty
    if _is_document_like(doc):
        return upgrade_legacy_model(doc)

    logger.warning(f"Unknown page model format ({type(doc).__name__}); creating an empty V2 model")
    return create_empty_v2()


def ensure_v3(doc: Any) -> PageModelV3:
    """Return ``doc`` as a V3 document, upgrading older generations."""
    if doc is None:
        return create_empty_v3()
    if isinstance(doc, PageModelV3):
        return doc.model_copy(deep=True)

    version = classify(doc)
    if version is DocumentVersion.v3:
        return salvage_model(PageModelV3, doc)
    if version is DocumentVersion.v2:
        return convert_v2_to_v3(doc)
    if _is_document_like(doc):
        return convert_v2_to_v3(upgrade_legacy_model(doc))

    logger.warning(f"Unknown page model format ({type(doc).__name__}); creating an empty V3 model")
    return create_empty_v3()


def convert_v2_to_v3(doc: PageModelV2 | Mapping[str, Any]) -> PageModelV3:
    v2 = salvage_model(PageModelV2, doc)
    return PageModelV3(
        layout=v2.layout,
        sections=[section_to_v3(section) for section in v2.sections],
        design_tokens=theme_to_tokens(v2.theme),
        meta=PageMeta(
            title=v2.seo.title,
            description=v2.seo.description,
            keywords=list(v2.seo.keywords),
            og_image=v2.seo.og_image,
        ),
        settings=v2.settings.model_copy(deep=True),
        converted_from_legacy=v2.converted_from_legacy,
        conversion_warnings=list(v2.conversion_warnings),
    )


def convert_v3_to_v2(doc: PageModelV3 | Mapping[str, Any]) -> PageModelV2:
    v3 = salvage_model(PageModelV3, doc)
    return PageModelV2(
        layout=v3.layout,
        sections=[section_to_v2(section) for section in v3.sections],
        theme=tokens_to_theme(v3.design_tokens),
        seo=SeoMeta(
            title=v3.meta.title,
            description=v3.meta.description,
            keywords=list(v3.meta.keywords),
            og_image=v3.meta.og_image,
        ),
        settings=v3.settings.model_copy(deep=True),
        converted_from_legacy=v3.converted_from_legacy,
        conversion_warnings=list(v3.conversion_warnings),
    )


def downgrade_to_legacy(doc: PageModelV2 | Mapping[str, Any]) -> LegacyPageModel:
    """Reduce a V2 document to the legacy title/subtitle/CTA triad.

    Only the first column of the first row of each section is read. Anything
    else, including metadata preserved by an earlier upgrade, is lost.
    """
    v2 = salvage_model(PageModelV2, doc)
    logger.warning(
        "Downgrading V2 page model to legacy format; layout, styles and extra elements are lost",
        extra={"sections": len(v2.sections)},
    )
    return LegacyPageModel(
        seo=LegacySeo(title=v2.seo.title, description=v2.seo.description),
        style=LegacyStyle(
            theme=LEGACY_THEME_NAME,
            primary_color=v2.theme.colors.primary,
            secondary_color=v2.theme.colors.secondary,
            font_family=v2.theme.typography.body_font,
        ),
        layout=v2.layout,
        sections=[_legacy_section(section) for section in v2.sections],
    )


def _legacy_section(section: BlockSection) -> LegacySection:
    elements: list[BlockElement] = []
    if section.rows and section.rows[0].columns:
        elements = section.rows[0].columns[0].elements

    heading = _first_of(elements, ElementKind.heading)
    text = _first_of(elements, ElementKind.text)
    button = _first_of(elements, ElementKind.button)
    return LegacySection(
        id=section.id,
        type=section.type.value,
        config={
            "textAlign": section.settings.get("textAlign") or LEGACY_DEFAULT_TEXT_ALIGN,
            "backgroundColor": section.styles.get("backgroundColor") or LEGACY_DEFAULT_BACKGROUND,
        },
        content={
            "title": (heading.content.get("text") if heading else None) or section.name,
            "subtitle": (text.content.get("text") if text else None) or "",
            "ctaLabel": (button.content.get("label") if button else None) or "",
        },
    )


def _first_of(elements: list[BlockElement], kind: ElementKind) -> BlockElement | None:
    return next((element for element in elements if element.type is kind), None)


def _is_document_like(doc: Any) -> bool:
    return isinstance(doc, (Mapping, LegacyPageModel))


__all__ = [
    "convert_v2_to_v3",
    "convert_v3_to_v2",
    "create_empty_legacy",
    "create_empty_v2",
    "create_empty_v3",
    "downgrade_to_legacy",
    "ensure_v2",
    "ensure_v3",
]
