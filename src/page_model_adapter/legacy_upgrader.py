from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, Sequence

from .defaults import (
    BENEFIT_MARKER,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_FONT_FAMILY,
    DEFAULT_LAYOUT,
    DEFAULT_SECTION_NAME,
    DEFAULT_SEO_DESCRIPTION,
    DEFAULT_SEO_TITLE,
    LEGACY_CONFIG_FIELDS,
    LEGACY_CONTENT_FIELDS,
    LEGACY_ELEMENT_STYLES,
    LEGACY_SECTION_STYLES,
    LEGACY_UPGRADE_WARNINGS,
    PLACEHOLDER_TEXT,
)
from .ids import IdGenerator
from .models.common import ElementKind, SectionKind, salvage_model
from .models.legacy import LegacyPageModel, LegacySection
from .models.v2 import (
    BlockColumn,
    BlockElement,
    BlockRow,
    BlockSection,
    PageModelV2,
    SeoMeta,
    ThemeColors,
    ThemeTypography,
    ThemeV2,
)

logger = logging.getLogger(__name__)


class LegacyUpgrader:
    """Synthesizes a V2 document from a legacy flat document.

    Every legacy section becomes one row with one full-width column. Known
    content fields become heading, text and button elements; fields with no
    V2 equivalent are kept in a hidden metadata element so they survive.
    """

    def __init__(
        self,
        *,
        warnings: Sequence[str] = LEGACY_UPGRADE_WARNINGS,
        placeholder_text: str = PLACEHOLDER_TEXT,
        id_factory: Callable[[], IdGenerator] = IdGenerator,
    ) -> None:
        self._warnings = tuple(warnings)
        self._placeholder_text = placeholder_text
        self._id_factory = id_factory

    def upgrade(self, legacy: LegacyPageModel | Mapping[str, Any] | None) -> PageModelV2:
        model = salvage_model(LegacyPageModel, legacy if legacy is not None else {})
        ids = self._id_factory()
        sections = [
            self._build_section(section, index, ids) for index, section in enumerate(model.sections)
        ]
        if not sections:
            sections.append(self._build_section(LegacySection(), 0, ids))

        logger.info(
            f"Upgraded legacy page model to V2 with {len(sections)} section(s)",
            extra={"sections": len(sections)},
        )
        return PageModelV2(
            layout=model.layout or DEFAULT_LAYOUT,
            sections=sections,
            theme=self._build_theme(model),
            seo=SeoMeta(
                title=(model.seo.title if model.seo else None) or DEFAULT_SEO_TITLE,
                description=(model.seo.description if model.seo else None) or DEFAULT_SEO_DESCRIPTION,
            ),
            converted_from_legacy=True,
            conversion_warnings=list(self._warnings),
        )

    def _build_section(self, section: LegacySection, index: int, ids: IdGenerator) -> BlockSection:
        elements = self._build_elements(section.content, index, ids)
        if not elements:
            elements.append(self._text(self._placeholder_text, ids.next("placeholder", index)))
        metadata = self._build_metadata(section, index, ids)
        if metadata is not None:
            elements.append(metadata)

        config = section.config
        return BlockSection(
            id=section.id or ids.next("section", index),
            type=self._section_kind(section.type),
            name=section.type or DEFAULT_SECTION_NAME,
            rows=[
                BlockRow(
                    id=ids.next("row", index),
                    columns=[
                        BlockColumn(
                            id=ids.next("col", index),
                            width=DEFAULT_COLUMN_WIDTH,
                            elements=elements,
                        )
                    ],
                )
            ],
            styles={
                **LEGACY_SECTION_STYLES,
                "backgroundColor": config.get("backgroundColor") or "transparent",
            },
            settings={
                "containerWidth": "container",
                "textAlign": config.get("textAlign") or "center",
            },
        )

    def _build_elements(self, content: Mapping[str, Any], index: int, ids: IdGenerator) -> list[BlockElement]:
        elements: list[BlockElement] = []
        title = content.get("title")
        if title:
            elements.append(
                BlockElement(
                    id=ids.next("heading", index),
                    type=ElementKind.heading,
                    props={"level": 1},
                    styles=dict(LEGACY_ELEMENT_STYLES["heading"]),
                    content={"text": str(title)},
                )
            )
        subtitle = content.get("subtitle")
        if subtitle:
            elements.append(
                self._text(str(subtitle), ids.next("text", index), styles=LEGACY_ELEMENT_STYLES["subtitle"])
            )
        cta_label = content.get("ctaLabel")
        if cta_label:
            elements.append(
                BlockElement(
                    id=ids.next("button", index),
                    type=ElementKind.button,
                    props={"variant": "primary", "size": "lg"},
                    styles=dict(LEGACY_ELEMENT_STYLES["button"]),
                    content={"label": str(cta_label), "href": "#"},
                )
            )
        benefits = content.get("benefits")
        if isinstance(benefits, (list, tuple)):
            for position, benefit in enumerate(benefits):
                line = self._benefit_line(benefit)
                if line is None:
                    continue
                element = self._text(
                    line, ids.next("benefit", index, position), styles=LEGACY_ELEMENT_STYLES["benefit"]
                )
                element.props["isBenefit"] = True
                elements.append(element)
        return elements

    def _build_metadata(self, section: LegacySection, index: int, ids: IdGenerator) -> BlockElement | None:
        unknown_content = {k: v for k, v in section.content.items() if k not in LEGACY_CONTENT_FIELDS}
        unknown_config = {k: v for k, v in section.config.items() if k not in LEGACY_CONFIG_FIELDS}
        if not unknown_content and not unknown_config:
            return None
        logger.info(
            f"Preserving {len(unknown_content) + len(unknown_config)} unmapped legacy field(s) as metadata",
            extra={"section": section.id, "content_fields": sorted(unknown_content), "config_fields": sorted(unknown_config)},
        )
        payload = {"content": unknown_content, "config": unknown_config}
        return BlockElement(
            id=ids.next("metadata", index),
            type=ElementKind.custom,
            props={"hidden": True, "legacyMetadata": True},
            content={"data": json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str)},
        )

    def _build_theme(self, model: LegacyPageModel) -> ThemeV2:
        style = model.style
        if style is None:
            return ThemeV2()
        font = style.font_family or DEFAULT_FONT_FAMILY
        colors = ThemeColors()
        if style.primary_color:
            colors.primary = style.primary_color
        if style.secondary_color:
            colors.secondary = style.secondary_color
        return ThemeV2(colors=colors, typography=ThemeTypography(heading_font=font, body_font=font))

    def _text(self, text: str, element_id: str, *, styles: Mapping[str, Any] | None = None) -> BlockElement:
        return BlockElement(id=element_id, type=ElementKind.text, styles=dict(styles or {}), content={"text": text})

    def _benefit_line(self, benefit: Any) -> str | None:
        if isinstance(benefit, str):
            return f"{BENEFIT_MARKER} {benefit}" if benefit else None
        if not isinstance(benefit, Mapping) or not benefit.get("title"):
            return None
        line = f"{BENEFIT_MARKER} {benefit['title']}"
        if benefit.get("description"):
            line += f": {benefit['description']}"
        return line

    def _section_kind(self, legacy_type: str | None) -> SectionKind:
        if not legacy_type:
            return SectionKind.content
        try:
            return SectionKind(legacy_type)
        except ValueError:
            return SectionKind.custom


def upgrade_legacy_model(legacy: LegacyPageModel | Mapping[str, Any] | None) -> PageModelV2:
    return LegacyUpgrader().upgrade(legacy)


__all__ = ["LegacyUpgrader", "upgrade_legacy_model"]
