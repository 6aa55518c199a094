from __future__ import annotations

from typing import Annotated, Any, Literal, Optional

from pydantic import BeforeValidator, Field

from ..defaults import (
    DEFAULT_BORDER_RADIUS,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZES,
    DEFAULT_LAYOUT,
    DEFAULT_PAGE_SETTINGS,
    DEFAULT_SECTION_NAME,
    DEFAULT_SEO_DESCRIPTION,
    DEFAULT_SEO_TITLE,
    DEFAULT_SPACING,
    DEFAULT_THEME_COLORS,
)
from ..ids import new_id
from .common import (
    AdapterModel,
    ElementKind,
    ElementKindField,
    Identifier,
    OptionalText,
    Record,
    SectionKind,
    SectionKindField,
    StringList,
    Text,
    as_object_list,
    as_optional_object_list,
)


def _version_two(value: Any) -> int:
    return 2


class BlockElement(AdapterModel):
    id: Identifier = Field(default_factory=lambda: new_id("el"))
    type: ElementKindField = ElementKind.text
    props: Record = Field(default_factory=dict)
    content: Record = Field(default_factory=dict)
    styles: Record = Field(default_factory=dict)
    config: Record = Field(default_factory=dict)
    children: Annotated[Optional[list[BlockElement]], BeforeValidator(as_optional_object_list)] = None


class BlockColumn(AdapterModel):
    id: Identifier = Field(default_factory=lambda: new_id("col"))
    width: Text = DEFAULT_COLUMN_WIDTH
    elements: Annotated[list[BlockElement], BeforeValidator(as_object_list)] = Field(default_factory=list)
    styles: Record = Field(default_factory=dict)


class BlockRow(AdapterModel):
    id: Identifier = Field(default_factory=lambda: new_id("row"))
    columns: Annotated[list[BlockColumn], BeforeValidator(as_object_list)] = Field(default_factory=list)
    styles: Record = Field(default_factory=dict)


class BlockSection(AdapterModel):
    id: Identifier = Field(default_factory=lambda: new_id("section"))
    type: SectionKindField = SectionKind.content
    name: Text = DEFAULT_SECTION_NAME
    rows: Annotated[list[BlockRow], BeforeValidator(as_object_list)] = Field(default_factory=list)
    styles: Record = Field(default_factory=dict)
    settings: Record = Field(default_factory=dict)


class ThemeColors(AdapterModel):
    primary: Text = DEFAULT_THEME_COLORS["primary"]
    secondary: Text = DEFAULT_THEME_COLORS["secondary"]
    accent: Text = DEFAULT_THEME_COLORS["accent"]
    background: Text = DEFAULT_THEME_COLORS["background"]
    text: Text = DEFAULT_THEME_COLORS["text"]
    muted: Text = DEFAULT_THEME_COLORS["muted"]


class ThemeTypography(AdapterModel):
    heading_font: Text = DEFAULT_FONT_FAMILY
    body_font: Text = DEFAULT_FONT_FAMILY
    font_size: Record = Field(default_factory=lambda: dict(DEFAULT_FONT_SIZES))


class ThemeV2(AdapterModel):
    colors: ThemeColors = Field(default_factory=ThemeColors)
    typography: ThemeTypography = Field(default_factory=ThemeTypography)
    spacing: Record = Field(default_factory=lambda: dict(DEFAULT_SPACING))
    border_radius: Record = Field(default_factory=lambda: dict(DEFAULT_BORDER_RADIUS))


class SeoMeta(AdapterModel):
    title: Text = DEFAULT_SEO_TITLE
    description: Text = DEFAULT_SEO_DESCRIPTION
    keywords: StringList = Field(default_factory=list)
    og_image: OptionalText = None


class PageSettings(AdapterModel):
    container_max_width: Text = DEFAULT_PAGE_SETTINGS["containerMaxWidth"]
    show_grid: bool = DEFAULT_PAGE_SETTINGS["showGrid"]
    snap_to_grid: bool = DEFAULT_PAGE_SETTINGS["snapToGrid"]
    enable_animations: bool = DEFAULT_PAGE_SETTINGS["enableAnimations"]
    mobile_first: bool = DEFAULT_PAGE_SETTINGS["mobileFirst"]


class PageModelV2(AdapterModel):
    """Hierarchical section, row, column, element document with flat styles."""

    version: Annotated[Literal[2], BeforeValidator(_version_two)] = 2
    layout: Text = DEFAULT_LAYOUT
    sections: Annotated[list[BlockSection], BeforeValidator(as_object_list)] = Field(default_factory=list)
    theme: ThemeV2 = Field(default_factory=ThemeV2)
    seo: SeoMeta = Field(default_factory=SeoMeta)
    settings: PageSettings = Field(default_factory=PageSettings)
    converted_from_legacy: bool = False
    conversion_warnings: StringList = Field(default_factory=list)


__all__ = [
    "BlockColumn",
    "BlockElement",
    "BlockRow",
    "BlockSection",
    "PageModelV2",
    "PageSettings",
    "SeoMeta",
    "ThemeColors",
    "ThemeTypography",
    "ThemeV2",
]
