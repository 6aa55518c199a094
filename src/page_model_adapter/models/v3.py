from __future__ import annotations

from typing import Annotated, Any, Literal, Optional

from pydantic import BeforeValidator, Field

from ..defaults import DEFAULT_COLUMN_WIDTH, DEFAULT_LAYOUT, DEFAULT_SECTION_NAME, DEFAULT_SEO_DESCRIPTION, DEFAULT_SEO_TITLE
from ..ids import new_id
from .common import (
    AdapterModel,
    ElementKind,
    ElementKindField,
    Identifier,
    OptionalRecord,
    OptionalText,
    Record,
    SectionKind,
    SectionKindField,
    StringList,
    Text,
    as_object_list,
    as_optional_object_list,
)
from .v2 import PageSettings


def _version_three(value: Any) -> str:
    return "3.0"


class ResponsiveStyles(AdapterModel):
    """Style declarations keyed by breakpoint."""

    desktop: OptionalRecord = None
    tablet: OptionalRecord = None
    mobile: OptionalRecord = None


class StateStyles(AdapterModel):
    """Style declarations keyed by interaction state."""

    default: OptionalRecord = None
    hover: OptionalRecord = None
    focus: OptionalRecord = None
    active: OptionalRecord = None
    disabled: OptionalRecord = None
    visited: OptionalRecord = None


class BlockElementV3(AdapterModel):
    id: Identifier = Field(default_factory=lambda: new_id("el"))
    type: ElementKindField = ElementKind.text
    props: Record = Field(default_factory=dict)
    styles: ResponsiveStyles = Field(default_factory=ResponsiveStyles)
    states: StateStyles | None = None
    config: Record = Field(default_factory=dict)
    children: Annotated[Optional[list[BlockElementV3]], BeforeValidator(as_optional_object_list)] = None


class BlockColumnV3(AdapterModel):
    id: Identifier = Field(default_factory=lambda: new_id("col"))
    width: Text = DEFAULT_COLUMN_WIDTH
    elements: Annotated[list[BlockElementV3], BeforeValidator(as_object_list)] = Field(default_factory=list)
    styles: ResponsiveStyles = Field(default_factory=ResponsiveStyles)


class BlockRowV3(AdapterModel):
    id: Identifier = Field(default_factory=lambda: new_id("row"))
    columns: Annotated[list[BlockColumnV3], BeforeValidator(as_object_list)] = Field(default_factory=list)
    styles: ResponsiveStyles = Field(default_factory=ResponsiveStyles)


class BlockSectionV3(AdapterModel):
    id: Identifier = Field(default_factory=lambda: new_id("section"))
    type: SectionKindField = SectionKind.content
    name: Text = DEFAULT_SECTION_NAME
    semantic_tag: OptionalText = None
    rows: Annotated[list[BlockRowV3], BeforeValidator(as_object_list)] = Field(default_factory=list)
    styles: ResponsiveStyles = Field(default_factory=ResponsiveStyles)
    states: StateStyles | None = None
    settings: Record = Field(default_factory=dict)


class SemanticColors(AdapterModel):
    success: OptionalText = None
    warning: OptionalText = None
    error: OptionalText = None
    info: OptionalText = None


class ColorTokens(AdapterModel):
    """Color ramps keyed by lightness step ("50" to "950")."""

    primary: Record = Field(default_factory=dict)
    secondary: Record = Field(default_factory=dict)
    accent: Record = Field(default_factory=dict)
    neutral: Record = Field(default_factory=dict)
    semantic: SemanticColors = Field(default_factory=SemanticColors)


class TypographyTokens(AdapterModel):
    font_families: Record = Field(default_factory=dict)
    font_sizes: Record = Field(default_factory=dict)


class DesignTokens(AdapterModel):
    colors: ColorTokens = Field(default_factory=ColorTokens)
    typography: TypographyTokens = Field(default_factory=TypographyTokens)
    spacing: Record = Field(default_factory=dict)
    border_radius: Record = Field(default_factory=dict)
    breakpoints: Record = Field(default_factory=dict)


class PageMeta(AdapterModel):
    title: Text = DEFAULT_SEO_TITLE
    description: Text = DEFAULT_SEO_DESCRIPTION
    keywords: StringList = Field(default_factory=list)
    og_image: OptionalText = None


class PageModelV3(AdapterModel):
    """Component document with responsive and state-aware styles and design tokens."""

    version: Annotated[Literal["3.0"], BeforeValidator(_version_three)] = "3.0"
    layout: Text = DEFAULT_LAYOUT
    sections: Annotated[list[BlockSectionV3], BeforeValidator(as_object_list)] = Field(default_factory=list)
    design_tokens: DesignTokens | None = None
    meta: PageMeta = Field(default_factory=PageMeta)
    settings: PageSettings = Field(default_factory=PageSettings)
    converted_from_legacy: bool = False
    conversion_warnings: StringList = Field(default_factory=list)


__all__ = [
    "BlockColumnV3",
    "BlockElementV3",
    "BlockRowV3",
    "BlockSectionV3",
    "ColorTokens",
    "DesignTokens",
    "PageMeta",
    "PageModelV3",
    "ResponsiveStyles",
    "SemanticColors",
    "StateStyles",
    "TypographyTokens",
]
