from __future__ import annotations

from typing import Mapping, Sequence

DEFAULT_LAYOUT = "single_page"

DEFAULT_THEME_COLORS: Mapping[str, str] = {
    "primary": "#3b82f6",
    "secondary": "#64748b",
    "accent": "#8b5cf6",
    "background": "#ffffff",
    "text": "#1e293b",
    "muted": "#94a3b8",
}

DEFAULT_FONT_FAMILY = "Inter, system-ui, sans-serif"

DEFAULT_FONT_SIZES: Mapping[str, str] = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
    "4xl": "2.25rem",
}

DEFAULT_SPACING: Mapping[str, str] = {
    "xs": "0.5rem",
    "sm": "1rem",
    "md": "1.5rem",
    "lg": "2rem",
    "xl": "3rem",
    "2xl": "4rem",
}

DEFAULT_BORDER_RADIUS: Mapping[str, str] = {
    "sm": "0.375rem",
    "md": "0.5rem",
    "lg": "0.75rem",
}

# The flat theme has no breakpoint concept, so these are injected on upgrade.
DEFAULT_BREAKPOINTS: Mapping[str, str] = {
    "mobile": "768px",
    "tablet": "1024px",
    "desktop": "1280px",
}

DEFAULT_SEMANTIC_COLORS: Mapping[str, str] = {
    "success": "#10b981",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "info": "#3b82f6",
}

BASE_RAMP_STEP = "500"

# Neutral ramp steps the flat theme colors are projected onto.
NEUTRAL_BACKGROUND_STEP = "50"
NEUTRAL_MUTED_STEP = "500"
NEUTRAL_TEXT_STEP = "900"

DEFAULT_SEO_TITLE = "New Page"
DEFAULT_SEO_DESCRIPTION = "Page description"

DEFAULT_PAGE_SETTINGS: Mapping[str, object] = {
    "containerMaxWidth": "1200px",
    "showGrid": False,
    "snapToGrid": True,
    "enableAnimations": True,
    "mobileFirst": True,
}

DEFAULT_COLUMN_WIDTH = "full"

# Element payload fields that V3 props are normalized back into, in order.
KNOWN_CONTENT_FIELDS: Sequence[str] = ("text", "label", "href", "src", "alt", "placeholder")

LEGACY_CONTENT_FIELDS: frozenset[str] = frozenset({"title", "subtitle", "ctaLabel", "benefits"})
LEGACY_CONFIG_FIELDS: frozenset[str] = frozenset({"backgroundColor", "textAlign"})

LEGACY_THEME_NAME = "modern"
LEGACY_DEFAULT_BACKGROUND = "#ffffff"
LEGACY_DEFAULT_TEXT_ALIGN = "center"

PLACEHOLDER_TEXT = "Empty content"
DEFAULT_SECTION_NAME = "Section"
BENEFIT_MARKER = "✓"

LEGACY_UPGRADE_WARNINGS: Sequence[str] = (
    "This page was converted from the legacy format. Review the layout before publishing.",
    "Benefit lists were flattened into plain text elements.",
    "Legacy fields without an equivalent are kept as hidden metadata elements and are not rendered.",
)

IMPLICIT_DOWNGRADE_WARNING = (
    "A V3 document was passed where V2 was expected. "
    "Use convert_v3_to_v2 to downgrade it explicitly."
)

# Styles applied to elements synthesized from legacy content fields.
LEGACY_ELEMENT_STYLES: Mapping[str, Mapping[str, str]] = {
    "heading": {
        "fontSize": "2.5rem",
        "fontWeight": "700",
        "textAlign": "center",
        "marginBottom": "1rem",
    },
    "subtitle": {
        "fontSize": "1.125rem",
        "textAlign": "center",
        "color": "#64748b",
        "marginBottom": "2rem",
    },
    "button": {"marginTop": "1.5rem"},
    "benefit": {
        "fontSize": "1rem",
        "fontWeight": "600",
        "marginBottom": "0.5rem",
    },
}

LEGACY_SECTION_STYLES: Mapping[str, str] = {
    "paddingTop": "3rem",
    "paddingBottom": "3rem",
}


__all__ = [
    "BASE_RAMP_STEP",
    "BENEFIT_MARKER",
    "DEFAULT_BORDER_RADIUS",
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_COLUMN_WIDTH",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZES",
    "DEFAULT_LAYOUT",
    "DEFAULT_PAGE_SETTINGS",
    "DEFAULT_SECTION_NAME",
    "DEFAULT_SEMANTIC_COLORS",
    "DEFAULT_SEO_DESCRIPTION",
    "DEFAULT_SEO_TITLE",
    "DEFAULT_SPACING",
    "DEFAULT_THEME_COLORS",
    "IMPLICIT_DOWNGRADE_WARNING",
    "KNOWN_CONTENT_FIELDS",
    "LEGACY_CONFIG_FIELDS",
    "LEGACY_CONTENT_FIELDS",
    "LEGACY_DEFAULT_BACKGROUND",
    "LEGACY_DEFAULT_TEXT_ALIGN",
    "LEGACY_ELEMENT_STYLES",
    "LEGACY_SECTION_STYLES",
    "LEGACY_THEME_NAME",
    "LEGACY_UPGRADE_WARNINGS",
    "NEUTRAL_BACKGROUND_STEP",
    "NEUTRAL_MUTED_STEP",
    "NEUTRAL_TEXT_STEP",
    "PLACEHOLDER_TEXT",
]
