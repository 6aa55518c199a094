from __future__ import annotations

import copy
import logging
from typing import Any, Mapping

from .defaults import (
    BASE_RAMP_STEP,
    DEFAULT_BORDER_RADIUS,
    DEFAULT_BREAKPOINTS,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZES,
    DEFAULT_SEMANTIC_COLORS,
    DEFAULT_SPACING,
    DEFAULT_THEME_COLORS,
    NEUTRAL_BACKGROUND_STEP,
    NEUTRAL_MUTED_STEP,
    NEUTRAL_TEXT_STEP,
)
from .models.v2 import ThemeColors, ThemeTypography, ThemeV2
from .models.v3 import ColorTokens, DesignTokens, SemanticColors, TypographyTokens

logger = logging.getLogger(__name__)

_RAMP_COLORS = ("primary", "secondary", "accent")


def theme_to_tokens(theme: ThemeV2) -> DesignTokens:
    """Project a flat theme onto design tokens.

    Brand colors become single-step ramps at "500"; background, muted and
    text seed the neutral ramp. The remaining ramp steps are left for the
    editor to fill in.
    """
    colors = theme.colors
    return DesignTokens(
        colors=ColorTokens(
            primary={BASE_RAMP_STEP: colors.primary},
            secondary={BASE_RAMP_STEP: colors.secondary},
            accent={BASE_RAMP_STEP: colors.accent},
            neutral={
                NEUTRAL_BACKGROUND_STEP: colors.background,
                NEUTRAL_MUTED_STEP: colors.muted,
                NEUTRAL_TEXT_STEP: colors.text,
            },
            semantic=SemanticColors(**DEFAULT_SEMANTIC_COLORS),
        ),
        typography=TypographyTokens(
            font_families={
                "heading": theme.typography.heading_font,
                "body": theme.typography.body_font,
            },
            font_sizes=copy.deepcopy(theme.typography.font_size),
        ),
        spacing=copy.deepcopy(theme.spacing),
        border_radius=copy.deepcopy(theme.border_radius),
        breakpoints=dict(DEFAULT_BREAKPOINTS),
    )


def tokens_to_theme(tokens: DesignTokens | None) -> ThemeV2:
    """Project design tokens back onto a flat theme. Lossy."""
    if tokens is None:
        return ThemeV2()

    colors = tokens.colors
    neutral = colors.neutral
    discarded: list[str] = []
    for name in _RAMP_COLORS:
        extra = sorted(step for step in getattr(colors, name) if step != BASE_RAMP_STEP)
        discarded.extend(f"{name}.{step}" for step in extra)
    lightest = _ramp_extreme(neutral, lightest=True)
    darkest = _ramp_extreme(neutral, lightest=False)
    kept_neutral = {lightest, darkest, NEUTRAL_MUTED_STEP}
    discarded.extend(f"neutral.{step}" for step in sorted(neutral) if step not in kept_neutral)
    custom_breakpoints = sorted(
        name for name, value in tokens.breakpoints.items() if DEFAULT_BREAKPOINTS.get(name) != value
    )
    discarded.extend(f"breakpoints.{name}" for name in custom_breakpoints)
    if discarded:
        logger.warning(
            f"Discarding {len(discarded)} design token value(s) with no flat theme equivalent",
            extra={"discarded": discarded},
        )

    families = tokens.typography.font_families
    return ThemeV2(
        colors=ThemeColors(
            primary=_ramp_base(colors.primary, "primary"),
            secondary=_ramp_base(colors.secondary, "secondary"),
            accent=_ramp_base(colors.accent, "accent"),
            background=_text_or(neutral.get(lightest), "background"),
            text=_text_or(neutral.get(darkest), "text"),
            muted=_text_or(neutral.get(NEUTRAL_MUTED_STEP), "muted"),
        ),
        typography=ThemeTypography(
            heading_font=families.get("heading") or DEFAULT_FONT_FAMILY,
            body_font=families.get("body") or DEFAULT_FONT_FAMILY,
            font_size=_flat_scale(tokens.typography.font_sizes) or dict(DEFAULT_FONT_SIZES),
        ),
        spacing=_flat_scale(tokens.spacing) or dict(DEFAULT_SPACING),
        border_radius=_flat_scale(tokens.border_radius) or dict(DEFAULT_BORDER_RADIUS),
    )


def _ramp_base(ramp: Mapping[str, Any], name: str) -> str:
    return _text_or(ramp.get(BASE_RAMP_STEP), name)


def _ramp_extreme(ramp: Mapping[str, Any], *, lightest: bool) -> str | None:
    steps = [step for step in ramp if _step_number(step) is not None]
    if not steps:
        return None
    pick = min if lightest else max
    return pick(steps, key=_step_number)


def _step_number(step: str) -> float | None:
    try:
        return float(step)
    except (TypeError, ValueError):
        return None


def _text_or(value: Any, color: str) -> str:
    if isinstance(value, str) and value:
        return value
    return DEFAULT_THEME_COLORS[color]


def _flat_scale(scale: Mapping[str, Any]) -> dict[str, Any]:
    # Token scales may hold per-breakpoint objects; the flat theme keeps scalars only.
    flat: dict[str, Any] = {}
    for key, value in scale.items():
        if isinstance(value, Mapping):
            value = value.get("desktop", value.get("mobile"))
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            flat[key] = value
    return flat


__all__ = ["theme_to_tokens", "tokens_to_theme"]
