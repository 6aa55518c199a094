from __future__ import annotations

import copy
import logging
from typing import Any, Mapping

from .models.v3 import ResponsiveStyles, StateStyles

logger = logging.getLogger(__name__)


def wrap_styles(styles: Mapping[str, Any] | None) -> ResponsiveStyles:
    """Place a flat style map under the desktop breakpoint."""
    return ResponsiveStyles(desktop=copy.deepcopy(dict(styles or {})))


def unwrap_styles(styles: ResponsiveStyles | None, *, owner: str | None = None) -> dict[str, Any]:
    """Read the desktop styles back out. Tablet and mobile overrides are discarded."""
    if styles is None:
        return {}
    discarded = [name for name in ("tablet", "mobile") if getattr(styles, name)]
    if discarded:
        logger.warning(
            f"Discarding {', '.join(discarded)} styles of {owner or 'block'}; the flat format keeps desktop only",
            extra={"owner": owner, "breakpoints": discarded},
        )
    return copy.deepcopy(dict(styles.desktop or {}))


def discard_state_styles(states: StateStyles | None, *, owner: str | None = None) -> None:
    if states is None:
        return
    populated = [name for name, value in states if value]
    if populated:
        logger.warning(
            f"Discarding {', '.join(populated)} state styles of {owner or 'block'}; the flat format has no states",
            extra={"owner": owner, "states": populated},
        )


__all__ = ["discard_state_styles", "unwrap_styles", "wrap_styles"]
