from __future__ import annotations

import copy
from typing import Any, Mapping

from .defaults import KNOWN_CONTENT_FIELDS
from .models.v2 import BlockElement
from .models.v3 import BlockElementV3
from .styles import discard_state_styles, unwrap_styles, wrap_styles


def merge_content_into_props(props: Mapping[str, Any], content: Mapping[str, Any]) -> dict[str, Any]:
    """Collapse the two payload maps into one. Props win on conflict."""
    merged = copy.deepcopy(dict(props))
    for key, value in content.items():
        if key not in merged:
            merged[key] = copy.deepcopy(value)
    return merged


def split_content_from_props(props: Mapping[str, Any]) -> dict[str, Any]:
    """Derive the content map from merged props.

    Known fields are copied first under their canonical names, matching prop
    keys case-insensitively when the exact name is absent. Every other prop
    follows unchanged.
    """
    content: dict[str, Any] = {}
    consumed: set[str] = set()
    for field in KNOWN_CONTENT_FIELDS:
        source = _find_prop_key(props, field, consumed)
        if source is None:
            continue
        content[field] = copy.deepcopy(props[source])
        consumed.add(source)
    for key, value in props.items():
        if key in consumed or key in content:
            continue
        content[key] = copy.deepcopy(value)
    return content


def _find_prop_key(props: Mapping[str, Any], field: str, consumed: set[str]) -> str | None:
    if field in props:
        return field
    for key in props:
        if key not in consumed and key.lower() == field:
            return key
    return None


def element_to_v3(element: BlockElement) -> BlockElementV3:
    children = None
    if element.children is not None:
        children = [element_to_v3(child) for child in element.children]
    return BlockElementV3(
        id=element.id,
        type=element.type,
        props=merge_content_into_props(element.props, element.content),
        styles=wrap_styles(element.styles),
        config=copy.deepcopy(element.config),
        children=children,
    )


def element_to_v2(element: BlockElementV3) -> BlockElement:
    owner = f"element {element.id}"
    discard_state_styles(element.states, owner=owner)
    children = None
    if element.children is not None:
        children = [element_to_v2(child) for child in element.children]
    return BlockElement(
        id=element.id,
        type=element.type,
        props=copy.deepcopy(element.props),
        content=split_content_from_props(element.props),
        styles=unwrap_styles(element.styles, owner=owner),
        config=copy.deepcopy(element.config),
        children=children,
    )


__all__ = ["element_to_v2", "element_to_v3", "merge_content_into_props", "split_content_from_props"]
