from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, Any, Callable, Mapping, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..ids import new_id

logger = logging.getLogger(__name__)

BREAKPOINTS = ("mobile", "tablet", "desktop")


class DocumentVersion(str, Enum):
    legacy = "legacy"
    v2 = "v2"
    v3 = "v3"


class SectionKind(str, Enum):
    hero = "hero"
    content = "content"
    cta = "cta"
    benefits = "benefits"
    testimonials = "testimonials"
    faq = "faq"
    checkout = "checkout"
    custom = "custom"


class ElementKind(str, Enum):
    heading = "heading"
    text = "text"
    button = "button"
    image = "image"
    video = "video"
    container = "container"
    spacer = "spacer"
    divider = "divider"
    form = "form"
    input = "input"
    embed = "embed"
    custom = "custom"


class AdapterModel(BaseModel):
    """Base for every page document shape.

    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def dump(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def as_record(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    return {}


def as_optional_record(value: Any) -> dict[str, Any] | None:
    if value is None:
        return None
    return as_record(value)


def as_object_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, (Mapping, BaseModel))]
    return []


def as_optional_object_list(value: Any) -> list[Any] | None:
    if value is None:
        return None
    return as_object_list(value)


def as_text(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def as_optional_text(value: Any) -> Any:
    if value is None:
        return None
    return as_text(value)


def as_identifier(value: Any) -> str:
    if isinstance(value, str) and value:
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return new_id("block")


def as_string_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


E = TypeVar("E", bound=Enum)


def enum_or(enum_cls: type[E], fallback: E) -> Callable[[Any], E]:
    def coerce(value: Any) -> E:
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(value)
        except ValueError:
            return fallback

    return coerce


Record = Annotated[dict[str, Any], BeforeValidator(as_record)]
OptionalRecord = Annotated[Optional[dict[str, Any]], BeforeValidator(as_optional_record)]
Text = Annotated[str, BeforeValidator(as_text)]
OptionalText = Annotated[Optional[str], BeforeValidator(as_optional_text)]
Identifier = Annotated[str, BeforeValidator(as_identifier)]
StringList = Annotated[list[str], BeforeValidator(as_string_list)]
SectionKindField = Annotated[SectionKind, BeforeValidator(enum_or(SectionKind, SectionKind.custom))]
ElementKindField = Annotated[ElementKind, BeforeValidator(enum_or(ElementKind, ElementKind.custom))]


M = TypeVar("M", bound=BaseModel)


def salvage_model(model_cls: type[M], raw: Any) -> M:
    """Validate ``raw`` into ``model_cls`` without ever raising.

    Each failed pass removes the innermost key or list item named by every
    validation error, deepest first, and tries again. Every pass removes at
    least one value, so the loop ends once the data validates or nothing
    removable is left, in which case the model's defaults are returned.
    ``raw`` is never mutated.
    """
    if isinstance(raw, model_cls):
        return raw
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(by_alias=True)
    if not isinstance(raw, Mapping):
        logger.warning(f"Expected an object for {model_cls.__name__}, got {type(raw).__name__}")
        return model_cls()

    data = _plain_copy(raw)
    dropped: list[str] = []
    while True:
        try:
            model = model_cls.model_validate(data)
        except ValidationError as exc:
            paths = {_resolve(data, error["loc"]) for error in exc.errors()}
            paths.discard(())
            if not paths:
                break
            # Reverse order removes children before parents and higher list indices first.
            for path in sorted(paths, key=_path_key, reverse=True):
                _drop_at(data, path)
                dropped.append(".".join(str(part) for part in path))
            continue
        if dropped:
            logger.warning(
                f"Dropped {len(dropped)} invalid value(s) while reading {model_cls.__name__}",
                extra={"dropped": dropped},
            )
        return model

    logger.warning(
        f"Could not read {model_cls.__name__}; falling back to defaults",
        extra={"dropped": dropped},
    )
    return model_cls()


def _plain_copy(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return _plain_copy(value.model_dump(by_alias=True))
    if isinstance(value, Mapping):
        return {key: _plain_copy(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain_copy(item) for item in value]
    return value


def _resolve(data: dict[str, Any], location: tuple[Any, ...]) -> tuple[Any, ...]:
    """Follow an error location as far as it exists in ``data``."""
    node: Any = data
    path: list[Any] = []
    for segment in location:
        if isinstance(node, dict) and isinstance(segment, str) and segment not in node:
            segment = to_camel(segment)
        if isinstance(node, dict) and segment in node:
            path.append(segment)
            node = node[segment]
        elif isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
            path.append(segment)
            node = node[segment]
        else:
            break
    return tuple(path)


def _path_key(path: tuple[Any, ...]) -> tuple[tuple[bool, Any], ...]:
    return tuple((isinstance(segment, int), segment) for segment in path)


def _drop_at(data: dict[str, Any], path: tuple[Any, ...]) -> None:
    node: Any = data
    for segment in path[:-1]:
        node = node[segment]
    del node[path[-1]]


__all__ = [
    "AdapterModel",
    "BREAKPOINTS",
    "DocumentVersion",
    "ElementKind",
    "ElementKindField",
    "Identifier",
    "OptionalRecord",
    "OptionalText",
    "Record",
    "SectionKind",
    "SectionKindField",
    "StringList",
    "Text",
    "salvage_model",
]
