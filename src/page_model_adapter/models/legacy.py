from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator, Field

from .common import AdapterModel, OptionalText, Record, as_object_list


class LegacySeo(AdapterModel):
    title: OptionalText = None
    description: OptionalText = None


class LegacyStyle(AdapterModel):
    theme: OptionalText = None
    primary_color: OptionalText = None
    secondary_color: OptionalText = None
    font_family: OptionalText = None


class LegacySection(AdapterModel):
    id: OptionalText = None
    type: OptionalText = None
    config: Record = Field(default_factory=dict)
    content: Record = Field(default_factory=dict)


class LegacyPageModel(AdapterModel):
    """The original flat page shape. It carries no version marker."""

    seo: LegacySeo | None = None
    style: LegacyStyle | None = None
    layout: OptionalText = None
    sections: Annotated[list[LegacySection], BeforeValidator(as_object_list)] = Field(default_factory=list)


__all__ = ["LegacyPageModel", "LegacySection", "LegacySeo", "LegacyStyle"]
