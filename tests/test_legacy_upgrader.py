import json

import pytest

from page_model_adapter.defaults import LEGACY_UPGRADE_WARNINGS, PLACEHOLDER_TEXT
from page_model_adapter.detector import classify
from page_model_adapter.ids import IdGenerator
from page_model_adapter.legacy_upgrader import LegacyUpgrader, upgrade_legacy_model
from page_model_adapter.models.common import DocumentVersion, ElementKind, SectionKind
from page_model_adapter.models.legacy import LegacyPageModel


def column_elements(section):
    return section.rows[0].columns[0].elements


@pytest.mark.parametrize(
    "legacy",
    [
        {},
        {"sections": []},
        {"sections": [{"id": "x", "type": "y"}]},
        {"sections": None, "seo": "broken", "style": 7},
        {"sections": [{"content": "not a map", "config": ["nope"]}, "junk"]},
        None,
    ],
)
def test_upgrade_is_total_and_never_structurally_empty(legacy):
    v2 = upgrade_legacy_model(legacy)

    assert classify(v2) is DocumentVersion.v2
    assert v2.sections
    assert column_elements(v2.sections[0])
    assert v2.converted_from_legacy is True


def test_section_without_content_gets_placeholder():
    v2 = upgrade_legacy_model({"sections": [{"id": "x", "type": "y"}]})

    section = v2.sections[0]
    assert section.id == "x"
    assert section.type is SectionKind.custom
    assert section.name == "y"
    [placeholder] = column_elements(section)
    assert placeholder.type is ElementKind.text
    assert placeholder.content == {"text": PLACEHOLDER_TEXT}


def test_elements_are_synthesized_in_fixed_order(legacy_landing):
    v2 = upgrade_legacy_model(legacy_landing)

    heading, subtitle, button, metadata = column_elements(v2.sections[0])
    assert heading.type is ElementKind.heading
    assert heading.props == {"level": 1}
    assert heading.content == {"text": "Big Summer Sale"}
    assert subtitle.type is ElementKind.text
    assert subtitle.content == {"text": "Up to 50% off"}
    assert button.type is ElementKind.button
    assert button.content == {"label": "Shop now", "href": "#"}
    assert metadata.type is ElementKind.custom
    assert metadata.props == {"hidden": True, "legacyMetadata": True}


def test_unknown_fields_are_kept_as_metadata(legacy_landing):
    v2 = upgrade_legacy_model(legacy_landing)

    metadata = column_elements(v2.sections[0])[-1]
    assert json.loads(metadata.content["data"]) == {
        "content": {"countdown": "2024-08-01"},
        "config": {"parallax": True},
    }


def test_benefits_become_one_text_element_each(legacy_landing):
    v2 = upgrade_legacy_model(legacy_landing)

    benefits = column_elements(v2.sections[1])
    assert [element.content["text"] for element in benefits] == [
        "✓ Free shipping: On every order",
        "✓ Easy returns",
        "✓ Secure checkout",
    ]
    assert all(element.props["isBenefit"] for element in benefits)
    assert v2.sections[1].type is SectionKind.benefits


def test_section_styles_and_settings_come_from_config(legacy_landing):
    v2 = upgrade_legacy_model(legacy_landing)

    hero, benefits, _ = v2.sections
    assert hero.styles["backgroundColor"] == "#000000"
    assert hero.settings["textAlign"] == "left"
    assert benefits.styles["backgroundColor"] == "transparent"
    assert benefits.settings["textAlign"] == "center"


def test_theme_and_seo_come_from_legacy_style(legacy_landing):
    v2 = upgrade_legacy_model(legacy_landing)

    assert v2.theme.colors.primary == "#ff5500"
    assert v2.theme.colors.secondary == "#64748b"
    assert v2.theme.typography.heading_font == "Poppins, sans-serif"
    assert v2.theme.typography.body_font == "Poppins, sans-serif"
    assert v2.seo.title == "Summer Sale"
    assert v2.seo.description == "Limited offer"
    assert v2.conversion_warnings == list(LEGACY_UPGRADE_WARNINGS)


def test_upgrade_accepts_model_instances(legacy_landing):
    model = LegacyPageModel.model_validate(legacy_landing)

    v2 = LegacyUpgrader().upgrade(model)

    assert [section.id for section in v2.sections] == ["hero", "why", "promo"]


def test_ids_are_unique_within_one_upgrade():
    benefits = [{"title": f"Benefit {n}"} for n in range(250)]
    legacy = {
        "sections": [
            {"content": {"title": "T", "subtitle": "S", "ctaLabel": "C", "benefits": benefits, "extra": 1}}
            for _ in range(4)
        ]
    }

    v2 = upgrade_legacy_model(legacy)

    ids = []
    for section in v2.sections:
        ids.append(section.id)
        for row in section.rows:
            ids.append(row.id)
            for column in row.columns:
                ids.append(column.id)
                ids.extend(element.id for element in column.elements)
    assert len(ids) == 4 * (3 + 3 + 250 + 1)
    assert len(set(ids)) == len(ids)


def test_id_generator_never_repeats():
    ids = IdGenerator()

    generated = [ids.next("text", 0) for _ in range(1000)]

    assert len(set(generated)) == 1000


def test_custom_warnings_and_placeholder():
    upgrader = LegacyUpgrader(warnings=("Check me",), placeholder_text="Nothing here yet")

    v2 = upgrader.upgrade({})

    assert v2.conversion_warnings == ["Check me"]
    assert column_elements(v2.sections[0])[0].content["text"] == "Nothing here yet"
