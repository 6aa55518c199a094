from page_model_adapter.adapter import ensure_v2
from page_model_adapter.defaults import DEFAULT_PAGE_SETTINGS
from page_model_adapter.models.common import ElementKind, SectionKind, salvage_model
from page_model_adapter.models.legacy import LegacyPageModel
from page_model_adapter.models.v2 import PageModelV2, PageSettings
from page_model_adapter.models.v3 import PageModelV3


def test_models_read_and_write_camel_case(sample_v2):
    model = PageModelV2.model_validate(sample_v2)

    assert model.theme.typography.heading_font == "Inter, sans-serif"
    assert model.theme.border_radius["lg"] == "1rem"
    dumped = model.dump()
    assert dumped["theme"]["typography"]["headingFont"] == "Inter, sans-serif"
    assert dumped["settings"]["containerMaxWidth"] == "1200px"
    assert "convertedFromLegacy" in dumped


def test_page_settings_default_to_the_shared_settings():
    assert PageSettings().dump() == dict(DEFAULT_PAGE_SETTINGS)


def test_unknown_kinds_collapse_to_custom():
    model = PageModelV2.model_validate(
        {"sections": [{"type": "footer", "rows": [{"columns": [{"elements": [{"type": "carousel"}]}]}]}]}
    )

    section = model.sections[0]
    assert section.type is SectionKind.custom
    assert section.rows[0].columns[0].elements[0].type is ElementKind.custom


def test_missing_ids_are_generated():
    model = PageModelV2.model_validate({"sections": [{"rows": [{"columns": [{"elements": [{}, {"id": None}]}]}]}]})

    column = model.sections[0].rows[0].columns[0]
    ids = [model.sections[0].id, model.sections[0].rows[0].id, column.id, *(el.id for el in column.elements)]
    assert all(ids)
    assert len(set(ids)) == len(ids)


def test_version_tags_are_normalized():
    assert PageModelV2.model_validate({"version": "2"}).version == 2
    assert PageModelV3.model_validate({"version": 3}).version == "3.0"


def test_salvage_drops_only_the_invalid_value(sample_v2):
    sample_v2["seo"]["title"] = {"not": "text"}
    sample_v2["sections"][0]["rows"][0]["columns"][0]["elements"].append({"id": "bad", "props": ["x"], "width": 1})
    sample_v2["settings"]["showGrid"] = {"nested": True}

    model = salvage_model(PageModelV2, sample_v2)

    assert model.seo.title == "New Page"
    assert model.seo.description == "Test description"
    assert model.settings.show_grid is False
    elements = model.sections[0].rows[0].columns[0].elements
    assert [element.id for element in elements] == ["el1", "bad"]
    assert elements[1].props == {}


def test_salvage_never_raises_and_never_mutates():
    raw = {"seo": ["broken"], "sections": [{"id": "a", "content": 5}]}

    model = salvage_model(LegacyPageModel, raw)

    assert model.seo is None
    assert model.sections[0].id == "a"
    assert raw == {"seo": ["broken"], "sections": [{"id": "a", "content": 5}]}
    assert salvage_model(LegacyPageModel, "nonsense") == LegacyPageModel()


def test_salvage_returns_instances_unchanged():
    model = PageModelV3()

    assert salvage_model(PageModelV3, model) is model


def test_salvage_keeps_valid_content_beside_many_invalid_values():
    columns = [
        {
            "id": f"c{index}",
            "width": {"bad": 1},
            "elements": [{"id": f"t{index}", "type": "text", "content": {"text": f"Copy {index}"}}],
        }
        for index in range(70)
    ]
    raw = {"version": 2, "sections": [{"id": "s1", "rows": [{"id": "r1", "columns": columns}]}]}

    model = ensure_v2(raw)

    kept = model.sections[0].rows[0].columns
    assert [column.id for column in kept] == [f"c{index}" for index in range(70)]
    assert all(column.width == "full" for column in kept)
    assert kept[69].elements[0].content == {"text": "Copy 69"}
    assert raw["sections"][0]["rows"][0]["columns"][0]["width"] == {"bad": 1}
