from page_model_adapter.elements import element_to_v2, element_to_v3, merge_content_into_props, split_content_from_props
from page_model_adapter.models.v2 import BlockElement, BlockRow, BlockSection
from page_model_adapter.models.v3 import BlockElementV3, BlockSectionV3, ResponsiveStyles
from page_model_adapter.structure import row_to_v3, section_to_v2, section_to_v3
from page_model_adapter.styles import unwrap_styles, wrap_styles


def test_wrap_places_flat_styles_under_desktop():
    wrapped = wrap_styles({"color": "red"})

    assert wrapped.desktop == {"color": "red"}
    assert wrapped.tablet is None and wrapped.mobile is None
    assert wrap_styles(None).desktop == {}


def test_unwrap_reads_desktop_only(caplog):
    styles = ResponsiveStyles(desktop={"color": "red"}, tablet={"color": "blue"})

    assert unwrap_styles(styles, owner="row r1") == {"color": "red"}
    assert unwrap_styles(None) == {}
    assert unwrap_styles(ResponsiveStyles()) == {}
    assert "Discarding tablet styles of row r1" in caplog.text


def test_props_win_over_content_on_merge():
    merged = merge_content_into_props({"text": "from props", "level": 2}, {"text": "from content", "alt": "A"})

    assert merged == {"text": "from props", "level": 2, "alt": "A"}


def test_split_prefers_exact_known_field_names():
    content = split_content_from_props({"Text": "cased", "text": "exact", "Placeholder": "Email", "name": "email"})

    assert content == {"text": "exact", "placeholder": "Email", "Text": "cased", "name": "email"}


def test_element_to_v3_merges_payload_and_wraps_styles():
    element = BlockElement(
        id="el1",
        type="heading",
        props={"level": 1},
        content={"text": "Welcome"},
        styles={"fontSize": "3rem"},
        config={"locked": True},
    )

    converted = element_to_v3(element)

    assert converted.id == "el1"
    assert converted.type.value == "heading"
    assert converted.props == {"level": 1, "text": "Welcome"}
    assert converted.styles.desktop == {"fontSize": "3rem"}
    assert converted.config == {"locked": True}
    assert converted.children is None


def test_element_to_v2_drops_state_styles(caplog):
    element = BlockElementV3(
        id="btn",
        type="button",
        props={"label": "Go"},
        styles={"desktop": {"padding": "1rem"}},
        states={"hover": {"opacity": "0.8"}},
    )

    converted = element_to_v2(element)

    assert converted.content == {"label": "Go"}
    assert converted.props == {"label": "Go"}
    assert converted.styles == {"padding": "1rem"}
    assert "Discarding hover state styles of element btn" in caplog.text


def test_container_children_convert_recursively():
    element = BlockElement(
        id="box",
        type="container",
        children=[
            {"id": "inner", "type": "container", "children": [{"id": "leaf", "type": "image", "content": {"src": "/a.png"}}]}
        ],
    )

    v3 = element_to_v3(element)
    back = element_to_v2(v3)

    assert v3.children[0].children[0].props == {"src": "/a.png"}
    assert back.children[0].children[0].content == {"src": "/a.png"}


def test_row_without_columns_converts_to_empty_row():
    row = BlockRow.model_validate({"id": "r1", "columns": "oops", "styles": None})

    converted = row_to_v3(row)

    assert converted.id == "r1"
    assert converted.columns == []
    assert converted.styles.desktop == {}


def test_section_round_trip_keeps_shape(sample_v2):
    section = BlockSection.model_validate(sample_v2["sections"][0])

    back = section_to_v2(section_to_v3(section))

    assert back.id == section.id
    assert back.type == section.type
    assert back.name == section.name
    assert back.styles == section.styles
    assert back.settings == section.settings
    assert len(back.rows) == len(section.rows)
    assert back.rows[0].columns[0].width == "full"


def test_section_to_v2_discards_semantic_tag(caplog):
    section = BlockSectionV3(id="hero", semantic_tag="header", styles={"desktop": {"padding": "1rem"}})

    converted = section_to_v2(section)

    assert converted.styles == {"padding": "1rem"}
    assert "Discarding semantic tag 'header' of section hero" in caplog.text
