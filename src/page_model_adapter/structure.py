from __future__ import annotations

import copy
import logging

from .elements import element_to_v2, element_to_v3
from .models.v2 import BlockColumn, BlockRow, BlockSection
from .models.v3 import BlockColumnV3, BlockRowV3, BlockSectionV3
from .styles import discard_state_styles, unwrap_styles, wrap_styles

logger = logging.getLogger(__name__)


def column_to_v3(column: BlockColumn) -> BlockColumnV3:
    return BlockColumnV3(
        id=column.id,
        width=column.width,
        elements=[element_to_v3(element) for element in column.elements],
        styles=wrap_styles(column.styles),
    )


def row_to_v3(row: BlockRow) -> BlockRowV3:
    return BlockRowV3(
        id=row.id,
        columns=[column_to_v3(column) for column in row.columns],
        styles=wrap_styles(row.styles),
    )


def section_to_v3(section: BlockSection) -> BlockSectionV3:
    return BlockSectionV3(
        id=section.id,
        type=section.type,
        name=section.name,
        rows=[row_to_v3(row) for row in section.rows],
        styles=wrap_styles(section.styles),
        settings=copy.deepcopy(section.settings),
    )


def column_to_v2(column: BlockColumnV3) -> BlockColumn:
    return BlockColumn(
        id=column.id,
        width=column.width,
        elements=[element_to_v2(element) for element in column.elements],
        styles=unwrap_styles(column.styles, owner=f"column {column.id}"),
    )


def row_to_v2(row: BlockRowV3) -> BlockRow:
    return BlockRow(
        id=row.id,
        columns=[column_to_v2(column) for column in row.columns],
        styles=unwrap_styles(row.styles, owner=f"row {row.id}"),
    )


def section_to_v2(section: BlockSectionV3) -> BlockSection:
    owner = f"section {section.id}"
    if section.semantic_tag:
        logger.warning(
            f"Discarding semantic tag '{section.semantic_tag}' of {owner}",
            extra={"owner": owner},
        )
    discard_state_styles(section.states, owner=owner)
    return BlockSection(
        id=section.id,
        type=section.type,
        name=section.name,
        rows=[row_to_v2(row) for row in section.rows],
        styles=unwrap_styles(section.styles, owner=owner),
        settings=copy.deepcopy(section.settings),
    )


__all__ = [
    "column_to_v2",
    "column_to_v3",
    "row_to_v2",
    "row_to_v3",
    "section_to_v2",
    "section_to_v3",
]
