from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from lxml import etree as ET

from ..container import StylesContainer
from ..engine import write_ods
from ..config import ExportSettings
from ..rendering.xml_utils import OFFICE_NS, TABLE_NS, TEXT_NS, XMLContext, q
from ..semantic.templates import TemplateColumn, columns_for_template_code
from ..styles import (
    PageSection,
    TableCellStyle,
    TableColumnStyle,
    TableRowStyle,
    TableStyle,
    TextStyle,
    cell_style,
    page_style,
)
from ..utils.logger import get_logger

log = get_logger(__name__)

SHEET_NAME = "FormatTemplates"
PAGE_STYLE_NAME = "FormatTemplatesPage"

HEADER_CELL = cell_style("HeaderCell", background_color="#D9D9D9",
                         border_bottom="0.75pt solid #808080", font_weight="bold")
DATA_CELL = cell_style("DataCell")
NEGATIVE_CELL = cell_style("NegativeCell", color="#FF0000")
COLUMN_STYLE = TableColumnStyle("co1", width="3cm")
ROW_STYLE = TableRowStyle("ro1")
HEADER_TEXT = TextStyle("HeaderText", font_weight="bold")


def sample_value(column: TemplateColumn) -> Tuple[str, str]:
    """(office:value-type, office:value) written in the sample row."""
    if column.key.kind == "percentage":
        return "percentage", "0.23456"
    if column.key.kind == "cash":
        return "float", "-1234.567" if column.negative else "1234.567"
    return "float", "1.2345"


def _col_letter(index_1based: int) -> str:
    dividend = index_1based
    name = ""
    while dividend > 0:
        modulo = (dividend - 1) % 26
        name = chr(65 + modulo) + name
        dividend = (dividend - modulo) // 26
    return name


@dataclass
class FormatTemplateSheet:
    """
    Per-cell formatting preview:
      Row 1: template titles (HeaderCell)
      Row 2: sample values, each cell using the anonymous style for its template
      Row 3: formulas echoing row 2 with the same style
    """
    columns: List[TemplateColumn]
    cell_styles: List[TableCellStyle] = field(default_factory=list)
    table_style: TableStyle = field(default_factory=lambda: TableStyle("ta1", PAGE_STYLE_NAME))
    name: str = SHEET_NAME

    def register(self, container: StylesContainer) -> None:
        container.add_style_to_styles_common_styles(HEADER_CELL)
        container.add_style_to_content_automatic_styles(self.table_style)
        container.add_style_to_content_automatic_styles(COLUMN_STYLE)
        container.add_style_to_content_automatic_styles(ROW_STYLE)
        container.add_page_style(page_style(
            PAGE_STYLE_NAME,
            header=PageSection(self.name, text_style=HEADER_TEXT, min_height="0.6cm"),
            footer=PageSection("Format templates", min_height="0.6cm"),
        ))
        self.cell_styles = [
            container.add_child_cell_style(NEGATIVE_CELL if col.negative else DATA_CELL, col.data_style)
            for col in self.columns
        ]

    def _row(self, table: ET._Element) -> ET._Element:
        row = ET.SubElement(table, q(TABLE_NS, "table-row"))
        row.set(q(TABLE_NS, "style-name"), ROW_STYLE.name)
        return row

    def _cell(self, row: ET._Element, style_name: str, text: str = "") -> ET._Element:
        cell = ET.SubElement(row, q(TABLE_NS, "table-cell"))
        cell.set(q(TABLE_NS, "style-name"), style_name)
        ET.SubElement(cell, q(TEXT_NS, "p")).text = text
        return cell

    def write(self, ctx: XMLContext, spreadsheet: ET._Element) -> None:
        table = ET.SubElement(spreadsheet, q(TABLE_NS, "table"))
        table.set(q(TABLE_NS, "name"), self.name)
        table.set(q(TABLE_NS, "style-name"), self.table_style.name)
        cols = ET.SubElement(table, q(TABLE_NS, "table-column"))
        cols.set(q(TABLE_NS, "style-name"), COLUMN_STYLE.name)
        cols.set(q(TABLE_NS, "number-columns-repeated"), str(max(len(self.columns), 1)))

        hdr = self._row(table)
        for col in self.columns:
            self._cell(hdr, HEADER_CELL.name, col.title)

        values = self._row(table)
        for col, style in zip(self.columns, self.cell_styles):
            value_type, value = sample_value(col)
            cell = self._cell(values, style.name, value)
            cell.set(q(OFFICE_NS, "value-type"), value_type)
            cell.set(q(OFFICE_NS, "value"), value)

        echo = self._row(table)
        for idx, (col, style) in enumerate(zip(self.columns, self.cell_styles), start=1):
            value_type, _ = sample_value(col)
            cell = self._cell(echo, style.name)
            cell.set(q(TABLE_NS, "formula"), f"of:=[.{_col_letter(idx)}2]")
            cell.set(q(OFFICE_NS, "value-type"), value_type)
            cell.set(q(OFFICE_NS, "value"), "0")


def build_sheet(template_codes: Iterable[str], container: StylesContainer) -> FormatTemplateSheet:
    columns: List[TemplateColumn] = []
    for code in template_codes:
        columns.extend(columns_for_template_code(code))
    sheet = FormatTemplateSheet(columns=columns)
    sheet.register(container)
    log.debug("format template sheet: %d columns, %d distinct cell styles",
              len(columns), len({s.name for s in sheet.cell_styles}))
    return sheet


def export_format_templates(settings: ExportSettings) -> Tuple[str, bytes]:
    container = StylesContainer()
    if settings.debug:
        container.debug()
    sheet = build_sheet(settings.templates, container)
    return settings.filename, write_ods(container, locale=settings.locale, body=sheet.write)
