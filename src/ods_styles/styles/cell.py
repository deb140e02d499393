from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from lxml import etree as ET

from ..rendering.xml_utils import STYLE_NS, XMLContext
from ..semantic.naming import composite_name
from ._validate import require_color, require_name
from .data import DataStyle


@dataclass(frozen=True)
class TextStyle:
    name: str
    hidden: bool = True
    font_weight: Optional[str] = None
    font_size: Optional[str] = None
    color: Optional[str] = None

    family = "text"

    def __post_init__(self) -> None:
        require_name(self.name, "text style")
        require_color(self.color, "color", self.name)

    def append_text_properties(self, ctx: XMLContext, parent: ET._Element) -> None:
        if self.font_weight or self.font_size or self.color:
            ctx.sub(parent, STYLE_NS, "text-properties",
                    fo_font_weight=self.font_weight,
                    fo_font_size=self.font_size,
                    fo_color=self.color)

    def append_xml(self, ctx: XMLContext, sink: ET._Element) -> ET._Element:
        el = ctx.sub(sink, STYLE_NS, "style", style_name=self.name, style_family=self.family)
        self.append_text_properties(ctx, el)
        return el


@dataclass(frozen=True)
class TableCellStyle:
    name: str
    hidden: bool = False
    parent: Optional["TableCellStyle"] = None
    data_style: Optional[DataStyle] = None
    background_color: Optional[str] = None
    border_bottom: Optional[str] = None
    text: Optional[TextStyle] = None

    family = "table-cell"

    def __post_init__(self) -> None:
        require_name(self.name, "cell style")
        require_color(self.background_color, "background_color", self.name)

    @property
    def has_parent(self) -> bool:
        return self.parent is not None

    def append_xml(self, ctx: XMLContext, sink: ET._Element) -> ET._Element:
        el = ctx.sub(
            sink, STYLE_NS, "style",
            style_name=self.name,
            style_family=self.family,
            style_parent_style_name=self.parent.name if self.parent else None,
            style_data_style_name=self.data_style.name if self.data_style else None,
        )
        if self.background_color or self.border_bottom:
            ctx.sub(el, STYLE_NS, "table-cell-properties",
                    fo_background_color=self.background_color,
                    fo_border_bottom=self.border_bottom)
        if self.text is not None:
            self.text.append_text_properties(ctx, el)
        return el


def cell_style(name: str, background_color: Optional[str] = None, border_bottom: Optional[str] = None,
               font_weight: Optional[str] = None, color: Optional[str] = None,
               data_style: Optional[DataStyle] = None, hidden: bool = False) -> TableCellStyle:
    text = None
    if font_weight or color:
        text = TextStyle(name=f"{name}-text", font_weight=font_weight, color=color)
    return TableCellStyle(name=name, hidden=hidden, data_style=data_style,
                          background_color=background_color, border_bottom=border_bottom, text=text)


def child_cell_style(base: TableCellStyle, data: DataStyle) -> TableCellStyle:
    """The anonymous cell style inheriting from `base` and formatted by `data`."""
    return TableCellStyle(name=composite_name(base.name, data.name), hidden=True,
                          parent=base, data_style=data)


@dataclass(frozen=True)
class TableColumnStyle:
    name: str
    width: str = "2.5cm"
    hidden: bool = True

    family = "table-column"

    def __post_init__(self) -> None:
        require_name(self.name, "column style")

    def append_xml(self, ctx: XMLContext, sink: ET._Element) -> ET._Element:
        el = ctx.sub(sink, STYLE_NS, "style", style_name=self.name, style_family=self.family)
        ctx.sub(el, STYLE_NS, "table-column-properties",
                fo_break_before="auto", style_column_width=self.width)
        return el


@dataclass(frozen=True)
class TableRowStyle:
    name: str
    height: str = "0.45cm"
    hidden: bool = True

    family = "table-row"

    def __post_init__(self) -> None:
        require_name(self.name, "row style")

    def append_xml(self, ctx: XMLContext, sink: ET._Element) -> ET._Element:
        el = ctx.sub(sink, STYLE_NS, "style", style_name=self.name, style_family=self.family)
        ctx.sub(el, STYLE_NS, "table-row-properties",
                style_row_height=self.height, style_use_optimal_row_height="false")
        return el


@dataclass(frozen=True)
class TableStyle:
    name: str
    master_page_name: Optional[str] = None
    hidden: bool = True

    family = "table"

    def __post_init__(self) -> None:
        require_name(self.name, "table style")

    def append_xml(self, ctx: XMLContext, sink: ET._Element) -> ET._Element:
        el = ctx.sub(sink, STYLE_NS, "style", style_name=self.name, style_family=self.family,
                     style_master_page_name=self.master_page_name)
        ctx.sub(el, STYLE_NS, "table-properties", table_display="true")
        return el
