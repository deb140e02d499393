from .cell import (
    TableCellStyle,
    TableColumnStyle,
    TableRowStyle,
    TableStyle,
    TextStyle,
    cell_style,
    child_cell_style,
)
from .data import DataStyle, NumberFormat, data_style
from .page import MasterPageStyle, PageLayoutStyle, PageSection, PageStyle, page_style

__all__ = [
    "DataStyle",
    "MasterPageStyle",
    "NumberFormat",
    "PageLayoutStyle",
    "PageSection",
    "PageStyle",
    "TableCellStyle",
    "TableColumnStyle",
    "TableRowStyle",
    "TableStyle",
    "TextStyle",
    "cell_style",
    "child_cell_style",
    "data_style",
    "page_style",
]
