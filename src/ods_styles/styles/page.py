from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from lxml import etree as ET

from ..rendering.xml_utils import STYLE_NS, TEXT_NS, XMLContext
from ._validate import require_name
from .cell import TextStyle


@dataclass(frozen=True)
class PageSection:
    """Header or footer content: one paragraph, optionally styled."""
    text: str = ""
    text_style: Optional[TextStyle] = None
    min_height: str = "0cm"

    def append_xml(self, ctx: XMLContext, parent: ET._Element) -> None:
        p = ctx.sub(parent, TEXT_NS, "p")
        if self.text_style is None:
            p.text = self.text
        else:
            ctx.sub(p, TEXT_NS, "span", self.text, text_style_name=self.text_style.name)


@dataclass(frozen=True)
class PageLayoutStyle:
    name: str
    page_width: str = "21cm"
    page_height: str = "29.7cm"
    margin: str = "1.5cm"
    print_orientation: str = "portrait"
    header_min_height: Optional[str] = None
    footer_min_height: Optional[str] = None
    hidden: bool = True

    def __post_init__(self) -> None:
        require_name(self.name, "page layout")

    def append_xml(self, ctx: XMLContext, sink: ET._Element) -> ET._Element:
        el = ctx.sub(sink, STYLE_NS, "page-layout", style_name=self.name)
        ctx.sub(el, STYLE_NS, "page-layout-properties",
                fo_page_width=self.page_width,
                fo_page_height=self.page_height,
                style_print_orientation=self.print_orientation,
                fo_margin=self.margin)
        for local, height in (("header-style", self.header_min_height),
                              ("footer-style", self.footer_min_height)):
            hf = ctx.sub(el, STYLE_NS, local)
            if height is not None:
                ctx.sub(hf, STYLE_NS, "header-footer-properties", fo_min_height=height)
        return el


@dataclass(frozen=True)
class MasterPageStyle:
    name: str
    page_layout_name: str
    header: Optional[PageSection] = None
    footer: Optional[PageSection] = None
    hidden: bool = False

    def __post_init__(self) -> None:
        require_name(self.name, "master page")
        require_name(self.page_layout_name, "page layout")

    def embedded_styles(self) -> Tuple[TextStyle, ...]:
        """Text styles used by the header and footer, in that order."""
        found = []
        for section in (self.header, self.footer):
            if section is not None and section.text_style is not None:
                if section.text_style not in found:
                    found.append(section.text_style)
        return tuple(found)

    def append_xml(self, ctx: XMLContext, sink: ET._Element) -> ET._Element:
        el = ctx.sub(sink, STYLE_NS, "master-page",
                     style_name=self.name, style_page_layout_name=self.page_layout_name)
        if self.header is not None:
            self.header.append_xml(ctx, ctx.sub(el, STYLE_NS, "header"))
        if self.footer is not None:
            self.footer.append_xml(ctx, ctx.sub(el, STYLE_NS, "footer"))
        return el


@dataclass(frozen=True)
class PageStyle:
    """A master page together with the page layout it points to."""
    master_page_style: MasterPageStyle
    page_layout_style: PageLayoutStyle

    @property
    def name(self) -> str:
        return self.master_page_style.name


def page_style(name: str, header: Optional[PageSection] = None, footer: Optional[PageSection] = None,
               **layout: str) -> PageStyle:
    require_name(name, "page style")
    pl = PageLayoutStyle(
        name=f"{name}-PL",
        header_min_height=header.min_height if header else None,
        footer_min_height=footer.min_height if footer else None,
        **layout,
    )
    mp = MasterPageStyle(name=name, page_layout_name=pl.name, header=header, footer=footer)
    return PageStyle(master_page_style=mp, page_layout_style=pl)
