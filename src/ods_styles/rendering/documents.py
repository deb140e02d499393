from __future__ import annotations
from typing import Callable, Optional

from lxml import etree as ET

from .xml_utils import DC_NS, META_NS, OFFICE_NS, XMLContext, q

# Fills office:spreadsheet with tables; style names it uses must already be registered
BodyWriter = Callable[[XMLContext, ET._Element], None]


def _serialize(root: ET._Element) -> bytes:
    return ET.tostring(root, xml_declaration=True, encoding="UTF-8")


def _document_root(ctx: XMLContext, local: str) -> ET._Element:
    root = ctx.root(OFFICE_NS, local)
    root.set(q(OFFICE_NS, "version"), ctx.office_version)
    return root


def build_content_xml(container, ctx: XMLContext, body: Optional[BodyWriter] = None) -> bytes:
    root = _document_root(ctx, "document-content")
    auto = ET.SubElement(root, q(OFFICE_NS, "automatic-styles"))
    container.write_data_styles(ctx, auto)
    container.write_content_automatic_styles(ctx, auto)

    office_body = ET.SubElement(root, q(OFFICE_NS, "body"))
    spreadsheet = ET.SubElement(office_body, q(OFFICE_NS, "spreadsheet"))
    if body is not None:
        body(ctx, spreadsheet)
    return _serialize(root)


def build_styles_xml(container, ctx: XMLContext) -> bytes:
    root = _document_root(ctx, "document-styles")
    office_styles = ET.SubElement(root, q(OFFICE_NS, "styles"))
    container.write_styles_common_styles(ctx, office_styles)

    auto = ET.SubElement(root, q(OFFICE_NS, "automatic-styles"))
    container.write_styles_automatic_styles(ctx, auto)
    container.write_master_page_styles_to_automatic_styles(ctx, auto)

    master = ET.SubElement(root, q(OFFICE_NS, "master-styles"))
    container.write_master_page_styles_to_master_styles(ctx, master)
    return _serialize(root)


def build_meta_xml(ctx: XMLContext, generator: str = "ods-styles") -> bytes:
    root = _document_root(ctx, "document-meta")
    meta = ET.SubElement(root, q(OFFICE_NS, "meta"))
    ET.SubElement(meta, q(META_NS, "generator")).text = generator
    ET.SubElement(meta, q(DC_NS, "language")).text = f"{ctx.language}-{ctx.country}"
    return _serialize(root)
